"""Search infrastructure for the documentation corpus.

Tokenization, a multi-field BM25 index and scorer, the search engine built on
them, and post-processing of resolved hits.
"""

from swiftdoc_api.knowledge.search.engines import BaseSearchEngine, BM25SearchEngine
from swiftdoc_api.knowledge.search.postprocessing import deduplicate_hits

__all__ = ["BaseSearchEngine", "BM25SearchEngine", "deduplicate_hits"]
