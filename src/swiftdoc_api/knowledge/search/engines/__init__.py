"""Search engines for documentation search."""

from swiftdoc_api.knowledge.search.engines.base_engine import BaseSearchEngine
from swiftdoc_api.knowledge.search.engines.bm25_engine import BM25SearchEngine

__all__ = ["BaseSearchEngine", "BM25SearchEngine"]
