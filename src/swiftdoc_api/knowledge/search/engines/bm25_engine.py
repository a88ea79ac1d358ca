"""BM25-based search engine for the documentation corpus."""

import logging
from collections.abc import Callable, Sequence
from typing import Any

from swiftdoc_api.knowledge.models.document import SearchDocument
from swiftdoc_api.knowledge.models.search_result import SearchResult
from swiftdoc_api.knowledge.search.engines.base_engine import BaseSearchEngine
from swiftdoc_api.knowledge.search.indexing.bm25_indexer import BM25Indexer
from swiftdoc_api.knowledge.search.scoring.bm25_scorer import BM25Scorer

logger = logging.getLogger("swiftdoc-api.search")


class BM25SearchEngine(BaseSearchEngine):
    """BM25 search engine over document names and comments.

    Features:
    - Pure Python implementation (no NumPy dependency)
    - Name field weighted 100x over comment field
    - Partial (prefix/substring) matching in comments

    Usage:
        >>> engine = BM25SearchEngine(document_loader=lambda: flat.documents)
        >>> engine.build()
        >>> for result in engine.search("append", top_k=5):
        ...     print(f"{result.document.title}: {result.score:.3f}")
    """

    def __init__(
        self,
        document_loader: Callable[[], Sequence[SearchDocument]],
        *,
        weight_name: float | None = None,
        weight_comment: float | None = None,
    ):
        super().__init__(document_loader)
        self.indexer = BM25Indexer()
        self.scorer: BM25Scorer | None = None
        self._weights = {"weight_name": weight_name, "weight_comment": weight_comment}

    def build(self) -> None:
        self.documents = tuple(self.document_loader())

        if not self.documents:
            logger.warning("Document loader returned no documents; every search will be empty")

        for position, doc in enumerate(self.documents):
            if doc.id != position:
                raise ValueError(f"Document ids must be dense: expected {position}, got {doc.id}")

        self.indexer.build(self.documents)
        self.scorer = BM25Scorer(self.indexer, **self._weights)
        self._is_built = True

        logger.debug("Built BM25 index: %s", self.indexer.get_stats())

    def search(self, query: str, top_k: int | None = None) -> list[SearchResult]:
        if not self._is_built or self.scorer is None:
            raise ValueError("Engine not built. Call build() first.")

        query = (query or "").strip()
        if not query:
            return []

        scored = self.scorer.batch_score(query, self.documents)

        # Stable sort: equal scores stay in document order
        scored.sort(key=lambda item: item[1], reverse=True)

        results = [
            SearchResult(document=document, score=score, match_info=match_info, rank=rank)
            for rank, (document, score, match_info) in enumerate(scored, start=1)
        ]

        logger.debug("Query %r matched %d documents", query, len(results))

        if top_k is not None:
            return results[:top_k]
        return results

    def get_index_stats(self) -> dict[str, Any]:
        if not self._is_built:
            raise ValueError("Engine not built. Call build() first.")
        return self.indexer.get_stats()
