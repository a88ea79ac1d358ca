"""Base search engine interface."""

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence

from swiftdoc_api.knowledge.models.document import SearchDocument
from swiftdoc_api.knowledge.models.search_result import SearchResult


class BaseSearchEngine(ABC):
    """Abstract base class for search engines.

    The engine is responsible for:
    - Building its index once from the loaded documents
    - Executing queries against that index
    - Returning SearchResult objects, highest score first

    An engine is built once and only read afterwards, so a built engine can
    serve concurrent queries without locking.

    Usage:
        >>> engine = BM25SearchEngine(document_loader=lambda: flat.documents)
        >>> engine.build()
        >>> results = engine.search("append")
    """

    def __init__(self, document_loader: Callable[[], Sequence[SearchDocument]]):
        """Initialize search engine with document loader.

        Args:
            document_loader: Callable returning the documents to index
        """
        self.document_loader = document_loader
        self.documents: tuple[SearchDocument, ...] = ()
        self._is_built = False

    @abstractmethod
    def build(self) -> None:
        """Load documents and build the index.

        An empty document list builds an empty index.

        Raises:
            ValueError: If the documents cannot be indexed
        """

    @abstractmethod
    def search(self, query: str, top_k: int | None = None) -> list[SearchResult]:
        """Execute a query.

        Args:
            query: Free-text query
            top_k: Maximum number of results, ``None`` for all hits

        Returns:
            SearchResult objects sorted by score (highest first); hits with
            equal scores keep document order. Empty list for an empty query.

        Raises:
            ValueError: If the engine has not been built
        """

    def is_built(self) -> bool:
        return self._is_built

    def get_document_count(self) -> int:
        return len(self.documents)
