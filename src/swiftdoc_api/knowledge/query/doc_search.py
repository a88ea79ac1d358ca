"""High-level documentation search.

Runs a free-text query against the BM25 engine, resolves every hit to the
page of its owning entity, and orders the results deterministically:

1. descending relevance score
2. ascending title length (shorter, more specific titles first)
3. engine order for anything still tied

Member hits link to their owner's page; members have no page of their own.
"""

from __future__ import annotations

import logging

from swiftdoc_api.knowledge.context import DocsContext
from swiftdoc_api.knowledge.models.search_result import SearchHit, SearchResult
from swiftdoc_api.knowledge.naming.paths import PathScheme
from swiftdoc_api.knowledge.search.postprocessing import deduplicate_hits

logger = logging.getLogger("swiftdoc-api.query")


class DocSearch:
    """Documentation search over a DocsContext.

    Usage:
        >>> hits = DocSearch(context).search("append")
        >>> hits[0].title
        'Array.append() (instance method)'
        >>> hits[0].site_url
        'http://swiftdoc.org/type/array/'
    """

    def __init__(self, context: DocsContext):
        self.context = context

    def search(self, query: str | None, limit: int | None = None) -> list[SearchHit]:
        """Search the corpus.

        Args:
            query: Free-text query; empty or missing yields no results
            limit: Maximum number of hits after ordering, ``None`` for all

        Returns:
            Ordered, deduplicated SearchHit list
        """
        if not query or not query.strip():
            return []

        results = self.context.engine.search(query)
        hits = [self._resolve(result) for result in results]

        # list.sort is stable, so full ties keep engine order
        hits.sort(key=lambda hit: (-hit.score, len(hit.title)))
        hits = deduplicate_hits(hits)

        logger.debug("Search %r: %d hits", query, len(hits))

        if limit is not None:
            return hits[:limit]
        return hits

    def _resolve(self, result: SearchResult) -> SearchHit:
        document = result.document
        owner = self.context.flat.owner_of(document)
        return SearchHit(
            title=document.title,
            site_url=self.context.url_for(owner, PathScheme.SITE),
            api_url=self.context.url_for(owner, PathScheme.API),
            comment=document.comment,
            score=result.score,
        )
