"""Duplicate hit removal.

Overloaded members share a title and all link to their owner's page, so
they would otherwise show up as identical rows in search results.
"""

from swiftdoc_api.knowledge.models.search_result import SearchHit


def deduplicate_hits(hits: list[SearchHit]) -> list[SearchHit]:
    """Drop hits whose (title, site_url) already appeared, keeping order.

    Example:
        >>> a = SearchHit("Array.map() (instance method)", "s/type/array/", "a/type/array/", "")
        >>> len(deduplicate_hits([a, a]))
        1
    """
    seen: set[tuple[str, str]] = set()
    unique: list[SearchHit] = []
    for hit in hits:
        key = (hit.title, hit.site_url)
        if key in seen:
            continue
        seen.add(key)
        unique.append(hit)
    return unique
