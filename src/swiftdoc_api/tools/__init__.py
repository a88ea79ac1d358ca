"""SwiftDoc API MCP tool implementations."""

from . import get_version, list_urls, lookup_item, search_docs

__all__ = [
    "get_version",
    "list_urls",
    "lookup_item",
    "search_docs",
]
