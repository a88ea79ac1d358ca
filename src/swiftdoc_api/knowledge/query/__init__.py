"""High-level query interfaces for documentation search and lookup."""

from swiftdoc_api.knowledge.query.doc_search import DocSearch
from swiftdoc_api.knowledge.query.lookup import LookupGroup, list_group, lookup

__all__ = ["DocSearch", "LookupGroup", "list_group", "lookup"]
