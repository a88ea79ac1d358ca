"""Shared models for the documentation corpus and its search index."""

from swiftdoc_api.knowledge.models.document import DocumentType, SearchDocument
from swiftdoc_api.knowledge.models.entity import (
    MEMBER_SECTIONS,
    TYPE_KINDS,
    Entity,
    EntityKind,
    Member,
    MemberKind,
)
from swiftdoc_api.knowledge.models.search_result import SearchHit, SearchResult

__all__ = [
    "DocumentType",
    "Entity",
    "EntityKind",
    "MEMBER_SECTIONS",
    "Member",
    "MemberKind",
    "SearchDocument",
    "SearchHit",
    "SearchResult",
    "TYPE_KINDS",
]
