"""Search document model.

A SearchDocument is the flattened, independently indexable unit derived from
either a top-level entity or one of its members. Documents are produced once
by the corpus adapter and never change afterwards.
"""

from dataclasses import dataclass
from enum import Enum


class DocumentType(Enum):
    """Whether a document was derived from an entity or from a member."""

    ENTITY = "entity"
    MEMBER = "member"


@dataclass(frozen=True)
class SearchDocument:
    """Flattened search document.

    Attributes:
        id: Dense 0-based position in the document list; the index reference key
        name: Indexed name (the member's own name, or its kind for init/subscript)
        comment: Indexed comment text
        title: Display title, precomputed by the title resolver
        owner_index: Position of the owning entity in the flat entity list
        doc_type: ENTITY for the entity itself, MEMBER for its members
        kind: Raw kind string of the entity or member

    Usage:
        >>> doc = SearchDocument(
        ...     id=0,
        ...     name="Array",
        ...     comment="A collection of elements.",
        ...     title="Array (struct)",
        ...     owner_index=0,
        ... )
    """

    id: int
    name: str
    comment: str
    title: str
    owner_index: int
    doc_type: DocumentType = DocumentType.ENTITY
    kind: str = ""
