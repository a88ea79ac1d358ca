"""Search result model returned by search engines."""

from dataclasses import dataclass, field
from typing import Any

from swiftdoc_api.knowledge.models.document import SearchDocument


@dataclass
class SearchResult:
    """A single scored hit.

    Attributes:
        document: The matched SearchDocument
        score: Relevance score (higher = more relevant)
        match_info: Per-field scores and matched terms, for debugging
        rank: 1-based position in the engine's hit list
    """

    document: SearchDocument
    score: float
    match_info: dict[str, Any] = field(default_factory=dict)
    rank: int = 0


@dataclass(frozen=True)
class SearchHit:
    """A search hit resolved to its owning entity's page.

    Attributes:
        title: Precomputed document title
        site_url: Documentation site URL of the owning entity
        api_url: API URL of the owning entity
        comment: Document comment
        score: Relevance score, used for ordering only
    """

    title: str
    site_url: str
    api_url: str
    comment: str
    score: float = field(default=0.0, compare=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "site_url": self.site_url,
            "api_url": self.api_url,
            "comment": self.comment,
        }
