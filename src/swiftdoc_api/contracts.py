"""Response contracts.

HTTP routes return the bare payloads below (search hits, URL listings,
no-match payloads). MCP tools wrap the same payloads in a unified
``{ok, data, error}`` envelope so response shapes stay consistent across tools.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Literal

from pydantic import BaseModel, Field, model_validator

from swiftdoc_api.knowledge.models.search_result import SearchHit

NO_MATCH = "no match"


class SearchHitPayload(BaseModel):
    """One search result row."""

    title: str = Field(description="Display title of the matched entity or member")
    site_url: str = Field(description="Documentation site URL of the owning entity")
    api_url: str = Field(description="API URL of the owning entity")
    comment: str = Field(default="", description="Documentation comment of the match")


class NoMatchPayload(BaseModel):
    """Structured lookup miss, echoing the request parameters."""

    error: Literal["no match"] = NO_MATCH
    request: dict[str, Any] = Field(default_factory=dict)


class ToolError(BaseModel):
    """Structured business error for tool payloads."""

    code: str = Field(description="Stable machine-readable error code")
    message: str = Field(description="Human-readable error summary")
    details: dict[str, Any] | None = Field(
        default=None, description="Optional structured error details"
    )


class ToolEnvelope(BaseModel):
    """Unified response shape for all tool results."""

    ok: bool = Field(description="Business-level success flag")
    data: Any | None = Field(default=None, description="Tool-specific payload")
    error: ToolError | None = Field(default=None, description="Structured error payload")

    @model_validator(mode="after")
    def _validate_coherence(self) -> "ToolEnvelope":
        if self.ok and self.error is not None:
            raise ValueError("ok=true responses must not include error")
        if not self.ok and self.error is None:
            raise ValueError("ok=false responses must include error")
        return self


class DocsData(BaseModel):
    """Inner `data` schema for documentation tools."""

    action: Literal["search", "list", "lookup", "version"]
    entries: Any
    summary: dict[str, Any] = Field(default_factory=dict)


def build_search_hits(hits: Iterable[SearchHit]) -> list[dict[str, Any]]:
    """Validate and serialize ordered search hits."""
    return [SearchHitPayload(**hit.to_dict()).model_dump() for hit in hits]


def build_no_match(request: dict[str, Any]) -> dict[str, Any]:
    return NoMatchPayload(request=request).model_dump()


def build_ok(data: Any) -> dict[str, Any]:
    """Build and validate a success envelope."""
    return ToolEnvelope(ok=True, data=data).model_dump(exclude_none=True)


def build_error(
    code: str,
    message: str,
    details: dict[str, Any] | None = None,
    *,
    data: Any | None = None,
) -> dict[str, Any]:
    """Build and validate an error envelope."""
    return ToolEnvelope(
        ok=False,
        data=data,
        error=ToolError(code=code, message=message, details=details),
    ).model_dump(exclude_none=True)


def build_docs_data(
    *,
    action: Literal["search", "list", "lookup", "version"],
    entries: Any,
    summary: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Build and validate documentation tool `data` payloads."""
    return DocsData(action=action, entries=entries, summary=summary or {}).model_dump()
