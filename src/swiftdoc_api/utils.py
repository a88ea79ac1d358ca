"""Validation models and utilities for SwiftDoc API tools."""

from typing import Annotated, Literal, Optional

from pydantic import Field
from pydantic.functional_validators import AfterValidator


# Search limits
MAX_SEARCH_LIMIT = 100


def normalize_input(value: Optional[str]) -> str:
    """Normalize user input: collapse whitespace."""
    if value is None:
        return ""
    return " ".join(value.split())


def validate_non_empty_string(value: str) -> str:
    """Validate that a string is not empty after stripping whitespace."""
    stripped = value.strip()
    if not stripped:
        raise ValueError("Value cannot be empty or whitespace only")
    return stripped


# Free-text search query; empty queries return no results
SearchQuery = Annotated[
    str,
    AfterValidator(normalize_input),
    Field(
        default="",
        description=(
            "Search keywords for Swift standard library docs. Examples: 'Array', "
            "'append', 'sequence first element'. Case-insensitive."
        ),
    ),
]

SearchLimit = Annotated[
    Optional[int],
    Field(
        default=None,
        ge=1,
        le=MAX_SEARCH_LIMIT,
        description=f"Maximum number of results (1-{MAX_SEARCH_LIMIT}). Null returns every hit.",
    ),
]

UrlScheme = Annotated[
    Literal["site", "api"],
    Field(default="site", description="'site' for swiftdoc.org links, 'api' for links into this API"),
]

LookupKind = Annotated[
    Literal["protocol", "type", "operator", "func", "global"],
    Field(..., description="Route group to search: protocol, type, operator, func or global"),
]

ListKind = Annotated[
    Optional[Literal["protocol", "type", "operator", "func", "global"]],
    Field(default=None, description="Restrict the listing to one route group (API URLs). Null lists everything."),
]

LookupKey = Annotated[
    str,
    AfterValidator(validate_non_empty_string),
    Field(..., min_length=1, description="Type key, slug or name, e.g. 'Array', 'array', 'map', 'AnyClass'"),
]
