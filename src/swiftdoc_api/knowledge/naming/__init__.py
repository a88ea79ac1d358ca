"""Title and path resolution for documentation entities."""

from swiftdoc_api.knowledge.naming.paths import (
    NOT_FOUND_PATH,
    PathScheme,
    add_path_component,
    api_path,
    entity_path,
    site_path,
)
from swiftdoc_api.knowledge.naming.titles import entity_title, member_title, resolve_title

__all__ = [
    "NOT_FOUND_PATH",
    "PathScheme",
    "add_path_component",
    "api_path",
    "entity_path",
    "entity_title",
    "member_title",
    "resolve_title",
    "site_path",
]
