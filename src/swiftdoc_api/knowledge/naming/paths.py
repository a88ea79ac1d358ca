"""Canonical relative paths for entities.

Two schemes share one kind-dispatch table:

- SITE: links into the public documentation site
- API: links into this API's own address space

They differ only for global aliases. The site addresses aliases by fragment
(``global/aliases/#<name>``), which is meaningless as a standalone API
route, so the API scheme uses ``global/<name>``. Global properties share the
single ``global/var/`` page under both schemes.

Paths depend only on an entity's kind, slug and name. Kinds without a rule
resolve to ``/404/``.
"""

from __future__ import annotations

from enum import Enum

from swiftdoc_api.knowledge.models.entity import Entity, EntityKind

NOT_FOUND_PATH = "/404/"


class PathScheme(Enum):
    SITE = "site"
    API = "api"


def entity_path(entity: Entity, scheme: PathScheme = PathScheme.SITE) -> str:
    """Resolve the relative path of an entity under the given scheme.

    Example:
        >>> alias = Entity(name="MyAlias", kind="typealias", slug="alias")
        >>> entity_path(alias, PathScheme.SITE)
        'global/aliases/#MyAlias'
        >>> entity_path(alias, PathScheme.API)
        'global/MyAlias'
    """
    kind = entity.tag

    if kind is EntityKind.PROTOCOL:
        return f"protocol/{entity.slug}/"
    if kind in (EntityKind.ENUM, EntityKind.STRUCT, EntityKind.CLASS):
        return f"type/{entity.slug}/"
    if kind is EntityKind.OPERATOR:
        return f"operator/{entity.slug}/"
    if kind is EntityKind.FUNC:
        return f"func/{entity.slug}/"
    if kind is EntityKind.TYPEALIAS:
        if scheme is PathScheme.API:
            return f"global/{entity.name}"
        return f"global/aliases/#{entity.name}"
    if kind is EntityKind.VAR:
        return "global/var/"

    return NOT_FOUND_PATH


def site_path(entity: Entity) -> str:
    return entity_path(entity, PathScheme.SITE)


def api_path(entity: Entity) -> str:
    return entity_path(entity, PathScheme.API)


def add_path_component(base: str, component: str) -> str:
    """Append a path component to a base URL with exactly one slash between.

    Example:
        >>> add_path_component("http://swiftdoc.org/", "/type/array/")
        'http://swiftdoc.org/type/array/'
        >>> add_path_component("http://api.swiftdoc.org", "search")
        'http://api.swiftdoc.org/search'
    """
    if component.startswith("/"):
        component = component[1:]
    if base.endswith("/"):
        return base + component
    return f"{base}/{component}"
