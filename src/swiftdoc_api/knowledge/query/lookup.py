"""Single-item lookup and per-group listings.

Each route group addresses one slice of the corpus:

- ``protocol``: protocols, looked up by type key (then slug)
- ``type``: enums, structs and classes, looked up by type key (then slug)
- ``operator``: first operator whose slug or name matches
- ``func``: every global function whose name (or slug) matches; names repeat
- ``global``: first alias whose slug or name matches, else first global
  property with that name
"""

from __future__ import annotations

from enum import Enum

from swiftdoc_api.knowledge.context import DocsContext
from swiftdoc_api.knowledge.models.entity import Entity, EntityKind

LookupResult = Entity | list[Entity] | None


class LookupGroup(str, Enum):
    PROTOCOL = "protocol"
    TYPE = "type"
    OPERATOR = "operator"
    FUNC = "func"
    GLOBAL = "global"

    @classmethod
    def parse(cls, value: str | None) -> LookupGroup | None:
        try:
            return cls(value)
        except ValueError:
            return None


def in_group(entity: Entity, group: LookupGroup) -> bool:
    kind = entity.tag
    if group is LookupGroup.PROTOCOL:
        return entity.is_protocol
    if group is LookupGroup.TYPE:
        return entity.is_type and not entity.is_protocol
    if group is LookupGroup.OPERATOR:
        return kind is EntityKind.OPERATOR
    if group is LookupGroup.FUNC:
        return kind is EntityKind.FUNC
    return kind in (EntityKind.TYPEALIAS, EntityKind.VAR)


def list_group(context: DocsContext, group: LookupGroup) -> list[Entity]:
    """Entities of a group, in listing order."""
    return [entity for entity in context.entities if in_group(entity, group)]


def lookup(context: DocsContext, group: LookupGroup, key: str) -> LookupResult:
    """Find the entity (or, for functions, entities) addressed by ``key``.

    Returns:
        An Entity, a non-empty list of Entities for ``func``, or ``None``
    """
    corpus = context.corpus

    if group in (LookupGroup.PROTOCOL, LookupGroup.TYPE):
        entity = corpus.types.get(key)
        if entity is not None and in_group(entity, group):
            return entity
        return _first(
            (t for t in corpus.types.values() if in_group(t, group)),
            lambda t: t.slug == key,
        )

    if group is LookupGroup.OPERATOR:
        return _first(corpus.operators, lambda op: op.slug == key or op.name == key)

    if group is LookupGroup.FUNC:
        matches = [func for func in corpus.functions if func.name == key or func.slug == key]
        return matches or None

    alias = _first(corpus.aliases, lambda a: a.slug == key or a.name == key)
    if alias is not None:
        return alias
    return _first(corpus.properties, lambda p: p.name == key)


def _first(entities, predicate) -> Entity | None:
    return next((entity for entity in entities if predicate(entity)), None)
