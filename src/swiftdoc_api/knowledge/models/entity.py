"""Entity model for the Swift documentation corpus.

The corpus is a tree: top-level entities (types, protocols, operators,
global functions, global properties, global aliases) own ordered member
collections (methods, properties, nested aliases, initializers, subscripts).

Kinds arrive as plain strings in the corpus JSON. They are kept verbatim on
the model and exposed as a closed enum through the ``tag`` property, which is
``None`` for anything outside the known set so resolvers can fall back to a
default branch instead of failing.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class EntityKind(str, Enum):
    """Kinds of top-level entities."""

    PROTOCOL = "protocol"
    ENUM = "enum"
    STRUCT = "struct"
    CLASS = "class"
    OPERATOR = "operator"
    FUNC = "func"
    VAR = "var"
    TYPEALIAS = "typealias"

    @classmethod
    def parse(cls, value: str | None) -> EntityKind | None:
        try:
            return cls(value)
        except ValueError:
            return None


class MemberKind(str, Enum):
    """Kinds of members nested inside an entity."""

    FUNC = "func"
    VAR = "var"
    TYPEALIAS = "typealias"
    INIT = "init"
    SUBSCRIPT = "subscript"

    @classmethod
    def parse(cls, value: str | None) -> MemberKind | None:
        try:
            return cls(value)
        except ValueError:
            return None


# Kinds that make up the "types" collection
TYPE_KINDS = frozenset({EntityKind.PROTOCOL, EntityKind.ENUM, EntityKind.STRUCT, EntityKind.CLASS})

# Kinds that must carry a slug to be linkable
SLUGGED_KINDS = TYPE_KINDS | {EntityKind.OPERATOR, EntityKind.FUNC}

# Member kinds that have no name of their own
ANONYMOUS_MEMBER_KINDS = frozenset({MemberKind.INIT, MemberKind.SUBSCRIPT})

# Member collections, in flattening order
MEMBER_SECTIONS = ("functions", "properties", "aliases", "inits", "subscripts")

# Member note marking a type-level (static/class) member
TYPE_LEVEL_NOTE = "class"


@dataclass(frozen=True)
class Member:
    """A documented construct nested inside exactly one entity.

    Attributes:
        kind: Raw kind string (func, var, typealias, init, subscript)
        name: Member name, ``None`` for initializers and subscripts
        comment: Documentation comment, may be empty
        note: ``"class"`` marks a type-level member, otherwise ``None``
        extra: Remaining corpus fields, preserved for lookup responses
    """

    kind: str
    name: str | None = None
    comment: str = ""
    note: str | None = None
    extra: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @property
    def tag(self) -> MemberKind | None:
        return MemberKind.parse(self.kind)

    @property
    def is_type_level(self) -> bool:
        return self.note == TYPE_LEVEL_NOTE

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = dict(self.extra)
        data["kind"] = self.kind
        if self.name is not None:
            data["name"] = self.name
        data["comment"] = self.comment
        if self.note is not None:
            data["note"] = self.note
        return data


@dataclass(frozen=True)
class Entity:
    """A top-level documented construct.

    Attributes:
        name: Entity name (unique per collection, except func/var)
        kind: Raw kind string
        slug: URL-safe identifier used for canonical paths
        comment: Documentation comment, may be empty
        functions/properties/aliases/inits/subscripts: Ordered member collections
        extra: Remaining corpus fields, preserved for lookup responses

    Example:
        >>> foo = Entity(name="Foo", kind="struct", slug="foo")
        >>> foo.is_type, foo.is_protocol
        (True, False)
    """

    name: str
    kind: str
    slug: str | None = None
    comment: str = ""
    functions: tuple[Member, ...] = ()
    properties: tuple[Member, ...] = ()
    aliases: tuple[Member, ...] = ()
    inits: tuple[Member, ...] = ()
    subscripts: tuple[Member, ...] = ()
    extra: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @property
    def tag(self) -> EntityKind | None:
        return EntityKind.parse(self.kind)

    @property
    def is_type(self) -> bool:
        return self.tag in TYPE_KINDS

    @property
    def is_protocol(self) -> bool:
        return self.tag is EntityKind.PROTOCOL

    def members(self) -> Iterator[tuple[str, Member]]:
        """Yield ``(section, member)`` pairs in flattening order."""
        for section in MEMBER_SECTIONS:
            for member in getattr(self, section):
                yield section, member

    def to_dict(self) -> dict[str, Any]:
        """Render the entity back into its corpus JSON shape."""
        data: dict[str, Any] = dict(self.extra)
        data["name"] = self.name
        data["kind"] = self.kind
        if self.slug is not None:
            data["slug"] = self.slug
        data["comment"] = self.comment
        for section in MEMBER_SECTIONS:
            members = getattr(self, section)
            if members:
                data[section] = [member.to_dict() for member in members]
        return data
