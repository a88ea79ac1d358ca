"""Display titles for entities and members.

Titles depend only on a node's kind, name and note, plus the name and kind of
its owning entity when the node is a member:

    >>> resolve_title("Array", "struct")
    'Array (struct)'
    >>> resolve_title("bar", "var", context="Foo", owner_kind="struct", note="class")
    'Foo.bar (static property)'
    >>> resolve_title("map", "func")
    'map() (global)'
    >>> resolve_title(None, "init", context="Foo")
    'Foo initializer'

Unrecognised kinds never raise; they resolve to ``"<name> (unknown)"``.
"""

from __future__ import annotations

from swiftdoc_api.knowledge.models.entity import TYPE_LEVEL_NOTE, Entity, EntityKind, Member, MemberKind

# Kinds titled "<prefix><name> (<kind>)"
_DECLARATION_KINDS = frozenset(
    {
        EntityKind.PROTOCOL.value,
        EntityKind.ENUM.value,
        EntityKind.STRUCT.value,
        EntityKind.CLASS.value,
        EntityKind.OPERATOR.value,
        EntityKind.TYPEALIAS.value,
    }
)

# Owner kinds whose type-level members are "static"
_STATIC_OWNER_KINDS = frozenset({EntityKind.STRUCT.value, EntityKind.ENUM.value})


def resolve_title(
    name: str | None,
    kind: str,
    *,
    context: str | None = None,
    owner_kind: str | None = None,
    note: str | None = None,
) -> str:
    """Resolve the display title of an entity or member.

    Args:
        name: Node name (``None`` for initializers and subscripts)
        kind: Raw kind string of the node
        context: Name of the owning entity, ``None`` for top-level entities
        owner_kind: Kind of the owning entity, used for method/property labels
        note: Member note; ``"class"`` marks a type-level member

    Returns:
        Title string
    """
    prefix = f"{context}." if context else ""

    if kind in _DECLARATION_KINDS:
        return f"{prefix}{name} ({kind})"

    if kind == MemberKind.INIT.value:
        return f"{context or ''} initializer"
    if kind == MemberKind.SUBSCRIPT.value:
        return f"{context or ''} subscript"

    if kind == MemberKind.FUNC.value:
        return f"{prefix}{name}() {_member_label('method', context, owner_kind, note)}"
    if kind == MemberKind.VAR.value:
        return f"{prefix}{name} {_member_label('property', context, owner_kind, note)}"

    return f"{name or ''} (unknown)"


def _member_label(noun: str, context: str | None, owner_kind: str | None, note: str | None) -> str:
    if not context:
        return "(global)"
    if note == TYPE_LEVEL_NOTE:
        if owner_kind == EntityKind.CLASS.value:
            return f"(class {noun})"
        if owner_kind in _STATIC_OWNER_KINDS:
            return f"(static {noun})"
    return f"(instance {noun})"


def entity_title(entity: Entity) -> str:
    return resolve_title(entity.name, entity.kind)


def member_title(member: Member, owner: Entity) -> str:
    return resolve_title(
        member.name,
        member.kind,
        context=owner.name,
        owner_kind=owner.kind,
        note=member.note,
    )
