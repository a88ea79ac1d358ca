"""Data loading layer for the Swift documentation corpus.

This module turns the corpus JSON (``swiftdoc.json``) into immutable Entity
Model objects. It validates every field the title and path resolvers rely on,
so a corpus that loads successfully can always be flattened and indexed.

Corpus shape:
    {
        "types": {"Array": {"name": "Array", "kind": "struct", "slug": "array", ...}},
        "operators": [...],
        "functions": [...],
        "properties": [...],
        "aliases": [...],
        "version": {"swift": "2.0"}
    }
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any

from swiftdoc_api.errors import CorpusError
from swiftdoc_api.knowledge.models.entity import (
    ANONYMOUS_MEMBER_KINDS,
    MEMBER_SECTIONS,
    SLUGGED_KINDS,
    Entity,
    EntityKind,
    Member,
    MemberKind,
)

logger = logging.getLogger("swiftdoc-api.corpus")

# Top-level ordered collections, in listing order
COLLECTIONS = ("operators", "functions", "properties", "aliases")

_ENTITY_FIELDS = {"name", "kind", "slug", "comment", *MEMBER_SECTIONS}
_MEMBER_FIELDS = {"name", "kind", "comment", "note"}


@dataclass(frozen=True)
class Corpus:
    """Parsed documentation corpus.

    Attributes:
        types: Type name -> Entity for protocols, enums, structs and classes
        operators/functions/properties/aliases: Ordered top-level collections
        version: Component name -> version string
    """

    types: Mapping[str, Entity] = field(default_factory=lambda: MappingProxyType({}))
    operators: tuple[Entity, ...] = ()
    functions: tuple[Entity, ...] = ()
    properties: tuple[Entity, ...] = ()
    aliases: tuple[Entity, ...] = ()
    version: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def entity_count(self) -> int:
        return len(self.types) + sum(len(getattr(self, name)) for name in COLLECTIONS)


def load_corpus(path: str | Path) -> Corpus:
    """Load and validate a corpus JSON file.

    Raises:
        FileNotFoundError: If the file does not exist
        CorpusError: If the file is not valid JSON or misses required fields
    """
    corpus_path = Path(path)
    if not corpus_path.exists():
        raise FileNotFoundError(f"Corpus file not found: {corpus_path}")

    with open(corpus_path, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            raise CorpusError(f"invalid JSON: {exc}", location=str(corpus_path)) from exc

    corpus = parse_corpus(data)
    logger.info("Loaded corpus %s (%d entities)", corpus_path, corpus.entity_count())
    return corpus


def parse_corpus(data: Any) -> Corpus:
    """Build a Corpus from an already-parsed JSON mapping."""
    if not isinstance(data, Mapping):
        raise CorpusError("corpus root must be an object")

    raw_types = data.get("types") or {}
    if not isinstance(raw_types, Mapping):
        raise CorpusError("must be an object", location="types")

    types = {
        key: _parse_entity(raw, location=f"types.{key}", default_name=key)
        for key, raw in raw_types.items()
    }

    collections: dict[str, tuple[Entity, ...]] = {}
    for name in COLLECTIONS:
        raw_items = data.get(name) or []
        if not isinstance(raw_items, list):
            raise CorpusError("must be an array", location=name)
        collections[name] = tuple(
            _parse_entity(raw, location=f"{name}[{i}]") for i, raw in enumerate(raw_items)
        )

    raw_version = data.get("version") or {}
    if not isinstance(raw_version, Mapping):
        raise CorpusError("must be an object", location="version")

    return Corpus(
        types=MappingProxyType(types),
        version=MappingProxyType({str(k): str(v) for k, v in raw_version.items()}),
        **collections,
    )


def _parse_entity(raw: Any, *, location: str, default_name: str | None = None) -> Entity:
    if not isinstance(raw, Mapping):
        raise CorpusError("entity must be an object", location=location)

    name = raw.get("name") or default_name
    if not name:
        raise CorpusError("missing required field 'name'", location=location)

    kind = raw.get("kind")
    if not kind:
        raise CorpusError("missing required field 'kind'", location=location)

    slug = raw.get("slug")
    if EntityKind.parse(kind) in SLUGGED_KINDS and not slug:
        raise CorpusError(f"missing required field 'slug' for kind '{kind}'", location=location)

    sections: dict[str, tuple[Member, ...]] = {}
    for section in MEMBER_SECTIONS:
        raw_members = raw.get(section) or []
        if not isinstance(raw_members, list):
            raise CorpusError("must be an array", location=f"{location}.{section}")
        sections[section] = tuple(
            _parse_member(member, location=f"{location}.{section}[{i}]")
            for i, member in enumerate(raw_members)
        )

    return Entity(
        name=str(name),
        kind=str(kind),
        slug=str(slug) if slug else None,
        comment=raw.get("comment") or "",
        extra={k: v for k, v in raw.items() if k not in _ENTITY_FIELDS},
        **sections,
    )


def _parse_member(raw: Any, *, location: str) -> Member:
    if not isinstance(raw, Mapping):
        raise CorpusError("member must be an object", location=location)

    kind = raw.get("kind")
    if not kind:
        raise CorpusError("missing required field 'kind'", location=location)

    name = raw.get("name")
    if not name and MemberKind.parse(kind) not in ANONYMOUS_MEMBER_KINDS:
        raise CorpusError(f"missing required field 'name' for kind '{kind}'", location=location)

    return Member(
        kind=str(kind),
        name=str(name) if name else None,
        comment=raw.get("comment") or "",
        note=raw.get("note"),
        extra={k: v for k, v in raw.items() if k not in _MEMBER_FIELDS},
    )
