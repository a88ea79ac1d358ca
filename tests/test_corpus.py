"""Tests for corpus loading and flattening."""

import json

import pytest

from swiftdoc_api.errors import CorpusError
from swiftdoc_api.knowledge.adapters import flatten_corpus
from swiftdoc_api.knowledge.config import DEFAULT_CORPUS_PATH
from swiftdoc_api.knowledge.context import DocsContext
from swiftdoc_api.knowledge.corpus import load_corpus, parse_corpus
from swiftdoc_api.knowledge.models import DocumentType


# ── Loader ──────────────────────────────────────────────────────────


class TestLoader:
    def test_type_name_defaults_to_key(self, corpus):
        assert corpus.types["Foo"].name == "Foo"

    def test_collections_keep_order(self, corpus):
        assert [f.comment for f in corpus.functions] == ["Maps a sequence.", "Maps an optional."]

    def test_missing_collections_default_to_empty(self):
        corpus = parse_corpus({"aliases": [{"name": "A", "kind": "typealias"}]})
        assert dict(corpus.types) == {}
        assert corpus.operators == ()
        assert dict(corpus.version) == {}

    def test_unrecognised_kind_is_accepted(self):
        corpus = parse_corpus({"functions": [{"name": "thing", "kind": "macro"}]})
        assert corpus.functions[0].tag is None

    def test_anonymous_members_allowed_for_init_and_subscript(self, corpus):
        array = corpus.types["Array"]
        assert array.inits[0].name is None
        assert array.subscripts[0].name is None

    def test_extra_fields_are_preserved(self):
        corpus = parse_corpus({"operators": [{"name": "+", "kind": "operator", "slug": "pls", "fixity": "infix"}]})
        assert corpus.operators[0].to_dict()["fixity"] == "infix"

    @pytest.mark.parametrize(
        "data, location",
        [
            ({"functions": [{"kind": "func", "slug": "f"}]}, "functions[0]"),
            ({"functions": [{"name": "f", "slug": "f"}]}, "functions[0]"),
            ({"types": {"Foo": {"kind": "struct"}}}, "types.Foo"),
            ({"operators": [{"name": "+", "kind": "operator"}]}, "operators[0]"),
            ({"types": {"Foo": {"kind": "struct", "slug": "foo", "functions": [{"kind": "func"}]}}}, "types.Foo.functions[0]"),
            ({"types": {"Foo": {"kind": "struct", "slug": "foo", "properties": [{"name": "x"}]}}}, "types.Foo.properties[0]"),
            ({"types": ["Foo"]}, "types"),
            ({"aliases": {"name": "A"}}, "aliases"),
        ],
    )
    def test_malformed_corpus_raises(self, data, location):
        with pytest.raises(CorpusError) as excinfo:
            parse_corpus(data)
        assert excinfo.value.location == location

    def test_root_must_be_object(self):
        with pytest.raises(CorpusError):
            parse_corpus(["not", "a", "corpus"])

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_corpus(tmp_path / "missing.json")

    def test_load_invalid_json(self, tmp_path):
        path = tmp_path / "swiftdoc.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(CorpusError):
            load_corpus(path)

    def test_load_file(self, tmp_path, corpus_data):
        path = tmp_path / "swiftdoc.json"
        path.write_text(json.dumps(corpus_data), encoding="utf-8")
        corpus = load_corpus(path)
        assert sorted(corpus.types) == ["Array", "Collection", "Foo", "Widget"]
        assert corpus.version["swift"] == "2.0"

    def test_bundled_corpus_builds(self):
        context = DocsContext.from_file(DEFAULT_CORPUS_PATH, site_url="http://s/", api_url="http://a")
        assert context.engine.is_built()
        assert len(context.documents) > len(context.entities) > 0


# ── Flattener ───────────────────────────────────────────────────────


class TestFlattener:
    def test_entity_order(self, corpus):
        flat = flatten_corpus(corpus)
        assert [e.name for e in flat.entities] == [
            "Array",
            "Collection",
            "Foo",
            "Widget",
            "==",
            "map",
            "map",
            "Process",
            "MyAlias",
        ]

    def test_types_sort_case_sensitively(self):
        corpus = parse_corpus(
            {
                "types": {
                    "bar": {"kind": "struct", "slug": "bar"},
                    "Zed": {"kind": "struct", "slug": "zed"},
                    "Abc": {"kind": "struct", "slug": "abc"},
                }
            }
        )
        assert [e.name for e in flatten_corpus(corpus).entities] == ["Abc", "Zed", "bar"]

    def test_document_titles_in_order(self, corpus):
        flat = flatten_corpus(corpus)
        assert [d.title for d in flat.documents] == [
            "Array (struct)",
            "Array.map() (instance method)",
            "Array initializer",
            "Array subscript",
            "Collection (protocol)",
            "Collection.walk() (instance method)",
            "Foo (struct)",
            "Foo.bar (static property)",
            "Widget (class)",
            "Widget.make() (class method)",
            "Widget.shared (class property)",
            "Widget.size (instance property)",
            "== (operator)",
            "map() (global)",
            "map() (global)",
            "Process (global)",
            "MyAlias (typealias)",
        ]

    def test_ids_are_dense(self, corpus):
        flat = flatten_corpus(corpus)
        assert [d.id for d in flat.documents] == list(range(len(flat.documents)))

    def test_flattening_is_deterministic(self, corpus):
        assert flatten_corpus(corpus) == flatten_corpus(corpus)

    def test_owner_index_reaches_owning_entity(self, corpus):
        flat = flatten_corpus(corpus)
        for doc in flat.documents:
            assert 0 <= doc.owner_index < len(flat.entities)
            owner = flat.owner_of(doc)
            if doc.doc_type is DocumentType.ENTITY:
                assert owner.name == doc.name
            else:
                assert any(
                    (member.name or member.kind) == doc.name and member.comment == doc.comment
                    for _section, member in owner.members()
                )

    def test_members_use_their_own_name_and_comment(self, corpus):
        flat = flatten_corpus(corpus)
        member_doc = flat.documents[1]
        assert member_doc.doc_type is DocumentType.MEMBER
        assert member_doc.name == "map"
        assert member_doc.comment == "Maps elements."

    def test_anonymous_members_are_named_by_kind(self, corpus):
        flat = flatten_corpus(corpus)
        assert flat.documents[2].name == "init"
        assert flat.documents[3].name == "subscript"

    def test_entity_without_members_contributes_one_document(self):
        flat = flatten_corpus(parse_corpus({"aliases": [{"name": "A", "kind": "typealias"}]}))
        assert len(flat.documents) == 1
        assert flat.documents[0].owner_index == 0

    def test_empty_corpus_builds_empty_index(self):
        context = DocsContext.build(parse_corpus({"version": {"swift": "2.0"}}), site_url="http://s/", api_url="http://a")
        assert context.engine.is_built()
        assert context.entities == ()
        assert context.documents == ()
