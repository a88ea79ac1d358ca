"""Shared fixtures: small in-memory corpora and contexts built from them."""

import copy

import pytest

from swiftdoc_api.knowledge.context import DocsContext
from swiftdoc_api.knowledge.corpus import parse_corpus

SITE_URL = "http://swiftdoc.org/"
API_URL = "http://api.swiftdoc.org"

CORPUS = {
    "version": {"swift": "2.0"},
    "types": {
        "Foo": {
            "kind": "struct",
            "slug": "foo",
            "comment": "A foo.",
            "properties": [{"name": "bar", "kind": "var", "note": "class"}],
        },
        "Array": {
            "name": "Array",
            "kind": "struct",
            "slug": "array",
            "comment": "An ordered, random-access collection.",
            "functions": [{"name": "map", "kind": "func", "comment": "Maps elements."}],
            "inits": [{"kind": "init", "comment": "Creates an empty value."}],
            "subscripts": [{"kind": "subscript"}],
        },
        "Widget": {
            "name": "Widget",
            "kind": "class",
            "slug": "widget",
            "functions": [{"name": "make", "kind": "func", "note": "class"}],
            "properties": [
                {"name": "shared", "kind": "var", "note": "class"},
                {"name": "size", "kind": "var"},
            ],
        },
        "Collection": {
            "name": "Collection",
            "kind": "protocol",
            "slug": "collection",
            "comment": "An array of elements you can walk.",
            "functions": [{"name": "walk", "kind": "func", "note": "class"}],
        },
    },
    "operators": [
        {"name": "==", "kind": "operator", "slug": "eqeq", "comment": "Equality."},
    ],
    "functions": [
        {"name": "map", "kind": "func", "slug": "map", "comment": "Maps a sequence."},
        {"name": "map", "kind": "func", "slug": "map", "comment": "Maps an optional."},
    ],
    "properties": [
        {"name": "Process", "kind": "var", "comment": "Command-line arguments."},
    ],
    "aliases": [
        {"name": "MyAlias", "kind": "typealias", "slug": "alias", "comment": "An alias."},
    ],
}


def build_context(data: dict) -> DocsContext:
    return DocsContext.build(parse_corpus(data), site_url=SITE_URL, api_url=API_URL)


@pytest.fixture
def corpus_data() -> dict:
    return copy.deepcopy(CORPUS)


@pytest.fixture
def corpus(corpus_data):
    return parse_corpus(corpus_data)


@pytest.fixture
def context(corpus_data) -> DocsContext:
    return build_context(corpus_data)


@pytest.fixture
def make_context():
    return build_context
