"""Tests for tokenization, the BM25 engine and the documentation search service."""

import pytest

from swiftdoc_api.knowledge.models import SearchDocument, SearchHit
from swiftdoc_api.knowledge.query import DocSearch
from swiftdoc_api.knowledge.search import BM25SearchEngine, deduplicate_hits
from swiftdoc_api.knowledge.search.keyword_matcher import find_partial_matches, word_match_quality
from swiftdoc_api.knowledge.search.preprocessing import TextTokenizer


# ── Tokenizer ───────────────────────────────────────────────────────


class TestTokenizer:
    def test_camel_case_identifiers(self):
        tokenizer = TextTokenizer()
        assert tokenizer.tokenize("ArrayLiteralConvertible") == ["array", "literal", "convertible"]
        assert tokenizer.tokenize("UTF8View") == ["utf8", "view"]

    def test_dotted_and_underscored_names(self):
        tokenizer = TextTokenizer()
        assert tokenizer.tokenize("Dictionary.removeValueForKey") == ["dictionary", "remove", "value", "key"]
        assert tokenizer.tokenize("_ObjectiveCBridgeable") == ["objective", "bridgeable"]

    def test_prose_drops_stopwords_and_punctuation(self):
        tokenizer = TextTokenizer()
        assert tokenizer.tokenize("Returns the first element of the collection.") == [
            "returns",
            "first",
            "element",
            "collection",
        ]

    def test_empty_and_symbol_only_text(self):
        tokenizer = TextTokenizer()
        assert tokenizer.tokenize("") == []
        assert tokenizer.tokenize(None) == []
        assert tokenizer.tokenize("==") == []

    def test_normalize_query(self):
        assert TextTokenizer.normalize_query("  append   contentsOf ") == "append contentsOf"
        assert TextTokenizer.normalize_query(None) == ""


class TestPartialMatching:
    def test_word_match_quality(self):
        assert word_match_quality("elem", "element") == 0.8
        assert word_match_quality("sort", "unsorted") == 0.6
        assert word_match_quality("at", "atomic") == 0.0

    def test_find_partial_matches(self):
        matches, quality = find_partial_matches({"elem"}, {"element", "sequence"})
        assert matches == {("elem", "element")}
        assert quality == 0.8


# ── Engine ──────────────────────────────────────────────────────────


def _doc(doc_id: int, name: str, comment: str = "") -> SearchDocument:
    return SearchDocument(id=doc_id, name=name, comment=comment, title=name, owner_index=doc_id)


class TestBM25SearchEngine:
    def test_search_before_build_raises(self):
        engine = BM25SearchEngine(document_loader=lambda: [_doc(0, "Array")])
        with pytest.raises(ValueError):
            engine.search("array")

    def test_empty_document_list_builds_empty_index(self):
        engine = BM25SearchEngine(document_loader=lambda: [])
        engine.build()

        assert engine.is_built()
        assert engine.get_document_count() == 0
        assert engine.search("array") == []
        assert engine.get_index_stats()["doc_count"] == 0

    def test_ids_must_be_dense(self):
        engine = BM25SearchEngine(document_loader=lambda: [_doc(0, "a"), _doc(5, "b")])
        with pytest.raises(ValueError):
            engine.build()

    def test_name_match_outweighs_comment_match(self):
        engine = BM25SearchEngine(
            document_loader=lambda: [_doc(0, "Bag", "Like an array, but unordered."), _doc(1, "Array")]
        )
        engine.build()
        results = engine.search("array")

        assert [r.document.name for r in results] == ["Array", "Bag"]
        assert results[0].score > results[1].score
        assert [r.rank for r in results] == [1, 2]
        assert results[0].match_info["field_scores"]["name"] > 0
        assert results[1].match_info["field_scores"]["name"] == 0

    def test_comment_partial_match(self):
        engine = BM25SearchEngine(document_loader=lambda: [_doc(0, "first", "Returns the first element.")])
        engine.build()
        results = engine.search("elem")
        assert len(results) == 1

    def test_blank_query(self):
        engine = BM25SearchEngine(document_loader=lambda: [_doc(0, "Array")])
        engine.build()
        assert engine.search("") == []
        assert engine.search("   ") == []
        assert engine.search("the") == []

    def test_index_stats(self):
        engine = BM25SearchEngine(document_loader=lambda: [_doc(0, "Array", "A collection.")])
        engine.build()
        stats = engine.get_index_stats()
        assert stats["doc_count"] == 1
        assert stats["name_field"]["vocab_size"] == 1
        assert stats["comment_field"]["total_terms"] == 1


# ── Query service ───────────────────────────────────────────────────


class TestDocSearch:
    def test_name_match_ranks_first(self, context):
        hits = DocSearch(context).search("Array")
        titles = [hit.title for hit in hits]

        assert titles[0] == "Array (struct)"
        assert "Collection (protocol)" in titles
        assert hits[0].score > hits[titles.index("Collection (protocol)")].score

    def test_exact_name_beats_comment_mention(self, make_context):
        context = make_context(
            {
                "types": {
                    "Bag": {"kind": "struct", "slug": "bag", "comment": "Like an array, but unordered."},
                    "Array": {"kind": "struct", "slug": "array"},
                }
            }
        )
        hits = DocSearch(context).search("Array")
        assert [hit.title for hit in hits] == ["Array (struct)", "Bag (struct)"]
        assert hits[0].score > hits[1].score

    def test_hit_urls_point_at_owner(self, context):
        hits = DocSearch(context).search("walk")

        assert hits[0].title == "Collection.walk() (instance method)"
        assert hits[0].site_url == "http://swiftdoc.org/protocol/collection/"
        assert hits[0].api_url == "http://api.swiftdoc.org/protocol/collection/"

    def test_alias_hit_urls_follow_each_scheme(self, context):
        hit = DocSearch(context).search("MyAlias")[0]
        assert hit.site_url == "http://swiftdoc.org/global/aliases/#MyAlias"
        assert hit.api_url == "http://api.swiftdoc.org/global/MyAlias"

    def test_global_property_hit_links_to_var_page(self, context):
        hit = DocSearch(context).search("Process")[0]
        assert hit.title == "Process (global)"
        assert hit.site_url == "http://swiftdoc.org/global/var/"
        assert hit.api_url == "http://api.swiftdoc.org/global/var/"

    @pytest.mark.parametrize("query", [None, "", "   "])
    def test_empty_query_returns_nothing(self, context, query):
        assert DocSearch(context).search(query) == []

    def test_equal_scores_prefer_shorter_titles(self, make_context):
        context = make_context(
            {
                "types": {
                    "Dictionary": {"kind": "struct", "slug": "dictionary", "properties": [{"name": "count", "kind": "var"}]},
                    "Set": {"kind": "struct", "slug": "set", "properties": [{"name": "count", "kind": "var"}]},
                }
            }
        )
        hits = DocSearch(context).search("count")

        assert hits[0].score == hits[1].score
        assert [hit.title for hit in hits] == [
            "Set.count (instance property)",
            "Dictionary.count (instance property)",
        ]

    def test_full_ties_keep_index_order(self, make_context):
        context = make_context(
            {
                "types": {
                    "Xyz": {"kind": "struct", "slug": "xyz", "properties": [{"name": "count", "kind": "var"}]},
                    "Abc": {"kind": "struct", "slug": "abc", "properties": [{"name": "count", "kind": "var"}]},
                }
            }
        )
        hits = DocSearch(context).search("count")
        assert [hit.title for hit in hits] == [
            "Abc.count (instance property)",
            "Xyz.count (instance property)",
        ]

    def test_duplicate_hits_are_collapsed(self, context):
        hits = DocSearch(context).search("map")
        titles = [hit.title for hit in hits]

        assert sorted(titles) == ["Array.map() (instance method)", "map() (global)"]

    def test_limit(self, context):
        assert len(DocSearch(context).search("map", limit=1)) == 1

    def test_queries_do_not_change_the_index(self, context):
        before = context.documents
        DocSearch(context).search("Array")
        DocSearch(context).search("map")
        assert context.documents == before
        assert DocSearch(context).search("walk") == DocSearch(context).search("walk")


def test_deduplicate_hits_keeps_first():
    first = SearchHit("Array.append() (instance method)", "s/type/array/", "a/type/array/", "one", score=2.0)
    second = SearchHit("Array.append() (instance method)", "s/type/array/", "a/type/array/", "two", score=1.0)
    other = SearchHit("String.append() (instance method)", "s/type/string/", "a/type/string/", "")

    assert deduplicate_hits([first, second, other]) == [first, other]
    assert deduplicate_hits([first, second])[0].comment == "one"
