"""Corpus loading."""

from swiftdoc_api.knowledge.corpus.loader import COLLECTIONS, Corpus, load_corpus, parse_corpus

__all__ = ["COLLECTIONS", "Corpus", "load_corpus", "parse_corpus"]
