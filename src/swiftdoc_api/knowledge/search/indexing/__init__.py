"""Indexing utilities for documentation search."""

from swiftdoc_api.knowledge.search.indexing.bm25_indexer import FIELDS, BM25Indexer

__all__ = ["BM25Indexer", "FIELDS"]
