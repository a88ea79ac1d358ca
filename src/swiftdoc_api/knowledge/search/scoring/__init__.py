"""Scoring algorithms for documentation search."""

from swiftdoc_api.knowledge.search.scoring.bm25_scorer import BM25Scorer

__all__ = ["BM25Scorer"]
