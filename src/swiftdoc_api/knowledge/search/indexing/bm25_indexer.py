"""BM25 inverted index builder with multi-field support.

Pure Python, no NumPy. Each indexed field (``name`` and ``comment``) keeps its
own token lists, term frequencies, document frequencies and average length,
so field importance can be weighted at query time without inflating document
lengths.
"""

import math
from collections import Counter
from typing import Any

from swiftdoc_api.knowledge.models.document import SearchDocument
from swiftdoc_api.knowledge.search.preprocessing.tokenizer import TextTokenizer

FIELDS = ("name", "comment")


class FieldIndex:
    """Inverted index data for a single document field."""

    def __init__(self):
        self.documents: dict[int, list[str]] = {}  # doc_id → tokens
        self.term_freq: dict[int, dict[str, int]] = {}  # doc_id → {term → count}
        self.term_doc_freq: dict[str, int] = {}  # term → document frequency
        self.avg_doc_len: float = 0.0

    def add(self, doc_id: int, tokens: list[str]) -> None:
        self.documents[doc_id] = tokens
        self.term_freq[doc_id] = dict(Counter(tokens))
        for term in set(tokens):
            self.term_doc_freq[term] = self.term_doc_freq.get(term, 0) + 1

    def finalize(self, doc_count: int) -> None:
        total_len = sum(len(tokens) for tokens in self.documents.values())
        self.avg_doc_len = total_len / doc_count if doc_count else 0.0

    def stats(self) -> dict[str, Any]:
        return {
            "avg_doc_len": round(self.avg_doc_len, 2),
            "vocab_size": len(self.term_doc_freq),
            "total_terms": sum(len(tokens) for tokens in self.documents.values()),
        }


class BM25Indexer:
    """BM25 inverted index over the ``name`` and ``comment`` fields.

    Documents are keyed by their integer id.

    Usage:
        >>> indexer = BM25Indexer()
        >>> indexer.build(documents)
        >>> indexer.get_idf("array", field="name")
        2.456
        >>> indexer.get_term_freq(0, "array", field="comment")
        1
    """

    def __init__(self, tokenizer: TextTokenizer | None = None):
        self.fields: dict[str, FieldIndex] = {name: FieldIndex() for name in FIELDS}
        self.doc_count: int = 0
        self.tokenizer = tokenizer or TextTokenizer()

    def build(self, documents: list[SearchDocument] | tuple[SearchDocument, ...]) -> None:
        """Build the index from documents, replacing any previous content."""
        self.clear()

        for doc in documents:
            self.fields["name"].add(doc.id, self.tokenizer.tokenize(doc.name))
            self.fields["comment"].add(doc.id, self.tokenizer.tokenize(doc.comment))

        self.doc_count = len(documents)
        for field_index in self.fields.values():
            field_index.finalize(self.doc_count)

    def _field(self, field: str) -> FieldIndex:
        try:
            return self.fields[field]
        except KeyError:
            raise ValueError(f"Unknown field: {field}. Must be one of {', '.join(FIELDS)}") from None

    def get_idf(self, term: str, field: str = "name") -> float:
        """IDF of a term within a field.

        IDF(t) = log((N - df(t) + 0.5) / (df(t) + 0.5) + 1)
        """
        df = self._field(field).term_doc_freq.get(term, 0)
        n = self.doc_count

        if n == 0 or df == 0:
            return 0.0

        return max(0.0, math.log((n - df + 0.5) / (df + 0.5) + 1))

    def get_term_freq(self, doc_id: int, term: str, field: str = "name") -> int:
        return self._field(field).term_freq.get(doc_id, {}).get(term, 0)

    def get_doc_length(self, doc_id: int, field: str = "name") -> int:
        return len(self._field(field).documents.get(doc_id, []))

    def get_avg_doc_length(self, field: str = "name") -> float:
        return self._field(field).avg_doc_len

    def get_field_tokens(self, doc_id: int, field: str = "name") -> list[str]:
        return self._field(field).documents.get(doc_id, [])

    def clear(self) -> None:
        self.fields = {name: FieldIndex() for name in FIELDS}
        self.doc_count = 0

    def get_stats(self) -> dict[str, Any]:
        """Index statistics for debugging.

        Example:
            >>> indexer.get_stats()
            {
                'doc_count': 1844,
                'name_field': {'avg_doc_len': 1.9, 'vocab_size': 812, 'total_terms': 3504},
                'comment_field': {'avg_doc_len': 11.4, 'vocab_size': 2390, 'total_terms': 21022}
            }
        """
        stats: dict[str, Any] = {"doc_count": self.doc_count}
        for name, field_index in self.fields.items():
            stats[f"{name}_field"] = field_index.stats()
        return stats
