"""BM25 scoring with weighted name and comment fields.

Each field is scored independently with BM25 and the field scores are
combined as ``weight_name * name + weight_comment * comment``. The default
name weight is 100 times the comment weight, so a document named after the
query outranks documents that merely mention it.
"""

from typing import Any

from swiftdoc_api.knowledge.models.document import SearchDocument
from swiftdoc_api.knowledge.search.indexing.bm25_indexer import BM25Indexer
from swiftdoc_api.knowledge.search.keyword_matcher import find_partial_matches


class BM25Scorer:
    """Multi-field BM25 scorer.

    Name matches are exact only; the comment field also accepts prefix and
    substring matches, discounted by match quality.

    Usage:
        >>> scorer = BM25Scorer(indexer)
        >>> score, info = scorer.score("array", doc)
        >>> info["field_scores"]
        {'name': 0.693, 'comment': 0.0}
    """

    # BM25 hyperparameters
    K1 = 1.5  # Term frequency saturation
    B = 0.75  # Document length normalization

    # Field weights
    WEIGHT_NAME = 100.0
    WEIGHT_COMMENT = 1.0

    def __init__(
        self,
        indexer: BM25Indexer,
        *,
        weight_name: float | None = None,
        weight_comment: float | None = None,
    ):
        self.indexer = indexer
        self.tokenizer = indexer.tokenizer
        self.weight_name = self.WEIGHT_NAME if weight_name is None else weight_name
        self.weight_comment = self.WEIGHT_COMMENT if weight_comment is None else weight_comment

    def score(self, query: str, document: SearchDocument) -> tuple[float, dict[str, Any]]:
        """Score one document against a query.

        Returns:
            Tuple of (total_score, match_info)
        """
        query_tokens = self.tokenizer.tokenize_to_set(query)
        if not query_tokens:
            return 0.0, {}
        return self._score_tokens(query_tokens, document.id)

    def _score_tokens(self, query_tokens: set[str], doc_id: int) -> tuple[float, dict[str, Any]]:
        name_score, name_info = self._score_field(query_tokens, doc_id, field="name")
        comment_score, comment_info = self._score_field(query_tokens, doc_id, field="comment")

        total_score = self.weight_name * name_score + self.weight_comment * comment_score

        match_info = {
            "total_score": round(total_score, 3),
            "field_scores": {
                "name": round(name_score, 3),
                "comment": round(comment_score, 3),
            },
            "matched_terms": sorted(set(name_info["exact_matches"]) | set(comment_info["exact_matches"])),
            "field_details": {"name": name_info, "comment": comment_info},
        }
        return total_score, match_info

    def _score_field(self, query_tokens: set[str], doc_id: int, field: str) -> tuple[float, dict[str, Any]]:
        doc_tokens = set(self.indexer.get_field_tokens(doc_id, field=field))

        if not doc_tokens:
            return 0.0, {"exact_matches": [], "partial_matches": [], "term_scores": {}}

        exact_matches = query_tokens & doc_tokens

        # Names must match exactly
        if field == "name":
            partial_matches: set[tuple[str, str]] = set()
            quality = 1.0
        else:
            partial_matches, quality = find_partial_matches(query_tokens - exact_matches, doc_tokens - exact_matches)

        term_scores = {}
        for term in exact_matches:
            term_scores[term] = self._score_term(term, doc_id, field=field)

        for q_term, d_term in partial_matches:
            term_scores[f"{d_term}←{q_term}"] = self._score_term(d_term, doc_id, field=field) * quality

        field_info = {
            "exact_matches": sorted(exact_matches),
            "partial_matches": [{"query": q, "doc": d, "quality": quality} for q, d in sorted(partial_matches)],
            "term_scores": {term: round(value, 3) for term, value in term_scores.items()},
        }
        return sum(term_scores.values()), field_info

    def _score_term(self, term: str, doc_id: int, field: str) -> float:
        """BM25 contribution of a single term in one field.

        score = IDF × (TF × (k1 + 1)) / (TF + k1 × (1 - b + b × |D| / avgdl))
        """
        tf = self.indexer.get_term_freq(doc_id, term, field=field)
        if tf == 0:
            return 0.0

        idf = self.indexer.get_idf(term, field=field)
        doc_len = self.indexer.get_doc_length(doc_id, field=field)
        avg_len = self.indexer.get_avg_doc_length(field=field)

        if avg_len == 0:
            norm_factor = 1.0
        else:
            norm_factor = 1 - self.B + self.B * (doc_len / avg_len)

        return idf * (tf * (self.K1 + 1)) / (tf + self.K1 * norm_factor)

    def batch_score(
        self, query: str, documents: list[SearchDocument] | tuple[SearchDocument, ...]
    ) -> list[tuple[SearchDocument, float, dict[str, Any]]]:
        """Score documents in order, keeping those with a positive score."""
        query_tokens = self.tokenizer.tokenize_to_set(query)
        if not query_tokens:
            return []

        results = []
        for doc in documents:
            score, match_info = self._score_tokens(query_tokens, doc.id)
            if score > 0:
                results.append((doc, score, match_info))
        return results
