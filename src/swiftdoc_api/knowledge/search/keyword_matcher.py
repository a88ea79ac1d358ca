"""Partial term matching for comment text.

Lets abbreviated queries reach longer words in documentation comments,
e.g. ``elem`` -> ``element`` or ``seq`` -> ``sequence``.
"""

# Minimum length on both sides for a prefix match
MIN_PREFIX_LENGTH = 3

PREFIX_QUALITY = 0.8
SUBSTRING_QUALITY = 0.6


def word_match_quality(query_word: str, doc_word: str) -> float:
    """Match quality between two lowercase words.

    - Exact match: 1.0
    - Prefix match (3+ chars on both sides): 0.8
    - Substring match (query word longer than one char): 0.6
    - Otherwise: 0.0

    Examples:
        >>> word_match_quality("elem", "element")
        0.8
        >>> word_match_quality("sort", "unsorted")
        0.6
        >>> word_match_quality("at", "atomic")
        0.0
    """
    if query_word == doc_word:
        return 1.0

    if len(query_word) >= MIN_PREFIX_LENGTH and len(doc_word) >= MIN_PREFIX_LENGTH:
        if doc_word.startswith(query_word) or query_word.startswith(doc_word):
            return PREFIX_QUALITY

    # Short words match too much as substrings
    if len(query_word) >= MIN_PREFIX_LENGTH:
        if query_word in doc_word or doc_word in query_word:
            return SUBSTRING_QUALITY

    return 0.0


def find_partial_matches(
    unmatched_query_words: set[str], unmatched_doc_words: set[str]
) -> tuple[set[tuple[str, str]], float]:
    """Pair each unmatched query word with its best partial match.

    Returns:
        Tuple of (pairs, avg_quality) where pairs holds (query_word, doc_word)
        tuples and avg_quality is the mean quality of the accepted pairs.

    Example:
        >>> find_partial_matches({"elem"}, {"element", "sequence"})
        ({('elem', 'element')}, 0.8)
    """
    partial_matches: set[tuple[str, str]] = set()
    quality_scores: list[float] = []

    for q_word in unmatched_query_words:
        best_match = None
        best_quality = 0.0

        # Sorted so ties resolve the same way on every run
        for d_word in sorted(unmatched_doc_words):
            quality = word_match_quality(q_word, d_word)
            if quality > best_quality:
                best_quality = quality
                best_match = d_word

        if best_match and best_quality >= SUBSTRING_QUALITY:
            partial_matches.add((q_word, best_match))
            quality_scores.append(best_quality)

    avg_quality = sum(quality_scores) / len(quality_scores) if quality_scores else 0.0
    return partial_matches, avg_quality
