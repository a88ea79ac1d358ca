"""Stopwords for documentation comment text.

Common English filler words only. Words that double as identifiers in the
standard library (``first``, ``last``, ``count``, ``index``, ``min``, ``max``)
are deliberately absent.
"""

STOPWORDS = frozenset({
    # Articles
    'a', 'an', 'the',

    # Pronouns
    'this', 'that', 'these', 'those',
    'it', 'its', 'itself',
    'they', 'them', 'their',
    'what', 'which', 'who', 'whom', 'whose',

    # Prepositions
    'with', 'from', 'to', 'for', 'of', 'in', 'on', 'at', 'by', 'as', 'into',
    'through', 'during', 'before', 'after', 'above', 'below',
    'between', 'under', 'again', 'then', 'once',

    # Conjunctions
    'and', 'or', 'but', 'nor', 'so', 'yet',

    # be/have/do forms
    'is', 'am', 'are', 'was', 'were', 'be', 'been', 'being',
    'have', 'has', 'had', 'having',
    'does', 'did', 'doing',

    # Modal verbs
    'will', 'would', 'can', 'could', 'may', 'might',
    'shall', 'should', 'must',

    # Other common words
    'if', 'than', 'because', 'while', 'when', 'why', 'how',
    'both', 'such', 'no', 'not', 'only', 'own', 'same', 'very',
    'also', 'just', 'any', 'there', 'here',
})


def is_stopword(word: str) -> bool:
    """Check if a (lowercase) word is a stopword."""
    return word in STOPWORDS
