"""Text tokenization for documentation search.

Handles Swift identifiers as well as prose: names are split on camelCase
boundaries, underscores, dots and hyphens so that ``ArrayLiteralConvertible``
can be found by ``array`` and ``removeAtIndex`` by ``remove``.
"""

import re

from swiftdoc_api.knowledge.search.preprocessing.stopwords import is_stopword


class TextTokenizer:
    """Tokenizer for identifiers and documentation comments.

    Design:
    - Regex-based
    - No stemming (identifiers must match exactly)
    - CamelCase splitting, including acronym runs (``UTF8View`` -> utf8, view)
    - Lowercases every token

    Usage:
        >>> tokenizer = TextTokenizer()
        >>> tokenizer.tokenize("ArrayLiteralConvertible")
        ['array', 'literal', 'convertible']

        >>> tokenizer.tokenize("Returns the first element of the collection.")
        ['returns', 'first', 'element', 'collection']

        >>> tokenizer.tokenize("Dictionary.removeValueForKey")
        ['dictionary', 'remove', 'value', 'key']
    """

    # Word characters, optionally joined by dots or hyphens
    WORD_PATTERN = re.compile(r"[A-Za-z0-9_]+(?:[.\-][A-Za-z0-9_]+)*")

    # Separators inside a word
    SEPARATOR_PATTERN = re.compile(r"[._\-]+")

    # CamelCase components: acronym runs, capitalised words, lowercase runs, digits
    CAMEL_PATTERN = re.compile(r"[A-Z]+[0-9]*(?=[A-Z][a-z])|[A-Z]?[a-z]+[0-9]*|[A-Z]+[0-9]*|[0-9]+")

    MIN_WORD_LENGTH = 2

    def __init__(self, remove_stopwords: bool = True, min_length: int = MIN_WORD_LENGTH):
        """Initialize tokenizer.

        Args:
            remove_stopwords: Whether to filter out stopwords
            min_length: Minimum token length to keep (numbers are always kept)
        """
        self.remove_stopwords = remove_stopwords
        self.min_length = min_length

    def tokenize(self, text: str | None) -> list[str]:
        """Tokenize text into lowercase terms.

        Example:
            >>> TextTokenizer().tokenize("Is the sequence empty?")
            ['sequence', 'empty']
        """
        if not text:
            return []

        tokens = []
        for word in self.WORD_PATTERN.findall(text):
            for part in self.SEPARATOR_PATTERN.split(word):
                for piece in self._split_camel_case(part):
                    if self._is_valid_token(piece):
                        tokens.append(piece)
        return tokens

    def tokenize_to_set(self, text: str | None) -> set[str]:
        return set(self.tokenize(text))

    def _split_camel_case(self, word: str) -> list[str]:
        """Split a CamelCase word into lowercase components.

        Example:
            >>> self._split_camel_case("removeAtIndex")
            ['remove', 'at', 'index']
            >>> self._split_camel_case("UTF8View")
            ['utf8', 'view']
        """
        parts = self.CAMEL_PATTERN.findall(word)
        if not parts:
            return [word.lower()] if word else []
        return [p.lower() for p in parts]

    def _is_valid_token(self, word: str) -> bool:
        if word.isdigit():
            return True
        if len(word) < self.min_length:
            return False
        if self.remove_stopwords and is_stopword(word):
            return False
        return True

    @staticmethod
    def normalize_query(query: str | None) -> str:
        """Collapse whitespace in a raw query.

        Example:
            >>> TextTokenizer.normalize_query("  append   contentsOf ")
            'append contentsOf'
        """
        if not query:
            return ""
        return " ".join(query.split())
