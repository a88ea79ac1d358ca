"""Text preprocessing for documentation search."""

from swiftdoc_api.knowledge.search.preprocessing.stopwords import STOPWORDS, is_stopword
from swiftdoc_api.knowledge.search.preprocessing.tokenizer import TextTokenizer

__all__ = ["STOPWORDS", "TextTokenizer", "is_stopword"]
