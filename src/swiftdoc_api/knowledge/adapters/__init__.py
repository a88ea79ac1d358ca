"""Adapters converting the loaded corpus into search documents."""

from swiftdoc_api.knowledge.adapters.corpus_adapter import CorpusDocumentAdapter, FlatCorpus, flatten_corpus

__all__ = ["CorpusDocumentAdapter", "FlatCorpus", "flatten_corpus"]
