"""Startup-built documentation context.

DocsContext bundles everything a request needs: the parsed corpus, the
flattened entities and documents, and the built search engine. It is
constructed once, synchronously, before any request is served and is only
read afterwards, so concurrent requests share it without locking.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from swiftdoc_api.knowledge.adapters.corpus_adapter import FlatCorpus, flatten_corpus
from swiftdoc_api.knowledge.corpus.loader import Corpus, load_corpus
from swiftdoc_api.knowledge.models.document import SearchDocument
from swiftdoc_api.knowledge.models.entity import Entity
from swiftdoc_api.knowledge.naming.paths import PathScheme, add_path_component, entity_path
from swiftdoc_api.knowledge.search.engines.bm25_engine import BM25SearchEngine

logger = logging.getLogger("swiftdoc-api.context")


@dataclass(frozen=True)
class DocsContext:
    """Immutable bundle of corpus, flattened documents and search engine.

    Attributes:
        corpus: Parsed corpus
        flat: Flattened entities and documents
        engine: BM25 engine built over ``flat.documents``
        site_url: Base URL of the documentation site
        api_url: Base URL of this API
    """

    corpus: Corpus
    flat: FlatCorpus
    engine: BM25SearchEngine
    site_url: str
    api_url: str

    @classmethod
    def build(cls, corpus: Corpus, *, site_url: str, api_url: str) -> DocsContext:
        """Flatten and index a corpus. An empty corpus yields an empty index."""
        flat = flatten_corpus(corpus)
        engine = BM25SearchEngine(document_loader=lambda: flat.documents)
        engine.build()

        logger.info(
            "Indexed %d documents from %d entities",
            len(flat.documents),
            len(flat.entities),
        )
        return cls(corpus=corpus, flat=flat, engine=engine, site_url=site_url, api_url=api_url)

    @classmethod
    def from_file(cls, path: str | Path, *, site_url: str, api_url: str) -> DocsContext:
        return cls.build(load_corpus(path), site_url=site_url, api_url=api_url)

    @property
    def entities(self) -> tuple[Entity, ...]:
        return self.flat.entities

    @property
    def documents(self) -> tuple[SearchDocument, ...]:
        return self.flat.documents

    def base_url(self, scheme: PathScheme) -> str:
        return self.api_url if scheme is PathScheme.API else self.site_url

    def url_for(self, entity: Entity, scheme: PathScheme) -> str:
        """Absolute URL of an entity under the given scheme."""
        return add_path_component(self.base_url(scheme), entity_path(entity, scheme))

    def api_endpoint(self, path: str) -> str:
        return add_path_component(self.api_url, path)
