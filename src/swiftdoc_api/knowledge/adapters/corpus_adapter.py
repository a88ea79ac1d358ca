"""Corpus document adapter.

Flattens the nested corpus into the two parallel structures the rest of the
service works from:

- a flat, ordered tuple of top-level entities: types sorted by name, then
  operators, functions, properties and aliases in corpus order
- a flat tuple of SearchDocuments: each entity followed by its members
  (functions, properties, aliases, inits, subscripts), every document
  pointing back at its entity through ``owner_index``

Document ids are dense positions in the document tuple, so flattening the
same corpus twice yields identical documents.
"""

from __future__ import annotations

from dataclasses import dataclass

from swiftdoc_api.knowledge.corpus.loader import COLLECTIONS, Corpus
from swiftdoc_api.knowledge.models.document import DocumentType, SearchDocument
from swiftdoc_api.knowledge.models.entity import Entity
from swiftdoc_api.knowledge.naming.titles import entity_title, member_title


@dataclass(frozen=True)
class FlatCorpus:
    """Flattened corpus.

    Attributes:
        entities: Top-level entities in listing order
        documents: Indexable documents; ``documents[i].id == i``
    """

    entities: tuple[Entity, ...]
    documents: tuple[SearchDocument, ...]

    def owner_of(self, document: SearchDocument) -> Entity:
        return self.entities[document.owner_index]


class CorpusDocumentAdapter:
    """Converts a Corpus into flat entities and SearchDocuments.

    Usage:
        >>> flat = CorpusDocumentAdapter.flatten(corpus)
        >>> flat.documents[0].title
        'Array (struct)'
    """

    @staticmethod
    def ordered_entities(corpus: Corpus) -> tuple[Entity, ...]:
        """Types sorted by key, followed by the ordered collections."""
        entities = [corpus.types[key] for key in sorted(corpus.types)]
        for collection in COLLECTIONS:
            entities.extend(getattr(corpus, collection))
        return tuple(entities)

    @staticmethod
    def build_documents(entities: tuple[Entity, ...]) -> tuple[SearchDocument, ...]:
        documents: list[SearchDocument] = []

        for index, entity in enumerate(entities):
            documents.append(
                SearchDocument(
                    id=len(documents),
                    name=entity.name,
                    comment=entity.comment,
                    title=entity_title(entity),
                    owner_index=index,
                    doc_type=DocumentType.ENTITY,
                    kind=entity.kind,
                )
            )

            # Members are indexed under their own name and comment;
            # initializers and subscripts are found by their kind.
            for _section, member in entity.members():
                documents.append(
                    SearchDocument(
                        id=len(documents),
                        name=member.name or member.kind,
                        comment=member.comment,
                        title=member_title(member, entity),
                        owner_index=index,
                        doc_type=DocumentType.MEMBER,
                        kind=member.kind,
                    )
                )

        return tuple(documents)

    @classmethod
    def flatten(cls, corpus: Corpus) -> FlatCorpus:
        entities = cls.ordered_entities(corpus)
        return FlatCorpus(entities=entities, documents=cls.build_documents(entities))


def flatten_corpus(corpus: Corpus) -> FlatCorpus:
    return CorpusDocumentAdapter.flatten(corpus)
