"""Search result post-processing."""

from swiftdoc_api.knowledge.search.postprocessing.deduplication import deduplicate_hits

__all__ = ["deduplicate_hits"]
