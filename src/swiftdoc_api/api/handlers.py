"""Endpoint handlers.

Pure functions from a DocsContext and request parameters to JSON-ready
payloads. Both dispatchers (HTTP routes and MCP tools) call these; neither
adds behaviour of its own beyond serialization.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from swiftdoc_api import __version__
from swiftdoc_api.contracts import NO_MATCH, build_no_match, build_search_hits
from swiftdoc_api.knowledge.context import DocsContext
from swiftdoc_api.knowledge.models.entity import Entity
from swiftdoc_api.knowledge.naming.paths import PathScheme
from swiftdoc_api.knowledge.query import DocSearch, LookupGroup, list_group, lookup


def index_routes(context: DocsContext) -> dict[str, str]:
    """Root listing of the API's own endpoints."""
    return {
        "all_urls_url": context.api_endpoint("urls"),
        "api_urls_url": context.api_endpoint("api_urls"),
        "search_url": context.api_endpoint("search?q={query}"),
        "version_url": context.api_endpoint("version"),
    }


def urls_by_name(context: DocsContext, entities: Iterable[Entity], scheme: PathScheme) -> dict[str, str]:
    """Map entity name -> URL. Repeated names keep the last entity's URL."""
    return {entity.name: context.url_for(entity, scheme) for entity in entities}


def list_urls(context: DocsContext, scheme: PathScheme = PathScheme.SITE) -> dict[str, str]:
    return urls_by_name(context, context.entities, scheme)


def list_kind(context: DocsContext, group: LookupGroup) -> dict[str, str]:
    """API URLs of every entity in one route group."""
    return urls_by_name(context, list_group(context, group), PathScheme.API)


def search(context: DocsContext, query: str | None, limit: int | None = None) -> list[dict[str, Any]]:
    return build_search_hits(DocSearch(context).search(query, limit=limit))


def lookup_item(context: DocsContext, kind: str, name: str) -> dict[str, Any] | list[dict[str, Any]]:
    """Single-item lookup; a miss yields a no-match payload, never an error."""
    request = {"kind": kind, "name": name}

    group = LookupGroup.parse(kind)
    if group is None:
        return build_no_match(request)

    result = lookup(context, group, name)
    if result is None:
        return build_no_match(request)
    if isinstance(result, list):
        return [entity.to_dict() for entity in result]
    return result.to_dict()


def is_no_match(payload: Any) -> bool:
    return isinstance(payload, dict) and payload.get("error") == NO_MATCH and "request" in payload


def version(context: DocsContext) -> dict[str, str]:
    """Corpus component versions plus this API's version under ``api``."""
    versions = dict(context.corpus.version)
    versions["api"] = __version__
    return versions
