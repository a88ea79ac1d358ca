"""URL listing tool."""

from typing import Any

from fastmcp import FastMCP

from swiftdoc_api.api import handlers
from swiftdoc_api.contracts import build_docs_data, build_ok
from swiftdoc_api.knowledge.context import DocsContext
from swiftdoc_api.knowledge.naming.paths import PathScheme
from swiftdoc_api.knowledge.query import LookupGroup
from swiftdoc_api.utils import ListKind, UrlScheme


def register(mcp: FastMCP, context: DocsContext) -> None:
    """Register swiftdoc_list_urls tool with the MCP server."""

    @mcp.tool()
    def swiftdoc_list_urls(
        scheme: UrlScheme = "site",
        kind: ListKind = None,
    ) -> dict[str, Any]:
        """List documented entities as a name -> URL mapping.

        - No kind: every entity, with site or API URLs depending on scheme
        - kind (protocol/type/operator/func/global): that group only, API URLs
        """
        if kind is None:
            urls = handlers.list_urls(context, PathScheme(scheme))
        else:
            urls = handlers.list_kind(context, LookupGroup(kind))
            scheme = "api"

        return build_ok(
            build_docs_data(
                action="list",
                entries=urls,
                summary={"count": len(urls), "scheme": scheme, "kind": kind},
            )
        )
