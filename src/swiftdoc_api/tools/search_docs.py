"""Documentation search tool."""

from typing import Any

from fastmcp import FastMCP

from swiftdoc_api.api import handlers
from swiftdoc_api.contracts import build_docs_data, build_ok
from swiftdoc_api.knowledge.context import DocsContext
from swiftdoc_api.utils import SearchLimit, SearchQuery


def register(mcp: FastMCP, context: DocsContext) -> None:
    """Register swiftdoc_search tool with the MCP server."""

    @mcp.tool()
    def swiftdoc_search(
        query: SearchQuery = "",
        limit: SearchLimit = None,
    ) -> dict[str, Any]:
        """Search Swift standard library documentation by keywords.

        Matches type, protocol, operator, function, property and alias names
        (weighted highest) and documentation comments. Member hits link to
        their owning type's page.

        Related tools:
        - swiftdoc_lookup: Full record for a known type, operator, function or global
        - swiftdoc_list_urls: Every documented entity with its URL
        """
        entries = handlers.search(context, query, limit=limit)
        payload = build_docs_data(
            action="search",
            entries=entries,
            summary={"query": query, "count": len(entries)},
        )
        if not entries:
            payload["summary"]["hints"] = [
                "Try a type or member name (for example: Array, append, startIndex).",
                "Use swiftdoc_list_urls to browse every documented entity.",
            ]
        return build_ok(payload)
