"""Single-item lookup tool."""

from typing import Any

from fastmcp import FastMCP

from swiftdoc_api.api import handlers
from swiftdoc_api.contracts import build_docs_data, build_error, build_ok
from swiftdoc_api.knowledge.context import DocsContext
from swiftdoc_api.utils import LookupKey, LookupKind


def register(mcp: FastMCP, context: DocsContext) -> None:
    """Register swiftdoc_lookup tool with the MCP server."""

    @mcp.tool()
    def swiftdoc_lookup(kind: LookupKind, name: LookupKey) -> dict[str, Any]:
        """Get the full documentation record for one entity.

        Lookup rules:
        - protocol / type: by type name, then slug
        - operator: first operator matching slug or name
        - func: every global function with that name (names repeat)
        - global: first alias matching slug or name, else first global property

        Related tools:
        - swiftdoc_search: Find entities by keywords when the name is unknown
        """
        payload = handlers.lookup_item(context, kind, name)
        if handlers.is_no_match(payload):
            return build_error(
                "no_match",
                f"No {kind} named '{name}'.",
                {"request": payload["request"]},
            )

        entries = payload if isinstance(payload, list) else [payload]
        return build_ok(
            build_docs_data(
                action="lookup",
                entries=entries,
                summary={"kind": kind, "name": name, "count": len(entries)},
            )
        )
