"""Version tool."""

from typing import Any

from fastmcp import FastMCP

from swiftdoc_api.api import handlers
from swiftdoc_api.contracts import build_docs_data, build_ok
from swiftdoc_api.knowledge.context import DocsContext


def register(mcp: FastMCP, context: DocsContext) -> None:
    """Register swiftdoc_version tool with the MCP server."""

    @mcp.tool()
    def swiftdoc_version() -> dict[str, Any]:
        """Versions of the documented Swift components and of this API."""
        versions = handlers.version(context)
        return build_ok(build_docs_data(action="version", entries=versions))
