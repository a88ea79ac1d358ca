"""HTTP routes for the read-only JSON API.

Registered on the FastMCP server as custom routes, so they are served next to
the MCP endpoint whenever the server runs with the http or sse transport.
Every response is JSON, pretty-printed with the configured indent.
"""

import json
from typing import Any

from fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import Response

from swiftdoc_api.api import handlers
from swiftdoc_api.contracts import build_no_match
from swiftdoc_api.knowledge.context import DocsContext
from swiftdoc_api.knowledge.naming.paths import PathScheme
from swiftdoc_api.knowledge.query import LookupGroup


def json_response(payload: Any, indent: int = 4) -> Response:
    body = json.dumps(payload, indent=indent or None, ensure_ascii=False)
    return Response(body, media_type="application/json")


def register(mcp: FastMCP, context: DocsContext, *, indent: int = 4) -> None:
    """Register the JSON API routes with the MCP server.

    Every route except the root also answers with a trailing slash.
    """

    def route(path: str):
        def decorator(fn):
            mcp.custom_route(path, methods=["GET"])(fn)
            return mcp.custom_route(f"{path}/", methods=["GET"])(fn)

        return decorator

    @mcp.custom_route("/", methods=["GET"])
    async def root(request: Request) -> Response:
        return json_response(handlers.index_routes(context), indent)

    @route("/urls")
    async def site_urls(request: Request) -> Response:
        return json_response(handlers.list_urls(context, PathScheme.SITE), indent)

    @route("/api_urls")
    async def api_urls(request: Request) -> Response:
        return json_response(handlers.list_urls(context, PathScheme.API), indent)

    @route("/search")
    async def search(request: Request) -> Response:
        return json_response(handlers.search(context, request.query_params.get("q")), indent)

    @route("/version")
    async def version(request: Request) -> Response:
        return json_response(handlers.version(context), indent)

    @route("/{group}")
    async def group_listing(request: Request) -> Response:
        kind = request.path_params["group"]
        group = LookupGroup.parse(kind)
        if group is None:
            return json_response(build_no_match({"kind": kind}), indent)
        return json_response(handlers.list_kind(context, group), indent)

    @route("/{group}/{key}")
    async def item(request: Request) -> Response:
        payload = handlers.lookup_item(context, request.path_params["group"], request.path_params["key"])
        return json_response(payload, indent)
