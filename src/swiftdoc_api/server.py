"""SwiftDoc API Server - Swift standard library docs over JSON and MCP."""

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from fastmcp import FastMCP

from swiftdoc_api import __version__
from swiftdoc_api.api import routes
from swiftdoc_api.config import ApiConfig, get_api_config
from swiftdoc_api.knowledge.context import DocsContext
from swiftdoc_api.tools import get_version, list_urls, lookup_item, search_docs

logger = logging.getLogger("swiftdoc-api.server")


def create_server(context: DocsContext, *, json_indent: int = 4) -> FastMCP:
    """Build the MCP server, with its JSON API routes, over a built context."""
    mcp = FastMCP(
        "SwiftDoc API",
        instructions=(
            "Read-only Swift standard library documentation. "
            "Provides tools for searching types, protocols, operators, functions, "
            "properties and aliases, listing their documentation URLs, "
            "and looking up full documentation records."
        ),
    )

    # Register documentation tools
    search_docs.register(mcp, context)
    list_urls.register(mcp, context)
    lookup_item.register(mcp, context)
    get_version.register(mcp, context)

    # Register JSON API routes (served with http/sse transports)
    routes.register(mcp, context, indent=json_indent)

    return mcp


def load_context(config: ApiConfig) -> DocsContext:
    """Load, flatten and index the configured corpus.

    Raises:
        FileNotFoundError: If the corpus file does not exist
        CorpusError: If the corpus cannot be fully indexed
    """
    return DocsContext.from_file(config.corpus_path, site_url=config.site_url, api_url=config.api_url)


def main():
    """Entry point for the SwiftDoc API server."""
    config = get_api_config()

    parser = argparse.ArgumentParser(
        prog="swiftdoc-api",
        description="SwiftDoc API Server - Swift standard library docs over JSON and MCP",
    )
    parser.add_argument("--version", "-v", action="version", version=f"swiftdoc-api {__version__}")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http", "sse"],
        default="http",
        help="Transport protocol (default: http, which also serves the JSON API)",
    )
    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind when using http/sse transport (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=config.port,
        help=f"Port to bind when using http/sse transport (default: $PORT or {config.port})",
    )
    parser.add_argument(
        "--corpus",
        default=None,
        help=f"Path to the corpus JSON file (default: {config.corpus_path})",
    )
    parser.add_argument("--log-level", default="INFO", help="Logging level (default: INFO)")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if args.corpus:
        config = replace(config, corpus_path=Path(args.corpus))

    # Nothing is served unless the whole corpus indexes
    try:
        context = load_context(config)
    except (FileNotFoundError, ValueError) as exc:
        logger.error("Cannot start: %s", exc)
        sys.exit(1)

    mcp = create_server(context, json_indent=config.json_indent)

    run_kwargs: dict = {"transport": args.transport, "show_banner": False}
    if args.transport in ("http", "sse"):
        run_kwargs["host"] = args.host
        run_kwargs["port"] = args.port
        logger.info("SwiftDoc API is running at %s:%s", args.host, args.port)

    try:
        mcp.run(**run_kwargs)
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
