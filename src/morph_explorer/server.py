"""MCP Server: morphology explorer tools.

Registers the explorer tools on a FastMCP server:
- list_books / describe_tag / get_grammar  (grammar and tags)
- get_overview / get_breakdown             (chapter count matrices)
- get_chapter_text / get_matching_words    (highlighted text)
"""

from __future__ import annotations

import argparse
import logging

from mcp.server.fastmcp import FastMCP

from morph_explorer.corpus import CorpusStore
from morph_explorer.engine import ExplorerEngine
from morph_explorer.tools import breakdown, grammar, text

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def create_server(engine: ExplorerEngine) -> FastMCP:
    """FastMCP server with every explorer tool bound to ``engine``."""
    mcp = FastMCP("morph-explorer")
    for module in (grammar, breakdown, text):
        module.register(mcp, engine)
    return mcp


def main():
    """Run the MCP server."""
    parser = argparse.ArgumentParser(
        description="Morphology Explorer MCP Server",
    )
    parser.add_argument(
        "--corpus-dir",
        metavar="DIR",
        help="Corpus directory (default: CORPUS_DIR or ./sblgnt_json)",
    )
    parser.add_argument(
        "--sse",
        type=int,
        metavar="PORT",
        help="Run with SSE transport on specified port",
    )
    parser.add_argument(
        "--http",
        type=int,
        metavar="PORT",
        help="Run with Streamable HTTP transport on specified port",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    # Determine transport
    if args.sse:
        transport = "sse"
        port = args.sse
    elif args.http:
        transport = "http"
        port = args.http
    else:
        transport = "stdio"
        port = None

    store = CorpusStore(args.corpus_dir) if args.corpus_dir else CorpusStore()
    logger.info(
        "Starting Morphology Explorer MCP server (transport: %s, corpus: %s)...",
        transport,
        store.directory,
    )
    server = create_server(ExplorerEngine(store))

    if transport == "stdio":
        server.run(transport="stdio")
    elif transport == "sse":
        server.settings.host = "0.0.0.0"
        server.settings.port = port
        server.run(transport="sse")
    elif transport == "http":
        server.settings.host = "0.0.0.0"
        server.settings.port = port
        server.run(transport="streamable-http")


if __name__ == "__main__":
    main()
