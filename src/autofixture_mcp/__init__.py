"""autofixture-mcp-server: MCP server for AutoFixture documentation tools."""

import logging
import os
import sys

import anyio

from autofixture_mcp.server import app, serve


def main() -> None:
    """CLI entry point: starts the MCP server over stdio."""
    # stdout carries the protocol, so logs go to stderr.
    logging.basicConfig(
        stream=sys.stderr,
        level=os.environ.get("AUTOFIXTURE_MCP_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        anyio.run(serve)
    except KeyboardInterrupt:
        logging.getLogger("autofixture-mcp").info("Interrupted, shutting down.")


__all__ = ["app", "main", "serve"]
