"""MCP Server definition: exposes the tool catalog and routes tool calls.

Uses the low-level ``mcp`` Server so the catalog's JSON schemas and the
``isError`` flag are passed to the client as-is.
"""

from __future__ import annotations

import logging
from typing import Any

from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from autofixture_mcp import catalog, tools

SERVER_NAME = "autofixture-mcp-server"
SERVER_VERSION = "1.0.0"

log = logging.getLogger("autofixture-mcp")

app: Server = Server(
    SERVER_NAME,
    version=SERVER_VERSION,
    instructions=(
        "AutoFixture documentation server. Provides quick start, method search, "
        "class info, packages, usage patterns, best practices, and fetches the "
        "latest README / CHEATSHEET / FAQ from GitHub."
    ),
)


def to_mcp_tool(descriptor: catalog.ToolDescriptor) -> types.Tool:
    return types.Tool(
        name=descriptor.name,
        description=descriptor.description,
        inputSchema=descriptor.schema(),
    )


def to_call_result(result: tools.ToolResult) -> types.CallToolResult:
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=result.text)],
        isError=result.is_error,
    )


@app.list_tools()
async def handle_list_tools() -> list[types.Tool]:
    return [to_mcp_tool(d) for d in catalog.list_operations()]


# Input validation is off so missing arguments reach the handlers' guidance text.
@app.call_tool(validate_input=False)
async def handle_call_tool(name: str, arguments: dict[str, Any] | None) -> types.CallToolResult:
    result = await tools.invoke(name, arguments or {})
    return to_call_result(result)


async def serve() -> None:
    """Run the server over stdio until the client disconnects."""
    async with stdio_server() as (read_stream, write_stream):
        log.info("%s %s running on stdio", SERVER_NAME, SERVER_VERSION)
        await app.run(read_stream, write_stream, app.create_initialization_options())
