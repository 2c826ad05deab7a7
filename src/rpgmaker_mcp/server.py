"""Model Context Protocol transport over stdio.

The low-level :class:`mcp.server.lowlevel.Server` is used instead of
``FastMCP`` because every tool already carries a pydantic argument model whose
JSON schema is advertised as is.
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping

import anyio
from anyio import to_thread
import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from .toolkit import Toolkit

logger = logging.getLogger(__name__)

SERVER_NAME = "rpgmaker-mz"


class ToolCallError(RuntimeError):
    """Raised so the protocol layer reports a tool failure with ``isError``."""


def list_tool_definitions(toolkit: Toolkit) -> List[types.Tool]:
    return [
        types.Tool(name=tool.name, description=tool.description, inputSchema=tool.input_schema())
        for tool in toolkit.available_tools
    ]


def call_tool(
    toolkit: Toolkit, name: str, arguments: Mapping[str, Any] | None
) -> List[types.TextContent]:
    """Invoke ``name`` and return its text, raising on failure."""

    if name not in toolkit:
        raise ToolCallError(f"Unknown tool '{name}'")
    result = toolkit.invoke(name, arguments)
    if result.is_error:
        raise ToolCallError(result.text)
    return [types.TextContent(type="text", text=result.text)]


def create_server(toolkit: Toolkit) -> Server:
    server: Server = Server(SERVER_NAME)

    @server.list_tools()
    async def handle_list_tools() -> List[types.Tool]:
        return list_tool_definitions(toolkit)

    @server.call_tool()
    async def handle_call_tool(name: str, arguments: dict | None) -> List[types.TextContent]:
        # Tools do blocking file I/O under the toolkit lock.
        return await to_thread.run_sync(call_tool, toolkit, name, arguments)

    return server


async def serve_stdio(toolkit: Toolkit) -> None:
    server = create_server(toolkit)
    async with stdio_server() as (read_stream, write_stream):
        logger.info("Serving %d tools over stdio", len(toolkit.available_tools))
        await server.run(read_stream, write_stream, server.create_initialization_options())


def run_stdio(toolkit: Toolkit) -> None:
    anyio.run(serve_stdio, toolkit)


__all__ = [
    "SERVER_NAME",
    "ToolCallError",
    "call_tool",
    "create_server",
    "list_tool_definitions",
    "run_stdio",
    "serve_stdio",
]
