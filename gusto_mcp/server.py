# The module exposes the tool catalog over the Model Context Protocol (stdio transport).
# Date: 2026-10-18
# Version: 1.0.0

from typing import Any, Dict, List, Optional

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from gusto_mcp.core.config import Settings
from gusto_mcp.core.dispatcher import Dispatcher
from gusto_mcp.services.gusto_client import GustoClient
from gusto_mcp.utils.logger import console


def build_server(settings: Settings, dispatcher: Dispatcher) -> Server:
    """
    Creates the MCP server and registers the list-tools and call-tool handlers.
    The SDK's own input validation is switched off: argument handling belongs
    to the dispatcher, which ignores unknown keys and does not check required ones.
    """
    server = Server(f"{settings.MCP_NAME}-mcp", version=settings.MCP_VERSION)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return [
            types.Tool(name=tool.name, description=tool.description, inputSchema=tool.input_schema())
            for tool in dispatcher.catalog
        ]

    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: Optional[Dict[str, Any]]) -> types.CallToolResult:
        text, is_error = await dispatcher.call_tool(name, arguments or {})
        return types.CallToolResult(
            content=[types.TextContent(type="text", text=text)],
            isError=is_error,
        )

    return server


async def run_stdio(settings: Settings):
    """Serves MCP requests on stdin/stdout until the stream closes."""
    async with GustoClient.from_settings(settings) as client:
        dispatcher = Dispatcher(client)
        server = build_server(settings, dispatcher)
        async with stdio_server() as (read_stream, write_stream):
            console.info(f"{settings.MCP_NAME} MCP server running on stdio")
            await server.run(read_stream, write_stream, server.create_initialization_options())
