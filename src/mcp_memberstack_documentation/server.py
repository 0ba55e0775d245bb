"""MCP transport exposing the dispatcher as tools and resources."""

import logging
from collections.abc import Iterable
from typing import Any

import mcp.types as types
from mcp.server import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.stdio import stdio_server
from pydantic import AnyUrl

from mcp_memberstack_documentation import __version__
from mcp_memberstack_documentation.categories import CATEGORIES
from mcp_memberstack_documentation.config import ServerConfig
from mcp_memberstack_documentation.dispatcher import RequestDispatcher
from mcp_memberstack_documentation.methods import PACKAGE_DOCUMENTS

logger = logging.getLogger(__name__)

TOOL_OPERATIONS: dict[str, str] = {
    "search_memberstack_docs": "search",
    "list_memberstack_methods": "listMethods",
    "get_memberstack_info": "getInfo",
}


def tool_definitions() -> list[types.Tool]:
    """Describe the tools offered to clients."""
    return [
        types.Tool(
            name="search_memberstack_docs",
            description="Search through Memberstack documentation for specific topics, methods, or examples",
            inputSchema={
                "type": "object",
                "properties": {
                    "query": {
                        "type": "string",
                        "description": "Search query (e.g., 'authentication', 'updateProfile', 'React examples')",
                    },
                    "category": {
                        "type": "string",
                        "description": "Optional: Filter by category (dom-api, admin-api, rest-api, etc.)",
                        "enum": list(CATEGORIES),
                    },
                },
                "required": ["query"],
            },
        ),
        types.Tool(
            name="list_memberstack_methods",
            description="List all available Memberstack methods by category",
            inputSchema={
                "type": "object",
                "properties": {
                    "package": {
                        "type": "string",
                        "description": "Package to list methods for",
                        "enum": list(PACKAGE_DOCUMENTS),
                    },
                },
                "required": ["package"],
            },
        ),
        types.Tool(
            name="get_memberstack_info",
            description="Summarise the bundled Memberstack documentation and its coverage",
            inputSchema={"type": "object", "properties": {}},
        ),
    ]


def call_tool_text(dispatcher: RequestDispatcher, name: str, arguments: dict[str, Any] | None) -> str:
    """Run a tool call through the dispatcher.

    Args:
        dispatcher: Dispatcher handling the request.
        name: Tool name requested by the client.
        arguments: Tool arguments.

    Returns:
        Text response for the client.
    """
    operation = TOOL_OPERATIONS.get(name)
    if operation is None:
        return f"Error: Unknown tool: {name}. Available options: {', '.join(TOOL_OPERATIONS)}"
    return dispatcher.handle(operation, arguments or {})


def resource_entries(dispatcher: RequestDispatcher) -> list[types.Resource]:
    """Describe every catalogued document as an MCP resource."""
    return [
        types.Resource(
            uri=AnyUrl(handle.uri),
            name=handle.name,
            description=handle.description,
            mimeType=handle.mime_type,
        )
        for handle in dispatcher.resources()
    ]


def create_server(config: ServerConfig) -> Server:
    """Build an MCP server bound to a configuration.

    Args:
        config: Server configuration.

    Returns:
        Low-level MCP server with tool and resource handlers registered.
    """
    dispatcher = RequestDispatcher(config)
    server: Server = Server(config.server_name, version=__version__)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return tool_definitions()

    @server.call_tool()
    async def call_tool(name: str, arguments: dict[str, Any] | None) -> list[types.TextContent]:
        logger.debug("Tool call %s with %s", name, arguments)
        return [types.TextContent(type="text", text=call_tool_text(dispatcher, name, arguments))]

    @server.list_resources()
    async def list_resources() -> list[types.Resource]:
        return resource_entries(dispatcher)

    @server.read_resource()
    async def read_resource(uri: AnyUrl) -> Iterable[ReadResourceContents]:
        content = dispatcher.read(str(uri))
        return [ReadResourceContents(content=content, mime_type="text/markdown")]

    return server


async def run_stdio(config: ServerConfig) -> None:
    """Serve the documentation over the stdio transport until the client disconnects.

    Args:
        config: Server configuration.
    """
    server = create_server(config)
    logger.info("Serving documentation from %s", config.docs_path)
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())
