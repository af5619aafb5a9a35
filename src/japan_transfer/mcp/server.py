"""MCP Server for Japan Transfer Search.

This module implements a Model Context Protocol (MCP) server that exposes
place search and route search on the Jorudan transfer guide.
"""

import asyncio
import logging
from typing import Any

from mcp.server import NotificationOptions, Server
from mcp.server.models import InitializationOptions
from mcp.types import (
    TextContent,
    Tool,
)

from ..core.search import TransferSearch
from ..core.truncation import TokenCounter

logger = logging.getLogger(__name__)

SERVER_NAME = "japan-transfer-mcp"


def _error_text(prefix: str, error: Exception) -> str:
    """Single-line error payload."""
    message = " ".join(str(error).split())
    return f"{prefix}: {message}"


class TransferMCPServer:
    """MCP Server for Japan Transfer Search functionality."""

    def __init__(
        self,
        searcher: TransferSearch | None = None,
        count_tokens: TokenCounter | None = None,
    ) -> None:
        """Initialize the Transfer MCP Server.

        Args:
            searcher: Search service, built with count_tokens if omitted
            count_tokens: Token counter for maxTokens budgets
        """
        self.server = Server(SERVER_NAME)
        self.searcher = searcher or TransferSearch(count_tokens=count_tokens)

        # Register handlers
        self._register_handlers()

    def _register_handlers(self) -> None:
        """Register MCP protocol handlers."""

        @self.server.list_tools()
        async def handle_list_tools() -> list[Tool]:
            """List available tools."""
            return self.list_tools()

        @self.server.call_tool()
        async def handle_call_tool(
            name: str, arguments: dict[str, Any]
        ) -> list[TextContent]:
            """Handle tool calls."""
            return await self.call_tool(name, arguments)

    def list_tools(self) -> list[Tool]:
        return [
            Tool(
                name="search_station_by_name",
                description="Search for stations by name",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "query": {
                            "type": "string",
                            "description": "The name of the station to search for (must be in Japanese)",
                        },
                        "maxTokens": {
                            "type": "integer",
                            "description": "The maximum number of tokens to return",
                            "minimum": 1,
                        },
                        "onlyName": {
                            "type": "boolean",
                            "description": "Whether to only return the name of the station. If you do not need detailed information, it is generally recommended to set this to true.",
                            "default": False,
                        },
                    },
                    "required": ["query"],
                },
            ),
            Tool(
                name="search_route_by_station_name",
                description="Search for routes by station name",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "from": {
                            "type": "string",
                            "description": "The name of the departure station. The value must be a name obtained from search_station_by_name.",
                        },
                        "to": {
                            "type": "string",
                            "description": "The name of the arrival station. The value must be a name obtained from search_station_by_name.",
                        },
                        "datetimeType": {
                            "type": "string",
                            "description": "The type of datetime to use for the search",
                            "enum": ["departure", "arrival", "first", "last"],
                        },
                        "datetime": {
                            "type": "string",
                            "description": "The datetime to use for the search. Format: YYYY-MM-DD HH:MM:SS. If not provided, the current time in Japan will be used.",
                        },
                        "maxTokens": {
                            "type": "integer",
                            "description": "The maximum number of tokens to return",
                            "minimum": 1,
                        },
                    },
                    "required": ["from", "to", "datetimeType"],
                },
            ),
        ]

    async def call_tool(self, name: str, arguments: dict[str, Any]) -> list[TextContent]:
        try:
            if name == "search_station_by_name":
                return await self._search_station_by_name(arguments)
            elif name == "search_route_by_station_name":
                return await self._search_route_by_station_name(arguments)
            else:
                return [TextContent(type="text", text=f"Unknown tool: {name}")]

        except Exception as e:
            logger.error(f"Error in tool {name}: {e}")
            return [TextContent(type="text", text=_error_text("Error", e))]

    async def _search_station_by_name(
        self, arguments: dict[str, Any]
    ) -> list[TextContent]:
        """Search for stations, bus stops and spots by name."""
        try:
            text = self.searcher.search_places(
                arguments["query"],
                max_tokens=arguments.get("maxTokens"),
                only_name=arguments.get("onlyName", False),
            )
            return [TextContent(type="text", text=text)]

        except Exception as e:
            logger.error(f"Station search failed: {e}")
            return [TextContent(type="text", text=_error_text("Station search error", e))]

    async def _search_route_by_station_name(
        self, arguments: dict[str, Any]
    ) -> list[TextContent]:
        """Search for routes between two places."""
        try:
            text = self.searcher.search_route(
                arguments["from"],
                arguments["to"],
                datetime_type=arguments.get("datetimeType", "departure"),
                datetime_text=arguments.get("datetime"),
                max_tokens=arguments.get("maxTokens"),
            )
            return [TextContent(type="text", text=text)]

        except Exception as e:
            logger.error(f"Route search failed: {e}")
            return [TextContent(type="text", text=_error_text("Route search error", e))]


async def main() -> None:
    """Main entry point for the MCP server."""
    # Configure logging
    logging.basicConfig(level=logging.INFO)
    logger.info("Starting Japan Transfer Search MCP Server")

    # Create the server
    server_instance = TransferMCPServer()

    from mcp.server.stdio import stdio_server

    async with stdio_server() as (read_stream, write_stream):
        logger.info("MCP Server running with stdio transport")
        await server_instance.server.run(
            read_stream,
            write_stream,
            InitializationOptions(
                server_name=SERVER_NAME,
                server_version="0.1.0",
                capabilities=server_instance.server.get_capabilities(
                    notification_options=NotificationOptions(),
                    experimental_capabilities={},
                ),
            ),
        )


def main_sync() -> None:
    """Synchronous wrapper for the async main function - used as entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    main_sync()
