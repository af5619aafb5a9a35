"""MCP (Model Context Protocol) server module for Japan transfer search.

This module provides an MCP server implementation that exposes place and
route search through the Model Context Protocol.
"""

from .server import TransferMCPServer, main

__all__ = ["TransferMCPServer", "main"]
