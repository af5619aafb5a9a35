"""Japan Transfer Search Package

A Python package that searches the Jorudan transfer guide, extracts routes
from its result pages and renders them as text, with CLI and MCP server
front ends.
"""

__version__ = "0.1.0"

from .core.models import Route, RouteSearchResult
from .core.parser import parse_route_search_result
from .core.renderer import render_route_search

__all__ = [
    "Route",
    "RouteSearchResult",
    "parse_route_search_result",
    "render_route_search",
]
