"""Core transfer search functionality."""

from .client import JorudanClient
from .exceptions import (
    DocumentFormatError,
    NetworkError,
    RouteParseError,
    TransitSearchError,
    ValidationError,
)
from .models import (
    ExtractionOutcome,
    Route,
    RouteSearchQuery,
    RouteSearchResult,
    SkippedRoute,
)
from .parser import RouteSearchParser, parse_route_search_result
from .renderer import render_route_search
from .search import TransferSearch
from .truncation import BudgetTruncator, tiktoken_counter

__all__ = [
    "BudgetTruncator",
    "DocumentFormatError",
    "ExtractionOutcome",
    "JorudanClient",
    "NetworkError",
    "Route",
    "RouteParseError",
    "RouteSearchParser",
    "RouteSearchQuery",
    "RouteSearchResult",
    "SkippedRoute",
    "TransferSearch",
    "TransitSearchError",
    "ValidationError",
    "parse_route_search_result",
    "render_route_search",
    "tiktoken_counter",
]
