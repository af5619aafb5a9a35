"""Route search result page parser."""

import logging
from collections.abc import Callable
from datetime import datetime, timezone

from .document import DocumentNode, parse_document
from .exceptions import DocumentFormatError, RouteParseError
from .extractors import (
    extract_co2_info,
    extract_distance,
    extract_fare_info,
    extract_route_notices,
    extract_route_tags,
    extract_segments,
    extract_time_info,
    extract_total_time,
    extract_transfers,
)
from .models import ExtractionOutcome, Route, RouteSearchResult, SkippedRoute

logger = logging.getLogger(__name__)

RESULTS_SELECTOR = "#results.js_routeBlocks"
ROUTE_BLOCK_SELECTOR = ".bk_result"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_search_time(moment: datetime) -> str:
    """Format a timestamp as ISO 8601 UTC with milliseconds ('...T12:00:00.000Z')."""
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def assemble_route(block: DocumentNode, route_number: int) -> Route | SkippedRoute:
    """Build a Route from one route block.

    Args:
        block: Route block fragment
        route_number: 1-based position of the block in the page

    Returns:
        The assembled Route, or a SkippedRoute describing why the block
        could not be used
    """
    try:
        return Route(
            id=block.attr("id") or f"route_{route_number}",
            route_number=route_number,
            tags=extract_route_tags(block),
            time_info=extract_time_info(block),
            fare_info=extract_fare_info(block),
            total_time=extract_total_time(block),
            transfers=extract_transfers(block),
            total_distance=extract_distance(block),
            co2_info=extract_co2_info(block),
            segments=extract_segments(block),
            route_notices=extract_route_notices(block),
        )
    except Exception as e:
        error = RouteParseError(route_number, str(e))
        logger.warning(f"Skipping unparsable route block: {error}")
        return SkippedRoute(
            route_number=route_number, block_id=block.attr("id"), reason=str(error)
        )


class RouteSearchParser:
    """Parser for Jorudan route search result pages."""

    def __init__(self, clock: Callable[[], datetime] | None = None):
        """Initialize the parser.

        Args:
            clock: Source of the extraction timestamp, defaults to UTC now
        """
        self.clock = clock or _utc_now

    def parse(self, markup: str) -> ExtractionOutcome:
        """Parse a results page into routes plus skipped-route diagnostics.

        Args:
            markup: HTML of the results page

        Returns:
            Extraction outcome with routes in page order

        Raises:
            DocumentFormatError: If the page has no results container
        """
        document = parse_document(markup)

        results = document.select_one(RESULTS_SELECTOR)
        if results is None:
            raise DocumentFormatError(
                "Search results not found. The page structure may differ from "
                "a route search results page."
            )

        blocks = results.select(ROUTE_BLOCK_SELECTOR)
        logger.debug(f"Found {len(blocks)} route blocks")

        routes: list[Route] = []
        skipped: list[SkippedRoute] = []
        for route_number, block in enumerate(blocks, 1):
            attempt = assemble_route(block, route_number)
            if isinstance(attempt, Route):
                routes.append(attempt)
            else:
                skipped.append(attempt)

        result = RouteSearchResult(
            routes=routes, search_time=format_search_time(self.clock())
        )
        return ExtractionOutcome(result=result, skipped=skipped)


def parse_route_search_result(markup: str) -> RouteSearchResult:
    """Parse a results page, discarding skipped-route diagnostics."""
    return RouteSearchParser().parse(markup).result
