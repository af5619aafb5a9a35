"""Place and route search built on the Jorudan transfer guide."""

import logging
from functools import partial

from ..utils.japan_time import japan_now, parse_search_datetime
from .client import JorudanClient
from .exceptions import ValidationError
from .models import (
    ExtractionOutcome,
    RouteDocument,
    RouteSearchQuery,
    SearchMode,
    SuggestQuery,
)
from .parser import RouteSearchParser
from .places import format_place, interleave_places
from .renderer import render_route_search
from .truncation import BudgetTruncator, TokenCounter, tiktoken_counter

logger = logging.getLogger(__name__)


class TransferSearch:
    """Runs searches and renders their results as text."""

    def __init__(
        self,
        client: JorudanClient | None = None,
        count_tokens: TokenCounter | None = None,
        parser: RouteSearchParser | None = None,
    ):
        """Initialize the search service.

        Args:
            client: HTTP client for the transfer guide
            count_tokens: Token counter used for output budgets, defaults
                to tiktoken's cl100k_base encoding
            parser: Results page parser
        """
        self.client = client or JorudanClient()
        self.parser = parser or RouteSearchParser()
        self.truncator = BudgetTruncator(count_tokens or tiktoken_counter())

    def search_places(
        self, query: str, max_tokens: int | None = None, only_name: bool = False
    ) -> str:
        """Search stations, bus stops and spots by name.

        Args:
            query: Place name (in Japanese)
            max_tokens: Token budget for the returned list
            only_name: Return names only instead of full descriptions

        Returns:
            Comma separated place descriptions

        Raises:
            ValidationError: If the query is empty
            NetworkError: If the request fails
        """
        if not query or not query.strip():
            raise ValidationError("Place name cannot be empty")

        response = self.client.fetch_suggest(SuggestQuery(query=query.strip()))
        descriptions = (
            format_place(place, only_name=only_name)
            for place in interleave_places(response)
        )
        return self.truncator.join_within_budget(descriptions, max_tokens)

    def fetch_route_outcome(
        self,
        from_place: str,
        to_place: str,
        datetime_type: SearchMode = "departure",
        datetime_text: str | None = None,
        save_html_path: str | None = None,
    ) -> tuple[ExtractionOutcome, RouteDocument, str]:
        """Fetch and parse a route search.

        Returns:
            Extraction outcome, the fetched document and the query datetime
            text that was searched for

        Raises:
            ValidationError: If place names or the datetime are invalid
            NetworkError: If the request fails
            DocumentFormatError: If the response is not a results page
        """
        if not from_place or not from_place.strip():
            raise ValidationError("Departure place name cannot be empty")
        if not to_place or not to_place.strip():
            raise ValidationError("Arrival place name cannot be empty")

        if not datetime_text:
            datetime_text = japan_now()

        try:
            search_datetime = parse_search_datetime(datetime_text)
        except ValueError as e:
            raise ValidationError(str(e)) from e

        query = RouteSearchQuery(
            from_place=from_place.strip(),
            to_place=to_place.strip(),
            search_datetime=search_datetime,
            search_mode=datetime_type,
        )
        document = self.client.fetch_route_document(query)

        # Save HTML for debugging if requested
        if save_html_path:
            with open(save_html_path, "w", encoding="utf-8") as f:
                f.write(document.body)

        outcome = self.parser.parse(document.body)
        if outcome.skipped:
            logger.warning(
                f"{len(outcome.skipped)} route(s) skipped for {query.from_place} → {query.to_place}"
            )
        return outcome, document, datetime_text

    def render_outcome(
        self,
        outcome: ExtractionOutcome,
        source_url: str,
        from_place: str,
        to_place: str,
        datetime_text: str,
        max_tokens: int | None = None,
    ) -> str:
        """Render an extraction outcome within a token budget."""
        render = partial(
            render_route_search,
            source_url=source_url,
            origin=from_place,
            destination=to_place,
            query_datetime=datetime_text,
        )
        return self.truncator.truncate(outcome.result, render, max_tokens)

    def search_route(
        self,
        from_place: str,
        to_place: str,
        datetime_type: SearchMode = "departure",
        datetime_text: str | None = None,
        max_tokens: int | None = None,
        save_html_path: str | None = None,
    ) -> str:
        """Search routes between two places and render them as text.

        Args:
            from_place: Departure place, as returned by the place search
            to_place: Arrival place, as returned by the place search
            datetime_type: departure, arrival, first or last
            datetime_text: 'YYYY-MM-DD HH:MM:SS'; defaults to now in Japan
            max_tokens: Token budget for the report
            save_html_path: Optional path to save raw HTML for debugging

        Returns:
            Route report
        """
        outcome, document, datetime_text = self.fetch_route_outcome(
            from_place, to_place, datetime_type, datetime_text, save_html_path
        )
        return self.render_outcome(
            outcome, document.final_url, from_place, to_place, datetime_text, max_tokens
        )
