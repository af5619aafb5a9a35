"""HTTP client for the Jorudan transfer guide."""

import logging

import requests

from .exceptions import NetworkError
from .models import RouteDocument, RouteSearchQuery, SuggestQuery, SuggestResponse

logger = logging.getLogger(__name__)

SUGGEST_URL = "https://navi.jorudan.co.jp/api/compat/suggest/agg"
ROUTE_SEARCH_URL = "https://www.jorudan.co.jp/norikae/cgi/nori.cgi"


class JorudanClient:
    """Fetches place suggestions and route search pages.

    A single session is kept for the client's lifetime so cookies set by
    the service are sent back on later requests.
    """

    def __init__(self, timeout: int = 30):
        """Initialize the client.

        Args:
            timeout: Request timeout in seconds
        """
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update(
            {
                "User-Agent": "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/140.0.0.0 Safari/537.36",
                "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
                "Accept-Language": "ja,en-US;q=0.9,en;q=0.8",
                "Connection": "keep-alive",
            }
        )

    def fetch_suggest(self, query: SuggestQuery) -> SuggestResponse:
        """Fetch place suggestions for a partial name.

        Args:
            query: Suggestion query

        Returns:
            Suggested stations, bus stops and spots

        Raises:
            NetworkError: If the request fails or the response is not JSON
        """
        try:
            response = self.session.get(
                SUGGEST_URL, params=query.to_params(), timeout=self.timeout
            )
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"Failed to fetch place suggestions: {str(e)}") from e
        except ValueError as e:
            raise NetworkError(f"Invalid place suggestion response: {str(e)}") from e

        return SuggestResponse.model_validate(data)

    def fetch_route_document(self, query: RouteSearchQuery) -> RouteDocument:
        """Fetch the route search results page.

        Args:
            query: Route search query

        Returns:
            Final URL after redirects and the page markup

        Raises:
            NetworkError: If the request fails
        """
        try:
            response = self.session.get(
                ROUTE_SEARCH_URL, params=query.to_params(), timeout=self.timeout
            )
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"Failed to fetch route data: {str(e)}") from e

        logger.info(f"Fetched route search page: {response.url}")
        return RouteDocument(final_url=response.url, body=response.text)
