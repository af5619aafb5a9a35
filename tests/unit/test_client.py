"""Unit tests for the Jorudan HTTP client."""

from datetime import datetime
from urllib.parse import parse_qs, urlparse

import pytest
import requests
import responses

from japan_transfer.core.client import ROUTE_SEARCH_URL, SUGGEST_URL, JorudanClient
from japan_transfer.core.exceptions import NetworkError
from japan_transfer.core.models import RouteSearchQuery, SuggestQuery


@pytest.fixture
def route_query():
    return RouteSearchQuery(
        from_place="東京",
        to_place="荻窪",
        search_datetime=datetime(2025, 7, 10, 9, 0),
    )


class TestJorudanClient:
    """Test Jorudan client."""

    def test_client_initialization(self):
        """Test client initialization."""
        client = JorudanClient()
        assert client.timeout == 30
        assert "Mozilla" in client.session.headers["User-Agent"]

        assert JorudanClient(timeout=60).timeout == 60

    @responses.activate
    def test_fetch_suggest(self, sample_suggest_data):
        """Test place suggestion fetching."""
        responses.add(responses.GET, SUGGEST_URL, json=sample_suggest_data, status=200)

        response = JorudanClient().fetch_suggest(SuggestQuery(query="東京"))

        assert len(response.railway) == 2
        assert response.spots[0].poi_name == "東京タワー"
        params = parse_qs(urlparse(responses.calls[0].request.url).query)
        assert params["query"] == ["東京"]
        assert params["format"] == ["json"]

    @responses.activate
    def test_fetch_suggest_http_error(self):
        responses.add(responses.GET, SUGGEST_URL, status=500)

        with pytest.raises(NetworkError, match="Failed to fetch place suggestions"):
            JorudanClient().fetch_suggest(SuggestQuery(query="東京"))

    @responses.activate
    def test_fetch_suggest_invalid_json(self):
        responses.add(responses.GET, SUGGEST_URL, body="<html></html>", status=200)

        with pytest.raises(NetworkError):
            JorudanClient().fetch_suggest(SuggestQuery(query="東京"))

    @responses.activate
    def test_fetch_route_document(self, route_query, sample_jorudan_response):
        """Test fetching the results page."""
        responses.add(
            responses.GET,
            ROUTE_SEARCH_URL,
            body=sample_jorudan_response,
            status=200,
            content_type="text/html; charset=utf-8",
        )

        document = JorudanClient().fetch_route_document(route_query)

        assert document.final_url.startswith(ROUTE_SEARCH_URL)
        assert "Bk_route1" in document.body
        params = parse_qs(urlparse(document.final_url).query)
        assert params["eki1"] == ["東京"]
        assert params["eki2"] == ["荻窪"]
        assert params["Cway"] == ["0"]

    @responses.activate
    def test_fetch_route_document_connection_error(self, route_query):
        responses.add(
            responses.GET,
            ROUTE_SEARCH_URL,
            body=requests.exceptions.ConnectionError("connection refused"),
        )

        with pytest.raises(NetworkError, match="Failed to fetch route data"):
            JorudanClient().fetch_route_document(route_query)

    @responses.activate
    def test_fetch_route_document_timeout(self, route_query):
        responses.add(
            responses.GET,
            ROUTE_SEARCH_URL,
            body=requests.exceptions.Timeout("timed out"),
        )

        with pytest.raises(NetworkError):
            JorudanClient(timeout=1).fetch_route_document(route_query)
