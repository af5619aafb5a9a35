"""Custom exceptions for Japanese transfer search."""


class TransitSearchError(Exception):
    """Base exception for transfer search errors."""

    pass


class DocumentFormatError(TransitSearchError):
    """Raised when a document is not a route search results page."""

    pass


class RouteParseError(TransitSearchError):
    """Raised when a single route block cannot be assembled."""

    def __init__(self, route_number: int, message: str):
        super().__init__(f"Route {route_number}: {message}")
        self.route_number = route_number


class NetworkError(TransitSearchError):
    """Raised when there's a network-related error."""

    pass


class ValidationError(TransitSearchError):
    """Raised when input validation fails."""

    pass
