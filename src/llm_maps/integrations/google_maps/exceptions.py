"""
Custom exceptions for the Google Maps client.
"""


class GoogleMapsError(Exception):
    """Base exception for all Google Maps client errors."""

    pass


class GoogleMapsApiError(GoogleMapsError):
    """Raised when the API answers with a status other than OK or ZERO_RESULTS."""

    def __init__(self, status: str, error_message: str | None = None) -> None:
        self.status = status
        self.error_message = error_message
        detail = f"{status}: {error_message}" if error_message else status
        super().__init__(detail)


class GoogleMapsResponseError(GoogleMapsError):
    """Raised when a response payload does not have the expected shape."""

    pass
