"""Google Maps integration."""

from .client import GoogleMapsClient
from .exceptions import GoogleMapsApiError, GoogleMapsError, GoogleMapsResponseError

__all__ = [
    "GoogleMapsClient",
    "GoogleMapsError",
    "GoogleMapsApiError",
    "GoogleMapsResponseError",
]
