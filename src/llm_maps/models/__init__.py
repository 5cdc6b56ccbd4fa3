"""
Shared data models for the maps tools.

Request bodies, simplified tool results, and the provider payload shapes
parsed from Google Maps responses.
"""

from .directions import DirectionsQuery, DirectionsResult, Leg, Route, TextValue
from .places import Coordinates, Place, PlaceQuery, PlaceResult
from .clock import TimeResult

__all__ = [
    # Request models
    "PlaceQuery",
    "DirectionsQuery",
    # Result models
    "PlaceResult",
    "DirectionsResult",
    "TimeResult",
    # Provider models
    "Coordinates",
    "Place",
    "Route",
    "Leg",
    "TextValue",
]
