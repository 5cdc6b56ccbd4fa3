from urllib.parse import quote

from pydantic import Field

from .base import BaseMapsModel
from .places import URI_COMPONENT_SAFE

MAPS_DIRECTIONS_URL = "https://www.google.com/maps/dir/?api=1"


class TextValue(BaseMapsModel):
    """Distance or duration with its human readable text."""

    text: str
    value: int | None = None


class Leg(BaseMapsModel):
    """One origin-to-destination segment of a route."""

    distance: TextValue
    duration: TextValue
    start_address: str
    end_address: str


class Route(BaseMapsModel):
    """Route returned by the Directions API."""

    summary: str = ""
    legs: list[Leg] = Field(min_length=1)


class DirectionsQuery(BaseMapsModel):
    """Body of a directions request."""

    origin: str | None = Field(default=None, description="Start address or place")
    destination: str | None = Field(default=None, description="End address or place")


class DirectionsResult(BaseMapsModel):
    """Simplified route returned to the caller."""

    summary: str
    distance: str
    duration: str
    start_address: str
    end_address: str
    directions_url: str

    @classmethod
    def from_route(
        cls, route: Route, origin: str, destination: str
    ) -> "DirectionsResult":
        leg = route.legs[0]
        return cls(
            summary=route.summary,
            distance=leg.distance.text,
            duration=leg.duration.text,
            start_address=leg.start_address,
            end_address=leg.end_address,
            directions_url=directions_url(origin, destination),
        )


def directions_url(origin: str, destination: str) -> str:
    """Deep link opening turn-by-turn directions in Google Maps."""
    return (
        f"{MAPS_DIRECTIONS_URL}&origin={quote(origin, safe=URI_COMPONENT_SAFE)}"
        f"&destination={quote(destination, safe=URI_COMPONENT_SAFE)}"
    )
