from urllib.parse import quote

from pydantic import Field

from .base import BaseMapsModel

NO_RATING = "No rating"
UNKNOWN_STATUS = "UNKNOWN"
NEAR_ME = "near me"

MAPS_SEARCH_URL = "https://www.google.com/maps/search/?api=1"
# Left unescaped in deep-link query values
URI_COMPONENT_SAFE = "!*'()"


class Coordinates(BaseMapsModel):
    """Latitude/longitude pair as returned by the geocoding API."""

    lat: float = Field(description="Latitude")
    lng: float = Field(description="Longitude")

    def as_param(self) -> str:
        return f"{self.lat},{self.lng}"


class Place(BaseMapsModel):
    """Single place entry from a Places text search."""

    name: str = Field(description="Place name")
    formatted_address: str | None = Field(default=None, description="Address")
    rating: float | None = Field(default=None, description="Average user rating")
    business_status: str | None = Field(
        default=None, description="OPERATIONAL, CLOSED_TEMPORARILY, ..."
    )
    place_id: str = Field(description="Google place identifier")


class PlaceQuery(BaseMapsModel):
    """Body of a place search request."""

    query: str | None = Field(default=None, description="What to look for")
    location: str | None = Field(
        default=None, description="Where to look; omitted or 'near me' uses the default"
    )

    def search_address(self, default_location: str) -> str:
        """Address to geocode, falling back to ``default_location``."""
        if not self.location or NEAR_ME in self.location.lower():
            return default_location
        return self.location


class PlaceResult(BaseMapsModel):
    """Simplified place returned to the caller."""

    name: str
    address: str | None = None
    rating: float | str = NO_RATING
    status: str = UNKNOWN_STATUS
    map_url: str

    @classmethod
    def from_place(cls, place: Place) -> "PlaceResult":
        return cls(
            name=place.name,
            address=place.formatted_address,
            rating=place.rating or NO_RATING,
            status=place.business_status or UNKNOWN_STATUS,
            map_url=place_map_url(place.name, place.place_id),
        )


def place_map_url(name: str, place_id: str) -> str:
    """Deep link opening a place in Google Maps."""
    encoded = quote(name, safe=URI_COMPONENT_SAFE)
    return f"{MAPS_SEARCH_URL}&query={encoded}&query_place_id={place_id}"
