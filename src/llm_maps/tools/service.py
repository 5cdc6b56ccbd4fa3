import logging
from collections.abc import Callable
from datetime import UTC, datetime
from zoneinfo import ZoneInfo

from llm_maps.integrations.google_maps import GoogleMapsClient
from llm_maps.models import (
    DirectionsQuery,
    DirectionsResult,
    PlaceQuery,
    PlaceResult,
    TimeResult,
)
from llm_maps.models.clock import format_long_time

from .errors import InternalError, NotFoundError, ToolError, ValidationError

logger = logging.getLogger(__name__)

MAX_PLACES = 3

FIND_PLACES_FAILED = "An internal server error occurred while finding places."
DIRECTIONS_FAILED = "An internal server error occurred while getting directions."
TIME_FAILED = "An internal server error occurred while getting the time."


def _utc_now() -> datetime:
    return datetime.now(UTC)


class MapsToolService:
    """The maps tools, independent of the transport that exposes them.

    Each operation either returns its result model or raises a ``ToolError``;
    provider and unexpected failures are logged and turned into an
    ``InternalError`` with a fixed message.
    """

    def __init__(
        self,
        client: GoogleMapsClient,
        default_location: str,
        timezone: str = "Asia/Jakarta",
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self.client = client
        self.default_location = default_location
        self.timezone = timezone
        self._clock = clock

    async def find_places(self, request: PlaceQuery) -> list[PlaceResult]:
        """Find up to three places matching the query near a location."""
        if not request.query:
            raise ValidationError("A 'query' is required in the request body.")

        try:
            address = request.search_address(self.default_location)
            coordinates = await self.client.geocode(address)
            if not coordinates:
                raise NotFoundError(f"Could not find the location: {address}")

            places = await self.client.text_search(request.query, coordinates[0])
            if not places:
                raise NotFoundError(
                    f"No places found for '{request.query}' near '{address}'.",
                    key="message",
                )
            logger.info(f"Found {len(places)} places near {address!r}")
            return [PlaceResult.from_place(place) for place in places[:MAX_PLACES]]
        except ToolError:
            raise
        except Exception as e:
            logger.error(f"Error in find_places: {e}")
            raise InternalError(FIND_PLACES_FAILED) from e

    async def get_directions(self, request: DirectionsQuery) -> DirectionsResult:
        """Get the first route between origin and destination."""
        if not request.origin or not request.destination:
            raise ValidationError("Both 'origin' and 'destination' are required.")

        try:
            routes = await self.client.directions(request.origin, request.destination)
            if not routes:
                raise NotFoundError(
                    f"Could not find directions from '{request.origin}' "
                    f"to '{request.destination}'.",
                    key="message",
                )
            return DirectionsResult.from_route(
                routes[0], request.origin, request.destination
            )
        except ToolError:
            raise
        except Exception as e:
            logger.error(f"Error in get_directions: {e}")
            raise InternalError(DIRECTIONS_FAILED) from e

    def get_current_time(self) -> TimeResult:
        """Current time in the configured timezone."""
        try:
            now = self._clock().astimezone(ZoneInfo(self.timezone))
            return TimeResult(
                current_time=format_long_time(now),
                timezone=self.timezone,
                location=self.default_location,
            )
        except Exception as e:
            logger.error(f"Error in get_current_time: {e}")
            raise InternalError(TIME_FAILED) from e
