from typing import Any

from langchain_core.tools import BaseTool, tool

from ..models import DirectionsQuery, PlaceQuery
from ..tools.errors import ToolError
from ..tools.service import MapsToolService


async def _find_places(
    service: MapsToolService, query: str, location: str | None
) -> list[dict[str, Any]] | dict[str, Any]:
    try:
        places = await service.find_places(PlaceQuery(query=query, location=location))
    except ToolError as e:
        return e.to_payload()
    return [place.model_dump_tool() for place in places]


async def _get_directions(
    service: MapsToolService, origin: str, destination: str
) -> dict[str, Any]:
    try:
        result = await service.get_directions(
            DirectionsQuery(origin=origin, destination=destination)
        )
    except ToolError as e:
        return e.to_payload()
    return result.model_dump_tool()


def _get_current_time(service: MapsToolService) -> dict[str, Any]:
    try:
        return service.get_current_time().model_dump_tool()
    except ToolError as e:
        return e.to_payload()


def get_default_tools(service: MapsToolService) -> list[BaseTool]:
    """Return the maps tools bound to the given service.

    Failures are returned to the model as ``{"error": ...}`` or
    ``{"message": ...}`` payloads, the same bodies the HTTP routes send.
    """

    @tool
    async def find_places(query: str, location: str | None = None) -> Any:
        """Find up to three places (e.g. "seafood restaurants") near a location.

        Leave location empty or say "near me" to search around the default area.
        """
        return await _find_places(service, query, location)

    @tool
    async def get_directions(origin: str, destination: str) -> dict:
        """Get directions, distance and travel time between two places."""
        return await _get_directions(service, origin, destination)

    @tool
    def get_current_time() -> dict:
        """Get the current local date and time."""
        return _get_current_time(service)

    return [find_places, get_directions, get_current_time]
