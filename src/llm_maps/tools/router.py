"""
FastAPI router exposing the maps tools.
"""

import logging

from fastapi import APIRouter, Depends, Request

from llm_maps.integrations.google_maps import GoogleMapsClient
from llm_maps.models import (
    DirectionsQuery,
    DirectionsResult,
    PlaceQuery,
    PlaceResult,
    TimeResult,
)
from llm_maps.settings import Settings

from .service import MapsToolService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["tools"])

TOOL_ENDPOINTS = [
    "POST /find_places",
    "POST /get_directions",
    "GET  /get_current_time",
]


def get_maps_client(request: Request) -> GoogleMapsClient:
    """Dependency returning the process-wide Google Maps client."""
    return request.app.state.maps_client


def get_app_settings(request: Request) -> Settings:
    """Dependency returning the settings loaded at startup."""
    return request.app.state.settings


def get_tool_service(
    client: GoogleMapsClient = Depends(get_maps_client),
    settings: Settings = Depends(get_app_settings),
) -> MapsToolService:
    """Dependency binding the shared client and settings to the tools."""
    return MapsToolService(
        client=client,
        default_location=settings.default_location,
        timezone=settings.timezone,
    )


@router.post("/find_places", response_model=list[PlaceResult])
async def find_places(
    body: PlaceQuery, service: MapsToolService = Depends(get_tool_service)
):
    """
    Find places matching a query (e.g. "seafood restaurants") near a location.

    Returns at most three results.
    """
    logger.info(f"find_places query={body.query!r} location={body.location!r}")
    return await service.find_places(body)


@router.post("/get_directions", response_model=DirectionsResult)
async def get_directions(
    body: DirectionsQuery, service: MapsToolService = Depends(get_tool_service)
):
    """Get directions between an origin and a destination."""
    logger.info(
        f"get_directions origin={body.origin!r} destination={body.destination!r}"
    )
    return await service.get_directions(body)


@router.get("/get_current_time", response_model=TimeResult)
async def get_current_time(service: MapsToolService = Depends(get_tool_service)):
    """Get the current time for the service's home location."""
    return service.get_current_time()
