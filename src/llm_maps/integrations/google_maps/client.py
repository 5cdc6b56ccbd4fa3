import asyncio
import logging
from typing import Any

import httpx
from pydantic import ValidationError

from llm_maps.models import Coordinates, Place, Route

from .exceptions import GoogleMapsApiError, GoogleMapsResponseError

logger = logging.getLogger(__name__)

SUCCESS_STATUSES = frozenset({"OK", "ZERO_RESULTS"})


class GoogleMapsClient:
    """Async client for the Google Maps geocoding, places and directions APIs.

    One instance wraps one ``httpx.AsyncClient`` and is safe to share across
    concurrent requests.
    """

    BASE_URL = "https://maps.googleapis.com/maps/api"
    GEOCODE_PATH = "/geocode/json"
    TEXT_SEARCH_PATH = "/place/textsearch/json"
    DIRECTIONS_PATH = "/directions/json"

    def __init__(
        self,
        api_key: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_key = api_key
        self._http = httpx.AsyncClient(
            base_url=self.BASE_URL, timeout=timeout, transport=transport
        )

    async def __aenter__(self) -> "GoogleMapsClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _request(
        self, path: str, params: dict[str, Any], key: str
    ) -> list[dict[str, Any]]:
        """GET ``path`` and return the list stored under ``key``."""
        resp = await self._http.get(path, params={**params, "key": self.api_key})
        resp.raise_for_status()
        data = resp.json()
        status = data.get("status")
        if status not in SUCCESS_STATUSES:
            raise GoogleMapsApiError(str(status), data.get("error_message"))
        results = data.get(key, [])
        if not isinstance(results, list):
            raise GoogleMapsResponseError(f"Expected '{key}' to be a list")
        logger.debug(f"{path} returned {len(results)} {key}")
        return results

    async def geocode(self, address: str) -> list[Coordinates]:
        """Resolve a free-text address to candidate coordinates."""
        results = await self._request(
            self.GEOCODE_PATH, {"address": address}, "results"
        )
        try:
            return [
                Coordinates.model_validate(item["geometry"]["location"])
                for item in results
            ]
        except (KeyError, TypeError, ValidationError) as e:
            raise GoogleMapsResponseError(f"Malformed geocode result: {e}") from e

    async def text_search(self, query: str, location: Coordinates) -> list[Place]:
        """Search places matching ``query`` biased towards ``location``."""
        results = await self._request(
            self.TEXT_SEARCH_PATH,
            {"query": query, "location": location.as_param()},
            "results",
        )
        try:
            return [Place.model_validate(item) for item in results]
        except ValidationError as e:
            raise GoogleMapsResponseError(f"Malformed place result: {e}") from e

    async def directions(self, origin: str, destination: str) -> list[Route]:
        """Get driving routes between two free-text locations."""
        results = await self._request(
            self.DIRECTIONS_PATH,
            {"origin": origin, "destination": destination},
            "routes",
        )
        try:
            return [Route.model_validate(item) for item in results]
        except ValidationError as e:
            raise GoogleMapsResponseError(f"Malformed route: {e}") from e


if __name__ == "__main__":
    import os

    async def _demo() -> None:
        async with GoogleMapsClient(os.environ["GOOGLE_MAPS_API_KEY"]) as client:
            print(await client.geocode("Nagoya Hill, Batam"))

    asyncio.run(_demo())
