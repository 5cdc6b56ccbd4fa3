"""
Shared pytest configuration and fixtures for the test suite.

Provides an in-memory stand-in for the Google Maps client and a FastAPI test
client wired to it through dependency overrides.
"""

from datetime import UTC, datetime

import pytest
from fastapi.testclient import TestClient

from llm_maps.main import app
from llm_maps.models import Coordinates, Leg, Place, Route, TextValue
from llm_maps.settings import Settings
from llm_maps.tools.router import get_app_settings, get_maps_client
from llm_maps.tools.service import MapsToolService

DEFAULT_LOCATION = "Batam, Riau Islands, Indonesia"


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests (fast, isolated)"
    )


class FakeMapsClient:
    """Records calls and replays canned provider results."""

    def __init__(self):
        self.geocode_results: list[Coordinates] = [Coordinates(lat=1.13, lng=104.05)]
        self.places: list[Place] = []
        self.routes: list[Route] = []
        self.error: Exception | None = None
        self.calls: list[tuple] = []

    async def geocode(self, address: str) -> list[Coordinates]:
        self.calls.append(("geocode", address))
        if self.error:
            raise self.error
        return self.geocode_results

    async def text_search(self, query: str, location: Coordinates) -> list[Place]:
        self.calls.append(("text_search", query, location))
        if self.error:
            raise self.error
        return self.places

    async def directions(self, origin: str, destination: str) -> list[Route]:
        self.calls.append(("directions", origin, destination))
        if self.error:
            raise self.error
        return self.routes

    def called(self, name: str) -> bool:
        return any(call[0] == name for call in self.calls)


def _make_place(idx: int, **overrides) -> Place:
    data = {
        "name": f"Place {idx}",
        "formatted_address": f"Jl. Example {idx}, Batam",
        "rating": 4.0 + idx / 10,
        "business_status": "OPERATIONAL",
        "place_id": f"pid-{idx}",
    }
    data.update(overrides)
    return Place.model_validate(data)


def _make_route(summary: str = "Jl. Raja Ali Haji") -> Route:
    return Route(
        summary=summary,
        legs=[
            Leg(
                distance=TextValue(text="7.9 km", value=7900),
                duration=TextValue(text="17 mins", value=1020),
                start_address="Batam Centre Ferry Terminal",
                end_address="Nagoya Hill Mall",
            )
        ],
    )


@pytest.fixture
def fake_client():
    return FakeMapsClient()


@pytest.fixture
def fixed_clock():
    return lambda: datetime(2024, 7, 10, 5, 30, 15, tzinfo=UTC)


@pytest.fixture
def service(fake_client, fixed_clock):
    return MapsToolService(
        client=fake_client,
        default_location=DEFAULT_LOCATION,
        timezone="Asia/Jakarta",
        clock=fixed_clock,
    )


@pytest.fixture
def test_settings():
    return Settings(
        google_maps_api_key="test-key",
        default_location=DEFAULT_LOCATION,
        timezone="Asia/Jakarta",
    )


@pytest.fixture
def api_client(fake_client, test_settings):
    app.dependency_overrides[get_maps_client] = lambda: fake_client
    app.dependency_overrides[get_app_settings] = lambda: test_settings
    client = TestClient(app)
    yield client
    app.dependency_overrides.pop(get_maps_client, None)
    app.dependency_overrides.pop(get_app_settings, None)


@pytest.fixture
def make_place():
    return _make_place


@pytest.fixture
def make_route():
    return _make_route


@pytest.fixture
def default_location():
    return DEFAULT_LOCATION
