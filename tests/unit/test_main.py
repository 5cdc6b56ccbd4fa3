"""Tests for the main FastAPI application."""

from unittest.mock import patch

from fastapi.testclient import TestClient

from llm_maps.integrations.google_maps import GoogleMapsClient
from llm_maps.main import app, create_app


class TestMainApp:
    """Test the main FastAPI application."""

    def test_app_creation(self):
        assert app.title == "LLM Maps Tools"
        assert app.version == "0.1.0"

    def test_app_routes_exist(self):
        routes = app.openapi()["paths"]

        assert "/find_places" in routes
        assert "/get_directions" in routes
        assert "/get_current_time" in routes
        assert "/" in routes

    def test_root_lists_tools(self):
        client = TestClient(create_app())

        resp = client.get("/")

        assert resp.status_code == 200
        assert resp.json()["tools"] == [
            "POST /find_places",
            "POST /get_directions",
            "GET  /get_current_time",
        ]

    def test_lifespan_builds_shared_client(self):
        """Settings and the maps client are created once at startup."""
        with patch.dict(
            "os.environ",
            {"GOOGLE_MAPS_API_KEY": "startup-key", "DEFAULT_LOCATION": "Singapore"},
            clear=True,
        ):
            test_app = create_app()
            with TestClient(test_app) as client:
                maps_client = test_app.state.maps_client
                assert isinstance(maps_client, GoogleMapsClient)
                assert maps_client.api_key == "startup-key"

                resp = client.get("/get_current_time")
                assert resp.status_code == 200
                assert resp.json()["location"] == "Singapore"

                # Same handle on every request
                client.get("/get_current_time")
                assert test_app.state.maps_client is maps_client

    def test_wrong_method_is_json(self):
        client = TestClient(create_app())

        resp = client.get("/find_places")

        assert resp.status_code == 405
        assert resp.json()
