"""Integration tests for /health and /metrics endpoints."""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr

from wanderplan.config import Settings
from wanderplan.main import app


@pytest.fixture
def client() -> TestClient:
    """Create test client."""
    return TestClient(app)


class TestHealthEndpoint:
    """Test /health endpoint."""

    @pytest.mark.parametrize(
        "settings,expected",
        [
            (Settings(use_stub_llm=True), "stub"),
            (Settings(use_stub_llm=False, gemini_api_key=SecretStr("k")), "gemini"),
            (Settings(use_stub_llm=False, gemini_api_key=None), "not_configured"),
        ],
    )
    def test_health_reports_llm(self, client: TestClient, settings: Settings, expected: str) -> None:
        with patch("wanderplan.api.routes.health.get_settings", return_value=settings):
            response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["llm"] == expected
        assert data["model"] == "gemini-2.5-flash"


def test_root(client: TestClient) -> None:
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["message"] == "WanderPlan API"


class TestMetricsEndpoint:
    """Test /metrics endpoint."""

    def test_metrics_returns_prometheus_format(self, client: TestClient) -> None:
        """Test /metrics returns Prometheus text format."""
        response = client.get("/metrics")

        assert response.status_code == 200
        assert "text/plain" in response.headers["content-type"]

    def test_metrics_include_generation_series(self, client: TestClient) -> None:
        """Test generation metrics appear after a request."""
        client.post(
            "/itineraries",
            json={"destination": "Kyoto", "interests": ["Food"]},
        )

        body = client.get("/metrics").text

        assert "itinerary_generation_latency_ms" in body
        assert "itinerary_map_links_total" in body
