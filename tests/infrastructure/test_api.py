"""Tests for the health check API."""

from __future__ import annotations

from fastapi.testclient import TestClient

from rancher_ecr_credentials.infrastructure.adapters.api import create_app


class TestHealthApi:
    """Tests for the /ping endpoint."""

    def test_ping_returns_fixed_payload(self) -> None:
        """Liveness is reported with a fixed payload."""
        with TestClient(create_app(version="1.2.3")) as client:
            response = client.get("/ping")

        assert response.status_code == 200
        assert response.json() == {"status": "pong!", "version": "1.2.3"}

    def test_unknown_route(self) -> None:
        """Only the liveness route is served."""
        with TestClient(create_app()) as client:
            assert client.get("/api/v1/report").status_code == 404
