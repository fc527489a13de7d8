"""
Basic application tests.

Validates that the FastAPI app starts correctly and the
health endpoint responds as expected.
"""

import logging

from fastapi.testclient import TestClient

from bodyguard.main import app
from bodyguard.shared.logging import configure_logging

client = TestClient(app)


class TestHealthEndpoint:
    """Tests for the health check endpoint."""

    def test_health_returns_200(self) -> None:
        """Health endpoint must return HTTP 200 with status ok."""
        response = client.get("/api/v1/health")
        assert response.status_code == 200

    def test_health_response_body(self) -> None:
        """Health endpoint must return status, service and version fields."""
        response = client.get("/api/v1/health")
        body = response.json()
        assert body["status"] == "ok"
        assert body["service"] == "Bodyguard"
        assert "version" in body


class TestSecurityHeaders:
    """Tests for security headers on responses."""

    def test_security_headers_present(self) -> None:
        """Security headers must be present on successful responses."""
        response = client.get("/api/v1/health")
        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"
        assert "Content-Security-Policy" in response.headers

    def test_security_headers_on_error_responses(self) -> None:
        """Rejected bodies carry the same headers."""
        response = client.post("/api/v1/payloads", content=b"{}")
        assert response.status_code == 400
        assert response.headers["X-Content-Type-Options"] == "nosniff"

    def test_docs_disabled_outside_debug(self) -> None:
        """API docs are not served unless debug is enabled."""
        response = client.get("/docs")
        assert response.status_code == 404


class TestLoggingConfiguration:
    """Tests for configure_logging."""

    def test_level_and_access_log_suppression(self) -> None:
        """Root level follows the setting; server access lines are quieted."""
        configure_logging("debug")
        try:
            assert logging.getLogger().level == logging.DEBUG
            assert logging.getLogger("uvicorn.access").level == logging.WARNING
        finally:
            configure_logging("INFO")
