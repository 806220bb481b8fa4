from __future__ import annotations

from unittest.mock import AsyncMock, patch

from roster.services.employee_api import employee_api


def test_health_returns_status_and_services(client):
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] in ("healthy", "degraded")
    assert "version" in data
    assert "services" in data
    assert "employee_api" in data["services"]


def test_health_not_configured_is_healthy(client):
    response = client.get("/api/v1/health")
    data = response.json()
    assert data["status"] == "healthy"
    assert data["services"]["employee_api"] == "not_configured"


def test_health_degraded_when_remote_unreachable(client):
    with (
        patch.object(employee_api, "initialized", True),
        patch.object(employee_api, "check_connection", AsyncMock(return_value=False)),
    ):
        data = client.get("/api/v1/health").json()

    assert data["status"] == "degraded"
    assert data["services"]["employee_api"] == "error"


def test_readiness_probe(client):
    response = client.get("/api/v1/health/ready")
    assert response.status_code == 200
    data = response.json()
    assert data["ready"] is True
