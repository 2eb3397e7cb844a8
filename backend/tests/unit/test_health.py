from __future__ import annotations

from unittest.mock import AsyncMock, patch

import pytest

from hr_analytics.services.employee_service import employee_service


def test_health_not_configured_is_healthy(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["backend"] == "not_configured"
    assert data["services"]["employee_store"] == "not_configured"


def test_readiness_probe(client):
    response = client.get("/api/health/ready")
    assert response.status_code == 200
    assert response.json()["ready"] is True


def test_health_reports_store_error(client):
    with (
        patch.object(employee_service, "initialized", True),
        patch.object(employee_service, "check_connection", AsyncMock(return_value=False)),
    ):
        response = client.get("/api/health")

    data = response.json()
    assert data["status"] == "degraded"
    assert data["services"]["employee_store"] == "error"


def test_health_seed_file_backend(seeded_client):
    with patch.object(employee_service, "initialized", True):
        response = seeded_client.get("/api/health")

    data = response.json()
    assert data["status"] == "healthy"
    assert data["backend"] == "seed_file"
    assert data["services"]["employee_store"] == "ok"


@pytest.mark.anyio
async def test_health_async_client(async_client):
    response = await async_client.get("/api/health/ready")
    assert response.status_code == 200
