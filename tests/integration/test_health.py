"""Health endpoint tests."""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from src.catalog.core.services import DbSessionService

pytestmark = pytest.mark.integration


def test_liveness(client: TestClient):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "service": "catalog-api"}


def test_readiness(client: TestClient):
    response = client.get("/health/ready")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ready"
    assert body["environment"] == "test"
    assert body["checks"]["database"] == {"status": "healthy", "type": "sqlite"}


def test_readiness_reports_unhealthy_database(client: TestClient):
    with patch.object(DbSessionService, "health_check", return_value=False):
        response = client.get("/health/ready")

    assert response.status_code == 503
    assert response.json()["status"] == "not_ready"


def test_database_health_includes_pool(client: TestClient):
    response = client.get("/health/database")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert "pool" in response.json()
