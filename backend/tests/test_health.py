"""Tests for liveness and readiness probes."""

from unittest.mock import patch

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError


def test_live(client: TestClient) -> None:
    response = client.get("/health/live")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"status": "ok", "service": "catalog-api"}


def test_ready_when_database_answers(client: TestClient) -> None:
    response = client.get("/health/ready")
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["checks"]["database"]["status"] == "healthy"


def test_not_ready_when_database_fails(client: TestClient) -> None:
    with patch("catalog.db.session.engine") as mock_engine:
        mock_engine.connect.side_effect = OperationalError(
            "SELECT 1", {}, Exception("server closed the connection")
        )
        response = client.get("/health/ready")

    assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
    detail = response.json()["detail"]
    assert detail["status"] == "unhealthy"
    assert detail["checks"]["database"]["status"] == "unhealthy"
