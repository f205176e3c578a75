"""Tests for health endpoints."""
from __future__ import annotations

from fastapi import status
from fastapi.testclient import TestClient


def test_health(client: TestClient):
    response = client.get("/health")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"status": "ok"}


def test_detailed_health_reports_database(client: TestClient):
    response = client.get("/health/detailed")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["status"] == "healthy"
    assert data["components"]["database"]["status"] == "healthy"
