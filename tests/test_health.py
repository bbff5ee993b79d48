"""Tests for health check endpoint."""

from unittest.mock import patch

from fastapi.testclient import TestClient

from src.alexa_skill_service.config import settings


def test_health_check(client: TestClient) -> None:
    """Test that health endpoint returns healthy status."""
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert "service" in data
    assert "environment" in data


def test_health_check_returns_service_name(client: TestClient) -> None:
    """Test that health endpoint returns correct service name."""
    response = client.get("/health")
    data = response.json()
    assert data["service"] == "alexa-skill-service"


def test_health_check_reports_verification(client: TestClient) -> None:
    """Test that health endpoint reports which request checks are enabled."""
    with patch.object(settings, "ignore_timestamp", True), patch.object(
        settings, "application_id", "amzn1.ask.skill.health"
    ), patch.object(settings, "ignore_application_id", False), patch.object(
        settings, "timestamp_tolerance", 60
    ):
        response = client.get("/health")

    assert response.json()["verification"] == {
        "application_id": True,
        "timestamp": False,
        "timestamp_tolerance": 60,
    }
