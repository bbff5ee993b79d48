"""Shared fixtures for the Alexa skill service tests."""

from datetime import datetime, timezone
from typing import Any, Callable

import pytest
from fastapi.testclient import TestClient

from src.alexa_skill_service.config import Settings
from src.alexa_skill_service.main import app
from src.alexa_skill_service.models.request import RequestEnvelope

APP_ID = "amzn1.ask.skill.11111111-2222-3333-4444-555555555555"


def utc_timestamp(when: datetime | None = None) -> str:
    """Format a time the way Alexa sends request timestamps."""
    return (when or datetime.now(timezone.utc)).strftime("%Y-%m-%dT%H:%M:%SZ")


def envelope_payload(
    request_type: str = "LaunchRequest",
    new: bool = False,
    application_id: str = APP_ID,
    timestamp: str | None = None,
    intent: dict[str, Any] | None = None,
    attributes: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Build a raw Alexa request envelope."""
    request: dict[str, Any] = {
        "type": request_type,
        "requestId": "amzn1.echo-api.request.0001",
        "timestamp": timestamp if timestamp is not None else utc_timestamp(),
        "locale": "en-US",
    }
    if intent is not None:
        request["intent"] = intent

    return {
        "version": "1.0",
        "session": {
            "new": new,
            "sessionId": "amzn1.echo-api.session.0001",
            "attributes": attributes or {},
            "user": {"userId": "amzn1.ask.account.TEST"},
            "application": {"applicationId": application_id},
        },
        "request": request,
        "context": {
            "System": {
                "application": {"applicationId": application_id},
                "device": {"deviceId": "amzn1.ask.device.TEST", "supportedInterfaces": {}},
                "apiEndpoint": "https://api.amazonalexa.com",
            }
        },
    }


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture
def skill_settings() -> Settings:
    return Settings(
        application_id=APP_ID,
        ignore_application_id=False,
        ignore_timestamp=False,
        timestamp_tolerance=150,
    )


@pytest.fixture
def make_envelope() -> Callable[..., RequestEnvelope]:
    """Return a factory building decoded request envelopes."""

    def _make(**kwargs: Any) -> RequestEnvelope:
        return RequestEnvelope.model_validate(envelope_payload(**kwargs))

    return _make
