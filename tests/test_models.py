"""Tests for request envelope decoding."""

import pytest
from pydantic import ValidationError

from src.alexa_skill_service.models.request import RequestEnvelope

INTENT_REQUEST = {
    "version": "1.0",
    "session": {
        "new": True,
        "sessionId": "amzn1.echo-api.session.abc",
        "attributes": {"cart": {"items": [1, 2]}, "lastIntent": None},
        "user": {"userId": "amzn1.ask.account.XYZ", "accessToken": "token-123"},
        "application": {"applicationId": "amzn1.ask.skill.abc"},
    },
    "request": {
        "type": "IntentRequest",
        "requestId": "amzn1.echo-api.request.abc",
        "timestamp": "2024-01-15T12:00:00Z",
        "locale": "en-GB",
        "dialogState": "IN_PROGRESS",
        "intent": {
            "name": "OrderDrinkIntent",
            "confirmationStatus": "NONE",
            "slots": {
                "drink": {
                    "name": "drink",
                    "value": "flat white",
                    "confirmationStatus": "NONE",
                    "resolutions": {
                        "resolutionsPerAuthority": [
                            {
                                "authority": "amzn1.er-authority.echo-sdk.abc.Drink",
                                "status": {"code": "ER_SUCCESS_MATCH"},
                                "values": [{"value": {"name": "Flat White", "id": "FLAT_WHITE"}}],
                            }
                        ]
                    },
                },
                "size": {"name": "size"},
            },
        },
    },
    "context": {
        "AudioPlayer": {"playerActivity": "IDLE"},
        "Display": {"token": "display-token"},
        "System": {
            "application": {"applicationId": "amzn1.ask.skill.abc"},
            "user": {"userId": "amzn1.ask.account.XYZ"},
            "device": {
                "deviceId": "amzn1.ask.device.XYZ",
                "supportedInterfaces": {
                    "AudioPlayer": {},
                    "Display": {"templateVersion": "1.0", "markupVersion": "1.0"},
                },
            },
            "apiEndpoint": "https://api.amazonalexa.com",
            "apiAccessToken": "api-token",
        },
        "Viewport": {"shape": "RECTANGLE"},
    },
}


def test_decodes_full_intent_request() -> None:
    envelope = RequestEnvelope.model_validate(INTENT_REQUEST)

    assert envelope.session.new is True
    assert envelope.session.user.accessToken == "token-123"
    assert envelope.session.attributes["cart"] == {"items": [1, 2]}
    assert envelope.request.locale == "en-GB"
    assert envelope.request.dialogState == "IN_PROGRESS"
    assert envelope.request.intent.name == "OrderDrinkIntent"
    assert envelope.context.audio_player.playerActivity == "IDLE"
    assert envelope.context.display.token == "display-token"
    assert envelope.context.system.apiAccessToken == "api-token"
    assert envelope.context.system.device.supportedInterfaces.display.templateVersion == "1.0"


def test_slot_accessors() -> None:
    intent = RequestEnvelope.model_validate(INTENT_REQUEST).request.intent

    assert intent.slot_value("drink") == "flat white"
    assert intent.slot_value("size") is None
    assert intent.slot_value("missing") is None
    assert intent.slots["drink"].resolved_value() == "Flat White"
    assert intent.slots["size"].resolved_value() is None


def test_resolved_value_skips_unmatched_authorities() -> None:
    payload = {
        "request": {
            "type": "IntentRequest",
            "intent": {
                "name": "OrderDrinkIntent",
                "slots": {
                    "drink": {
                        "name": "drink",
                        "value": "tea",
                        "resolutions": {
                            "resolutionsPerAuthority": [
                                {"authority": "a", "status": {"code": "ER_SUCCESS_NO_MATCH"}, "values": []},
                                {
                                    "authority": "b",
                                    "status": {"code": "ER_SUCCESS_MATCH"},
                                    "values": [{"value": {"name": "Green Tea", "id": "GREEN"}}],
                                },
                            ]
                        },
                    }
                },
            },
        }
    }

    slot = RequestEnvelope.model_validate(payload).request.intent.slots["drink"]

    assert slot.resolved_value() == "Green Tea"


def test_missing_session_and_context_use_defaults() -> None:
    envelope = RequestEnvelope.model_validate({"request": {"type": "AudioPlayer.PlaybackStopped"}})

    assert envelope.version == "1.0"
    assert envelope.session.new is False
    assert envelope.session.application.applicationId == ""
    assert envelope.request.intent is None
    assert envelope.context.system.apiEndpoint is None


def test_session_ended_request_reason() -> None:
    envelope = RequestEnvelope.model_validate(
        {
            "request": {
                "type": "SessionEndedRequest",
                "reason": "ERROR",
                "error": {"type": "INVALID_RESPONSE", "message": "bad speech"},
            }
        }
    )

    assert envelope.request.reason == "ERROR"
    assert envelope.request.error.type == "INVALID_RESPONSE"


def test_request_envelope_is_read_only() -> None:
    envelope = RequestEnvelope.model_validate(INTENT_REQUEST)

    with pytest.raises(ValidationError):
        envelope.request.type = "LaunchRequest"


def test_request_type_is_required() -> None:
    with pytest.raises(ValidationError):
        RequestEnvelope.model_validate({"request": {"locale": "en-US"}})
