"""Pydantic models for Alexa request/response envelopes."""

from .directives import (
    AudioPlayerDirective,
    DelegateDirective,
    DialogDirective,
    Directive,
    DisplayDirective,
    DisplayImage,
    VideoAppDirective,
)
from .request import Context, Intent, IntentSlot, Request, RequestEnvelope, Session
from .response import PROTOCOL_VERSION, Response, ResponseEnvelope

__all__ = [
    "RequestEnvelope",
    "Request",
    "Session",
    "Context",
    "Intent",
    "IntentSlot",
    "ResponseEnvelope",
    "Response",
    "PROTOCOL_VERSION",
    "Directive",
    "AudioPlayerDirective",
    "VideoAppDirective",
    "DialogDirective",
    "DelegateDirective",
    "DisplayDirective",
    "DisplayImage",
]
