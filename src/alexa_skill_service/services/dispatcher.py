"""Alexa request verification and lifecycle dispatch."""

import logging
from typing import Any

from ..config import Settings
from ..config import settings as default_settings
from ..exceptions import HandlerFailureError
from ..models.request import Context, Request, RequestEnvelope, Session
from ..models.response import PROTOCOL_VERSION, Response, ResponseEnvelope
from .handler import RequestHandler
from .verifier import verify_application_id, verify_timestamp

logger = logging.getLogger(__name__)

LAUNCH_REQUEST = "LaunchRequest"
INTENT_REQUEST = "IntentRequest"
SESSION_ENDED_REQUEST = "SessionEndedRequest"

# Request type -> handler callback. Other request types are acknowledged without a callback.
REQUEST_CALLBACKS = {
    LAUNCH_REQUEST: "on_launch",
    INTENT_REQUEST: "on_intent",
    SESSION_ENDED_REQUEST: "on_session_ended",
}


class SkillDispatcher:
    """Verifies Alexa requests and routes them to a request handler."""

    def __init__(self, handler: RequestHandler, settings: Settings | None = None):
        """Initialize the dispatcher.

        Args:
            handler: Skill implementation receiving the lifecycle callbacks
            settings: Verification settings, copied so later changes stay local
                to this dispatcher. Defaults to the environment settings.
        """
        self.handler = handler
        self.settings = (settings or default_settings).model_copy()

    def set_timestamp_tolerance(self, seconds: int) -> None:
        """Set the maximum allowed skew between request and current time."""
        self.settings.timestamp_tolerance = seconds

    async def process(self, envelope: RequestEnvelope, ctx: Any = None) -> ResponseEnvelope:
        """
        Verify an Alexa request and run the matching handler callbacks.

        A new session first gets ``on_session_started``, then exactly one of
        ``on_launch``, ``on_intent`` or ``on_session_ended`` runs depending on
        the request type. All callbacks share one Response.

        Args:
            envelope: Decoded request envelope
            ctx: Opaque value passed through to every callback

        Returns:
            Completed response envelope

        Raises:
            IdentityMismatchError: Application ID check failed
            MalformedTimestampError: Request timestamp is unparsable
            StaleRequestError: Request timestamp is outside the tolerance
            HandlerFailureError: A handler callback raised
        """
        if not self.settings.ignore_application_id:
            verify_application_id(self.settings.application_id, envelope)

        if not self.settings.ignore_timestamp:
            verify_timestamp(envelope, self.settings.timestamp_tolerance)
        else:
            logger.warning("Ignoring timestamp verification.")

        request = envelope.request
        session = envelope.session
        context = envelope.context

        response = Response()
        response_envelope = ResponseEnvelope(version=PROTOCOL_VERSION, response=response)

        if session.new:
            await self._invoke("on_session_started", ctx, request, session, context, response)

        callback = REQUEST_CALLBACKS.get(request.type)
        if callback:
            logger.info(f"Dispatching {request.type} {request.requestId} to {callback}")
            await self._invoke(callback, ctx, request, session, context, response)
        else:
            logger.debug(f"No handler callback for request type: {request.type}")

        if response.session_attributes:
            response_envelope.sessionAttributes = dict(response.session_attributes)

        return response_envelope

    async def _invoke(
        self,
        callback: str,
        ctx: Any,
        request: Request,
        session: Session,
        context: Context,
        response: Response,
    ) -> None:
        try:
            await getattr(self.handler, callback)(ctx, request, session, context, response)
        except Exception as e:
            logger.exception(f"Error handling {callback}")
            raise HandlerFailureError(callback) from e
