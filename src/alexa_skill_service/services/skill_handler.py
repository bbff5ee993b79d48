"""Default Alexa skill served by the webhook."""

import logging
from typing import Any

from ..models.request import Context, Request, Session
from ..models.response import Response

logger = logging.getLogger(__name__)

WELCOME_SPEECH = "Welcome. Ask me for help to hear what I can do."
WELCOME_REPROMPT = "Try saying: help."
HELP_SPEECH = "You can say help to hear this again, or stop to leave the skill."
FALLBACK_SPEECH = "I'm not sure how to help with that. Try saying: help."
GOODBYE_SPEECH = "Goodbye!"

STOP_INTENTS = ["AMAZON.CancelIntent", "AMAZON.StopIntent"]


class DefaultSkillHandler:
    """
    Minimal skill answering the built-in intents.

    Supported requests:
    - LaunchRequest: Welcome message, session stays open
    - AMAZON.HelpIntent: Usage instructions
    - AMAZON.CancelIntent / AMAZON.StopIntent: Exit
    - AMAZON.FallbackIntent and anything else: Fallback prompt
    """

    async def on_session_started(
        self, ctx: Any, request: Request, session: Session, context: Context, response: Response
    ) -> None:
        logger.info(f"Session started: {session.sessionId}")
        response.set_session_attribute("turns", 0)

    async def on_launch(
        self, ctx: Any, request: Request, session: Session, context: Context, response: Response
    ) -> None:
        response.set_output_text(WELCOME_SPEECH).set_reprompt_text(WELCOME_REPROMPT)
        response.set_should_end_session(False)

    async def on_intent(
        self, ctx: Any, request: Request, session: Session, context: Context, response: Response
    ) -> None:
        intent_name = request.intent.name if request.intent else ""
        logger.info(f"Alexa intent: {intent_name}")

        # Any JSON value the client echoed back
        turns = session.attributes.get("turns")
        if not isinstance(turns, int):
            turns = 0
        response.set_session_attribute("turns", turns + 1)

        if intent_name == "AMAZON.HelpIntent":
            response.set_output_text(HELP_SPEECH).set_reprompt_text(HELP_SPEECH)
            response.set_should_end_session(False)
            return

        if intent_name in STOP_INTENTS:
            response.set_output_text(GOODBYE_SPEECH).set_should_end_session(True)
            return

        response.set_output_text(FALLBACK_SPEECH).set_should_end_session(False)

    async def on_session_ended(
        self, ctx: Any, request: Request, session: Session, context: Context, response: Response
    ) -> None:
        # The platform ignores any speech sent for SessionEndedRequest.
        logger.info(f"Session ended: {session.sessionId} ({request.reason})")
