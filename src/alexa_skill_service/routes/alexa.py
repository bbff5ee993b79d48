"""Alexa Skill webhook endpoint."""

import logging
from functools import lru_cache
from typing import Any

from fastapi import APIRouter, HTTPException, Request

from ..config import settings
from ..exceptions import (
    HandlerFailureError,
    IdentityMismatchError,
    MalformedTimestampError,
    StaleRequestError,
)
from ..models.request import RequestEnvelope
from ..services.dispatcher import SkillDispatcher
from ..services.skill_handler import DefaultSkillHandler

logger = logging.getLogger(__name__)

router = APIRouter(tags=["alexa"])


@lru_cache(maxsize=1)
def _get_dispatcher() -> SkillDispatcher:
    """Get or create SkillDispatcher singleton."""
    return SkillDispatcher(DefaultSkillHandler(), settings)


@router.post("/alexa")
async def alexa_webhook(envelope: RequestEnvelope, request: Request) -> dict[str, Any]:
    """
    Handle Alexa Skill requests.

    The request is checked against the configured skill ID and timestamp
    tolerance before it reaches the skill. Rejected requests return:
    - 403: Application ID missing or not matching
    - 400: Timestamp unparsable or outside the tolerance
    - 500: The skill failed while handling the request

    The response is returned in Alexa response format with unset fields omitted.
    """
    logger.info(f"Alexa request received: {envelope.request.type}")

    try:
        response_envelope = await _get_dispatcher().process(envelope, request)
    except IdentityMismatchError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except (MalformedTimestampError, StaleRequestError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except HandlerFailureError as e:
        raise HTTPException(status_code=500, detail=str(e))

    return response_envelope.to_wire()
