"""Request verification, dispatch and the default skill."""

from .dispatcher import SkillDispatcher
from .handler import RequestHandler
from .skill_handler import DefaultSkillHandler
from .verifier import verify_application_id, verify_timestamp

__all__ = [
    "SkillDispatcher",
    "RequestHandler",
    "DefaultSkillHandler",
    "verify_application_id",
    "verify_timestamp",
]
