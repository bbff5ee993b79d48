"""Admission checks for incoming Alexa requests."""

import logging
import re
from datetime import datetime, timezone

from ..exceptions import IdentityMismatchError, MalformedTimestampError, StaleRequestError
from ..models.request import RequestEnvelope

logger = logging.getLogger(__name__)

# Full date, full time with seconds and a mandatory offset
RFC3339_PATTERN = re.compile(
    r"\d{4}-\d{2}-\d{2}[Tt]\d{2}:\d{2}:\d{2}(\.\d+)?([Zz]|[+-]\d{2}:\d{2})"
)


def verify_application_id(expected_application_id: str, envelope: RequestEnvelope) -> None:
    """
    Check that the request was sent for this skill.

    Raises:
        IdentityMismatchError: If either ID is empty or the two differ
    """
    request_application_id = envelope.session.application.applicationId

    if not expected_application_id:
        raise IdentityMismatchError("Application ID was set to an empty string")
    if not request_application_id:
        raise IdentityMismatchError("Request application ID was set to an empty string")
    if expected_application_id != request_application_id:
        raise IdentityMismatchError("Request application ID does not match expected application ID")


def parse_timestamp(value: str) -> datetime:
    """
    Parse an RFC 3339 timestamp such as ``2024-01-15T10:30:00Z``.

    Raises:
        MalformedTimestampError: If the value is not an RFC 3339 date-time
    """
    if not RFC3339_PATTERN.fullmatch(value):
        raise MalformedTimestampError(f"Unable to parse request timestamp {value!r}: not RFC 3339")

    text = value
    if text[-1] in ("Z", "z"):
        text = text[:-1] + "+00:00"

    try:
        return datetime.fromisoformat(text)
    except ValueError as e:
        raise MalformedTimestampError(f"Unable to parse request timestamp {value!r}: {e}") from e


def verify_timestamp(
    envelope: RequestEnvelope,
    tolerance: int,
    now: datetime | None = None,
) -> None:
    """
    Reject requests whose timestamp is too far from the current time.

    The check is symmetric so both replayed and future-dated requests are
    refused. A difference of exactly ``tolerance`` seconds is accepted.

    Args:
        envelope: Incoming request envelope
        tolerance: Maximum allowed skew in seconds
        now: Reference time, defaults to the current UTC time

    Raises:
        MalformedTimestampError: If the timestamp cannot be parsed
        StaleRequestError: If the skew exceeds the tolerance
    """
    timestamp = parse_timestamp(envelope.request.timestamp)
    if now is None:
        now = datetime.now(timezone.utc)

    skew = abs((now - timestamp).total_seconds())
    if skew > tolerance:
        logger.warning(f"Rejecting request {envelope.request.requestId}: timestamp skew {skew:.0f}s")
        raise StaleRequestError(
            f"Request timestamp {timestamp.isoformat()} was off the current time "
            f"{now.isoformat()} by more than {tolerance} seconds"
        )
