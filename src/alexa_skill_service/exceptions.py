"""Errors raised while admitting and dispatching Alexa requests."""


class SkillRequestError(Exception):
    """Base class for errors that abort processing of an Alexa request."""


class IdentityMismatchError(SkillRequestError):
    """The request's application ID is missing or does not match the configured one."""


class MalformedTimestampError(SkillRequestError):
    """The request timestamp could not be parsed as RFC 3339."""


class StaleRequestError(SkillRequestError):
    """The request timestamp is outside the allowed tolerance."""


class HandlerFailureError(SkillRequestError):
    """A request handler callback raised; the original error is the ``__cause__``."""

    def __init__(self, callback: str):
        self.callback = callback
        super().__init__(f"Request handler failed in {callback}")
