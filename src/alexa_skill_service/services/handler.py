"""Request handler interface implemented by skills."""

from typing import Any, Protocol

from ..models.request import Context, Request, Session
from ..models.response import Response


class RequestHandler(Protocol):
    """
    Lifecycle callbacks invoked by the dispatcher.

    Every callback receives the same mutable ``response`` for one request and
    builds on whatever earlier callbacks set. ``ctx`` is whatever the caller
    passed to ``SkillDispatcher.process`` and is never inspected by the
    dispatcher. Raising aborts the request.
    """

    async def on_session_started(
        self, ctx: Any, request: Request, session: Session, context: Context, response: Response
    ) -> None: ...

    async def on_launch(
        self, ctx: Any, request: Request, session: Session, context: Context, response: Response
    ) -> None: ...

    async def on_intent(
        self, ctx: Any, request: Request, session: Session, context: Context, response: Response
    ) -> None: ...

    async def on_session_ended(
        self, ctx: Any, request: Request, session: Session, context: Context, response: Response
    ) -> None: ...
