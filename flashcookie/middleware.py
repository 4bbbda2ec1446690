"""FastAPI/Starlette integration: per-request flash handling."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, FastAPI, Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from starlette.types import ASGIApp

from flashcookie.jars import PendingCookies
from flashcookie.messages import Flash
from flashcookie.store import SignedCookieStore

_MISSING = "Flash middleware is not installed. Did you forget to call install_flash(app, store)?"


class FlashMiddleware(BaseHTTPMiddleware):
    """
    Give each request its own outgoing cookie jar and apply it to the response.

    Handlers may return any response (including redirects); pending flash
    cookie operations are added to it afterwards.
    """

    def __init__(self, app: ASGIApp, store: SignedCookieStore) -> None:
        super().__init__(app)
        self.store = store

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        pending = PendingCookies()
        request.state.flash_store = self.store
        request.state.flash_cookies = pending
        response = await call_next(request)
        pending.apply(response)
        return response


def install_flash(app: FastAPI, store: SignedCookieStore) -> None:
    """Install the flash middleware."""
    app.add_middleware(FlashMiddleware, store=store)


def _context(request: Request) -> tuple[SignedCookieStore, PendingCookies]:
    store = getattr(request.state, "flash_store", None)
    pending = getattr(request.state, "flash_cookies", None)
    if store is None or pending is None:
        raise RuntimeError(_MISSING)
    return store, pending


def take_flash(request: Request) -> Flash:
    """
    Return the incoming flash and clear its cookie.

    Only the first call per request touches the cookie jar; later calls return
    the same value, so they never undo a flash set in between.
    """
    taken = getattr(request.state, "flash_taken", None)
    if taken is not None:
        return taken
    store, pending = _context(request)
    flash = store.take(request.cookies, pending)
    request.state.flash_taken = flash
    return flash


def set_flash(request: Request, flash: Flash, *, max_age: int | None = None) -> None:
    """Send ``flash`` with the response; the latest call wins."""
    store, pending = _context(request)
    store.set(pending, flash, max_age=max_age)


IncomingFlash = Annotated[Flash, Depends(take_flash)]
