"""Reference application: set a flash, redirect, render it once.

Run with ``uvicorn --factory flashcookie.main:create_app``.
"""

from fastapi import FastAPI

from flashcookie.config import get_settings
from flashcookie.logging import configure_logging
from flashcookie.middleware import install_flash
from flashcookie.routes import home
from flashcookie.store import SignedCookieStore


def create_app(*, force_debug: bool | None = None) -> FastAPI:
    """
    Create and configure a FastAPI application instance.

    Raises MissingSigningKey when FLASH_SIGNING_KEY is not configured, so a
    misconfigured app never starts.

    force_debug:
        - None: use settings.debug.
        - True/False: override it.
    """
    # Clear cached settings to ensure fresh config on app creation (tests with monkeypatch)
    get_settings.cache_clear()
    settings = get_settings()
    configure_logging(settings.log_level.upper())

    store = SignedCookieStore.from_settings(settings)

    debug = settings.debug if force_debug is None else bool(force_debug)
    app = FastAPI(title=settings.app_name, debug=debug)

    install_flash(app, store)

    app.include_router(home.router)

    return app
