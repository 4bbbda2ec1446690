"""Web routes (HTML) showing and setting flash messages."""

from pathlib import Path

from fastapi import APIRouter, Query, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from flashcookie.config import get_settings
from flashcookie.messages import Flash, Level
from flashcookie.middleware import set_flash, take_flash

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parents[1] / "templates"))

router = APIRouter()


@router.get("/", response_class=HTMLResponse, tags=["web"])
def index(request: Request) -> HTMLResponse:
    """Render home page with any pending flash messages."""
    messages = list(take_flash(request))
    return templates.TemplateResponse(
        request, "index.html", {"title": get_settings().app_name, "messages": messages}
    )


@router.get("/demo/flash", tags=["web"])
def demo_flash(
    request: Request,
    msg: str = "Operation completed",
    level: str = Query(default="success", pattern="^(debug|info|success|warning|error)$"),
) -> RedirectResponse:
    """Set a one-time message and redirect to home."""
    set_flash(request, Flash().push(Level[level.upper()], msg))
    return RedirectResponse("/", status_code=303)


@router.get("/health", tags=["infra"])
def health(request: Request) -> dict[str, str]:
    """Return service health and the flash cookie in use."""
    return {"status": "ok", "flash_cookie": request.state.flash_store.cookie_name}
