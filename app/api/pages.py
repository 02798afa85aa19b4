"""HTML pages rendered with Jinja2 templates."""

import logging
import os

from fastapi import APIRouter, Request, status
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from app.api.deps import Feed
from app.services.instagram import UpstreamError

logger = logging.getLogger(__name__)

TEMPLATES_DIR = os.path.join(
    os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "templates"
)

templates = Jinja2Templates(directory=TEMPLATES_DIR)

router = APIRouter(tags=["pages"])


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def recent_media(request: Request, feed: Feed) -> HTMLResponse:
    """Photo grid for the configured account, or a degraded page on upstream failure."""
    try:
        page = await feed.get_page()
    except UpstreamError as exc:
        logger.warning("Rendering degraded feed page: %s", exc)
        return templates.TemplateResponse(
            request,
            "index.html",
            {"page": None, "error": str(exc), "username": feed.username},
            status_code=status.HTTP_502_BAD_GATEWAY,
        )

    return templates.TemplateResponse(
        request,
        "index.html",
        {"page": page, "error": None, "username": page.username},
    )
