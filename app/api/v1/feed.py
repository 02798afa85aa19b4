"""Feed endpoint — the grid page data as JSON."""

import logging

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from app.api.deps import Feed
from app.services.grid import GridRow
from app.services.instagram import UpstreamError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/feed", tags=["feed"])


# ── Schemas ──────────────────────────────────────────────────

class CellOut(BaseModel):
    kind: str  # "media" or "empty"
    id: str | None = None
    href: str = ""
    image_url: str = ""
    caption: str = ""


class FeedOut(BaseModel):
    username: str
    column_width: int
    media_count: int
    rows: list[list[CellOut]]


def _row_out(row: GridRow) -> list[CellOut]:
    cells: list[CellOut] = []
    for cell in row.cells:
        if cell.is_empty:
            cells.append(CellOut(kind="empty"))
            continue
        media = cell.item
        cells.append(CellOut(
            kind="media",
            id=media.id,
            href=cell.href,
            image_url=media.image_url,
            caption=media.caption_text,
        ))
    return cells


# ── Routes ───────────────────────────────────────────────────

@router.get("", response_model=FeedOut)
async def get_feed(feed: Feed) -> FeedOut:
    """Recent media of the configured account, laid out in grid rows."""
    try:
        page = await feed.get_page()
    except UpstreamError as exc:
        logger.warning("Feed unavailable: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(exc),
        ) from exc

    return FeedOut(
        username=page.username,
        column_width=page.column_width,
        media_count=page.media_count,
        rows=[_row_out(row) for row in page.rows],
    )
