"""FastAPI application entrypoint."""

import asyncio
import contextlib
import logging
import os
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from app.api.pages import router as pages_router
from app.api.v1 import v1_router
from app.core.cache import TTLCache, run_sweeper
from app.core.config import get_settings
from app.models.media import Media
from app.services.feed import FeedService
from app.services.instagram import InstagramClient

logger = logging.getLogger(__name__)

PUBLIC_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "public")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    # Startup: shared caches, pooled HTTP client, background sweep
    settings = get_settings()
    user_ids: TTLCache[str] = TTLCache(default_ttl=settings.cache_ttl_seconds)
    media: TTLCache[list[Media]] = TTLCache(default_ttl=settings.cache_ttl_seconds)

    http = httpx.AsyncClient(timeout=settings.upstream_timeout_seconds)
    client = InstagramClient(
        http,
        base_url=settings.instagram_base_url,
        client_id=settings.instagram_client_id,
    )
    app.state.feed = FeedService(
        client=client,
        user_ids=user_ids,
        media=media,
        username=settings.instagram_username,
        media_count=settings.media_count,
        items_per_row=settings.items_per_row,
    )
    sweeper = asyncio.create_task(
        run_sweeper([user_ids, media], settings.cache_sweep_interval_seconds)
    )
    logger.info(
        "Feed for %s ready (ttl=%ss, sweep every %ss)",
        settings.instagram_username,
        settings.cache_ttl_seconds,
        settings.cache_sweep_interval_seconds,
    )
    yield
    # Shutdown: stop the sweep, close upstream connections
    sweeper.cancel()
    with contextlib.suppress(asyncio.CancelledError):
        await sweeper
    await http.aclose()


app = FastAPI(
    title="Photo Feed",
    version="0.1.0",
    description="Cached photo feed laid out in a responsive grid",
    lifespan=lifespan,
)

# ── Routes ───────────────────────────────────────────────────
app.include_router(pages_router)
app.include_router(v1_router)


@app.get("/health", tags=["system"])
async def health_check() -> dict:
    return {"status": "ok"}


# ── Static assets ────────────────────────────────────────────
if os.path.isdir(PUBLIC_DIR):
    app.mount(
        "/js",
        StaticFiles(directory=os.path.join(PUBLIC_DIR, "js")),
        name="js",
    )
    app.mount(
        "/css",
        StaticFiles(directory=os.path.join(PUBLIC_DIR, "css")),
        name="css",
    )


def run() -> None:
    """Serve the app with uvicorn on the configured host and port."""
    import uvicorn

    settings = get_settings()
    uvicorn.run("app.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
