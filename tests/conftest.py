"""Shared test fixtures — fake clock, in-memory caches, mocked upstream + test client."""

from collections.abc import AsyncGenerator
from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient

from app.api.deps import get_feed_service
from app.core.cache import TTLCache
from app.main import app
from app.models.media import Media
from app.services.feed import FeedService


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def make_media(n: int) -> list[Media]:
    return [
        Media.model_validate({
            "id": f"m{i}",
            "type": "image",
            "link": f"https://photos.example/p/{i}/",
            "created_time": str(1_450_000_000 + i),
            "caption": {"id": f"c{i}", "text": f"Bouquet {i}"},
            "images": {
                "standard_resolution": {
                    "url": f"https://cdn.example/{i}.jpg",
                    "width": 640,
                    "height": 640,
                },
            },
        })
        for i in range(n)
    ]


@pytest.fixture
def media_factory():
    return make_media


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def upstream() -> AsyncMock:
    """Stand-in for InstagramClient with canned responses."""
    client = AsyncMock()
    client.search_user_id.return_value = "1234"
    client.recent_media.return_value = make_media(10)
    return client


@pytest.fixture
def feed_service(clock: FakeClock, upstream: AsyncMock) -> FeedService:
    return FeedService(
        client=upstream,
        user_ids=TTLCache(default_ttl=300, clock=clock),
        media=TTLCache(default_ttl=300, clock=clock),
        username="mimozaflowers",
        media_count=20,
        items_per_row=4,
    )


@pytest.fixture
async def client(feed_service: FeedService) -> AsyncGenerator[AsyncClient, None]:
    """HTTPX async test client with the feed service override."""
    app.dependency_overrides[get_feed_service] = lambda: feed_service

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
