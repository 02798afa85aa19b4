"""Feed service — cached upstream lookups composed into a grid page.

Flow:
  1. Resolve the configured username to a user id (cached)
  2. Fetch that user's recent media (cached)
  3. Lay the media out in rows for the template

A failed fetch raises ``UpstreamError`` and nothing is cached, so the next
request simply tries again.  Two requests that miss at the same time both
fetch; the later ``set`` wins.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from app.core.cache import TTLCache
from app.models.media import Media
from app.services.grid import GridRow, build_grid, column_width
from app.services.instagram import InstagramClient

logger = logging.getLogger(__name__)


@dataclass
class FeedPage:
    """Everything the page template needs."""
    username: str
    rows: list[GridRow[Media]] = field(default_factory=list)
    column_width: int = 0
    media_count: int = 0


class FeedService:
    def __init__(
        self,
        client: InstagramClient,
        user_ids: TTLCache[str],
        media: TTLCache[list[Media]],
        username: str,
        media_count: int,
        items_per_row: int,
    ) -> None:
        self.client = client
        self.user_ids = user_ids
        self.media = media
        self.username = username
        self.media_count = media_count
        self.items_per_row = items_per_row

    def _user_key(self) -> str:
        return f"user:{self.username}"

    def _media_key(self, user_id: str) -> str:
        return f"media:{user_id}:{self.media_count}"

    async def get_user_id(self) -> str:
        key = self._user_key()
        user_id, found = self.user_ids.get(key)
        if found:
            return user_id

        logger.info("Cache miss for %s, searching upstream", key)
        user_id = await self.client.search_user_id(self.username)
        self.user_ids.set(key, user_id)
        return user_id

    async def get_recent_media(self, user_id: str) -> list[Media]:
        key = self._media_key(user_id)
        media, found = self.media.get(key)
        if found:
            return media

        logger.info("Cache miss for %s, fetching recent media", key)
        media = await self.client.recent_media(user_id, self.media_count)
        self.media.set(key, media)
        return media

    async def get_page(self) -> FeedPage:
        user_id = await self.get_user_id()
        media = await self.get_recent_media(user_id)
        return FeedPage(
            username=self.username,
            rows=build_grid(media, self.items_per_row),
            column_width=column_width(self.items_per_row),
            media_count=len(media),
        )

    def invalidate(self) -> None:
        """Drop cached lookups for the configured user."""
        self.user_ids.delete(self._user_key())
        # The user id entry may already have expired, so match media keys by prefix
        self.media.delete_prefix("media:")
