"""Upstream photo API client — user search and recent media via httpx."""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from app.models.media import Media
from app.models.response import MediasResponse, UsersResponse

logger = logging.getLogger(__name__)


class UpstreamError(Exception):
    """The upstream API could not be reached or answered with an error."""


class InstagramClient:
    """Thin async wrapper around the public v1 endpoints.

    The ``httpx.AsyncClient`` is owned by the caller (the app lifespan) so
    connections are pooled across requests.
    """

    def __init__(self, http: httpx.AsyncClient, base_url: str, client_id: str) -> None:
        self._http = http
        self._base_url = base_url.rstrip("/")
        self._client_id = client_id

    async def search_user_id(self, username: str) -> str:
        """Return the id of the account whose username matches exactly."""
        body = await self._get("/users/search", {"q": username})
        try:
            resp = UsersResponse.model_validate(body)
        except ValidationError as exc:
            raise UpstreamError(f"Malformed user search response: {exc}") from exc

        if not resp.meta.ok:
            raise UpstreamError(resp.meta.error_message or f"meta code {resp.meta.code}")

        for user in resp.data:
            if user.username == username:
                return user.id
        raise UpstreamError(f"user {username!r} not found")

    async def recent_media(self, user_id: str, count: int) -> list[Media]:
        """Return up to ``count`` of the user's most recent posts."""
        body = await self._get(f"/users/{user_id}/media/recent/", {"count": count})
        try:
            resp = MediasResponse.model_validate(body)
        except ValidationError as exc:
            raise UpstreamError(f"Malformed media response: {exc}") from exc

        if not resp.meta.ok:
            raise UpstreamError(resp.meta.error_message or f"meta code {resp.meta.code}")
        return resp.data

    async def _get(self, path: str, params: dict) -> object:
        url = f"{self._base_url}{path}"
        try:
            response = await self._http.get(
                url, params={**params, "client_id": self._client_id}
            )
        except httpx.HTTPError as exc:
            logger.warning("Upstream request to %s failed: %s", url, exc)
            raise UpstreamError(f"Upstream request failed: {exc}") from exc

        # Error responses still carry a JSON envelope with meta.error_message
        try:
            return response.json()
        except ValueError as exc:
            raise UpstreamError(
                f"Upstream returned non-JSON body (HTTP {response.status_code})"
            ) from exc
