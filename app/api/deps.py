"""FastAPI dependencies for resources created in the app lifespan."""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from app.services.feed import FeedService


def get_feed_service(request: Request) -> FeedService:
    """Return the process-wide FeedService built at startup."""
    feed = getattr(request.app.state, "feed", None)
    if feed is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Feed service is not initialised",
        )
    return feed


# Typed shorthand for use in route signatures
Feed = Annotated[FeedService, Depends(get_feed_service)]
