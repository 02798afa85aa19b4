"""Upstream API response models."""

from app.models.media import (
    Attribution,
    Comment,
    Comments,
    Image,
    Images,
    Likes,
    Location,
    Media,
    Position,
    UserPosition,
    Videos,
)
from app.models.response import MediasResponse, Meta, UsersResponse
from app.models.user import User

__all__ = [
    "Attribution",
    "Comment",
    "Comments",
    "Image",
    "Images",
    "Likes",
    "Location",
    "Media",
    "MediasResponse",
    "Meta",
    "Position",
    "User",
    "UserPosition",
    "UsersResponse",
    "Videos",
]
