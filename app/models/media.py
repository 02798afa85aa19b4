"""Media model — a photo or video post and its nested objects."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.models.user import User


def parse_unix_time(value: str) -> datetime:
    """Convert a string of Unix seconds to an aware UTC datetime."""
    return datetime.fromtimestamp(int(value), tz=timezone.utc)


class _Upstream(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class Image(_Upstream):
    url: str
    width: int = 0
    height: int = 0


class Images(_Upstream):
    low_resolution: Image | None = None
    thumbnail: Image | None = None
    standard_resolution: Image | None = None


class Videos(_Upstream):
    low_resolution: Image | None = None
    standard_resolution: Image | None = None


class Comment(_Upstream):
    id: str = ""
    text: str = ""
    created_time: str = ""
    from_: User | None = Field(default=None, alias="from")


class Comments(_Upstream):
    count: int = 0
    data: list[Comment] = Field(default_factory=list)


class Likes(_Upstream):
    count: int = 0
    data: list[User] = Field(default_factory=list)


class Position(_Upstream):
    x: float
    y: float


class UserPosition(_Upstream):
    user: User | None = None
    position: Position | None = None


class Location(_Upstream):
    id: str = ""
    name: str = ""
    latitude: float | None = None
    longitude: float | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _normalize_id(cls, value: object) -> str:
        # The API sends location ids either as strings or as integers
        if value is None or isinstance(value, bool):
            return ""
        if isinstance(value, (str, int)):
            return str(value)
        return ""


class Attribution(_Upstream):
    website: str = ""
    itunes_url: str = ""
    name: str = ""


class Media(_Upstream):
    id: str
    type: str = "image"
    link: str = ""
    filter: str = ""
    tags: list[str] = Field(default_factory=list)
    users_in_photo: list[UserPosition] = Field(default_factory=list)
    caption: Comment | None = None
    likes: Likes | None = None
    comments: Comments | None = None
    user: User | None = None
    created_time: str = ""
    images: Images | None = None
    videos: Videos | None = None
    location: Location | None = None
    user_has_liked: bool = False
    attribution: Attribution | None = None

    @property
    def created_at(self) -> datetime:
        """Creation time; raises ValueError when ``created_time`` is not numeric."""
        return parse_unix_time(self.created_time)

    @property
    def image_url(self) -> str:
        """Best image URL for a grid cell (standard → low → thumbnail)."""
        if self.images is None:
            return ""
        for image in (
            self.images.standard_resolution,
            self.images.low_resolution,
            self.images.thumbnail,
        ):
            if image is not None and image.url:
                return image.url
        return ""

    @property
    def caption_text(self) -> str:
        return self.caption.text if self.caption else ""
