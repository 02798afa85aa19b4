"""Envelope models — every upstream response carries ``meta`` + ``data``."""

from pydantic import BaseModel, ConfigDict, Field

from app.models.media import Media
from app.models.user import User

META_OK = 200


class Meta(BaseModel):
    model_config = ConfigDict(extra="ignore")

    code: int
    error_type: str = ""
    error_message: str = ""

    @property
    def ok(self) -> bool:
        return self.code == META_OK


class UsersResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    meta: Meta
    data: list[User] = Field(default_factory=list)


class MediasResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    meta: Meta
    data: list[Media] = Field(default_factory=list)
