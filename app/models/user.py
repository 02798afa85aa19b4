"""User model — an upstream account that owns media."""

from pydantic import BaseModel, ConfigDict


class User(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    username: str
    first_name: str = ""
    last_name: str = ""
    profile_picture: str = ""
    full_name: str = ""
