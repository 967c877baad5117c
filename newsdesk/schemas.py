# newsdesk/schemas.py

from datetime import datetime
from typing import Any
from pydantic import BaseModel, ConfigDict, Field, field_validator


# -------------------------------
# Auth Schemas
# -------------------------------

class Credentials(BaseModel):
    username: str
    password: str


class Token(BaseModel):
    token: str
    token_type: str = "bearer"


class UserOut(BaseModel):
    id: str
    username: str


# -------------------------------
# Saved Article Schemas
# -------------------------------

class ArticlePayload(BaseModel):
    """
    Article fields sent by the frontend when saving.
    `source` may be the provider's {"id", "name"} object or a plain string.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: str | None = None
    description: str | None = None
    img_url: str | None = Field(default=None, alias="imgUrl")
    url: str
    source: str | None = None
    author: str | None = None
    published_at: str | None = Field(default=None, alias="publishedAt")

    @field_validator("source", mode="before")
    @classmethod
    def flatten_source(cls, value: Any):
        if isinstance(value, dict):
            return value.get("name") or value.get("id")
        return value


class ArticleOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str
    title: str | None = None
    description: str | None = None
    img_url: str | None = Field(default=None, serialization_alias="imgUrl")
    url: str
    source: str | None = None
    author: str | None = None
    published_at: str | None = Field(default=None, serialization_alias="publishedAt")
    saved_at: datetime | None = Field(default=None, serialization_alias="savedAt")


# -------------------------------
# Proxy Envelope
# -------------------------------

class Envelope(BaseModel):
    status: int
    success: bool
    message: str
    data: Any | None = None
    error: Any | None = None

    def to_response(self) -> dict:
        return self.model_dump(exclude_none=True)
