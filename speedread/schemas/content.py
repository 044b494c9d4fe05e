"""Pydantic schemas for the content store API."""

from typing import Optional

from pydantic import Field, StrictStr

from speedread.schemas.settings import CamelModel


class ContentSubmitRequest(CamelModel):
    text: StrictStr = Field(min_length=1)
    source: Optional[str] = Field(default=None, max_length=255)


class ContentSubmitResponse(CamelModel):
    uuid: str
    expires_at: int


class ContentRetrieveResponse(CamelModel):
    """Stored text with its epoch-ms timestamps."""

    text: str
    created_at: int
    expires_at: int


class ContentDeleteResponse(CamelModel):
    deleted: bool = True
