"""Pydantic schemas for the SpeedRead API and local persistence."""

from speedread.schemas.content import (
    ContentDeleteResponse,
    ContentRetrieveResponse,
    ContentSubmitRequest,
    ContentSubmitResponse,
)
from speedread.schemas.recent import RecentText
from speedread.schemas.settings import DEFAULT_SETTINGS, CamelModel, ReaderSettings
from speedread.schemas.token import TokenDTO, TokenizeRequest, TokenizeResponse, TokenMetaDTO

__all__ = [
    "CamelModel",
    # Settings and recent texts
    "ReaderSettings",
    "DEFAULT_SETTINGS",
    "RecentText",
    # Content store schemas
    "ContentSubmitRequest",
    "ContentSubmitResponse",
    "ContentRetrieveResponse",
    "ContentDeleteResponse",
    # Token schemas
    "TokenMetaDTO",
    "TokenDTO",
    "TokenizeRequest",
    "TokenizeResponse",
]
