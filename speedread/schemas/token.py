"""Pydantic schemas for the tokenization API."""

from typing import Optional

from pydantic import Field

from speedread.schemas.settings import CamelModel, ReaderSettings


class TokenMetaDTO(CamelModel):
    sentence_start: bool
    sentence_end: bool
    paragraph_start: bool
    paragraph_end: bool
    word_length: int


class TokenDTO(CamelModel):
    text: str
    index: int
    orp_index: int
    timing_multiplier: float
    meta: TokenMetaDTO


class TokenizeRequest(CamelModel):
    text: str = Field(max_length=1_000_000)
    settings: Optional[ReaderSettings] = None


class TokenizeResponse(CamelModel):
    tokens: list[TokenDTO]
    total_duration_ms: int
    formatted_duration: str
    word_count: int
