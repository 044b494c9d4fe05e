"""Pydantic schema for reader settings."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema serialized with camelCase keys on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ReaderSettings(CamelModel):
    """Reader configuration persisted locally and read by the engine.

    ``theme``, ``orp_color`` and ``font_size`` are display hints for the
    rendering layer and are ignored by the engine.
    """

    wpm: int = Field(300, ge=100, le=1000)
    chunk_size: int = Field(1, ge=1)
    sentence_pause_multiplier: float = Field(3.0, gt=0)
    paragraph_pause_multiplier: float = Field(4.0, gt=0)
    comma_pause_multiplier: float = Field(2.0, gt=0)
    adaptive_timing: bool = True
    theme: Literal["light", "dark", "system"] = "system"
    orp_color: str = "#ef4444"
    font_size: Literal["sm", "md", "lg", "xl"] = "lg"


DEFAULT_SETTINGS = ReaderSettings()
