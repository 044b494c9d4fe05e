"""Enums shared by the reader engine and the API."""

from enum import Enum


class ReaderStatus(str, Enum):
    """Playback status of the reader engine."""

    IDLE = "idle"
    PLAYING = "playing"
    PAUSED = "paused"
    FINISHED = "finished"


class Direction(str, Enum):
    """Direction for sentence and paragraph navigation."""

    NEXT = "next"
    PREV = "prev"
