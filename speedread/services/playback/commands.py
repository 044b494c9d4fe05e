"""Commands accepted by the playback state machine."""

from dataclasses import dataclass
from typing import Sequence, Union

from speedread.models.enums import Direction
from speedread.services.tokenizer import Token


@dataclass(frozen=True)
class Load:
    tokens: Sequence[Token]


@dataclass(frozen=True)
class Play:
    pass


@dataclass(frozen=True)
class Pause:
    pass


@dataclass(frozen=True)
class Toggle:
    pass


@dataclass(frozen=True)
class Seek:
    index: int


@dataclass(frozen=True)
class Next:
    count: int = 1


@dataclass(frozen=True)
class Prev:
    count: int = 1


@dataclass(frozen=True)
class JumpSentence:
    direction: Direction


@dataclass(frozen=True)
class JumpSentences:
    direction: Direction
    count: int


@dataclass(frozen=True)
class JumpParagraph:
    direction: Direction


@dataclass(frozen=True)
class Restart:
    pass


@dataclass(frozen=True)
class SetWpm:
    wpm: int


Command = Union[
    Load,
    Play,
    Pause,
    Toggle,
    Seek,
    Next,
    Prev,
    JumpSentence,
    JumpSentences,
    JumpParagraph,
    Restart,
    SetWpm,
]

# Commands issued by the user that must cancel a pending auto-advance
INTERRUPTING_COMMANDS = (Load, Pause, Toggle, Seek, Restart)
