"""
Playback state and the reducer that applies commands to it.

``reduce`` is a pure function: it never mutates the given state and never
raises for out-of-range input. Indices are clamped and commands against an
empty token sequence return the state unchanged.
"""

from dataclasses import dataclass, field, replace
from typing import Callable, Dict, Optional, Tuple, Type

from speedread.models.enums import Direction, ReaderStatus
from speedread.services.tokenizer import MAX_WPM, MIN_WPM, NavigationIndex, Token

from .commands import (
    Command,
    JumpParagraph,
    JumpSentence,
    JumpSentences,
    Load,
    Next,
    Pause,
    Play,
    Prev,
    Restart,
    Seek,
    SetWpm,
    Toggle,
)


@dataclass(frozen=True)
class PlaybackState:
    """Snapshot of the reader.

    Attributes:
        status: Current playback status.
        tokens: The immutable token sequence being read.
        current_index: Position in ``tokens`` (0 when empty).
        wpm: Active reading speed.
        navigation: Boundary index derived from ``tokens``.
    """

    status: ReaderStatus = ReaderStatus.IDLE
    tokens: Tuple[Token, ...] = ()
    current_index: int = 0
    wpm: int = 300
    navigation: NavigationIndex = field(
        default_factory=lambda: NavigationIndex(()), compare=False, repr=False
    )

    @property
    def current_token(self) -> Optional[Token]:
        if not self.tokens:
            return None
        return self.tokens[self.current_index]

    @property
    def last_index(self) -> int:
        return max(0, len(self.tokens) - 1)


def clamp_wpm(wpm: int) -> int:
    return max(MIN_WPM, min(MAX_WPM, int(wpm)))


def _clamp_index(state: PlaybackState, index: int) -> int:
    return max(0, min(index, state.last_index))


def _move_to(state: PlaybackState, index: int) -> PlaybackState:
    """Move the cursor; a finished reader becomes paused when it moves."""
    index = _clamp_index(state, index)
    if index == state.current_index and state.status is not ReaderStatus.FINISHED:
        return state
    status = ReaderStatus.PAUSED if state.status is ReaderStatus.FINISHED else state.status
    return replace(state, current_index=index, status=status)


def _start(state: PlaybackState) -> PlaybackState:
    if state.status is ReaderStatus.FINISHED:
        # Replaying a finished text starts over
        return replace(state, status=ReaderStatus.PLAYING, current_index=0)
    if state.status is ReaderStatus.PLAYING:
        return state
    return replace(state, status=ReaderStatus.PLAYING)


def _load(state: PlaybackState, command: Load) -> PlaybackState:
    tokens = tuple(command.tokens)
    return PlaybackState(
        status=ReaderStatus.IDLE,
        tokens=tokens,
        current_index=0,
        wpm=state.wpm,
        navigation=NavigationIndex(tokens),
    )


def _play(state: PlaybackState, command: Play) -> PlaybackState:
    return _start(state)


def _pause(state: PlaybackState, command: Pause) -> PlaybackState:
    if state.status is ReaderStatus.PLAYING:
        return replace(state, status=ReaderStatus.PAUSED)
    return state


def _toggle(state: PlaybackState, command: Toggle) -> PlaybackState:
    if state.status is ReaderStatus.PLAYING:
        return replace(state, status=ReaderStatus.PAUSED)
    return _start(state)


def _seek(state: PlaybackState, command: Seek) -> PlaybackState:
    index = _clamp_index(state, command.index)
    status = ReaderStatus.PAUSED if state.status is ReaderStatus.FINISHED else state.status
    return replace(state, current_index=index, status=status)


def _next(state: PlaybackState, command: Next) -> PlaybackState:
    index = _clamp_index(state, state.current_index + command.count)
    finished = index >= state.last_index and state.status is ReaderStatus.PLAYING
    return replace(
        state,
        current_index=index,
        status=ReaderStatus.FINISHED if finished else state.status,
    )


def _prev(state: PlaybackState, command: Prev) -> PlaybackState:
    return _move_to(state, state.current_index - command.count)


def _jump_to(state: PlaybackState, index: int) -> PlaybackState:
    """Move the cursor to a boundary, leaving the status as it is."""
    index = _clamp_index(state, index)
    if index == state.current_index:
        return state
    return replace(state, current_index=index)


def _jump_sentence(state: PlaybackState, command: JumpSentence) -> PlaybackState:
    if Direction(command.direction) is Direction.NEXT:
        target = state.navigation.next_sentence(state.current_index)
        return state if target is None else _jump_to(state, target)
    return _jump_to(state, state.navigation.prev_sentence(state.current_index))


def _jump_sentences(state: PlaybackState, command: JumpSentences) -> PlaybackState:
    if command.count < 1:
        return state
    target = state.navigation.jump_sentences(
        state.current_index, Direction(command.direction), command.count
    )
    return _move_to(state, target)


def _jump_paragraph(state: PlaybackState, command: JumpParagraph) -> PlaybackState:
    if Direction(command.direction) is Direction.NEXT:
        target = state.navigation.next_paragraph(state.current_index)
        return state if target is None else _jump_to(state, target)
    return _jump_to(state, state.navigation.prev_paragraph(state.current_index))


def _restart(state: PlaybackState, command: Restart) -> PlaybackState:
    return replace(state, current_index=0, status=ReaderStatus.PAUSED)


def _set_wpm(state: PlaybackState, command: SetWpm) -> PlaybackState:
    wpm = clamp_wpm(command.wpm)
    return state if wpm == state.wpm else replace(state, wpm=wpm)


_REDUCERS: Dict[Type, Callable[[PlaybackState, Command], PlaybackState]] = {
    Load: _load,
    Play: _play,
    Pause: _pause,
    Toggle: _toggle,
    Seek: _seek,
    Next: _next,
    Prev: _prev,
    JumpSentence: _jump_sentence,
    JumpSentences: _jump_sentences,
    JumpParagraph: _jump_paragraph,
    Restart: _restart,
    SetWpm: _set_wpm,
}

# These only make sense with something to read
_NEED_TOKENS = (Play, Toggle, Seek, Next, Prev, JumpSentence, JumpSentences, JumpParagraph, Restart)


def reduce(state: PlaybackState, command: Command) -> PlaybackState:
    """
    Apply a command to a playback state.

    Args:
        state: The current state.
        command: One of the commands from ``speedread.services.playback.commands``.

    Returns:
        The new state (``state`` itself when nothing changes).

    Raises:
        TypeError: If ``command`` is not a known command.
    """
    handler = _REDUCERS.get(type(command))
    if handler is None:
        raise TypeError(f"Unknown playback command: {command!r}")

    if not state.tokens and isinstance(command, _NEED_TOKENS):
        return state

    return handler(state, command)
