"""
Reader engine: owns the playback state and the auto-advance timer.

The engine is single-threaded. All calls, including timer callbacks, are
expected on one logical thread (an asyncio event loop by default). While
the reader is playing, exactly one single-shot timer is pending; when it
fires the engine advances by one token and re-arms for the next one.
"""

import asyncio
import logging
from typing import Any, Callable, List, Optional, Protocol, Sequence

from speedread.models.enums import Direction, ReaderStatus
from speedread.schemas.settings import ReaderSettings
from speedread.services.tokenizer import (
    Token,
    build_reading_tokens,
    progress_percent,
    remaining_duration_ms,
    token_duration_ms,
)

from .commands import (
    INTERRUPTING_COMMANDS,
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
from .state import PlaybackState, clamp_wpm, reduce

logger = logging.getLogger(__name__)

Listener = Callable[[PlaybackState], None]


class TimerHandle(Protocol):
    def cancel(self) -> Any: ...


class Scheduler(Protocol):
    """Anything with ``call_later``, such as an asyncio event loop."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle: ...


class ReaderEngine:
    """
    RSVP playback engine.

    Example usage:
        >>> engine = ReaderEngine(ReaderSettings(wpm=400), scheduler=loop)
        >>> engine.load_text("Hello world. How are you?")
        >>> engine.play()
        >>> engine.current_token.text
        'Hello'
    """

    def __init__(
        self,
        settings: Optional[ReaderSettings] = None,
        scheduler: Optional[Scheduler] = None,
    ) -> None:
        """
        Initialize the engine.

        Args:
            settings: Reader settings; defaults are used when omitted.
            scheduler: Timer source. When omitted, the running asyncio loop
                       is used at the time a timer is armed.
        """
        self._settings = settings or ReaderSettings()
        self._scheduler = scheduler
        self._state = PlaybackState(wpm=clamp_wpm(self._settings.wpm))
        self._timer: Optional[TimerHandle] = None
        self._timer_key: Optional[tuple] = None
        self._listeners: List[Listener] = []
        self._source_text: Optional[str] = None

    # ------------------------------------------------------------------
    # Observed state
    # ------------------------------------------------------------------

    @property
    def state(self) -> PlaybackState:
        return self._state

    @property
    def settings(self) -> ReaderSettings:
        return self._settings

    @property
    def status(self) -> ReaderStatus:
        return self._state.status

    @property
    def tokens(self) -> Sequence[Token]:
        return self._state.tokens

    @property
    def current_index(self) -> int:
        return self._state.current_index

    @property
    def current_token(self) -> Optional[Token]:
        return self._state.current_token

    @property
    def wpm(self) -> int:
        return self._state.wpm

    @property
    def has_pending_timer(self) -> bool:
        return self._timer is not None

    @property
    def progress_percent(self) -> int:
        return progress_percent(self._state.current_index, len(self._state.tokens))

    @property
    def remaining_ms(self) -> int:
        """Time left to read from the current token, at the active speed."""
        return remaining_duration_ms(
            self._state.tokens, self._state.current_index, self._timing_settings()
        )

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a state listener and return a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def dispatch(self, command: Command) -> PlaybackState:
        """
        Apply a command, then reconcile the auto-advance timer.

        Raises:
            RuntimeError: If the command starts playback but the engine has
                no scheduler and no asyncio loop is running. The state is
                left unchanged.
        """
        previous = self._state
        state = reduce(previous, command)
        if state.status is ReaderStatus.PLAYING and state.current_token is not None:
            self._get_scheduler()

        if isinstance(command, INTERRUPTING_COMMANDS):
            self._cancel_timer()

        self._state = state
        self._sync_timer()

        if self._state is not previous:
            if self._state.status is not previous.status:
                logger.debug(
                    "Reader status %s -> %s at token %d",
                    previous.status.value,
                    self._state.status.value,
                    self._state.current_index,
                )
            for listener in list(self._listeners):
                listener(self._state)

        return self._state

    def load(self, tokens: Sequence[Token]) -> None:
        self._source_text = None
        self.dispatch(Load(tokens))

    def load_text(self, text: str) -> None:
        """Tokenize ``text`` with the current settings and load it."""
        tokens = build_reading_tokens(text, self._settings)
        self._source_text = text
        self.dispatch(Load(tokens))
        logger.info(
            "Loaded %d tokens (chunk size %d)", len(tokens), self._settings.chunk_size
        )

    def play(self) -> None:
        self.dispatch(Play())

    def pause(self) -> None:
        self.dispatch(Pause())

    def toggle(self) -> None:
        self.dispatch(Toggle())

    def seek(self, index: int) -> None:
        self.dispatch(Seek(index))

    def next(self, count: int = 1) -> None:
        self.dispatch(Next(count))

    def prev(self, count: int = 1) -> None:
        self.dispatch(Prev(count))

    def jump_sentence(self, direction: Direction | str) -> None:
        self.dispatch(JumpSentence(Direction(direction)))

    def jump_sentences(self, direction: Direction | str, count: int) -> None:
        self.dispatch(JumpSentences(Direction(direction), count))

    def jump_paragraph(self, direction: Direction | str) -> None:
        self.dispatch(JumpParagraph(Direction(direction)))

    def restart(self) -> None:
        self.dispatch(Restart())

    def set_wpm(self, wpm: int) -> None:
        self.dispatch(SetWpm(wpm))

    def update_settings(self, settings: ReaderSettings) -> None:
        """
        Replace the reader settings.

        A new WPM becomes the active speed. A new chunk size re-tokenizes
        the source text (when the tokens came from ``load_text``) and keeps
        the reader on the chunk holding the same source word.
        """
        previous = self._settings
        self._settings = settings

        if settings.wpm != previous.wpm:
            self.dispatch(SetWpm(settings.wpm))

        rechunk = (
            self._source_text is not None
            and (
                settings.chunk_size != previous.chunk_size
                or settings.comma_pause_multiplier != previous.comma_pause_multiplier
            )
        )
        if rechunk:
            word_index = self._state.current_index * max(1, previous.chunk_size)
            self.load_text(self._source_text)
            self.dispatch(Seek(word_index // max(1, settings.chunk_size)))
        else:
            self._sync_timer()

    def close(self) -> None:
        """Cancel any pending timer and drop listeners."""
        self._cancel_timer()
        self._listeners.clear()

    # ------------------------------------------------------------------
    # Timer management
    # ------------------------------------------------------------------

    def _timing_settings(self) -> ReaderSettings:
        return self._settings.model_copy(update={"wpm": self._state.wpm})

    def _sync_timer(self) -> None:
        state = self._state
        if state.status is not ReaderStatus.PLAYING or state.current_token is None:
            self._cancel_timer()
            return

        key = (state.tokens, state.current_index, state.wpm, self._settings)
        if self._timer is not None and key == self._timer_key:
            return

        self._cancel_timer()
        duration_ms = token_duration_ms(state.current_token, self._timing_settings())
        self._timer = self._get_scheduler().call_later(duration_ms / 1000, self._on_timer)
        self._timer_key = key

    def _get_scheduler(self) -> Scheduler:
        if self._scheduler is not None:
            return self._scheduler
        try:
            return asyncio.get_running_loop()
        except RuntimeError:
            raise RuntimeError(
                "ReaderEngine needs a scheduler or a running event loop to play"
            ) from None

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
        self._timer = None
        self._timer_key = None

    def _on_timer(self) -> None:
        self._timer = None
        self._timer_key = None
        self.dispatch(Next(1))
