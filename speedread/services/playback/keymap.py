"""Keyboard bindings for the reader engine.

The input layer forwards key names (browser ``KeyboardEvent.key`` values)
to ``KeyBindings.handle``; reader keys call engine operations and UI keys
call the optional callbacks supplied by the rendering layer.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Sequence

from speedread.models.enums import Direction

from .engine import ReaderEngine

# Arrow keys skip this many tokens
SKIP_TOKENS = 5

# Arrow up/down cycle through these reading speeds
SPEED_PRESETS = (400, 600)


def next_speed_preset(current_wpm: int, presets: Sequence[int] = SPEED_PRESETS) -> int:
    """Return the preset after ``current_wpm``, or the first one if it is not a preset."""
    if current_wpm not in presets:
        return presets[0]
    return presets[(presets.index(current_wpm) + 1) % len(presets)]


@dataclass
class KeyBindings:
    """Map key names to reader operations.

    Attributes:
        engine: The reader engine to drive.
        on_speed_change: Called with the new WPM after cycling speed, so the
            caller can persist it.
        on_toggle_settings: Called for ``s``.
        on_toggle_dark_mode: Called for ``d``.
        on_toggle_fullscreen: Called for ``f``.
        on_exit: Called for ``Escape``.
    """

    engine: ReaderEngine
    on_speed_change: Optional[Callable[[int], None]] = None
    on_toggle_settings: Optional[Callable[[], None]] = None
    on_toggle_dark_mode: Optional[Callable[[], None]] = None
    on_toggle_fullscreen: Optional[Callable[[], None]] = None
    on_exit: Optional[Callable[[], None]] = None

    def _reader_actions(self) -> Dict[str, Callable[[], None]]:
        engine = self.engine
        return {
            " ": engine.toggle,
            "ArrowLeft": lambda: engine.prev(SKIP_TOKENS),
            "ArrowRight": lambda: engine.next(SKIP_TOKENS),
            "ArrowUp": self.cycle_speed,
            "ArrowDown": self.cycle_speed,
            "r": engine.restart,
            "[": lambda: engine.jump_sentence(Direction.PREV),
            "]": lambda: engine.jump_sentence(Direction.NEXT),
            "{": lambda: engine.jump_paragraph(Direction.PREV),
            "}": lambda: engine.jump_paragraph(Direction.NEXT),
        }

    def _ui_actions(self) -> Dict[str, Optional[Callable[[], None]]]:
        return {
            "s": self.on_toggle_settings,
            "d": self.on_toggle_dark_mode,
            "f": self.on_toggle_fullscreen,
            "Escape": self.on_exit,
        }

    def cycle_speed(self) -> None:
        wpm = next_speed_preset(self.engine.wpm)
        self.engine.set_wpm(wpm)
        if self.on_speed_change is not None:
            self.on_speed_change(wpm)

    def handle(self, key: str) -> bool:
        """
        Handle a key press.

        Returns:
            True when the key is bound (the caller should prevent the
            default browser action), False otherwise.
        """
        action = self._reader_actions().get(key)
        if action is not None:
            action()
            return True

        ui_action = self._ui_actions().get(key)
        if ui_action is not None:
            ui_action()
            return True

        return False


def handle_key(engine: ReaderEngine, key: str) -> bool:
    """Handle a reader key without UI callbacks."""
    return KeyBindings(engine).handle(key)
