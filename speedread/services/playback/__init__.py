"""
Playback package for the RSVP reader.

- commands: Command dataclasses accepted by the state machine
- state: PlaybackState and the pure ``reduce`` function
- engine: ReaderEngine, owning state, settings and the auto-advance timer
- keymap: Keyboard bindings that drive the engine
"""

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
from .engine import ReaderEngine, Scheduler, TimerHandle
from .keymap import KeyBindings, handle_key, next_speed_preset
from .state import PlaybackState, clamp_wpm, reduce

__all__ = [
    "Command",
    "Load",
    "Play",
    "Pause",
    "Toggle",
    "Seek",
    "Next",
    "Prev",
    "JumpSentence",
    "JumpSentences",
    "JumpParagraph",
    "Restart",
    "SetWpm",
    "PlaybackState",
    "reduce",
    "clamp_wpm",
    "ReaderEngine",
    "Scheduler",
    "TimerHandle",
    "KeyBindings",
    "handle_key",
    "next_speed_preset",
]
