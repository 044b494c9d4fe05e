"""
Timing calculations for RSVP reading.

The display duration of a token is the base word duration (derived from
the WPM setting) scaled by the token's punctuation multiplier, an optional
word-length factor (adaptive timing) and a sentence or paragraph pause.
"""

import math
from typing import Iterable, Sequence

from speedread.schemas.settings import ReaderSettings

from .constants import ADAPTIVE_TIMING_MAX_MULTIPLIER, ADAPTIVE_TIMING_STEPS
from .tokenizer import Token


def calculate_base_duration_ms(wpm: int) -> float:
    """
    Calculate the base word display duration from WPM (words per minute).

    Raises:
        ValueError: If wpm is not positive.

    Examples:
        >>> calculate_base_duration_ms(300)
        200.0
    """
    if wpm <= 0:
        raise ValueError(f"WPM must be positive, got {wpm}")

    # 60,000 ms per minute / words per minute = ms per word
    return 60_000.0 / wpm


def adaptive_multiplier(word_length: int) -> float:
    """
    Return the word-length multiplier used by adaptive timing.

    Longer words need more time to process, from 1.0 (<= 4 chars) up to
    1.4 (> 13 chars).
    """
    for max_length, multiplier in ADAPTIVE_TIMING_STEPS:
        if word_length <= max_length:
            return multiplier
    return ADAPTIVE_TIMING_MAX_MULTIPLIER


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def token_duration_ms(token: Token, settings: ReaderSettings) -> int:
    """
    Calculate the display duration of a token in milliseconds.

    Paragraph and sentence pauses do not stack: a token ending a paragraph
    only gets the paragraph pause.

    Examples:
        >>> from speedread.services.tokenizer.tokenizer import Token
        >>> token_duration_ms(Token("cat", 0, 1), ReaderSettings(adaptive_timing=False))
        200
    """
    base = calculate_base_duration_ms(settings.wpm)
    multiplier = token.timing_multiplier

    if settings.adaptive_timing:
        multiplier *= adaptive_multiplier(token.meta.word_length)

    if token.meta.paragraph_end:
        multiplier *= settings.paragraph_pause_multiplier
    elif token.meta.sentence_end:
        multiplier *= settings.sentence_pause_multiplier

    return _round_half_up(base * multiplier)


def total_duration_ms(tokens: Iterable[Token], settings: ReaderSettings) -> int:
    """Sum the display durations of a token sequence."""
    return sum(token_duration_ms(token, settings) for token in tokens)


def remaining_duration_ms(
    tokens: Sequence[Token],
    current_index: int,
    settings: ReaderSettings,
) -> int:
    """Duration of the tokens from ``current_index`` to the end."""
    return total_duration_ms(tokens[max(0, current_index):], settings)


def format_duration(ms: float) -> str:
    """
    Format a duration as a human-readable string.

    Seconds are rounded up.

    Examples:
        >>> format_duration(45_000)
        '45s'
        >>> format_duration(150_000)
        '2m 30s'
        >>> format_duration(120_000)
        '2m'
    """
    seconds = math.ceil(ms / 1000)
    if seconds < 60:
        return f"{seconds}s"
    minutes, remaining_seconds = divmod(seconds, 60)
    if remaining_seconds:
        return f"{minutes}m {remaining_seconds}s"
    return f"{minutes}m"


def progress_percent(current_index: int, total_tokens: int) -> int:
    """Reading progress as a whole percentage (0 for an empty sequence)."""
    if total_tokens == 0:
        return 0
    return _round_half_up(current_index / total_tokens * 100)
