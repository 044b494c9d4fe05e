"""
Shared text processing utilities for the tokenizer package.

These functions provide common operations used by multiple modules
(tokenizer, sentence detection, chunker).
"""

import re
from typing import Optional

from .constants import (
    ABBREVIATION_STRIP_CHARS,
    ABBREVIATIONS,
    PAUSE_PUNCTUATION,
    PREVIEW_MAX_LENGTH,
)

_NON_WORD = re.compile(r"[^\w]")
_WHITESPACE = re.compile(r"\s+")


def get_word_length(word: str) -> int:
    """
    Count the word characters of a word, ignoring punctuation.

    Examples:
        >>> get_word_length("hello,")
        5
        >>> get_word_length('"U.S."')
        2
    """
    return len(_NON_WORD.sub("", word))


def get_terminal_character(word: str) -> Optional[str]:
    """Return the last character of a word, or None for an empty word."""
    return word[-1] if word else None


def has_pause_punctuation(word: str) -> bool:
    """
    Check whether a word ends in clause punctuation (, ; :).

    Examples:
        >>> has_pause_punctuation("however,")
        True
        >>> has_pause_punctuation("end.")
        False
    """
    return get_terminal_character(word) in PAUSE_PUNCTUATION


def is_abbreviation(word: str, abbreviations: frozenset = ABBREVIATIONS) -> bool:
    """
    Check if a word is a known abbreviation.

    Trailing punctuation, quotes and closing brackets are removed and the
    remainder is compared case-insensitively.

    Examples:
        >>> is_abbreviation("Mr.")
        True
        >>> is_abbreviation("Hello.")
        False
    """
    clean = word.rstrip(ABBREVIATION_STRIP_CHARS)
    return clean.lower() in abbreviations


def starts_lowercase(word: Optional[str]) -> bool:
    """Return True when a word begins with a lowercase letter."""
    return bool(word) and word[0].islower()


def split_words(text: str) -> list[str]:
    """Split text on whitespace runs, dropping empty strings."""
    return [w for w in _WHITESPACE.split(text) if w]


def count_words(text: str) -> int:
    """
    Count the number of words in text.

    Examples:
        >>> count_words("  one two\\n\\nthree ")
        3
    """
    return len(split_words(text))


def create_preview(text: str, max_length: int = PREVIEW_MAX_LENGTH) -> str:
    """
    Create a single-line preview of text.

    Whitespace is collapsed; text longer than ``max_length`` is cut and
    marked with an ellipsis.

    Examples:
        >>> create_preview("Hello\\n\\nworld")
        'Hello world'
    """
    cleaned = _WHITESPACE.sub(" ", text).strip()
    if len(cleaned) <= max_length:
        return cleaned
    return cleaned[:max_length].strip() + "…"
