"""
Sentence boundary detection for RSVP reading.

Detection is a heuristic over whitespace-separated words:

- A word ends a sentence when its last character is ``.``, ``!`` or ``?``.
- Known abbreviations (Mr., Dr., etc.) never end a sentence.
- A word followed by a lowercase word does not end a sentence, which
  covers cases like "U.S. government".
"""

from typing import List, Optional

from .constants import ABBREVIATIONS, SENTENCE_ENDERS
from .text_utils import get_terminal_character, is_abbreviation, starts_lowercase


class SentenceDetector:
    """
    Detect sentence boundaries between words.

    Example usage:
        >>> detector = SentenceDetector()
        >>> detector.is_sentence_end("world.", "How")
        True
        >>> detector.is_sentence_end("Dr.", "Smith")
        False
        >>> detector.is_sentence_end("U.S.", "government")
        False
    """

    def __init__(self, abbreviations: frozenset = ABBREVIATIONS) -> None:
        self._abbreviations = abbreviations

    def is_sentence_end(self, word: str, next_word: Optional[str] = None) -> bool:
        """
        Check if a word ends a sentence.

        Args:
            word: The word to check.
            next_word: The word following this one in the same paragraph,
                       or None when ``word`` is the last one.

        Returns:
            True if the word ends a sentence.
        """
        if get_terminal_character(word) not in SENTENCE_ENDERS:
            return False

        if is_abbreviation(word, self._abbreviations):
            return False

        if starts_lowercase(next_word):
            return False

        return True

    def find_boundary_indices(self, words: List[str]) -> List[int]:
        """
        Find the indices of words that end a sentence.

        Only the punctuation heuristic is applied; paragraph-final words are
        not forced to close a sentence here.

        Examples:
            >>> SentenceDetector().find_boundary_indices(["Hi.", "How", "are", "you?"])
            [0, 3]
        """
        boundaries = []
        for i, word in enumerate(words):
            next_word = words[i + 1] if i + 1 < len(words) else None
            if self.is_sentence_end(word, next_word):
                boundaries.append(i)
        return boundaries
