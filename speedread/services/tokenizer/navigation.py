"""
Sentence and paragraph navigation over a token sequence.

The index is derived once from token metadata and answers "where is the
next/previous boundary" queries with a binary search. A paragraph start is
always a sentence boundary.
"""

from bisect import bisect_left, bisect_right
from typing import List, Optional, Sequence

from speedread.models.enums import Direction

from .tokenizer import Token


class NavigationIndex:
    """
    Boundary lookup for jump operations.

    Example usage:
        >>> from speedread.services.tokenizer.tokenizer import parse_text
        >>> nav = NavigationIndex(parse_text("One. Two. Three."))
        >>> nav.next_sentence(0)
        1
        >>> nav.prev_sentence(0)
        0
    """

    def __init__(self, tokens: Sequence[Token]) -> None:
        self._sentence_starts: List[int] = [
            t.index for t in tokens if t.meta.sentence_start or t.meta.paragraph_start
        ]
        self._paragraph_starts: List[int] = [
            t.index for t in tokens if t.meta.paragraph_start
        ]

    @property
    def sentence_starts(self) -> List[int]:
        return list(self._sentence_starts)

    @property
    def paragraph_starts(self) -> List[int]:
        return list(self._paragraph_starts)

    @staticmethod
    def _after(boundaries: List[int], position: int) -> Optional[int]:
        i = bisect_right(boundaries, position)
        return boundaries[i] if i < len(boundaries) else None

    @staticmethod
    def _before(boundaries: List[int], position: int) -> int:
        i = bisect_left(boundaries, position)
        return boundaries[i - 1] if i > 0 else 0

    def next_sentence(self, position: int) -> Optional[int]:
        """First sentence boundary after ``position``, or None."""
        return self._after(self._sentence_starts, position)

    def prev_sentence(self, position: int) -> int:
        """Last sentence boundary before ``position``, or 0."""
        return self._before(self._sentence_starts, position)

    def next_paragraph(self, position: int) -> Optional[int]:
        """First paragraph start after ``position``, or None."""
        return self._after(self._paragraph_starts, position)

    def prev_paragraph(self, position: int) -> int:
        """Last paragraph start before ``position``, or 0."""
        return self._before(self._paragraph_starts, position)

    def jump_sentences(self, position: int, direction: Direction, count: int) -> int:
        """
        Move across up to ``count`` sentence boundaries.

        Stops at the last boundary found when fewer exist. Going back with
        no boundary before ``position`` lands on 0; going forward with none
        after it stays at ``position``. A ``count`` below 1 never moves.
        """
        if count < 1:
            return position

        if Direction(direction) is Direction.NEXT:
            i = bisect_right(self._sentence_starts, position)
            found = self._sentence_starts[i:i + count]
            return found[-1] if found else position

        i = bisect_left(self._sentence_starts, position)
        found = self._sentence_starts[max(0, i - count):i]
        return found[0] if found else 0

    def sentence_start_of(self, position: int) -> int:
        """Start of the sentence containing ``position``."""
        return self._before(self._sentence_starts, position + 1)

    def paragraph_start_of(self, position: int) -> int:
        """Start of the paragraph containing ``position``."""
        return self._before(self._paragraph_starts, position + 1)
