"""
Main tokenization pipeline for RSVP reading.

This module provides the TokenizerPipeline class that turns raw text into
an ordered sequence of annotated Token objects ready for RSVP display.

Pipeline stages:
1. Paragraph splitting on blank lines
2. Word splitting on whitespace runs
3. Sentence boundary detection
4. ORP (Optimal Recognition Point) calculation
5. Punctuation timing multipliers

Example usage:
    >>> pipeline = TokenizerPipeline()
    >>> result = pipeline.process("Hello world. This is a test.")
    >>> for token in result.tokens:
    ...     print(f"{token.text} (ORP: {token.orp_index})")
"""

import re
from dataclasses import dataclass, field
from typing import List

from speedread.services.tokenizer.constants import (
    COMMA_PAUSE_MULTIPLIER,
    PARAGRAPH_SPLIT_PATTERN,
    TOKENIZER_VERSION,
)
from speedread.services.tokenizer.orp import ORPCalculator
from speedread.services.tokenizer.sentence import SentenceDetector
from speedread.services.tokenizer.text_utils import (
    get_word_length,
    has_pause_punctuation,
    split_words,
)

_PARAGRAPH_SPLIT = re.compile(PARAGRAPH_SPLIT_PATTERN)


@dataclass(frozen=True)
class TokenMeta:
    """Structural annotations of a token.

    Attributes:
        sentence_start: Whether this token starts a sentence.
        sentence_end: Whether this token ends a sentence.
        paragraph_start: Whether this token starts a paragraph.
        paragraph_end: Whether this token ends a paragraph (never set on
            the final paragraph of the text).
        word_length: Number of word characters, punctuation stripped.
    """

    sentence_start: bool = False
    sentence_end: bool = False
    paragraph_start: bool = False
    paragraph_end: bool = False
    word_length: int = 0


@dataclass(frozen=True)
class Token:
    """A single display unit (word or chunk) for RSVP display.

    Attributes:
        text: The literal word or chunk, punctuation included.
        index: 0-based position in the token sequence.
        orp_index: Index of the ORP character in ``text``.
        timing_multiplier: Multiplier for display duration (1.0 = normal).
        meta: Sentence and paragraph annotations.
    """

    text: str
    index: int
    orp_index: int
    timing_multiplier: float = 1.0
    meta: TokenMeta = field(default_factory=TokenMeta)


@dataclass
class TokenizerResult:
    """Result of the tokenization pipeline.

    Attributes:
        tokens: Tokens in document order.
        total_words: Number of tokens produced.
        paragraph_count: Number of non-empty paragraphs.
        tokenizer_version: Version of the tokenizer used.
    """

    tokens: List[Token]
    total_words: int
    paragraph_count: int
    tokenizer_version: str = TOKENIZER_VERSION


def split_paragraphs(text: str) -> List[str]:
    """Split text on blank lines, trimming and dropping empty paragraphs."""
    paragraphs = (p.strip() for p in _PARAGRAPH_SPLIT.split(text))
    return [p for p in paragraphs if p]


class TokenizerPipeline:
    """
    Tokenization pipeline for RSVP text processing.

    Example usage:
        >>> pipeline = TokenizerPipeline()
        >>> result = pipeline.process("Dr. Smith arrived.")
        >>> [t.meta.sentence_end for t in result.tokens]
        [False, False, True]
    """

    def __init__(self, pause_multiplier: float = COMMA_PAUSE_MULTIPLIER) -> None:
        """
        Initialize the tokenizer pipeline.

        Args:
            pause_multiplier: Timing multiplier for words ending in , ; or :.
        """
        self.pause_multiplier = pause_multiplier
        self._orp_calculator = ORPCalculator()
        self._sentence_detector = SentenceDetector()

    def process(self, text: str) -> TokenizerResult:
        """
        Process raw text through the tokenization pipeline.

        The last word of every paragraph closes a sentence. The last word
        of the text never gets ``paragraph_end``, so no paragraph pause is
        added after the final paragraph.

        Args:
            text: The input text to tokenize.

        Returns:
            TokenizerResult containing all tokens.

        Example:
            >>> result = TokenizerPipeline().process("Hello, world!")
            >>> [t.text for t in result.tokens]
            ['Hello,', 'world!']
        """
        paragraphs = split_paragraphs(text)
        tokens: List[Token] = []

        for p_index, paragraph in enumerate(paragraphs):
            words = split_words(paragraph)
            is_last_paragraph = p_index == len(paragraphs) - 1
            sentence_ends = set(self._sentence_detector.find_boundary_indices(words))

            for w_index, word in enumerate(words):
                is_first_word = w_index == 0
                is_last_word = w_index == len(words) - 1

                meta = TokenMeta(
                    sentence_start=is_first_word or (w_index - 1) in sentence_ends,
                    sentence_end=w_index in sentence_ends or is_last_word,
                    paragraph_start=is_first_word,
                    paragraph_end=is_last_word and not is_last_paragraph,
                    word_length=get_word_length(word),
                )

                tokens.append(
                    Token(
                        text=word,
                        index=len(tokens),
                        orp_index=self._orp_calculator.calculate(word),
                        timing_multiplier=self._timing_multiplier(word),
                        meta=meta,
                    )
                )

        return TokenizerResult(
            tokens=tokens,
            total_words=len(tokens),
            paragraph_count=len(paragraphs),
        )

    def _timing_multiplier(self, word: str) -> float:
        if has_pause_punctuation(word):
            return self.pause_multiplier
        return 1.0


def parse_text(text: str) -> List[Token]:
    """
    Tokenize text using the default pipeline configuration.

    Example:
        >>> tokens = parse_text("Hello world.")
        >>> len(tokens), tokens[1].meta.sentence_end
        (2, True)
    """
    return TokenizerPipeline().process(text).tokens
