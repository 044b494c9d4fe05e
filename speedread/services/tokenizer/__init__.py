"""
Tokenizer package for RSVP text processing.

This package contains modules for turning text into timed display tokens:
- tokenizer: TokenizerPipeline, Token and parse_text (primary entry point)
- orp: Optimal Recognition Point calculation
- sentence: Sentence boundary detection
- chunker: Multi-word chunks and settings-driven token building
- timing: Display durations derived from WPM and token metadata
- navigation: Sentence/paragraph boundary lookup for jumps
- constants: Abbreviations, punctuation sets and multipliers

Primary usage:
    >>> from speedread.services.tokenizer import parse_text, chunk_tokens
    >>> tokens = chunk_tokens(parse_text("Hello world."), 2)
"""

from .chunker import build_reading_tokens, chunk_tokens
from .constants import MAX_WPM, MIN_WPM, TOKENIZER_VERSION
from .navigation import NavigationIndex
from .orp import ORPCalculator, calculate_orp, split_at_orp
from .sentence import SentenceDetector
from .text_utils import count_words, create_preview
from .timing import (
    calculate_base_duration_ms,
    format_duration,
    progress_percent,
    remaining_duration_ms,
    token_duration_ms,
    total_duration_ms,
)
from .tokenizer import Token, TokenizerPipeline, TokenizerResult, TokenMeta, parse_text

__all__ = [
    # Tokenization
    "Token",
    "TokenMeta",
    "TokenizerPipeline",
    "TokenizerResult",
    "parse_text",
    "count_words",
    "create_preview",
    # Chunking
    "chunk_tokens",
    "build_reading_tokens",
    # ORP
    "ORPCalculator",
    "calculate_orp",
    "split_at_orp",
    # Sentence detection and navigation
    "SentenceDetector",
    "NavigationIndex",
    # Timing
    "calculate_base_duration_ms",
    "token_duration_ms",
    "total_duration_ms",
    "remaining_duration_ms",
    "format_duration",
    "progress_percent",
    # Constants
    "TOKENIZER_VERSION",
    "MIN_WPM",
    "MAX_WPM",
]
