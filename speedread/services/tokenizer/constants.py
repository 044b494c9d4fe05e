"""
Tokenizer constants for RSVP text processing.

This module contains all the constants used by the tokenization engine
including the ORP lookup table, abbreviations, punctuation sets and
timing multipliers.
"""

# Tokenizer version - increment when logic changes
TOKENIZER_VERSION = "2.0.0"

# -----------------------------------------------------------------------------
# Optimal Recognition Point
# -----------------------------------------------------------------------------

# ORP position by word length (0-indexed)
ORP_TABLE = {
    1: 0,   # a -> [a]
    2: 0,   # in -> [i]n
    3: 1,   # the -> t[h]e
    4: 1,   # word -> w[o]rd
    5: 1,   # about -> a[b]out
    6: 2,   # sample -> sa[m]ple
    7: 2,   # reading -> re[a]ding
    8: 2,   # computer -> co[m]puter
    9: 3,   # different -> dif[f]erent
    10: 3,  # understand -> und[e]rstand
    11: 3,  # information -> inf[o]rmation
    12: 4,  # independent -> inde[p]endent
    13: 4,  # extraordinary -> extr[a]ordinary
}

# Words longer than the table use this fraction of their length
LONG_WORD_ORP_RATIO = 0.3

# -----------------------------------------------------------------------------
# Sentence and Punctuation Detection
# -----------------------------------------------------------------------------

# Sentence-ending punctuation (checked on the last character only)
SENTENCE_ENDERS = {'.', '!', '?'}

# Clause punctuation that earns a pause multiplier
PAUSE_PUNCTUATION = {',', ';', ':'}

# Trailing characters removed before the abbreviation lookup
ABBREVIATION_STRIP_CHARS = ".,!?;:'\")]"

# -----------------------------------------------------------------------------
# Timing Multipliers
# -----------------------------------------------------------------------------

# Multiplier assigned to tokens ending in clause punctuation
COMMA_PAUSE_MULTIPLIER = 2.0

# Adaptive timing steps: (max clean word length, multiplier)
ADAPTIVE_TIMING_STEPS = (
    (4, 1.0),
    (7, 1.1),
    (10, 1.2),
    (13, 1.3),
)
ADAPTIVE_TIMING_MAX_MULTIPLIER = 1.4

# Reading speed bounds (words per minute)
MIN_WPM = 100
MAX_WPM = 1000

# -----------------------------------------------------------------------------
# Abbreviations
# -----------------------------------------------------------------------------

# Common abbreviations that don't end sentences (English)
# Stored lowercase without the trailing period
ABBREVIATIONS = frozenset({
    # Titles and honorifics
    'mr', 'mrs', 'ms', 'dr', 'prof', 'sr', 'jr',
    # Organisations
    'vs', 'etc', 'inc', 'ltd', 'corp', 'co', 'dept', 'est', 'govt',
    # Addresses
    'st', 'ave', 'blvd',
    # Military ranks
    'gen', 'col', 'lt', 'sgt', 'capt', 'maj',
    # References and units
    'approx', 'fig', 'no', 'vol', 'rev', 'ed', 'pp', 'aka',
    # Latin abbreviations
    'ie', 'eg', 'cf', 'al',
})

# -----------------------------------------------------------------------------
# Paragraph Detection
# -----------------------------------------------------------------------------

# One or more blank lines separate paragraphs
PARAGRAPH_SPLIT_PATTERN = r'\n\s*\n'

# Maximum preview length for recent texts
PREVIEW_MAX_LENGTH = 100
