"""Tests for the main tokenizer pipeline module."""

import pytest

from speedread.services.tokenizer import (
    TOKENIZER_VERSION,
    TokenizerPipeline,
    TokenizerResult,
    parse_text,
)
from speedread.services.tokenizer.text_utils import count_words, create_preview, get_word_length
from speedread.services.tokenizer.tokenizer import split_paragraphs


class TestTokenizerPipelineBasic:
    """Test basic tokenization functionality."""

    def test_empty_text(self):
        result = TokenizerPipeline().process("")
        assert result.tokens == []
        assert result.total_words == 0
        assert result.paragraph_count == 0

    def test_whitespace_only(self):
        assert parse_text("   \n\n   \t   ") == []

    def test_multiple_words(self):
        tokens = parse_text("Hello world test")
        assert [t.text for t in tokens] == ["Hello", "world", "test"]
        assert [t.index for t in tokens] == [0, 1, 2]

    def test_preserves_punctuation(self):
        tokens = parse_text("Hello, world!")
        assert [t.text for t in tokens] == ["Hello,", "world!"]

    def test_result_metadata(self):
        result = TokenizerPipeline().process("One two.\n\nThree.")
        assert isinstance(result, TokenizerResult)
        assert result.total_words == 3
        assert result.paragraph_count == 2
        assert result.tokenizer_version == TOKENIZER_VERSION

    def test_orp_and_word_length(self):
        token = parse_text("reading,")[0]
        assert token.orp_index == 2
        assert token.meta.word_length == 7

    def test_tokens_are_immutable(self):
        token = parse_text("frozen")[0]
        with pytest.raises(AttributeError):
            token.text = "thawed"


class TestParagraphs:
    """Test paragraph splitting and paragraph flags."""

    def test_blank_line_splits_paragraphs(self):
        assert split_paragraphs("One.\n\nTwo.\n  \t\nThree.") == ["One.", "Two.", "Three."]

    def test_single_newline_does_not_split(self):
        tokens = parse_text("line one\nline two")
        assert len(tokens) == 4
        assert [t.meta.paragraph_start for t in tokens] == [True, False, False, False]

    def test_paragraph_flags(self):
        tokens = parse_text("First para.\n\nSecond para.")
        assert [t.meta.paragraph_start for t in tokens] == [True, False, True, False]
        # The final paragraph never carries paragraph_end
        assert [t.meta.paragraph_end for t in tokens] == [False, True, False, False]

    def test_paragraph_end_closes_sentence(self):
        tokens = parse_text("No period here\n\nNext")
        assert tokens[2].meta.sentence_end is True
        assert tokens[2].meta.paragraph_end is True
        assert tokens[3].meta.sentence_start is True
        assert tokens[3].meta.sentence_end is True

    def test_extra_blank_lines_are_ignored(self):
        result = TokenizerPipeline().process("\n\n\nOne.\n\n\n\nTwo.\n\n")
        assert result.paragraph_count == 2
        assert [t.text for t in result.tokens] == ["One.", "Two."]


class TestSentences:
    """Test sentence start and end annotations."""

    def test_sentence_flags(self):
        tokens = parse_text("Why? Because it works.")
        assert [t.meta.sentence_start for t in tokens] == [True, True, False, False]
        assert [t.meta.sentence_end for t in tokens] == [True, False, False, True]

    def test_abbreviation_does_not_split(self):
        tokens = parse_text("Dr. Smith arrived.")
        assert [t.meta.sentence_end for t in tokens] == [False, False, True]
        assert [t.meta.sentence_start for t in tokens] == [True, False, False]

    def test_lowercase_continuation(self):
        tokens = parse_text("The U.S. government acted.")
        assert [t.meta.sentence_end for t in tokens] == [False, False, False, True]


class TestTimingMultiplier:
    """Test clause punctuation pauses."""

    def test_pause_punctuation(self):
        tokens = parse_text("Hello, world; yes: no. end")
        assert [t.timing_multiplier for t in tokens] == [2.0, 2.0, 2.0, 1.0, 1.0]

    def test_custom_pause_multiplier(self):
        tokens = TokenizerPipeline(pause_multiplier=1.5).process("a, b").tokens
        assert [t.timing_multiplier for t in tokens] == [1.5, 1.0]


class TestTextUtils:
    @pytest.mark.parametrize(
        "word,expected",
        [("hello,", 5), ('"U.S."', 2), ("...", 0), ("don't", 4), ("well-known", 9)],
    )
    def test_get_word_length(self, word, expected):
        assert get_word_length(word) == expected

    def test_count_words(self):
        assert count_words("  one two\n\nthree ") == 3
        assert count_words("") == 0

    def test_preview_collapses_whitespace(self):
        assert create_preview("Hello\n\n  world") == "Hello world"

    def test_preview_truncates(self):
        preview = create_preview("word " * 50)
        assert preview.endswith("…")
        assert len(preview) <= 101
