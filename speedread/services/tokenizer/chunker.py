"""
Chunking of tokens into multi-word display units.

Chunks are built from the tokenizer's word tokens. A chunked sequence can
not be re-chunked to another size; callers go back to the source text
(see ``build_reading_tokens``).
"""

from typing import List, Sequence

from speedread.schemas.settings import ReaderSettings
from speedread.services.tokenizer.orp import calculate_orp
from speedread.services.tokenizer.tokenizer import Token, TokenMeta, TokenizerPipeline


def _merge_group(group: Sequence[Token], index: int) -> Token:
    first, last = group[0], group[-1]
    text = " ".join(token.text for token in group)

    return Token(
        text=text,
        index=index,
        orp_index=calculate_orp(text),
        timing_multiplier=max(token.timing_multiplier for token in group),
        meta=TokenMeta(
            sentence_start=first.meta.sentence_start,
            paragraph_start=first.meta.paragraph_start,
            # End-of-unit flags come from the last token so pauses still fire
            sentence_end=last.meta.sentence_end,
            paragraph_end=last.meta.paragraph_end,
            word_length=last.meta.word_length,
        ),
    )


def chunk_tokens(tokens: List[Token], chunk_size: int) -> List[Token]:
    """
    Group consecutive tokens into chunks of ``chunk_size``.

    Args:
        tokens: Word tokens from the tokenizer.
        chunk_size: Number of tokens per chunk. Values <= 1 return
                    ``tokens`` unchanged.

    Returns:
        Chunk tokens indexed from 0. The final chunk may be shorter.

    Example:
        >>> from speedread.services.tokenizer.tokenizer import parse_text
        >>> [t.text for t in chunk_tokens(parse_text("one two three"), 2)]
        ['one two', 'three']
    """
    if chunk_size <= 1:
        return tokens

    return [
        _merge_group(tokens[start:start + chunk_size], index)
        for index, start in enumerate(range(0, len(tokens), chunk_size))
    ]


def build_reading_tokens(text: str, settings: ReaderSettings) -> List[Token]:
    """
    Tokenize source text and chunk it according to reader settings.

    Args:
        text: The original source text.
        settings: Reader settings providing chunk size and clause pause.

    Returns:
        The display token sequence for the reader engine.
    """
    pipeline = TokenizerPipeline(pause_multiplier=settings.comma_pause_multiplier)
    return chunk_tokens(pipeline.process(text).tokens, settings.chunk_size)
