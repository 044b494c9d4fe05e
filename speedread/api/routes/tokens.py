"""Tokenization API route."""

import logging

from fastapi import APIRouter

from speedread.logging_config import log_performance
from speedread.schemas.settings import ReaderSettings
from speedread.schemas.token import TokenDTO, TokenizeRequest, TokenizeResponse
from speedread.services.tokenizer import (
    build_reading_tokens,
    count_words,
    format_duration,
    total_duration_ms,
)

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/tokens", response_model=TokenizeResponse)
@log_performance("tokenize_text")
def tokenize(request: TokenizeRequest) -> TokenizeResponse:
    """Tokenize text with the given reader settings (defaults when omitted)."""
    settings = request.settings or ReaderSettings()
    tokens = build_reading_tokens(request.text, settings)
    total_ms = total_duration_ms(tokens, settings)

    logger.debug("Tokenized %d tokens, chunk size %d", len(tokens), settings.chunk_size)
    return TokenizeResponse(
        tokens=[TokenDTO.model_validate(token) for token in tokens],
        total_duration_ms=total_ms,
        formatted_duration=format_duration(total_ms),
        word_count=count_words(request.text),
    )
