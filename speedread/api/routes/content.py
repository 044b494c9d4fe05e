"""Content store API routes."""

import asyncio
import json
import logging

from fastapi import APIRouter, Depends, Request, status
from pydantic import ValidationError
from sqlalchemy.orm import Session

from speedread.api.errors import APIError
from speedread.config import Settings, get_settings
from speedread.database import get_db
from speedread.logging_config import log_performance
from speedread.models.content import StoredContent
from speedread.schemas.content import (
    ContentDeleteResponse,
    ContentRetrieveResponse,
    ContentSubmitRequest,
    ContentSubmitResponse,
)
from speedread.services.content_store import ContentStore, is_content_id
from speedread.services.rate_limit import RateLimiter

router = APIRouter()
logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Content not found or expired"


def get_client_key(request: Request) -> str:
    """Identify the caller by the first X-Forwarded-For hop or the peer host."""
    forwarded = request.headers.get("x-forwarded-for", "")
    first_hop = forwarded.split(",")[0].strip()
    if first_hop:
        return first_hop
    if request.client and request.client.host:
        return request.client.host
    return "unknown"


def _declared_length(request: Request) -> int:
    try:
        return int(request.headers.get("content-length", "0"))
    except ValueError:
        return 0


@log_performance("store_content")
async def _store_content(store: ContentStore, body: ContentSubmitRequest) -> StoredContent:
    return await asyncio.to_thread(store.create, body.text, source=body.source)


@router.post(
    "",
    response_model=ContentSubmitResponse,
    status_code=status.HTTP_201_CREATED,
)
async def submit_content(
    request: Request,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> ContentSubmitResponse:
    """Store a text and return its id and expiry time."""
    limiter = RateLimiter(db, settings.rate_limit_max, settings.rate_limit_window_seconds)
    if not await asyncio.to_thread(limiter.check, get_client_key(request)):
        raise APIError.too_many_requests(
            settings.rate_limit_max, settings.rate_limit_window_seconds
        )

    if _declared_length(request) > settings.max_content_size:
        raise APIError.payload_too_large(settings.max_content_size)

    try:
        payload = json.loads(await request.body())
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise APIError.bad_request("Invalid JSON body")

    if not isinstance(payload, dict):
        raise APIError.bad_request('Missing or invalid "text" field')
    try:
        body = ContentSubmitRequest.model_validate(payload)
    except ValidationError:
        raise APIError.bad_request('Missing or invalid "text" field')

    if len(body.text.encode("utf-8")) > settings.max_content_size:
        raise APIError.payload_too_large(settings.max_content_size)

    row = await _store_content(ContentStore(db, settings), body)
    return ContentSubmitResponse(uuid=row.id, expires_at=row.expires_at)


@router.get("/{content_id}", response_model=ContentRetrieveResponse)
def get_content(
    content_id: str,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> ContentRetrieveResponse:
    row = ContentStore(db, settings).get(content_id)
    if row is None:
        raise APIError.not_found(NOT_FOUND_MESSAGE)
    return ContentRetrieveResponse.model_validate(row)


@router.delete("/{content_id}", response_model=ContentDeleteResponse)
def delete_content(
    content_id: str,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> ContentDeleteResponse:
    """Delete stored content. Deleting an unknown id still succeeds."""
    if not is_content_id(content_id):
        raise APIError.not_found()
    ContentStore(db, settings).delete(content_id)
    return ContentDeleteResponse(deleted=True)
