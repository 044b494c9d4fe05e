"""FastAPI application entry point."""

import logging
import uuid
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.datastructures import Headers, MutableHeaders
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response
from starlette.types import Message, Send

from speedread import __version__
from speedread.api.routes import content, health, tokens
from speedread.config import Settings, get_settings
from speedread.database import SessionLocal, init_db
from speedread.logging_config import setup_logging
from speedread.services.content_store import ContentStore

logger = logging.getLogger(__name__)


class ContentCORSMiddleware(CORSMiddleware):
    """CORS middleware answering preflight requests with 204 No Content.

    An allowed request echoes its origin, also when every origin is
    allowed; a rejected one carries no ``Access-Control-Allow-Origin``
    header.
    """

    def preflight_response(self, request_headers: Headers) -> Response:
        response = super().preflight_response(request_headers=request_headers)
        headers = {
            key: value
            for key, value in response.headers.items()
            if key not in ("content-length", "content-type")
        }
        if response.status_code == 200:
            headers["access-control-allow-origin"] = request_headers["origin"]
        else:
            headers.pop("access-control-allow-origin", None)
        return Response(status_code=204, headers=headers)

    async def send(self, message: Message, send: Send, request_headers: Headers) -> None:
        if not self.allow_all_origins:
            await super().send(message, send, request_headers)
            return

        async def send_with_origin(message: Message) -> None:
            if message["type"] == "http.response.start":
                headers = MutableHeaders(scope=message)
                self.allow_explicit_origin(headers, request_headers["origin"])
            await send(message)

        await super().send(message, send_with_origin, request_headers)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging, create tables and drop expired content on startup."""
    settings = get_settings()
    setup_logging(log_level=settings.log_level, log_file=settings.log_file)
    init_db()
    with SessionLocal() as db:
        ContentStore(db, settings).purge_expired()
    logger.info("%s %s started", settings.app_name, __version__)
    yield
    logger.info("%s shutting down", settings.app_name)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance with routes, middleware, and error handlers.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="RSVP Speed-Reading API",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=422,
            content={"error": "Invalid request body", "details": jsonable_encoder(exc.errors())},
        )

    # Global Exception Handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        error_id = str(uuid.uuid4())[:8]
        logger.exception("Unhandled exception [%s]: %s", error_id, exc)
        return JSONResponse(
            status_code=500,
            content={"error": "Internal Server Error", "error_id": error_id},
        )

    app.add_middleware(
        ContentCORSMiddleware,
        allow_origins=[settings.allowed_origin],
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type"],
        max_age=86400,
    )

    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(tokens.router, prefix="/api", tags=["tokens"])
    app.include_router(content.router, prefix="/api/content", tags=["content"])

    @app.get("/")
    def root():
        """Root endpoint."""
        return {
            "service": settings.app_name,
            "version": __version__,
            "docs": "/docs" if settings.debug else None,
        }

    return app


# Default app instance for uvicorn
app = create_app()
