"""
FastAPI application for pagetranslate.

Serves the translation stream consumed by the browser client through
EventSource, plus a few supporting endpoints.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator

import httpx
from fastapi import FastAPI, HTTPException, Depends, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse, StreamingResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel

from pagetranslate.config import get_settings, configure_logging
from pagetranslate.core.cache import SentenceCache
from pagetranslate.core.models import StreamEvent
from pagetranslate.i18n import Translator
from pagetranslate.integrations.sentry import init_sentry
from pagetranslate.integrations.web import PageFetcher, FetchError
from pagetranslate.services.streaming import BatchStreamController

logger = logging.getLogger(__name__)


# =============================================================================
# App State
# =============================================================================


class AppState:
    """Application state - initialized at startup."""

    http_client: httpx.AsyncClient
    controller: BatchStreamController


state = AppState()


def build_controller(http_client: httpx.AsyncClient) -> BatchStreamController:
    """Wire the stream controller from settings."""
    settings = get_settings()

    fetcher = PageFetcher(
        http_client,
        user_agent=settings.fetch_user_agent,
        timeout=settings.fetch_timeout_seconds,
    )
    translator = Translator(
        default_source=settings.source_language or None,
        context=settings.translation_context,
        use_cache=settings.translation_cache_enabled,
    )
    cache = SentenceCache(
        max_entries=settings.page_cache_max_entries,
        ttl_seconds=settings.page_cache_ttl_seconds,
    )

    return BatchStreamController(
        fetcher=fetcher,
        translator=translator,
        cache=cache,
        batch_size=settings.batch_size,
        max_batch_sentences=settings.max_batch_sentences,
        batch_delay=settings.batch_delay_seconds,
        target_language=settings.target_language,
        failure_text=settings.translation_failure_text,
    )


# =============================================================================
# Lifespan
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize and cleanup app resources."""
    settings = get_settings()
    configure_logging(settings.log_level)

    if init_sentry():
        logger.info("✅ Sentry error tracking enabled")

    state.http_client = httpx.AsyncClient()
    state.controller = build_controller(state.http_client)

    logger.info(f"🚀 pagetranslate starting in {settings.environment} mode")

    yield

    await state.http_client.aclose()
    logger.info("👋 pagetranslate shutting down")


# =============================================================================
# App Setup
# =============================================================================


app = FastAPI(
    title="pagetranslate",
    description="Stream machine-translated web pages sentence batch by batch",
    version="0.1.0",
    lifespan=lifespan,
)


# CORS
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Dependencies
# =============================================================================


def get_stream_controller() -> BatchStreamController:
    return state.controller


# =============================================================================
# Request/Response Models
# =============================================================================


class SentencesResponse(BaseModel):
    url: str
    count: int
    sentences: list[str]


# =============================================================================
# Health Check
# =============================================================================


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "pagetranslate"}


# =============================================================================
# Translation Stream
# =============================================================================


SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
    "X-Accel-Buffering": "no",  # Disable nginx buffering
}


async def sse_stream(
    request: Request,
    events: AsyncGenerator[StreamEvent, None],
) -> AsyncGenerator[str, None]:
    """Encode controller events as SSE, stopping once the client goes away."""
    try:
        async for event in events:
            if await request.is_disconnected():
                logger.info(f"Client disconnected from {request.url}")
                break
            yield event.to_sse()
    finally:
        await events.aclose()


@app.get("/api/translate-stream")
async def translate_stream(
    request: Request,
    url: str | None = None,
    start: str = "0",
    controller: BatchStreamController = Depends(get_stream_controller),
):
    """
    Stream translated sentence batches of a web page.

    Each data event carries `{index, original, text}` for one batch. The
    stream ends with a `done` event, or an `error` event when the page
    cannot be loaded. Clients resume with `start` = last index + batch size.
    """
    if not url:
        return PlainTextResponse("url required", status_code=400)

    try:
        start_index = int(start)
    except ValueError:
        return PlainTextResponse("start must be an integer", status_code=400)
    if start_index < 0:
        return PlainTextResponse("start must not be negative", status_code=400)

    events = controller.stream(url, start_index)

    return StreamingResponse(
        sse_stream(request, events),
        media_type="text/event-stream",
        headers=SSE_HEADERS,
    )


@app.get("/api/sentences", response_model=SentencesResponse)
async def list_sentences(
    url: str,
    controller: BatchStreamController = Depends(get_stream_controller),
):
    """Segmented sentences of a page, as the stream addresses them."""
    try:
        sentences = await controller.resolve_sentences(url)
    except FetchError as e:
        raise HTTPException(status_code=502, detail=str(e))

    return SentencesResponse(url=url, count=len(sentences), sentences=sentences)


# =============================================================================
# Browser client
# =============================================================================


# Mounted last so the API routes above take precedence.
if Path(settings.static_dir).is_dir():
    app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")
