"""
Batch streaming of page translations.

Pages through the cached sentences of a URL in fixed-size batches, translates
each batch and yields one event per batch, then a single terminal event.

A request translates at most `max_batch_sentences` sentences starting at
`start`. Clients continue a page by reconnecting with a later `start`; the
server keeps no session beyond the sentence cache.
"""

from __future__ import annotations

import asyncio
import logging
from typing import AsyncGenerator, Awaitable, Callable, Protocol

from pagetranslate.core.cache import SentenceCache
from pagetranslate.core.models import StreamEvent
from pagetranslate.core.segmenter import SentenceSegmenter
from pagetranslate.integrations.sentry import capture_exception
from pagetranslate.integrations.web import FetchError

logger = logging.getLogger(__name__)


DEFAULT_BATCH_SIZE = 3
DEFAULT_MAX_BATCH_SENTENCES = 100
DEFAULT_BATCH_DELAY = 0.1  # seconds
DEFAULT_FAILURE_TEXT = "(翻訳失敗)"


# =============================================================================
# Collaborators
# =============================================================================


class TextFetcher(Protocol):
    async def fetch_text(self, url: str) -> str: ...


class TextTranslator(Protocol):
    async def translate(self, text: str, target: str) -> str: ...


# =============================================================================
# Controller
# =============================================================================


class BatchStreamController:
    """
    Turns a URL into a stream of translated sentence batches.

    Example:
        controller = BatchStreamController(
            fetcher=PageFetcher(client),
            translator=Translator(),
            cache=SentenceCache(),
        )
        async for event in controller.stream(url, start=0):
            await send(event.to_sse())

    Every stream ends with exactly one terminal event: `done` after the last
    batch, or `error` if the page's sentences could not be obtained. A batch
    whose translation fails still produces a data event, carrying
    `failure_text` instead of a translation.
    """

    def __init__(
        self,
        fetcher: TextFetcher,
        translator: TextTranslator,
        cache: SentenceCache | None = None,
        segmenter: SentenceSegmenter | None = None,
        *,
        batch_size: int = DEFAULT_BATCH_SIZE,
        max_batch_sentences: int = DEFAULT_MAX_BATCH_SENTENCES,
        batch_delay: float = DEFAULT_BATCH_DELAY,
        target_language: str = "ja",
        failure_text: str = DEFAULT_FAILURE_TEXT,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        if batch_size < 1:
            raise ValueError("batch_size must be at least 1")
        if max_batch_sentences < 1:
            raise ValueError("max_batch_sentences must be at least 1")

        self.fetcher = fetcher
        self.translator = translator
        self.cache = cache if cache is not None else SentenceCache()
        self.segmenter = segmenter or SentenceSegmenter()
        self.batch_size = batch_size
        self.max_batch_sentences = max_batch_sentences
        self.batch_delay = batch_delay
        self.target_language = target_language
        self.failure_text = failure_text
        self._sleep = sleep

    async def resolve_sentences(self, url: str) -> list[str]:
        """Get the sentences of a page, fetching and segmenting on a cache miss."""

        async def compute() -> list[str]:
            text = await self.fetcher.fetch_text(url)
            sentences = self.segmenter.segment(text)
            logger.info(f"Segmented {url} into {len(sentences)} sentences")
            return sentences

        return await self.cache.get_or_compute(url, compute)

    def window(self, total: int, start: int) -> range:
        """Starting indices of the batches served for a request at `start`."""
        end = min(total, start + self.max_batch_sentences)
        return range(start, end, self.batch_size)

    def stream(self, url: str, start: int = 0) -> AsyncGenerator[StreamEvent, None]:
        """
        Yield translated batches of `url` starting at sentence `start`.

        Raises:
            ValueError: if `url` is empty or `start` is negative (before any
                event is produced)
        """
        if not url:
            raise ValueError("url required")
        if start < 0:
            raise ValueError("start must not be negative")

        return self._stream(url, start)

    async def _stream(self, url: str, start: int) -> AsyncGenerator[StreamEvent, None]:
        try:
            sentences = await self.resolve_sentences(url)
        except FetchError as e:
            logger.warning(f"Could not load {url}: {e}")
            yield StreamEvent.error(str(e))
            return
        except Exception as e:
            logger.error(f"Unexpected error loading {url}: {e}")
            capture_exception(e, url=url)
            yield StreamEvent.error(str(e))
            return

        batch_starts = self.window(len(sentences), start)
        last = batch_starts[-1] if batch_starts else None

        for i in batch_starts:
            original = " ".join(sentences[i:i + self.batch_size])
            text = await self._translate_batch(original, url, i)

            yield StreamEvent.data(index=i, original=original, text=text)

            if i != last:
                await self._sleep(self.batch_delay)

        yield StreamEvent.done()

    async def _translate_batch(self, batch: str, url: str, index: int) -> str:
        try:
            return await self.translator.translate(batch, self.target_language)
        except Exception:
            logger.warning(
                f"Translation failed for batch {index} of {url}", exc_info=True
            )
            return self.failure_text
