"""
Per-URL sentence cache.

Holds the segmented sentences of every page fetched so far, so that a client
resuming a stream with a later `start` offset does not trigger a re-fetch.

With the default policy the cache is unbounded and entries never expire:
memory grows with every distinct URL for the life of the process. Pass
`max_entries` and/or `ttl_seconds` to bound it.
"""

from __future__ import annotations

import logging
import time
from collections import OrderedDict
from typing import Awaitable, Callable

logger = logging.getLogger(__name__)

SentenceComputer = Callable[[], Awaitable[list[str]]]


class SentenceCache:
    """
    In-memory URL -> sentences mapping with optional LRU and TTL policy.

    There is no locking. Two streams that miss on the same URL at the same
    time will both compute it; the last one to finish is stored. Both
    computations produce the same sentences, so only work is wasted.
    """

    def __init__(
        self,
        max_entries: int | None = None,
        ttl_seconds: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        if max_entries is not None and max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        if ttl_seconds is not None and ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")

        self.max_entries = max_entries
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        # url -> (sentences, stored_at)
        self._entries: OrderedDict[str, tuple[list[str], float]] = OrderedDict()

    def get(self, url: str) -> list[str] | None:
        """Get cached sentences, or None if absent or expired."""
        entry = self._entries.get(url)
        if entry is None:
            return None

        sentences, stored_at = entry
        if self.ttl_seconds is not None and self._clock() - stored_at > self.ttl_seconds:
            del self._entries[url]
            return None

        self._entries.move_to_end(url)
        return sentences

    def set(self, url: str, sentences: list[str]) -> None:
        """Store sentences for a URL, evicting the oldest entry if full."""
        self._entries[url] = (sentences, self._clock())
        self._entries.move_to_end(url)

        if self.max_entries is not None:
            while len(self._entries) > self.max_entries:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug(f"Evicted {evicted} from sentence cache")

    async def get_or_compute(self, url: str, compute: SentenceComputer) -> list[str]:
        """
        Return cached sentences for `url`, computing and storing them on a miss.

        If `compute` raises, nothing is stored and the error propagates.
        """
        cached = self.get(url)
        if cached is not None:
            return cached

        logger.info(f"Sentence cache miss for {url}")
        sentences = await compute()
        self.set(url, sentences)
        return sentences

    def clear(self) -> None:
        """Drop every entry."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, url: object) -> bool:
        return isinstance(url, str) and self.get(url) is not None
