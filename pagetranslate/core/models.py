"""
Data models for translation streams.

A stream is a sequence of data events, one per translated batch, followed by
exactly one terminal event (done or error).
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel


# =============================================================================
# Enums
# =============================================================================


class StreamEventKind(str, Enum):
    """Kind of event sent to the client."""

    DATA = "data"  # One translated batch
    DONE = "done"  # Stream finished normally
    ERROR = "error"  # Stream aborted, no sentences to translate


# =============================================================================
# Models
# =============================================================================


class BatchResult(BaseModel):
    """A translated batch of consecutive sentences."""

    index: int  # Index of the first sentence in the batch
    original: str
    text: str


@dataclass(frozen=True)
class StreamEvent:
    """
    One event of a translation stream.

    Use the `data`, `done` and `error` constructors rather than building
    instances directly.
    """

    kind: StreamEventKind
    batch: BatchResult | None = None
    message: str | None = None

    @classmethod
    def data(cls, index: int, original: str, text: str) -> StreamEvent:
        return cls(
            kind=StreamEventKind.DATA,
            batch=BatchResult(index=index, original=original, text=text),
        )

    @classmethod
    def done(cls) -> StreamEvent:
        return cls(kind=StreamEventKind.DONE)

    @classmethod
    def error(cls, message: str) -> StreamEvent:
        return cls(kind=StreamEventKind.ERROR, message=message)

    @property
    def is_terminal(self) -> bool:
        return self.kind is not StreamEventKind.DATA

    def to_sse(self) -> str:
        """Format as a Server-Sent Event."""
        if self.kind is StreamEventKind.DATA:
            payload = _dumps(self.batch.model_dump())
            return f"data: {payload}\n\n"
        if self.kind is StreamEventKind.DONE:
            return "event: done\ndata: \n\n"
        return f"event: error\ndata: {_dumps(self.message or '')}\n\n"


def _dumps(value: object) -> str:
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
