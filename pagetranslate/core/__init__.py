"""
Core module - segmentation, caching and stream event models.

This module contains:
- segmenter: Sentence splitting with abbreviation protection
- cache: Per-URL sentence cache
- models: Stream events and their SSE encoding
"""

from pagetranslate.core.segmenter import (
    SentenceSegmenter,
    DEFAULT_ABBREVIATIONS,
    split_sentences,
)
from pagetranslate.core.cache import SentenceCache
from pagetranslate.core.models import (
    BatchResult,
    StreamEvent,
    StreamEventKind,
)

__all__ = [
    "SentenceSegmenter",
    "DEFAULT_ABBREVIATIONS",
    "split_sentences",
    "SentenceCache",
    "BatchResult",
    "StreamEvent",
    "StreamEventKind",
]
