"""Services - the streaming controller and its AI helpers."""

from pagetranslate.services.streaming import (
    BatchStreamController,
    DEFAULT_BATCH_SIZE,
    DEFAULT_MAX_BATCH_SENTENCES,
    DEFAULT_FAILURE_TEXT,
)

__all__ = [
    "BatchStreamController",
    "DEFAULT_BATCH_SIZE",
    "DEFAULT_MAX_BATCH_SENTENCES",
    "DEFAULT_FAILURE_TEXT",
]
