"""Integrations with the outside world: web pages and error tracking."""

from pagetranslate.integrations.web import (
    PageFetcher,
    FetchError,
    extract_block_text,
    normalize_whitespace,
)

__all__ = [
    "PageFetcher",
    "FetchError",
    "extract_block_text",
    "normalize_whitespace",
]
