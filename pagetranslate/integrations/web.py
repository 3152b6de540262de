# =============================================================================
# Web Page Fetching & Text Extraction
# =============================================================================
#
# Fetches an HTML page and pulls out its readable block text:
#   - every <li> inside an <ol> (numbered articles, listicles, papers)
#   - or, when the page has no ordered-list items, every <p>
#
# Each block's whitespace is collapsed and the blocks are joined with a
# single space, ready for sentence segmentation.
#
# =============================================================================

from __future__ import annotations

import logging
import re

import httpx
from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

WHITESPACE = re.compile(r"\s+")

# Content types we are willing to parse as HTML/text.
TEXT_CONTENT_TYPES = ("text/", "application/xhtml+xml", "application/xml")


class FetchError(Exception):
    """Page could not be fetched or its text could not be extracted."""
    pass


# =============================================================================
# Extraction
# =============================================================================


def normalize_whitespace(text: str) -> str:
    """Collapse every run of whitespace to a single space."""
    return WHITESPACE.sub(" ", text)


def extract_block_text(html: str | bytes) -> str:
    """
    Extract block-level text from an HTML document.

    Ordered-list items win over paragraphs. Every block is followed by a
    single space, so the result ends with a space when non-empty.
    """
    soup = BeautifulSoup(html, "html.parser")

    text = _join_blocks(soup.select("ol li"))
    if not text.strip():
        text = _join_blocks(soup.find_all("p"))
    return text


def _join_blocks(elements) -> str:
    return "".join(normalize_whitespace(el.get_text()) + " " for el in elements)


# =============================================================================
# Fetcher
# =============================================================================


class PageFetcher:
    """
    Fetch a page over HTTP and return its block text.

    Usage:
        async with httpx.AsyncClient() as client:
            fetcher = PageFetcher(client)
            text = await fetcher.fetch_text("https://example.com/article")

    No retries are attempted: a failed fetch raises FetchError immediately.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        user_agent: str = "Mozilla/5.0",
        timeout: float = 20.0,
    ):
        self.client = client
        self.user_agent = user_agent
        self.timeout = timeout

    async def fetch_html(self, url: str) -> str:
        """GET `url` and return its body as text."""
        try:
            response = await self.client.get(
                url,
                headers={"User-Agent": self.user_agent},
                timeout=self.timeout,
                follow_redirects=True,
            )
        except httpx.InvalidURL as e:
            raise FetchError(f"Invalid URL: {url}") from e
        except httpx.HTTPError as e:
            logger.error(f"Request to {url} failed: {e}")
            raise FetchError(f"Could not fetch {url}: {e}") from e

        if not response.is_success:
            raise FetchError(f"Fetching {url} returned HTTP {response.status_code}")

        content_type = response.headers.get("content-type", "text/html").lower()
        if not content_type.startswith(TEXT_CONTENT_TYPES):
            raise FetchError(f"Unsupported content type for {url}: {content_type}")

        return response.text

    async def fetch_text(self, url: str) -> str:
        """Fetch `url` and extract its normalized block text."""
        html = await self.fetch_html(url)
        try:
            return extract_block_text(html)
        except Exception as e:
            raise FetchError(f"Could not extract text from {url}: {e}") from e
