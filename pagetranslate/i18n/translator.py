"""
LLM-powered translator with caching.

Translates sentence batches through DSPy. Successful translations are cached
by content hash, so re-streaming a page only pays for batches that failed
or were never translated.
"""

from __future__ import annotations

import hashlib
import logging
from typing import Callable

import dspy

from pagetranslate.i18n.languages import normalize_language_code, get_language_name

logger = logging.getLogger(__name__)


class TranslationError(Exception):
    """The translation provider failed for one piece of text."""
    pass


# =============================================================================
# DSPy Signature for Translation
# =============================================================================


class TranslateText(dspy.Signature):
    """Translate text while preserving meaning, tone, and style.

    Translate every sentence; do not summarize, add notes, or omit content.
    """

    text: str = dspy.InputField(desc="Text to translate")
    source_language: str = dspy.InputField(desc="Source language, or 'auto-detect'")
    target_language: str = dspy.InputField(desc="Target language name (e.g., 'Japanese')")
    context: str = dspy.InputField(desc="Context about the text (optional)", default="")

    translated_text: str = dspy.OutputField(desc="Translated text")


# =============================================================================
# Translation Cache
# =============================================================================


class TranslationCache:
    """Simple hash-based in-memory translation cache."""

    def __init__(self):
        self._cache: dict[str, str] = {}

    def _make_key(self, text: str, source: str, target: str) -> str:
        """Create cache key from content hash."""
        content = f"{source}:{target}:{text}"
        return hashlib.sha256(content.encode()).hexdigest()[:16]

    def get(self, text: str, source: str, target: str) -> str | None:
        return self._cache.get(self._make_key(text, source, target))

    def set(self, text: str, source: str, target: str, translation: str) -> None:
        self._cache[self._make_key(text, source, target)] = translation

    def clear(self) -> None:
        self._cache.clear()

    def __len__(self) -> int:
        return len(self._cache)


# =============================================================================
# Translator Service
# =============================================================================


class Translator:
    """
    Main translation service.

    Usage:
        translator = Translator()
        ja_text = await translator.translate("Hello world.", target="ja")

    Unlike a best-effort translator, failures are raised as TranslationError
    so the caller decides what to show instead.
    """

    def __init__(
        self,
        lm_factory: Callable[[], dspy.LM] | None = None,
        default_source: str | None = None,
        context: str = "",
        use_cache: bool = True,
    ):
        if lm_factory is None:
            from pagetranslate.services.ai.client import get_lm
            lm_factory = get_lm

        self.lm_factory = lm_factory
        self.default_source = default_source
        self.context = context
        self.cache = TranslationCache() if use_cache else None

        # DSPy module (lazy initialized)
        self._translate_module: dspy.Predict | None = None

    @property
    def translate_module(self) -> dspy.Predict:
        if self._translate_module is None:
            self._translate_module = dspy.Predict(TranslateText)
        return self._translate_module

    async def translate(
        self,
        text: str,
        target: str,
        source: str | None = None,
    ) -> str:
        """
        Translate text to target language.

        Args:
            text: Text to translate
            target: Target language code
            source: Source language code (auto-detect if None)

        Returns:
            Translated text

        Raises:
            TranslationError: if the provider call fails or returns nothing
        """
        if not text or not text.strip():
            return text

        target = normalize_language_code(target)
        source = source or self.default_source
        source = normalize_language_code(source) if source else "auto"

        if source == target:
            return text

        if self.cache is not None:
            cached = self.cache.get(text, source, target)
            if cached:
                return cached

        try:
            with dspy.context(lm=self.lm_factory()):
                result = await self.translate_module.acall(
                    text=text,
                    source_language="auto-detect" if source == "auto" else get_language_name(source),
                    target_language=get_language_name(target),
                    context=self.context or "general text",
                )
        except Exception as e:
            raise TranslationError(f"Translation to {target} failed: {e}") from e

        translation = (result.translated_text or "").strip()
        if not translation:
            raise TranslationError(f"Translation to {target} returned no text")

        if self.cache is not None:
            self.cache.set(text, source, target, translation)

        return translation
