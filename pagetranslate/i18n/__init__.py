"""
Internationalization - LLM-powered translation with caching.

Usage:
    from pagetranslate.i18n import Translator

    translator = Translator(context="web page article")
    text_ja = await translator.translate("Hello world.", target="ja")
"""

from pagetranslate.i18n.translator import (
    Translator,
    TranslationCache,
    TranslationError,
)
from pagetranslate.i18n.languages import (
    LANGUAGE_NAMES,
    get_language_name,
    normalize_language_code,
)

__all__ = [
    "Translator",
    "TranslationCache",
    "TranslationError",
    "LANGUAGE_NAMES",
    "get_language_name",
    "normalize_language_code",
]
