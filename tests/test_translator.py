"""
Tests for the LLM translator.

The DSPy module is replaced with a stub; no model is ever called.
"""

from types import SimpleNamespace

import pytest

from pagetranslate.i18n import Translator, TranslationError, get_language_name, normalize_language_code


class StubPredict:
    def __init__(self, reply: str = "こんにちは。", error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.calls: list[dict] = []

    async def acall(self, **kwargs):
        self.calls.append(kwargs)
        if self.error:
            raise self.error
        return SimpleNamespace(translated_text=self.reply)


FAKE_LM = object()


def make_translator(stub: StubPredict, **kwargs) -> Translator:
    translator = Translator(lm_factory=lambda: FAKE_LM, **kwargs)
    translator._translate_module = stub
    return translator


# =============================================================================
# Translator
# =============================================================================


class TestTranslator:
    @pytest.mark.asyncio
    async def test_translates_with_language_names(self):
        stub = StubPredict(reply="  こんにちは。  ")
        translator = make_translator(stub, context="web page article")

        result = await translator.translate("Hello.", target="ja")

        assert result == "こんにちは。"
        assert stub.calls == [{
            "text": "Hello.",
            "source_language": "auto-detect",
            "target_language": "Japanese",
            "context": "web page article",
        }]

    @pytest.mark.asyncio
    async def test_explicit_source_language(self):
        stub = StubPredict()
        translator = make_translator(stub, default_source="en")

        await translator.translate("Hello.", target="ja")

        assert stub.calls[0]["source_language"] == "English"

    @pytest.mark.asyncio
    async def test_provider_failure_raises(self):
        stub = StubPredict(error=RuntimeError("rate limited"))
        translator = make_translator(stub)

        with pytest.raises(TranslationError, match="rate limited"):
            await translator.translate("Hello.", target="ja")

    @pytest.mark.asyncio
    async def test_missing_credentials_raise_translation_error(self):
        def no_key():
            raise ValueError("GOOGLE_API_KEY or GEMINI_API_KEY not set")

        translator = Translator(lm_factory=no_key)
        translator._translate_module = StubPredict()

        with pytest.raises(TranslationError, match="API_KEY"):
            await translator.translate("Hello.", target="ja")

    @pytest.mark.asyncio
    async def test_empty_reply_raises(self):
        translator = make_translator(StubPredict(reply="   "))

        with pytest.raises(TranslationError):
            await translator.translate("Hello.", target="ja")

    @pytest.mark.asyncio
    async def test_blank_text_is_returned_untouched(self):
        stub = StubPredict()
        translator = make_translator(stub)

        assert await translator.translate("  ", target="ja") == "  "
        assert stub.calls == []

    @pytest.mark.asyncio
    async def test_same_language_is_returned_untouched(self):
        stub = StubPredict()
        translator = make_translator(stub, default_source="ja")

        assert await translator.translate("こんにちは。", target="Japanese") == "こんにちは。"
        assert stub.calls == []


# =============================================================================
# Cache
# =============================================================================


class TestTranslationCaching:
    @pytest.mark.asyncio
    async def test_repeat_translation_uses_cache(self):
        stub = StubPredict()
        translator = make_translator(stub)

        await translator.translate("Hello.", target="ja")
        await translator.translate("Hello.", target="ja")

        assert len(stub.calls) == 1
        assert len(translator.cache) == 1

    @pytest.mark.asyncio
    async def test_failures_are_not_cached(self):
        stub = StubPredict(error=RuntimeError("timeout"))
        translator = make_translator(stub)

        with pytest.raises(TranslationError):
            await translator.translate("Hello.", target="ja")
        stub.error = None
        result = await translator.translate("Hello.", target="ja")

        assert result == "こんにちは。"
        assert len(stub.calls) == 2

    @pytest.mark.asyncio
    async def test_cache_can_be_disabled(self):
        stub = StubPredict()
        translator = make_translator(stub, use_cache=False)

        await translator.translate("Hello.", target="ja")
        await translator.translate("Hello.", target="ja")

        assert translator.cache is None
        assert len(stub.calls) == 2


# =============================================================================
# Languages
# =============================================================================


class TestLanguages:
    def test_normalize(self):
        assert normalize_language_code(" JA ") == "ja"
        assert normalize_language_code("japanese") == "ja"
        assert normalize_language_code("zh_CN") == "zh"

    def test_names(self):
        assert get_language_name("ja") == "Japanese"
        assert get_language_name("xx") == "xx"
