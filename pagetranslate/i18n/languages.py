"""
Language codes and names used in translation prompts.
"""

# Human-readable names
LANGUAGE_NAMES: dict[str, str] = {
    "en": "English",
    "ja": "Japanese",
    "zh": "Chinese (Simplified)",
    "zh-tw": "Chinese (Traditional)",
    "ko": "Korean",
    "es": "Spanish",
    "pt": "Portuguese",
    "fr": "French",
    "de": "German",
    "it": "Italian",
    "ru": "Russian",
    "nl": "Dutch",
    "pl": "Polish",
    "vi": "Vietnamese",
    "th": "Thai",
    "tr": "Turkish",
    "id": "Indonesian",
    "uk": "Ukrainian",
    "ar": "Arabic",
    "he": "Hebrew",
    "hi": "Hindi",
}


def normalize_language_code(code: str) -> str:
    """Normalize language code to standard form."""
    code = code.lower().strip().replace("_", "-")

    # Handle common variants
    variants = {
        "english": "en",
        "japanese": "ja",
        "chinese": "zh",
        "korean": "ko",
        "spanish": "es",
        "french": "fr",
        "german": "de",
        "zh-cn": "zh",
        "zh-hans": "zh",
        "zh-hant": "zh-tw",
        "en-us": "en",
        "en-gb": "en",
        "jp": "ja",
    }

    return variants.get(code, code)


def get_language_name(code: str) -> str:
    """Get human-readable language name, or the code itself if unknown."""
    code = normalize_language_code(code)
    return LANGUAGE_NAMES.get(code, code)
