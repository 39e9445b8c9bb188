"""
Canonical language catalog and per-provider language code maps.

Canonical ids follow the primary provider's vocabulary ("zh-CHS", "en", ...).
Every provider owns one column of the table below; ``None`` means that
provider cannot handle the language.
"""

from dataclasses import dataclass
from typing import Optional

AUTO = "auto"


@dataclass(frozen=True)
class LanguageItem:
    language_id: str
    english_name: str
    baidu_id: Optional[str] = None
    tencent_id: Optional[str] = None
    caiyun_id: Optional[str] = None


LANGUAGES: list[LanguageItem] = [
    LanguageItem("zh-CHS", "Chinese-Simplified", "zh", "zh", "zh"),
    LanguageItem("zh-CHT", "Chinese-Traditional", "cht", "zh-TW", None),
    LanguageItem("en", "English", "en", "en", "en"),
    LanguageItem("ja", "Japanese", "jp", "ja", "ja"),
    LanguageItem("ko", "Korean", "kor", "ko", None),
    LanguageItem("fr", "French", "fra", "fr", None),
    LanguageItem("es", "Spanish", "spa", "es", None),
    LanguageItem("it", "Italian", "it", "it", None),
    LanguageItem("de", "German", "de", "de", None),
    LanguageItem("pt", "Portuguese", "pt", "pt", None),
    LanguageItem("ru", "Russian", "ru", "ru", None),
    LanguageItem("ar", "Arabic", "ara", "ar", None),
    LanguageItem("th", "Thai", "th", "th", None),
    LanguageItem("vi", "Vietnamese", "vie", "vi", None),
    LanguageItem("id", "Indonesian", "id", "id", None),
    LanguageItem("ms", "Malay", "may", "ms", None),
    LanguageItem("tr", "Turkish", "tr", "tr", None),
    LanguageItem("hi", "Hindi", "hi", "hi", None),
    LanguageItem("nl", "Dutch", "nl", None, None),
    LanguageItem("sv", "Swedish", "swe", None, None),
    LanguageItem("pl", "Polish", "pl", None, None),
    LanguageItem("el", "Greek", "el", None, None),
    LanguageItem("da", "Danish", "dan", None, None),
    LanguageItem("fi", "Finnish", "fin", None, None),
    LanguageItem("cs", "Czech", "cs", None, None),
    LanguageItem("ro", "Romanian", "rom", None, None),
    LanguageItem("hu", "Hungarian", "hu", None, None),
    LanguageItem("uk", "Ukrainian", "ukr", None, None),
    LanguageItem("bg", "Bulgarian", "bul", None, None),
]

_BY_ID = {item.language_id: item for item in LANGUAGES}


def is_valid_language_id(language_id: str) -> bool:
    return language_id == AUTO or language_id in _BY_ID


def get_language_item(language_id: str) -> Optional[LanguageItem]:
    return _BY_ID.get(language_id)


def to_provider_id(language_id: str, column: str) -> Optional[str]:
    """Map a canonical id to a provider code; ``column`` is e.g. ``"baidu_id"``."""
    if language_id == AUTO:
        return AUTO
    item = _BY_ID.get(language_id)
    if item is None:
        return None
    return getattr(item, column)


def from_provider_id(provider_id: str, column: str) -> Optional[str]:
    """Map a provider code back to the canonical id."""
    if provider_id == AUTO:
        return AUTO
    for item in LANGUAGES:
        if getattr(item, column) == provider_id:
            return item.language_id
    return None
