"""
Translation providers: one primary dictionary provider, three enrichment
providers, and the lookup orchestrator that drives them.
"""

from parrot_translate.translator.base import (
    BaseTranslator,
    NetworkError,
    ProviderError,
    QueryCancelledError,
    RequestErrorInfo,
    RetriesExhaustedError,
    TranslateError,
    UnsupportedLanguageError,
)

__all__ = [
    "BaseTranslator",
    "NetworkError",
    "ProviderError",
    "QueryCancelledError",
    "RequestErrorInfo",
    "RetriesExhaustedError",
    "TranslateError",
    "UnsupportedLanguageError",
    "YoudaoTranslator",
    "BaiduTranslator",
    "TencentTranslator",
    "CaiyunTranslator",
    "LookupSession",
    "TextChangeDebouncer",
]


def __getattr__(name: str):
    if name == "YoudaoTranslator":
        from parrot_translate.translator.youdao_translator import YoudaoTranslator
        return YoudaoTranslator
    if name == "BaiduTranslator":
        from parrot_translate.translator.baidu_translator import BaiduTranslator
        return BaiduTranslator
    if name == "TencentTranslator":
        from parrot_translate.translator.tencent_translator import TencentTranslator
        return TencentTranslator
    if name == "CaiyunTranslator":
        from parrot_translate.translator.caiyun_translator import CaiyunTranslator
        return CaiyunTranslator
    if name == "LookupSession":
        from parrot_translate.translator.orchestrator import LookupSession
        return LookupSession
    if name == "TextChangeDebouncer":
        from parrot_translate.translator.orchestrator import TextChangeDebouncer
        return TextChangeDebouncer
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
