"""
Parrot word lookup
==================

Looks up a word or phrase and returns one unified result assembled from a
primary dictionary provider and several enrichment translation providers.

Architecture:
    text → Local Language Heuristic → Lookup Session
        → Primary provider (with ping-pong correction and retries)
        → Enrichment providers in parallel
        → Result Normalizer → Display Sections

Providers:
    1. Youdao (primary): base translation, phonetic, explanations,
       word forms and web results
    2. Baidu: enrichment line, and fallback language detection
    3. Tencent: enrichment line
    4. Caiyun: enrichment line (zh, en, ja only)
"""

__version__ = "1.0.0"
__author__ = "Parrot Translate"

from parrot_translate.config import LookupConfig, ProviderType


def __getattr__(name: str):
    """Lazy import so that config stays importable without building HTTP clients."""
    if name == "LookupSession":
        from parrot_translate.translator.orchestrator import LookupSession
        return LookupSession
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["LookupConfig", "LookupSession", "ProviderType"]
