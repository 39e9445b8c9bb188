"""
Source language detection.

The local heuristic is a cheap pre-filter: it only ever answers with one
of the user's two preference languages or "auto". The provider-backed
detector is consulted only when the primary provider says it could not
tell the source language apart.
"""

import logging
from typing import Optional

from parrot_translate.config import LookupConfig
from parrot_translate.languages import AUTO
from parrot_translate.models import LanguageDetectResult
from parrot_translate.translator.base import BaseTranslator, TranslateError
from parrot_translate.utils import is_contain_chinese, is_english_or_number

logger = logging.getLogger(__name__)


class LanguageDetector:
    """Local heuristic detector bound to the user's preference languages."""

    def __init__(self, config: LookupConfig):
        self.config = config

    def detect(self, text: str) -> str:
        """Return the likely canonical source language of ``text``, or "auto"."""
        preferences = self.config.preference_languages
        language_id = AUTO
        if is_english_or_number(text) and self.config.latin_language in preferences:
            language_id = self.config.latin_language
        elif is_contain_chinese(text) and self.config.chinese_language in preferences:
            language_id = self.config.chinese_language
        logger.debug("local detect language: %s", language_id)
        return language_id


def detect_with_provider(
    text: str, translator: Optional[BaseTranslator]
) -> Optional[LanguageDetectResult]:
    """
    Ask a provider to detect the language of ``text``.

    Returns None when no detecting provider is configured, when the call
    fails, or when the provider's answer has no canonical mapping.
    """
    if translator is None or not translator.can_detect:
        return None
    try:
        result = translator.detect(text)
    except TranslateError as e:
        logger.warning("%s language detect failed: %s", e.provider.value, e.info)
        return None
    if not result.detected_language_id or result.detected_language_id == AUTO:
        logger.warning("%s detected unmapped language %r", result.provider.value, result.source_language_id)
        return None
    if not result.confirmed:
        logger.info(
            "%s detection of %s is unconfirmed", result.provider.value, result.detected_language_id
        )
    return result
