"""
Merge the primary result and the enrichment results into one
TranslateFormatResult.
"""

import logging
from typing import Optional

from parrot_translate.models import (
    QueryTypeResult,
    QueryWordInfo,
    TranslateFormatResult,
    TranslateItem,
    WebTranslationItem,
    WordForm,
)
from parrot_translate.translator.youdao_translator import reported_language_pair

logger = logging.getLogger(__name__)


def _parse_forms(wfs: Optional[list]) -> Optional[list[WordForm]]:
    if wfs is None:
        return None
    forms = []
    for item in wfs:
        wf = item.get("wf") or {}
        forms.append(WordForm(name=wf.get("name", ""), value=wf.get("value", "")))
    return forms


def _parse_web(web: Optional[list]) -> Optional[list[WebTranslationItem]]:
    if web is None:
        return None
    return [
        WebTranslationItem(key=item.get("key", ""), value=list(item.get("value") or []))
        for item in web
    ]


def format_translate_result(
    primary: QueryTypeResult,
    enrichments: Optional[list[Optional[QueryTypeResult]]] = None,
) -> TranslateFormatResult:
    """
    Build the canonical result.

    Args:
        primary: The primary provider's result; its candidates come first.
        enrichments: Enrichment results already in fixed priority order.
            ``None`` entries (failed providers) contribute nothing.
    """
    translations = [TranslateItem(primary.provider, text) for text in primary.translations]
    for enrichment in enrichments or []:
        if enrichment is None or not enrichment.translations:
            continue
        translations.append(TranslateItem(enrichment.provider, enrichment.text))

    src = primary.result
    basic = src.get("basic") or {}
    from_language, to_language = reported_language_pair(src)
    query_word_info = QueryWordInfo(
        word=src.get("query", primary.word_info.word),
        from_language=from_language or primary.word_info.from_language,
        to_language=to_language or primary.word_info.to_language,
        phonetic=basic.get("phonetic"),
        is_word=src.get("isWord"),
        exam_types=basic.get("exam_type"),
    )

    web = _parse_web(src.get("web"))
    web_translation = web[0] if web else None
    web_phrases = web[1:] if web is not None else None

    return TranslateFormatResult(
        query_word_info=query_word_info,
        translations=translations,
        explanations=basic.get("explains"),
        forms=_parse_forms(basic.get("wfs")),
        web_translation=web_translation,
        web_phrases=web_phrases,
    )
