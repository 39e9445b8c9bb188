"""
Primary provider: Youdao dictionary and translation OpenAPI.

Supplies the base translation plus dictionary details (phonetic,
explanations, word forms, exam types and web results). Youdao always
answers HTTP 200; the ``errorCode`` field tells success ("0") from failure.
"""

import hashlib
import logging
import time
import uuid
from typing import Optional

from parrot_translate.config import ProviderType
from parrot_translate.models import QueryTypeResult, QueryWordInfo
from parrot_translate.translator.base import BaseTranslator, ProviderError

logger = logging.getLogger(__name__)

YOUDAO_API_URL = "https://openapi.youdao.com/api"

# Replay request: transient, safe to re-send unchanged
RETRYABLE_ERROR_CODES = frozenset({"207"})

# Unsupported language type; with an "auto" source it means detection failed
DETECTION_ERROR_CODES = frozenset({"102"})

YOUDAO_ERROR_MESSAGES = {
    "101": "Missing required parameter",
    "102": "Unsupported language type",
    "103": "Text too long",
    "108": "Invalid application ID",
    "110": "No valid service instance",
    "111": "Invalid developer account",
    "113": "Query text must not be empty",
    "202": "Signature check failed",
    "203": "IP address not allowed",
    "206": "Invalid timestamp",
    "207": "Replay request",
    "301": "Dictionary lookup failed",
    "302": "Translation lookup failed",
    "303": "Other server side error",
    "401": "Account overdue",
    "411": "Access frequency limited",
}


def truncate(text: str) -> str:
    """Input digest used by the v3 signature."""
    if len(text) <= 20:
        return text
    return text[:10] + str(len(text)) + text[-10:]


class YoudaoTranslator(BaseTranslator):
    """Translation and dictionary lookup using the Youdao OpenAPI."""

    # Youdao codes are the canonical ids
    language_column = "language_id"

    def __init__(self, app_key: str, app_secret: str, **kwargs):
        super().__init__(**kwargs)
        self.app_key = app_key
        self.app_secret = app_secret

    @property
    def provider_type(self) -> ProviderType:
        return ProviderType.YOUDAO

    def sign(self, text: str, salt: str, curtime: str) -> str:
        content = self.app_key + truncate(text) + salt + curtime + self.app_secret
        return hashlib.sha256(content.encode("utf-8")).hexdigest()

    def translate(self, query: QueryWordInfo) -> QueryTypeResult:
        """Look up the word with Youdao."""
        from_id = self.language_id(query.from_language)
        to_id = self.language_id(query.to_language)
        logger.info("Youdao lookup: %s -> %s, %d chars", from_id, to_id, len(query.word))

        salt = uuid.uuid4().hex
        curtime = str(int(time.time()))
        data = {
            "q": query.word,
            "from": from_id,
            "to": to_id,
            "appKey": self.app_key,
            "salt": salt,
            "curtime": curtime,
            "signType": "v3",
            "sign": self.sign(query.word, salt, curtime),
        }
        result = self._send("POST", YOUDAO_API_URL, data=data)

        error_code = str(result.get("errorCode", ""))
        if error_code != "0":
            logger.error("Youdao error: %s", result)
            raise ProviderError(
                self.provider_type,
                code=error_code,
                message=YOUDAO_ERROR_MESSAGES.get(error_code, ""),
                retryable=error_code in RETRYABLE_ERROR_CODES,
            )

        translations = result.get("translation") or []
        if not translations:
            raise ProviderError(
                self.provider_type,
                code="invalid_response",
                message="No translations returned from Youdao",
            )
        logger.info("Youdao translate: %s, pair %s", translations, result.get("l"))

        return QueryTypeResult(
            provider=self.provider_type,
            result=result,
            translations=list(translations),
            word_info=query,
        )


def reported_language_pair(result: dict) -> tuple[str, Optional[str]]:
    """
    Split Youdao's reported ``l`` field ("en2zh-CHS") into (from, to).

    Youdao may override an "auto" source, so this is the authoritative
    pair for a response, not the one that was requested.
    """
    pair = result.get("l") or ""
    from_language, _, to_language = pair.partition("2")
    return from_language, to_language or None
