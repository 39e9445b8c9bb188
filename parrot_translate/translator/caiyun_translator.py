"""
Enrichment provider: Caiyun (LingoCloud) translator. Only zh, en and ja.
"""

import logging
import uuid

from parrot_translate.config import ProviderType
from parrot_translate.models import QueryTypeResult, QueryWordInfo
from parrot_translate.translator.base import BaseTranslator, ProviderError

logger = logging.getLogger(__name__)

CAIYUN_API_URL = "https://api.interpreter.caiyunai.com/v1/translator"


class CaiyunTranslator(BaseTranslator):
    """Translation using the Caiyun interpreter API."""

    language_column = "caiyun_id"

    def __init__(self, token: str, **kwargs):
        super().__init__(**kwargs)
        self.token = token

    @property
    def provider_type(self) -> ProviderType:
        return ProviderType.CAIYUN

    def translate(self, query: QueryWordInfo) -> QueryTypeResult:
        trans_type = f"{self.language_id(query.from_language)}2{self.language_id(query.to_language)}"
        logger.info("Caiyun translation: %s", trans_type)

        body = {
            "source": query.word,
            "trans_type": trans_type,
            "request_id": uuid.uuid4().hex,
            "detect": True,
        }
        headers = {"x-authorization": f"token {self.token}"}
        result = self._send("POST", CAIYUN_API_URL, json=body, headers=headers)

        target = result.get("target")
        if not isinstance(target, str):
            logger.error("Caiyun translate error: %s", result)
            raise ProviderError(
                self.provider_type,
                code=str(result.get("code", "invalid_response")),
                message=result.get("message", "No target returned from Caiyun"),
            )

        logger.info("Caiyun translate: %s", target)
        return QueryTypeResult(
            provider=self.provider_type,
            result=result,
            translations=[target],
            word_info=query,
        )
