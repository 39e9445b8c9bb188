"""
Enrichment provider: Tencent Cloud machine translation (TMT).

Requests are signed with TC3-HMAC-SHA256.
"""

import hashlib
import hmac
import json
import logging
import time
from datetime import datetime, timezone

from parrot_translate.config import ProviderType
from parrot_translate.models import QueryTypeResult, QueryWordInfo
from parrot_translate.translator.base import BaseTranslator, ProviderError

logger = logging.getLogger(__name__)

TENCENT_HOST = "tmt.tencentcloudapi.com"
TENCENT_SERVICE = "tmt"
TENCENT_ACTION = "TextTranslate"
TENCENT_VERSION = "2018-03-21"
TENCENT_REGION = "ap-guangzhou"
CONTENT_TYPE = "application/json; charset=utf-8"


def _hmac_sha256(key: bytes, message: str) -> bytes:
    return hmac.new(key, message.encode("utf-8"), hashlib.sha256).digest()


def _sha256_hex(message: str) -> str:
    return hashlib.sha256(message.encode("utf-8")).hexdigest()


class TencentTranslator(BaseTranslator):
    """Translation using Tencent Cloud TextTranslate."""

    language_column = "tencent_id"

    def __init__(self, secret_id: str, secret_key: str, **kwargs):
        super().__init__(**kwargs)
        self.secret_id = secret_id
        self.secret_key = secret_key

    @property
    def provider_type(self) -> ProviderType:
        return ProviderType.TENCENT

    def authorization(self, payload: str, timestamp: int) -> str:
        """Build the TC3-HMAC-SHA256 Authorization header for ``payload``."""
        date = datetime.fromtimestamp(timestamp, tz=timezone.utc).strftime("%Y-%m-%d")
        signed_headers = "content-type;host"
        canonical_request = "\n".join(
            [
                "POST",
                "/",
                "",
                f"content-type:{CONTENT_TYPE}\nhost:{TENCENT_HOST}\n",
                signed_headers,
                _sha256_hex(payload),
            ]
        )
        credential_scope = f"{date}/{TENCENT_SERVICE}/tc3_request"
        string_to_sign = "\n".join(
            [
                "TC3-HMAC-SHA256",
                str(timestamp),
                credential_scope,
                _sha256_hex(canonical_request),
            ]
        )
        secret_date = _hmac_sha256(("TC3" + self.secret_key).encode("utf-8"), date)
        secret_service = _hmac_sha256(secret_date, TENCENT_SERVICE)
        secret_signing = _hmac_sha256(secret_service, "tc3_request")
        signature = hmac.new(
            secret_signing, string_to_sign.encode("utf-8"), hashlib.sha256
        ).hexdigest()
        return (
            f"TC3-HMAC-SHA256 Credential={self.secret_id}/{credential_scope}, "
            f"SignedHeaders={signed_headers}, Signature={signature}"
        )

    def translate(self, query: QueryWordInfo) -> QueryTypeResult:
        source = self.language_id(query.from_language)
        target = self.language_id(query.to_language)
        logger.info("Tencent translation: %s -> %s", source, target)

        payload = json.dumps(
            {"SourceText": query.word, "Source": source, "Target": target, "ProjectId": 0},
            ensure_ascii=False,
        )
        timestamp = int(time.time())
        headers = {
            "Authorization": self.authorization(payload, timestamp),
            "Content-Type": CONTENT_TYPE,
            "Host": TENCENT_HOST,
            "X-TC-Action": TENCENT_ACTION,
            "X-TC-Timestamp": str(timestamp),
            "X-TC-Version": TENCENT_VERSION,
            "X-TC-Region": TENCENT_REGION,
        }
        data = self._send(
            "POST", f"https://{TENCENT_HOST}", content=payload.encode("utf-8"), headers=headers
        )

        response = data.get("Response") or {}
        error = response.get("Error")
        if error or "TargetText" not in response:
            error = error or {}
            logger.error("Tencent translate error: %s", data)
            raise ProviderError(
                self.provider_type,
                code=error.get("Code", "invalid_response"),
                message=error.get("Message", ""),
            )

        target_text = response["TargetText"]
        logger.info("Tencent translate: %s", target_text)

        return QueryTypeResult(
            provider=self.provider_type,
            result=response,
            translations=[target_text],
            word_info=query,
        )
