"""
Configuration management for the word lookup pipeline.
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from parrot_translate.languages import is_valid_language_id

DEFAULT_DELAY_MS = 400
MIN_DELAY_MS = 50
MAX_DELAY_MS = 600


class ProviderType(Enum):
    YOUDAO = "youdao"
    BAIDU = "baidu"
    TENCENT = "tencent"
    CAIYUN = "caiyun"

    @property
    def title(self) -> str:
        """Section title shown for this provider's translation line."""
        return f"{self.value.capitalize()} Translate"


class RetryBackoff(Enum):
    """How the wait between retries of a retryable primary error grows."""
    FIXED = "fixed"
    EXPONENTIAL = "exponential"


def clamp_delay_ms(value) -> int:
    """Parse a user supplied delay and clamp it to the supported range."""
    try:
        delay = int(value)
    except (TypeError, ValueError):
        return DEFAULT_DELAY_MS
    if delay <= 0:
        return DEFAULT_DELAY_MS
    return max(MIN_DELAY_MS, min(MAX_DELAY_MS, delay))


@dataclass
class LookupConfig:
    """Lookup session configuration."""
    # API credentials, loaded from env vars if not set
    youdao_app_key: Optional[str] = None
    youdao_app_secret: Optional[str] = None
    baidu_app_id: Optional[str] = None
    baidu_app_secret: Optional[str] = None
    tencent_secret_id: Optional[str] = None
    tencent_secret_key: Optional[str] = None
    caiyun_token: Optional[str] = None

    # The two preference languages; language1 is the initial target
    language1: str = "zh-CHS"
    language2: str = "en"

    # Local heuristic detection
    latin_language: str = "en"
    chinese_language: str = "zh-CHS"

    # Debounce and retry wait, milliseconds
    delay_ms: int = DEFAULT_DELAY_MS

    # Retry policy for retryable primary errors
    max_retries: int = 3
    retry_backoff: RetryBackoff = RetryBackoff.FIXED
    max_retry_delay: float = 5.0

    # Transport
    request_timeout: float = 10.0
    proxy: Optional[str] = None

    # Enrichment providers, in display priority order
    enrichment_providers: list[ProviderType] = field(
        default_factory=lambda: [
            ProviderType.BAIDU,
            ProviderType.TENCENT,
            ProviderType.CAIYUN,
        ]
    )

    # Suppress automatic lookups of the same clipboard text within this window
    clipboard_query_window_ms: int = 5000

    def __post_init__(self):
        """Load credentials from environment variables and validate preferences."""
        if not self.youdao_app_key:
            self.youdao_app_key = os.environ.get("YOUDAO_APP_KEY")
        if not self.youdao_app_secret:
            self.youdao_app_secret = os.environ.get("YOUDAO_APP_SECRET")
        if not self.baidu_app_id:
            self.baidu_app_id = os.environ.get("BAIDU_APP_ID")
        if not self.baidu_app_secret:
            self.baidu_app_secret = os.environ.get("BAIDU_APP_SECRET")
        if not self.tencent_secret_id:
            self.tencent_secret_id = os.environ.get("TENCENT_SECRET_ID")
        if not self.tencent_secret_key:
            self.tencent_secret_key = os.environ.get("TENCENT_SECRET_KEY")
        if not self.caiyun_token:
            self.caiyun_token = os.environ.get("CAIYUN_TOKEN")

        self.delay_ms = clamp_delay_ms(self.delay_ms)
        if self.max_retries < 0:
            raise ValueError("max_retries must be zero or greater")

        for language in (self.language1, self.language2):
            if language == "auto" or not is_valid_language_id(language):
                raise ValueError(f"Unsupported preference language: {language!r}")
        if self.language1 == self.language2:
            raise ValueError(
                "Language Conflict: your first language and second language must be different."
            )

    @property
    def delay_seconds(self) -> float:
        return self.delay_ms / 1000.0

    @property
    def preference_languages(self) -> tuple[str, str]:
        return self.language1, self.language2

    def other_language(self, language: str) -> str:
        """Return the preference language that is not ``language``."""
        if language == self.language1:
            return self.language2
        return self.language1

    def has_primary_credentials(self) -> bool:
        return bool(self.youdao_app_key and self.youdao_app_secret)

    def get_available_enrichments(self) -> list[ProviderType]:
        """Return only enrichment providers that have credentials configured."""
        available = []
        key_map = {
            ProviderType.BAIDU: self.baidu_app_id and self.baidu_app_secret,
            ProviderType.TENCENT: self.tencent_secret_id and self.tencent_secret_key,
            ProviderType.CAIYUN: self.caiyun_token,
        }
        for provider in self.enrichment_providers:
            if key_map.get(provider):
                available.append(provider)
        return available
