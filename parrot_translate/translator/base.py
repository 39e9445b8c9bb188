"""
Base translator interface and the provider error taxonomy.
"""

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

import httpx

from parrot_translate.config import ProviderType
from parrot_translate.languages import to_provider_id
from parrot_translate.models import LanguageDetectResult, QueryTypeResult, QueryWordInfo

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequestErrorInfo:
    provider: ProviderType
    code: str
    message: str = ""


class TranslateError(Exception):
    """Base class for every failure a provider call can end in."""

    code = "error"

    def __init__(self, provider: ProviderType, message: str = "", code: Optional[str] = None):
        super().__init__(f"{provider.value}: {message}" if message else provider.value)
        self.provider = provider
        self.message = message
        if code is not None:
            self.code = code

    @property
    def info(self) -> RequestErrorInfo:
        return RequestErrorInfo(provider=self.provider, code=self.code, message=self.message)


class NetworkError(TranslateError):
    code = "network"


class UnsupportedLanguageError(TranslateError):
    code = "unsupported_language"


class ProviderError(TranslateError):
    """Error reported by the provider itself, possibly inside a 200 response."""

    def __init__(
        self,
        provider: ProviderType,
        code: str,
        message: str = "",
        retryable: bool = False,
    ):
        super().__init__(provider, message, code=code)
        self.retryable = retryable


class RetriesExhaustedError(TranslateError):
    code = "retries_exhausted"

    def __init__(self, last_error: ProviderError, attempts: int):
        super().__init__(
            last_error.provider,
            f"gave up after {attempts} attempts, last code {last_error.code}",
        )
        self.last_error = last_error
        self.attempts = attempts


class QueryCancelledError(Exception):
    """The query was superseded by a newer one; never shown to the user."""


class BaseTranslator(ABC):
    """Abstract base for all translation providers."""

    # Column of parrot_translate.languages.LanguageItem holding this provider's codes
    language_column: Optional[str] = None

    def __init__(self, timeout: float = 10.0, proxy: Optional[str] = None, client=None):
        self._client = client or httpx.Client(timeout=timeout, proxy=proxy)

    @property
    @abstractmethod
    def provider_type(self) -> ProviderType:
        """Which backend this adapter talks to."""
        ...

    @abstractmethod
    def translate(self, query: QueryWordInfo) -> QueryTypeResult:
        """
        Translate ``query.word`` from ``query.from_language`` to ``query.to_language``.

        Returns:
            QueryTypeResult with the raw payload and the flat list of translations.

        Raises:
            TranslateError subclass on any failure.
        """
        ...

    def detect(self, text: str) -> LanguageDetectResult:
        raise NotImplementedError(f"{self.provider_type.value} cannot detect languages")

    @property
    def can_detect(self) -> bool:
        return type(self).detect is not BaseTranslator.detect

    def language_id(self, language_id: str) -> str:
        """Map a canonical language id to this provider's code."""
        provider_id = None
        if self.language_column:
            provider_id = to_provider_id(language_id, self.language_column)
        if provider_id is None:
            raise UnsupportedLanguageError(
                self.provider_type, f"language {language_id!r} is not supported"
            )
        return provider_id

    def translate_with_timing(self, query: QueryWordInfo) -> QueryTypeResult:
        """Translate and record latency."""
        start = time.time()
        result = self.translate(query)
        result.latency_seconds = time.time() - start
        logger.info(
            "%s translate cost: %.0f ms", self.provider_type.value, result.latency_seconds * 1000
        )
        return result

    def _send(self, method: str, url: str, **kwargs) -> dict:
        """
        Perform one HTTP exchange and decode the JSON body.

        Transport failures become NetworkError, HTTP error statuses and
        undecodable bodies become ProviderError. A 200 response carrying a
        provider error body is returned as-is for the adapter to inspect.
        """
        logger.debug("%s request start: %s %s", self.provider_type.value, method, url)
        start = time.time()
        try:
            response = self._client.request(method, url, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ProviderError(
                self.provider_type,
                code=str(e.response.status_code),
                message=e.response.reason_phrase,
            ) from e
        except httpx.TransportError as e:
            logger.error("%s network error: %s", self.provider_type.value, e)
            raise NetworkError(self.provider_type, str(e)) from e

        logger.debug(
            "%s request cost: %.0f ms",
            self.provider_type.value,
            (time.time() - start) * 1000,
        )
        try:
            return response.json()
        except ValueError as e:
            raise ProviderError(
                self.provider_type, code="invalid_response", message=str(e)
            ) from e

    def close(self) -> None:
        self._client.close()
