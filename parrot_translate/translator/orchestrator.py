"""
Lookup orchestration.

Drives one query through the detect -> translate -> retry state machine
against the primary provider, then fans out to the enrichment providers
and folds everything into display sections.

Flow:
1. Guess the source language locally (or take the caller's).
2. Ask the primary provider. Its own reported language pair wins over
   the requested one.
3. Reported source == reported target means the text is already in the
   target language: flip the target to the other preference language
   and ask again. Each distinct pair is tried at most once.
4. A retryable error is re-sent unchanged after the configured delay, up
   to ``max_retries`` times. A detection error on an "auto" source asks
   the fallback detector once. Any other error fails the lookup.
5. On success the enrichment providers run concurrently. Their failures
   are logged and dropped, and their lines are ordered by the configured
   priority, never by arrival.
"""

import concurrent.futures
import logging
import threading
from enum import Enum
from typing import Callable, Optional

from parrot_translate.config import LookupConfig, ProviderType
from parrot_translate.detector import LanguageDetector, detect_with_provider
from parrot_translate.languages import AUTO
from parrot_translate.models import LookupOutcome, QueryTypeResult, QueryWordInfo
from parrot_translate.result.display import build_display_sections
from parrot_translate.result.formatter import format_translate_result
from parrot_translate.translator.base import (
    BaseTranslator,
    ProviderError,
    QueryCancelledError,
    RetriesExhaustedError,
    TranslateError,
)
from parrot_translate.translator.baidu_translator import BaiduTranslator
from parrot_translate.translator.caiyun_translator import CaiyunTranslator
from parrot_translate.translator.tencent_translator import TencentTranslator
from parrot_translate.translator.youdao_translator import (
    DETECTION_ERROR_CODES,
    YoudaoTranslator,
    reported_language_pair,
)
from parrot_translate.utils import compute_retry_delay

logger = logging.getLogger(__name__)


class SessionState(Enum):
    IDLE = "idle"
    DETECTING = "detecting"
    TRANSLATING = "translating"
    RETRYING = "retrying"
    DONE = "done"
    FAILED = "failed"


class LookupSession:
    """
    Owns the orchestration state for one UI surface.

    A session runs one query at a time. Starting a new lookup, or calling
    :meth:`supersede`, cancels the previous one: its pending retry wait is
    woken up and its eventual result is discarded with QueryCancelledError.

    Usage:
        session = LookupSession(LookupConfig(language1="zh-CHS", language2="en"))
        outcome = session.lookup("good")
        for section in outcome.sections:
            print(section.title, [item.title for item in section.items])
    """

    def __init__(
        self,
        config: Optional[LookupConfig] = None,
        primary: Optional[BaseTranslator] = None,
        enrichments: Optional[list[BaseTranslator]] = None,
        fallback_detector: Optional[BaseTranslator] = None,
        compact: bool = False,
    ):
        self.config = config or LookupConfig()
        self.compact = compact
        self.primary = primary or self._init_primary()
        self.enrichments = enrichments if enrichments is not None else self._init_enrichments()
        self.fallback_detector = fallback_detector or next(
            (t for t in self.enrichments if t.can_detect), None
        )
        self.language_detector = LanguageDetector(self.config)

        self.state = SessionState.IDLE
        # Target chosen by the user; only an explicit target changes it
        self.selected_target = self.config.language1
        # Pair of the latest query, after any from == to correction
        self.target_language = self.config.language1
        self.from_language: Optional[str] = None
        self.query_text: Optional[str] = None

        self._lock = threading.Lock()
        self._generation = 0
        self._cancel_event = threading.Event()
        self._outcome: Optional[LookupOutcome] = None

        logger.info(
            "Lookup session ready: primary %s, enrichments %s",
            self.primary.provider_type.value,
            [t.provider_type.value for t in self.enrichments],
        )

    def _init_primary(self) -> BaseTranslator:
        if not self.config.has_primary_credentials():
            raise RuntimeError(
                "Youdao credentials are required. "
                "Set YOUDAO_APP_KEY and YOUDAO_APP_SECRET."
            )
        return YoudaoTranslator(
            app_key=self.config.youdao_app_key,
            app_secret=self.config.youdao_app_secret,
            timeout=self.config.request_timeout,
            proxy=self.config.proxy,
        )

    def _init_enrichments(self) -> list[BaseTranslator]:
        """Initialize every configured enrichment provider, in priority order."""
        transport = {"timeout": self.config.request_timeout, "proxy": self.config.proxy}
        factories = {
            ProviderType.BAIDU: lambda: BaiduTranslator(
                app_id=self.config.baidu_app_id,
                app_secret=self.config.baidu_app_secret,
                **transport,
            ),
            ProviderType.TENCENT: lambda: TencentTranslator(
                secret_id=self.config.tencent_secret_id,
                secret_key=self.config.tencent_secret_key,
                **transport,
            ),
            ProviderType.CAIYUN: lambda: CaiyunTranslator(
                token=self.config.caiyun_token,
                **transport,
            ),
        }
        translators = []
        for provider in self.config.get_available_enrichments():
            translators.append(factories[provider]())
            logger.info("Initialized enrichment provider: %s", provider.value)
        return translators

    # -- state ---------------------------------------------------------

    @property
    def current_outcome(self) -> Optional[LookupOutcome]:
        """Latest outcome: LOADING while a query runs, then SUCCESS or FAILURE."""
        return self._outcome

    def _begin(self, text: str) -> tuple[int, threading.Event]:
        with self._lock:
            self._generation += 1
            self._cancel_event.set()
            self._cancel_event = threading.Event()
            self.query_text = text
            self._outcome = LookupOutcome.loading(text)
            return self._generation, self._cancel_event

    def _is_current(self, generation: int) -> bool:
        with self._lock:
            return generation == self._generation

    def _ensure_current(self, generation: int) -> None:
        if not self._is_current(generation):
            raise QueryCancelledError(f"query {generation} was superseded")

    def _set_state(self, generation: int, state: SessionState) -> None:
        with self._lock:
            if generation == self._generation:
                self.state = state

    def _update(self, generation: int, **fields) -> None:
        """Write session fields only if ``generation`` is still the current query."""
        with self._lock:
            if generation != self._generation:
                raise QueryCancelledError(f"query {generation} was superseded")
            for name, value in fields.items():
                setattr(self, name, value)

    def _finish(self, generation: int, state: SessionState, outcome: LookupOutcome) -> LookupOutcome:
        with self._lock:
            if generation != self._generation:
                raise QueryCancelledError(f"query {generation} was superseded")
            self.state = state
            self._outcome = outcome
            return outcome

    def supersede(self) -> None:
        """Cancel the in-flight query, if any, and stop its pending retry wait."""
        with self._lock:
            self._generation += 1
            self._cancel_event.set()
            self._cancel_event = threading.Event()
            self.state = SessionState.IDLE
            self._outcome = None
        logger.debug("Lookup superseded")

    # -- lookup --------------------------------------------------------

    def lookup(
        self,
        text: str,
        target_language: Optional[str] = None,
        from_language: Optional[str] = None,
    ) -> LookupOutcome:
        """
        Look up ``text`` and return a SUCCESS or FAILURE outcome.

        Args:
            text: Word or phrase to look up.
            target_language: Explicit target. It becomes the selected target
                for later lookups; defaults to the current selection.
            from_language: Explicit source; defaults to the local heuristic.

        Raises:
            QueryCancelledError: if another lookup or supersede() started
                before this one finished.
        """
        text = text.strip()
        if not text:
            raise ValueError("Query text must not be empty")

        generation, cancel_event = self._begin(text)

        self._set_state(generation, SessionState.DETECTING)
        if not from_language:
            from_language = self.language_detector.detect(text)
        target = target_language or self.selected_target
        self._update(
            generation,
            selected_target=target,
            target_language=target,
            from_language=from_language,
        )
        logger.info("Lookup %r: %s -> %s", text, from_language, target)

        try:
            primary = self._translate_primary(text, from_language, target, generation, cancel_event)
        except TranslateError as e:
            logger.error("Lookup %r failed: %s", text, e.info)
            return self._finish(generation, SessionState.FAILED, LookupOutcome.failure(text, e.info))

        enrichments = self._fetch_enrichments(primary.word_info, generation)
        format_result = format_translate_result(primary, enrichments)
        sections = build_display_sections(format_result, compact=self.compact)
        return self._finish(
            generation,
            SessionState.DONE,
            LookupOutcome.success(text, format_result, sections),
        )

    def retranslate(self, target_language: str) -> LookupOutcome:
        """Translate the last query again into an explicitly chosen language."""
        if not self.query_text:
            raise ValueError("Nothing to translate yet")
        return self.lookup(
            self.query_text,
            target_language=target_language,
            from_language=self.from_language,
        )

    def _translate_primary(
        self,
        text: str,
        from_language: str,
        target_language: str,
        generation: int,
        cancel_event: threading.Event,
    ) -> QueryTypeResult:
        query = QueryWordInfo(word=text, from_language=from_language, to_language=target_language)
        attempted = set()
        retries = 0
        detected_with_fallback = False

        while True:
            self._ensure_current(generation)
            self._set_state(generation, SessionState.TRANSLATING)
            attempted.add((query.from_language, query.to_language))

            try:
                result = self.primary.translate_with_timing(query)
            except ProviderError as e:
                if e.retryable:
                    if retries >= self.config.max_retries:
                        raise RetriesExhaustedError(e, retries + 1) from e
                    delay = compute_retry_delay(
                        retries,
                        self.config.delay_seconds,
                        self.config.retry_backoff,
                        self.config.max_retry_delay,
                    )
                    retries += 1
                    logger.warning(
                        "Attempt %d/%d failed with code %s. Retrying in %.2fs",
                        retries,
                        self.config.max_retries + 1,
                        e.code,
                        delay,
                    )
                    self._set_state(generation, SessionState.RETRYING)
                    if cancel_event.wait(delay):
                        raise QueryCancelledError("superseded while waiting to retry") from e
                    continue

                if (
                    e.code in DETECTION_ERROR_CODES
                    and query.from_language == AUTO
                    and not detected_with_fallback
                ):
                    detected_with_fallback = True
                    detected = detect_with_provider(text, self.fallback_detector)
                    self._ensure_current(generation)
                    if detected is None:
                        raise
                    source = detected.detected_language_id
                    target = query.to_language
                    if source == target:
                        target = self.config.other_language(source)
                    self._update(generation, from_language=source, target_language=target)
                    query = QueryWordInfo(word=text, from_language=source, to_language=target)
                    continue
                raise

            self._ensure_current(generation)
            reported_from, reported_to = reported_language_pair(result.result)
            if reported_from and reported_from == reported_to:
                target = self.config.other_language(reported_from)
                if (reported_from, target) in attempted:
                    logger.warning(
                        "Language pair %s -> %s already tried, keeping result", reported_from, target
                    )
                else:
                    logger.info("from == to: %s, retranslate to %s", reported_from, target)
                    self._update(generation, target_language=target)
                    query = QueryWordInfo(word=text, from_language=reported_from, to_language=target)
                    retries = 0
                    continue

            result.word_info = QueryWordInfo(
                word=text,
                from_language=reported_from or query.from_language,
                to_language=reported_to or query.to_language,
            )
            self._update(
                generation,
                from_language=result.word_info.from_language,
                target_language=result.word_info.to_language,
            )
            return result

    def _fetch_enrichments(
        self, query: QueryWordInfo, generation: int
    ) -> list[Optional[QueryTypeResult]]:
        """Run every enrichment provider concurrently; failures become None."""
        if not self.enrichments:
            return []

        results: dict[ProviderType, Optional[QueryTypeResult]] = {}
        with concurrent.futures.ThreadPoolExecutor(
            max_workers=len(self.enrichments)
        ) as executor:
            future_to_provider = {
                executor.submit(translator.translate_with_timing, query): translator.provider_type
                for translator in self.enrichments
            }
            for future in concurrent.futures.as_completed(future_to_provider):
                provider = future_to_provider[future]
                try:
                    results[provider] = future.result()
                except TranslateError as e:
                    logger.warning("Enrichment %s failed: %s", provider.value, e.info)
                    results[provider] = None
                except Exception as e:
                    logger.error("Enrichment %s crashed: %s", provider.value, e)
                    results[provider] = None

        self._ensure_current(generation)
        return [results.get(translator.provider_type) for translator in self.enrichments]

    def close(self) -> None:
        self.supersede()
        for translator in [self.primary, *self.enrichments]:
            translator.close()


class TextChangeDebouncer:
    """
    Debounce search box edits into lookups.

    Each edit cancels the pending timer. Empty text clears the results by
    calling ``on_outcome(None)``. Superseded lookups are dropped silently.
    """

    def __init__(
        self,
        session: LookupSession,
        on_outcome: Callable[[Optional[LookupOutcome]], None],
        delay: Optional[float] = None,
    ):
        self.session = session
        self.on_outcome = on_outcome
        self.delay = delay if delay is not None else session.config.delay_seconds
        self._timer: Optional[threading.Timer] = None
        self._lock = threading.Lock()

    def text_changed(self, text: str) -> None:
        text = text.strip()
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
            if text:
                self._timer = threading.Timer(self.delay, self._run, args=(text,))
                self._timer.daemon = True
                self._timer.start()
                return
        # Callback runs unlocked; it may call text_changed again
        self.session.supersede()
        self.on_outcome(None)

    def _run(self, text: str) -> None:
        try:
            outcome = self.session.lookup(text)
        except QueryCancelledError:
            logger.debug("Dropped superseded lookup of %r", text)
            return
        self.on_outcome(outcome)

    def cancel(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
