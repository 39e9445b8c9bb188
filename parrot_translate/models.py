"""
Data model shared by the providers, the normalizer and the display sectioner.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from parrot_translate.config import ProviderType


@dataclass(frozen=True)
class QueryWordInfo:
    """One translate request. A new instance is built for every attempt."""
    word: str
    from_language: str
    to_language: str
    phonetic: Optional[str] = None
    is_word: Optional[bool] = None
    exam_types: Optional[list[str]] = None


@dataclass
class QueryTypeResult:
    """Successful response of one provider."""
    provider: ProviderType
    result: dict
    translations: list[str]
    word_info: QueryWordInfo
    latency_seconds: float = 0.0

    @property
    def text(self) -> str:
        """All translation segments joined into one line."""
        return " ".join(self.translations)


@dataclass
class LanguageDetectResult:
    provider: ProviderType
    source_language_id: str
    detected_language_id: Optional[str]
    confirmed: bool
    result: dict = field(default_factory=dict)


@dataclass(frozen=True)
class TranslateItem:
    provider: ProviderType
    text: str


@dataclass(frozen=True)
class WordForm:
    name: str
    value: str


@dataclass(frozen=True)
class WebTranslationItem:
    key: str
    value: list[str]


@dataclass
class TranslateFormatResult:
    """Provider-agnostic merge of the primary and enrichment results."""
    query_word_info: QueryWordInfo
    translations: list[TranslateItem]
    explanations: Optional[list[str]] = None
    forms: Optional[list[WordForm]] = None
    web_translation: Optional[WebTranslationItem] = None
    web_phrases: Optional[list[WebTranslationItem]] = None

    @property
    def has_details(self) -> bool:
        return (
            self.explanations is not None
            or self.forms is not None
            or self.web_translation is not None
            or self.web_phrases is not None
        )


class SectionType(Enum):
    TRANSLATION = "Translation"
    EXPLANATIONS = "Explanations"
    FORMS = "Forms and Tenses"
    WEB_TRANSLATION = "Web Translation"
    WEB_PHRASE = "Web Phrase"


@dataclass(frozen=True)
class DisplayItem:
    key: str
    title: str
    tooltip: str
    copy_text: str
    subtitle: Optional[str] = None
    phonetic: Optional[str] = None
    exam_types: Optional[list[str]] = None


@dataclass(frozen=True)
class DisplaySection:
    # A SectionType for detail rows, the ProviderType for per-provider lines
    kind: Any
    items: list[DisplayItem]
    title: Optional[str] = None


class LookupStatus(Enum):
    LOADING = "loading"
    SUCCESS = "success"
    FAILURE = "failure"


HELP_URL = "https://github.com/Haojen/raycast-Parrot#error-code-information"


@dataclass
class LookupOutcome:
    """Tagged result handed to the UI: loading, success with data, or failure."""
    status: LookupStatus
    query: Optional[str] = None
    format_result: Optional[TranslateFormatResult] = None
    sections: list[DisplaySection] = field(default_factory=list)
    error: Optional[Any] = None  # RequestErrorInfo

    @classmethod
    def loading(cls, query: str) -> "LookupOutcome":
        return cls(status=LookupStatus.LOADING, query=query)

    @classmethod
    def success(
        cls, query: str, format_result: TranslateFormatResult, sections: list[DisplaySection]
    ) -> "LookupOutcome":
        return cls(
            status=LookupStatus.SUCCESS,
            query=query,
            format_result=format_result,
            sections=sections,
        )

    @classmethod
    def failure(cls, query: str, error) -> "LookupOutcome":
        return cls(status=LookupStatus.FAILURE, query=query, error=error)

    @property
    def is_loading(self) -> bool:
        return self.status is LookupStatus.LOADING

    @property
    def is_successful(self) -> bool:
        return self.status is LookupStatus.SUCCESS

    @property
    def error_code(self) -> Optional[str]:
        return self.error.code if self.error is not None else None

    @property
    def error_title(self) -> str:
        return "Sorry! We have some problems.."

    @property
    def help_url(self) -> str:
        return HELP_URL
