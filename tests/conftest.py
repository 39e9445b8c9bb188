"""Shared fixtures: canned provider payloads and a scriptable fake provider."""

import copy
from unittest.mock import MagicMock

import pytest

from parrot_translate.config import ProviderType
from parrot_translate.models import LanguageDetectResult, QueryTypeResult
from parrot_translate.translator.base import BaseTranslator


YOUDAO_GOOD = {
    "errorCode": "0",
    "query": "good",
    "translation": ["好"],
    "l": "en2zh-CHS",
    "isWord": True,
    "basic": {
        "phonetic": "ɡʊd",
        "explains": ["adj. 好的；优秀的", "n. 好处；善行"],
        "wfs": [
            {"wf": {"name": "复数", "value": "goods"}},
            {"wf": {"name": "比较级", "value": "better"}},
            {"wf": {"name": "最高级", "value": "best"}},
        ],
        "exam_type": ["初中", "高中", "CET4"],
    },
    "web": [
        {"key": "good", "value": ["好", "善", "商品"]},
        {"key": "Good Friday", "value": ["耶稣受难日"]},
        {"key": "good morning", "value": ["早上好"]},
    ],
}

YOUDAO_SENTENCE = {
    "errorCode": "0",
    "query": "how are you today",
    "translation": ["你今天好吗"],
    "l": "en2zh-CHS",
    "isWord": False,
}


class FakeTranslator(BaseTranslator):
    """
    Provider double. Each call consumes the next scripted response; the
    last one repeats. A response is a payload dict, an exception to raise,
    or a callable taking the query and returning either.
    """

    def __init__(self, provider: ProviderType, *responses):
        super().__init__(client=MagicMock())
        self._provider = provider
        self.responses = list(responses)
        self.calls = []

    @property
    def provider_type(self) -> ProviderType:
        return self._provider

    def translate(self, query):
        self.calls.append(query)
        response = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if callable(response):
            response = response(query)
        if isinstance(response, Exception):
            raise response
        payload = copy.deepcopy(response)
        translations = payload.get("translation") or [payload.get("text", "")]
        return QueryTypeResult(
            provider=self._provider,
            result=payload,
            translations=list(translations),
            word_info=query,
        )


class FakeDetectingTranslator(FakeTranslator):
    def __init__(self, provider, detected_language_id, *responses, confirmed=True):
        super().__init__(provider, *responses)
        self.detected_language_id = detected_language_id
        self.confirmed = confirmed
        self.detect_calls = []

    def detect(self, text):
        self.detect_calls.append(text)
        return LanguageDetectResult(
            provider=self._provider,
            source_language_id=self.detected_language_id or "",
            detected_language_id=self.detected_language_id,
            confirmed=self.confirmed,
        )


def youdao_payload(pair: str, translation: str, **extra) -> dict:
    payload = {"errorCode": "0", "l": pair, "translation": [translation]}
    payload.update(extra)
    return payload


@pytest.fixture
def youdao_good():
    return copy.deepcopy(YOUDAO_GOOD)


@pytest.fixture
def youdao_sentence():
    return copy.deepcopy(YOUDAO_SENTENCE)
