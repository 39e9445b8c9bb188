"""
Utility functions for the word lookup pipeline.
"""

import logging
import re

from parrot_translate.config import RetryBackoff

logger = logging.getLogger(__name__)

_ENGLISH_PUNCTUATION = re.compile(
    r"[\u2000-\u206F\u2E00-\u2E7F\\'!\"#$%&()*+,\-./:;<=>?@\[\]^_`{|}~]"
)
_CHINESE_PUNCTUATION = re.compile(
    r"[\u3002\uff1f\uff01\uff0c\u3001\uff1b\uff1a\u201c\u201d\u2018\u2019"
    r"\uff08\uff09\u300a\u300b\u3008\u3009\u3010\u3011\u300e\u300f\u300c\u300d"
    r"\ufe43\ufe44\u3014\u3015\u2026\u2014\uff5e\ufe4f\uffe5]"
)
_BLANK_SPACE = re.compile(r"\s")
_CHINESE_CHARACTER = re.compile(r"[\u4e00-\u9fa5]")
_ENGLISH_OR_NUMBER = re.compile(r"[a-zA-Z0-9]+")


def setup_logging(level: int = logging.INFO) -> None:
    """Configure logging for the lookup pipeline."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(name)-30s | %(levelname)-7s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def remove_english_punctuation(text: str) -> str:
    return _ENGLISH_PUNCTUATION.sub("", text)


def remove_chinese_punctuation(text: str) -> str:
    return _CHINESE_PUNCTUATION.sub("", text)


def remove_punctuation(text: str) -> str:
    """Remove both Latin and CJK punctuation."""
    return remove_english_punctuation(remove_chinese_punctuation(text))


def remove_blank_space(text: str) -> str:
    return _BLANK_SPACE.sub("", text)


def is_contain_chinese(text: str) -> bool:
    """Check if the text contains any CJK unified ideograph."""
    return _CHINESE_CHARACTER.search(text) is not None


def is_english_or_number(text: str) -> bool:
    """Check if the text is only ASCII letters and digits once punctuation and spaces go."""
    pure_text = remove_punctuation(remove_blank_space(text))
    logger.debug("pure text: %s", pure_text)
    return _ENGLISH_OR_NUMBER.fullmatch(pure_text) is not None


def compute_retry_delay(
    attempt: int,
    base_delay: float,
    backoff: RetryBackoff = RetryBackoff.FIXED,
    max_delay: float = 30.0,
) -> float:
    """
    Wait before retry number ``attempt`` (0-based).

    Fixed backoff always waits ``base_delay``; exponential doubles it per
    attempt. Both are capped at ``max_delay``.
    """
    if backoff is RetryBackoff.EXPONENTIAL:
        delay = base_delay * (2 ** attempt)
    else:
        delay = base_delay
    return min(delay, max_delay)


def one_line(text: str) -> str:
    """Drop line breaks so a translation renders on a single row."""
    return "".join(text.split("\n"))
