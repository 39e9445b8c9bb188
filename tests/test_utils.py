"""Tests for utility functions."""

import pytest
from parrot_translate.config import RetryBackoff
from parrot_translate.utils import (
    compute_retry_delay,
    is_contain_chinese,
    is_english_or_number,
    one_line,
    remove_blank_space,
    remove_punctuation,
)


class TestRemovePunctuation:
    def test_ascii_punctuation(self):
        assert remove_punctuation("hello, world!") == "hello world"

    def test_chinese_punctuation(self):
        assert remove_punctuation("你好，世界。") == "你好世界"

    def test_curly_quotes_and_ellipsis(self):
        assert remove_punctuation("“good”…") == "good"

    def test_book_title_marks(self):
        assert remove_punctuation("《红楼梦》") == "红楼梦"

    def test_letters_untouched(self):
        assert remove_punctuation("abc123") == "abc123"


class TestRemoveBlankSpace:
    def test_spaces_tabs_newlines(self):
        assert remove_blank_space(" a b\tc\nd ") == "abcd"


class TestIsEnglishOrNumber:
    def test_word(self):
        assert is_english_or_number("good") is True

    def test_phrase_with_punctuation(self):
        assert is_english_or_number("How are you?") is True

    def test_number(self):
        assert is_english_or_number("2022") is True

    def test_chinese(self):
        assert is_english_or_number("你好") is False

    def test_accented_latin(self):
        assert is_english_or_number("ça va") is False

    def test_only_punctuation(self):
        assert is_english_or_number("...") is False


class TestIsContainChinese:
    def test_pure_chinese(self):
        assert is_contain_chinese("你好") is True

    def test_mixed(self):
        assert is_contain_chinese("hello 世界") is True

    def test_english(self):
        assert is_contain_chinese("hello") is False

    def test_japanese_kana_only(self):
        assert is_contain_chinese("ありがとう") is False


class TestComputeRetryDelay:
    def test_fixed(self):
        assert compute_retry_delay(0, 0.4) == 0.4
        assert compute_retry_delay(3, 0.4) == 0.4

    def test_exponential(self):
        assert compute_retry_delay(0, 0.5, RetryBackoff.EXPONENTIAL) == 0.5
        assert compute_retry_delay(2, 0.5, RetryBackoff.EXPONENTIAL) == 2.0

    def test_capped(self):
        assert compute_retry_delay(10, 0.5, RetryBackoff.EXPONENTIAL, max_delay=3.0) == 3.0


class TestOneLine:
    def test_joins_lines(self):
        assert one_line("first\nsecond") == "firstsecond"

    def test_single_line_unchanged(self):
        assert one_line("good") == "good"
