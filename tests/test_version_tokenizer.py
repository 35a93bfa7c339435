"""Tests for version string tokenization."""

import pytest

from versioning.models import Rank, VersionComponent
from versioning.tokenizer import tokenize


def C(rank, value):
    return VersionComponent(rank, value)


class TestTokenize:
    """Component ranks produced for representative version strings."""

    def test_empty_string(self):
        assert tokenize("") == []

    def test_separators_only(self):
        assert tokenize("..-_") == []

    def test_plain_numbers(self):
        assert tokenize("1.0.10") == [C(Rank.NUMBER, "1"), C(Rank.ZERO, 0), C(Rank.NUMBER, "10")]

    def test_leading_zeros_are_numeric(self):
        assert tokenize("007") == [C(Rank.NUMBER, "7")]

    @pytest.mark.parametrize("keyword", ["alpha", "beta", "rc", "pre", "RC", "Beta"])
    def test_pre_release_keywords(self, keyword):
        assert tokenize(f"1.0{keyword}1")[2] == C(Rank.PRE_RELEASE, keyword)

    @pytest.mark.parametrize("keyword", ["patch", "post", "pl", "errata", "PL"])
    def test_post_release_keywords(self, keyword):
        assert tokenize(f"1.0{keyword}1")[2] == C(Rank.POST_RELEASE, keyword)

    def test_trailing_letter_after_number_is_suffix(self):
        assert tokenize("1.0a") == [C(Rank.NUMBER, "1"), C(Rank.ZERO, 0), C(Rank.LETTER_SUFFIX, "a")]

    def test_letter_followed_by_number_is_pre_release(self):
        assert tokenize("1.0a1")[2] == C(Rank.PRE_RELEASE, "a")

    def test_standalone_word_is_pre_release(self):
        assert tokenize("1.0-x") == [C(Rank.NUMBER, "1"), C(Rank.ZERO, 0), C(Rank.PRE_RELEASE, "x")]

    def test_keyword_after_number_keeps_keyword_rank(self):
        assert tokenize("2beta")[1] == C(Rank.PRE_RELEASE, "beta")

    def test_word_only(self):
        assert tokenize("snapshot") == [C(Rank.PRE_RELEASE, "snapshot")]

    def test_zero_runs_are_placeholder(self):
        assert tokenize("000") == [C(Rank.ZERO, 0)]

    def test_long_digit_run(self):
        assert tokenize("1." + "9" * 5000) == [C(Rank.NUMBER, "1"), C(Rank.NUMBER, "9" * 5000)]
