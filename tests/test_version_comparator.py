"""Tests for the version comparator."""

import itertools

import pytest

from versioning.comparator import compare_versions, is_less, latest_version, sort_versions
from versioning.models import Ordering

SAMPLE = [
    "", "0", "0.9", "1.0alpha1", "1.0beta2", "1.0rc1", "1.0", "1.0.0",
    "1.0patch1", "1.0.1", "1.0a", "1.9", "1.10", "2.0pre", "2.0",
]


class TestIsLess:
    """Orderings that follow from the rank table."""

    def test_missing_components_are_zero(self):
        assert is_less("1.0", "1.0.1") is True
        assert is_less("1.0.0", "1.0") is False
        assert is_less("1.0", "1.0.0") is False

    def test_pre_release_before_release(self):
        assert is_less("1.0alpha", "1.0") is True
        assert is_less("1.0", "1.0alpha") is False

    def test_post_release_after_release(self):
        assert is_less("1.0", "1.0patch1") is True

    def test_letter_suffix_after_number(self):
        assert is_less("1.0.1", "1.0a") is True
        assert is_less("1.0a", "1.0.1") is False

    def test_numbers_compare_as_integers(self):
        assert is_less("1.9", "1.10") is True

    def test_pre_release_keywords_by_first_letter(self):
        assert is_less("1.0alpha1", "1.0beta1") is True
        assert is_less("1.0beta2", "1.0rc1") is True

    def test_post_release_before_next_number(self):
        assert is_less("1.0patch1", "1.0.1") is True


class TestCompareVersions:
    """Three-way comparison results."""

    @pytest.mark.parametrize("v1, v2", [
        ("1.0", "1.0.0"),
        ("1.0", "1.0."),
        ("", "0"),
        ("1.0ALPHA", "1.0alpha"),
        ("1.0alpha1", "1.0a1"),
        ("1.0alpha1", "1.0a2"),
        ("1.0beta1.5", "1.0b2"),
        ("1.0post1", "1.0patch1"),
    ])
    def test_equal(self, v1, v2):
        assert compare_versions(v1, v2) is Ordering.EQUAL
        assert compare_versions(v2, v1) is Ordering.EQUAL

    def test_less_and_greater(self):
        assert compare_versions("1.0", "1.1") is Ordering.LESS
        assert compare_versions("1.1", "1.0") is Ordering.GREATER


class TestOrderingProperties:
    """Strict weak ordering over a sample with no first-letter ties."""

    @pytest.mark.parametrize("version", SAMPLE)
    def test_irreflexive(self, version):
        assert not is_less(version, version)

    def test_asymmetric(self):
        for a, b in itertools.product(SAMPLE, repeat=2):
            assert not (is_less(a, b) and is_less(b, a)), (a, b)

    def test_transitive(self):
        for a, b, c in itertools.product(SAMPLE, repeat=3):
            if is_less(a, b) and is_less(b, c):
                assert is_less(a, c), (a, b, c)


class TestSorting:
    """Sorting helpers built on the comparator."""

    def test_sort_versions(self):
        shuffled = ["1.0a", "1.0", "1.0patch1", "0.9", "1.0rc1", "1.0.1", "1.0alpha1"]
        assert sort_versions(shuffled) == [
            "0.9", "1.0alpha1", "1.0rc1", "1.0", "1.0patch1", "1.0.1", "1.0a",
        ]

    def test_sort_versions_reverse(self):
        assert sort_versions(["1.2", "1.10", "1.9"], reverse=True) == ["1.10", "1.9", "1.2"]

    def test_latest_version(self):
        assert latest_version(["1.2", "1.10", "1.9"]) == "1.10"
        assert latest_version([]) is None


class TestAlphabeticTies:
    """Same first letter settles the comparison at that position."""

    def test_later_positions_are_ignored(self):
        assert is_less("1.0alpha1", "1.0a2") is False
        assert is_less("1.0a2", "1.0alpha1") is False

    def test_identical_words_continue(self):
        assert is_less("1.0alpha1", "1.0alpha2") is True


class TestLongNumbers:
    """Digit runs beyond int() conversion limits."""

    def test_long_component(self):
        huge = "1." + "9" * 5000
        assert is_less(huge, "2") is True
        assert is_less("1.9", huge) is True
        assert compare_versions(huge, huge) is Ordering.EQUAL

    def test_leading_zeros_ignored(self):
        assert compare_versions("1.007", "1.7") is Ordering.EQUAL
        assert is_less("1.09", "1.10") is True
