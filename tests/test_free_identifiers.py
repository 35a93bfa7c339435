"""Tests for Gentoo license group parsing and the identifier cache."""

from unittest.mock import Mock, patch

import pytest

from licensing.errors import LicenseGroupsUnavailable
from licensing.identifiers import (
    FreeIdentifierCache,
    fetch_gentoo_free_identifiers,
    parse_license_groups,
)

LICENSE_GROUPS = """\
# This file contains groups of licenses
GPL-COMPATIBLE Apache-2.0 MIT
FSF-APPROVED @GPL-COMPATIBLE GPL-2  # trailing comment

EULA all-rights-reserved
MISC-FREE Foo
"""


class TestParseLicenseGroups:
    """Parsing of profiles/license_groups."""

    def test_collects_named_categories(self):
        ids = parse_license_groups(LICENSE_GROUPS, ["GPL-COMPATIBLE", "FSF-APPROVED", "MISC-FREE"])
        assert ids == frozenset({"apache-2.0", "mit", "gpl-2", "foo"})

    def test_group_references_are_stripped(self):
        assert parse_license_groups(LICENSE_GROUPS, ["FSF-APPROVED"]) == frozenset({"gpl-2"})

    def test_other_groups_ignored(self):
        assert "all-rights-reserved" not in parse_license_groups(LICENSE_GROUPS, ["MISC-FREE"])


class TestFetch:
    """Download of the license groups file."""

    @patch("licensing.identifiers.get_text")
    def test_success(self, mock_get_text):
        mock_get_text.return_value = (200, LICENSE_GROUPS)
        ids = fetch_gentoo_free_identifiers("https://example.org/license_groups", ["MISC-FREE"])
        assert ids == frozenset({"foo"})
        mock_get_text.assert_called_once_with("https://example.org/license_groups")

    @patch("licensing.identifiers.get_text")
    def test_http_failure(self, mock_get_text):
        mock_get_text.return_value = (404, None)
        with pytest.raises(LicenseGroupsUnavailable):
            fetch_gentoo_free_identifiers("https://example.org/license_groups")

    @patch("licensing.identifiers.get_text")
    def test_no_members(self, mock_get_text):
        mock_get_text.return_value = (200, "EULA all-rights-reserved\n")
        with pytest.raises(LicenseGroupsUnavailable):
            fetch_gentoo_free_identifiers("https://example.org/license_groups")


class TestFreeIdentifierCache:
    """Write-once memoization of the identifier set."""

    def test_preloaded_lowercases(self):
        cache = FreeIdentifierCache.preloaded(["MIT", "GPL-2"])
        assert cache.loaded is True
        assert cache.get() == frozenset({"mit", "gpl-2"})

    def test_unavailable(self):
        cache = FreeIdentifierCache.unavailable()
        assert cache.get() is None
        assert cache.loaded is False

    def test_fetches_once(self):
        fetcher = Mock(return_value=["MIT"])
        cache = FreeIdentifierCache(fetcher)
        assert cache.loaded is False
        assert cache.get() == frozenset({"mit"})
        assert cache.get() == frozenset({"mit"})
        assert fetcher.call_count == 1

    def test_failure_is_not_cached(self):
        fetcher = Mock(side_effect=[LicenseGroupsUnavailable("down"), ["MIT"], ["BSD"]])
        cache = FreeIdentifierCache(fetcher)
        assert cache.get() is None
        assert cache.get() == frozenset({"mit"})
        assert cache.get() == frozenset({"mit"})
        assert fetcher.call_count == 2
