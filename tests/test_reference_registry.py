"""Tests for reference repository lookup."""

import re

import pytest

from licensing.models import FixedRule, ReferenceRepository
from licensing.registry import REFERENCE_REPOSITORIES, find_repository


class TestFindRepository:
    """First-match lookup over the built-in list."""

    @pytest.mark.parametrize("repo, subrepo, expected", [
        ("arch", None, "arch"),
        ("debian_12", "main", "debian"),
        ("debian_unstable", "contrib", "debian"),
        ("debian_12", "non-free", "debian-non-free"),
        ("debian_12", "non-free-firmware", "debian-non-free"),
        ("gentoo", None, "gentoo"),
        ("opensuse_tumbleweed", None, "opensuse"),
    ])
    def test_matches(self, repo, subrepo, expected):
        assert find_repository(repo, subrepo).name == expected

    @pytest.mark.parametrize("repo, subrepo", [
        ("debian_12", None),
        ("debian_12", "backports"),
        ("fedora_39", None),
        ("archlinux", None),
        ("aur", None),
    ])
    def test_no_match(self, repo, subrepo):
        assert find_repository(repo, subrepo) is None

    def test_returns_registry_entry(self):
        assert find_repository("arch") is REFERENCE_REPOSITORIES[0]

    def test_first_match_wins(self):
        broad = ReferenceRepository("broad", re.compile(r"^debian_"), None, FixedRule(False))
        narrow = ReferenceRepository("narrow", re.compile(r"^debian_"), re.compile(r"^main$"), FixedRule(True))
        assert find_repository("debian_12", "main", (broad, narrow)) is broad
        assert find_repository("debian_12", "main", (narrow, broad)) is narrow
        assert find_repository("debian_12", "contrib", (narrow, broad)) is broad
