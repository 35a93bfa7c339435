"""Tests for package and project records."""

import pytest

from licensing.models import Package, Project, Verdict


class TestPackage:
    """Package construction from arguments and raw records."""

    @pytest.mark.parametrize("repo", ["", "   ", None])
    def test_repo_is_mandatory(self, repo):
        with pytest.raises(ValueError):
            Package(repo=repo)

    def test_single_license_string_becomes_tuple(self):
        assert Package(repo="arch", licenses="GPL").licenses == ("GPL",)

    def test_from_record(self):
        package = Package.from_record({
            "repo": "debian_12",
            "subrepo": "main",
            "licenses": ["GPL-2+", "MIT"],
            "visiblename": "foo",
            "version": "1.0",
        })
        assert package.repo == "debian_12"
        assert package.subrepo == "main"
        assert package.licenses == ("GPL-2+", "MIT")
        assert str(package) == "foo 1.0 (debian_12)"

    def test_from_record_without_licenses(self):
        assert Package.from_record({"repo": "gentoo"}).licenses == ()


class TestProject:
    """Project construction."""

    def test_from_record(self):
        project = Project.from_record({
            "name": "foo",
            "packages": [{"repo": "arch"}, {"repo": "gentoo", "licenses": ["MIT"]}],
        })
        assert project.name == "foo"
        assert [p.repo for p in project.packages] == ["arch", "gentoo"]

    def test_packages_are_a_tuple(self):
        assert Project("foo", [Package(repo="arch")]).packages == (Package(repo="arch"),)


class TestVerdict:
    """Verdict helpers."""

    def test_from_bool(self):
        assert Verdict.from_bool(True) is Verdict.FREE
        assert Verdict.from_bool(False) is Verdict.NON_FREE

    def test_is_definite(self):
        assert Verdict.FREE.is_definite and Verdict.NON_FREE.is_definite
        assert not Verdict.UNKNOWN.is_definite
