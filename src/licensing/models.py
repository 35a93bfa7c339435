"""Data models for packages, projects and freedom verdicts."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Pattern, Tuple, Union

from .errors import RegistryConfigurationError


class Verdict(Enum):
    """Tri-state outcome of a freedom check."""
    FREE = "free"
    NON_FREE = "non-free"
    UNKNOWN = "unknown"

    @classmethod
    def from_bool(cls, flag: bool) -> "Verdict":
        return cls.FREE if flag else cls.NON_FREE

    @property
    def is_definite(self) -> bool:
        return self is not Verdict.UNKNOWN


class EvaluatorId(Enum):
    """License evaluators a reference repository can delegate to."""
    ARCH = "arch"
    OPENSUSE = "opensuse"
    GENTOO = "gentoo"


@dataclass(frozen=True)
class FixedRule:
    """Repository whose packages all share one verdict."""
    verdict: bool

    def __post_init__(self):
        if not isinstance(self.verdict, bool):
            raise RegistryConfigurationError(
                f"FixedRule verdict must be True or False, not {self.verdict!r}"
            )


@dataclass(frozen=True)
class EvaluatorRule:
    """Repository whose verdict depends on each license string."""
    evaluator: EvaluatorId


RepositoryRule = Union[FixedRule, EvaluatorRule]


@dataclass(frozen=True)
class ReferenceRepository:
    """Trusted source of license data, matched by repository name patterns."""
    name: str
    repo_pattern: Pattern[str]
    subrepo_pattern: Optional[Pattern[str]]
    rule: RepositoryRule

    def matches(self, repo: str, subrepo: Optional[str]) -> bool:
        if not self.repo_pattern.search(repo):
            return False
        if self.subrepo_pattern is None:
            return True
        return subrepo is not None and bool(self.subrepo_pattern.search(subrepo))


def _as_tuple(value: Any) -> Tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(str(item) for item in value)


@dataclass(frozen=True)
class Package:
    """A package as reported by one distribution repository."""
    repo: str
    subrepo: Optional[str] = None
    licenses: Tuple[str, ...] = ()
    name: Optional[str] = None
    version: Optional[str] = None
    srcname: Optional[str] = None
    binname: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.repo, str) or not self.repo.strip():
            raise ValueError("Package.repo must be a non-empty string")
        object.__setattr__(self, "licenses", _as_tuple(self.licenses))

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Package":
        """Build a package from a raw record (e.g. decoded JSON)."""
        return cls(
            repo=record.get("repo", ""),
            subrepo=record.get("subrepo"),
            licenses=_as_tuple(record.get("licenses")),
            name=record.get("visiblename") or record.get("name"),
            version=record.get("version"),
            srcname=record.get("srcname"),
            binname=record.get("binname"),
        )

    @property
    def display_name(self) -> str:
        return self.name or self.srcname or self.binname or "?"

    def __str__(self) -> str:
        label = self.display_name
        if self.version:
            label = f"{label} {self.version}"
        return f"{label} ({self.repo})"


@dataclass(frozen=True)
class Project:
    """A project groups the packages of the same software across repositories."""
    name: str
    packages: Tuple[Package, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "packages", tuple(self.packages))

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Project":
        return cls(
            name=str(record.get("name", "")),
            packages=tuple(Package.from_record(p) for p in record.get("packages") or ()),
        )


@dataclass(frozen=True)
class VoteReport:
    """One repository's vote on a project (or a lone package)."""
    repository: str
    package: Package
    verdict: Verdict

    def as_dict(self) -> Dict[str, Any]:
        return {
            "repository": self.repository,
            "repo": self.package.repo,
            "package": self.package.display_name,
            "version": self.package.version,
            "verdict": self.verdict.value,
        }
