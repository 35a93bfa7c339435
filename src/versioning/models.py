"""Data models for version tokenization and comparison."""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Union


class Rank(IntEnum):
    """Precedence class of a version component; lower sorts older."""
    PRE_RELEASE = 0
    ZERO = 1
    POST_RELEASE = 2
    NUMBER = 3
    LETTER_SUFFIX = 4


class Ordering(Enum):
    """Result of comparing two version strings."""
    LESS = -1
    EQUAL = 0
    GREATER = 1


@dataclass(frozen=True)
class VersionComponent:
    """A single ranked piece of a version string."""
    rank: Rank
    value: Union[int, str]  # digit string for NUMBER, 0 for ZERO, letters otherwise


# Substitute for a missing component when one version is shorter.
ZERO_COMPONENT = VersionComponent(Rank.ZERO, 0)

PRE_RELEASE_KEYWORDS = frozenset({"alpha", "beta", "rc", "pre"})
POST_RELEASE_KEYWORDS = frozenset({"patch", "post", "pl", "errata"})
