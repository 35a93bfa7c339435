"""Total ordering over arbitrary version strings.

Components are compared pairwise, padding the shorter version with the zero
placeholder. Ranks decide first; numbers compare by magnitude. Alphabetic
components with different text are settled by their first letter only,
ignoring case, and no further positions are examined.
"""

from functools import cmp_to_key
from itertools import zip_longest
from typing import Iterable, List, Optional

from .models import ZERO_COMPONENT, Ordering, Rank, VersionComponent
from .tokenizer import tokenize


def _sign(left, right) -> int:
    if left == right:
        return 0
    return -1 if left < right else 1


def _compare_components(left: VersionComponent, right: VersionComponent) -> int:
    """Compare two components that differ in rank or value."""
    if left.rank != right.rank:
        return _sign(left.rank, right.rank)
    if left.rank is Rank.NUMBER:
        # Digit strings without leading zeros: longer means larger.
        return _sign((len(left.value), left.value), (len(right.value), right.value))
    return _sign(str(left.value)[:1].lower(), str(right.value)[:1].lower())


def _compare(v1: str, v2: str) -> int:
    pairs = zip_longest(tokenize(v1), tokenize(v2), fillvalue=ZERO_COMPONENT)
    for left, right in pairs:
        if left == right:
            continue
        # The first differing position decides, even when it is a tie.
        return _compare_components(left, right)
    return 0


def compare_versions(v1: str, v2: str) -> Ordering:
    """Compare two version strings.

    Args:
        v1: First version string.
        v2: Second version string.

    Returns:
        Ordering: LESS when ``v1`` is older, GREATER when newer, else EQUAL.
    """
    return Ordering(_compare(v1, v2))


def is_less(v1: str, v2: str) -> bool:
    """True when ``v1`` is strictly older than ``v2``."""
    return _compare(v1, v2) < 0


version_key = cmp_to_key(_compare)


def sort_versions(versions: Iterable[str], reverse: bool = False) -> List[str]:
    """Return ``versions`` sorted oldest first (newest first with ``reverse``)."""
    return sorted(versions, key=version_key, reverse=reverse)


def latest_version(versions: Iterable[str]) -> Optional[str]:
    """Return the newest of ``versions`` or None when there are none."""
    candidates = list(versions)
    if not candidates:
        return None
    return max(candidates, key=version_key)
