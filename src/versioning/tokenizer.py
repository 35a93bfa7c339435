"""Split raw version strings into ranked components."""

import re
from typing import List

from .models import (
    POST_RELEASE_KEYWORDS,
    PRE_RELEASE_KEYWORDS,
    Rank,
    VersionComponent,
)

_TOKEN_RE = re.compile(r"[A-Za-z0-9]+")
_SUBRUN_RE = re.compile(r"[0-9]+|[A-Za-z]+")


def _number_component(run: str) -> VersionComponent:
    # Kept as text: digit runs may be too long for int().
    digits = run.lstrip("0")
    if not digits:
        return VersionComponent(Rank.ZERO, 0)
    return VersionComponent(Rank.NUMBER, digits)


def _letter_component(run: str, after_number: bool, trailing: bool) -> VersionComponent:
    """Classify a run of letters.

    Known keywords win over position. An unknown word glued to the end of a
    number is a letter suffix and sorts after any number; every other
    unknown word is treated as a pre-release marker. The number may be zero:
    the ``a`` in ``1.0a`` is a suffix, so ``1.0a`` is newer than ``1.0.1``.
    """
    lowered = run.lower()
    if lowered in PRE_RELEASE_KEYWORDS:
        return VersionComponent(Rank.PRE_RELEASE, run)
    if lowered in POST_RELEASE_KEYWORDS:
        return VersionComponent(Rank.POST_RELEASE, run)
    if after_number and trailing:
        return VersionComponent(Rank.LETTER_SUFFIX, run)
    return VersionComponent(Rank.PRE_RELEASE, run)


def tokenize(version: str) -> List[VersionComponent]:
    """Return the ranked components of ``version``.

    Separators (anything that is not an ASCII letter or digit) are dropped.
    An empty string yields an empty list.
    """
    components: List[VersionComponent] = []
    if not version:
        return components

    for token in _TOKEN_RE.findall(version):
        runs = _SUBRUN_RE.findall(token)
        last_was_numeric = False
        for index, run in enumerate(runs):
            if run.isdigit():
                components.append(_number_component(run))
                last_was_numeric = True
            else:
                trailing = index == len(runs) - 1
                components.append(_letter_component(run, last_was_numeric, trailing))
                last_was_numeric = False
    return components
