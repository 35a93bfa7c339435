"""Static, ordered list of reference repositories.

Lookup returns the first entry whose patterns match, so more specific
entries must come before broader ones for the same repository family.
"""

import re
from typing import Optional, Sequence

from .models import EvaluatorId, EvaluatorRule, FixedRule, ReferenceRepository

REFERENCE_REPOSITORIES = (
    ReferenceRepository(
        name="arch",
        repo_pattern=re.compile(r"^arch$"),
        subrepo_pattern=None,
        rule=EvaluatorRule(EvaluatorId.ARCH),
    ),
    ReferenceRepository(
        name="debian",
        repo_pattern=re.compile(r"^debian_"),
        subrepo_pattern=re.compile(r"^(?:main|contrib)$"),
        rule=FixedRule(True),
    ),
    ReferenceRepository(
        name="debian-non-free",
        repo_pattern=re.compile(r"^debian_"),
        subrepo_pattern=re.compile(r"^non-free"),
        rule=FixedRule(False),
    ),
    ReferenceRepository(
        name="gentoo",
        repo_pattern=re.compile(r"^gentoo$"),
        subrepo_pattern=None,
        rule=EvaluatorRule(EvaluatorId.GENTOO),
    ),
    ReferenceRepository(
        name="opensuse",
        repo_pattern=re.compile(r"^opensuse_"),
        subrepo_pattern=None,
        rule=EvaluatorRule(EvaluatorId.OPENSUSE),
    ),
)


def find_repository(
    repo: str,
    subrepo: Optional[str] = None,
    repositories: Sequence[ReferenceRepository] = REFERENCE_REPOSITORIES,
) -> Optional[ReferenceRepository]:
    """Return the first reference repository matching ``repo``/``subrepo``.

    Args:
        repo: Repository name, e.g. "debian_12".
        subrepo: Optional sub-repository name, e.g. "non-free".
        repositories: Ordered candidates; defaults to the built-in list.

    Returns:
        ReferenceRepository or None if nothing matches.
    """
    for candidate in repositories:
        if candidate.matches(repo, subrepo):
            return candidate
    return None
