"""Caller-side version constraint parsing and filtering.

A constraint is an operator prefix followed by a version, e.g. ``<=1.2`` or
``!= 2.0rc1``. Strings without a recognised prefix are rejected rather than
guessed at.
"""

from dataclasses import dataclass
from typing import Iterable, List

from .comparator import compare_versions
from .models import Ordering

# Longest prefixes first so "<=" is not read as "<".
_OPERATORS = ("<=", ">=", "==", "!=", "<", ">", "=")

_ACCEPTS = {
    "<": (Ordering.LESS,),
    "<=": (Ordering.LESS, Ordering.EQUAL),
    ">": (Ordering.GREATER,),
    ">=": (Ordering.GREATER, Ordering.EQUAL),
    "=": (Ordering.EQUAL,),
    "==": (Ordering.EQUAL,),
    "!=": (Ordering.LESS, Ordering.GREATER),
}


class ConstraintError(ValueError):
    """Raised for a constraint string without a valid operator prefix."""


@dataclass(frozen=True)
class VersionConstraint:
    """Parsed ``<operator><version>`` constraint."""
    operator: str
    version: str

    def matches(self, candidate: str) -> bool:
        """True when ``candidate`` satisfies the constraint."""
        return compare_versions(candidate, self.version) in _ACCEPTS[self.operator]

    def __str__(self) -> str:
        return f"{self.operator}{self.version}"


def parse_constraint(text: str) -> VersionConstraint:
    """Parse a constraint string.

    Raises:
        ConstraintError: if the operator prefix or the version is missing.
    """
    stripped = (text or "").strip()
    for operator in _OPERATORS:
        if stripped.startswith(operator):
            version = stripped[len(operator):].strip()
            if not version:
                raise ConstraintError(f"Constraint '{text}' has no version after '{operator}'")
            return VersionConstraint(operator=operator, version=version)
    raise ConstraintError(
        f"Constraint '{text}' must start with one of: {', '.join(_OPERATORS)}"
    )


def filter_versions(versions: Iterable[str], constraint_text: str) -> List[str]:
    """Return the versions that satisfy ``constraint_text``, preserving order."""
    constraint = parse_constraint(constraint_text)
    return [v for v in versions if constraint.matches(v)]
