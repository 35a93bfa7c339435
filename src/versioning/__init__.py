"""Version tokenization and comparison."""

from .comparator import compare_versions, is_less, latest_version, sort_versions, version_key
from .constraint import ConstraintError, VersionConstraint, filter_versions, parse_constraint
from .models import Ordering, Rank, VersionComponent
from .tokenizer import tokenize

__all__ = [
    "ConstraintError",
    "Ordering",
    "Rank",
    "VersionComponent",
    "VersionConstraint",
    "compare_versions",
    "filter_versions",
    "is_less",
    "latest_version",
    "parse_constraint",
    "sort_versions",
    "tokenize",
    "version_key",
]
