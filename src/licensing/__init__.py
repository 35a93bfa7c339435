"""Free/non-free classification of packages by reference repository voting."""

from .errors import (
    FreecheckError,
    LicenseGroupsUnavailable,
    RegistryConfigurationError,
    UnsupportedInputError,
)
from .identifiers import FreeIdentifierCache
from .models import Package, Project, Verdict, VoteReport
from .registry import REFERENCE_REPOSITORIES, find_repository
from .rules import RuleEvaluators
from .voting import FreedomChecker, check_freedom, summarize_votes

__all__ = [
    "FreeIdentifierCache",
    "FreecheckError",
    "FreedomChecker",
    "LicenseGroupsUnavailable",
    "Package",
    "Project",
    "REFERENCE_REPOSITORIES",
    "RegistryConfigurationError",
    "RuleEvaluators",
    "UnsupportedInputError",
    "Verdict",
    "VoteReport",
    "check_freedom",
    "find_repository",
    "summarize_votes",
]
