"""License evaluators used by reference repositories.

Every evaluator takes a single license string and returns a Verdict.
Arch and openSUSE are plain regex exclusions and always give a definite
answer. Gentoo parses its LICENSE grammar and abstains (UNKNOWN) when the
free identifier set is unavailable.
"""

import logging
import re
from typing import Callable, Dict, Optional

from common.logging_utils import extra_context
from .grammar import is_free_gentoo_license
from .identifiers import FreeIdentifierCache, default_cache
from .models import EvaluatorId, Verdict

logger = logging.getLogger(__name__)

LicenseEvaluator = Callable[[str], Verdict]

ARCH_NON_FREE = re.compile(r"\bproprietary\b", re.IGNORECASE)
# "\b" cannot anchor on "-", so spell out the word boundaries.
OPENSUSE_NON_FREE = re.compile(r"(?<![\w-])SUSE-NonFree(?![\w-])", re.IGNORECASE)


def is_free_arch_license(license_text: str) -> bool:
    """Arch marks non-free software with the ``proprietary`` license."""
    if not license_text or not license_text.strip():
        return False
    return not ARCH_NON_FREE.search(license_text)


def is_free_opensuse_license(license_text: str) -> bool:
    """openSUSE tags non-free packages with ``SUSE-NonFree``."""
    if not license_text or not license_text.strip():
        return False
    return not OPENSUSE_NON_FREE.search(license_text)


class RuleEvaluators:
    """Binds each EvaluatorId to a callable license evaluator.

    The Gentoo evaluator needs the free identifier set; it is read from the
    injected cache so tests can supply a preloaded or empty one.
    """

    def __init__(self, gentoo_identifiers: Optional[FreeIdentifierCache] = None):
        self._gentoo_identifiers = gentoo_identifiers or default_cache()
        self._evaluators: Dict[EvaluatorId, LicenseEvaluator] = {
            EvaluatorId.ARCH: self._arch,
            EvaluatorId.OPENSUSE: self._opensuse,
            EvaluatorId.GENTOO: self._gentoo,
        }

    def get(self, evaluator_id: EvaluatorId) -> Optional[LicenseEvaluator]:
        return self._evaluators.get(evaluator_id)

    def __contains__(self, evaluator_id) -> bool:
        return evaluator_id in self._evaluators

    @staticmethod
    def _arch(license_text: str) -> Verdict:
        return Verdict.from_bool(is_free_arch_license(license_text))

    @staticmethod
    def _opensuse(license_text: str) -> Verdict:
        return Verdict.from_bool(is_free_opensuse_license(license_text))

    def _gentoo(self, license_text: str) -> Verdict:
        free_ids = self._gentoo_identifiers.get()
        if free_ids is None:
            logger.debug(
                "Gentoo abstains: free identifiers unavailable",
                extra=extra_context(event="abstain", component="rules", evaluator="gentoo"),
            )
            return Verdict.UNKNOWN
        return Verdict.from_bool(is_free_gentoo_license(license_text, free_ids))
