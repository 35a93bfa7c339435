"""Freedom voting: per-package verdicts and per-project aggregation."""

import logging
from typing import Any, Callable, Dict, Iterable, Optional, Sequence, Set, Union

from constants import Constants, DefaultThresholds
from common.logging_utils import extra_context, is_debug_enabled
from .errors import RegistryConfigurationError, UnsupportedInputError
from .models import (
    EvaluatorRule,
    FixedRule,
    Package,
    Project,
    ReferenceRepository,
    Verdict,
    VoteReport,
)
from .registry import REFERENCE_REPOSITORIES, find_repository
from .rules import RuleEvaluators

logger = logging.getLogger(__name__)

STG = f"{Constants.VOTE} "

VoteHook = Callable[[VoteReport], None]


class FreedomChecker:
    """Decides whether packages and projects are free software.

    Args:
        evaluators: License evaluators; defaults to ones backed by the
            process-wide Gentoo identifier cache.
        repositories: Ordered reference repositories.
        threshold: A project is free when its share of free votes is
            strictly greater than this value.
        on_vote: Optional hook receiving a VoteReport for each vote cast.
    """

    def __init__(
        self,
        evaluators: Optional[RuleEvaluators] = None,
        repositories: Sequence[ReferenceRepository] = REFERENCE_REPOSITORIES,
        threshold: float = DefaultThresholds.FREEDOM_THRESHOLD.value,
        on_vote: Optional[VoteHook] = None,
    ):
        self.evaluators = evaluators or RuleEvaluators()
        self.repositories = repositories
        self.threshold = threshold
        self.on_vote = on_vote

    def _verdict_for(self, repository: ReferenceRepository, package: Package) -> Verdict:
        rule = repository.rule
        if isinstance(rule, FixedRule):
            return Verdict.from_bool(rule.verdict)
        if isinstance(rule, EvaluatorRule):
            evaluator = self.evaluators.get(rule.evaluator)
            if evaluator is None:
                raise RegistryConfigurationError(
                    f"Repository '{repository.name}' uses unknown evaluator {rule.evaluator!r}"
                )
            for license_text in package.licenses:
                verdict = evaluator(license_text)
                if verdict is not Verdict.FREE:
                    return verdict
            return Verdict.FREE
        raise RegistryConfigurationError(
            f"Repository '{repository.name}' has an invalid rule: {rule!r}"
        )

    def _report(self, repository: ReferenceRepository, package: Package, verdict: Verdict) -> None:
        if is_debug_enabled(logger):
            logger.debug(
                "%s%s votes %s for %s",
                STG, repository.name, verdict.value, package,
                extra=extra_context(
                    event="vote",
                    component="voting",
                    repository=repository.name,
                    repo=package.repo,
                    package=package.display_name,
                    verdict=verdict.value,
                ),
            )
        if self.on_vote is not None:
            self.on_vote(VoteReport(repository.name, package, verdict))

    def package_verdict(self, package: Package) -> Verdict:
        """Verdict of the reference repository ``package`` belongs to.

        Returns UNKNOWN when the package is not from a reference repository
        or that repository abstains.
        """
        repository = find_repository(package.repo, package.subrepo, self.repositories)
        if repository is None:
            return Verdict.UNKNOWN
        verdict = self._verdict_for(repository, package)
        self._report(repository, package, verdict)
        return verdict

    def project_verdict(self, project: Project) -> Verdict:
        """Poll every reference repository present in ``project``.

        Each repository votes once, with the verdict of the first of its
        packages in project order. Abstentions are not counted.
        """
        votes = 0
        free_votes = 0
        seen: Set[int] = set()
        for package in project.packages:
            repository = find_repository(package.repo, package.subrepo, self.repositories)
            if repository is None or id(repository) in seen:
                continue
            seen.add(id(repository))
            verdict = self._verdict_for(repository, package)
            self._report(repository, package, verdict)
            if verdict.is_definite:
                votes += 1
                if verdict is Verdict.FREE:
                    free_votes += 1

        if votes == 0:
            result = Verdict.UNKNOWN
        else:
            result = Verdict.from_bool(free_votes / votes > self.threshold)
        logger.info(
            "%sProject %s: %d of %d votes free -> %s",
            STG, project.name, free_votes, votes, result.value,
            extra=extra_context(
                event="project_verdict",
                component="voting",
                project=project.name,
                votes=votes,
                free_votes=free_votes,
                verdict=result.value,
            ),
        )
        return result

    def check_freedom(self, obj: Union[Package, Project]) -> Verdict:
        """Verdict for a package or a project.

        Raises:
            UnsupportedInputError: when ``obj`` is neither.
        """
        if isinstance(obj, Package):
            return self.package_verdict(obj)
        if isinstance(obj, Project):
            return self.project_verdict(obj)
        raise UnsupportedInputError(
            f"check_freedom() expects a Package or a Project, not {type(obj).__name__}"
        )


def summarize_votes(reports: Iterable[VoteReport], verdict: Verdict) -> Dict[str, Any]:
    """Summarize the vote reports collected for a single project.

    Args:
        reports: Reports received through ``on_vote`` for the project.
        verdict: The project verdict returned by the checker.
    """
    reports = list(reports)
    counted = [r for r in reports if r.verdict.is_definite]
    free = sum(1 for r in counted if r.verdict is Verdict.FREE)
    ratio = free / len(counted) if counted else None
    return {
        "votes": len(counted),
        "free_votes": free,
        "abstentions": len(reports) - len(counted),
        "ratio": ratio,
        "verdict": verdict.value,
        "details": [r.as_dict() for r in reports],
    }


_default_checker: Optional[FreedomChecker] = None


def check_freedom(obj: Union[Package, Project]) -> Verdict:
    """Check ``obj`` with a shared checker using the built-in defaults."""
    global _default_checker  # pylint: disable=global-statement
    if _default_checker is None:
        _default_checker = FreedomChecker()
    return _default_checker.check_freedom(obj)
