"""Free license identifiers for Gentoo and the single-assignment cache holding them."""

from __future__ import annotations

import logging
import threading
from typing import Callable, FrozenSet, Iterable, Optional

from constants import Constants
from common.http_client import get_text
from common.logging_utils import extra_context, safe_url
from .errors import LicenseGroupsUnavailable

logger = logging.getLogger(__name__)

IdentifierFetcher = Callable[[], Iterable[str]]


def parse_license_groups(text: str, categories: Iterable[str]) -> FrozenSet[str]:
    """Collect the members of ``categories`` from a Gentoo license_groups file.

    Each non-comment line reads ``GROUP member member @OTHER-GROUP``.
    References to other groups (``@...``) are dropped; only direct members
    of the named categories are kept. Identifiers are lower-cased.

    Args:
        text: Contents of ``profiles/license_groups``.
        categories: Group names whose members count as free.

    Returns:
        frozenset: Lower-cased free license identifiers.
    """
    wanted = {c.upper() for c in categories}
    identifiers = set()
    for raw_line in text.splitlines():
        line = raw_line.split("#", 1)[0].strip()
        if not line:
            continue
        group, *members = line.split()
        if group.upper() not in wanted:
            continue
        identifiers.update(m.lower() for m in members if not m.startswith("@"))
    return frozenset(identifiers)


def fetch_gentoo_free_identifiers(
    url: Optional[str] = None,
    categories: Optional[Iterable[str]] = None,
) -> FrozenSet[str]:
    """Download Gentoo's license groups and return the free identifiers.

    Raises:
        LicenseGroupsUnavailable: on a non-200 response or an empty result.
    """
    url = url or Constants.GENTOO_LICENSE_GROUPS_URL
    categories = list(categories or Constants.GENTOO_FREE_CATEGORIES)
    status, text = get_text(url)
    if text is None:
        raise LicenseGroupsUnavailable(
            f"license groups request to {safe_url(url)} failed (status {status})"
        )
    identifiers = parse_license_groups(text, categories)
    if not identifiers:
        raise LicenseGroupsUnavailable(
            f"no members found for categories {', '.join(categories)}"
        )
    logger.debug(
        "Loaded %d free Gentoo license identifiers",
        len(identifiers),
        extra=extra_context(
            event="license_groups_loaded",
            component="identifiers",
            count=len(identifiers),
            target=safe_url(url),
        ),
    )
    return identifiers


class FreeIdentifierCache:
    """Write-once holder for the free license identifier set.

    The fetcher runs lazily on the first ``get()``. The first successful
    result is kept for the lifetime of the cache and never replaced. A
    failed fetch is not remembered, so ``get()`` returns None and a later
    call may try again.
    """

    def __init__(self, fetcher: Optional[IdentifierFetcher] = None):
        self._fetcher = fetcher
        self._value: Optional[FrozenSet[str]] = None
        self._lock = threading.Lock()

    @classmethod
    def preloaded(cls, identifiers: Iterable[str]) -> "FreeIdentifierCache":
        """Cache that already holds ``identifiers`` and never fetches."""
        cache = cls()
        cache._value = frozenset(i.lower() for i in identifiers)
        return cache

    @classmethod
    def unavailable(cls) -> "FreeIdentifierCache":
        """Cache with no identifiers and no way to obtain them."""
        return cls()

    @property
    def loaded(self) -> bool:
        return self._value is not None

    def get(self) -> Optional[FrozenSet[str]]:
        """Return the identifiers, fetching them on first use.

        Returns:
            frozenset or None: None when the identifiers are unavailable.
        """
        if self._value is not None:
            return self._value
        if self._fetcher is None:
            return None
        with self._lock:
            if self._value is not None:
                return self._value
            try:
                fetched = self._fetcher()
            except LicenseGroupsUnavailable as exc:
                logger.warning(
                    "Free license identifiers unavailable: %s",
                    exc,
                    extra=extra_context(event="license_groups_unavailable", component="identifiers"),
                )
                return None
            self._value = frozenset(i.lower() for i in fetched)
            return self._value


_default_cache = FreeIdentifierCache(fetch_gentoo_free_identifiers)


def default_cache() -> FreeIdentifierCache:
    """Process-wide cache backed by the Gentoo license groups download."""
    return _default_cache
