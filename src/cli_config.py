"""Configuration overrides for runtime tunables.

Precedence, lowest to highest: built-in constants, YAML config file, CLI
flags. Invalid values are reported and ignored so the defaults stay in
effect.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from constants import Constants, DefaultThresholds

logger = logging.getLogger(__name__)


def _valid_threshold(value: Any) -> Optional[float]:
    try:
        threshold = float(value)
    except (TypeError, ValueError):
        return None
    if 0.0 <= threshold < 1.0:
        return threshold
    return None


def _section(cfg: Dict[str, Any], name: str) -> Dict[str, Any]:
    value = cfg.get(name)
    return value if isinstance(value, dict) else {}


def apply_config_overrides(args, cfg: Optional[Dict[str, Any]] = None) -> float:
    """Apply YAML config then CLI overrides; return the effective threshold.

    Args:
        args: Parsed CLI namespace.
        cfg: Parsed YAML configuration (may be empty).

    Returns:
        float: Freedom threshold to use.
    """
    cfg = cfg or {}
    threshold = DefaultThresholds.FREEDOM_THRESHOLD.value

    freedom = _section(cfg, "freedom")
    if "threshold" in freedom:
        parsed = _valid_threshold(freedom["threshold"])
        if parsed is None:
            logger.warning("Ignoring invalid freedom.threshold in config: %r", freedom["threshold"])
        else:
            threshold = parsed

    gentoo = _section(cfg, "gentoo")
    if gentoo.get("license_groups_url"):
        Constants.GENTOO_LICENSE_GROUPS_URL = str(gentoo["license_groups_url"])
    categories = gentoo.get("categories")
    if isinstance(categories, list) and categories:
        Constants.GENTOO_FREE_CATEGORIES = [str(c) for c in categories]

    http = _section(cfg, "http")
    try:
        if http.get("timeout") is not None:
            Constants.REQUEST_TIMEOUT = int(http["timeout"])
        if http.get("retries") is not None:
            Constants.HTTP_RETRY_MAX = max(1, int(http["retries"]))
    except (TypeError, ValueError):
        logger.warning("Ignoring invalid http settings in config: %r", http)

    cli_threshold = getattr(args, "THRESHOLD", None)
    if cli_threshold is not None:
        parsed = _valid_threshold(cli_threshold)
        if parsed is None:
            logger.warning("Ignoring invalid --threshold %r; must be in [0, 1)", cli_threshold)
        else:
            threshold = parsed
    if getattr(args, "GENTOO_URL", None):
        Constants.GENTOO_LICENSE_GROUPS_URL = args.GENTOO_URL

    return threshold
