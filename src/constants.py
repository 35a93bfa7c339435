"""Constants used in the project."""

import logging
import os
from enum import Enum

import yaml


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    FILE_ERROR = 1
    CONNECTION_ERROR = 2
    USAGE_ERROR = 4


class DefaultThresholds(Enum):
    """Default voting thresholds for the program.

    Args:
        Enum (float): Default thresholds for the program.
    """

    FREEDOM_THRESHOLD = 0.5


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    GENTOO_LICENSE_GROUPS_URL = (
        "https://gitweb.gentoo.org/repo/gentoo.git/plain/profiles/license_groups"
    )
    GENTOO_FREE_CATEGORIES = [
        "GPL-COMPATIBLE",
        "FSF-APPROVED",
        "OSI-APPROVED",
        "MISC-FREE",
        "FREE-DOCUMENTS",
    ]
    LOG_FORMAT = "[%(levelname)s] %(message)s"
    VOTE = "[VOTE]"
    REQUEST_TIMEOUT = 30  # Timeout in seconds for all HTTP requests
    HTTP_RETRY_MAX = 3
    HTTP_RETRY_BASE_DELAY_SEC = 0.3
    HTTP_CACHE_TTL_SEC = 300

    ENV_CONFIG = "FREECHECK_CONFIG"
    CONFIG_LOCATIONS = [
        "freecheck.yml",
        "freecheck.yaml",
        os.path.join("~", ".config", "freecheck", "freecheck.yml"),
    ]


def _load_yaml_config(path=None):
    """Load the first readable YAML configuration file.

    Args:
        path (str, optional): Explicit file path; takes precedence over the
            environment variable and default locations.

    Returns:
        dict: Parsed configuration, or an empty dict when nothing usable exists.
    """
    candidates = []
    if path:
        candidates.append(path)
    env_path = os.environ.get(Constants.ENV_CONFIG)
    if env_path:
        candidates.append(env_path)
    candidates.extend(Constants.CONFIG_LOCATIONS)

    for candidate in candidates:
        full = os.path.expanduser(candidate)
        if not os.path.isfile(full):
            continue
        try:
            with open(full, "r", encoding="utf-8") as fh:
                data = yaml.safe_load(fh) or {}
        except (OSError, yaml.YAMLError) as exc:
            logging.warning("Ignoring unreadable config file %s: %s", full, exc)
            continue
        if isinstance(data, dict):
            return data
        logging.warning("Ignoring config file %s: top level is not a mapping", full)
    return {}
