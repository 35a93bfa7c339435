"""Logging helpers shared by the library modules and the CLI.

Keeps structured ``extra`` payloads consistent so log lines can be filtered
by ``event``/``component`` regardless of which module emitted them.
"""
from __future__ import annotations

import logging
import time
from typing import Any, Dict, Optional
from urllib.parse import urlsplit, urlunsplit

from constants import Constants


def configure_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger once for CLI use.

    Args:
        level: Log level name, e.g. "DEBUG".
        logfile: Optional file to write log records to instead of stderr.
    """
    numeric = getattr(logging, str(level).upper(), logging.INFO)
    handlers = []
    if logfile:
        handlers.append(logging.FileHandler(logfile, encoding="utf-8"))
    else:
        handlers.append(logging.StreamHandler())
    logging.basicConfig(
        level=numeric,
        format=Constants.LOG_FORMAT,
        handlers=handlers,
        force=True,
    )


def extra_context(**fields: Any) -> Dict[str, Any]:
    """Return an ``extra`` mapping with unset fields dropped."""
    return {key: value for key, value in fields.items() if value is not None}


def is_debug_enabled(logger: logging.Logger) -> bool:
    """True when DEBUG records from ``logger`` would be emitted."""
    return logger.isEnabledFor(logging.DEBUG)


def safe_url(url: str) -> str:
    """Strip credentials, query and fragment from a URL for logging."""
    try:
        parts = urlsplit(url)
    except ValueError:
        return "<invalid-url>"
    netloc = parts.hostname or ""
    if parts.port:
        netloc = f"{netloc}:{parts.port}"
    return urlunsplit((parts.scheme, netloc, parts.path, "", ""))


class Timer:
    """Context manager measuring wall time in milliseconds."""

    def __init__(self):
        self._start = 0.0
        self._end: Optional[float] = None

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        self._end = None
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._end = time.perf_counter()

    def duration_ms(self) -> int:
        """Elapsed milliseconds so far (or total, once the block exited)."""
        end = self._end if self._end is not None else time.perf_counter()
        return int((end - self._start) * 1000)
