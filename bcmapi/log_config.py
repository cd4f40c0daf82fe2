"""Logging helpers for the bcmapi codecs.

Lines are appended to the log file of the active environment, so pointing
``BCMAPI_CACHE`` elsewhere (and clearing ``get_environment``'s cache)
redirects them without reloading this module.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Mapping

from .config import get_environment
from .utils import now_iso

DEBUG = get_environment().debug
VERBOSE = get_environment().verbose


def log_file_path() -> Path:
    return Path(get_environment().log_file)


def _format_payload(payload: Any) -> str:
    if isinstance(payload, Mapping):
        return ", ".join(f"{key}={value!r}" for key, value in payload.items())
    return str(payload)


def _write_line(level: str, label: str, payload: Any) -> None:
    path = log_file_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    encoding = getattr(sys.stdout, "encoding", None) or "utf-8"
    line = f"[{level}][{now_iso()}] {label}: {_format_payload(payload)}\n"
    with path.open("a", encoding=encoding, errors="replace") as handle:
        handle.write(line)


def verbose_log(label: str, payload: Any) -> None:
    """Record a lifecycle event, such as the registry being built."""
    if VERBOSE:
        _write_line("VERBOSE", label, payload)


def debug_verbose(label: str, payload: Any) -> None:
    """Record a diagnostic event. Verbose mode implies debug."""
    if DEBUG or VERBOSE:
        _write_line("DEBUG", label, payload)


__all__ = ["DEBUG", "VERBOSE", "log_file_path", "verbose_log", "debug_verbose"]
