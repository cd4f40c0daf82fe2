from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict

_DEFAULTS: Dict[str, str] = {
    "BCMAPI_CACHE": os.path.join("~", ".cache", "bcmapi"),
    "BCMAPI_JSON_INDENT": "0",
    "BCMAPI_DEBUG": "false",
    "BCMAPI_VERBOSE": "false",
}

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class SerializerEnvironmentConfig:
    cache_folder: str
    log_file: str
    json_indent: int | None
    debug: bool
    verbose: bool


def _coalesce_env(key: str) -> str:
    default = _DEFAULTS.get(key)
    value = os.getenv(key)
    if value is None:
        if default is None:
            raise RuntimeError(f"Missing environment variable '{key}'")
        return default
    trimmed = value.strip()
    if not trimmed:
        if default is not None:
            return default
        raise RuntimeError(f"Environment variable '{key}' cannot be empty")
    return trimmed


def _parse_int(key: str) -> int:
    raw = _coalesce_env(key)
    try:
        return int(raw)
    except ValueError as exc:
        raise RuntimeError(f"Environment variable '{key}' must be an integer") from exc


def _parse_flag(key: str) -> bool:
    return _coalesce_env(key).lower() in _TRUTHY


@lru_cache(maxsize=1)
def get_environment() -> SerializerEnvironmentConfig:
    cache_folder = os.path.abspath(os.path.expanduser(_coalesce_env("BCMAPI_CACHE")))
    indent = _parse_int("BCMAPI_JSON_INDENT")
    if indent < 0:
        raise RuntimeError("BCMAPI_JSON_INDENT cannot be negative")
    return SerializerEnvironmentConfig(
        cache_folder=cache_folder,
        log_file=os.path.join(cache_folder, "logs.txt"),
        json_indent=indent or None,
        debug=_parse_flag("BCMAPI_DEBUG"),
        verbose=_parse_flag("BCMAPI_VERBOSE"),
    )


__all__ = ["SerializerEnvironmentConfig", "get_environment"]
