from __future__ import annotations

from datetime import datetime, timezone


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def camel_case(name: str) -> str:
    parts = name.split("_")
    return (
        parts[0] + "".join(part.capitalize() for part in parts[1:]) if parts else name
    )


__all__ = ["now_iso", "camel_case"]
