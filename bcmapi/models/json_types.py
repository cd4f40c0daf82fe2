"""JSON-compatible aliases for the untyped wire tree."""

from __future__ import annotations

from typing import TypeAlias

WirePrimitive: TypeAlias = str | int | float | bool | None
WireValue: TypeAlias = WirePrimitive | list["WireValue"] | dict[str, "WireValue"]
WireList: TypeAlias = list[WireValue]
WireMap: TypeAlias = dict[str, WireValue]

__all__ = ["WirePrimitive", "WireValue", "WireList", "WireMap"]
