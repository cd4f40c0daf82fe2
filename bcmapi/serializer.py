"""JSON front end over the codec registry."""

from __future__ import annotations

import json
from functools import lru_cache
from typing import Any, Optional, TypeVar, cast

from .config import get_environment
from .exceptions import DecodeTypeMismatch
from .models.json_types import WireValue
from .serialization.registry import CodecRegistry, get_registry

T = TypeVar("T")


class BrightcoveSerializer:
    """Parses response bodies into typed values and renders request bodies.

    The target type is always supplied by the caller: the payload itself
    does not say what it contains.
    """

    def __init__(
        self, registry: Optional[CodecRegistry] = None, *, indent: Optional[int] = None
    ) -> None:
        self.registry = registry if registry is not None else get_registry()
        self.indent = indent

    def deserialize(self, payload: str | bytes, target_type: Any) -> Any:
        try:
            wire = json.loads(payload)
        except json.JSONDecodeError as exc:
            raise DecodeTypeMismatch(None, "JSON document", payload) from exc
        return self.convert_to_type(wire, target_type)

    def convert_to_type(self, wire: WireValue, target_type: Any) -> Any:
        return self.registry.resolve(target_type).decode(wire)

    def to_wire(self, value: Any, type_key: Any = None) -> WireValue:
        key = type_key if type_key is not None else type(value)
        return cast(WireValue, self.registry.resolve(key).encode(value))

    def serialize(self, value: Any, type_key: Any = None) -> str:
        return json.dumps(self.to_wire(value, type_key), indent=self.indent)


@lru_cache(maxsize=1)
def get_serializer() -> BrightcoveSerializer:
    return BrightcoveSerializer(get_registry(), indent=get_environment().json_indent)


__all__ = ["BrightcoveSerializer", "get_serializer"]
