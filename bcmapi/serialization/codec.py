"""Codecs turning wire values into typed objects and back."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, Mapping, Optional, Protocol, TypeVar

from marshmallow import ValidationError, fields

from ..exceptions import DecodeTypeMismatch, describe_type
from ..models.json_types import WireValue
from ..schemas.base import BrightcoveSchema
from ..schemas.fields import WireInteger
from .enums import EnumNameMap

if TYPE_CHECKING:  # pragma: no cover
    from .registry import CodecRegistry

T = TypeVar("T")


class Codec(Protocol[T]):
    def decode(self, wire: WireValue) -> T: ...

    def encode(self, value: T) -> WireValue: ...


class ItemCodec(Generic[T]):
    """Schema-backed codec for one entity type.

    ``decode`` checks the map for an error payload before any field rule
    runs, so an error response never comes back as a half-filled entity.
    """

    def __init__(
        self,
        model: type,
        schema_cls: type[BrightcoveSchema],
        registry: "CodecRegistry",
        *,
        encodable: bool = True,
    ) -> None:
        self.model = model
        self.registry = registry
        self.encodable = encodable
        self.schema = schema_cls(registry=registry)

    def decode(self, wire: WireValue) -> T:
        if isinstance(wire, Mapping):
            fault = self.registry.error_detector.check(wire)
            if fault is not None:
                raise fault
        return self.schema.load(wire)

    def encode(self, value: T) -> dict[str, WireValue]:
        if not self.encodable:
            raise TypeError(f"{describe_type(self.model)} is never sent to the service")
        if not isinstance(value, self.model):
            raise TypeError(
                f"Expected {describe_type(self.model)}, got {type(value).__name__}"
            )
        return self.schema.dump(value)

    def __repr__(self) -> str:
        return f"ItemCodec({describe_type(self.model)})"


_SCALAR_FIELDS: dict[type, tuple[fields.Field, str]] = {
    int: (WireInteger(), "integer"),
    str: (fields.String(), "string"),
    bool: (fields.Boolean(), "boolean"),
    float: (fields.Float(), "number"),
}


class ScalarCodec(Generic[T]):
    """Codec for a bare scalar payload such as a result id."""

    def __init__(self, scalar_type: type) -> None:
        try:
            self.field, self.expected = _SCALAR_FIELDS[scalar_type]
        except KeyError:
            raise TypeError(f"{scalar_type!r} is not a supported scalar") from None
        self.scalar_type = scalar_type

    def decode(self, wire: WireValue) -> T:
        try:
            return self.field.deserialize(wire)
        except ValidationError as exc:
            raise DecodeTypeMismatch(None, self.expected, wire) from exc

    def encode(self, value: T) -> WireValue:
        return self.field.serialize("value", {"value": value})

    def __repr__(self) -> str:
        return f"ScalarCodec({self.scalar_type.__name__})"


class EnumCodec(Generic[T]):
    """Codec for a bare enum token such as an upload status."""

    def __init__(self, name_map: EnumNameMap) -> None:
        self.name_map = name_map

    def decode(self, wire: WireValue) -> T:
        if not isinstance(wire, str):
            raise DecodeTypeMismatch(
                None, f"{self.name_map.enum_cls.__name__} token", wire
            )
        return self.name_map.from_wire_name(wire)

    def encode(self, value: T) -> WireValue:
        return self.name_map.to_wire_name(value)

    def __repr__(self) -> str:
        return f"EnumCodec({self.name_map.enum_cls.__name__})"


class ListCodec(Generic[T]):
    """Element-wise codec for ``list[T]``; order is kept as received."""

    def __init__(self, item_type: Any, registry: "CodecRegistry") -> None:
        self.item_type = item_type
        self.registry = registry

    def decode(self, wire: WireValue) -> list[T]:
        if not isinstance(wire, list):
            raise DecodeTypeMismatch(
                None, f"list of {describe_type(self.item_type)}", wire
            )
        codec = self.registry.resolve(self.item_type)
        return [codec.decode(item) for item in wire]

    def encode(self, value: Optional[list[T]]) -> WireValue:
        if value is None:
            return None
        codec = self.registry.resolve(self.item_type)
        return [codec.encode(item) for item in value]

    def __repr__(self) -> str:
        return f"ListCodec({describe_type(self.item_type)})"


__all__ = ["Codec", "ItemCodec", "ScalarCodec", "EnumCodec", "ListCodec"]
