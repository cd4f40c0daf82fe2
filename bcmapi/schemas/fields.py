"""Custom Marshmallow fields for media API wire values."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Mapping, Optional

from marshmallow import fields

from ..exceptions import DecodeTypeMismatch, describe_type
from ..serialization.enums import EnumNameMap


class WireEnum(fields.Field):
    """Enum member stored under its wire token.

    Tokens outside the closed set raise ``UnknownEnumToken`` straight
    through the schema instead of being collected as validation errors.
    """

    default_error_messages = {"invalid": "Not a valid enum token."}

    def __init__(self, name_map: EnumNameMap, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.name_map = name_map
        self.wire_type = f"{name_map.enum_cls.__name__} token"

    def _serialize(self, value: Any, attr: Optional[str], obj: Any, **kwargs: Any):
        if value is None:
            return None
        return self.name_map.to_wire_name(value)

    def _deserialize(
        self,
        value: Any,
        attr: Optional[str],
        data: Optional[Mapping[str, Any]],
        **kwargs: Any,
    ):
        if not isinstance(value, str):
            raise self.make_error("invalid")
        return self.name_map.from_wire_name(value)


class WireInteger(fields.Integer):
    """Integer that refuses to truncate a fractional number.

    Numeric strings and whole floats such as ``3.0`` are still accepted.
    """

    def _validated(self, value: Any) -> int:
        if isinstance(value, float) and not value.is_integer():
            raise self.make_error("invalid")
        return super()._validated(value)


class EpochMillis(fields.AwareDateTime):
    """UTC datetime carried as milliseconds since the epoch."""

    wire_type = "epoch milliseconds"

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(format="timestamp_ms", default_timezone=timezone.utc, **kwargs)

    def _serialize(self, value: Optional[datetime], attr: Optional[str], obj: Any, **kwargs: Any):
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return round(value.timestamp() * 1000)


class Entity(fields.Field):
    """Nested value decoded and encoded through the codec registry.

    The registry is taken from the root schema, so a nested entity always
    goes through the same error detection and field rules as a top-level
    one.
    """

    def __init__(self, type_key: Any, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.type_key = type_key
        self.wire_type = describe_type(type_key)

    def _codec(self):
        registry = getattr(self.root, "registry", None)
        if registry is None:
            from ..serialization.registry import get_registry

            registry = get_registry()
        return registry.resolve(self.type_key)

    def _serialize(self, value: Any, attr: Optional[str], obj: Any, **kwargs: Any):
        if value is None:
            return None
        return self._codec().encode(value)

    def _deserialize(
        self,
        value: Any,
        attr: Optional[str],
        data: Optional[Mapping[str, Any]],
        **kwargs: Any,
    ):
        try:
            return self._codec().decode(value)
        except DecodeTypeMismatch as exc:
            key = self._wire_key(attr)
            if key is None or exc.key is not None:
                raise
            raise exc.with_key(key) from exc

    def _wire_key(self, attr: Optional[str]) -> Optional[str]:
        if attr is not None:
            return attr
        # list items arrive without a key, so report the enclosing list field
        parent = self.parent
        if isinstance(parent, fields.Field):
            return parent.data_key or parent.name
        return self.data_key or self.name


_FIELD_LABELS: tuple[tuple[type[fields.Field], str], ...] = (
    (fields.Boolean, "boolean"),
    (fields.Integer, "integer"),
    (fields.Float, "number"),
    (fields.String, "string"),
    (fields.Dict, "object"),
)


def describe_field(field_obj: fields.Field) -> str:
    label = getattr(field_obj, "wire_type", None)
    if label:
        return label
    if isinstance(field_obj, fields.List):
        return f"list of {describe_field(field_obj.inner)}"
    for field_cls, name in _FIELD_LABELS:
        if isinstance(field_obj, field_cls):
            return name
    return type(field_obj).__name__


__all__ = ["WireEnum", "WireInteger", "EpochMillis", "Entity", "describe_field"]
