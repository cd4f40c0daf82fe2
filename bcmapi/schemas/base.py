"""Base Marshmallow schema shared by every media API entity."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar, Mapping, Optional

from marshmallow import EXCLUDE, Schema, ValidationError, missing, post_load

from ..exceptions import DecodeTypeMismatch
from ..log_config import debug_verbose
from ..utils import camel_case
from .fields import describe_field

if TYPE_CHECKING:  # pragma: no cover
    from ..serialization.registry import CodecRegistry

_SCHEMA_ERROR_KEY = "_schema"


def _first_error(messages: Any) -> tuple[Optional[str], Any]:
    if isinstance(messages, Mapping):
        for key, detail in messages.items():
            if key == _SCHEMA_ERROR_KEY:
                return None, detail
            return str(key), detail
    return None, messages


def id_unset(item: Any) -> bool:
    """Omission rule for ids the service has not assigned yet."""
    return not getattr(item, "id", 0)


class BrightcoveSchema(Schema):
    """Field-rule table for one entity.

    Field names map to camelCase wire keys unless a field sets ``data_key``.
    Unknown wire keys are dropped and ``null`` is accepted for every field.
    A field declaring ``metadata={"omit_if": predicate}`` is left out of the
    dumped map whenever ``predicate(instance)`` is true.
    """

    __model__: ClassVar[Optional[type]] = None

    class Meta:
        unknown = EXCLUDE

    def __init__(self, *, registry: Optional["CodecRegistry"] = None, **kwargs: Any) -> None:
        self.registry = registry
        super().__init__(**kwargs)

    def on_bind_field(self, field_name: str, field_obj: Any) -> None:  # type: ignore[override]
        super().on_bind_field(field_name, field_obj)
        if not getattr(field_obj, "data_key", None):
            field_obj.data_key = camel_case(field_name)
        field_obj.allow_none = True

    def get_attribute(self, obj: Any, attr: str, default: Any) -> Any:
        field_obj = self.dump_fields.get(attr)
        omit_if = field_obj.metadata.get("omit_if") if field_obj is not None else None
        if omit_if is not None and omit_if(obj):
            return missing
        return super().get_attribute(obj, attr, default)

    def handle_error(
        self, error: ValidationError, data: Any, *, many: bool, **kwargs: Any
    ) -> None:
        key, detail = _first_error(error.messages)
        if key is None:
            expected = "object"
            value = data
        else:
            field_obj = self._field_for_key(key)
            expected = describe_field(field_obj) if field_obj is not None else "value"
            value = data.get(key) if isinstance(data, Mapping) else None
        debug_verbose(
            "decode_type_mismatch",
            {"schema": type(self).__name__, "key": key, "detail": detail},
        )
        raise DecodeTypeMismatch(key, expected, value) from error

    def _field_for_key(self, key: str) -> Any:
        for field_obj in self.load_fields.values():
            if field_obj.data_key == key:
                return field_obj
        return None

    @post_load
    def _build_model(self, data: dict[str, Any], **_: Any) -> Any:
        model = self.__model__
        if model is None:
            return data
        # null on the wire leaves the model default in place
        values = {key: value for key, value in data.items() if value is not None}
        return model(**values)


__all__ = ["BrightcoveSchema", "id_unset"]
