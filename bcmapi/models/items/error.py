from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from marshmallow import fields

from ...schemas import BrightcoveSchema, Entity, WireInteger


def _empty_error_list() -> list["Error"]:
    return []


@dataclass(slots=True)
class Error:
    """Error payload reported by the service.

    Only ever decoded: requests never carry this shape.
    """

    code: Optional[int] = None
    name: Optional[str] = None
    message: Optional[str] = None
    inner_error: Optional["Error"] = None
    errors: list["Error"] = field(default_factory=_empty_error_list)


class ErrorSchema(BrightcoveSchema):
    __model__ = Error

    code = WireInteger()
    name = fields.String()
    message = fields.String()
    inner_error = Entity(Error)
    errors = fields.List(Entity(Error))


__all__ = ["Error", "ErrorSchema"]
