from .base import BrightcoveSchema, id_unset
from .fields import Entity, EpochMillis, WireEnum, WireInteger, describe_field

__all__ = [
    "BrightcoveSchema",
    "Entity",
    "EpochMillis",
    "WireEnum",
    "WireInteger",
    "describe_field",
    "id_unset",
]
