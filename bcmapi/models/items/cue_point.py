from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from marshmallow import fields

from ...schemas import BrightcoveSchema, WireEnum, WireInteger
from ..enums import CUE_POINT_TYPE_NAMES, CuePointType


@dataclass(slots=True)
class CuePoint:
    """A marker on a video's timeline; ``time`` is in milliseconds."""

    id: int = 0
    video_id: int = 0
    name: Optional[str] = None
    time: int = 0
    force_stop: bool = False
    type: CuePointType = CuePointType.AD
    metadata: Optional[str] = None


class CuePointSchema(BrightcoveSchema):
    __model__ = CuePoint

    id = WireInteger(load_only=True)
    video_id = WireInteger(load_only=True)
    name = fields.String()
    time = WireInteger()
    force_stop = fields.Boolean()
    type = WireEnum(CUE_POINT_TYPE_NAMES)
    metadata = fields.String()


__all__ = ["CuePoint", "CuePointSchema"]
