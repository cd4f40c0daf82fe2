from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from marshmallow import fields

from ...schemas import BrightcoveSchema, WireEnum, WireInteger, id_unset
from ..enums import IMAGE_TYPE_NAMES, ImageType


@dataclass(slots=True)
class Image:
    """A still, thumbnail or logo attached to a video."""

    id: int = 0
    reference_id: Optional[str] = None
    type: Optional[ImageType] = None
    remote_url: Optional[str] = None
    display_name: Optional[str] = None


class ImageSchema(BrightcoveSchema):
    __model__ = Image

    id = WireInteger(metadata={"omit_if": id_unset})
    reference_id = fields.String()
    type = WireEnum(IMAGE_TYPE_NAMES)
    remote_url = fields.String()
    display_name = fields.String()


__all__ = ["Image", "ImageSchema"]
