from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from marshmallow import fields

from ...schemas import BrightcoveSchema, Entity, WireEnum, WireInteger, id_unset
from ..enums import LOGO_OVERLAY_ALIGNMENT_NAMES, LogoOverlayAlignment
from .image import Image


@dataclass(slots=True)
class LogoOverlay:
    id: int = 0
    image: Optional[Image] = None
    tooltip: Optional[str] = None
    link_url: Optional[str] = None
    alignment: LogoOverlayAlignment = LogoOverlayAlignment.BOTTOM_RIGHT
    x_padding: int = 0
    y_padding: int = 0


class LogoOverlaySchema(BrightcoveSchema):
    __model__ = LogoOverlay

    id = WireInteger(metadata={"omit_if": id_unset})
    image = Entity(Image)
    tooltip = fields.String()
    link_url = fields.String(data_key="linkURL")
    alignment = WireEnum(LOGO_OVERLAY_ALIGNMENT_NAMES)
    x_padding = WireInteger()
    y_padding = WireInteger()


__all__ = ["LogoOverlay", "LogoOverlaySchema"]
