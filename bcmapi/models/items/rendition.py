from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from marshmallow import fields

from ...schemas import BrightcoveSchema, WireEnum, WireInteger, id_unset
from ..enums import (
    CONTROLLER_TYPE_NAMES,
    VIDEO_CODEC_NAMES,
    VIDEO_CONTAINER_NAMES,
    ControllerType,
    VideoCodec,
    VideoContainer,
)


@dataclass(slots=True)
class Rendition:
    """One encoded variant of a video."""

    id: int = 0
    reference_id: Optional[str] = None
    display_name: Optional[str] = None
    url: Optional[str] = None
    remote_url: Optional[str] = None
    remote_stream_name: Optional[str] = None
    audio_only: bool = False
    controller_type: Optional[ControllerType] = None
    encoding_rate: int = 0
    frame_height: int = 0
    frame_width: int = 0
    size: int = 0
    upload_timestamp_millis: Optional[int] = None
    video_codec: Optional[VideoCodec] = None
    video_container: Optional[VideoContainer] = None
    video_duration: int = 0


class RenditionSchema(BrightcoveSchema):
    __model__ = Rendition

    id = WireInteger(metadata={"omit_if": id_unset})
    reference_id = fields.String()
    display_name = fields.String()
    url = fields.String(load_only=True)
    remote_url = fields.String()
    remote_stream_name = fields.String()
    audio_only = fields.Boolean()
    controller_type = WireEnum(CONTROLLER_TYPE_NAMES)
    encoding_rate = WireInteger()
    frame_height = WireInteger()
    frame_width = WireInteger()
    size = WireInteger()
    upload_timestamp_millis = WireInteger(load_only=True)
    video_codec = WireEnum(VIDEO_CODEC_NAMES)
    video_container = WireEnum(VIDEO_CONTAINER_NAMES)
    video_duration = WireInteger()


__all__ = ["Rendition", "RenditionSchema"]
