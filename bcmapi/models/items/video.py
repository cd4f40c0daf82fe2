from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from marshmallow import fields

from ...schemas import (
    BrightcoveSchema,
    Entity,
    EpochMillis,
    WireEnum,
    WireInteger,
    id_unset,
)
from ..enums import ECONOMICS_NAMES, ITEM_STATE_NAMES, Economics, ItemState
from .cue_point import CuePoint
from .image import Image
from .logo_overlay import LogoOverlay
from .rendition import Rendition


def _empty_str_list() -> list[str]:
    return []


def _empty_rendition_list() -> list[Rendition]:
    return []


def _empty_cue_point_list() -> list[CuePoint]:
    return []


def _empty_custom_fields() -> dict[str, str]:
    return {}


@dataclass(slots=True)
class Video:
    """A video in the media library.

    Dates, play counts and renditions are filled in by the service and are
    not sent back on write calls.
    """

    id: int = 0
    account_id: int = 0
    name: Optional[str] = None
    reference_id: Optional[str] = None
    short_description: Optional[str] = None
    long_description: Optional[str] = None
    flv_url: Optional[str] = None
    renditions: list[Rendition] = field(default_factory=_empty_rendition_list)
    ios_renditions: list[Rendition] = field(default_factory=_empty_rendition_list)
    video_full_length: Optional[Rendition] = None
    creation_date: Optional[datetime] = None
    published_date: Optional[datetime] = None
    last_modified_date: Optional[datetime] = None
    item_state: Optional[ItemState] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    link_url: Optional[str] = None
    link_text: Optional[str] = None
    tags: list[str] = field(default_factory=_empty_str_list)
    video_still_url: Optional[str] = None
    thumbnail_url: Optional[str] = None
    video_still: Optional[Image] = None
    thumbnail: Optional[Image] = None
    length: int = 0
    economics: Economics = Economics.FREE
    geo_filtered: bool = False
    geo_filtered_countries: list[str] = field(default_factory=_empty_str_list)
    geo_filter_exclude: bool = False
    cue_points: list[CuePoint] = field(default_factory=_empty_cue_point_list)
    logo_overlay: Optional[LogoOverlay] = None
    plays_total: Optional[int] = None
    plays_trailing_week: Optional[int] = None
    custom_fields: dict[str, str] = field(default_factory=_empty_custom_fields)


class VideoSchema(BrightcoveSchema):
    __model__ = Video

    id = WireInteger(metadata={"omit_if": id_unset})
    name = fields.String()
    reference_id = fields.String()
    short_description = fields.String()
    long_description = fields.String()
    item_state = WireEnum(
        ITEM_STATE_NAMES, metadata={"omit_if": lambda item: item.item_state is None}
    )
    start_date = EpochMillis(metadata={"omit_if": lambda item: item.start_date is None})
    end_date = EpochMillis(metadata={"omit_if": lambda item: item.end_date is None})
    link_url = fields.String(data_key="linkURL")
    link_text = fields.String()
    tags = fields.List(fields.String())
    video_still_url = fields.String(data_key="videoStillURL")
    economics = WireEnum(ECONOMICS_NAMES)
    geo_filtered = fields.Boolean()
    geo_filtered_countries = fields.List(fields.String())
    geo_filter_exclude = fields.Boolean()
    cue_points = fields.List(Entity(CuePoint))
    logo_overlay = Entity(
        LogoOverlay, metadata={"omit_if": lambda item: item.logo_overlay is None}
    )
    custom_fields = fields.Dict(keys=fields.String(), values=fields.String())

    account_id = WireInteger(load_only=True)
    flv_url = fields.String(data_key="FLVURL", load_only=True)
    renditions = fields.List(Entity(Rendition), load_only=True)
    ios_renditions = fields.List(
        Entity(Rendition), data_key="iOSRenditions", load_only=True
    )
    video_full_length = Entity(Rendition, load_only=True)
    creation_date = EpochMillis(load_only=True)
    published_date = EpochMillis(load_only=True)
    last_modified_date = EpochMillis(load_only=True)
    thumbnail_url = fields.String(data_key="thumbnailURL", load_only=True)
    video_still = Entity(Image, load_only=True)
    thumbnail = Entity(Image, load_only=True)
    length = WireInteger(load_only=True)
    plays_total = WireInteger(load_only=True)
    plays_trailing_week = WireInteger(load_only=True)


__all__ = ["Video", "VideoSchema"]
