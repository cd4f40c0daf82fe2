from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from marshmallow import fields

from ...schemas import BrightcoveSchema, EpochMillis, WireEnum, WireInteger, id_unset
from ..enums import ECONOMICS_NAMES, ITEM_STATE_NAMES, Economics, ItemState


def _empty_str_list() -> list[str]:
    return []


def _empty_custom_fields() -> dict[str, str]:
    return {}


@dataclass(slots=True)
class AudioTrack:
    """An audio-only item; shares most of its fields with :class:`Video`."""

    id: int = 0
    account_id: int = 0
    name: Optional[str] = None
    reference_id: Optional[str] = None
    short_description: Optional[str] = None
    long_description: Optional[str] = None
    creation_date: Optional[datetime] = None
    published_date: Optional[datetime] = None
    last_modified_date: Optional[datetime] = None
    item_state: Optional[ItemState] = None
    link_url: Optional[str] = None
    link_text: Optional[str] = None
    tags: list[str] = field(default_factory=_empty_str_list)
    length: int = 0
    economics: Economics = Economics.FREE
    geo_filtered: bool = False
    geo_filtered_countries: list[str] = field(default_factory=_empty_str_list)
    geo_filter_exclude: bool = False
    plays_total: Optional[int] = None
    plays_trailing_week: Optional[int] = None
    custom_fields: dict[str, str] = field(default_factory=_empty_custom_fields)


class AudioTrackSchema(BrightcoveSchema):
    __model__ = AudioTrack

    id = WireInteger(metadata={"omit_if": id_unset})
    name = fields.String()
    reference_id = fields.String()
    short_description = fields.String()
    long_description = fields.String()
    item_state = WireEnum(
        ITEM_STATE_NAMES, metadata={"omit_if": lambda item: item.item_state is None}
    )
    link_url = fields.String(data_key="linkURL")
    link_text = fields.String()
    tags = fields.List(fields.String())
    economics = WireEnum(ECONOMICS_NAMES)
    geo_filtered = fields.Boolean()
    geo_filtered_countries = fields.List(fields.String())
    geo_filter_exclude = fields.Boolean()
    custom_fields = fields.Dict(keys=fields.String(), values=fields.String())

    account_id = WireInteger(load_only=True)
    creation_date = EpochMillis(load_only=True)
    published_date = EpochMillis(load_only=True)
    last_modified_date = EpochMillis(load_only=True)
    length = WireInteger(load_only=True)
    plays_total = WireInteger(load_only=True)
    plays_trailing_week = WireInteger(load_only=True)


__all__ = ["AudioTrack", "AudioTrackSchema"]
