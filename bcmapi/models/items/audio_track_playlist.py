from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from marshmallow import fields

from ...schemas import BrightcoveSchema, Entity, WireEnum, WireInteger, id_unset
from ..enums import (
    PLAYLIST_TYPE_NAMES,
    TAG_INCLUSION_RULE_NAMES,
    PlaylistType,
    TagInclusionRule,
)
from .audio_track import AudioTrack
from .playlist import explicit_ids_omitted, tag_rule_unset


def _empty_str_list() -> list[str]:
    return []


def _empty_int_list() -> list[int]:
    return []


def _empty_track_list() -> list[AudioTrack]:
    return []


@dataclass(slots=True)
class AudioTrackPlaylist:
    id: int = 0
    account_id: int = 0
    name: Optional[str] = None
    reference_id: Optional[str] = None
    short_description: Optional[str] = None
    thumbnail_url: Optional[str] = None
    playlist_type: PlaylistType = PlaylistType.EXPLICIT
    tag_inclusion_rule: TagInclusionRule = TagInclusionRule.NONE
    filter_tags: list[str] = field(default_factory=_empty_str_list)
    audio_track_ids: list[int] = field(default_factory=_empty_int_list)
    audio_tracks: list[AudioTrack] = field(default_factory=_empty_track_list)


class AudioTrackPlaylistSchema(BrightcoveSchema):
    __model__ = AudioTrackPlaylist

    filter_tags = fields.List(fields.String())
    name = fields.String()
    playlist_type = WireEnum(PLAYLIST_TYPE_NAMES)
    reference_id = fields.String()
    short_description = fields.String()
    thumbnail_url = fields.String(data_key="thumbnailURL")
    id = WireInteger(metadata={"omit_if": id_unset})
    tag_inclusion_rule = WireEnum(
        TAG_INCLUSION_RULE_NAMES,
        metadata={"omit_if": tag_rule_unset},
    )
    audio_track_ids = fields.List(
        WireInteger(),
        metadata={"omit_if": explicit_ids_omitted("audio_track_ids")},
    )
    account_id = WireInteger(load_only=True)
    audio_tracks = fields.List(Entity(AudioTrack), load_only=True)


__all__ = ["AudioTrackPlaylist", "AudioTrackPlaylistSchema"]
