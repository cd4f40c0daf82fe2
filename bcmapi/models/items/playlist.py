"""Playlists: manual (``EXPLICIT``) lists of videos, or smart playlists."""

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
from .video import Video


def _empty_str_list() -> list[str]:
    return []


def _empty_int_list() -> list[int]:
    return []


def _empty_video_list() -> list[Video]:
    return []


def tag_rule_unset(item: object) -> bool:
    # leaving the key out keeps whatever rule the service already stores
    return getattr(item, "tag_inclusion_rule", None) in (None, TagInclusionRule.NONE)


def explicit_ids_omitted(ids_attr: str):
    """Build the omission rule for a playlist's member id list.

    Only an ``EXPLICIT`` playlist with at least one id sends its ids; the
    service picks the members of a smart playlist itself and rejects ids
    sent for one.
    """

    def _omit(item: object) -> bool:
        if getattr(item, "playlist_type", None) is not PlaylistType.EXPLICIT:
            return True
        return not getattr(item, ids_attr, None)

    return _omit


@dataclass(slots=True)
class Playlist:
    """A collection of videos.

    ``video_ids`` is what the service reads on create and update; ``videos``
    is only filled by read calls that return the full video objects.
    """

    id: int = 0
    account_id: int = 0
    name: Optional[str] = None
    reference_id: Optional[str] = None
    short_description: Optional[str] = None
    thumbnail_url: Optional[str] = None
    playlist_type: PlaylistType = PlaylistType.EXPLICIT
    tag_inclusion_rule: TagInclusionRule = TagInclusionRule.NONE
    filter_tags: list[str] = field(default_factory=_empty_str_list)
    video_ids: list[int] = field(default_factory=_empty_int_list)
    videos: list[Video] = field(default_factory=_empty_video_list)

    @property
    def is_smart(self) -> bool:
        return self.playlist_type is not PlaylistType.EXPLICIT


class PlaylistSchema(BrightcoveSchema):
    __model__ = Playlist

    filter_tags = fields.List(fields.String())
    name = fields.String()
    playlist_type = WireEnum(PLAYLIST_TYPE_NAMES)
    reference_id = fields.String()
    short_description = fields.String()
    thumbnail_url = fields.String(data_key="thumbnailURL")
    id = WireInteger(metadata={"omit_if": id_unset})
    tag_inclusion_rule = WireEnum(
        TAG_INCLUSION_RULE_NAMES, metadata={"omit_if": tag_rule_unset}
    )
    video_ids = fields.List(
        WireInteger(), metadata={"omit_if": explicit_ids_omitted("video_ids")}
    )
    account_id = WireInteger(load_only=True)
    videos = fields.List(Entity(Video), load_only=True)


__all__ = ["Playlist", "PlaylistSchema", "explicit_ids_omitted", "tag_rule_unset"]
