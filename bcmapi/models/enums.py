"""Closed vocabularies used by the media API, with their wire tokens."""

from __future__ import annotations

from enum import Enum

from ..serialization.enums import register_name_map


class PlaylistType(str, Enum):
    """How a playlist is ordered. ``EXPLICIT`` is a manual playlist."""

    EXPLICIT = "explicit"
    OLDEST_TO_NEWEST = "oldest_to_newest"
    NEWEST_TO_OLDEST = "newest_to_oldest"
    START_DATE_OLDEST_TO_NEWEST = "start_date_oldest_to_newest"
    START_DATE_NEWEST_TO_OLDEST = "start_date_newest_to_oldest"
    ALPHABETICAL = "alphabetical"
    PLAYS_TOTAL = "plays_total"
    PLAYS_TRAILING_WEEK = "plays_trailing_week"


class TagInclusionRule(str, Enum):
    """Whether a smart playlist matches all filter tags or any of them."""

    NONE = "none"
    AND = "and"
    OR = "or"


class ItemState(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    DELETED = "deleted"


class Economics(str, Enum):
    FREE = "free"
    AD_SUPPORTED = "ad_supported"


class UploadStatus(str, Enum):
    UPLOADING = "uploading"
    PROCESSING = "processing"
    COMPLETE = "complete"
    ERROR = "error"


class CuePointType(str, Enum):
    AD = "ad"
    CODE = "code"
    CHAPTER = "chapter"


class ImageType(str, Enum):
    THUMBNAIL = "thumbnail"
    VIDEO_STILL = "video_still"
    SYNDICATION_STILL = "syndication_still"
    BACKGROUND = "background"
    LOGO = "logo"
    LOGO_OVERLAY = "logo_overlay"


class LogoOverlayAlignment(str, Enum):
    TOP_RIGHT = "top_right"
    TOP_LEFT = "top_left"
    BOTTOM_RIGHT = "bottom_right"
    BOTTOM_LEFT = "bottom_left"


class VideoCodec(str, Enum):
    UNDEFINED = "undefined"
    NONE = "none"
    SORENSON = "sorenson"
    ON2 = "on2"
    H264 = "h264"


class VideoContainer(str, Enum):
    FLV = "flv"
    MP4 = "mp4"
    M2TS = "m2ts"


class ControllerType(str, Enum):
    DEFAULT = "default"
    AKAMAI_STREAMING = "akamai_streaming"
    AKAMAI_SECURE_STREAMING = "akamai_secure_streaming"
    AKAMAI_HD = "akamai_hd"
    AKAMAI_HD_LIVE = "akamai_hd_live"
    LIMELIGHT_LIVE = "limelight_live"
    LIMELIGHT_MEDIAVAULT = "limelight_mediavault"


PLAYLIST_TYPE_NAMES = register_name_map(
    PlaylistType, {PlaylistType.PLAYS_TOTAL: "PLAYSTOTAL"}
)
TAG_INCLUSION_RULE_NAMES = register_name_map(
    TagInclusionRule, unset=TagInclusionRule.NONE
)
ITEM_STATE_NAMES = register_name_map(ItemState)
ECONOMICS_NAMES = register_name_map(Economics)
UPLOAD_STATUS_NAMES = register_name_map(UploadStatus)
CUE_POINT_TYPE_NAMES = register_name_map(CuePointType)
IMAGE_TYPE_NAMES = register_name_map(ImageType)
LOGO_OVERLAY_ALIGNMENT_NAMES = register_name_map(LogoOverlayAlignment)
VIDEO_CODEC_NAMES = register_name_map(VideoCodec)
VIDEO_CONTAINER_NAMES = register_name_map(VideoContainer)
CONTROLLER_TYPE_NAMES = register_name_map(ControllerType)


__all__ = [
    "PlaylistType",
    "TagInclusionRule",
    "ItemState",
    "Economics",
    "UploadStatus",
    "CuePointType",
    "ImageType",
    "LogoOverlayAlignment",
    "VideoCodec",
    "VideoContainer",
    "ControllerType",
    "PLAYLIST_TYPE_NAMES",
    "TAG_INCLUSION_RULE_NAMES",
    "ITEM_STATE_NAMES",
    "ECONOMICS_NAMES",
    "UPLOAD_STATUS_NAMES",
    "CUE_POINT_TYPE_NAMES",
    "IMAGE_TYPE_NAMES",
    "LOGO_OVERLAY_ALIGNMENT_NAMES",
    "VIDEO_CODEC_NAMES",
    "VIDEO_CONTAINER_NAMES",
    "CONTROLLER_TYPE_NAMES",
]
