"""Typed media API entities and their wire enums."""

from .enums import (
    ControllerType,
    CuePointType,
    Economics,
    ImageType,
    ItemState,
    LogoOverlayAlignment,
    PlaylistType,
    TagInclusionRule,
    UploadStatus,
    VideoCodec,
    VideoContainer,
)
from .json_types import WireList, WireMap, WirePrimitive, WireValue
from .items import (
    AudioTrack,
    AudioTrackPlaylist,
    CuePoint,
    Error,
    Image,
    LogoOverlay,
    Playlist,
    Rendition,
    Video,
)
from .containers import ItemCollection, ResultEnvelope

__all__ = [
    "ControllerType",
    "CuePointType",
    "Economics",
    "ImageType",
    "ItemState",
    "LogoOverlayAlignment",
    "PlaylistType",
    "TagInclusionRule",
    "UploadStatus",
    "VideoCodec",
    "VideoContainer",
    "WireList",
    "WireMap",
    "WirePrimitive",
    "WireValue",
    "AudioTrack",
    "AudioTrackPlaylist",
    "CuePoint",
    "Error",
    "Image",
    "LogoOverlay",
    "Playlist",
    "Rendition",
    "Video",
    "ItemCollection",
    "ResultEnvelope",
]
