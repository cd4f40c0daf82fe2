"""Typed object model and wire codecs for the Brightcove Media API."""

from .exceptions import (  # noqa: F401
    CodecNotFound,
    DecodeTypeMismatch,
    RemoteFault,
    SerializationError,
    UnknownEnumToken,
)
from .models import (  # noqa: F401
    AudioTrack,
    AudioTrackPlaylist,
    CuePoint,
    Error,
    Image,
    ItemCollection,
    LogoOverlay,
    Playlist,
    PlaylistType,
    Rendition,
    ResultEnvelope,
    TagInclusionRule,
    UploadStatus,
    Video,
)
from .serialization.codec import ItemCodec  # noqa: F401
from .serialization.enums import EnumNameMap, name_map_for  # noqa: F401
from .serialization.errors import ErrorDetector  # noqa: F401
from .serialization.registry import (  # noqa: F401
    CodecRegistry,
    get_registry,
    register_default_codecs,
)
from .serializer import BrightcoveSerializer, get_serializer  # noqa: F401

__all__ = [
    "CodecNotFound",
    "DecodeTypeMismatch",
    "RemoteFault",
    "SerializationError",
    "UnknownEnumToken",
    "AudioTrack",
    "AudioTrackPlaylist",
    "CuePoint",
    "Error",
    "Image",
    "ItemCollection",
    "LogoOverlay",
    "Playlist",
    "PlaylistType",
    "Rendition",
    "ResultEnvelope",
    "TagInclusionRule",
    "UploadStatus",
    "Video",
    "ItemCodec",
    "EnumNameMap",
    "name_map_for",
    "ErrorDetector",
    "CodecRegistry",
    "get_registry",
    "register_default_codecs",
    "BrightcoveSerializer",
    "get_serializer",
]
