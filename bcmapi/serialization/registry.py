"""Closed table of codecs keyed by the type a caller asks for.

The wire format carries no type tag, so every type that can be decoded,
including each generic instantiation such as
``ResultEnvelope[ItemCollection[Video]]``, is registered explicitly.
"""

from __future__ import annotations

import threading
from typing import Any, Iterator, Optional

from ..config import EnvelopeFlavor
from ..exceptions import CodecNotFound, describe_type
from ..log_config import debug_verbose, verbose_log
from ..models.containers import (
    ItemCollection,
    ItemCollectionSchema,
    ResultEnvelope,
    ResultEnvelopeSchema,
)
from ..models.enums import UploadStatus
from ..models.items import (
    AudioTrack,
    AudioTrackPlaylist,
    AudioTrackPlaylistSchema,
    AudioTrackSchema,
    CuePoint,
    CuePointSchema,
    Error,
    ErrorSchema,
    Image,
    ImageSchema,
    LogoOverlay,
    LogoOverlaySchema,
    Playlist,
    PlaylistSchema,
    Rendition,
    RenditionSchema,
    Video,
    VideoSchema,
)
from ..schemas import BrightcoveSchema
from .codec import Codec, EnumCodec, ItemCodec, ListCodec, ScalarCodec
from .enums import name_map_for
from .errors import ErrorDetector


class CodecRegistry:
    def __init__(self) -> None:
        self._codecs: dict[Any, Codec[Any]] = {}
        self._frozen = False
        self.error_detector = ErrorDetector(self)

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------
    def register(self, type_key: Any, codec: Codec[Any]) -> Codec[Any]:
        if self._frozen:
            raise RuntimeError("Codec registry is frozen")
        if type_key in self._codecs:
            raise ValueError(f"{describe_type(type_key)} is already registered")
        self._codecs[type_key] = codec
        return codec

    def register_entity(
        self,
        model: type,
        schema_cls: type[BrightcoveSchema],
        *,
        encodable: bool = True,
    ) -> Codec[Any]:
        return self.register(
            model, ItemCodec(model, schema_cls, self, encodable=encodable)
        )

    def register_scalar(self, scalar_type: type) -> Codec[Any]:
        return self.register(scalar_type, ScalarCodec(scalar_type))

    def register_enum(self, enum_cls: type) -> Codec[Any]:
        return self.register(enum_cls, EnumCodec(name_map_for(enum_cls)))

    def register_list(self, item_type: Any) -> Codec[Any]:
        return self.register(list[item_type], ListCodec(item_type, self))

    def register_collection(self, item_type: Any) -> Codec[Any]:
        return self.register(
            ItemCollection[item_type],
            ItemCodec(ItemCollection, ItemCollectionSchema.for_item(item_type), self),
        )

    def register_envelope(self, payload_type: Any, flavor: EnvelopeFlavor) -> Codec[Any]:
        schema_cls = ResultEnvelopeSchema.for_payload(payload_type, flavor)
        return self.register(
            ResultEnvelope[payload_type], ItemCodec(ResultEnvelope, schema_cls, self)
        )

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------
    def resolve(self, type_key: Any) -> Codec[Any]:
        try:
            return self._codecs[type_key]
        except (KeyError, TypeError):
            debug_verbose("codec_not_found", describe_type(type_key))
            raise CodecNotFound(type_key) from None

    def __contains__(self, type_key: object) -> bool:
        try:
            return type_key in self._codecs
        except TypeError:
            return False

    def __iter__(self) -> Iterator[Any]:
        return iter(self._codecs)

    def __len__(self) -> int:
        return len(self._codecs)


_ENTITIES: tuple[tuple[type, type[BrightcoveSchema]], ...] = (
    (Video, VideoSchema),
    (AudioTrack, AudioTrackSchema),
    (Rendition, RenditionSchema),
    (Playlist, PlaylistSchema),
    (CuePoint, CuePointSchema),
    (Image, ImageSchema),
    (LogoOverlay, LogoOverlaySchema),
    (AudioTrackPlaylist, AudioTrackPlaylistSchema),
)

_COLLECTED: tuple[type, ...] = (Video, AudioTrack, Playlist, AudioTrackPlaylist)

_ENVELOPED: tuple[tuple[Any, EnvelopeFlavor], ...] = (
    (int, EnvelopeFlavor.RESULT_ID),
    (list[int], EnvelopeFlavor.RESULT_ID_LIST),
    (UploadStatus, EnvelopeFlavor.UPLOAD_STATUS),
    (AudioTrack, EnvelopeFlavor.ENTITY),
    (Video, EnvelopeFlavor.ENTITY),
    (Playlist, EnvelopeFlavor.ENTITY),
    (Image, EnvelopeFlavor.ENTITY),
    (LogoOverlay, EnvelopeFlavor.ENTITY),
    (AudioTrackPlaylist, EnvelopeFlavor.ENTITY),
)


def register_default_codecs(registry: CodecRegistry) -> CodecRegistry:
    """Register every type the media API reads or writes."""

    for model, schema_cls in _ENTITIES:
        registry.register_entity(model, schema_cls)
    registry.register_entity(Error, ErrorSchema, encodable=False)

    registry.register_scalar(int)
    registry.register_scalar(str)
    registry.register_list(int)
    registry.register_enum(UploadStatus)

    for item_type in _COLLECTED:
        registry.register_collection(item_type)

    for payload_type, flavor in _ENVELOPED:
        registry.register_envelope(payload_type, flavor)
    for item_type in _COLLECTED:
        registry.register_envelope(ItemCollection[item_type], EnvelopeFlavor.COLLECTION)

    return registry


_DEFAULT_REGISTRY: Optional[CodecRegistry] = None
_DEFAULT_REGISTRY_LOCK = threading.Lock()


def get_registry() -> CodecRegistry:
    """Return the process-wide registry, building and freezing it once."""

    global _DEFAULT_REGISTRY
    if _DEFAULT_REGISTRY is not None:
        return _DEFAULT_REGISTRY
    with _DEFAULT_REGISTRY_LOCK:
        if _DEFAULT_REGISTRY is None:
            registry = register_default_codecs(CodecRegistry())
            registry.freeze()
            verbose_log("codec_registry_ready", {"codecs": len(registry)})
            _DEFAULT_REGISTRY = registry
    return _DEFAULT_REGISTRY


__all__ = ["CodecRegistry", "register_default_codecs", "get_registry"]
