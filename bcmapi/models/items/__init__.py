from .audio_track import AudioTrack, AudioTrackSchema
from .audio_track_playlist import AudioTrackPlaylist, AudioTrackPlaylistSchema
from .cue_point import CuePoint, CuePointSchema
from .error import Error, ErrorSchema
from .image import Image, ImageSchema
from .logo_overlay import LogoOverlay, LogoOverlaySchema
from .playlist import Playlist, PlaylistSchema
from .rendition import Rendition, RenditionSchema
from .video import Video, VideoSchema

__all__ = [
    "AudioTrack",
    "AudioTrackSchema",
    "AudioTrackPlaylist",
    "AudioTrackPlaylistSchema",
    "CuePoint",
    "CuePointSchema",
    "Error",
    "ErrorSchema",
    "Image",
    "ImageSchema",
    "LogoOverlay",
    "LogoOverlaySchema",
    "Playlist",
    "PlaylistSchema",
    "Rendition",
    "RenditionSchema",
    "Video",
    "VideoSchema",
]
