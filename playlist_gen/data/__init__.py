"""
playlist_gen.data - Data models and serialization

Provides:
- Data classes for the playlist document
- Serialization/deserialization with validation
"""

from .models import (
    PlaylistEntry,
    Playlist,
    PLAYLIST_VERSION,
    DETECT,
)

from .serializers import (
    load_json,
    serialize_playlist,
    parse_playlist,
    load_playlist,
)

__all__ = [
    # Models
    "PlaylistEntry",
    "Playlist",
    "PLAYLIST_VERSION",
    "DETECT",
    # Serializers
    "load_json",
    "serialize_playlist",
    "parse_playlist",
    "load_playlist",
]
