"""
playlist_gen - Build RetroArch-style JSON playlists from a directory scan

Pipeline: match_files -> build_playlist -> write_playlist
"""

from .matcher import match_files, split_patterns
from .builder import build_entry, build_playlist, compute_crc32, make_label, resolve_output_path
from .writer import write_playlist
from .data import Playlist, PlaylistEntry, load_playlist, serialize_playlist
from .utils import RunConfig

__version__ = "0.1.0"

__all__ = [
    "match_files",
    "split_patterns",
    "build_entry",
    "build_playlist",
    "compute_crc32",
    "make_label",
    "resolve_output_path",
    "write_playlist",
    "Playlist",
    "PlaylistEntry",
    "load_playlist",
    "serialize_playlist",
    "RunConfig",
]
