"""
playlist_gen.data.models - Playlist data classes

Defines the structure of a RetroArch-style .lpl playlist:
- PlaylistEntry (one per matched file)
- Playlist (the whole document)
"""

from dataclasses import dataclass, field
from typing import List, Dict, Any

PLAYLIST_VERSION = "1.2"
DETECT = "DETECT"


@dataclass
class PlaylistEntry:
    """A single matched file."""

    crc32: str
    db_name: str
    label: str
    path: str
    core_name: str = DETECT
    core_path: str = DETECT

    def to_dict(self) -> Dict[str, Any]:
        return {
            "core_name": self.core_name,
            "core_path": self.core_path,
            "crc32": self.crc32,
            "db_name": self.db_name,
            "label": self.label,
            "path": self.path,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlaylistEntry":
        return cls(
            crc32=data.get("crc32", ""),
            db_name=data.get("db_name", ""),
            label=data.get("label", ""),
            path=data.get("path", ""),
            core_name=data.get("core_name", DETECT),
            core_path=data.get("core_path", DETECT),
        )


@dataclass
class Playlist:
    """Container for a playlist file."""

    items: List[PlaylistEntry] = field(default_factory=list)
    version: str = PLAYLIST_VERSION
    default_core_path: str = ""
    default_core_name: str = ""
    label_display_mode: int = 0
    right_thumbnail_mode: int = 0
    left_thumbnail_mode: int = 0

    @property
    def count(self) -> int:
        return len(self.items)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "version": self.version,
            "default_core_path": self.default_core_path,
            "default_core_name": self.default_core_name,
            "label_display_mode": self.label_display_mode,
            "right_thumbnail_mode": self.right_thumbnail_mode,
            "left_thumbnail_mode": self.left_thumbnail_mode,
            "items": [item.to_dict() for item in self.items],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Playlist":
        items = [PlaylistEntry.from_dict(i) for i in data.get("items", [])]
        return cls(
            items=items,
            version=data.get("version", PLAYLIST_VERSION),
            default_core_path=data.get("default_core_path", ""),
            default_core_name=data.get("default_core_name", ""),
            label_display_mode=data.get("label_display_mode", 0),
            right_thumbnail_mode=data.get("right_thumbnail_mode", 0),
            left_thumbnail_mode=data.get("left_thumbnail_mode", 0),
        )
