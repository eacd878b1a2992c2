"""
playlist_gen.data.serializers - JSON serialization with validation

Playlists are written as compact JSON (no whitespace between tokens,
non-ASCII characters kept verbatim).
"""

import json
from pathlib import Path
from typing import Any, Dict, Union

from .models import Playlist
from ..utils.exceptions import ValidationError, FileOperationError

COMPACT_SEPARATORS = (",", ":")


def load_json(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load JSON file with proper encoding handling.

    Args:
        path: Path to JSON file

    Returns:
        Parsed JSON data

    Raises:
        FileOperationError: If file not found or read error
        ValidationError: If JSON parsing fails
    """
    path = Path(path)

    if not path.is_file():
        raise FileOperationError(
            f"File not found: {path}",
            file_path=str(path),
            operation="read"
        )

    # Playlists are written as UTF-8; tolerate a BOM from hand edits
    try:
        with open(path, "r", encoding="utf-8-sig") as f:
            return json.load(f)
    except UnicodeDecodeError as e:
        raise ValidationError(
            f"Playlist is not UTF-8: {path.name}",
            details=str(e)
        )
    except json.JSONDecodeError as e:
        raise ValidationError(
            f"Invalid JSON format in {path.name}",
            details=str(e)
        )
    except OSError as e:
        raise FileOperationError(
            f"Cannot read {path}",
            file_path=str(path),
            operation="read",
            details=str(e)
        )


def serialize_playlist(playlist: Playlist) -> str:
    """
    Serialize a playlist to a compact JSON string.

    Args:
        playlist: Playlist object

    Returns:
        JSON text, keys in document order
    """
    return json.dumps(
        playlist.to_dict(),
        separators=COMPACT_SEPARATORS,
        ensure_ascii=False,
    )


def parse_playlist(data: Any) -> Playlist:
    """
    Build a Playlist from already-decoded JSON data.

    Raises:
        ValidationError: If format invalid
    """
    if not isinstance(data, dict) or "items" not in data:
        keys = list(data.keys()) if isinstance(data, dict) else type(data).__name__
        raise ValidationError(
            "Invalid playlist: missing 'items' field",
            details=f"Keys found: {keys}"
        )

    if not isinstance(data["items"], list):
        raise ValidationError(
            "Invalid playlist: 'items' must be a list",
            details=type(data["items"]).__name__
        )

    return Playlist.from_dict(data)


def load_playlist(path: Union[str, Path]) -> Playlist:
    """
    Load a playlist file written by write_playlist.

    Args:
        path: Path to playlist file

    Returns:
        Playlist object

    Raises:
        FileOperationError: If file not found
        ValidationError: If format invalid
    """
    return parse_playlist(load_json(path))
