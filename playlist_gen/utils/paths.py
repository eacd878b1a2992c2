"""
playlist_gen.utils.paths - Path constants and separator handling

Playlists are consumed on Windows, so every path written into one uses
backslashes regardless of the host the playlist was generated on.
"""

import os
import posixpath
from pathlib import Path

# Relative to the working directory the tool is launched from
BUILD_DIR = Path("build")


def to_posix_path(path: str) -> str:
    """
    Convert host separators to forward slashes.

    Args:
        path: Path string using os.sep

    Returns:
        Path string using "/"
    """
    if not path:
        return ""
    if os.sep != "/":
        path = path.replace(os.sep, "/")
    return path


def to_windows_path(path: str) -> str:
    """
    Convert every forward slash to a backslash.

    Backslashes already present are kept as they are.

    Args:
        path: Path string to convert

    Returns:
        Backslash-delimited path string

    Example:
        >>> to_windows_path("/roms/psx/track.chd")
        '\\\\roms\\\\psx\\\\track.chd'
    """
    if not path:
        return ""
    return path.replace("/", "\\")


def join_path(root: str, relative_path: str) -> str:
    """
    Join a root directory and a "/"-separated relative path, then normalize.

    Args:
        root: Directory the relative path hangs off
        relative_path: Path relative to root

    Returns:
        Normalized joined path
    """
    parts = relative_path.split("/")
    return os.path.normpath(os.path.join(root, *parts))


def file_stem(path: str) -> str:
    """
    Filename without its final extension.

    Example:
        >>> file_stem("roms/archive.tar.gz")
        'archive.tar'
    """
    name = posixpath.basename(to_posix_path(path))
    stem, _ = posixpath.splitext(name)
    return stem


def stays_inside(relative_path: str) -> bool:
    """Check that a relative path does not climb out of the directory it hangs off."""
    if posixpath.isabs(relative_path) or os.path.isabs(relative_path):
        return False
    return ".." not in relative_path.split("/")

