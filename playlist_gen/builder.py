"""
playlist_gen.builder - Turn matched files into playlist entries

For every matched file:
1. Join base path + relative path
2. CRC-32 the contents
3. Resolve the output path (override dir or the input path itself)
4. Strip the extension for the label
"""

import zlib
from typing import Iterable, Optional

from .data.models import Playlist, PlaylistEntry
from .logging_config import get_logger
from .utils.config import RunConfig, CHECKSUM_MODES
from .utils.exceptions import ConfigError, FileOperationError
from .utils.paths import file_stem, join_path, to_windows_path

logger = get_logger(__name__)

READ_CHUNK_SIZE = 1024 * 1024  # 1 MB


def _crc32_bytes(path: str) -> int:
    crc = 0
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(READ_CHUNK_SIZE), b""):
            crc = zlib.crc32(chunk, crc)
    return crc


def _crc32_text(path: str) -> int:
    # Invalid UTF-8 becomes U+FFFD before hashing, same as a text-mode read
    with open(path, "rb") as f:
        text = f.read().decode("utf-8", errors="replace")
    return zlib.crc32(text.encode("utf-8"))


def compute_crc32(path: str, mode: str = "bytes") -> str:
    """
    CRC-32 of a file as lowercase hex, without zero padding.

    Args:
        path: File to checksum
        mode: "bytes" hashes the raw contents, "text" hashes the contents
            after a UTF-8 decode/encode round trip

    Returns:
        Hex string, e.g. "3610a686"

    Raises:
        FileOperationError: If the file cannot be read
    """
    if mode not in CHECKSUM_MODES:
        raise ConfigError(f"Unknown checksum mode: {mode}")

    try:
        crc = _crc32_bytes(path) if mode == "bytes" else _crc32_text(path)
    except OSError as e:
        raise FileOperationError(
            "Cannot read matched file",
            file_path=path,
            operation="read",
            details=str(e),
        )

    return format(crc, "x")


def make_label(relative_path: str) -> str:
    """Display label: the file name without its final extension."""
    return file_stem(relative_path)


def resolve_output_path(
    base_path: str,
    relative_path: str,
    override: Optional[str] = None,
) -> str:
    """
    Path written into the playlist entry.

    Args:
        base_path: Directory the file was matched under
        relative_path: "/"-separated path relative to base_path
        override: Directory to place the file under instead of base_path

    Returns:
        Backslash-separated path
    """
    root = override if override else base_path
    return to_windows_path(join_path(root, relative_path))


def build_entry(config: RunConfig, relative_path: str) -> PlaylistEntry:
    """
    Build one playlist entry, reading the file.

    Raises:
        FileOperationError: If the file cannot be read
    """
    input_path = join_path(config.base_path, relative_path)
    crc = compute_crc32(input_path, config.checksum_mode)

    entry = PlaylistEntry(
        crc32=crc,
        db_name=config.playlist_file_name,
        label=make_label(relative_path),
        path=resolve_output_path(
            config.base_path,
            relative_path,
            config.output_base_override,
        ),
    )
    logger.debug(f"{relative_path} -> {entry.path} (crc32={crc})")
    return entry


def build_playlist(config: RunConfig, relative_paths: Iterable[str]) -> Playlist:
    """
    Build the playlist document, one entry per path in the given order.

    The first unreadable file aborts the whole build.

    Args:
        config: Run configuration
        relative_paths: Output of match_files

    Returns:
        Playlist object
    """
    items = [build_entry(config, rel_path) for rel_path in relative_paths]
    return Playlist(items=items)
