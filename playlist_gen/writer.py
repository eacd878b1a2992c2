"""
playlist_gen.writer - Write the playlist to the build directory
"""

import os
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Union

from .data.models import Playlist
from .data.serializers import serialize_playlist
from .logging_config import get_logger
from .utils.exceptions import FileOperationError

logger = get_logger(__name__)


def write_playlist(
    playlist: Playlist,
    build_dir: Union[str, Path],
    file_name: str,
) -> Path:
    """
    Serialize a playlist and write it as UTF-8, replacing any existing file.

    The build directory must already exist. The text goes to a temp file in
    the same directory first, so a failed write leaves no partial playlist.

    Args:
        playlist: Playlist object
        build_dir: Output directory
        file_name: Playlist file name

    Returns:
        Path of the written file

    Raises:
        FileOperationError: If the directory is missing or the write fails
    """
    build_dir = Path(build_dir)
    output_path = build_dir / file_name

    if not build_dir.is_dir():
        raise FileOperationError(
            "Build directory does not exist",
            file_path=str(build_dir),
            operation="write",
        )

    text = serialize_playlist(playlist)

    tmp_path = None
    try:
        with NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            newline="",
            dir=build_dir,
            prefix=f".{file_name}.",
            suffix=".tmp",
            delete=False,
        ) as tmp:
            tmp_path = tmp.name
            tmp.write(text)
        # Temp files are created 0600
        os.chmod(tmp_path, 0o644)
        os.replace(tmp_path, output_path)
    except OSError as e:
        if tmp_path and os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise FileOperationError(
            f"Cannot write to {output_path}",
            file_path=str(output_path),
            operation="write",
            details=str(e),
        )

    logger.debug(f"Wrote {len(text)} characters to {output_path}")
    return output_path
