"""
playlist_gen.utils - Shared utilities

This module provides:
- Path handling (BUILD_DIR, to_windows_path, join_path)
- Environment variable handling (load_env, get_env_str, get_env_bool)
- Run configuration (RunConfig)
- Custom exceptions (PlaylistGenError, ConfigError, etc.)
"""

from .paths import (
    BUILD_DIR,
    to_posix_path,
    to_windows_path,
    join_path,
    file_stem,
    stays_inside,
)
from .env import load_env, get_env_str, get_env_bool, setting
from .config import RunConfig, CHECKSUM_MODES, LOG_LEVELS
from .exceptions import (
    PlaylistGenError,
    ConfigError,
    ValidationError,
    ScanError,
    FileOperationError,
)

__all__ = [
    # Paths
    "BUILD_DIR",
    "to_posix_path",
    "to_windows_path",
    "join_path",
    "file_stem",
    "stays_inside",
    # Environment
    "load_env",
    "get_env_str",
    "get_env_bool",
    "setting",
    # Config
    "RunConfig",
    "CHECKSUM_MODES",
    "LOG_LEVELS",
    # Exceptions
    "PlaylistGenError",
    "ConfigError",
    "ValidationError",
    "ScanError",
    "FileOperationError",
]
