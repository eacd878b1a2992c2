"""
playlist_gen.utils.config - Run configuration

A RunConfig is built once from the command line and handed to every stage,
so nothing below the CLI reads sys.argv or the environment.
"""

from pathlib import Path
from typing import Dict, Any, List, Optional
from dataclasses import dataclass, field

from .exceptions import ConfigError
from .paths import BUILD_DIR

CHECKSUM_MODES = ("bytes", "text")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class RunConfig:
    """Configuration for a single playlist build."""

    base_path: str
    playlist_file_name: str
    patterns: List[str] = field(default_factory=list)
    output_base_override: Optional[str] = None

    # Optional fields
    build_dir: Path = BUILD_DIR
    checksum_mode: str = "bytes"
    log_level: str = "INFO"
    log_file: Optional[Path] = None
    colored: bool = True

    def __post_init__(self):
        # An empty override on the command line means "no override"
        if not self.output_base_override:
            self.output_base_override = None
        self.build_dir = Path(self.build_dir)
        if self.log_file:
            self.log_file = Path(self.log_file)
        self.checksum_mode = self.checksum_mode.lower()
        self.log_level = self.log_level.upper()

    @property
    def output_path(self) -> Path:
        """Where the playlist will be written."""
        return self.build_dir / self.playlist_file_name

    def validate(self) -> "RunConfig":
        """
        Check the configuration before any filesystem work happens.

        Returns:
            self, for chaining

        Raises:
            ConfigError: If a value is missing or out of range
        """
        if not self.base_path:
            raise ConfigError("Base path must not be empty")

        if not self.playlist_file_name:
            raise ConfigError("Playlist file name must not be empty")

        if "/" in self.playlist_file_name or "\\" in self.playlist_file_name:
            raise ConfigError(
                "Playlist file name must not contain a path separator: "
                "it is also written as db_name in every entry",
                details=self.playlist_file_name,
            )

        if self.checksum_mode not in CHECKSUM_MODES:
            raise ConfigError(
                f"Unknown checksum mode: {self.checksum_mode}",
                details=f"Expected one of {', '.join(CHECKSUM_MODES)}",
            )

        if self.log_level not in LOG_LEVELS:
            raise ConfigError(
                f"Unknown log level: {self.log_level}",
                details=f"Expected one of {', '.join(LOG_LEVELS)}",
            )

        return self

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging."""
        return {
            "base_path": self.base_path,
            "playlist_file_name": self.playlist_file_name,
            "patterns": list(self.patterns),
            "output_base_override": self.output_base_override,
            "build_dir": str(self.build_dir),
            "checksum_mode": self.checksum_mode,
            "log_level": self.log_level,
            "log_file": str(self.log_file) if self.log_file else None,
            "colored": self.colored,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RunConfig":
        """Create from dictionary."""
        return cls(
            base_path=data.get("base_path", ""),
            playlist_file_name=data.get("playlist_file_name", ""),
            patterns=list(data.get("patterns", [])),
            output_base_override=data.get("output_base_override"),
            build_dir=data.get("build_dir") or BUILD_DIR,
            checksum_mode=data.get("checksum_mode", "bytes"),
            log_level=data.get("log_level", "INFO"),
            log_file=data.get("log_file"),
            colored=data.get("colored", True),
        )
