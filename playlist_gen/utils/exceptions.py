"""
playlist_gen.utils.exceptions - Custom exception types

Every failure in the pipeline is fatal; the CLI catches these once at the top.
"""

from typing import Optional, Any


class PlaylistGenError(Exception):
    """
    Base exception for all playlist generator errors.

    All custom exceptions inherit from this.
    """

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigError(PlaylistGenError):
    """
    Configuration and usage errors.

    Examples:
        - Missing positional argument
        - Empty playlist file name
        - Unknown checksum mode
    """
    pass


class ValidationError(PlaylistGenError):
    """
    Playlist document errors.

    Examples:
        - Invalid JSON format
        - Missing 'items' field
    """
    pass


class ScanError(PlaylistGenError):
    """
    File matching errors.

    Examples:
        - Base path does not exist
        - Pattern escapes the base path
        - Directory not readable
    """

    def __init__(
        self,
        message: str,
        base_path: str = "",
        pattern: str = "",
        details: Optional[Any] = None
    ):
        super().__init__(message, details)
        self.base_path = base_path
        self.pattern = pattern

    def __str__(self) -> str:
        parts = [self.message]
        if self.pattern:
            parts.append(f"Pattern: {self.pattern}")
        if self.base_path:
            parts.append(f"Base: {self.base_path}")
        if self.details:
            parts.append(f"| Details: {self.details}")
        return " ".join(parts)


class FileOperationError(PlaylistGenError):
    """
    File system operation errors.

    Examples:
        - Matched file vanished before it was read
        - Permission denied
        - Build directory missing
    """

    def __init__(
        self,
        message: str,
        file_path: str = "",
        operation: str = "",
        details: Optional[Any] = None
    ):
        super().__init__(message, details)
        self.file_path = file_path
        self.operation = operation

    def __str__(self) -> str:
        parts = [self.message]
        if self.operation:
            parts.insert(0, f"[{self.operation}]")
        if self.file_path:
            parts.append(f"File: {self.file_path}")
        if self.details:
            parts.append(f"| Details: {self.details}")
        return " ".join(parts)
