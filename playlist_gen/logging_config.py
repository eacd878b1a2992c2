"""
playlist_gen.logging_config - Logging configuration

Provides:
- Centralized logging setup
- Colored console output (colorama)
- Progress on stdout, warnings and errors on stderr
- Optional file logging with rotation
"""

import logging
import sys
from pathlib import Path
from typing import Optional, List
from logging.handlers import RotatingFileHandler

from colorama import Fore, Style, just_fix_windows_console

just_fix_windows_console()


# =====================================================================
# CONSTANTS
# =====================================================================

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_MAX_SIZE = 10 * 1024 * 1024  # 10 MB
LOG_FILE_BACKUP_COUNT = 5

# Color mapping for log levels
LEVEL_COLORS = {
    "DEBUG": Fore.CYAN,
    "INFO": Fore.GREEN,
    "WARNING": Fore.YELLOW,
    "ERROR": Fore.RED,
    "CRITICAL": Fore.MAGENTA,
}
RESET = Style.RESET_ALL


# =====================================================================
# FORMATTERS / FILTERS
# =====================================================================

class ColoredFormatter(logging.Formatter):
    """Formatter that adds colors to log levels."""

    def format(self, record: logging.LogRecord) -> str:
        color = LEVEL_COLORS.get(record.levelname, "")
        formatted = super().format(record)

        if color:
            # Color only the level name
            formatted = formatted.replace(
                record.levelname,
                f"{color}{record.levelname}{RESET}",
                1
            )

        return formatted


class MaxLevelFilter(logging.Filter):
    """Let through records strictly below a level."""

    def __init__(self, level: int):
        super().__init__()
        self.level = level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self.level


# =====================================================================
# SETUP FUNCTIONS
# =====================================================================

_initialized = False
_handlers: List[logging.Handler] = []


def _console_formatter(stream, colored: bool) -> logging.Formatter:
    isatty = getattr(stream, "isatty", None)
    if colored and isatty is not None and isatty():
        return ColoredFormatter(LOG_FORMAT, LOG_DATE_FORMAT)
    return logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT)


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    colored: bool = True,
) -> logging.Logger:
    """
    Setup logging configuration.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file
        colored: Enable colored console output

    Returns:
        Root logger instance
    """
    global _initialized

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    for handler in _handlers:
        root.removeHandler(handler)
        handler.close()
    _handlers.clear()

    # Progress lines
    stdout = logging.StreamHandler(sys.stdout)
    stdout.setLevel(logging.DEBUG)
    stdout.addFilter(MaxLevelFilter(logging.WARNING))
    stdout.setFormatter(_console_formatter(sys.stdout, colored))
    _handlers.append(stdout)

    # Warnings and failures
    stderr = logging.StreamHandler(sys.stderr)
    stderr.setLevel(logging.WARNING)
    stderr.setFormatter(_console_formatter(sys.stderr, colored))
    _handlers.append(stderr)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=LOG_FILE_MAX_SIZE,
            backupCount=LOG_FILE_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT))
        _handlers.append(file_handler)

    for handler in _handlers:
        root.addHandler(handler)

    _initialized = True
    return root


def get_logger(name: str) -> logging.Logger:
    """
    Get or create a logger with the given name.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger instance
    """
    if not _initialized:
        setup_logging()

    return logging.getLogger(name)


# =====================================================================
# CONVENIENCE FUNCTIONS
# =====================================================================

def log_exception(logger: logging.Logger, msg: str, exc: Exception) -> None:
    """
    Log an exception with full traceback.

    Args:
        logger: Logger instance
        msg: Error message
        exc: Exception instance
    """
    logger.error(f"{msg}: {exc}", exc_info=exc)
