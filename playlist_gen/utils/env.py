"""
playlist_gen.utils.env - Environment variable handling

Defaults for the CLI can be supplied through the environment or a .env file
in the working directory:
- PLAYLIST_GEN_LOG_LEVEL
- PLAYLIST_GEN_LOG_FILE
- PLAYLIST_GEN_CHECKSUM_MODE
- PLAYLIST_GEN_COLOR
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

ENV_PREFIX = "PLAYLIST_GEN_"

_env_loaded = False


def load_env(env_path: Optional[Path] = None, override: bool = False) -> bool:
    """
    Load environment variables from .env file.

    Args:
        env_path: Path to .env file (default: ./.env)
        override: If True, override existing env vars

    Returns:
        True if a file was loaded, False otherwise
    """
    global _env_loaded

    if _env_loaded and not override:
        return True

    if env_path is None:
        env_path = Path.cwd() / ".env"

    if not env_path.is_file():
        return False

    load_dotenv(dotenv_path=env_path, override=override)
    _env_loaded = True
    return True


def get_env_str(name: str, default: str = "") -> str:
    """
    Get environment variable as string.

    Args:
        name: Environment variable name
        default: Default value if not set

    Returns:
        Environment variable value or default
    """
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip()


def get_env_bool(name: str, default: bool = False) -> bool:
    """
    Get environment variable as boolean.

    Truthy values: "1", "true", "yes", "on" (case-insensitive)
    Falsy values: "0", "false", "no", "off", "" (case-insensitive)

    Args:
        name: Environment variable name
        default: Default value if not set or unrecognized

    Returns:
        Environment variable as bool or default
    """
    value = os.environ.get(name)
    if value is None:
        return default

    value = value.strip().lower()
    if value in ("1", "true", "yes", "on"):
        return True
    if value in ("0", "false", "no", "off", ""):
        return False

    return default


def setting(key: str, default: str = "") -> str:
    """Read a PLAYLIST_GEN_* setting, e.g. setting("LOG_LEVEL", "INFO")."""
    return get_env_str(f"{ENV_PREFIX}{key}", default) or default
