"""
playlist_gen.cli - Command line entry point

Usage:
    playlist-gen <BASE_PATH> <PLAYLIST_FILE_NAME> <FILE_MATCH_PATTERNS> [OUTPUT_BASE_PATH_OVERRIDE]

Example:
    playlist-gen /mnt/roms/psx "Sony - PlayStation.lpl" "*.chd,**/*.cue" "D:\\Roms\\psx"

Writes ./build/<PLAYLIST_FILE_NAME>. Exit code 0 on success, 1 on any failure.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .builder import build_playlist
from .logging_config import setup_logging, get_logger, log_exception
from .matcher import match_files, split_patterns
from .utils.config import RunConfig, CHECKSUM_MODES, LOG_LEVELS
from .utils.env import load_env, get_env_bool, setting
from .utils.exceptions import ConfigError, PlaylistGenError
from .utils.paths import BUILD_DIR
from .writer import write_playlist

logger = get_logger(__name__)


class ArgumentParser(argparse.ArgumentParser):
    """argparse parser that raises ConfigError instead of exiting with 2."""

    def error(self, message: str):
        raise ConfigError(message)


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="playlist-gen",
        description="Build a JSON playlist from files matching glob patterns",
    )
    parser.add_argument("base_path", metavar="BASE_PATH", help="Directory to scan")
    parser.add_argument(
        "playlist_file_name",
        metavar="PLAYLIST_FILE_NAME",
        help="Output file name, also stored as db_name in every entry",
    )
    parser.add_argument(
        "patterns",
        metavar="FILE_MATCH_PATTERNS",
        help="Comma-separated glob patterns; prefix with ! to exclude",
    )
    parser.add_argument(
        "output_base_override",
        metavar="OUTPUT_BASE_PATH_OVERRIDE",
        nargs="?",
        default=None,
        help="Directory to write into entry paths instead of BASE_PATH",
    )
    parser.add_argument(
        "--checksum-mode",
        choices=CHECKSUM_MODES,
        default=None,
        help="Hash raw bytes (default) or UTF-8 decoded text",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
    )
    parser.add_argument("--log-file", type=Path, default=None)
    parser.add_argument("--build-dir", type=Path, default=BUILD_DIR)
    return parser


def parse_config(argv: Optional[List[str]] = None) -> RunConfig:
    """
    Parse arguments into a validated RunConfig.

    Raises:
        ConfigError: On missing or invalid arguments
    """
    args = build_parser().parse_args(argv)

    # Flags win over PLAYLIST_GEN_* settings from the environment or .env
    load_env()
    return RunConfig(
        base_path=args.base_path,
        playlist_file_name=args.playlist_file_name,
        patterns=split_patterns(args.patterns),
        output_base_override=args.output_base_override,
        build_dir=args.build_dir,
        checksum_mode=args.checksum_mode or setting("CHECKSUM_MODE", "bytes"),
        log_level=args.log_level or setting("LOG_LEVEL", "INFO"),
        log_file=args.log_file or setting("LOG_FILE") or None,
        colored=get_env_bool("PLAYLIST_GEN_COLOR", True),
    ).validate()


def run(config: RunConfig) -> Path:
    """
    Match, build and write one playlist.

    Returns:
        Path of the written playlist
    """
    logger.info("Searching for file matches...")
    logger.info(f"\tBase path: {config.base_path}")
    logger.info(f"\tPatterns to match: {','.join(config.patterns)}")
    matches = match_files(config.base_path, config.patterns)
    logger.info(f"DONE ({len(matches)} file(s) matched)")

    logger.info("Building playlist...")
    if config.output_base_override:
        logger.info(f"\tOutput base path override: {config.output_base_override}")
    playlist = build_playlist(config, matches)
    logger.info(f"DONE ({playlist.count} entries)")

    logger.info(f"Writing file to disk: {config.output_path}")
    output_path = write_playlist(playlist, config.build_dir, config.playlist_file_name)
    logger.info("DONE")
    return output_path


def main(argv: Optional[List[str]] = None) -> int:
    """
    CLI entry point
    """
    try:
        config = parse_config(argv)
    except ConfigError as e:
        build_parser().print_usage(sys.stderr)
        print(f"playlist-gen: error: {e}", file=sys.stderr)
        return 1

    setup_logging(level=config.log_level, log_file=config.log_file, colored=config.colored)
    logger.debug(f"Config: {config.to_dict()}")

    try:
        run(config)
    except PlaylistGenError as e:
        log_exception(logger, "Playlist build failed", e)
        return 1
    except Exception as e:
        log_exception(logger, "AN UNEXPECTED ERROR OCCURRED", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
