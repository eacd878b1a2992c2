"""
playlist_gen.matcher - Find the files that become playlist entries

Matching rules are fixed:
- hidden files and directories are matched by wildcards
- bare directory patterns are taken literally (no implicit "dir/**")
- only regular files are returned, never directories
- "**" spans any number of directories
- a pattern starting with "!" removes its matches from the positive
  patterns listed before it

Results are "/"-separated paths relative to the base directory. Any
directory that cannot be listed aborts the scan.
"""

import os
from fnmatch import fnmatchcase
from typing import Iterable, List, Sequence, Tuple

from .logging_config import get_logger
from .utils.exceptions import ScanError
from .utils.paths import to_posix_path, stays_inside

logger = get_logger(__name__)

NEGATION_PREFIX = "!"
GLOBSTAR = "**"


def split_patterns(pattern_arg: str) -> List[str]:
    """
    Split the comma-separated pattern argument.

    Example:
        >>> split_patterns("*.chd, **/*.cue,,")
        ['*.chd', '**/*.cue']
    """
    if not pattern_arg:
        return []
    return [p.strip() for p in pattern_arg.split(",") if p.strip()]


def _segments(pattern: str) -> Tuple[str, ...]:
    return tuple(s for s in to_posix_path(pattern).split("/") if s and s != ".")


def _match_segments(
    pattern: Sequence[str],
    parts: Sequence[str],
    prefix: bool = False,
) -> bool:
    """
    Match path segments against pattern segments.

    With prefix=True, parts is a directory and the question is whether
    anything below it could still match.
    """
    if not parts:
        if prefix:
            return bool(pattern)
        return all(seg == GLOBSTAR for seg in pattern)
    if not pattern:
        return False

    head = pattern[0]
    if head == GLOBSTAR:
        if prefix:
            return True
        return (
            _match_segments(pattern[1:], parts, prefix)
            or _match_segments(pattern, parts[1:], prefix)
        )

    if not fnmatchcase(parts[0], head):
        return False
    return _match_segments(pattern[1:], parts[1:], prefix)


def _glob_tasks(patterns: Iterable[str]) -> List[Tuple[str, List[Tuple[str, ...]]]]:
    """
    Pair each positive pattern with the negations that follow it.

    "!a.bin,*.bin" keeps a.bin; "*.bin,!a.bin" drops it.
    """
    patterns = list(patterns)
    tasks = []
    for index, pattern in enumerate(patterns):
        if pattern.startswith(NEGATION_PREFIX):
            continue
        ignore = [
            _segments(p[len(NEGATION_PREFIX):])
            for p in patterns[index + 1:]
            if p.startswith(NEGATION_PREFIX) and len(p) > len(NEGATION_PREFIX)
        ]
        tasks.append((pattern, ignore))
    return tasks


def _check_pattern(base_path: str, pattern: str) -> None:
    if not stays_inside(to_posix_path(pattern)):
        raise ScanError(
            "Pattern must stay inside the base path",
            base_path=base_path,
            pattern=pattern,
        )


def _walk_files(base_path: str, patterns: Sequence[Tuple[str, ...]]) -> List[str]:
    """
    List files under base_path, only entering directories a pattern can reach.

    Raises:
        ScanError: If a directory on the way cannot be listed
    """

    def _raise(error: OSError):
        raise ScanError(
            "Cannot scan directory",
            base_path=base_path,
            details=f"{error.filename}: {error.strerror or error}",
        )

    files: List[str] = []
    for dirpath, dirnames, filenames in os.walk(base_path, onerror=_raise):
        rel_dir = os.path.relpath(dirpath, base_path)
        dir_parts = () if rel_dir == os.curdir else tuple(to_posix_path(rel_dir).split("/"))

        dirnames[:] = [
            d for d in dirnames
            if any(_match_segments(p, dir_parts + (d,), prefix=True) for p in patterns)
        ]

        for name in filenames:
            files.append("/".join(dir_parts + (name,)))

    return files


def match_files(base_path: str, patterns: Iterable[str]) -> List[str]:
    """
    Expand glob patterns against a base directory.

    Args:
        base_path: Directory to scan
        patterns: Glob patterns; "!"-prefixed ones exclude from the
            patterns before them

    Returns:
        Relative file paths in pattern order, each path listed once

    Raises:
        ScanError: If base_path or a directory below it cannot be listed,
            or a pattern points outside of it
    """
    if not os.path.isdir(base_path):
        raise ScanError("Base path is not a directory", base_path=base_path)

    patterns = list(patterns)
    for pattern in patterns:
        _check_pattern(base_path, pattern.lstrip(NEGATION_PREFIX))

    tasks = _glob_tasks(patterns)
    if not tasks:
        return []

    candidates = _walk_files(base_path, [_segments(p) for p, _ in tasks])

    seen = set()
    matches: List[str] = []
    for pattern, ignore in tasks:
        segments = _segments(pattern)
        found = []
        for rel_path in candidates:
            parts = rel_path.split("/")
            if not _match_segments(segments, parts):
                continue
            if any(_match_segments(neg, parts) for neg in ignore):
                continue
            if os.path.isfile(os.path.join(base_path, *parts)):
                found.append(rel_path)

        found.sort()
        logger.debug(f"Pattern {pattern!r}: {len(found)} file(s)")
        for rel_path in found:
            if rel_path not in seen:
                seen.add(rel_path)
                matches.append(rel_path)

    return matches
