"""Shared pytest fixtures for playlist_gen tests."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import pytest

from playlist_gen import logging_config
from playlist_gen.utils.config import RunConfig

# ============================================================================
# Environment Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Drop PLAYLIST_GEN_* settings so the host environment cannot leak in."""
    for name in list(os.environ):
        if name.startswith("PLAYLIST_GEN_"):
            monkeypatch.delenv(name)
    yield


@pytest.fixture(autouse=True)
def reset_logging():
    """Detach handlers installed by setup_logging once a test is done."""
    yield
    root = logging.getLogger()
    for handler in list(logging_config._handlers):
        root.removeHandler(handler)
        handler.close()
    logging_config._handlers.clear()


# ============================================================================
# Filesystem Fixtures
# ============================================================================


def write_file(path: Path, data: bytes = b"") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    return path


@pytest.fixture
def rom_tree(tmp_path: Path) -> Path:
    """
    Base directory laid out as:

        a.bin
        b.bin
        .hidden.bin
        readme.txt
        roms/            (directory, never matched itself)
            c.bin
            archive.tar.gz
        .cache/d.bin
        sub/dir/file.bin
    """
    base = tmp_path / "base"
    write_file(base / "a.bin", b"hello")
    write_file(base / "b.bin", b"world")
    write_file(base / ".hidden.bin", b"secret")
    write_file(base / "readme.txt", b"not a rom")
    write_file(base / "roms" / "c.bin", b"c")
    write_file(base / "roms" / "archive.tar.gz", b"gz")
    write_file(base / ".cache" / "d.bin", b"d")
    write_file(base / "sub" / "dir" / "file.bin", b"deep")
    return base


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch) -> Path:
    """Working directory with an existing ./build folder."""
    work = tmp_path / "work"
    (work / "build").mkdir(parents=True)
    monkeypatch.chdir(work)
    return work


@pytest.fixture
def make_config():
    """Factory for RunConfig objects with test defaults."""

    def _make(base_path, **overrides) -> RunConfig:
        values = {
            "base_path": str(base_path),
            "playlist_file_name": "Test.lpl",
            "patterns": ["*.bin"],
        }
        values.update(overrides)
        return RunConfig(**values)

    return _make
