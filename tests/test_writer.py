"""Tests for writing playlists to the build directory."""

from __future__ import annotations

import json

import pytest

from playlist_gen.data.models import Playlist, PlaylistEntry
from playlist_gen.data.serializers import load_playlist
from playlist_gen.utils.exceptions import FileOperationError
from playlist_gen.writer import write_playlist


@pytest.fixture
def playlist() -> Playlist:
    return Playlist(
        items=[
            PlaylistEntry(
                crc32="3610a686",
                db_name="Test.lpl",
                label="ポケモン",
                path="D:\\Roms\\ポケモン.gb",
            )
        ]
    )


def test_writes_compact_utf8_json(tmp_path, playlist):
    output = write_playlist(playlist, tmp_path, "Test.lpl")

    assert output == tmp_path / "Test.lpl"
    text = output.read_bytes().decode("utf-8")
    assert text.startswith('{"version":"1.2","default_core_path":"","default_core_name":""')
    assert "\n" not in text
    assert "ポケモン" in text
    assert json.loads(text)["items"][0]["path"] == "D:\\Roms\\ポケモン.gb"


def test_round_trips_through_loader(tmp_path, playlist):
    output = write_playlist(playlist, tmp_path, "Test.lpl")
    assert load_playlist(output) == playlist


def test_overwrites_existing_file(tmp_path, playlist):
    target = tmp_path / "Test.lpl"
    target.write_text("stale contents that are longer than nothing", encoding="utf-8")

    write_playlist(Playlist(), tmp_path, "Test.lpl")

    assert json.loads(target.read_text(encoding="utf-8"))["items"] == []


def test_missing_build_directory(tmp_path, playlist):
    build_dir = tmp_path / "build"

    with pytest.raises(FileOperationError) as exc_info:
        write_playlist(playlist, build_dir, "Test.lpl")

    assert exc_info.value.operation == "write"
    assert not build_dir.exists()


def test_failed_replace_keeps_previous_playlist(tmp_path, playlist, monkeypatch):
    target = tmp_path / "Test.lpl"
    target.write_text('{"items":[]}', encoding="utf-8")

    def replace(src, dst):
        raise OSError(28, "No space left on device")

    monkeypatch.setattr("playlist_gen.writer.os.replace", replace)

    with pytest.raises(FileOperationError) as exc_info:
        write_playlist(playlist, tmp_path, "Test.lpl")

    assert exc_info.value.operation == "write"
    assert target.read_text(encoding="utf-8") == '{"items":[]}'
    assert [p.name for p in tmp_path.iterdir()] == ["Test.lpl"]


def test_failed_first_write_leaves_nothing_behind(tmp_path, playlist, monkeypatch):
    def replace(src, dst):
        raise PermissionError(13, "Permission denied")

    monkeypatch.setattr("playlist_gen.writer.os.replace", replace)

    with pytest.raises(FileOperationError):
        write_playlist(playlist, tmp_path, "Test.lpl")

    assert list(tmp_path.iterdir()) == []
