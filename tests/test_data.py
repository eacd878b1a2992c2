"""Tests for playlist models and serializers."""

from __future__ import annotations

import json

import pytest

from playlist_gen.data import (
    DETECT,
    Playlist,
    PlaylistEntry,
    load_json,
    load_playlist,
    parse_playlist,
    serialize_playlist,
)
from playlist_gen.utils.exceptions import FileOperationError, ValidationError


def _entry(label: str = "track") -> PlaylistEntry:
    return PlaylistEntry(crc32="1a2b", db_name="Test.lpl", label=label, path=f"C:\\{label}.chd")


class TestModels:
    def test_entry_key_order(self):
        assert list(_entry().to_dict()) == [
            "core_name",
            "core_path",
            "crc32",
            "db_name",
            "label",
            "path",
        ]

    def test_entry_defaults_to_detect(self):
        entry = _entry()
        assert entry.core_name == DETECT
        assert entry.core_path == DETECT

    def test_empty_playlist_document(self):
        assert Playlist().to_dict() == {
            "version": "1.2",
            "default_core_path": "",
            "default_core_name": "",
            "label_display_mode": 0,
            "right_thumbnail_mode": 0,
            "left_thumbnail_mode": 0,
            "items": [],
        }

    def test_from_dict_fills_constants(self):
        playlist = Playlist.from_dict({"items": [{"label": "x"}]})

        assert playlist.version == "1.2"
        assert playlist.items[0].core_name == DETECT
        assert playlist.items[0].label == "x"


class TestSerializers:
    def test_serialize_is_compact(self):
        text = serialize_playlist(Playlist(items=[_entry()]))

        assert ": " not in text
        assert ", " not in text
        assert json.loads(text)["items"][0]["crc32"] == "1a2b"

    def test_parse_requires_items(self):
        with pytest.raises(ValidationError):
            parse_playlist({"version": "1.2"})

    def test_parse_rejects_non_list_items(self):
        with pytest.raises(ValidationError):
            parse_playlist({"items": {}})

    def test_parse_rejects_non_object(self):
        with pytest.raises(ValidationError):
            parse_playlist([])

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(FileOperationError):
            load_json(tmp_path / "nope.lpl")

    def test_load_invalid_json(self, tmp_path):
        path = tmp_path / "bad.lpl"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ValidationError):
            load_playlist(path)

    def test_load_with_bom(self, tmp_path):
        path = tmp_path / "bom.lpl"
        path.write_bytes(b"\xef\xbb\xbf" + serialize_playlist(Playlist()).encode("utf-8"))

        assert load_playlist(path) == Playlist()

    def test_load_non_utf8(self, tmp_path):
        path = tmp_path / "latin.lpl"
        path.write_bytes(b'{"items":[],"version":"\xe9"}')

        with pytest.raises(ValidationError) as exc_info:
            load_playlist(path)

        assert "not UTF-8" in str(exc_info.value)
