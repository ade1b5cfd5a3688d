"""Tests for color persistence and theme derivation."""

import pytest

from pixel_octopus.state import load_color, save_color
from pixel_octopus.theme import derive_colors, parse_hex, to_hex

DEFAULT = "#D4804A"


def test_round_trip(tmp_path):
    path = str(tmp_path / "state.json")
    save_color("#3366CC", path)
    assert load_color(DEFAULT, path) == "#3366CC"


def test_missing_file_returns_default(tmp_path):
    assert load_color(DEFAULT, str(tmp_path / "state.json")) == DEFAULT


def test_corrupt_file_returns_default(tmp_path):
    path = tmp_path / "state.json"
    path.write_text("{not json")
    assert load_color(DEFAULT, str(path)) == DEFAULT


def test_undecodable_file_returns_default(tmp_path, caplog):
    path = tmp_path / "state.json"
    path.write_bytes(b"\xff\xfe\x00garbage")
    with caplog.at_level("WARNING", logger="pixel-octopus"):
        assert load_color(DEFAULT, str(path)) == DEFAULT
    assert "Could not load state file" in caplog.text


def test_invalid_color_returns_default(tmp_path):
    path = tmp_path / "state.json"
    path.write_text('{"body_color": "#12"}')
    assert load_color(DEFAULT, str(path)) == DEFAULT

    path.write_text('["#123456"]')
    assert load_color(DEFAULT, str(path)) == DEFAULT


def test_save_to_unwritable_path_does_not_raise(tmp_path):
    save_color("#123456", str(tmp_path / "missing_dir" / "state.json"))


def test_parse_hex():
    assert parse_hex("#D4804A") == (212, 128, 74)
    assert parse_hex("d4804a") == (212, 128, 74)
    assert to_hex((212, 128, 74)) == "#D4804A"
    for bad in ("", "#12345", "#GGGGGG", "red"):
        with pytest.raises(ValueError):
            parse_hex(bad)


def test_derive_colors():
    colors = derive_colors(DEFAULT)
    assert colors.body == (212, 128, 74)
    assert colors.eye == (236, 198, 174)
    assert colors.glow == (252, 168, 114)


def test_glow_saturates():
    assert derive_colors("#F0F0F0").glow == (255, 255, 255)
