"""Unit tests for gbapal.core.characters roster loading."""

import json

import pytest

from gbapal.core.characters import Character, load_roster, parse_offset


class TestParseOffset:
    """Tests for parse_offset()."""

    def test_int(self):
        assert parse_offset(0x40) == 0x40

    def test_hex_string(self):
        assert parse_offset("0x5A1B20") == 0x5A1B20

    def test_decimal_string(self):
        assert parse_offset("64") == 64

    def test_negative_raises(self):
        with pytest.raises(ValueError, match="non-negative"):
            parse_offset(-1)

    def test_garbage_raises(self):
        with pytest.raises(ValueError):
            parse_offset("zzz")

    def test_wrong_type_raises(self):
        with pytest.raises(ValueError):
            parse_offset(1.5)
        with pytest.raises(ValueError):
            parse_offset(True)


class TestLoadRoster:
    """Tests for load_roster()."""

    def test_loads_in_file_order(self, roster_path):
        roster = load_roster(roster_path)
        assert roster == [Character("Hero", 0), Character("Rival", 0x40)]

    def test_accepts_bare_list(self, tmp_path):
        path = tmp_path / "roster.json"
        path.write_text(json.dumps([{"name": "Solo", "palette_offset": 32}]))
        assert load_roster(path) == [Character("Solo", 32)]

    def test_empty_roster(self, tmp_path):
        path = tmp_path / "roster.json"
        path.write_text(json.dumps({"characters": []}))
        assert load_roster(path) == []

    def test_missing_characters_key(self, tmp_path):
        path = tmp_path / "roster.json"
        path.write_text(json.dumps({"people": []}))
        with pytest.raises(ValueError, match="characters"):
            load_roster(path)

    def test_entry_missing_offset(self, tmp_path):
        path = tmp_path / "roster.json"
        path.write_text(json.dumps({"characters": [{"name": "Hero"}]}))
        with pytest.raises(ValueError, match="palette_offset"):
            load_roster(path)

    def test_entry_empty_name(self, tmp_path):
        path = tmp_path / "roster.json"
        path.write_text(json.dumps({"characters": [{"name": "", "palette_offset": 0}]}))
        with pytest.raises(ValueError, match="name"):
            load_roster(path)

    def test_character_is_hashable(self):
        assert len({Character("A", 0), Character("A", 0)}) == 1
