"""
GBA Palette Tools - Character Roster

Character descriptors locating each palette block in the ROM, and loading
of roster files.

Roster file format (JSON):
    {
      "characters": [
        {"name": "Hero", "palette_offset": "0x5A1B20"},
        {"name": "Rival", "palette_offset": 5905216}
      ]
    }
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Union


@dataclass(frozen=True)
class Character:
    """A character name and the ROM offset of its 32-byte palette block."""

    name: str
    palette_offset: int


def parse_offset(value: Union[int, str]) -> int:
    """
    Parse a ROM offset given as an integer or a numeric string.

    Strings accept Python integer prefixes ("0x5A1B20", "0o17") or plain
    decimal digits.

    Raises:
        ValueError: If the value is not a non-negative integer
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid offset: {value!r}")
    if isinstance(value, str):
        offset = int(value.strip(), 0)
    elif isinstance(value, int):
        offset = value
    else:
        raise ValueError(f"Invalid offset: {value!r}")

    if offset < 0:
        raise ValueError(f"Offset must be non-negative, got {value!r}")
    return offset


def character_from_dict(entry: dict[str, Any]) -> Character:
    """Build a Character from one roster entry."""
    try:
        name = entry["name"]
        offset = entry["palette_offset"]
    except (KeyError, TypeError):
        raise ValueError(
            f"Roster entry must have 'name' and 'palette_offset': {entry!r}"
        )

    if not isinstance(name, str) or not name:
        raise ValueError(f"Character name must be a non-empty string: {entry!r}")

    return Character(name=name, palette_offset=parse_offset(offset))


def load_roster(path: Union[str, Path]) -> List[Character]:
    """
    Load an ordered character roster from a JSON file.

    Args:
        path: Roster JSON file

    Returns:
        Characters in file order

    Raises:
        ValueError: If the file does not contain a valid roster
    """
    with open(path, "r") as f:
        data = json.load(f)

    if isinstance(data, dict):
        entries = data.get("characters")
    else:
        entries = data

    if not isinstance(entries, list):
        raise ValueError(f"{path}: expected a 'characters' list")

    return [character_from_dict(entry) for entry in entries]
