"""
GBA Palette Tools - Palette JSON Documents

Saves palettes held by a PaletteManager to human-editable JSON and loads
edited documents back.

Document format:
    {
      "palettes": {
        "Hero": {
          "offset": "0x5A1B20",
          "words": "0000 7FFF 001F ...",
          "colors": ["#000000", "#FFFFFF", "#FF0000", ...]
        }
      }
    }

When loading, "words" takes precedence. If it is absent, "colors" are
encoded (lossy), so a document can be edited by changing either field.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Sequence, Union

from . import hex_utils
from ..core.characters import Character
from ..core.palette_manager import PaletteManager
from ..core.rom_utils import COLORS_PER_PALETTE


def palettes_to_document(
    manager: PaletteManager, roster: Sequence[Character]
) -> Dict[str, Any]:
    """
    Build a JSON-serializable document for the roster's stored palettes.

    Characters without a stored palette are skipped.

    Args:
        manager: Manager holding the palettes
        roster: Characters to include, in order

    Returns:
        Document dictionary
    """
    palettes: Dict[str, Any] = {}
    for character in roster:
        if character.name not in manager:
            continue
        words = manager.load_packed_palette(character.name)
        colors = manager.load_color_palette(character.name)
        palettes[character.name] = {
            "offset": f"0x{character.palette_offset:X}",
            "words": hex_utils.format_words(words),
            "colors": [hex_utils.format_color(c) for c in colors],
        }
    return {"palettes": palettes}


def dump_palettes(
    manager: PaletteManager,
    roster: Sequence[Character],
    path: Union[str, Path],
) -> int:
    """
    Write the roster's stored palettes to a JSON file.

    Returns:
        Number of palettes written
    """
    document = palettes_to_document(manager, roster)
    with open(path, "w") as f:
        json.dump(document, f, indent=2)
    return len(document["palettes"])


def _parse_word_item(name: str, item: Any) -> int:
    """Parse one entry of a "words" list (int or hex string)."""
    if isinstance(item, str):
        return hex_utils.parse_word(item)
    if isinstance(item, int) and not isinstance(item, bool):
        if not 0 <= item <= 0xFFFF:
            raise ValueError(f"Palette '{name}': color word out of range: {item}")
        return item
    raise ValueError(f"Palette '{name}': invalid color word {item!r}")


def parse_entry(name: str, entry: Dict[str, Any]) -> List[Any]:
    """
    Parse one document entry into exactly 16 color words or RGB colors.

    "words" may be a space-separated hex string or a list of ints/hex
    strings. Without "words", "colors" are parsed (and later encoded).

    Raises:
        ValueError: If the entry is malformed or does not hold 16 colors
    """
    if not isinstance(entry, dict):
        raise ValueError(f"Palette '{name}' must be an object")

    if "words" in entry:
        words = entry["words"]
        if isinstance(words, str):
            values = hex_utils.parse_words(words)
        elif isinstance(words, list):
            values = [_parse_word_item(name, item) for item in words]
        else:
            raise ValueError(f"Palette '{name}': 'words' must be a string or list")
        field = "words"
    elif "colors" in entry:
        colors = entry["colors"]
        if not isinstance(colors, list):
            raise ValueError(f"Palette '{name}': 'colors' must be a list")
        values = [hex_utils.parse_color(c) for c in colors]
        field = "colors"
    else:
        raise ValueError(f"Palette '{name}' has neither 'words' nor 'colors'")

    if len(values) != COLORS_PER_PALETTE:
        raise ValueError(
            f"Palette '{name}' has {len(values)} {field}, "
            f"expected {COLORS_PER_PALETTE}"
        )
    return values


def load_document(manager: PaletteManager, document: Dict[str, Any]) -> List[str]:
    """
    Store every palette in a document into the manager.

    All entries are parsed before any is stored, so a bad entry leaves the
    manager unchanged.

    Returns:
        Names of the palettes stored, in document order

    Raises:
        ValueError: If any entry is malformed or not exactly 16 colors
    """
    palettes = document.get("palettes") if isinstance(document, dict) else None
    if not isinstance(palettes, dict):
        raise ValueError("Palette document must contain a 'palettes' object")

    parsed = []
    for name, entry in palettes.items():
        values = parse_entry(name, entry)
        parsed.append((name, "words" in entry, values))

    for name, is_words, values in parsed:
        if is_words:
            manager.store_packed_palette(name, values)
        else:
            manager.store_color_palette(name, values)
    return [name for name, _, _ in parsed]


def load_palettes(manager: PaletteManager, path: Union[str, Path]) -> List[str]:
    """Load a palette JSON file into the manager."""
    with open(path, "r") as f:
        document = json.load(f)
    return load_document(manager, document)
