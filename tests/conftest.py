"""Shared pytest fixtures for palette tests."""

import json

import pytest

from gbapal.core.characters import Character
from gbapal.core.palette_manager import PaletteManager
from gbapal.core.rom_file import RomFile


@pytest.fixture
def incrementing_block():
    """32-byte palette block: 01 00 02 00 ... 10 00."""
    data = bytearray()
    for i in range(1, 17):
        data.extend([i, 0x00])
    return bytes(data)


@pytest.fixture
def hero():
    return Character(name="Hero", palette_offset=0)


@pytest.fixture
def rival():
    return Character(name="Rival", palette_offset=0x40)


@pytest.fixture
def rom_image(incrementing_block):
    """
    128-byte ROM image.

    Offset 0x00: incrementing block (Hero)
    Offset 0x40: white, red, green, blue, then 0x7FFF padding (Rival)
    """
    data = bytearray(128)
    data[0:32] = incrementing_block
    rival_words = [0x7FFF, 0x001F, 0x03E0, 0x7C00] + [0x7FFF] * 12
    for i, word in enumerate(rival_words):
        data[0x40 + i * 2] = word & 0xFF
        data[0x40 + i * 2 + 1] = word >> 8
    return bytes(data)


@pytest.fixture
def memory_rom(rom_image):
    """In-memory RomFile over rom_image."""
    return RomFile.from_bytes(rom_image)


@pytest.fixture
def manager(memory_rom):
    return PaletteManager(memory_rom)


@pytest.fixture
def rom_path(tmp_path, rom_image):
    """rom_image saved to disk."""
    path = tmp_path / "game.gba"
    path.write_bytes(rom_image)
    return path


@pytest.fixture
def roster_path(tmp_path):
    """Roster file describing Hero and Rival."""
    path = tmp_path / "roster.json"
    path.write_text(
        json.dumps(
            {
                "characters": [
                    {"name": "Hero", "palette_offset": 0},
                    {"name": "Rival", "palette_offset": "0x40"},
                ]
            }
        )
    )
    return path
