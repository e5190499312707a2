"""
Core GBA palette functionality.

This package contains the BGR555 color codec, ROM access, the character
roster and the palette manager.
"""

from .characters import Character, load_roster
from .color import ColorCache, RGBColor, decode_color, encode_color
from .palette_manager import PaletteManager, PaletteNotFoundError
from .rom_file import RomFile, RomIOError

__all__ = [
    "Character",
    "load_roster",
    "ColorCache",
    "RGBColor",
    "decode_color",
    "encode_color",
    "PaletteManager",
    "PaletteNotFoundError",
    "RomFile",
    "RomIOError",
]
