"""
GBA Palette Tools - Palette Manager

Holds character palettes in memory and synchronizes them with the fixed
32-byte palette blocks in the ROM.
"""

import sys
from typing import Dict, Iterable, List, Optional, Sequence, TextIO

from .characters import Character
from .color import ColorCache, RGBColor
from .rom_file import RomFile
from .rom_utils import PALETTE_BLOCK_SIZE, pack_palette_block, unpack_palette_block


class PaletteNotFoundError(KeyError):
    """Raised when no palette is stored under the requested name."""

    pass


class PaletteManager:
    """
    In-memory palette store backed by a shared ROM handle.

    Palettes are keyed by character name and stored as lists of packed
    color words. Color conversions go through a ColorCache.
    """

    def __init__(self, rom: RomFile, cache: Optional[ColorCache] = None):
        """
        Args:
            rom: Shared ROM handle; may also be used by other managers
            cache: Color cache to use (a new one is created if omitted)
        """
        self.rom = rom
        self.color_cache = cache if cache is not None else ColorCache()
        self.palettes: Dict[str, List[int]] = {}

    def store_packed_palette(self, name: str, words: Iterable[int]):
        """Store (or replace) a palette of packed color words."""
        self.palettes[name] = list(words)

    def store_color_palette(self, name: str, colors: Iterable[RGBColor]):
        """Encode RGB colors to packed words and store them."""
        words = [self.color_cache.rgb_to_packed(color) for color in colors]
        self.store_packed_palette(name, words)

    def load_packed_palette(self, name: str) -> List[int]:
        """
        Load a stored palette as packed color words.

        Raises:
            PaletteNotFoundError: If nothing is stored under `name`
        """
        try:
            return list(self.palettes[name])
        except KeyError:
            raise PaletteNotFoundError(name) from None

    def load_color_palette(self, name: str) -> List[RGBColor]:
        """Load a stored palette decoded to RGB colors."""
        return [
            self.color_cache.packed_to_rgb(word)
            for word in self.load_packed_palette(name)
        ]

    def read_palette(self, character: Character):
        """
        Read a character's palette block from the ROM and store it.

        Args:
            character: Descriptor giving the name and block offset

        Raises:
            RomIOError: If the block cannot be read in full
        """
        block = self.rom.read_at(character.palette_offset, PALETTE_BLOCK_SIZE)
        self.store_packed_palette(character.name, unpack_palette_block(block))

    def read_all_palettes(self, roster: Sequence[Character]):
        """
        Read every palette in the roster, in order.

        Stops at the first failure; palettes read before it stay stored.
        """
        for character in roster:
            self.read_palette(character)

    def write_palette(self, character: Character):
        """
        Write a character's stored palette back to its ROM block.

        Each word is written low byte first. Every stored word is written,
        so a 16-color palette fills exactly one 32-byte block.

        Raises:
            PaletteNotFoundError: If no palette is stored for the character
            RomIOError: If the block cannot be written
        """
        words = self.load_packed_palette(character.name)
        self.rom.write_at(character.palette_offset, pack_palette_block(words))

    def write_all_palettes(self, roster: Sequence[Character]):
        """Write every roster palette to the ROM, stopping at the first failure."""
        for character in roster:
            self.write_palette(character)

    def print_palette(self, character: Character, file: Optional[TextIO] = None):
        """Print a character's decoded colors between start/end markers."""
        out = file if file is not None else sys.stdout
        colors = self.load_color_palette(character.name)
        print(f"v== {character.name} ==v", file=out)
        for color in colors:
            print(color, file=out)
        print(f"^== {character.name} ==^", file=out)

    def palette_names(self) -> List[str]:
        """Names of all stored palettes, in insertion order."""
        return list(self.palettes)

    def __contains__(self, name: str) -> bool:
        return name in self.palettes
