"""
GBA Palette Tools - ROM constants and byte-order utilities.

This module provides:
- Palette block layout constants (colors per palette, bytes per block)
- Named helpers for splitting and joining little-endian 16-bit words
- Block packing/unpacking between raw bytes and color word lists

Used by PaletteManager and the dump/write tools.
"""

from typing import List, Sequence

# ============================================================================
# Palette Block Layout
# ============================================================================
COLORS_PER_PALETTE = 16
BYTES_PER_COLOR = 2
PALETTE_BLOCK_SIZE = COLORS_PER_PALETTE * BYTES_PER_COLOR  # 32 bytes

LOW_BYTE_MASK = 0x00FF
HIGH_BYTE_MASK = 0xFF00


def low_byte(word: int) -> int:
    """Return bits 0-7 of a 16-bit word."""
    return word & LOW_BYTE_MASK


def high_byte(word: int) -> int:
    """Return bits 8-15 of a 16-bit word."""
    return (word & HIGH_BYTE_MASK) >> 8


def split_word(word: int) -> tuple[int, int]:
    """
    Split a 16-bit word into its storage byte order.

    Args:
        word: 16-bit value

    Returns:
        Tuple of (low_byte, high_byte), the order they appear in the ROM

    Example:
        >>> split_word(0x7C1F)
        (31, 124)
    """
    return (low_byte(word), high_byte(word))


def join_word(low: int, high: int) -> int:
    """
    Compose a 16-bit word from two bytes read in ROM order.

    The first byte in the stream holds the low-order bits.

    Args:
        low: First byte read (bits 0-7)
        high: Second byte read (bits 8-15)

    Returns:
        16-bit value

    Example:
        >>> join_word(0x1F, 0x7C)
        31775
    """
    return ((high & 0xFF) << 8) | (low & 0xFF)


def unpack_palette_block(data: bytes) -> List[int]:
    """
    Convert raw little-endian palette bytes into color words.

    Args:
        data: Raw bytes; a trailing odd byte is ignored

    Returns:
        One color word per byte pair
    """
    return [
        join_word(data[i], data[i + 1])
        for i in range(0, len(data) - 1, BYTES_PER_COLOR)
    ]


def pack_palette_block(words: Sequence[int]) -> bytes:
    """
    Convert color words into raw little-endian palette bytes.

    Inverse of unpack_palette_block(). No length check is made: 16 words
    produce one 32-byte palette block.

    Args:
        words: Color words

    Returns:
        Two bytes per word, low byte first
    """
    output = bytearray()
    for word in words:
        output.extend(split_word(word))
    return bytes(output)
