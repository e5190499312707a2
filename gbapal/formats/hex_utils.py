"""
GBA Palette Tools - Hex String Utilities

Utilities for parsing and formatting color words and colors as hex strings
in palette dump files.
"""

from typing import List

try:
    from PIL import ImageColor
except ImportError:
    raise ImportError("Pillow library required. Install with: pip install Pillow")

from ..core.color import RGBColor


def format_word(word: int) -> str:
    """
    Format a 16-bit color word as four uppercase hex digits.

    Example:
        >>> format_word(0x7FFF)
        '7FFF'
    """
    return f"{word & 0xFFFF:04X}"


def parse_word(word_str: str) -> int:
    """
    Parse a hex color word, with or without a "0x" or "$" prefix.

    Raises:
        ValueError: If the string is not hex or exceeds 16 bits
    """
    text = word_str.strip()
    if text.startswith("$"):
        text = text[1:]
    value = int(text, 16)
    if not 0 <= value <= 0xFFFF:
        raise ValueError(f"Color word out of range: {word_str!r}")
    return value


def format_words(words: List[int]) -> str:
    """
    Format color words as a space-separated hex string.

    Example:
        >>> format_words([0x0000, 0x7FFF, 0x001F])
        '0000 7FFF 001F'
    """
    return " ".join(format_word(w) for w in words)


def parse_words(row_str: str) -> List[int]:
    """
    Parse a space-separated string of hex color words.

    Example:
        >>> parse_words("0000 7FFF 001F")
        [0, 32767, 31]
    """
    return [parse_word(x) for x in row_str.split()]


def format_color(color: RGBColor) -> str:
    """
    Format an RGB color as "#RRGGBB".

    Example:
        >>> format_color((248, 0, 255))
        '#F800FF'
    """
    red, green, blue = color
    return f"#{red:02X}{green:02X}{blue:02X}"


def parse_color(color_str: str) -> RGBColor:
    """
    Parse a color string into an RGB tuple.

    Accepts anything Pillow's ImageColor understands ("#F8F8F8", "#FFF",
    "rgb(255, 0, 0)", "red", ...). Alpha is discarded.

    Raises:
        ValueError: If the color string is not recognized
    """
    rgb = ImageColor.getrgb(color_str)
    return (rgb[0], rgb[1], rgb[2])
