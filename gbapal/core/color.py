"""
GBA Palette Tools - Color Codec

Conversion between the console's packed BGR555 color words and RGB tuples.

Bit layout of a packed color word: [X BBBBB GGGGG RRRRR]
- R = red (bits 0-4)
- G = green (bits 5-9)
- B = blue (bits 10-14)
- X = unused (bit 15), ignored on decode and always cleared on encode
"""

from typing import Dict, Tuple

# Type alias for RGB color
RGBColor = Tuple[int, int, int]

CHANNEL_BITS = 5
CHANNEL_MASK = 0x1F
RED_SHIFT = 0
GREEN_SHIFT = 5
BLUE_SHIFT = 10
RESERVED_BIT = 0x8000


def _clamp_channel(value: int) -> int:
    return max(0, min(255, int(value)))


def reduce_channel(value: int) -> int:
    """
    Reduce an 8-bit channel to the console's 5-bit depth.

    Out-of-range values are clamped to 0-255 first.

    Example: 255 → 31, 128 → 16, 7 → 0
    """
    return _clamp_channel(value) >> (8 - CHANNEL_BITS)


def expand_channel(value: int) -> int:
    """
    Expand a 5-bit channel to 8 bits.

    The top bits are replicated into the low bits so that 31 maps to 255
    and 0 maps to 0.

    Example: 31 → 255, 16 → 132, 1 → 8
    """
    value &= CHANNEL_MASK
    return (value << 3) | (value >> 2)


def encode_color(color: RGBColor) -> int:
    """
    Pack an RGB color into a BGR555 color word.

    Lossy: each channel keeps only its 5 most significant bits.

    Args:
        color: (red, green, blue) tuple with 8-bit channels

    Returns:
        15-bit packed color word (bit 15 clear)
    """
    red, green, blue = color
    return (
        (reduce_channel(red) << RED_SHIFT)
        | (reduce_channel(green) << GREEN_SHIFT)
        | (reduce_channel(blue) << BLUE_SHIFT)
    )


def decode_color(word: int) -> RGBColor:
    """
    Unpack a BGR555 color word into an RGB color.

    Accepts any 16-bit value; the reserved bit is ignored.

    Args:
        word: Packed color word

    Returns:
        (red, green, blue) tuple with 8-bit channels
    """
    return (
        expand_channel(word >> RED_SHIFT),
        expand_channel(word >> GREEN_SHIFT),
        expand_channel(word >> BLUE_SHIFT),
    )


class ColorCache:
    """
    Memoizes color conversions in both directions.

    The cache is never evicted: the value domain is bounded by the 32768
    distinct color words and the RGB values actually requested.
    """

    def __init__(self):
        self._rgb_by_word: Dict[int, RGBColor] = {}
        self._word_by_rgb: Dict[RGBColor, int] = {}

    def rgb_to_packed(self, color: RGBColor) -> int:
        """Encode an RGB color, reusing a previous result when available."""
        color = tuple(color)
        word = self._word_by_rgb.get(color)
        if word is None:
            word = encode_color(color)
            self._word_by_rgb[color] = word
        return word

    def packed_to_rgb(self, word: int) -> RGBColor:
        """Decode a color word, reusing a previous result when available."""
        color = self._rgb_by_word.get(word)
        if color is None:
            color = decode_color(word)
            self._rgb_by_word[word] = color
        return color

    def clear(self):
        self._rgb_by_word.clear()
        self._word_by_rgb.clear()

    def __len__(self) -> int:
        return len(self._rgb_by_word) + len(self._word_by_rgb)
