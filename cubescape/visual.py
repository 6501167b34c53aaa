"""Pixel format of the display and conversion of 0xRRGGBB colours into it."""

from __future__ import annotations

from dataclasses import dataclass


def _shift_and_width(mask: int) -> tuple[int, int]:
    """Return (position of lowest set bit, length of the run of ones there)."""
    if mask <= 0:
        raise ValueError(f"colour mask must be a positive bit mask, got {mask!r}")
    shift = (mask & -mask).bit_length() - 1
    run = mask >> shift
    width = ((run ^ (run + 1)) >> 1).bit_length()
    return shift, width


@dataclass(frozen=True)
class Visual:
    """A true-colour visual: its depth and the bit masks of each channel."""

    depth: int = 24
    red_mask: int = 0xFF0000
    green_mask: int = 0x00FF00
    blue_mask: int = 0x0000FF

    def channel_shifts(self) -> tuple[int, int, int, int, int, int]:
        """Return (red shift, red bits, green shift, green bits, blue shift, blue bits)."""
        red = _shift_and_width(self.red_mask)
        green = _shift_and_width(self.green_mask)
        blue = _shift_and_width(self.blue_mask)
        return (*red, *green, *blue)

    def good_color(self, color: int) -> int:
        """Convert a 0xRRGGBB colour into this visual's pixel value."""
        if self.depth >= 24:
            return color
        r_shift, r_bits, g_shift, g_bits, b_shift, b_bits = self.channel_shifts()
        red = (color >> 8) & 0xFF00
        green = color & 0xFF00
        blue = (color << 8) & 0xFF00
        return (
            ((red >> (16 - r_bits)) << r_shift)
            + ((green >> (16 - g_bits)) << g_shift)
            + ((blue >> (16 - b_bits)) << b_shift)
        )