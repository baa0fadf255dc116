"""TrueColor visual description and colour conversion to pixel values."""

from __future__ import annotations


def _mask_layout(name: str, mask: int) -> tuple[int, int]:
    """Return (shift, bit count) of a contiguous channel mask."""
    if mask <= 0:
        raise ValueError(f"{name} mask must be a positive bit mask, got {mask:#x}")
    shift = (mask & -mask).bit_length() - 1
    shifted = mask >> shift
    bits = (~shifted & (shifted + 1)).bit_length() - 1
    return shift, bits


class TrueColorVisual:
    """A TrueColor visual given by its depth and channel masks."""

    def __init__(
        self,
        depth: int = 24,
        red_mask: int = 0xFF0000,
        green_mask: int = 0x00FF00,
        blue_mask: int = 0x0000FF,
    ) -> None:
        if depth <= 0:
            raise ValueError(f"depth must be positive, got {depth}")
        self.depth = depth
        self.red_mask = red_mask
        self.green_mask = green_mask
        self.blue_mask = blue_mask
        self.red_shift, self.red_bits = _mask_layout("red", red_mask)
        self.green_shift, self.green_bits = _mask_layout("green", green_mask)
        self.blue_shift, self.blue_bits = _mask_layout("blue", blue_mask)

    def __repr__(self) -> str:
        return (
            f"TrueColorVisual(depth={self.depth}, red_mask={self.red_mask:#x}, "
            f"green_mask={self.green_mask:#x}, blue_mask={self.blue_mask:#x})"
        )

    def color_value(self, color: int) -> int:
        """Convert a 0xRRGGBB colour to this visual's pixel value.

        Visuals of depth 24 or more take the colour unchanged.
        """
        if self.depth >= 24:
            return color
        red = (color >> 8) & 0xFF00
        green = color & 0xFF00
        blue = (color << 8) & 0xFF00
        return (
            ((red >> (16 - self.red_bits)) << self.red_shift)
            + ((green >> (16 - self.green_bits)) << self.green_shift)
            + ((blue >> (16 - self.blue_bits)) << self.blue_shift)
        )