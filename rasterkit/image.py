"""In-memory pixel images laid out as scanlines of packed pixels."""

from __future__ import annotations


class Image:
    """A ``width`` x ``height`` image stored in a zero-filled byte buffer.

    Each scanline is padded to a multiple of 32 bits.  ``byte_order`` 0
    stores pixels least significant byte first, 1 most significant first.
    """

    def __init__(
        self,
        width: int,
        height: int,
        bits_per_pixel: int = 32,
        byte_order: int = 0,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        if bits_per_pixel <= 0 or bits_per_pixel % 8:
            raise ValueError(
                f"bits_per_pixel must be a positive multiple of 8, got {bits_per_pixel}"
            )
        if byte_order not in (0, 1):
            raise ValueError(f"byte_order must be 0 or 1, got {byte_order}")
        self.width = width
        self.height = height
        self.bits_per_pixel = bits_per_pixel
        self.byte_order = byte_order
        self.size_line = ((width * bits_per_pixel + 31) // 32) * 4
        self.data = bytearray(self.size_line * height)

    def __repr__(self) -> str:
        return (
            f"Image(width={self.width}, height={self.height}, "
            f"bits_per_pixel={self.bits_per_pixel}, byte_order={self.byte_order})"
        )

    @property
    def bytes_per_pixel(self) -> int:
        return self.bits_per_pixel // 8

    @property
    def _order(self) -> str:
        return "big" if self.byte_order else "little"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"pixel ({x}, {y}) outside image of {self.width}x{self.height}"
            )
        return y * self.size_line + x * self.bytes_per_pixel

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` at (x, y), keeping only the bits a pixel holds."""
        opp = self.bytes_per_pixel
        offset = self._offset(x, y)
        value = color & ((1 << (8 * opp)) - 1)
        self.data[offset : offset + opp] = value.to_bytes(opp, self._order)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the pixel value stored at (x, y)."""
        opp = self.bytes_per_pixel
        offset = self._offset(x, y)
        return int.from_bytes(self.data[offset : offset + opp], self._order)

    def row(self, y: int) -> list[int]:
        """Return the pixel values of scanline ``y``, left to right."""
        if not 0 <= y < self.height:
            raise IndexError(f"row {y} outside image of height {self.height}")
        return [self.get_pixel(x, y) for x in range(self.width)]