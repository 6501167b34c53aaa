"""In-memory images: a packed pixel buffer with a fixed row stride."""

from __future__ import annotations

from dataclasses import dataclass, field

LITTLE_ENDIAN = 0
BIG_ENDIAN = 1


@dataclass(eq=False)
class Image:
    """A width x height image of bpp-bit pixels stored row by row in data."""

    width: int
    height: int
    bpp: int = 32
    byte_order: int = LITTLE_ENDIAN
    data: bytearray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"invalid image size {self.width}x{self.height}")
        if self.bpp not in (8, 16, 24, 32):
            raise ValueError(f"unsupported bits per pixel: {self.bpp}")
        if self.byte_order not in (LITTLE_ENDIAN, BIG_ENDIAN):
            raise ValueError(f"invalid byte order: {self.byte_order}")
        self.data = bytearray(self.size_line * self.height)

    @property
    def bytes_per_pixel(self) -> int:
        return self.bpp // 8

    @property
    def size_line(self) -> int:
        """Number of bytes in one row."""
        return self.width * self.bytes_per_pixel

    @property
    def _order(self) -> str:
        return "big" if self.byte_order == BIG_ENDIAN else "little"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return y * self.size_line + x * self.bytes_per_pixel

    def _encode(self, color: int) -> bytes:
        mask = (1 << self.bpp) - 1
        return (color & mask).to_bytes(self.bytes_per_pixel, self._order)

    def pixel(self, x: int, y: int) -> int:
        """Return the unsigned pixel value at (x, y)."""
        offset = self._offset(x, y)
        return int.from_bytes(
            self.data[offset:offset + self.bytes_per_pixel], self._order
        )

    def set_pixel(self, x: int, y: int, color: int) -> None:
        """Store the low bpp bits of color at (x, y)."""
        offset = self._offset(x, y)
        self.data[offset:offset + self.bytes_per_pixel] = self._encode(color)

    def fill(self, color: int) -> None:
        """Set every pixel to color."""
        self.data[:] = self._encode(color) * (self.width * self.height)

    def copy_from(self, other: Image) -> None:
        """Copy the pixels of an image with exactly the same layout."""
        same = (
            self.width == other.width
            and self.height == other.height
            and self.bpp == other.bpp
            and self.byte_order == other.byte_order
        )
        if not same:
            raise ValueError("images differ in size or pixel layout")
        self.data[:] = other.data