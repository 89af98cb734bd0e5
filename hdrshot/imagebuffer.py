"""Raw pixel buffers as captured from the screen."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class PixelFormat(Enum):
    """Layouts a captured frame can arrive in."""

    UNKNOWN = "unknown"
    RGBA_F16 = "rgba_f16"  # R16G16B16A16_FLOAT
    RGBA10A2 = "rgba10a2"  # R10G10B10A2_UNORM
    BGRA8 = "bgra8"  # B8G8R8A8_UNORM
    RGB8 = "rgb8"  # packed output without alpha

    @property
    def bytes_per_pixel(self) -> int:
        """Size of one pixel in bytes, 0 for an unknown format."""
        return _BYTES_PER_PIXEL[self]


_BYTES_PER_PIXEL = {
    PixelFormat.UNKNOWN: 0,
    PixelFormat.RGBA_F16: 8,
    PixelFormat.RGBA10A2: 4,
    PixelFormat.BGRA8: 4,
    PixelFormat.RGB8: 3,
}


@dataclass
class ImageBuffer:
    """A frame of pixels; ``stride`` is the number of bytes per row."""

    format: PixelFormat = PixelFormat.UNKNOWN
    width: int = 0
    height: int = 0
    stride: int = 0
    data: bytearray = field(default_factory=bytearray)

    def row(self, y: int) -> bytes:
        """Return the ``stride`` bytes of row ``y``."""
        if not 0 <= y < self.height:
            raise IndexError(f"row {y} outside image of height {self.height}")
        start = y * self.stride
        return bytes(self.data[start:start + self.stride])