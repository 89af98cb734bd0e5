"""Packing of RGB pixels into a clipboard device-independent bitmap."""

from __future__ import annotations

import struct

_HEADER = struct.Struct("<IiiHHIIiiII")
HEADER_SIZE = _HEADER.size
BI_RGB = 0


def rgb_to_dib(rgb: bytes, width: int, height: int) -> bytes:
    """Return a 24-bit bottom-up DIB (header plus BGR rows padded to 4 bytes).

    ``rgb`` holds ``height`` top-down rows of ``width`` RGB pixels.
    Raises ValueError if the size is negative or the data too short.
    """
    if width < 0 or height < 0:
        raise ValueError(f"invalid image size {width}x{height}")
    src_row = width * 3
    if len(rgb) < src_row * height:
        raise ValueError(f"RGB data holds {len(rgb)} bytes, {src_row * height} needed")
    row_size = ((width * 24 + 31) // 32) * 4
    image_size = row_size * height
    header = _HEADER.pack(HEADER_SIZE, width, height, 1, 24, BI_RGB, image_size, 0, 0, 0, 0)
    padding = bytes(row_size - src_row)
    rows = []
    for top in range(height):
        src = rgb[top * src_row:(top + 1) * src_row]
        bgr = bytearray(src_row)
        bgr[0::3] = src[2::3]
        bgr[1::3] = src[1::3]
        bgr[2::3] = src[0::3]
        rows.append(bytes(bgr) + padding)
    rows.reverse()
    return header + b"".join(rows)