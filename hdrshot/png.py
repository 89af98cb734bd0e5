"""Encoding of packed 8-bit RGB pixels as PNG."""

from __future__ import annotations

import os
import struct
import zlib
from typing import Union

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
_MAX_DIMENSION = 2**31 - 1
_BIT_DEPTH = 8
_COLOR_TYPE_RGB = 2


def _chunk(kind: bytes, payload: bytes) -> bytes:
    crc = zlib.crc32(kind + payload) & 0xFFFFFFFF
    return struct.pack(">I", len(payload)) + kind + payload + struct.pack(">I", crc)


def encode_png(rgb: bytes, width: int, height: int) -> bytes:
    """Return a PNG file holding ``height`` rows of ``width`` RGB pixels.

    Raises ValueError for an empty or oversized image or too little data.
    """
    if not (0 < width <= _MAX_DIMENSION and 0 < height <= _MAX_DIMENSION):
        raise ValueError(f"invalid image size {width}x{height}")
    row = width * 3
    if len(rgb) < row * height:
        raise ValueError(f"RGB data holds {len(rgb)} bytes, {row * height} needed")
    raw = b"".join(b"\x00" + bytes(rgb[y * row:(y + 1) * row]) for y in range(height))
    header = struct.pack(">IIBBBBB", width, height, _BIT_DEPTH, _COLOR_TYPE_RGB, 0, 0, 0)
    return (
        PNG_SIGNATURE
        + _chunk(b"IHDR", header)
        + _chunk(b"IDAT", zlib.compress(raw))
        + _chunk(b"IEND", b"")
    )


def save_rgb_png(rgb: bytes, width: int, height: int, path: Union[str, "os.PathLike[str]"]) -> None:
    """Write ``rgb`` to ``path`` as a PNG file; raises OSError if it cannot be written."""
    encoded = encode_png(rgb, width, height)
    with open(path, "wb") as handle:
        handle.write(encoded)