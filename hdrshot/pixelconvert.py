"""Conversion of captured frames to packed 8-bit sRGB."""

from __future__ import annotations

import math
import struct
from enum import IntEnum
from typing import Callable, Iterator, Optional, Sequence, Union

from hdrshot.config import Config
from hdrshot.imagebuffer import ImageBuffer, PixelFormat
from hdrshot.tonemap import linear_to_srgb, pq_to_linear, tone_map_aces

DEFAULT_SDR_BRIGHTNESS = 250.0
DEFAULT_HDR_PEAK_NITS = 1000.0


class DxgiFormat(IntEnum):
    """Surface formats a desktop duplication frame can be delivered in."""

    UNKNOWN = 0
    R16G16B16A16_FLOAT = 10
    R10G10B10A2_UNORM = 24
    B8G8R8A8_UNORM = 87


# BT.2020 primaries to BT.709 / sRGB primaries, linear light.
_REC2020_TO_SRGB = (
    (1.660491, -0.587641, -0.072850),
    (-0.124550, 1.132900, -0.008349),
    (-0.018151, -0.100579, 1.118730),
)


def _rec2020_to_srgb(rgb: Sequence[float]) -> list[float]:
    return [sum(m * c for m, c in zip(row, rgb)) for row in _REC2020_TO_SRGB]


def _unit(value: float) -> float:
    """Clamp to 0..1, treating NaN as 0."""
    if math.isnan(value):
        return 0.0
    return min(max(value, 0.0), 1.0)


def _reinhard(x: float) -> float:
    den = 1.0 + x
    if den == 0.0:
        return -math.inf if x < 0 else math.inf
    return x / den


def _tone_map(rgb: list[float], aces: bool) -> list[float]:
    if aces:
        return tone_map_aces(rgb)
    return [_reinhard(x) for x in rgb]


def _unit_to_byte(value: float) -> int:
    """Quantise a value already in 0..1."""
    return int(value * 255.0 + 0.5)


def _clamped_byte(value: float) -> int:
    scaled = value * 255.0 + 0.5
    if math.isnan(scaled):
        return 0
    return int(min(max(scaled, 0.0), 255.0))


def _unorm10_byte(value: int) -> int:
    return _unit_to_byte(value / 1023.0)


def _split_10(pixel: int) -> tuple[int, int, int]:
    return (pixel >> 20) & 0x3FF, (pixel >> 10) & 0x3FF, pixel & 0x3FF


def _rows(image: ImageBuffer, bytes_per_pixel: int, code: str, per_pixel: int) -> Iterator[tuple]:
    """Yield the unpacked values of each row of ``image``."""
    width, height, stride = image.width, image.height, image.stride
    if width < 0 or height < 0:
        raise ValueError(f"invalid image size {width}x{height}")
    if width == 0 or height == 0:
        return
    row_bytes = width * bytes_per_pixel
    if stride < row_bytes:
        raise ValueError(f"stride {stride} shorter than a row of {row_bytes} bytes")
    needed = (height - 1) * stride + row_bytes
    if len(image.data) < needed:
        raise ValueError(f"image data holds {len(image.data)} bytes, {needed} needed")
    layout = struct.Struct(f"<{width * per_pixel}{code}")
    for offset in range(0, height * stride, stride):
        yield layout.unpack_from(image.data, offset)


def _rgb8(image: ImageBuffer, data: bytearray) -> ImageBuffer:
    return ImageBuffer(PixelFormat.RGB8, image.width, image.height, image.width * 3, data)


def _from_bgra8(image: ImageBuffer) -> ImageBuffer:
    out = bytearray()
    for row in _rows(image, 4, "B", 4):
        packed = bytes(row)
        rgb = bytearray(image.width * 3)
        rgb[0::3] = packed[2::4]
        rgb[1::3] = packed[1::4]
        rgb[2::3] = packed[0::4]
        out += rgb
    return _rgb8(image, out)


def _from_sdr_f16(image: ImageBuffer) -> ImageBuffer:
    out = bytearray()
    for row in _rows(image, 8, "e", 4):
        for r, g, b, _alpha in zip(*[iter(row)] * 4):
            out += bytes(_unit_to_byte(linear_to_srgb(_unit(c))) for c in (r, g, b))
    return _rgb8(image, out)


def _from_sdr_10(image: ImageBuffer) -> ImageBuffer:
    out = bytearray()
    for row in _rows(image, 4, "I", 1):
        for pixel in row:
            out += bytes(_unorm10_byte(c) for c in _split_10(pixel))
    return _rgb8(image, out)


def _hdr_settings(config: Optional[Config]) -> tuple[float, bool]:
    target = config.sdr_brightness if config is not None else DEFAULT_SDR_BRIGHTNESS
    aces = config is not None and config.use_aces_film_tone_mapping
    return target / DEFAULT_HDR_PEAK_NITS, aces


def _from_hdr_f16(image: ImageBuffer, config: Optional[Config]) -> ImageBuffer:
    exposure, aces = _hdr_settings(config)
    out = bytearray()
    for row in _rows(image, 8, "e", 4):
        for r, g, b, _alpha in zip(*[iter(row)] * 4):
            mapped = _tone_map([r * exposure, g * exposure, b * exposure], aces)
            out += bytes(_clamped_byte(linear_to_srgb(c)) for c in mapped)
    return _rgb8(image, out)


def _from_hdr_10(image: ImageBuffer, config: Optional[Config]) -> ImageBuffer:
    exposure, aces = _hdr_settings(config)
    out = bytearray()
    for row in _rows(image, 4, "I", 1):
        for pixel in row:
            linear = [pq_to_linear(c / 1023.0) * exposure for c in _split_10(pixel)]
            mapped = _tone_map(_rec2020_to_srgb(linear), aces)
            out += bytes(_unit_to_byte(linear_to_srgb(_unit(c))) for c in mapped)
    return _rgb8(image, out)


_CONVERTERS: dict[PixelFormat, Callable[[ImageBuffer], ImageBuffer]] = {
    PixelFormat.BGRA8: _from_bgra8,
    PixelFormat.RGBA_F16: _from_sdr_f16,
    PixelFormat.RGBA10A2: _from_sdr_10,
}


def convert_to_rgb8(image: ImageBuffer) -> ImageBuffer:
    """Return ``image`` as packed 8-bit RGB, treating wide formats as SDR.

    Raises ValueError for an unsupported format or malformed buffer.
    """
    if image.format is PixelFormat.RGB8:
        return ImageBuffer(image.format, image.width, image.height, image.stride,
                           bytearray(image.data))
    converter = _CONVERTERS.get(image.format)
    if converter is None:
        raise ValueError(f"unsupported input format for conversion: {image.format}")
    return converter(image)


def to_srgb8(
    fmt: Union[DxgiFormat, int],
    image: ImageBuffer,
    is_hdr: bool = False,
    config: Optional[Config] = None,
) -> ImageBuffer:
    """Convert a frame delivered in surface format ``fmt`` to packed 8-bit sRGB.

    HDR frames are scaled to ``config.sdr_brightness`` and tone mapped
    (ACES or Reinhard); any format other than the two wide ones is read as BGRA8.
    """
    if fmt == DxgiFormat.R16G16B16A16_FLOAT:
        return _from_hdr_f16(image, config) if is_hdr else _from_sdr_f16(image)
    if fmt == DxgiFormat.R10G10B10A2_UNORM:
        return _from_hdr_10(image, config) if is_hdr else _from_sdr_10(image)
    return _from_bgra8(image)