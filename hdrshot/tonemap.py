"""Tone mapping and transfer functions for HDR to SDR conversion."""

from __future__ import annotations

import struct
from typing import Iterable

_ACES_A = 2.51
_ACES_B = 0.03
_ACES_C = 2.43
_ACES_D = 0.59
_ACES_E = 0.14

_PQ_M1 = 2610.0 / 16384.0
_PQ_M2 = 2523.0 / 4096.0 * 128.0
_PQ_C1 = 3424.0 / 4096.0
_PQ_C2 = 2413.0 / 4096.0 * 32.0
_PQ_C3 = 2392.0 / 4096.0 * 32.0
_PQ_PEAK_NITS = 10000.0


def _components(rgb: Iterable[float]) -> list[float]:
    values = [float(v) for v in rgb]
    if len(values) % 3:
        raise ValueError("RGB data must hold a multiple of three components")
    return values


def _clamp01(value: float) -> float:
    return min(max(value, 0.0), 1.0)


def tone_map_aces(rgb: Iterable[float]) -> list[float]:
    """Apply the ACES filmic curve to packed RGB components, clamped to 0..1."""
    return [
        _clamp01((x * (_ACES_A * x + _ACES_B)) / (x * (_ACES_C * x + _ACES_D) + _ACES_E))
        for x in _components(rgb)
    ]


def tone_map_reinhard(rgb: Iterable[float]) -> list[float]:
    """Apply the Reinhard operator x / (1 + x) to packed RGB components."""
    return [x / (1.0 + x) for x in _components(rgb)]


def linear_to_srgb(linear: float) -> float:
    """Encode a linear value with the sRGB transfer curve."""
    if linear <= 0.0031308:
        return 12.92 * linear
    return 1.055 * linear ** (1.0 / 2.4) - 0.055


def pq_to_linear(pq: float) -> float:
    """Decode an SMPTE ST 2084 (PQ) signal in 0..1 to luminance in nits."""
    pq = _clamp01(pq)
    if pq == 0.0:
        return 0.0
    p = pq ** (1.0 / _PQ_M2)
    num = max(p - _PQ_C1, 0.0)
    den = _PQ_C2 - _PQ_C3 * p
    if den <= 0.0:
        return 0.0
    return (num / den) ** (1.0 / _PQ_M1) * _PQ_PEAK_NITS


def half_to_float(h: int) -> float:
    """Interpret a 16-bit integer as an IEEE 754 half-precision float."""
    if not 0 <= h <= 0xFFFF:
        raise ValueError(f"half-precision bits out of range: {h}")
    return struct.unpack("<e", h.to_bytes(2, "little"))[0]