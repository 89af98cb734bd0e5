"""Application settings stored in a simple ``key=value`` ini file."""

from __future__ import annotations

import dataclasses
import math
import os
import re
from dataclasses import dataclass
from typing import Callable, Optional, Union

PathLike = Union[str, "os.PathLike[str]"]

DEFAULT_CONFIG_PATH = "config.ini"
HEADER = "; HDR Screenshot Tool Configuration"

SDR_BRIGHTNESS_RANGE = (80.0, 1000.0)
CAPTURE_RETRY_RANGE = (1, 10)

_FLT_MAX = 3.4028234663852886e38
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1

_FLOAT_PREFIX = re.compile(
    r"[+-]?(?:infinity|inf|nan|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)",
    re.IGNORECASE,
)
_INT_PREFIX = re.compile(r"[+-]?\d+")

_TRUE_TEXTS = frozenset(("true", "1"))
_BOOL_TEXTS = {False: "false", True: "true"}


@dataclass
class Config:
    """User settings with their defaults."""

    region_hotkey: str = "ctrl+alt+a"
    fullscreen_hotkey: str = "ctrl+shift+alt+a"
    save_path: str = "Screenshots"
    save_to_file: bool = True
    auto_create_save_dir: bool = True
    auto_start: bool = False
    debug_mode: bool = False
    use_aces_film_tone_mapping: bool = False
    sdr_brightness: float = 250.0
    fullscreen_current_monitor: bool = False
    region_fullscreen_monitor: bool = False
    capture_retry_count: int = 3


def _clamp(value, low, high):
    if value < low:
        return low
    if high < value:
        return high
    return value


def _parse_bool(text: str) -> bool:
    return text in _TRUE_TEXTS


def _parse_float(text: str) -> float:
    """Parse the leading number of ``text``, as a C float would be read."""
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    value = float(match.group(0))
    if math.isfinite(value) and abs(value) > _FLT_MAX:
        raise ValueError(f"number out of range: {text!r}")
    return _clamp(value, *SDR_BRIGHTNESS_RANGE)


def _parse_int(text: str) -> int:
    """Parse the leading integer of ``text``."""
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    value = int(match.group(0))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return _clamp(value, *CAPTURE_RETRY_RANGE)


def _format_bool(value: object) -> str:
    """Render a truth value as the ini file spells it."""
    return _BOOL_TEXTS[bool(value)]


def _format_float(value: float) -> str:
    return f"{value:g}"


# (ini key, attribute, parser, formatter) in file order.
_FIELDS: tuple[tuple[str, str, Callable[[str], object], Callable[[object], str]], ...] = (
    ("RegionHotkey", "region_hotkey", str, str),
    ("FullscreenHotkey", "fullscreen_hotkey", str, str),
    ("SavePath", "save_path", str, str),
    ("SaveToFile", "save_to_file", _parse_bool, _format_bool),
    ("AutoCreateSaveDir", "auto_create_save_dir", _parse_bool, _format_bool),
    ("AutoStart", "auto_start", _parse_bool, _format_bool),
    ("DebugMode", "debug_mode", _parse_bool, _format_bool),
    ("UseACESFilmToneMapping", "use_aces_film_tone_mapping", _parse_bool, _format_bool),
    ("SDRBrightness", "sdr_brightness", _parse_float, _format_float),
    ("FullscreenCurrentMonitor", "fullscreen_current_monitor", _parse_bool, _format_bool),
    ("RegionFullscreenMonitor", "region_fullscreen_monitor", _parse_bool, _format_bool),
    ("CaptureRetryCount", "capture_retry_count", _parse_int, str),
)
_BY_KEY = {key: (attr, parse) for key, attr, parse, _ in _FIELDS}


def load_config(path: PathLike = DEFAULT_CONFIG_PATH, base: Optional[Config] = None) -> Config:
    """Read settings from ``path`` on top of ``base`` (defaults if omitted).

    Raises OSError if the file cannot be opened and ValueError if a numeric
    setting does not hold a number.
    """
    values: dict[str, object] = {}
    with open(path, encoding="utf-8") as handle:
        for raw in handle:
            line = raw.rstrip("\n")
            if not line or line[0] in ";#":
                continue
            key, sep, value = line.partition("=")
            if not sep:
                continue
            entry = _BY_KEY.get(key.strip())
            if entry is None:
                continue
            attr, parse = entry
            values[attr] = parse(value.strip())
    return dataclasses.replace(base if base is not None else Config(), **values)


def save_config(config: Config, path: PathLike = DEFAULT_CONFIG_PATH) -> None:
    """Write every setting of ``config`` to ``path``."""
    lines = [HEADER]
    lines.extend(f"{key}={fmt(getattr(config, attr))}" for key, attr, _, fmt in _FIELDS)
    with open(path, "w", encoding="utf-8") as handle:
        handle.write("\n".join(lines) + "\n")


def ensure_config_file(config: Config, path: PathLike = DEFAULT_CONFIG_PATH) -> None:
    """Create ``path`` from ``config`` if missing, else rewrite it with every key present."""
    if not os.path.exists(path):
        save_config(config, path)
        return
    save_config(load_config(path), path)