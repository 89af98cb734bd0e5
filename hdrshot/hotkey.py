"""Parsing of hotkey strings such as ``"ctrl+shift+alt+a"``."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag


class Modifier(IntFlag):
    """Hotkey modifier bits, with the values the Windows hotkey API uses."""

    NONE = 0
    ALT = 0x0001
    CONTROL = 0x0002
    SHIFT = 0x0004


@dataclass(frozen=True)
class Hotkey:
    """A parsed hotkey: modifier flags and a virtual-key code."""

    modifiers: Modifier
    vk: int


_MODIFIER_TOKENS = (("ctrl", Modifier.CONTROL), ("shift", Modifier.SHIFT), ("alt", Modifier.ALT))


def _ascii_lower(text: str) -> str:
    return "".join(c.lower() if c.isascii() else c for c in text)


def parse_hotkey(text: str) -> Hotkey:
    """Parse a hotkey description.

    Modifiers are recognised anywhere in the text; the key is the last ASCII
    letter or digit. Letters map to their virtual-key code (the upper-case
    letter), digits to their character code. Raises ValueError if no key is
    found.
    """
    s = _ascii_lower(text)
    modifiers = Modifier.NONE
    for token, flag in _MODIFIER_TOKENS:
        if token in s:
            modifiers |= flag
    keys = [c for c in s if "a" <= c <= "z" or "0" <= c <= "9"]
    if not keys:
        raise ValueError(f"no key in hotkey {text!r}")
    key = keys[-1]
    return Hotkey(modifiers, ord(key.upper()))