"""Palette source adapter.

Turns user-facing palette descriptions into an immutable ``Palette``. Named
palettes are bundled with the package; nothing is fetched over the network.
"""

from __future__ import annotations

import re
from typing import Dict, Iterable, Sequence, Union

from ..errors import InvalidConfigError
from ..processing.color import Color, Palette, freeze_palette, to_color

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")

PaletteSpec = Union[str, Sequence[Union[str, Sequence[int]]]]


def hex_to_rgb(value: str) -> Color:
    match = _HEX_RE.match(value.strip())
    if not match:
        raise InvalidConfigError(f"Invalid hex color: {value!r}")
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    packed = int(digits, 16)
    return (packed >> 16) & 255, (packed >> 8) & 255, packed & 255


def rgb_to_hex(color: Sequence[int]) -> str:
    return "#{:02x}{:02x}{:02x}".format(*color[:3])


def _from_hex(values: Iterable[str]) -> Palette:
    return tuple(hex_to_rgb(value) for value in values)


BUILTIN_PALETTES: Dict[str, Palette] = {
    "1bit": _from_hex(["000000", "ffffff"]),
    "gameboy": _from_hex(["081820", "346856", "88c070", "e0f8d0"]),
    "cga": _from_hex(["000000", "55ffff", "ff55ff", "ffffff"]),
    "eink-7": (
        (0, 0, 0),
        (255, 255, 255),
        (255, 0, 0),
        (255, 255, 0),
        (0, 255, 0),
        (0, 0, 255),
        (255, 165, 0),
    ),
    "pico-8": _from_hex(
        [
            "000000", "1d2b53", "7e2553", "008751", "ab5236", "5f574f", "c2c3c7", "fff1e8",
            "ff004d", "ffa300", "ffec27", "00e436", "29adff", "83769c", "ff77a8", "ffccaa",
        ]
    ),
    "sweetie-16": _from_hex(
        [
            "1a1c2c", "5d275d", "b13e53", "ef7d57", "ffcd75", "a7f070", "38b764", "257179",
            "29366f", "3b5dc9", "41a6f6", "73eff7", "f4f4f4", "94b0c2", "566c86", "333c57",
        ]
    ),
}


def _entry_to_rgb(entry: Union[str, Sequence[int]]) -> Color:
    if isinstance(entry, str):
        return hex_to_rgb(entry)
    return to_color(entry)


def parse_palette(value: PaletteSpec | None) -> Palette | None:
    """Resolve a built-in name, a comma-separated hex list, or a sequence of colors.

    ``None`` and the empty string mean "no palette" and return ``None``.
    """
    if value is None:
        return None
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        key = text.lower()
        if key in BUILTIN_PALETTES:
            return BUILTIN_PALETTES[key]
        if "," in text or _HEX_RE.match(text):
            return _from_hex(part for part in text.split(",") if part.strip())
        raise InvalidConfigError(f"Unknown palette: {value}")
    return freeze_palette([_entry_to_rgb(entry) for entry in value])
