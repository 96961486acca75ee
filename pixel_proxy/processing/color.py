from __future__ import annotations

from typing import Sequence, Tuple

from ..errors import EmptyPaletteError, InvalidConfigError

Color = Tuple[int, int, int]
Palette = Tuple[Color, ...]


def distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Squared Euclidean RGB distance; only the ordering matters."""
    dr = a[0] - b[0]
    dg = a[1] - b[1]
    db = a[2] - b[2]
    return dr * dr + dg * dg + db * db


def nearest(color: Sequence[float], palette: Sequence[Color]) -> Color:
    if not palette:
        raise EmptyPaletteError("Palette must contain at least one color")

    best = palette[0]
    best_distance = float("inf")
    for candidate in palette:
        d = distance(color, candidate)
        # strict comparison keeps the earliest entry on ties
        if d < best_distance:
            best_distance = d
            best = candidate
    return best


def to_color(entry: Sequence[int]) -> Color:
    """Validate one palette entry; extra channels such as alpha are dropped."""
    try:
        channels = [int(c) for c in entry]
    except (TypeError, ValueError):
        raise InvalidConfigError(f"Palette entry must be a sequence of integers: {entry!r}") from None
    if len(channels) < 3:
        raise InvalidConfigError(f"Palette entry needs three channels: {entry!r}")
    r, g, b = channels[:3]
    if not (0 <= r <= 255 and 0 <= g <= 255 and 0 <= b <= 255):
        raise InvalidConfigError(f"Palette channels must be within 0-255: {entry!r}")
    return r, g, b


def freeze_palette(colors: Sequence[Sequence[int]]) -> Palette:
    """Copy ``colors`` into an immutable palette of int triples."""
    return tuple(to_color(c) for c in colors)
