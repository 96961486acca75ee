from __future__ import annotations

from typing import Callable, Dict, Sequence, Tuple

from ..errors import EmptyPaletteError
from . import matrix as dither_matrix
from .buffer import CHANNELS, PixelBuffer, check_dimensions
from .color import Color, nearest
from .error_buffer import ErrorAccumulator

# (dx, dy, weight) offsets relative to the pixel being quantized.
Kernel = Tuple[Tuple[int, int, float], ...]

FLOYD_STEINBERG_KERNEL: Kernel = (
    (1, 0, 7 / 16),
    (-1, 1, 3 / 16),
    (0, 1, 5 / 16),
    (1, 1, 1 / 16),
)

# Six neighbours at 1/8 each; the remaining quarter of the error is dropped.
ATKINSON_KERNEL: Kernel = (
    (1, 0, 1 / 8),
    (2, 0, 1 / 8),
    (-1, 1, 1 / 8),
    (0, 1, 1 / 8),
    (1, 1, 1 / 8),
    (0, 2, 1 / 8),
)

ORDERED_THRESHOLD_CENTER = 127.5


def _prepare(buffer: PixelBuffer, palette: Sequence[Color]) -> PixelBuffer:
    if not palette:
        raise EmptyPaletteError("Palette must contain at least one color")
    check_dimensions(buffer.data, buffer.width, buffer.height)
    return buffer.copy()


def quantize_flat(buffer: PixelBuffer, palette: Sequence[Color], strength: float = 0.0) -> PixelBuffer:
    """Map every pixel to its nearest palette color. ``strength`` is ignored."""
    out = _prepare(buffer, palette)
    data = out.data
    for idx in range(0, len(data), CHANNELS):
        r, g, b = nearest((data[idx], data[idx + 1], data[idx + 2]), palette)
        data[idx] = r
        data[idx + 1] = g
        data[idx + 2] = b
    return out


def error_diffusion(
    buffer: PixelBuffer,
    palette: Sequence[Color],
    strength: float,
    kernel: Kernel,
) -> PixelBuffer:
    """Quantize in raster order, pushing ``strength`` times the error onto ``kernel``."""
    out = _prepare(buffer, palette)
    width, height = out.size
    data = out.data
    errors = ErrorAccumulator(width, height)

    for y in range(height):
        for x in range(width):
            idx = (y * width + x) * CHANNELS
            r, g, b = errors.observed(data, idx)
            new = nearest((r, g, b), palette)
            data[idx] = new[0]
            data[idx + 1] = new[1]
            data[idx + 2] = new[2]

            quant_error = (
                (r - new[0]) * strength,
                (g - new[1]) * strength,
                (b - new[2]) * strength,
            )
            for dx, dy, weight in kernel:
                errors.distribute(x + dx, y + dy, quant_error, weight)
    return out


def floyd_steinberg(buffer: PixelBuffer, palette: Sequence[Color], strength: float) -> PixelBuffer:
    return error_diffusion(buffer, palette, strength, FLOYD_STEINBERG_KERNEL)


def atkinson(buffer: PixelBuffer, palette: Sequence[Color], strength: float) -> PixelBuffer:
    return error_diffusion(buffer, palette, strength, ATKINSON_KERNEL)


def ordered(
    buffer: PixelBuffer,
    palette: Sequence[Color],
    strength: float,
    matrix: dither_matrix.Matrix | None = None,
) -> PixelBuffer:
    """Ordered dithering; every pixel depends only on its own value and position."""
    if matrix is None:
        matrix = dither_matrix.get("8x8")
    out = _prepare(buffer, palette)
    width, height = out.size
    data = out.data
    size = len(matrix)
    offsets = [
        [(dither_matrix.threshold(matrix, x, y) - ORDERED_THRESHOLD_CENTER) * strength for x in range(size)]
        for y in range(size)
    ]

    for y in range(height):
        row_offsets = offsets[y % size]
        for x in range(width):
            idx = (y * width + x) * CHANNELS
            shift = row_offsets[x % size]
            new = nearest((data[idx] + shift, data[idx + 1] + shift, data[idx + 2] + shift), palette)
            data[idx] = new[0]
            data[idx + 1] = new[1]
            data[idx + 2] = new[2]
    return out


Ditherer = Callable[[PixelBuffer, Sequence[Color], float], PixelBuffer]


def _ordered_with(kind: str) -> Ditherer:
    def run(buffer: PixelBuffer, palette: Sequence[Color], strength: float) -> PixelBuffer:
        return ordered(buffer, palette, strength, dither_matrix.get(kind))

    run.__name__ = f"ordered_{kind}"
    return run


DITHERERS: Dict[str, Ditherer] = {
    "none": quantize_flat,
    "floyd-steinberg": floyd_steinberg,
    "atkinson": atkinson,
    "ordered": _ordered_with("8x8"),
    "bayer-2x2": _ordered_with("2x2"),
    "bayer-4x4": _ordered_with("4x4"),
    "clustered-4x4": _ordered_with("clustered4x4"),
}
