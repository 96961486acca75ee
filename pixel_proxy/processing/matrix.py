"""Threshold matrices for ordered dithering."""

from __future__ import annotations

from functools import lru_cache
from typing import Tuple

from ..errors import UnknownAlgorithmError

Matrix = Tuple[Tuple[int, ...], ...]

# Quadrant order of the recursive Bayer construction:
# top-left, top-right, bottom-left, bottom-right.
_QUADRANT_OFFSETS = ((0, 2), (3, 1))

# Same table as the classic 8x8 ordered-dither reference; it equals the
# transpose of bayer_matrix(8).
_BAYER_8X8: Matrix = (
    (0, 48, 12, 60, 3, 51, 15, 63),
    (32, 16, 44, 28, 35, 19, 47, 31),
    (8, 56, 4, 52, 11, 59, 7, 55),
    (40, 24, 36, 20, 43, 27, 39, 23),
    (2, 50, 14, 62, 1, 49, 13, 61),
    (34, 18, 46, 30, 33, 17, 45, 29),
    (10, 58, 6, 54, 9, 57, 5, 53),
    (42, 26, 38, 22, 41, 25, 37, 21),
)

# Clustered-dot ranking, values 1..16.
_CLUSTERED_4X4: Matrix = (
    (7, 13, 11, 4),
    (12, 16, 14, 8),
    (10, 15, 6, 2),
    (5, 9, 3, 1),
)


@lru_cache(maxsize=None)
def bayer_matrix(size: int) -> Matrix:
    """Return the ``size x size`` Bayer matrix (``size`` a power of two)."""
    if size <= 0 or size & (size - 1):
        raise UnknownAlgorithmError(f"Bayer size must be a positive power of two, got {size}")
    if size == 1:
        return ((0,),)

    half = size // 2
    prev = bayer_matrix(half)
    rows = []
    for y in range(size):
        row = []
        for x in range(size):
            offset = _QUADRANT_OFFSETS[y // half][x // half]
            row.append(4 * prev[y % half][x % half] + offset)
        rows.append(tuple(row))
    return tuple(rows)


_MATRICES = {
    "2x2": lambda: bayer_matrix(2),
    "4x4": lambda: bayer_matrix(4),
    "8x8": lambda: _BAYER_8X8,
    "clustered4x4": lambda: _CLUSTERED_4X4,
}


def get(kind: str) -> Matrix:
    try:
        factory = _MATRICES[kind]
    except KeyError:
        raise UnknownAlgorithmError(f"Invalid dither matrix type: {kind}") from None
    return factory()


def threshold(matrix: Matrix, x: int, y: int) -> float:
    size = len(matrix)
    return (matrix[y % size][x % size] + 0.5) / (size * size) * 255
