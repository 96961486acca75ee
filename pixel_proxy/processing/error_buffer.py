from __future__ import annotations

from array import array
from typing import Sequence

from .buffer import CHANNELS


class ErrorAccumulator:
    """Pending quantization error, one float per RGBA sample.

    Targets outside ``[0, width) x [0, height)`` are silently dropped, so
    error reaching the right and bottom edges is lost rather than wrapped.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._values = array("f", [0.0]) * (width * height * CHANNELS)

    def observed(self, data: bytearray, idx: int) -> tuple[float, float, float]:
        values = self._values
        return (
            data[idx] + values[idx],
            data[idx + 1] + values[idx + 1],
            data[idx + 2] + values[idx + 2],
        )

    def distribute(self, x: int, y: int, error: Sequence[float], factor: float) -> None:
        if x < 0 or x >= self.width or y < 0 or y >= self.height:
            return
        idx = (y * self.width + x) * CHANNELS
        values = self._values
        values[idx] += error[0] * factor
        values[idx + 1] += error[1] * factor
        values[idx + 2] += error[2] * factor

    def at(self, x: int, y: int) -> tuple[float, float, float]:
        idx = (y * self.width + x) * CHANNELS
        values = self._values
        return values[idx], values[idx + 1], values[idx + 2]
