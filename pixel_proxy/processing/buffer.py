from __future__ import annotations

from dataclasses import dataclass

from PIL import Image

from ..errors import DimensionMismatchError, InvalidConfigError

CHANNELS = 4


def check_dimensions(data: bytes | bytearray, width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise InvalidConfigError(f"Buffer dimensions must be positive, got {width}x{height}")
    expected = width * height * CHANNELS
    if len(data) != expected:
        raise DimensionMismatchError(
            f"Buffer of {len(data)} bytes does not match {width}x{height} RGBA ({expected} bytes)"
        )


@dataclass
class PixelBuffer:
    """Flat RGBA samples in row-major order, one byte per channel."""

    width: int
    height: int
    data: bytearray

    def __post_init__(self) -> None:
        if not isinstance(self.data, bytearray):
            self.data = bytearray(self.data)
        check_dimensions(self.data, self.width, self.height)

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height

    @classmethod
    def blank(cls, width: int, height: int, rgba: tuple[int, int, int, int] = (0, 0, 0, 255)) -> "PixelBuffer":
        return cls(width, height, bytearray(bytes(rgba) * (width * height)))

    @classmethod
    def from_image(cls, img: Image.Image) -> "PixelBuffer":
        rgba = img.convert("RGBA")
        width, height = rgba.size
        return cls(width, height, bytearray(rgba.tobytes()))

    def to_image(self) -> Image.Image:
        return Image.frombytes("RGBA", (self.width, self.height), bytes(self.data))

    def copy(self) -> "PixelBuffer":
        return PixelBuffer(self.width, self.height, bytearray(self.data))

    def pixel(self, x: int, y: int) -> tuple[int, int, int, int]:
        idx = (y * self.width + x) * CHANNELS
        r, g, b, a = self.data[idx : idx + CHANNELS]
        return r, g, b, a
