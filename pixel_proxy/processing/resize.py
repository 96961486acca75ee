from __future__ import annotations

from enum import Enum

from PIL import Image

from ..errors import InvalidConfigError
from .buffer import PixelBuffer


class ResizeMode(str, Enum):
    SMOOTH = "smooth"
    NEAREST = "nearest"


_RESAMPLE = {
    ResizeMode.SMOOTH: Image.Resampling.BILINEAR,
    ResizeMode.NEAREST: Image.Resampling.NEAREST,
}


def grid_size(src_width: int, src_height: int, target_width: int) -> tuple[int, int]:
    """Pixel-grid dimensions for ``target_width`` keeping the source aspect ratio."""
    if src_width <= 0 or src_height <= 0:
        raise InvalidConfigError(f"Source dimensions must be positive, got {src_width}x{src_height}")
    target_height = round(target_width * src_height / src_width)
    return target_width, max(1, target_height)


def scale(buffer: PixelBuffer, dst_width: int, dst_height: int, mode: ResizeMode) -> PixelBuffer:
    if dst_width <= 0 or dst_height <= 0:
        raise InvalidConfigError(f"Target dimensions must be positive, got {dst_width}x{dst_height}")
    if buffer.size == (dst_width, dst_height):
        return buffer
    resized = buffer.to_image().resize((dst_width, dst_height), resample=_RESAMPLE[ResizeMode(mode)])
    return PixelBuffer.from_image(resized)


def downscale_to_grid(buffer: PixelBuffer, target_width: int) -> PixelBuffer:
    width, height = grid_size(buffer.width, buffer.height, target_width)
    return scale(buffer, width, height, ResizeMode.SMOOTH)


def upscale_to(buffer: PixelBuffer, width: int, height: int) -> PixelBuffer:
    """Nearest-neighbour upscale; keeps hard pixel edges after quantization."""
    return scale(buffer, width, height, ResizeMode.NEAREST)
