"""Pixelation core: color math, dither matrices, ditherers, resizing, pipeline."""

from .buffer import PixelBuffer
from .color import Color, Palette, distance, nearest
from .dither import DITHERERS, atkinson, floyd_steinberg, ordered, quantize_flat
from .pipeline import (
    DitherAlgorithm,
    OutputMode,
    PipelineConfig,
    pixelate,
    pixelate_image,
)
from .resize import ResizeMode, grid_size, scale

__all__ = [
    "PixelBuffer",
    "Color",
    "Palette",
    "distance",
    "nearest",
    "DITHERERS",
    "atkinson",
    "floyd_steinberg",
    "ordered",
    "quantize_flat",
    "DitherAlgorithm",
    "OutputMode",
    "PipelineConfig",
    "pixelate",
    "pixelate_image",
    "ResizeMode",
    "grid_size",
    "scale",
]
