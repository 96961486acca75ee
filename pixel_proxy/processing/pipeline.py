"""Pixelation pipeline.

Stages run once each, in order::

    validate -> downscale to grid -> quantize/dither -> [upscale to original]

Every stage takes ownership of the buffer it receives and hands back a buffer
that may or may not be the same object.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Sequence

from PIL import Image

from ..config import MAX_PIXEL_WIDTH, MIN_PIXEL_WIDTH
from ..errors import EmptyPaletteError, InvalidConfigError, UnknownAlgorithmError
from .buffer import PixelBuffer, check_dimensions
from .color import Color, Palette, freeze_palette
from .dither import DITHERERS, quantize_flat
from .resize import downscale_to_grid, upscale_to

logger = logging.getLogger(__name__)


class DitherAlgorithm(str, Enum):
    NONE = "none"
    FLOYD_STEINBERG = "floyd-steinberg"
    ATKINSON = "atkinson"
    ORDERED = "ordered"
    BAYER_2X2 = "bayer-2x2"
    BAYER_4X4 = "bayer-4x4"
    CLUSTERED_4X4 = "clustered-4x4"

    @classmethod
    def parse(cls, value: "str | DitherAlgorithm") -> "DitherAlgorithm":
        if isinstance(value, cls):
            return value
        name = str(value).strip().lower()
        name = _DITHER_ALIASES.get(name, name)
        try:
            return cls(name)
        except ValueError:
            raise UnknownAlgorithmError(f"Unknown dithering method: {value}") from None


_DITHER_ALIASES = {
    "floyd_steinberg": "floyd-steinberg",
    "floyd": "floyd-steinberg",
    "bayer-8x8": "ordered",
    "8x8 bayer": "ordered",
    "2x2 bayer": "bayer-2x2",
    "4x4 bayer": "bayer-4x4",
    "clustered 4x4": "clustered-4x4",
}


class OutputMode(str, Enum):
    PIXEL_GRID = "pixel"
    ORIGINAL = "original"

    @classmethod
    def parse(cls, value: "str | OutputMode") -> "OutputMode":
        if isinstance(value, cls):
            return value
        name = str(value).strip().lower()
        if name in ("grid", "pixelgrid", "pixel-grid"):
            return cls.PIXEL_GRID
        try:
            return cls(name)
        except ValueError:
            raise InvalidConfigError(f"Unknown resolution: {value}") from None


@dataclass(frozen=True)
class PipelineConfig:
    target_width: int
    dither: DitherAlgorithm = DitherAlgorithm.NONE
    strength: float = 0.0
    palette: Optional[Palette] = None
    output_mode: OutputMode = OutputMode.ORIGINAL

    def __post_init__(self) -> None:
        # Accept plain strings and lists; store enums and a tuple palette.
        object.__setattr__(self, "dither", DitherAlgorithm.parse(self.dither))
        object.__setattr__(self, "output_mode", OutputMode.parse(self.output_mode))
        if self.palette is not None:
            object.__setattr__(self, "palette", freeze_palette(self.palette))

    @classmethod
    def from_options(
        cls,
        width: Any,
        dither: str = "none",
        strength: Any = 0.0,
        palette: Optional[Sequence[Color]] = None,
        resolution: str = "original",
        *,
        percent: bool = False,
    ) -> "PipelineConfig":
        """Build a config from loosely typed options (query strings, CLI flags).

        ``percent=True`` reads ``strength`` on the 0-100 scale.
        """
        try:
            target_width = int(width)
            strength_value = float(strength)
        except (TypeError, ValueError):
            raise InvalidConfigError(f"Invalid width/strength: {width!r}, {strength!r}") from None
        if percent:
            strength_value /= 100.0
        return cls(
            target_width=target_width,
            dither=dither,
            strength=strength_value,
            palette=palette,
            output_mode=resolution,
        )


def validate(config: PipelineConfig) -> None:
    width = config.target_width
    if isinstance(width, bool) or not isinstance(width, int):
        raise InvalidConfigError(f"Width must be an integer, got {width!r}")
    if width < MIN_PIXEL_WIDTH:
        raise InvalidConfigError(f"Width must be at least {MIN_PIXEL_WIDTH} pixels.")
    if width > MAX_PIXEL_WIDTH:
        raise InvalidConfigError(f"Width cannot exceed {MAX_PIXEL_WIDTH} pixels.")
    if not 0.0 <= config.strength <= 1.0:
        raise InvalidConfigError(f"Strength must be within [0, 1], got {config.strength}")
    if config.palette is not None and not config.palette:
        raise EmptyPaletteError("Palette must contain at least one color")


def apply_palette(buffer: PixelBuffer, config: PipelineConfig) -> PixelBuffer:
    if config.palette is None:
        return buffer
    if config.dither is DitherAlgorithm.NONE:
        return quantize_flat(buffer, config.palette)
    ditherer = DITHERERS.get(config.dither.value)
    if ditherer is None:
        raise UnknownAlgorithmError(f"Unknown dithering method: {config.dither}")
    return ditherer(buffer, config.palette, config.strength)


def pixelate(buffer: PixelBuffer, config: PipelineConfig) -> PixelBuffer:
    check_dimensions(buffer.data, buffer.width, buffer.height)
    validate(config)
    src_width, src_height = buffer.size

    grid = downscale_to_grid(buffer, config.target_width)
    logger.debug("Downscaled %sx%s to grid %sx%s", src_width, src_height, grid.width, grid.height)

    grid = apply_palette(grid, config)
    logger.debug(
        "Applied dither=%s strength=%.3f palette=%s",
        config.dither.value,
        config.strength,
        len(config.palette) if config.palette is not None else None,
    )

    if config.output_mode is OutputMode.ORIGINAL:
        out = upscale_to(grid, src_width, src_height)
        logger.debug("Upscaled grid back to %sx%s", src_width, src_height)
        return out
    return grid


def pixelate_image(img: Image.Image, config: PipelineConfig) -> Image.Image:
    return pixelate(PixelBuffer.from_image(img), config).to_image()
