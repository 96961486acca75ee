"""Errors raised by the pixelation core.

All of them describe a caller-supplied contract violation and are raised
before any output buffer is produced.
"""


class PixelationError(ValueError):
    """Base class for pipeline errors."""


class InvalidConfigError(PixelationError):
    """Width, strength or another option is outside its allowed range."""


class EmptyPaletteError(PixelationError):
    """A palette was required but contains no colors."""


class UnknownAlgorithmError(PixelationError):
    """The dither algorithm or matrix name is not recognised."""


class DimensionMismatchError(PixelationError):
    """Buffer length disagrees with ``width * height * 4``."""


__all__ = [
    "PixelationError",
    "InvalidConfigError",
    "EmptyPaletteError",
    "UnknownAlgorithmError",
    "DimensionMismatchError",
]
