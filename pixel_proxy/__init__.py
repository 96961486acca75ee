"""Pixel-art conversion: pixelation core plus an HTTP proxy around it."""

from .app import APP_VERSION, app, create_app
from . import errors, infrastructure, processing
from .processing import PipelineConfig, PixelBuffer, pixelate, pixelate_image

__version__ = APP_VERSION

__all__ = [
    "APP_VERSION",
    "__version__",
    "app",
    "create_app",
    "errors",
    "infrastructure",
    "processing",
    "PipelineConfig",
    "PixelBuffer",
    "pixelate",
    "pixelate_image",
]
