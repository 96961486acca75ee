"""Collaborators around the pixelation core: image sources, palettes, caching, responses."""

from .cache import CACHE, ResponseCache
from .palettes import BUILTIN_PALETTES, hex_to_rgb, parse_palette, rgb_to_hex
from .responses import encode_png, send_png_bytes
from .sources import FETCHER, SourceFetcher, decode_image, load_image, load_pixels

__all__ = [
    "CACHE",
    "ResponseCache",
    "BUILTIN_PALETTES",
    "hex_to_rgb",
    "parse_palette",
    "rgb_to_hex",
    "encode_png",
    "send_png_bytes",
    "FETCHER",
    "SourceFetcher",
    "decode_image",
    "load_image",
    "load_pixels",
]
