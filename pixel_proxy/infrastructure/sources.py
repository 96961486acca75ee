"""Image source adapter: normalise anything image-like to a ``PixelBuffer``."""

from __future__ import annotations

import io
import logging
import os
import time
from pathlib import Path
from typing import Callable, Union

import requests
from PIL import Image

from ..config import SETTINGS
from ..processing.buffer import PixelBuffer

logger = logging.getLogger(__name__)

SessionFactory = Callable[[], requests.Session]
ImageSource = Union[Image.Image, PixelBuffer, bytes, bytearray, str, "os.PathLike[str]"]


def _is_url(value: str) -> bool:
    return value.startswith(("http://", "https://"))


class SourceFetcher:
    def __init__(self, session_factory: SessionFactory | None = None) -> None:
        self._session_factory = session_factory or requests.Session
        self._session = self._create_session()

    def _create_session(self) -> requests.Session:
        session = self._session_factory()
        session.headers.update({"User-Agent": "pixel-proxy/1.0"})
        return session

    def fetch_bytes(self, url: str) -> bytes:
        last_exception: Exception | None = None
        for attempt in range(1, SETTINGS.retries + 2):
            try:
                response = self._session.get(url, timeout=SETTINGS.timeout)
                response.raise_for_status()
                return response.content
            except requests.RequestException as exc:
                logger.warning("Fetching %s failed (attempt %s): %s", url, attempt, exc)
                last_exception = exc
                time.sleep(0.4 * attempt)
        raise RuntimeError(last_exception)

    def fetch_image(self, url: str) -> Image.Image:
        return decode_image(self.fetch_bytes(url))


FETCHER = SourceFetcher()


def decode_image(data: bytes) -> Image.Image:
    img = Image.open(io.BytesIO(data))
    img.load()
    return img


def load_image(source: ImageSource, fetcher: SourceFetcher | None = None) -> Image.Image:
    """Resolve ``source`` to a decoded Pillow image."""
    if isinstance(source, Image.Image):
        return source
    if isinstance(source, PixelBuffer):
        return source.to_image()
    if isinstance(source, (bytes, bytearray)):
        return decode_image(bytes(source))
    if isinstance(source, str) and _is_url(source):
        return (fetcher or FETCHER).fetch_image(source)
    if isinstance(source, (str, os.PathLike)):
        with Image.open(Path(source)) as img:
            img.load()
            return img.copy()
    raise TypeError(f"Unsupported image source: {type(source).__name__}")


def load_pixels(source: ImageSource, fetcher: SourceFetcher | None = None) -> PixelBuffer:
    if isinstance(source, PixelBuffer):
        return source
    return PixelBuffer.from_image(load_image(source, fetcher))
