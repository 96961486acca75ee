import io

import pytest
import requests
from PIL import Image

from pixel_proxy.infrastructure import sources
from pixel_proxy.infrastructure.sources import SourceFetcher, load_image, load_pixels
from pixel_proxy.processing.buffer import PixelBuffer


def _png_bytes(size=(3, 2), color=(10, 20, 30)):
    buffer = io.BytesIO()
    Image.new("RGB", size, color).save(buffer, "PNG")
    return buffer.getvalue()


class FakeResponse:
    def __init__(self, content=b"", status=200):
        self.content = content
        self.status = status

    def raise_for_status(self):
        if self.status >= 400:
            raise requests.HTTPError(f"status {self.status}")


class FakeSession:
    def __init__(self, responses):
        self.headers = {}
        self.calls = []
        self._responses = list(responses)

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        return self._responses.pop(0)


@pytest.fixture
def no_sleep(monkeypatch):
    monkeypatch.setattr(sources.time, "sleep", lambda _seconds: None)


def test_load_pixels_from_pil_image_converts_to_rgba():
    buffer = load_pixels(Image.new("RGB", (2, 2), (1, 2, 3)))

    assert buffer.size == (2, 2)
    assert buffer.pixel(1, 1) == (1, 2, 3, 255)


def test_load_pixels_passes_buffers_through():
    buffer = PixelBuffer.blank(2, 1)

    assert load_pixels(buffer) is buffer


def test_load_pixels_from_bytes_and_path(tmp_path):
    data = _png_bytes()
    path = tmp_path / "src.png"
    path.write_bytes(data)

    for source in (data, path, str(path)):
        buffer = load_pixels(source)
        assert buffer.size == (3, 2)
        assert buffer.pixel(0, 0) == (10, 20, 30, 255)


def test_load_image_from_url_uses_fetcher(no_sleep):
    session = FakeSession([FakeResponse(_png_bytes((4, 4)))])
    fetcher = SourceFetcher(session_factory=lambda: session)

    img = load_image("http://example.com/a.png", fetcher)

    assert img.size == (4, 4)
    assert session.calls[0][0] == "http://example.com/a.png"
    assert session.headers["User-Agent"].startswith("pixel-proxy/")


def test_fetcher_retries_then_succeeds(no_sleep):
    session = FakeSession([FakeResponse(status=503), FakeResponse(_png_bytes())])
    fetcher = SourceFetcher(session_factory=lambda: session)

    assert fetcher.fetch_image("http://example.com/a.png").size == (3, 2)
    assert len(session.calls) == 2


def test_fetcher_raises_after_exhausting_retries(no_sleep, monkeypatch):
    monkeypatch.setattr(sources.SETTINGS, "retries", 1)
    session = FakeSession([FakeResponse(status=500), FakeResponse(status=500)])
    fetcher = SourceFetcher(session_factory=lambda: session)

    with pytest.raises(RuntimeError):
        fetcher.fetch_bytes("http://example.com/a.png")
    assert len(session.calls) == 2


def test_unsupported_source_type():
    with pytest.raises(TypeError):
        load_pixels(42)
