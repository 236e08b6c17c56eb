import pytest

from rasterfx.image import RasterImage


def _solid(w, h, color=(0, 0, 0), alpha=255, **kw):
    r, g, b = color
    return RasterImage(w, h, [(r, g, b, alpha)] * (w * h), **kw)


@pytest.fixture
def solid_image():
    return _solid


@pytest.fixture
def gradient_image():
    """Obraz 16x16 z różnymi barwami i jasnościami."""
    w = h = 16
    pixels = []
    for y in range(h):
        for x in range(w):
            pixels.append((x * 16, y * 16, (x * y) % 256, 255))
    return RasterImage(w, h, pixels)
