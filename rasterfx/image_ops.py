# rasterfx/image_ops.py
from .color_models import hsl_to_pixel, rgb_to_hsl
from .constants import OPAQUE
from .image import RasterImage


def extract_red_channel(image: RasterImage) -> RasterImage:
    """Zostawia tylko kanał R (G=B=0, alfa nieprzezroczysta)."""
    return image.with_pixels([(r, 0, 0, OPAQUE) for r, _g, _b, _a in image.pixels])


def extract_green_channel(image: RasterImage) -> RasterImage:
    """Zostawia tylko kanał G."""
    return image.with_pixels([(0, g, 0, OPAQUE) for _r, g, _b, _a in image.pixels])


def extract_blue_channel(image: RasterImage) -> RasterImage:
    """Zostawia tylko kanał B."""
    return image.with_pixels([(0, 0, b, OPAQUE) for _r, _g, b, _a in image.pixels])


def to_grayscale(image: RasterImage) -> RasterImage:
    """Skala szarości – jasność L z HSL (R=G=B=L)."""
    out = []
    for x, y in image.coords():
        _h, _s, l = rgb_to_hsl(*image.normalized(x, y))
        v, _, _ = hsl_to_pixel(0.0, 0.0, l)
        out.append((v, v, v, OPAQUE))
    return image.with_pixels(out)
