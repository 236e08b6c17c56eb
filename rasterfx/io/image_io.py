# rasterfx/io/image_io.py
import logging

try:
    from PIL import Image
except ImportError as e:
    raise ImportError("Brak biblioteki Pillow. Zainstaluj: pip install Pillow") from e

from ..constants import JPEG_QUALITY, OUTPUT_EXTENSIONS, OUTPUT_FORMATS
from ..image import RasterImage

logger = logging.getLogger(__name__)


def _flattened(img):
    # getdata() jest przestarzałe w nowszym Pillow
    if hasattr(img, "get_flattened_data"):
        return list(img.get_flattened_data())
    return list(img.getdata())


def _to_8bit(img):
    """16-bitowa skala szarości (I;16*, I) -> L, skalowanie 0..65535 -> 0..255."""
    if img.mode.startswith("I;16") or img.mode == "I":
        # zaokrąglenie w górę od połówki, jak w quantize()
        return img.convert("I").point(lambda v: v / 257 + 0.5).convert("L")
    return img


def read_image(path: str) -> RasterImage:
    """PNG/JPEG/... -> RasterImage (8 bitów na kanał, RGBA)."""
    with Image.open(path) as src:
        mode = src.mode
        img = _to_8bit(src).convert("RGBA")
    w, h = img.size
    data = _flattened(img)  # [(r,g,b,a)...] wierszami od góry
    logger.debug("Wczytano %s: %dx%d (%s)", path, w, h, mode)
    return RasterImage(w, h, data)


def output_path(name: str, fmt: str) -> str:
    """Nazwa bez rozszerzenia + format -> ścieżka (jpg zapisujemy jako .jpeg)."""
    if fmt not in OUTPUT_FORMATS:
        raise ValueError(f"Nieobsługiwany format wyjściowy: {fmt!r}")
    return name + OUTPUT_EXTENSIONS[fmt]


def write_image(path: str, image: RasterImage, fmt: str):
    if fmt not in OUTPUT_FORMATS:
        raise ValueError(f"Nieobsługiwany format wyjściowy: {fmt!r}")
    img = Image.new("RGBA", (image.width, image.height))
    img.putdata(image.pixels)
    if fmt == "png":
        img.save(path, format="PNG")
    else:
        # JPEG nie ma kanału alfa
        img.convert("RGB").save(path, format="JPEG", quality=JPEG_QUALITY)
    logger.debug("Zapisano %s (%s)", path, fmt)
