import logging
from enum import Enum
from typing import List, Union

from .histogram import histogram_equalize
from .image import RasterImage
from .image_ops import (
    extract_blue_channel,
    extract_green_channel,
    extract_red_channel,
    to_grayscale,
)

logger = logging.getLogger(__name__)


class FilterError(ValueError):
    """Błąd konfiguracji filtra (zgłaszany zanim ruszymy piksele)."""


class UnknownOperationError(FilterError):
    def __init__(self, name):
        self.name = name
        super().__init__(
            f"Nieznana operacja: {name!r}. Dostępne: {', '.join(available_filters())}"
        )


class FilterNotImplementedError(FilterError, NotImplementedError):
    pass


class FilterKind(Enum):
    EXTRACT_RED = "ExtractRedChannel"
    EXTRACT_GREEN = "ExtractGreenChannel"
    EXTRACT_BLUE = "ExtractBlueChannel"
    HISTOGRAM_NORMALIZATION = "HistogramNormalization"
    SOBEL = "FindEdgesWithSobel"
    GRAYSCALE = "ConvertToGrayscale"


def available_filters() -> List[str]:
    return sorted(k.value for k in FilterKind)


def resolve_filter(name: Union[str, FilterKind]) -> FilterKind:
    if isinstance(name, FilterKind):
        return name
    try:
        return FilterKind(name)
    except ValueError:
        raise UnknownOperationError(name) from None


def find_edges_with_sobel(image: RasterImage) -> RasterImage:
    raise FilterNotImplementedError("Wykrywanie krawędzi (Sobel) nie jest zaimplementowane.")


def apply_filter(name: Union[str, FilterKind], image: RasterImage) -> RasterImage:
    """
    Uruchamia filtr o podanej nazwie na obrazie i zwraca NOWY obraz
    o tych samych granicach. Wejście nie jest modyfikowane.
    """
    kind = resolve_filter(name)
    logger.info("Filtr %s na obrazie %dx%d", kind.value, image.width, image.height)

    if kind is FilterKind.EXTRACT_RED:
        return extract_red_channel(image)
    if kind is FilterKind.EXTRACT_GREEN:
        return extract_green_channel(image)
    if kind is FilterKind.EXTRACT_BLUE:
        return extract_blue_channel(image)
    if kind is FilterKind.HISTOGRAM_NORMALIZATION:
        return histogram_equalize(image)
    if kind is FilterKind.GRAYSCALE:
        return to_grayscale(image)
    # FilterKind.SOBEL
    return find_edges_with_sobel(image)
