import logging

from .color_models import hsl_to_pixel, lightness_bucket, rgb_to_hsl
from .constants import LEVELS, MAX_LEVEL, OPAQUE

logger = logging.getLogger(__name__)


def compute_histogram(image):
    """
    Zwraca histogram (lista LEVELS elementów) zliczający wystąpienia jasności L (HSL).
    Każdy piksel jest odwiedzany dokładnie raz; obraz nie jest modyfikowany.
    """
    hist = [0] * LEVELS
    for x, y in image.coords():
        _h, _s, l = rgb_to_hsl(*image.normalized(x, y))
        hist[lightness_bucket(l)] += 1
    return hist


def equalize_histogram(hist, total):
    """
    Histogram -> tablica przemapowania jasności (stara -> nowa, 0..MAX_LEVEL).
    Normalizacja do rozkładu, dystrybuanta (suma narastająco), potem
    zaokrąglenie w górę od połówki. Wynik jest niemalejący.
    """
    if len(hist) != LEVELS:
        raise ValueError(f"Histogram musi mieć {LEVELS} elementów, ma {len(hist)}.")
    if total <= 0:
        raise ValueError("Liczba pikseli musi być > 0.")

    # CDF (dystrybuanta)
    mapping = [0] * LEVELS
    cdf = 0.0
    for i in range(LEVELS):
        cdf += hist[i] / total
        v = int(cdf * MAX_LEVEL + 0.5)
        if v > MAX_LEVEL:
            v = MAX_LEVEL
        mapping[i] = v
    return mapping


def histogram_equalize(image):
    """
    Wyrównanie histogramu na składowej L (HSL).
    Barwa i nasycenie przechodzą bez zmian; wynik to nowy obraz (alfa nieprzezroczysta).
    """
    # 1. przebieg: histogram
    hist = compute_histogram(image)
    total = image.size
    logger.debug(
        "Histogram policzony: %d pikseli, %d niepustych kubełków",
        total,
        sum(1 for c in hist if c),
    )

    mapping = equalize_histogram(hist, total)

    # 2. przebieg: podmiana jasności
    out = []
    for x, y in image.coords():
        h, s, l = rgb_to_hsl(*image.normalized(x, y))
        l = mapping[lightness_bucket(l)] / MAX_LEVEL
        r, g, b = hsl_to_pixel(h, s, l)
        out.append((r, g, b, OPAQUE))
    logger.debug("Wyrównanie histogramu zakończone")
    return image.with_pixels(out)
