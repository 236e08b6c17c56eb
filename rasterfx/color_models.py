import math

from .constants import MAX_LEVEL


def _clamp(value, min_value, max_value):
    return max(min_value, min(max_value, value))


def normalize(sample):
    """Próbka kanału (0..MAX_LEVEL) -> float 0.0-1.0."""
    return sample / float(MAX_LEVEL)


def quantize(value):
    """
    Float 0.0-1.0 -> próbka kanału (0..MAX_LEVEL).
    Zaokrąglanie "w górę od połówki" (floor(v * MAX + 0.5)), nie round() bankierski.
    """
    q = int(math.floor(value * MAX_LEVEL + 0.5))
    return _clamp(q, 0, MAX_LEVEL)


def lightness_bucket(l):
    """Jasność 0.0-1.0 -> indeks kubełka histogramu (obcięcie, nie zaokrąglenie)."""
    # l == 1.0 (albo minimalnie więcej po błędach float) trafia do ostatniego kubełka
    return _clamp(int(math.floor(l * MAX_LEVEL)), 0, MAX_LEVEL)


def rgb_to_hsl(r, g, b):
    """
    RGB (każdy kanał 0.0-1.0) -> HSL (każda składowa 0.0-1.0)
    Zwraca (H, S, L) jako floaty. Przy remisie kanałów wygrywa kolejność R -> G -> B.
    """
    mx = max(r, g, b)
    mn = min(r, g, b)
    l = (mx + mn) / 2.0

    if mx == mn:
        # achromatyczny
        return 0.0, 0.0, l

    d = mx - mn
    if l > 0.5:
        s = d / (2.0 - mx - mn)
    else:
        s = d / (mx + mn)

    if mx == r:
        h = (g - b) / d
        if g < b:
            h += 6.0
    elif mx == g:
        h = (b - r) / d + 2.0
    else:
        h = (r - g) / d + 4.0
    h /= 6.0

    return h, s, l


def _hue_to_channel(p, q, t):
    if t < 0.0:
        t += 1.0
    if t > 1.0:
        t -= 1.0

    if t < 1.0 / 6.0:
        return p + (q - p) * 6.0 * t
    if t < 1.0 / 2.0:
        return q
    if t < 2.0 / 3.0:
        return p + (q - p) * (2.0 / 3.0 - t) * 6.0
    return p


def hsl_to_rgb(h, s, l):
    """
    HSL (0.0-1.0) -> RGB (każdy kanał 0.0-1.0)
    Barwa jest brana modulo 1, więc h i h+1 dają ten sam wynik.
    """
    if s == 0.0:
        # achromatyczny
        return l, l, l

    h = h % 1.0
    if l < 0.5:
        q = l * (1.0 + s)
    else:
        q = l + s - l * s
    p = 2.0 * l - q

    r = _hue_to_channel(p, q, h + 1.0 / 3.0)
    g = _hue_to_channel(p, q, h)
    b = _hue_to_channel(p, q, h - 1.0 / 3.0)
    return r, g, b


def hsl_to_pixel(h, s, l):
    """(H, S, L) -> surowe próbki (R, G, B) jako inty 0..MAX_LEVEL."""
    r, g, b = hsl_to_rgb(h, s, l)
    return quantize(r), quantize(g), quantize(b)
