from dataclasses import dataclass
from typing import Iterator, List, Tuple

from .color_models import normalize

Pixel = Tuple[int, int, int, int]


@dataclass
class RasterImage:
    """Obraz w pamięci: siatka pikseli (R,G,B,A) z jawnymi granicami."""

    width: int
    height: int
    pixels: List[Pixel]  # długość = width * height, skanline'ami od góry

    # lewy-górny róg (granice to [min_x, max_x) x [min_y, max_y))
    min_x: int = 0
    min_y: int = 0

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Nieprawidłowy rozmiar obrazu: {self.width}x{self.height}"
            )
        if len(self.pixels) != self.width * self.height:
            raise ValueError(
                f"Liczba pikseli ({len(self.pixels)}) nie zgadza się "
                f"z rozmiarem {self.width}x{self.height}"
            )

    # ---------- granice ----------
    @property
    def max_x(self) -> int:
        return self.min_x + self.width

    @property
    def max_y(self) -> int:
        return self.min_y + self.height

    @property
    def bounds(self) -> Tuple[int, int, int, int]:
        return self.min_x, self.min_y, self.max_x, self.max_y

    @property
    def size(self) -> int:
        return self.width * self.height

    # ---------- odczyt ----------
    def _index(self, x: int, y: int) -> int:
        if not (self.min_x <= x < self.max_x and self.min_y <= y < self.max_y):
            raise IndexError(f"Punkt ({x}, {y}) poza granicami {self.bounds}")
        return (y - self.min_y) * self.width + (x - self.min_x)

    def at(self, x: int, y: int) -> Pixel:
        return self.pixels[self._index(x, y)]

    def rgb(self, x: int, y: int) -> Tuple[int, int, int]:
        r, g, b, _a = self.at(x, y)
        return r, g, b

    def normalized(self, x: int, y: int) -> Tuple[float, float, float]:
        r, g, b = self.rgb(x, y)
        return normalize(r), normalize(g), normalize(b)

    def coords(self) -> Iterator[Tuple[int, int]]:
        """Kolejne (x, y) wierszami – ta sama kolejność co w `pixels`."""
        for y in range(self.min_y, self.max_y):
            for x in range(self.min_x, self.max_x):
                yield x, y

    # ---------- nowe obrazy o tych samych granicach ----------
    def with_pixels(self, pixels: List[Pixel]) -> "RasterImage":
        return RasterImage(
            self.width, self.height, list(pixels), min_x=self.min_x, min_y=self.min_y
        )
