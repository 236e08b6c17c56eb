from .image import RasterImage
from .color_models import rgb_to_hsl, hsl_to_rgb
from .histogram import compute_histogram, equalize_histogram, histogram_equalize
from .filters import (
    FilterError,
    FilterKind,
    FilterNotImplementedError,
    UnknownOperationError,
    apply_filter,
    available_filters,
    resolve_filter,
)

__all__ = [
    "RasterImage",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "compute_histogram",
    "equalize_histogram",
    "histogram_equalize",
    "FilterError",
    "FilterKind",
    "FilterNotImplementedError",
    "UnknownOperationError",
    "apply_filter",
    "available_filters",
    "resolve_filter",
]
