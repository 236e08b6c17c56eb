# rasterfx/constants.py

# Szerokość próbki kanału: 8 bitów na stałe (histogram ma LEVELS kubełków)
BIT_DEPTH = 8
MAX_LEVEL = (1 << BIT_DEPTH) - 1
LEVELS = MAX_LEVEL + 1

OPAQUE = MAX_LEVEL

JPEG_QUALITY = 90

DEFAULT_OPERATION = "HistogramNormalization"

OUTPUT_FORMATS = ("png", "jpg")
OUTPUT_EXTENSIONS = {"png": ".png", "jpg": ".jpeg"}
