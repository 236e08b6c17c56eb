import argparse
import logging
import sys

from PIL import UnidentifiedImageError

from .constants import DEFAULT_OPERATION, OUTPUT_FORMATS
from .filters import FilterError, apply_filter, available_filters, resolve_filter
from .io import output_path, read_image, write_image

logger = logging.getLogger("rasterfx")


class _UsageError(Exception):
    pass


class _Parser(argparse.ArgumentParser):
    # błędne flagi -> pomoc i wyjście bez kodu błędu, zamiast exit(2)
    def error(self, message):
        raise _UsageError(message)


def build_parser():
    parser = _Parser(
        prog="rasterfx",
        add_help=False,
        description="Wczytuje obraz, stosuje filtr pikselowy i zapisuje wynik jako PNG/JPEG.",
    )
    parser.add_argument(
        "-img", "--img", dest="img", default="",
        help="plik obrazu do wczytania i przetworzenia",
    )
    parser.add_argument(
        "-fmt", "--fmt", dest="fmt", default="",
        help="format wyjściowy: png lub jpg",
    )
    parser.add_argument(
        "-out", "--out", dest="out", default="",
        help="nazwa pliku wyjściowego bez rozszerzenia .png/.jpeg",
    )
    parser.add_argument(
        "-op", "--op", dest="op", default=DEFAULT_OPERATION,
        help="operacja: " + ", ".join(available_filters()),
    )
    parser.add_argument(
        "-h", "--help", action="store_true", help="pokaż tę pomoc"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="logi diagnostyczne (DEBUG)"
    )
    return parser


def main(argv=None):
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except _UsageError as e:
        print(f"{parser.prog}: {e}")
        parser.print_help()
        return 0

    if args.help or not args.img or not args.out or args.fmt not in OUTPUT_FORMATS:
        parser.print_help()
        return 0

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        # nazwa operacji sprawdzana przed wczytaniem obrazu
        kind = resolve_filter(args.op)
        image = read_image(args.img)
        result = apply_filter(kind, image)
        path = output_path(args.out, args.fmt)
        write_image(path, result, args.fmt)
    except (OSError, UnidentifiedImageError, FilterError) as e:
        logger.error("%s", e)
        return 1

    logger.info("Zapisano: %s", path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
