"""CLI entrypoint for the word grid generator."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from wordgrid.core.constants import ALPHABET_LEN, DEFAULT_DICTIONARY_PATH
from wordgrid.core.exceptions import ConfigurationError, DictionaryLoadError, ValidationError
from wordgrid.core.models import GridConfig
from wordgrid.engine.generator import WordGridGenerator
from wordgrid.utils.logger import configure_logging, get_logger
from wordgrid.utils.pretty import print_grids

LOGGER = get_logger("wordgrid.cli")


def dimension(value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordgrid",
        description="Word grid generator: every row and column is a dictionary word",
    )
    parser.add_argument("width", type=dimension, metavar="WIDTH", help="Grid width in cells")
    parser.add_argument(
        "height",
        type=dimension,
        metavar="HEIGHT",
        help=f"Grid height in cells (WIDTH x HEIGHT must be <= {ALPHABET_LEN})",
    )
    parser.add_argument(
        "-d",
        "--dictionary",
        type=Path,
        default=DEFAULT_DICTIONARY_PATH,
        help=f"Dictionary file, one word per line (defaults to {DEFAULT_DICTIONARY_PATH})",
    )
    parser.add_argument(
        "-n",
        "--no-apostrophe",
        action="store_true",
        help="Keep apostrophes, so words containing them are skipped instead of stripped",
    )
    parser.add_argument(
        "-s",
        "--small-words",
        action="store_true",
        help="Don't restrict small (<= 2 letters) words to the internal list",
    )
    parser.add_argument(
        "--max-grids",
        type=int,
        default=None,
        metavar="N",
        help="Stop after printing N grids",
    )
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Re-check every grid against the dictionary before printing it",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.WARNING)
    configure_logging(level, stream=sys.stderr)

    config = GridConfig(
        width=args.width,
        height=args.height,
        dictionary_path=args.dictionary,
        allow_apostrophes=args.no_apostrophe,
        restrict_short_words=not args.small_words,
        max_grids=args.max_grids,
        validate_grids=args.validate,
    )
    try:
        generator = WordGridGenerator(config)
    except ConfigurationError as exc:
        parser.error(str(exc))

    try:
        count = print_grids(generator.generate())
    except DictionaryLoadError as exc:
        LOGGER.error("%s", exc)
        return 1
    except ValidationError as exc:
        LOGGER.error("%s", exc)
        return 1

    LOGGER.info("Printed %d grids", count)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
