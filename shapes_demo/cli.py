"""Command line entry point: load shapes, print the area report."""

import argparse
import logging
import sys

from .parser import DEFAULT_FILENAME, FatalInputError, load_list
from .report import build_report

logger = logging.getLogger(__name__)

EXIT_FAILURE = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shapes-demo",
        description="Sort shapes from a text file by area and print totals.",
    )
    parser.add_argument("path", nargs="?", default=DEFAULT_FILENAME)
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
        stream=sys.stderr,
    )

    try:
        shapes = load_list(args.path)
    except FatalInputError as exc:
        logger.error("%s", exc)
        return EXIT_FAILURE

    for line in build_report(shapes):
        print(line)
    return 0
