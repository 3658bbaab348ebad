"""Read shape records from a text file.

Each line holds a one character type tag followed by whitespace separated
numbers::

    C <radius>
    T <side_a> <side_b> <side_c>
    R <length> <width>
    S <side>
"""

import logging
import re
from typing import Callable, Iterable

from . import Circle, Rectangle, Shape, Square, Triangle

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "shapes.txt"

FIELD_COUNTS = {
    "C": 1,
    "T": 3,
    "R": 2,
    "S": 1,
}

NUMBER = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

CONSTRUCTORS: dict[str, Callable[..., Shape]] = {
    "C": Circle,
    "T": Triangle,
    "R": Rectangle,
    "S": Square,
}


class FatalInputError(Exception):
    """The input file could not be opened."""

    def __init__(self, path: str):
        super().__init__(f"Unable to open shapes file: {path}")
        self.path = path


def read_fields(text: str, count: int) -> tuple[list[float], bool]:
    """Read ``count`` numbers from the front of ``text``, like a C++ stream.

    Each number is the longest numeric prefix after leading whitespace, so
    ``3abc`` reads 3 and the next read starts at ``abc``. Reading stops at
    the first field with no numeric prefix; that field and every one after
    it stays 0.0. Returns the values and whether all of them were read.
    """
    values = [0.0] * count
    position = 0
    for index in range(count):
        match = NUMBER.match(text, position)
        if match is None:
            return values, False
        values[index] = float(match.group(1))
        position = match.end()
    return values, True


def parse_line(line: str) -> Shape | None:
    stripped = line.strip()
    if not stripped:
        return None

    # The tag is a single character, so "C2" reads the same as "C 2".
    tag = stripped[0]
    if tag not in CONSTRUCTORS:
        logger.warning("Unknown shape: %s", tag)
        return None

    values, complete = read_fields(stripped[1:], FIELD_COUNTS[tag])
    if not complete:
        logger.warning("Malformed numeric fields, using 0 for unread values: %r", stripped)
    return CONSTRUCTORS[tag](*values)


def parse_lines(lines: Iterable[str]) -> list[Shape]:
    shapes = []
    for line in lines:
        shape = parse_line(line)
        if shape is not None:
            shapes.append(shape)
    return shapes


def load_list(path: str = DEFAULT_FILENAME) -> list[Shape]:
    """Load every recognised shape from ``path``, in file order.

    Raises FatalInputError if the file cannot be opened.
    """
    # latin-1 maps every byte to one character, so no line fails to decode.
    try:
        infile = open(path, encoding="latin-1")
    except OSError as exc:
        raise FatalInputError(str(path)) from exc

    with infile:
        shapes = parse_lines(infile)

    logger.debug("Loaded %d shapes from %s", len(shapes), path)
    return shapes
