#!/usr/bin/env python3
"""
Segment Intersection - Version 1.0

Reads two coordinate pairs from standard input and prints the segment they
define, nearer endpoint first.
"""
__version__ = "1.0"

import logging
import sys
from typing import Optional, TextIO, Tuple

from domain.geometry.errors import GeometryError
from domain.geometry.point import Point
from domain.geometry.segment import Segment

logger = logging.getLogger(__name__)


def read_points(stream: TextIO) -> Tuple[Point, Point]:
    """
    Read two points from whitespace-separated coordinates.

    Raises:
        ValueError: If fewer than four numbers are available
    """
    tokens = stream.read().split()
    if len(tokens) < 4:
        raise ValueError(f"Expected four coordinates, got {len(tokens)}")
    x1, y1, x2, y2 = (float(token) for token in tokens[:4])
    return Point(x=x1, y=y1), Point(x=x2, y=y2)


def main(stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> int:
    """Run the driver and return the process exit status."""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    if stdin is None:
        stdin = sys.stdin
    if stdout is None:
        stdout = sys.stdout

    try:
        a, b = read_points(stdin)
        segment = Segment(a=a, b=b)
    except GeometryError as e:
        logger.error(str(e))
        print(e.tag, file=stdout)
        return 1
    except ValueError as e:
        logger.error(f"Invalid input: {str(e)}")
        return 1

    print(segment, file=stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
