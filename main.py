from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from config import settings
from gui import ImageSink
from puzzle import InvalidDate, solve_for_date
from render import print_board

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="calendar-puzzle",
        description="Count (and draw) every tiling of the calendar board for a date.",
    )
    parser.add_argument("month", nargs="?", type=int, help="month, 1-12")
    parser.add_argument("day", nargs="?", type=int, help="day, 1-31")
    parser.add_argument(
        "--no-render",
        dest="render",
        action="store_false",
        default=settings.render,
        help="only print the number of solutions",
    )
    parser.add_argument(
        "--image-dir",
        default=settings.image_dir,
        help="also save every solution as a PNG in this directory",
    )
    parser.add_argument("--log-level", default=settings.log_level)
    return parser


def read_date(line: str) -> tuple[int, int]:
    """Parse 'MONTH DAY' from one line of input."""
    parts = line.split()
    if len(parts) != 2:
        raise ValueError(f"expected two integers, got {line.strip()!r}")
    return int(parts[0]), int(parts[1])


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.month is None:
            month, day = read_date(sys.stdin.readline())
        elif args.day is None:
            parser.error("month and day must be given together")
        else:
            month, day = args.month, args.day
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    renderers = []
    if args.render:
        renderers.append(print_board)
    if args.image_dir:
        renderers.append(ImageSink(args.image_dir, month, day))

    def emit(grid):
        for renderer in renderers:
            renderer(grid)

    try:
        count = solve_for_date(month, day, render=bool(renderers), renderer=emit)
    except InvalidDate as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    logger.info("%d solutions for %d/%d", count, month, day)
    print(f"{count} Solutions found")
    return 0


if __name__ == "__main__":
    sys.exit(main())
