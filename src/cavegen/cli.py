#!/usr/bin/env python3
# cavegen <width> <height> <numWalls> <numCollapsingSpots> [randomSeed]

import argparse
import logging
import sys
from typing import List, Optional

from .config import CaveConfig
from .errors import ConfigError, GenerationError
from .mapgen.generator import generate_cave

log = logging.getLogger("cavegen")

EXIT_USAGE = 1
EXIT_GENERATION = 2

def positive_int(name: str):
    def parse(s: str) -> int:
        try:
            v = int(s)
        except ValueError:
            raise argparse.ArgumentTypeError(f"{name} must be integer > 0")
        if v <= 0:
            raise argparse.ArgumentTypeError(f"{name} must be > 0")
        return v
    return parse

def non_negative_int(name: str):
    def parse(s: str) -> int:
        try:
            v = int(s)
        except ValueError:
            raise argparse.ArgumentTypeError(f"{name} must be integer >= 0")
        if v < 0:
            raise argparse.ArgumentTypeError(f"{name} must be >= 0")
        return v
    return parse

def parse_seed(s: Optional[str]) -> int:
    if s is None:
        return 0
    try:
        return int(s)
    except ValueError:
        log.warning("Invalid seed; using random seed.")
        return 0

class _Parser(argparse.ArgumentParser):
    # argparse exits with 2 on bad input; usage errors here exit with 1.
    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(EXIT_USAGE, f"ERROR: {message}\n")

def build_parser() -> argparse.ArgumentParser:
    p = _Parser(prog="cavegen", description="Generate a cave field with walls and collapsing spots.")
    p.add_argument("width", type=positive_int("width"))
    p.add_argument("height", type=positive_int("height"))
    p.add_argument("num_walls", metavar="numWalls", type=non_negative_int("numWalls"))
    p.add_argument("num_collapsing", metavar="numCollapsingSpots",
                   type=non_negative_int("numCollapsingSpots"))
    p.add_argument("seed", metavar="randomSeed", nargs="?", default=None,
                   help="0 or omitted: random")
    p.add_argument("--no-summary", action="store_true", help="print only the field")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return p

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        cfg = CaveConfig(args.width, args.height, args.num_walls, args.num_collapsing,
                         seed=parse_seed(args.seed))
    except ConfigError as ex:
        print(f"ERROR: {ex}", file=sys.stderr)
        return EXIT_USAGE

    try:
        result = generate_cave(cfg)
    except GenerationError as ex:
        print(f"ERROR: {ex}", file=sys.stderr)
        return EXIT_GENERATION

    if not args.no_summary:
        print(result.summary())
    sys.stdout.write(result.render())
    return 0

if __name__ == "__main__":
    sys.exit(main())
