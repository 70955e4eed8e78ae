"""Command line entry point: read a farm on standard input and print the moves."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable

from .graph import prepare
from .model import LeminError
from .parser import iter_lines, parse_farm
from .routes import build_ways, format_input, format_turn, launch_ants


def solve(lines: Iterable[str]) -> str:
    """Return the full output for a farm description: the input, then every turn.

    Raises LeminError for invalid or unsolvable input.
    """
    farm = parse_farm(lines)
    prepare(farm)
    ways = build_ways(farm)
    parts = [format_input(farm)]
    parts.extend(f"{format_turn(moves)}\n" for moves in launch_ants(farm, ways))
    return "".join(parts)


def main(argv: list[str] | None = None) -> int:
    """Run the solver on standard input; print ERROR and return 1 on bad input."""
    parser = argparse.ArgumentParser(
        prog="antfarm",
        description="Move ants through a farm read from standard input.",
    )
    parser.parse_args(sys.argv[1:] if argv is None else argv)
    try:
        output = solve(iter_lines(sys.stdin))
    except LeminError:
        sys.stdout.write("ERROR\n")
        return 1
    sys.stdout.write(output)
    return 0