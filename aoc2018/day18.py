"""Lumber collection area: a cellular automaton of open ground, trees and lumberyards."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from enum import Enum
from pathlib import Path

SIZE = 50


class Acre(Enum):
    OPEN_GROUND = "."
    TREE = "|"
    LUMBERYARD = "#"


_SYMBOLS = {acre.value: acre for acre in Acre}

Grid = list[list[Acre]]


def parse_area(text: str, size: int = SIZE) -> Grid:
    """Parse a map into a size x size grid; missing or unknown acres are open ground."""
    grid = [[Acre.OPEN_GROUND] * size for _ in range(size)]
    for y, line in enumerate(text.splitlines()):
        if y >= size:
            raise ValueError(f"map has more than {size} rows")
        if len(line) > size:
            raise ValueError(f"row {y} has more than {size} acres")
        for x, char in enumerate(line):
            acre = _SYMBOLS.get(char)
            if acre is not None:
                grid[y][x] = acre
    return grid


def count_adjacent(grid: Sequence[Sequence[Acre]], kind: Acre, x: int, y: int) -> int:
    """Number of the up to eight acres around (x, y) that are of `kind`."""
    height = len(grid)
    width = len(grid[0]) if grid else 0
    return sum(
        1
        for dy in (-1, 0, 1)
        for dx in (-1, 0, 1)
        if (dx or dy)
        and 0 <= y + dy < height
        and 0 <= x + dx < width
        and grid[y + dy][x + dx] is kind
    )


def _next_acre(grid: Sequence[Sequence[Acre]], acre: Acre, x: int, y: int) -> Acre:
    if acre is Acre.OPEN_GROUND:
        if count_adjacent(grid, Acre.TREE, x, y) >= 3:
            return Acre.TREE
        return Acre.OPEN_GROUND
    if acre is Acre.TREE:
        if count_adjacent(grid, Acre.LUMBERYARD, x, y) >= 3:
            return Acre.LUMBERYARD
        return Acre.TREE
    if (
        count_adjacent(grid, Acre.LUMBERYARD, x, y) >= 1
        and count_adjacent(grid, Acre.TREE, x, y) >= 1
    ):
        return Acre.LUMBERYARD
    return Acre.OPEN_GROUND


def simulate(grid: Sequence[Sequence[Acre]], minutes: int) -> tuple[int, int]:
    """Run the area for some minutes; return the resource value and the cycle length.

    The resource value is trees times lumberyards after the last minute (zero if
    no minute ran). The cycle length is found from minute 1500 on, as the gap
    between two minutes reaching the highest value seen between minutes 1000 and
    1500; it stays zero or negative when the run is too short to find it.
    """
    current = [list(row) for row in grid]
    woods = lumberyards = 0
    highest = 0
    frequency = 0
    for minute in range(1, minutes + 1):
        current = [
            [_next_acre(current, acre, x, y) for x, acre in enumerate(row)]
            for y, row in enumerate(current)
        ]
        woods = sum(row.count(Acre.TREE) for row in current)
        lumberyards = sum(row.count(Acre.LUMBERYARD) for row in current)
        value = woods * lumberyards

        if 1000 < minute < 1500:
            highest = max(highest, value)
        if minute >= 1500 and frequency <= 0 and value == highest:
            frequency = -minute if frequency == 0 else minute + frequency
    return woods * lumberyards, frequency


def render(grid: Sequence[Sequence[Acre]]) -> str:
    """Draw the grid with '.', '|' and '#'."""
    return "\n".join("".join(acre.value for acre in row) for row in grid)


def main(argv: Sequence[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        raise SystemExit("No filepath passed")
    try:
        grid = parse_area(Path(args[0]).read_text())
    except (OSError, ValueError) as err:
        raise SystemExit(str(err)) from err
    value, _ = simulate(grid, 10)
    print("Resource value for Part1 is", value)
    value2, frequency = simulate(grid, 2008)
    print("Resource value is for Part2", value2, "and frequency is", frequency)


if __name__ == "__main__":
    main()