"""Fuel cell grid: the square of cells with the largest total power."""

from __future__ import annotations

import sys
from collections.abc import Sequence

SERIAL_NUMBER = 2187
GRID_SIZE = 300


def cell_value(x: int, y: int, serial: int = SERIAL_NUMBER) -> int:
    """Power level of the fuel cell at 1-based coordinates (x, y)."""
    rack_id = x + 10
    total = (rack_id * y + serial) * rack_id
    hundreds = 0 if total < 100 else total // 100 % 10
    return hundreds - 5


def power_grid(serial: int = SERIAL_NUMBER, size: int = GRID_SIZE) -> list[list[int]]:
    """Grid of power levels, indexed as grid[y - 1][x - 1]."""
    return [
        [cell_value(x, y, serial) for x in range(1, size + 1)]
        for y in range(1, size + 1)
    ]


def _summed_area(grid: Sequence[Sequence[int]]) -> list[list[int]]:
    """Table where entry [i][j] is the sum of grid rows < i and columns < j."""
    width = len(grid[0]) if grid else 0
    table = [[0] * (width + 1)]
    for row in grid:
        running = 0
        above = table[-1]
        line = [0]
        for column, value in enumerate(row):
            running += value
            line.append(above[column + 1] + running)
        table.append(line)
    return table


def _best_in_table(table: list[list[int]], grid_size: int, size: int) -> tuple[int, int, int]:
    lower = table[size]
    best = lower[size]
    best_x = best_y = 1
    for top in range(grid_size - size + 1):
        upper, lower = table[top], table[top + size]
        for left in range(grid_size - size + 1):
            right = left + size
            power = lower[right] - upper[right] - lower[left] + upper[left]
            if power > best:
                best, best_x, best_y = power, left + 1, top + 1
    return best, best_x, best_y


def _check(grid: Sequence[Sequence[int]], size: int) -> int:
    grid_size = len(grid)
    if grid_size == 0 or any(len(row) != grid_size for row in grid):
        raise ValueError("grid must be a non-empty square")
    if not 1 <= size <= grid_size:
        raise ValueError(f"square size must be between 1 and {grid_size}")
    return grid_size


def best_square(grid: Sequence[Sequence[int]], size: int) -> tuple[int, int, int]:
    """Return the largest power of a size x size square and its top-left (x, y).

    Squares are scanned row by row; on equal power the first one found wins.
    """
    grid_size = _check(grid, size)
    return _best_in_table(_summed_area(grid), grid_size, size)


def coordinates(serial: int = SERIAL_NUMBER, size: int = 3) -> tuple[int, int, int]:
    """Return (x, y, size) of the best square; a size <= 0 searches every size."""
    grid = power_grid(serial)
    if size > 0:
        _, x, y = best_square(grid, size)
        return x, y, size

    table = _summed_area(grid)
    best = best_x = best_y = best_size = 0
    for square in range(1, GRID_SIZE + 1):
        power, x, y = _best_in_table(table, GRID_SIZE, square)
        if square == 1 or power > best:
            best, best_x, best_y, best_size = power, x, y, square
    return best_x, best_y, best_size


def main(argv: Sequence[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) > 1:
        raise SystemExit("Usage: day11 [serial number]")
    try:
        serial = int(args[0]) if args else SERIAL_NUMBER
    except ValueError as err:
        raise SystemExit(str(err)) from err
    x3, y3, _ = coordinates(serial, 3)
    print("The coordinates are", x3, y3, "for a square size of 3")
    x, y, size = coordinates(serial, -1)
    print("The coordinates are", x, y, "and max size is", size)


if __name__ == "__main__":
    main()