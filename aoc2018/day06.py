"""Chronal coordinates: largest finite Manhattan area and the safe region size."""

from __future__ import annotations

import sys
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

DEFAULT_LIMIT = 10000


@dataclass(frozen=True)
class Point:
    id: int
    x: int
    y: int


def parse_points(text: str) -> list[Point]:
    """Parse 'x, y' lines into points numbered in reading order."""
    points = []
    for index, line in enumerate(text.splitlines()):
        parts = line.split(",")
        if len(parts) != 2:
            raise ValueError(f"Can't parse point: {line!r}")
        try:
            x, y = (int(part.strip()) for part in parts)
        except ValueError as err:
            raise ValueError(f"Can't parse point: {line!r}") from err
        points.append(Point(index, x, y))
    return points


def distance(point: Point, row: int, column: int) -> int:
    """Manhattan distance between a point and a grid cell."""
    return abs(point.x - column) + abs(point.y - row)


def _closest(points: Sequence[Point], row: int, column: int) -> tuple[Point | None, int]:
    """Return the unique closest point (None on a tie) and the sum of distances."""
    best: Point | None = None
    best_distance = -1
    tie = False
    total = 0
    for point in points:
        dist = distance(point, row, column)
        total += dist
        if dist == best_distance:
            tie = True
        elif best_distance == -1 or dist < best_distance:
            tie = False
            best_distance = dist
            best = point
    return (None if tie else best), total


def area_sizes(points: Iterable[Point], limit: int = DEFAULT_LIMIT) -> tuple[int, int]:
    """Return the largest finite area and the size of the region closer than `limit`.

    The bounding box is extended by one cell on each side; any point owning a cell
    on that outer edge has an infinite area. Edge cells are counted in neither result.
    """
    points = list(points)
    if not points:
        raise ValueError("no points given")

    left = min(point.x for point in points) - 1
    right = max(point.x for point in points) + 1
    top = min(point.y for point in points) - 1
    bottom = max(point.y for point in points) + 1

    counts: Counter[int] = Counter()
    infinite: set[int] = set()
    region_size = 0

    for row in range(top, bottom + 1):
        for column in range(left, right + 1):
            closest, total = _closest(points, row, column)
            if row in (top, bottom) or column in (left, right):
                if closest is not None:
                    infinite.add(closest.id)
                continue
            if closest is not None:
                counts[closest.id] += 1
            if total < limit:
                region_size += 1

    largest = max(
        (count for point_id, count in counts.items() if point_id not in infinite),
        default=0,
    )
    return largest, region_size


def main(argv: Sequence[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        raise SystemExit("No filepath passed")
    try:
        largest, region = area_sizes(parse_points(Path(args[0]).read_text()))
    except (OSError, ValueError) as err:
        raise SystemExit(str(err)) from err
    print("Largest area is", largest, "and busiest area size is", region)


if __name__ == "__main__":
    main()