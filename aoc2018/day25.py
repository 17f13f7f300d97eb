"""Four-dimensional constellations of fixed points."""

from __future__ import annotations

import sys
from collections import defaultdict, deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from itertools import combinations
from pathlib import Path

LINK_DISTANCE = 3


@dataclass(frozen=True)
class Point:
    x: int
    y: int
    z: int
    t: int

    def distance(self, other: Point) -> int:
        """Manhattan distance in four dimensions."""
        return (
            abs(self.x - other.x)
            + abs(self.y - other.y)
            + abs(self.z - other.z)
            + abs(self.t - other.t)
        )


def parse_points(text: str) -> list[Point]:
    """Parse 'x,y,z,t' lines; blank lines are ignored."""
    points = []
    for line in text.splitlines():
        if not line.strip():
            continue
        fields = line.split(",")
        if len(fields) != 4:
            raise ValueError(f"Can't parse point: {line!r}")
        try:
            points.append(Point(*(int(field) for field in fields)))
        except ValueError as err:
            raise ValueError(f"Can't parse point: {line!r}") from err
    return points


def count_constellations(points: Iterable[Point]) -> int:
    """Number of groups of points linked by chains of distance at most three."""
    unique = list(dict.fromkeys(points))
    neighbours: defaultdict[Point, list[Point]] = defaultdict(list)
    for first, second in combinations(unique, 2):
        if first.distance(second) <= LINK_DISTANCE:
            neighbours[first].append(second)
            neighbours[second].append(first)

    seen: set[Point] = set()
    count = 0
    for start in unique:
        if start in seen:
            continue
        count += 1
        seen.add(start)
        queue = deque([start])
        while queue:
            for neighbour in neighbours[queue.popleft()]:
                if neighbour not in seen:
                    seen.add(neighbour)
                    queue.append(neighbour)
    return count


def main(argv: Sequence[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        raise SystemExit("No filepath is passed")
    try:
        points = parse_points(Path(args[0]).read_text())
    except (OSError, ValueError) as err:
        raise SystemExit(str(err)) from err
    print(count_constellations(points))


if __name__ == "__main__":
    main()