"""Moving lights: find the moment their positions spell a message."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace
from pathlib import Path

MAX_TIME = 15000

_PLANE = re.compile(
    r"position=<\s*(-|\s)(\d+),\s*(-|\s)(\d+)> velocity=<(-|\s)(\d), (-|\s)(\d)>"
)


@dataclass
class Plane:
    x: int
    y: int
    x_speed: int
    y_speed: int


def _signed(sign: str, digits: str) -> int:
    value = int(digits)
    return -value if sign == "-" else value


def parse_plane(line: str) -> Plane:
    """Parse a 'position=<x, y> velocity=<dx, dy>' line."""
    match = _PLANE.search(line)
    if match is None:
        raise ValueError(f"Can't parse plane: {line!r}")
    groups = match.groups()
    return Plane(*(_signed(groups[i], groups[i + 1]) for i in range(0, 8, 2)))


def find_message(planes: Iterable[Plane], max_time: int = MAX_TIME) -> tuple[list[Plane], int]:
    """Move copies of the planes until at least four columns hold four or more
    contiguous planes of the same, largest, height; return them and the time."""
    moving = [replace(plane) for plane in planes]
    for time in range(1, max_time + 1):
        columns: dict[int, tuple[int, int, int]] = {}
        for plane in moving:
            plane.x += plane.x_speed
            plane.y += plane.y_speed
            count, low, high = columns.get(plane.x, (0, plane.y, plane.y))
            columns[plane.x] = (count + 1, min(low, plane.y), max(high, plane.y))

        message_size = message_count = 0
        for count, low, high in columns.values():
            if high - low != count - 1:
                continue
            if count == message_size:
                message_count += 1
            elif count > message_size:
                message_size, message_count = count, 1
        if message_size > 3 and message_count > 3:
            return moving, time
    raise ValueError("Can't find the message")


def render(planes: Sequence[Plane]) -> str:
    """Draw the planes as rows of '#' on '.' over their bounding box."""
    if not planes:
        raise ValueError("no planes to render")
    min_x = min(plane.x for plane in planes)
    max_x = max(plane.x for plane in planes)
    min_y = min(plane.y for plane in planes)
    max_y = max(plane.y for plane in planes)
    lit = {(plane.x, plane.y) for plane in planes}
    return "\n".join(
        "".join("#" if (x, y) in lit else "." for x in range(min_x, max_x + 1))
        for y in range(min_y, max_y + 1)
    )


def main(argv: Sequence[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        raise SystemExit("No filepath passed")
    try:
        planes = [parse_plane(line) for line in Path(args[0]).read_text().splitlines()]
        message, time = find_message(planes)
    except (OSError, ValueError) as err:
        raise SystemExit(str(err)) from err
    print("The message seen in", time, "seconds is")
    print(render(message))


if __name__ == "__main__":
    main()