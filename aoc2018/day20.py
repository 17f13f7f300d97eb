"""Room regex: distances to rooms reached by following a route expression."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from enum import Enum, auto
from pathlib import Path

THRESHOLD = 1000

_MOVES = {"E": (1, 0), "W": (-1, 0), "N": (0, -1), "S": (0, 1)}

Room = tuple[int, int]


class _Status(Enum):
    OTHER_GROUPS = auto()
    END_GROUP = auto()
    END_REGEXP = auto()
    ERROR = auto()


def _walk(chars: Iterator[str], distance: int, room: Room, distances: dict[Room, int]) -> _Status:
    for char in chars:
        if char == "^":
            continue
        if char == "$":
            return _Status.END_REGEXP
        if char in _MOVES:
            dx, dy = _MOVES[char]
            distance += 1
            room = (room[0] + dx, room[1] + dy)
            if room not in distances or distance < distances[room]:
                distances[room] = distance
        elif char == "(":
            status = _Status.OTHER_GROUPS
            while status is not _Status.END_GROUP:
                status = _walk(chars, distance, room, distances)
                if status is _Status.ERROR:
                    return _Status.ERROR
        elif char == "|":
            return _Status.OTHER_GROUPS
        elif char == ")":
            return _Status.END_GROUP
        else:
            return _Status.ERROR
    return _Status.ERROR


def room_distances(regex: str) -> dict[Room, int]:
    """Map each (x, y) room reached to the shortest number of doors to it.

    Every branch of a group starts from the room before the group, and the
    route continues after the group from that same room.
    """
    distances: dict[Room, int] = {}
    if _walk(iter(regex), 0, (0, 0), distances) is not _Status.END_REGEXP:
        raise ValueError("Missed the end of the regexp")
    return distances


def furthest(regex: str, threshold: int = THRESHOLD) -> tuple[int, int]:
    """Return the largest room distance and how many rooms are at least `threshold` away."""
    distances = room_distances(regex).values()
    return max(distances, default=0), sum(1 for d in distances if d >= threshold)


def main(argv: Sequence[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        raise SystemExit("No filepath passed")
    try:
        lines = Path(args[0]).read_text().splitlines()
        length, far = furthest(lines[0] if lines else "")
    except (OSError, ValueError) as err:
        raise SystemExit(str(err)) from err
    print("Max shortest distance is", length, "with", far, "rooms at least 1000 doors away")


if __name__ == "__main__":
    main()