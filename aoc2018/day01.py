"""Frequency drift: the total of all changes and the first frequency reached twice."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from itertools import cycle
from pathlib import Path


def parse_changes(text: str) -> list[int]:
    """Parse signed frequency changes, one per line; lines without a sign are ignored."""
    changes = []
    for line in text.splitlines():
        positive = line.split("+")
        if len(positive) == 2:
            changes.append(int(positive[1]))
            continue
        negative = line.split("-")
        if len(negative) == 2:
            changes.append(-int(negative[1]))
    return changes


def frequencies(changes: Iterable[int]) -> tuple[int, int]:
    """Return the frequency after one pass and the first frequency seen twice.

    Repeats are only looked for once the first pass is over, and the starting
    frequency of zero does not count as seen.
    """
    changes = list(changes)
    if not changes:
        raise ValueError("no frequency changes given")

    frequency = 0
    seen: set[int] = set()
    for change in changes:
        frequency += change
        seen.add(frequency)
    total = frequency

    for change in cycle(changes):
        frequency += change
        if frequency in seen:
            return total, frequency
        seen.add(frequency)
    raise AssertionError("unreachable")


def main(argv: Sequence[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        raise SystemExit("No filename passed")
    try:
        total, double = frequencies(parse_changes(Path(args[0]).read_text()))
    except (OSError, ValueError) as err:
        raise SystemExit(str(err)) from err
    print("Total frequence is", total, "and double frequency is", double)


if __name__ == "__main__":
    main()