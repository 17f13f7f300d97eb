"""Polymer reactions: reduced length, and shortest length after removing one unit type."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path
from string import ascii_lowercase


def _reacts(first: str, second: str) -> bool:
    return first != second and first.upper() == second.upper()


def reduced_length(polymer: str, remove: str | None = None) -> int:
    """Length of the polymer once all reactions happened, ignoring units of type `remove`."""
    removed = remove.upper() if remove else None
    stack: list[str] = []
    for unit in polymer:
        if removed is not None and unit.upper() == removed:
            continue
        if stack and _reacts(stack[-1], unit):
            stack.pop()
        else:
            stack.append(unit)
    return len(stack)


def shortest_length(polymer: str) -> int:
    """Shortest reduced length obtained by removing one unit type entirely."""
    return min(reduced_length(polymer, letter) for letter in ascii_lowercase)


def main(argv: Sequence[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        raise SystemExit("No filepath passed")
    try:
        polymer = Path(args[0]).read_text().strip()
    except OSError as err:
        raise SystemExit(str(err)) from err
    print(
        "Basic sequence length is",
        reduced_length(polymer),
        "and minimum sequence length after element removals is",
        shortest_length(polymer),
    )


if __name__ == "__main__":
    main()