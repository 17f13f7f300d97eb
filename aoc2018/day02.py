"""Box identifiers: letter-count checksum and the two closest identifiers."""

from __future__ import annotations

import sys
from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import combinations
from pathlib import Path


def checksum(codes: Iterable[str]) -> int:
    """Count codes with a letter exactly twice and exactly three times, and multiply."""
    twos = threes = 0
    for code in codes:
        counts = set(Counter(code).values())
        twos += 2 in counts
        threes += 3 in counts
    return twos * threes


def compare_codes(first: str, second: str) -> tuple[int, str]:
    """Return the number of differing positions and the common characters."""
    if len(first) != len(second):
        raise ValueError("codes must have the same length")
    same = "".join(a for a, b in zip(first, second) if a == b)
    return len(first) - len(same), same


def closest(codes: Sequence[str]) -> str:
    """Return the common characters of the pair of codes that differ the least."""
    best_diff, best = 0, ""
    for first, second in combinations(codes, 2):
        diff, same = compare_codes(first, second)
        if best_diff == 0 or diff < best_diff:
            best_diff, best = diff, same
    return best


def main(argv: Sequence[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        raise SystemExit("No filename passed")
    try:
        codes = Path(args[0]).read_text().splitlines()
        total = checksum(codes)
        common = closest(codes)
    except (OSError, ValueError) as err:
        raise SystemExit(str(err)) from err
    print("Checksum is", total, "and closest is", common)


if __name__ == "__main__":
    main()