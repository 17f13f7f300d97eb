"""Fabric claims: overlapping square inches and the claim that overlaps nothing."""

from __future__ import annotations

import re
import sys
from collections import defaultdict
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

MAX_SIZE = 1000

_CLAIM = re.compile(r"#(\d+) @ (\d+),(\d+): (\d+)x(\d+)")


@dataclass(frozen=True)
class Claim:
    id: int
    left: int
    top: int
    width: int
    height: int


def parse_claim(line: str) -> Claim:
    """Parse a line such as '#1 @ 1,3: 4x4'."""
    match = _CLAIM.fullmatch(line)
    if match is None:
        raise ValueError(f"Can't parse claim: {line!r}")
    return Claim(*(int(group) for group in match.groups()))


def claimed_table(claims: Iterable[Claim]) -> dict[tuple[int, int], list[int]]:
    """Map each claimed (row, column) inch to the ids of the claims covering it."""
    table: defaultdict[tuple[int, int], list[int]] = defaultdict(list)
    for claim in claims:
        if claim.left + claim.width > MAX_SIZE or claim.top + claim.height > MAX_SIZE:
            raise ValueError(f"claim #{claim.id} exceeds the {MAX_SIZE} inch fabric")
        for row in range(claim.top, claim.top + claim.height):
            for column in range(claim.left, claim.left + claim.width):
                table[row, column].append(claim.id)
    return dict(table)


def overlap_count(table: dict[tuple[int, int], list[int]]) -> int:
    """Count the inches claimed at least twice."""
    return sum(1 for ids in table.values() if len(ids) >= 2)


def best_claim(table: dict[tuple[int, int], list[int]]) -> int:
    """Return the id of a claim never sharing an inch, or 0 if there is none."""
    alone: dict[int, bool] = {}
    for ids in table.values():
        shared = len(ids) != 1
        for claim_id in ids:
            if shared:
                alone[claim_id] = False
            else:
                alone.setdefault(claim_id, True)
    return next((claim_id for claim_id, ok in alone.items() if ok), 0)


def main(argv: Sequence[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        raise SystemExit("No filepath passed")
    try:
        lines = Path(args[0]).read_text().splitlines()
        table = claimed_table(parse_claim(line) for line in lines)
    except (OSError, ValueError) as err:
        raise SystemExit(str(err)) from err
    print("Overlap count is", overlap_count(table), "and best claim is", best_claim(table))


if __name__ == "__main__":
    main()