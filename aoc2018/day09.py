"""Marble game: the winning score when marbles are placed in a circle."""

from __future__ import annotations

import sys
from collections import defaultdict, deque
from collections.abc import Sequence

PLAYERS = 477
LAST_MARBLE = 70851


def highest_score(player_count: int, last_marble: int) -> int:
    """Play until `last_marble` has been placed and return the best player score.

    Each marble goes between the first and second marbles clockwise of the
    current one. A marble numbered as a multiple of 23 is kept instead, along
    with the marble seven places counter-clockwise, which leaves the circle.
    """
    if player_count < 1:
        raise ValueError("there must be at least one player")
    if last_marble < 0:
        raise ValueError("the last marble must not be negative")

    # The current marble is kept at the right end of the deque.
    circle = deque([0])
    scores: defaultdict[int, int] = defaultdict(int)
    for marble in range(1, last_marble + 1):
        player = (marble - 1) % player_count + 1
        if marble % 23 == 0:
            circle.rotate(7)
            scores[player] += marble + circle.pop()
            circle.rotate(-1)
        else:
            circle.rotate(-1)
            circle.append(marble)
    return max(scores.values(), default=0)


def main(argv: Sequence[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else list(argv)
    if args and len(args) != 2:
        raise SystemExit("Usage: day09 [players last-marble]")
    try:
        players, last = (int(arg) for arg in args) if args else (PLAYERS, LAST_MARBLE)
        print("First result is", highest_score(players, last))
        print("Second result is", highest_score(players, last * 100))
    except ValueError as err:
        raise SystemExit(str(err)) from err


if __name__ == "__main__":
    main()