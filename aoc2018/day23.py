"""Nanobots: bots in range of the strongest, and the closest point in range of most."""

from __future__ import annotations

import re
import sys
from collections import defaultdict
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from itertools import combinations
from pathlib import Path

_NANOBOT = re.compile(r"pos=<(-?\d+),(-?\d+),(-?\d+)>, r=(\d+)")


@dataclass(frozen=True)
class Nanobot:
    x: int
    y: int
    z: int
    radius: int

    def intersects(self, other: Nanobot) -> bool:
        """Whether the ranges of the two bots share at least one point."""
        return distance(self, other) <= self.radius + other.radius

    def __str__(self) -> str:
        return f"{self.x},{self.y},{self.z}({self.radius})"


_ORIGIN = Nanobot(0, 0, 0, 0)


def distance(first: Nanobot, second: Nanobot) -> int:
    """Manhattan distance between the positions of two bots."""
    return abs(first.x - second.x) + abs(first.y - second.y) + abs(first.z - second.z)


def parse_nanobots(text: str) -> list[Nanobot]:
    """Parse 'pos=<x,y,z>, r=n' lines."""
    nanobots = []
    for line in text.splitlines():
        matches = _NANOBOT.findall(line)
        if len(matches) != 1:
            raise ValueError(f"Can't parse instruction line {line}")
        nanobots.append(Nanobot(*(int(value) for value in matches[0])))
    return nanobots


def strongest_in_range(nanobots: Iterable[Nanobot]) -> int:
    """Number of bots within range of the bot with the largest radius."""
    bots = list(nanobots)
    strongest = _ORIGIN
    for bot in bots:
        if bot.radius > strongest.radius:
            strongest = bot
    return sum(1 for bot in bots if distance(strongest, bot) <= strongest.radius)


def _bron_kerbosch(
    chosen: set[Nanobot],
    candidates: set[Nanobot],
    excluded: set[Nanobot],
    graph: Mapping[Nanobot, Sequence[Nanobot]],
) -> set[Nanobot]:
    if not candidates and not excluded:
        return chosen
    pivot = next(iter(candidates or excluded))
    best: set[Nanobot] = set()
    for bot in list(candidates - set(graph.get(pivot, ()))):
        neighbours = set(graph.get(bot, ()))
        clique = _bron_kerbosch(
            chosen | {bot}, candidates & neighbours, excluded & neighbours, graph
        )
        if len(clique) > len(best):
            best = clique
        candidates.discard(bot)
        excluded.add(bot)
    return best


def max_clique(intersections: Mapping[Nanobot, Sequence[Nanobot]]) -> set[Nanobot]:
    """Largest set of bots that all intersect each other."""
    return _bron_kerbosch(set(), set(intersections), set(), intersections)


def clique_distance(nanobots: Iterable[Nanobot]) -> int:
    """Distance from the origin to the nearest point in range of the largest clique."""
    graph: defaultdict[Nanobot, list[Nanobot]] = defaultdict(list)
    for first, second in combinations(list(nanobots), 2):
        if first.intersects(second):
            graph[first].append(second)
            graph[second].append(first)
    farthest_edge = 0
    for bot in max_clique(graph):
        farthest_edge = max(farthest_edge, distance(_ORIGIN, bot) - bot.radius)
    return farthest_edge


def main(argv: Sequence[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        raise SystemExit("No filepath passed")
    try:
        nanobots = parse_nanobots(Path(args[0]).read_text())
    except (OSError, ValueError) as err:
        raise SystemExit(str(err)) from err
    print("Part1 result is", strongest_in_range(nanobots), clique_distance(nanobots))


if __name__ == "__main__":
    main()