"""Chocolate charts: recipe scores produced by two elves."""

from __future__ import annotations

import sys
from collections.abc import Sequence

RECIPES_AFTER = 509671
PATTERN_LIMIT = 300000000
_START = (3, 7)


def digits(number: int) -> list[int]:
    """Decimal digits of a non-negative number, most significant first."""
    if number < 0:
        raise ValueError("number must not be negative")
    return [int(char) for char in str(number)]


def make_recipes(limit: int, pattern: Sequence[int] | None = None) -> list[int]:
    """Produce recipes until at least `limit` exist or `pattern` ends the list.

    With a pattern, the returned list stops right after its first occurrence.
    """
    recipes = list(_START)
    elves = [0, 1]
    wanted = list(pattern) if pattern is not None else None
    while len(recipes) < limit:
        recipes.extend(digits(sum(recipes[elf] for elf in elves)))
        if wanted is not None and len(recipes) > len(wanted):
            if recipes[-len(wanted):] == wanted:
                return recipes
            if recipes[-len(wanted) - 1:-1] == wanted:
                return recipes[:-1]
        elves = [(elf + recipes[elf] + 1) % len(recipes) for elf in elves]
    return recipes


def last_ten(recipes: Sequence[int]) -> str:
    """The last ten recipe scores as a string."""
    if len(recipes) < 10:
        raise ValueError("fewer than ten recipes")
    return "".join(str(recipe) for recipe in recipes[-10:])


def recipes_before(pattern: Sequence[int], limit: int = PATTERN_LIMIT) -> int:
    """Number of recipes to the left of the first occurrence of `pattern`."""
    wanted = list(pattern)
    if not wanted:
        raise ValueError("pattern must not be empty")
    recipes = make_recipes(limit, wanted)
    if recipes[-len(wanted):] != wanted:
        raise ValueError(f"pattern not found within {limit} recipes")
    return len(recipes) - len(wanted)


def main(argv: Sequence[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) > 1:
        raise SystemExit("Usage: day14 [recipe count]")
    try:
        after = int(args[0]) if args else RECIPES_AFTER
        print("Recipes after", after, "are", last_ten(make_recipes(after + 10)))
        print("There are", recipes_before(digits(after)), "recipes left to sequence")
    except ValueError as err:
        raise SystemExit(str(err)) from err


if __name__ == "__main__":
    main()