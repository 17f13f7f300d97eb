"""Plant pots: grow generations from pattern notes and sum the planted pot numbers."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

GENERATIONS = 20
PART2_GENERATIONS = 50000000000
SHIFT = 20

# After a few hundred generations the pots keep this shape and only move right.
_STABLE_PATTERN = (
    "#.##.##.##.##.##.##.##.##.##.##.##.##.##.##.##.##.##.##.##.##.##.##.##.##."
    "##.##.##.##.##.##.##.##.##.##.##.##.##.##.##.##.##.#...#.#"
)
_STABLE_OFFSET = 36


@dataclass(frozen=True)
class Note:
    pattern: tuple[bool, ...]
    output: bool


def parse_initial(initial: str, shift: int) -> list[bool]:
    """Pots from a '#'/'.' string, preceded by `shift` empty pots."""
    return [False] * shift + [char == "#" for char in initial]


def parse_input(text: str) -> tuple[str, list[Note]]:
    """Return the initial state string and the notes."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("empty input")
    parts = lines[0].split("initial state: ")
    if len(parts) != 2:
        raise ValueError(f"Can't parse initial state: {lines[0]!r}")
    notes = []
    for line in lines[2:]:
        fields = line.split(" => ")
        if len(fields) != 2:
            raise ValueError(f"Can't parse note: {line!r}")
        notes.append(Note(tuple(char == "#" for char in fields[0]), fields[1] == "#"))
    return parts[1], notes


def plant_sum(
    pots: Sequence[bool],
    notes: Iterable[Note],
    generations: int = GENERATIONS,
    shift: int = SHIFT,
) -> int:
    """Grow the pots for some generations and sum the numbers of planted pots.

    A note is matched against the pots starting at each index and sets the pot
    two further on; pots past the end count as empty.
    """
    pots = list(pots)
    notes = list(notes)
    for _ in range(generations):
        size = len(pots)
        new_pots = [False] * size
        for index in range(size):
            for note in notes:
                matches = all(
                    (index + offset < size and pots[index + offset]) == wanted
                    for offset, wanted in enumerate(note.pattern)
                )
                if matches and note.output:
                    if index + 2 >= len(new_pots):
                        new_pots.extend((False, False))
                    new_pots[index + 2] = True
                    break
        pots = new_pots
    return sum(index - shift for index, pot in enumerate(pots) if pot)


def render(pots: Iterable[bool]) -> str:
    """Draw pots as '#' (plant) and '.' (empty)."""
    return "".join("#" if pot else "." for pot in pots)


def extrapolated_sum() -> int:
    """Sum of planted pot numbers after fifty billion generations."""
    offset = PART2_GENERATIONS - _STABLE_OFFSET
    return sum(
        offset + index
        for index, pot in enumerate(parse_initial(_STABLE_PATTERN, 0))
        if pot
    )


def main(argv: Sequence[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        raise SystemExit("No filepath passed")
    try:
        initial, notes = parse_input(Path(args[0]).read_text())
    except (OSError, ValueError) as err:
        raise SystemExit(str(err)) from err
    count = plant_sum(parse_initial(initial, SHIFT), notes, GENERATIONS, SHIFT)
    print("Plan count after", GENERATIONS, "generations is", count)
    print("Plan count after", PART2_GENERATIONS, "generations is", extrapolated_sum())


if __name__ == "__main__":
    main()