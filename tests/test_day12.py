import pytest

from aoc2018.day12 import (
    PART2_GENERATIONS,
    Note,
    extrapolated_sum,
    parse_initial,
    parse_input,
    plant_sum,
    render,
)

EXAMPLE = """initial state: #..#.#..##......###...###

...## => #
..#.. => #
.#... => #
.#.#. => #
.#.## => #
.##.. => #
.#### => #
#.#.# => #
#.### => #
##.#. => #
##.## => #
###.. => #
###.# => #
####. => #
"""


def test_parse_initial_shifts_pots():
    pots = parse_initial("#.#", 2)
    assert pots == [False, False, True, False, True]


@pytest.mark.parametrize("state", ["#..#.#..##", "....", "###", ""])
def test_render_round_trip(state):
    assert render(parse_initial(state, 0)) == state


def test_parse_input_reads_state_and_notes():
    initial, notes = parse_input(EXAMPLE)
    assert initial == "#..#.#..##......###...###"
    assert len(notes) == 14
    assert notes[0] == Note((False, False, False, True, True), True)
    assert all(note.output for note in notes)


def test_parse_input_rejects_missing_state():
    with pytest.raises(ValueError):
        parse_input("no state here\n\n...## => #\n")


def test_parse_input_rejects_bad_note():
    with pytest.raises(ValueError):
        parse_input("initial state: #.#\n\n...## -> #\n")


def test_zero_generations_sums_initial_indices():
    initial, notes = parse_input(EXAMPLE)
    pots = parse_initial(initial, 20)
    expected = sum(index for index, char in enumerate(initial) if char == "#")
    assert plant_sum(pots, notes, 0, 20) == expected


def test_no_notes_kills_every_plant():
    assert plant_sum(parse_initial("#####", 5), [], 1, 5) == 0


def test_plant_sum_example():
    initial, notes = parse_input(EXAMPLE)
    assert plant_sum(parse_initial(initial, 20), notes, 20, 20) == 325


def test_extrapolated_sum_is_past_generations():
    assert extrapolated_sum() > PART2_GENERATIONS