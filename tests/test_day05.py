import pytest

from aoc2018.day05 import main, reduced_length, shortest_length

EXAMPLE = "dabAcCaCBAcCcaDA"


def test_example_reduced_length():
    assert reduced_length(EXAMPLE) == 10


def test_example_shortest_length():
    assert shortest_length(EXAMPLE) == 4


def test_mirrored_polymer_vanishes():
    polymer = "abXyZq"
    assert reduced_length(polymer + polymer.swapcase()[::-1]) == 0


def test_shortest_never_longer_than_reduced():
    assert shortest_length(EXAMPLE) <= reduced_length(EXAMPLE) <= len(EXAMPLE)


def test_removal_is_case_insensitive():
    stripped = EXAMPLE.replace("c", "").replace("C", "")
    assert reduced_length(EXAMPLE, "c") == reduced_length(stripped)
    assert reduced_length(EXAMPLE, "C") == reduced_length(stripped)


def test_main_prints_result(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE + "\n")
    main([str(path)])
    expected = (
        f"Basic sequence length is {reduced_length(EXAMPLE)} and minimum sequence "
        f"length after element removals is {shortest_length(EXAMPLE)}\n"
    )
    assert capsys.readouterr().out == expected


def test_main_requires_one_argument():
    with pytest.raises(SystemExit):
        main([])