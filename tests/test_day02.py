import pytest

from aoc2018.day02 import checksum, closest, compare_codes, main

CHECKSUM_CODES = ["abcdef", "bababc", "abbcde", "abcccd", "aabcdd", "abcdee", "ababab"]
CLOSEST_CODES = ["abcde", "fghij", "klmno", "pqrst", "fguij", "axcye", "wvxyz"]


def test_example_checksum():
    assert checksum(CHECKSUM_CODES) == 12


def test_checksum_ignores_order():
    assert checksum(reversed(CHECKSUM_CODES)) == checksum(CHECKSUM_CODES)


def test_compare_codes():
    assert compare_codes("fghij", "fguij") == (1, "fgij")


def test_compare_identical_codes():
    assert compare_codes("abcde", "abcde") == (0, "abcde")


def test_compare_different_lengths():
    with pytest.raises(ValueError):
        compare_codes("abc", "abcd")


def test_example_closest():
    assert closest(CLOSEST_CODES) == "fgij"


def test_main_prints_result(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("\n".join(CLOSEST_CODES) + "\n")
    main([str(path)])
    expected = f"Checksum is {checksum(CLOSEST_CODES)} and closest is {closest(CLOSEST_CODES)}\n"
    assert capsys.readouterr().out == expected


def test_main_requires_one_argument():
    with pytest.raises(SystemExit):
        main(["a", "b"])