import pytest

from aoc2018.day03 import (
    MAX_SIZE,
    Claim,
    best_claim,
    claimed_table,
    main,
    overlap_count,
    parse_claim,
)

EXAMPLE = ["#1 @ 1,3: 4x4", "#2 @ 3,1: 4x4", "#3 @ 5,5: 2x2"]


def test_parse_claim():
    assert parse_claim("#123 @ 3,2: 5x4") == Claim(id=123, left=3, top=2, width=5, height=4)


def test_parse_claim_rejects_garbage():
    with pytest.raises(ValueError):
        parse_claim("claim 1 at 3,2")


def test_example_overlap_and_best():
    table = claimed_table(parse_claim(line) for line in EXAMPLE)
    assert overlap_count(table) == 4
    assert best_claim(table) == 3


def test_table_holds_every_claimed_inch():
    claims = [parse_claim(line) for line in EXAMPLE]
    table = claimed_table(claims)
    assert sum(len(ids) for ids in table.values()) == sum(c.width * c.height for c in claims)


def test_claim_outside_fabric_rejected():
    with pytest.raises(ValueError):
        claimed_table([Claim(id=1, left=MAX_SIZE - 1, top=0, width=2, height=1)])


def test_no_claims_gives_no_best():
    assert best_claim({}) == 0


def test_main_prints_result(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("\n".join(EXAMPLE) + "\n")
    main([str(path)])
    table = claimed_table(parse_claim(line) for line in EXAMPLE)
    expected = f"Overlap count is {overlap_count(table)} and best claim is {best_claim(table)}\n"
    assert capsys.readouterr().out == expected


def test_main_rejects_bad_file(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("nonsense\n")
    with pytest.raises(SystemExit):
        main([str(path)])