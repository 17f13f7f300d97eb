import pytest

from aoc2018.day04 import (
    LogType,
    SleepRecord,
    main,
    minute_frequency,
    parse_logs,
    sleepiest,
)

EXAMPLE = [
    "[1518-11-01 00:00] Guard #10 begins shift",
    "[1518-11-01 00:05] falls asleep",
    "[1518-11-01 00:25] wakes up",
    "[1518-11-01 00:30] falls asleep",
    "[1518-11-01 00:55] wakes up",
    "[1518-11-01 23:58] Guard #99 begins shift",
    "[1518-11-02 00:40] falls asleep",
    "[1518-11-02 00:50] wakes up",
    "[1518-11-03 00:05] Guard #10 begins shift",
    "[1518-11-03 00:24] falls asleep",
    "[1518-11-03 00:29] wakes up",
    "[1518-11-04 00:02] Guard #99 begins shift",
    "[1518-11-04 00:36] falls asleep",
    "[1518-11-04 00:46] wakes up",
    "[1518-11-05 00:03] Guard #99 begins shift",
    "[1518-11-05 00:45] falls asleep",
    "[1518-11-05 00:55] wakes up",
]


def _shuffled_text():
    return "\n".join(EXAMPLE[::2] + EXAMPLE[1::2]) + "\n"


def test_parse_sorts_chronologically():
    logs = parse_logs(_shuffled_text())
    stamps = [entry.timestamp for entry in logs]
    assert stamps == sorted(stamps)
    assert len(logs) == len(EXAMPLE)


def test_parse_reads_kind_and_guard():
    first = parse_logs(_shuffled_text())[0]
    assert first.kind is LogType.TAKE_SHIFT
    assert first.guard_id == 10


def test_example_strategies():
    assert sleepiest(parse_logs(_shuffled_text())) == (240, 4455)


def test_minute_frequency():
    assert minute_frequency([SleepRecord(5, 10), SleepRecord(8, 12)]) == (8, 2)


def test_parse_rejects_bad_line():
    with pytest.raises(ValueError):
        parse_logs("1518-11-01 00:00 Guard #10 begins shift\n")


def test_parse_rejects_unknown_action():
    with pytest.raises(ValueError):
        parse_logs("[1518-11-01 00:00] Guard sings\n")


def test_waking_without_sleeping_rejected():
    logs = parse_logs("[1518-11-01 00:00] Guard #10 begins shift\n[1518-11-01 00:05] wakes up\n")
    with pytest.raises(ValueError):
        sleepiest(logs)


def test_main_prints_result(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(_shuffled_text())
    main([str(path)])
    part1, part2 = sleepiest(parse_logs(_shuffled_text()))
    assert capsys.readouterr().out == f"Part1 solution is {part1} and Part2 solution is {part2}\n"