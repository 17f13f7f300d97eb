"""Guard sleep logs: the sleepiest guard and the most regular sleeper."""

from __future__ import annotations

import re
import sys
from collections import Counter, defaultdict
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import datetime
from enum import Enum, auto
from pathlib import Path

_LOG = re.compile(r"\[(.+)\] (.+)")
_GUARD = re.compile(r"Guard #(\d+) begins shift")


class LogType(Enum):
    GO_TO_SLEEP = auto()
    WAKE_UP = auto()
    TAKE_SHIFT = auto()


@dataclass(frozen=True)
class LogEntry:
    timestamp: datetime
    action: str
    kind: LogType
    guard_id: int = 0


@dataclass(frozen=True)
class SleepRecord:
    start: int
    end: int


def parse_logs(text: str) -> list[LogEntry]:
    """Parse log lines and return them in chronological order."""
    entries = []
    for line in text.splitlines():
        match = _LOG.fullmatch(line)
        if match is None:
            raise ValueError(f"Can't parse log: {line!r}")
        timestamp = datetime.strptime(match[1], "%Y-%m-%d %H:%M")
        action = match[2]
        if action == "wakes up":
            entry = LogEntry(timestamp, action, LogType.WAKE_UP)
        elif action == "falls asleep":
            entry = LogEntry(timestamp, action, LogType.GO_TO_SLEEP)
        else:
            guard = _GUARD.fullmatch(action)
            if guard is None:
                raise ValueError(f"Can't extract guard ID: {action!r}")
            entry = LogEntry(timestamp, action, LogType.TAKE_SHIFT, int(guard[1]))
        entries.append(entry)
    entries.sort(key=lambda entry: entry.timestamp)
    return entries


def minute_frequency(records: Iterable[SleepRecord]) -> tuple[int, int]:
    """Return the minute most often slept and how many times it was slept."""
    counts = Counter(
        minute for record in records for minute in range(record.start, record.end)
    )
    best_minute = best_count = 0
    for minute in sorted(counts):
        if counts[minute] > best_count:
            best_minute, best_count = minute, counts[minute]
    return best_minute, best_count


def sleepiest(logs: Iterable[LogEntry]) -> tuple[int, int]:
    """Return the answers of both strategies: guard id times chosen minute."""
    asleep: defaultdict[int, int] = defaultdict(int)
    records: defaultdict[int, list[SleepRecord]] = defaultdict(list)
    guard = 0
    bed_time: datetime | None = None

    for entry in logs:
        if entry.kind is LogType.GO_TO_SLEEP:
            bed_time = entry.timestamp
        elif entry.kind is LogType.TAKE_SHIFT:
            guard = entry.guard_id
        else:
            if bed_time is None:
                raise ValueError("a guard woke up before falling asleep")
            asleep[guard] += int((entry.timestamp - bed_time).total_seconds() / 60)
            records[guard].append(SleepRecord(bed_time.minute, entry.timestamp.minute))

    max_sleep = sleepier = 0
    for guard_id, sleep_time in asleep.items():
        if sleep_time > max_sleep:
            max_sleep, sleepier = sleep_time, guard_id
    sleepier_minute, _ = minute_frequency(records.get(sleepier, []))

    best_guard = best_minute = best_count = 0
    for guard_id, guard_records in records.items():
        minute, count = minute_frequency(guard_records)
        if count > best_count:
            best_guard, best_minute, best_count = guard_id, minute, count

    return sleepier * sleepier_minute, best_guard * best_minute


def main(argv: Sequence[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        raise SystemExit("No filename passed")
    try:
        part1, part2 = sleepiest(parse_logs(Path(args[0]).read_text()))
    except (OSError, ValueError) as err:
        raise SystemExit(str(err)) from err
    print("Part1 solution is", part1, "and Part2 solution is", part2)


if __name__ == "__main__":
    main()