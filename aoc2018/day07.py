"""Step ordering with dependencies, alone or with several timed workers."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

_STEP = re.compile(r"Step (\w) must be finished before step (\w) can begin.")


@dataclass(eq=False)
class Step:
    name: str
    before: list[Step] = field(default_factory=list)
    """Steps that need this one done first."""
    after: list[Step] = field(default_factory=list)
    """Prerequisites of this step."""
    done: bool = False
    progress: int = 0
    taken: bool = False

    def time_to_process(self, base_time: int) -> int:
        """Seconds this step takes; zero when `base_time` is negative."""
        if base_time < 0:
            return 0
        return base_time + ord(self.name[0]) - 64

    def __repr__(self) -> str:
        return f"Step({self.name!r})"


def parse_steps(text: str) -> dict[str, Step]:
    """Build the dependency graph, keyed and sorted by step name."""
    steps: dict[str, Step] = {}
    for line in text.splitlines():
        match = _STEP.search(line)
        if match is None:
            raise ValueError(f"Can't parse step: {line!r}")
        first = steps.setdefault(match[1], Step(match[1]))
        then = steps.setdefault(match[2], Step(match[2]))
        first.before.append(then)
        then.after.append(first)
    for step in steps.values():
        step.before.sort(key=lambda s: s.name)
        step.after.sort(key=lambda s: s.name)
    return dict(sorted(steps.items()))


def schedule(text: str, worker_count: int, base_time: int) -> tuple[str, int]:
    """Run the steps with `worker_count` workers; return the order and total time."""
    steps = parse_steps(text)
    workers: list[Step | None] = [None] * worker_count
    possible = [step for step in steps.values() if not step.after]
    order: list[Step] = []
    total_time = 0

    while len(order) != len(steps):
        for index, task in enumerate(workers):
            if task is None:
                continue
            task.progress += 1
            if task.progress >= task.time_to_process(base_time):
                task.done = True
                order.append(task)
                possible.extend(task.before)
                possible.sort(key=lambda s: s.name)
                workers[index] = None

        for index, task in enumerate(workers):
            if task is not None:
                continue
            for candidate in possible:
                if not candidate.taken and all(req.done for req in candidate.after):
                    workers[index] = candidate
                    candidate.taken = True
                    break
        total_time += 1

    return "".join(step.name for step in order), total_time - 1


def main(argv: Sequence[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        raise SystemExit("No filepath passed")
    try:
        text = Path(args[0]).read_text()
        order, _ = schedule(text, 1, -1)
        _, time = schedule(text, 5, 60)
    except (OSError, ValueError) as err:
        raise SystemExit(str(err)) from err
    print("Result for one worker is", order)
    print("Time for 5 workers is", time)


if __name__ == "__main__":
    main()