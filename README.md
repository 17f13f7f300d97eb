# aoc2018

Solvers for the 2018 edition of the December programming puzzle calendar.
Each covered day is a module in the `aoc2018` package. You can import a module
as a library or run it from the command line.

Covered days: 1 to 12, 14, 18, 20, 23 and 25.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Command line

Every covered day installs a command named `aoc2018-dayNN`. Pass it the path to
your puzzle input, and it prints the answers:

```
aoc2018-day01 input.txt
aoc2018-day07 input.txt
aoc2018-day25 input.txt
```

Days 9, 11 and 14 have their puzzle parameters built in, so they need no input
file. You can pass your own values instead:

```
aoc2018-day09                # or: aoc2018-day09 PLAYERS LAST_MARBLE
aoc2018-day11                # or: aoc2018-day11 SERIAL_NUMBER
aoc2018-day14                # or: aoc2018-day14 RECIPE_COUNT
```

Day 10 prints the message as rows of `#` and `.`. For day 12 the second answer
comes from a built-in stable pattern, not from your input.

If an input file cannot be read or parsed, the command stops with an error
message.

## Library use

The modules take text or parsed values and return plain Python values, so you
can call them from your own code or from tests:

```python
from pathlib import Path

from aoc2018.day01 import frequencies, parse_changes
from aoc2018.day25 import count_constellations, parse_points

changes = parse_changes(Path("day01.txt").read_text())
total, first_repeat = frequencies(changes)

points = parse_points(Path("day25.txt").read_text())
print(count_constellations(points))
```

Some other entry points:

- `aoc2018.day05.shortest_length(polymer)`: length of the shortest reduced
  polymer after one unit type is removed.
- `aoc2018.day07.schedule(text, worker_count, base_time)`: step order and
  total time for a team of workers.
- `aoc2018.day08.parse_tree(text)`: gives a `Node` with `metadata_total()` and
  `value()`.
- `aoc2018.day09.highest_score(player_count, last_marble)`: best score of the
  marble game.
- `aoc2018.day14.recipes_before(pattern, limit)`: number of recipes to the left
  of a digit sequence.
- `aoc2018.day18.simulate(grid, minutes)`: resource value after some minutes,
  with the cycle length found in long runs.
- `aoc2018.day20.furthest(regex, threshold)`: furthest room, and the number of
  rooms at least `threshold` doors away.
- `aoc2018.day23.clique_distance(nanobots)`: distance from the origin for the
  largest group of mutually intersecting nanobots.

## What is not included

Only the days listed above are covered. Other days of the calendar have no
module and no command in this package.