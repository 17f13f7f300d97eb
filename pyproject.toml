[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aoc2018"
version = "1.0.0"
description = "Solvers for the 2018 edition of a December programming puzzle calendar"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "solver", "simulation", "algorithms"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aoc2018-day01 = "aoc2018.day01:main"
aoc2018-day02 = "aoc2018.day02:main"
aoc2018-day03 = "aoc2018.day03:main"
aoc2018-day04 = "aoc2018.day04:main"
aoc2018-day05 = "aoc2018.day05:main"
aoc2018-day06 = "aoc2018.day06:main"
aoc2018-day07 = "aoc2018.day07:main"
aoc2018-day08 = "aoc2018.day08:main"
aoc2018-day09 = "aoc2018.day09:main"
aoc2018-day10 = "aoc2018.day10:main"
aoc2018-day11 = "aoc2018.day11:main"
aoc2018-day12 = "aoc2018.day12:main"
aoc2018-day14 = "aoc2018.day14:main"
aoc2018-day18 = "aoc2018.day18:main"
aoc2018-day20 = "aoc2018.day20:main"
aoc2018-day23 = "aoc2018.day23:main"
aoc2018-day25 = "aoc2018.day25:main"

[tool.hatch.build.targets.wheel]
packages = ["aoc2018"]

[tool.hatch.build.targets.sdist]
include = ["aoc2018", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
