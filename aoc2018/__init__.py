"""Solvers for the 2018 December programming puzzles, days 1-12, 14, 18, 20, 23 and 25."""

__version__ = "1.0.0"