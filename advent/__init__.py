"""Solutions to a selection of Advent of Code puzzles from 2021, 2022 and 2023."""

__version__ = "0.1.0"