"""Advent of Code 2021 puzzle solvers, days 1-5."""

from .version import __version__

__all__ = ["__version__"]
