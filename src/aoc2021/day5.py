from __future__ import annotations

import itertools
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Sequence

import numpy as np

from .errors import NoSolutionError
from .input_handling import parse_file_line_by_line, parse_int


@dataclass(frozen=True)
class VentPoint:
    x: int
    y: int

    @classmethod
    def from_str(cls, s: str) -> VentPoint:
        parts = s.split(",")
        if len(parts) != 2:
            raise ValueError("Wrong number of coordinates")
        x, y = (parse_int(p) for p in parts)
        if x < 0 or y < 0:
            raise ValueError("Coordinates must be non-negative")
        return cls(x, y)


@dataclass(frozen=True)
class VentLine:
    start: VentPoint
    end: VentPoint

    @classmethod
    def from_str(cls, s: str) -> VentLine:
        parts = s.split("->")
        if len(parts) != 2:
            raise ValueError("Wrong number of parts")
        line = cls(VentPoint.from_str(parts[0].strip()), VentPoint.from_str(parts[1].strip()))
        if line.is_diagonal and abs(line.start.x - line.end.x) != abs(line.start.y - line.end.y):
            raise ValueError("Line is neither straight nor at 45 degrees")
        return line

    @property
    def is_diagonal(self) -> bool:
        return self.start.x != self.end.x and self.start.y != self.end.y

    def points(self) -> Iterator[tuple[int, int]]:
        if self.start == self.end:
            return iter([(self.start.x, self.start.y)])
        return zip(
            iter_changes(self.start.x, self.end.x), iter_changes(self.start.y, self.end.y)
        )


def iter_changes(start: int, end: int) -> Iterator[int]:
    """Walk from ``start`` to ``end`` inclusive; equal ends repeat forever."""
    if start < end:
        return iter(range(start, end + 1))
    if start > end:
        return iter(range(start, end - 1, -1))
    return itertools.repeat(start)


def parse_input(input_path: str | Path) -> list[VentLine]:
    return parse_file_line_by_line(input_path, VentLine.from_str)


def part1(input_path: str | Path) -> int:
    return count_overlapping_lines(plot_line_overlap(parse_input(input_path), False))


def part2(input_path: str | Path) -> int:
    return count_overlapping_lines(plot_line_overlap(parse_input(input_path), True))


def plot_line_overlap(lines: Sequence[VentLine], count_diagonals: bool) -> np.ndarray:
    if not lines:
        raise NoSolutionError("Input is empty")
    width = max(max(l.start.x, l.end.x) for l in lines) + 1
    height = max(max(l.start.y, l.end.y) for l in lines) + 1

    plane = np.zeros((height, width), dtype=np.int64)
    for line in lines:
        if line.is_diagonal and not count_diagonals:
            continue
        for x, y in line.points():
            plane[y, x] += 1
    return plane


def count_overlapping_lines(plot: np.ndarray) -> int:
    return int(np.count_nonzero(np.asarray(plot) >= 2))
