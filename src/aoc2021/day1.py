"""Sonar sweep: count depth increases over sliding windows."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence

from .input_handling import parse_file_line_by_line, parse_int


def parse_depth(line: str) -> int:
    return parse_int(line)


def part1(input_path: str | Path) -> int:
    depths = parse_file_line_by_line(input_path, parse_depth)
    return count_increases(depths, 1)


def part2(input_path: str | Path) -> int:
    depths = parse_file_line_by_line(input_path, parse_depth)
    return count_increases(depths, 3)


def window_sums(depths: Sequence[int], window_size: int) -> List[int]:
    if window_size <= 0:
        raise ValueError("window_size must be positive")
    return [
        sum(depths[i : i + window_size]) for i in range(len(depths) - window_size + 1)
    ]


def count_increases(depths: Sequence[int], window_size: int) -> int:
    result = 0
    previous: Optional[int] = None
    for current in window_sums(depths, window_size):
        if previous is not None and current > previous:
            result += 1
        previous = current
    return result
