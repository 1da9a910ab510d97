from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from .input_handling import parse_file_line_by_line, parse_int


class Direction(enum.Enum):
    FORWARD = "forward"
    DOWN = "down"
    UP = "up"


@dataclass(frozen=True)
class Movement:
    direction: Direction
    amount: int

    @classmethod
    def from_str(cls, s: str) -> Movement:
        parts = s.split(" ")
        if len(parts) != 2:
            raise ValueError("Wrong number of parts")
        try:
            amount = parse_int(parts[1])
        except ValueError:
            raise ValueError("Amount is not a number") from None
        try:
            direction = Direction(parts[0])
        except ValueError:
            raise ValueError(f"Invalid direction: {parts[0]}") from None
        return cls(direction, amount)


def part1(input_path: str | Path) -> int:
    movements = parse_file_line_by_line(input_path, Movement.from_str)
    return move_directly(movements)


def part2(input_path: str | Path) -> int:
    movements = parse_file_line_by_line(input_path, Movement.from_str)
    return move_with_aim(movements)


def move_directly(movements: Sequence[Movement]) -> int:
    horizontal = 0
    depth = 0
    for m in movements:
        if m.direction is Direction.FORWARD:
            horizontal += m.amount
        elif m.direction is Direction.UP:
            depth -= m.amount
        else:
            depth += m.amount
    return horizontal * depth


def move_with_aim(movements: Sequence[Movement]) -> int:
    """Up/down steer the aim; forward moves and dives by ``amount * aim``."""
    horizontal = 0
    depth = 0
    aim = 0
    for m in movements:
        if m.direction is Direction.UP:
            aim -= m.amount
        elif m.direction is Direction.DOWN:
            aim += m.amount
        else:
            horizontal += m.amount
            depth += m.amount * aim
    return horizontal * depth
