"""Binary diagnostic report: power consumption and life support rating."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence, Tuple

from .errors import NoSolutionError
from .input_handling import parse_file_line_by_line


@dataclass(frozen=True)
class DiagnosticLine:
    bits: Tuple[bool, ...]

    @classmethod
    def from_str(cls, s: str) -> DiagnosticLine:
        bits: List[bool] = []
        for c in s.strip():
            if c == "0":
                bits.append(False)
            elif c == "1":
                bits.append(True)
            else:
                raise ValueError(f"Encountered invalid character: {c!r}")
        return cls(tuple(bits))

    def to_decimal(self) -> int:
        value = 0
        for bit in self.bits:
            value = (value << 1) | int(bit)
        return value


def part1(input_path: str | Path) -> int:
    lines = parse_file_line_by_line(input_path, DiagnosticLine.from_str)
    gamma, epsilon = calculate_gamma_epsilon_rates(lines)
    return gamma * epsilon


def part2(input_path: str | Path) -> int:
    lines = parse_file_line_by_line(input_path, DiagnosticLine.from_str)
    oxygen, co2 = calculate_oxygen_and_co2_rates(lines)
    return oxygen * co2


def count_ones_in_each_position(lines: Sequence[DiagnosticLine]) -> List[int]:
    if not lines:
        raise NoSolutionError("Empty diagnostic report")
    width = max(len(line.bits) for line in lines)
    ones = [0] * width
    for line in lines:
        for pos, bit in enumerate(line.bits):
            if bit:
                ones[pos] += 1
    return ones


def calculate_gamma_epsilon_rates(lines: Sequence[DiagnosticLine]) -> Tuple[int, int]:
    ones = count_ones_in_each_position(lines)
    majority_count = len(lines) // 2
    gamma = DiagnosticLine(tuple(c > majority_count for c in ones)).to_decimal()
    mask = (1 << len(ones)) - 1
    epsilon = ~gamma & mask
    return gamma, epsilon


def filter_gas_rate(lines: Sequence[DiagnosticLine], oxygen: bool) -> int:
    """Narrow the report bit by bit until one line is left.

    Oxygen keeps the most common bit (1 on ties), CO2 the least common
    (0 on ties).
    """
    width = len(count_ones_in_each_position(lines))
    candidates = list(lines)
    for pos in range(width):
        if len(candidates) == 1:
            break
        ones = count_ones_in_each_position(candidates)
        majority_count = (len(candidates) + 1) // 2
        keep = oxygen if ones[pos] >= majority_count else not oxygen
        candidates = [c for c in candidates if pos < len(c.bits) and c.bits[pos] == keep]
        if not candidates:
            raise NoSolutionError(f"No diagnostic line left at bit {pos}")
    return candidates[0].to_decimal()


def calculate_oxygen_and_co2_rates(lines: Sequence[DiagnosticLine]) -> Tuple[int, int]:
    return filter_gas_rate(lines, True), filter_gas_rate(lines, False)
