from __future__ import annotations

import pytest

from aoc2021.day3 import (
    DiagnosticLine,
    calculate_gamma_epsilon_rates,
    calculate_oxygen_and_co2_rates,
    count_ones_in_each_position,
    part1,
    part2,
)
from aoc2021.errors import NoSolutionError
from aoc2021.input_handling import parse_file_line_by_line

RAW = [
    "00100", "11110", "10110", "10111", "10101", "01111",
    "00111", "11100", "10000", "11001", "00010", "01010",
]


def example():
    return [DiagnosticLine.from_str(s) for s in RAW]


def test_parse_input(example_input):
    lines = parse_file_line_by_line(example_input(3), DiagnosticLine.from_str)
    assert lines == example()
    assert lines[0].bits == (False, False, True, False, False)


def test_to_decimal():
    assert DiagnosticLine.from_str("10110").to_decimal() == 22
    assert DiagnosticLine.from_str("").to_decimal() == 0


def test_invalid_character():
    with pytest.raises(ValueError):
        DiagnosticLine.from_str("10a10")


def test_gamma_epsilon():
    assert calculate_gamma_epsilon_rates(example()) == (22, 9)


def test_oxygen_co2():
    assert calculate_oxygen_and_co2_rates(example()) == (23, 10)


def test_parts_from_file(example_input):
    assert part1(example_input(3)) == 198
    assert part2(example_input(3)) == 230


def test_empty_report_has_no_solution():
    with pytest.raises(NoSolutionError):
        count_ones_in_each_position([])
