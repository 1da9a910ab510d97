from __future__ import annotations

import pytest
from hypothesis import given, strategies as st

from aoc2021 import day1
from aoc2021.errors import ParseError

EXAMPLE = [199, 200, 208, 210, 200, 207, 240, 269, 260, 263]


def test_single_measurement_increases():
    assert day1.count_increases(EXAMPLE, 1) == 7


def test_three_measurement_window_increases():
    assert day1.count_increases(EXAMPLE, 3) == 5


def test_parts_from_file(example_input):
    assert day1.part1(example_input(1)) == 7
    assert day1.part2(example_input(1)) == 5


def test_too_few_values_for_window():
    assert day1.count_increases([1, 2], 3) == 0
    assert day1.count_increases([], 1) == 0


@given(st.lists(st.integers(min_value=0, max_value=10_000), max_size=50))
def test_window_of_three_matches_skip_comparison(depths):
    # Consecutive 3-windows share two values, so only the outer ones decide.
    expected = sum(1 for a, b in zip(depths, depths[3:]) if b > a)
    assert day1.count_increases(depths, 3) == expected


def test_padded_or_underscored_depths_are_parse_errors(tmp_path):
    f = tmp_path / "1.txt"
    f.write_text("199\n1_000\n", encoding="utf-8")
    with pytest.raises(ParseError, match="1_000"):
        day1.part1(f)
