from __future__ import annotations

import itertools

import numpy as np
import pytest

from aoc2021.day5 import (
    VentLine,
    VentPoint,
    count_overlapping_lines,
    iter_changes,
    parse_input,
    part1,
    part2,
    plot_line_overlap,
)
from aoc2021.errors import NoSolutionError, ParseError


def create_example_input():
    pairs = [
        ((0, 9), (5, 9)), ((8, 0), (0, 8)), ((9, 4), (3, 4)), ((2, 2), (2, 1)),
        ((7, 0), (7, 4)), ((6, 4), (2, 0)), ((0, 9), (2, 9)), ((3, 4), (1, 4)),
        ((0, 0), (8, 8)), ((5, 5), (8, 2)),
    ]
    return [VentLine(VentPoint(*a), VentPoint(*b)) for a, b in pairs]


STRAIGHT_PLOT = [
    [0, 0, 0, 0, 0, 0, 0, 1, 0, 0],
    [0, 0, 1, 0, 0, 0, 0, 1, 0, 0],
    [0, 0, 1, 0, 0, 0, 0, 1, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 1, 0, 0],
    [0, 1, 1, 2, 1, 1, 1, 2, 1, 1],
    [0, 0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0, 0],
    [2, 2, 2, 1, 1, 1, 0, 0, 0, 0],
]

DIAGONAL_PLOT = [
    [1, 0, 1, 0, 0, 0, 0, 1, 1, 0],
    [0, 1, 1, 1, 0, 0, 0, 2, 0, 0],
    [0, 0, 2, 0, 1, 0, 1, 1, 1, 0],
    [0, 0, 0, 1, 0, 2, 0, 2, 0, 0],
    [0, 1, 1, 2, 3, 1, 3, 2, 1, 1],
    [0, 0, 0, 1, 0, 2, 0, 0, 0, 0],
    [0, 0, 1, 0, 0, 0, 1, 0, 0, 0],
    [0, 1, 0, 0, 0, 0, 0, 1, 0, 0],
    [1, 0, 0, 0, 0, 0, 0, 0, 1, 0],
    [2, 2, 2, 1, 1, 1, 0, 0, 0, 0],
]


def test_parse_input(example_input):
    assert parse_input(example_input(5)) == create_example_input()


def test_plot_line_overlap_without_diagonals():
    plot = plot_line_overlap(create_example_input(), False)
    np.testing.assert_array_equal(plot, np.array(STRAIGHT_PLOT))


def test_plot_line_overlap_with_diagonals():
    plot = plot_line_overlap(create_example_input(), True)
    np.testing.assert_array_equal(plot, np.array(DIAGONAL_PLOT))


def test_count_overlapping_lines():
    assert count_overlapping_lines(np.array(STRAIGHT_PLOT)) == 5
    assert count_overlapping_lines(np.array(DIAGONAL_PLOT)) == 12


def test_parts_from_file(example_input):
    assert part1(example_input(5)) == 5
    assert part2(example_input(5)) == 12


def test_changes_iter_increasing():
    assert list(iter_changes(0, 2)) == [0, 1, 2]


def test_changes_iter_decreasing():
    assert list(iter_changes(2, 0)) == [2, 1, 0]


def test_changes_iter_constant():
    assert list(itertools.islice(iter_changes(0, 0), 3)) == [0, 0, 0]


def test_single_point_line_covers_one_cell():
    line = VentLine(VentPoint(3, 3), VentPoint(3, 3))
    assert list(line.points()) == [(3, 3)]
    assert plot_line_overlap([line, line], False)[3, 3] == 2


@pytest.mark.parametrize(
    "text", ["1,2 -> 3", "1,2 3,4", "1,2 -> 3,4 -> 5,6", "a,2 -> 3,4", "0,0 -> 2,1"]
)
def test_malformed_lines(text):
    with pytest.raises(ValueError):
        VentLine.from_str(text)


def test_malformed_file_is_parse_error(tmp_path):
    f = tmp_path / "5.txt"
    f.write_text("0,9 -> 5,9\n0,9 => 5,9\n", encoding="utf-8")
    with pytest.raises(ParseError):
        part1(f)


def test_empty_input_has_no_solution():
    with pytest.raises(NoSolutionError):
        plot_line_overlap([], True)
