"""Giant squid bingo.

Boards are 5x5 grids of distinct numbers. Numbers are drawn in a fixed order
and applied to every board in input order; a board wins once a full row or
column is drawn. Part 1 scores the first board to win, part 2 the last one.
"""

from __future__ import annotations

import copy
import enum
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from .errors import NoWinnerError, ParseError
from .input_handling import parse_int, read_input

BOARD_SIZE = 5

logger = logging.getLogger(__name__)


@dataclass
class Cell:
    value: int
    drawn: bool = False

    def __str__(self) -> str:
        return f"{'D' if self.drawn else 'N'}({self.value})"


class BoardState(enum.Enum):
    RUNNING = "running"
    WON = "won"
    ALREADY_WON = "already_won"


@dataclass
class Board:
    cells: List[List[Cell]]
    state: BoardState = BoardState.RUNNING

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> Board:
        """Build a running board, rejecting anything but 5 rows of 5 distinct values."""
        if len(rows) != BOARD_SIZE:
            raise ParseError(f"Board doesn't have {BOARD_SIZE} lines")
        seen = set()
        cells: List[List[Cell]] = []
        for row in rows:
            if len(row) != BOARD_SIZE:
                raise ParseError(f"Line doesn't have {BOARD_SIZE} columns")
            for value in row:
                if value in seen:
                    raise ParseError(f"Board repeats number {value}")
                seen.add(value)
            cells.append([Cell(value) for value in row])
        return cls(cells)

    def draw(self, number: int) -> BoardState:
        """Mark ``number`` and return the resulting state.

        A board that has already won moves to ALREADY_WON on every later
        draw, so it is reported as WON exactly once.
        """
        position = self._mark(number)

        if self.state is not BoardState.RUNNING:
            self.state = BoardState.ALREADY_WON
            return self.state

        if position is None:
            return self.state

        row, column = position
        row_done = all(cell.drawn for cell in self.cells[row])
        column_done = all(self.cells[i][column].drawn for i in range(BOARD_SIZE))
        if row_done or column_done:
            self.state = BoardState.WON
        return self.state

    def _mark(self, number: int) -> Optional[Tuple[int, int]]:
        for i, row in enumerate(self.cells):
            for j, cell in enumerate(row):
                if not cell.drawn and cell.value == number:
                    cell.drawn = True
                    return i, j
        return None

    def unmarked_sum(self) -> int:
        return sum(cell.value for row in self.cells for cell in row if not cell.drawn)

    def score(self, last_drawn: int) -> int:
        return self.unmarked_sum() * last_drawn

    def snapshot(self) -> Board:
        return copy.deepcopy(self)

    def __str__(self) -> str:
        return "[" + "".join("[" + " ".join(str(c) for c in row) + "]" for row in self.cells) + "]"


@dataclass
class Bingo:
    """A single-use game: the draw cursor only moves forward."""

    draw_order: List[int]
    boards: List[Board]
    current_draw_index: int = 0
    _played: bool = field(default=False, repr=False, compare=False)

    def _start(self) -> None:
        if self._played:
            raise RuntimeError("Bingo game was already played; parse the input again to replay it")
        self._played = True

    def _draws(self):
        while self.current_draw_index < len(self.draw_order):
            drawn = self.draw_order[self.current_draw_index]
            self.current_draw_index += 1
            yield drawn

    def run_until_first_win(self) -> Tuple[Board, int]:
        self._start()
        for drawn in self._draws():
            for idx, board in enumerate(self.boards):
                if board.draw(drawn) is BoardState.WON:
                    logger.debug("Board %d wins first on %d", idx, drawn)
                    return board.snapshot(), drawn
        raise NoWinnerError("Didn't have a winner")

    def run_until_last_win(self) -> Tuple[Board, int]:
        self._start()
        completed = 0
        total = len(self.boards)
        for drawn in self._draws():
            for idx, board in enumerate(self.boards):
                if board.draw(drawn) is BoardState.WON:
                    completed += 1
                    logger.debug("Board %d wins on %d (%d/%d)", idx, drawn, completed, total)
                    if completed == total:
                        return board.snapshot(), drawn
        raise NoWinnerError(f"Only {completed} of {total} boards won")


def parse_bingo(text: str) -> Bingo:
    lines = text.rstrip().splitlines()
    if not lines:
        raise ParseError("Input is empty")

    try:
        draw_order = [parse_int(s) for s in lines[0].strip().split(",")]
    except ValueError as exc:
        raise ParseError(f"Couldn't parse draw order: {lines[0]}") from exc

    boards: List[Board] = []
    block_len = BOARD_SIZE + 1
    rest = lines[1:]
    for start in range(0, len(rest), block_len):
        block = rest[start : start + block_len]
        if block[0].strip():
            raise ParseError(f"Expected a blank line before board {len(boards) + 1}")
        rows: List[List[int]] = []
        for line in block[1:]:
            try:
                rows.append([parse_int(s) for s in line.split()])
            except ValueError as exc:
                raise ParseError(f"Couldn't parse board line: {line}") from exc
        boards.append(Board.from_rows(rows))

    logger.debug("Parsed %d draws and %d boards", len(draw_order), len(boards))
    return Bingo(draw_order, boards)


def parse_input(input_path: str | Path) -> Bingo:
    return parse_bingo(read_input(input_path))


def part1(input_path: str | Path) -> int:
    board, last_drawn = parse_input(input_path).run_until_first_win()
    return board.score(last_drawn)


def part2(input_path: str | Path) -> int:
    board, last_drawn = parse_input(input_path).run_until_last_win()
    return board.score(last_drawn)
