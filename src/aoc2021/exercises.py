"""Static (day, part) dispatch table and the per-puzzle failure boundary."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence

from . import day1, day2, day3, day4, day5
from .errors import PuzzleError
from .input_handling import input_path

logger = logging.getLogger(__name__)

Solver = Callable[[str], int]


@dataclass(frozen=True)
class Exercise:
    day: int
    part: int
    solve: Solver


@dataclass
class ExerciseResult:
    day: int
    part: int
    result: Optional[int]
    error: Optional[str]
    elapsed: float

    @property
    def ok(self) -> bool:
        return self.error is None


EXERCISES: tuple[Exercise, ...] = (
    Exercise(1, 1, day1.part1),
    Exercise(1, 2, day1.part2),
    Exercise(2, 1, day2.part1),
    Exercise(2, 2, day2.part2),
    Exercise(3, 1, day3.part1),
    Exercise(3, 2, day3.part2),
    Exercise(4, 1, day4.part1),
    Exercise(4, 2, day4.part2),
    Exercise(5, 1, day5.part1),
    Exercise(5, 2, day5.part2),
)


def select_exercises(
    days: Iterable[int] | None = None, parts: Iterable[int] | None = None
) -> List[Exercise]:
    wanted_days = set(days or [])
    wanted_parts = set(parts or [])
    return [
        ex
        for ex in EXERCISES
        if (not wanted_days or ex.day in wanted_days)
        and (not wanted_parts or ex.part in wanted_parts)
    ]


def run_exercise(exercise: Exercise, input_dir: str | Path) -> ExerciseResult:
    path = input_path(input_dir, exercise.day)
    start = time.perf_counter()
    try:
        result = exercise.solve(str(path))
    except PuzzleError as exc:
        elapsed = time.perf_counter() - start
        logger.error("Day %d, part %d failed: %s", exercise.day, exercise.part, exc)
        return ExerciseResult(exercise.day, exercise.part, None, str(exc), elapsed)
    elapsed = time.perf_counter() - start
    logger.info("Day %d, part %d solved in %.3fs", exercise.day, exercise.part, elapsed)
    return ExerciseResult(exercise.day, exercise.part, result, None, elapsed)


def run_exercises(
    input_dir: str | Path, exercises: Sequence[Exercise] = EXERCISES
) -> List[ExerciseResult]:
    return [run_exercise(ex, input_dir) for ex in exercises]


def format_result(res: ExerciseResult) -> str:
    if res.ok:
        return f"Day {res.day}, part {res.part}: Result = {res.result}"
    return f"Day {res.day}, part {res.part}: Failed ({res.error})"
