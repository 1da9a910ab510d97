"""Error taxonomy shared by every puzzle."""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for failures reported per puzzle by the dispatcher."""


class InputError(PuzzleError):
    """The input file could not be opened or read."""


class ParseError(PuzzleError, ValueError):
    """The input text does not match the puzzle's format."""


class NoSolutionError(PuzzleError, RuntimeError):
    """The input parsed but does not admit an answer."""


class NoWinnerError(NoSolutionError):
    """The draw sequence ran out before a board completed the requested win."""
