from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Callable, List, TypeVar

from .errors import InputError, ParseError

T = TypeVar("T")

DEFAULT_INPUT_FOLDER = "inputs"

_INTEGER = re.compile(r"[+-]?[0-9]+")

logger = logging.getLogger(__name__)


def input_path(folder: str | Path, day: int) -> Path:
    return Path(folder) / f"{day}.txt"


def parse_int(token: str) -> int:
    """Parse a plain ASCII integer; no padding, underscores or other digits."""
    if not _INTEGER.fullmatch(token):
        raise ValueError(f"Not an integer: {token!r}")
    return int(token)


def read_input(path: str | Path) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise InputError(f"File is not valid UTF-8: {path}") from exc
    except OSError as exc:
        raise InputError(f"Couldn't open file: {path}") from exc


def parse_file_line_by_line(path: str | Path, parse: Callable[[str], T]) -> List[T]:
    """Parse every line of ``path`` into a record using ``parse``.

    ``parse`` signals malformed lines with ``ValueError``; the first such line
    aborts the whole file with a ParseError naming it.
    """
    records: List[T] = []
    try:
        with Path(path).open(encoding="utf-8") as f:
            for line in f:
                line = line.rstrip("\r\n")
                try:
                    records.append(parse(line))
                except ValueError as exc:
                    raise ParseError(f"Couldn't parse: {line}") from exc
    except UnicodeDecodeError as exc:
        raise InputError(f"File is not valid UTF-8: {path}") from exc
    except OSError as exc:
        raise InputError(f"Couldn't open file: {path}") from exc
    logger.debug("Parsed %d records from %s", len(records), path)
    return records
