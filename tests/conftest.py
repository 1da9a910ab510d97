from __future__ import annotations

import shutil
from pathlib import Path

import pytest

INPUTS = Path(__file__).parent / "inputs"


@pytest.fixture
def example_input():
    def _path(day: int) -> str:
        return str(INPUTS / f"{day}_example.txt")

    return _path


@pytest.fixture
def example_dir(tmp_path: Path) -> Path:
    """A puzzle input folder holding every example as <day>.txt."""
    folder = tmp_path / "inputs"
    folder.mkdir()
    for src in INPUTS.glob("*_example.txt"):
        day = src.name.split("_", 1)[0]
        shutil.copy(src, folder / f"{day}.txt")
    return folder
