from __future__ import annotations

import json
import logging
from pathlib import Path

from rich.logging import RichHandler

from aoc2021.logging_setup import setup_logging


def test_console_and_json_file_handlers(tmp_path: Path):
    log_file = tmp_path / "run.log"
    setup_logging(level="DEBUG", log_file=str(log_file), json_format=True, colors="never")
    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert any(isinstance(h, RichHandler) for h in root.handlers)

    logging.getLogger("aoc2021.test").info("solved %d", 7)
    for handler in root.handlers:
        handler.flush()

    record = json.loads(log_file.read_text(encoding="utf-8").splitlines()[-1])
    assert record["message"] == "solved 7"
    assert record["logger"] == "aoc2021.test"

    setup_logging(level="WARNING")
    assert logging.getLogger().level == logging.WARNING
