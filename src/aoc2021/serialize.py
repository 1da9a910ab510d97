from __future__ import annotations

import csv
import json
import platform
import sys
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Sequence

from .exercises import ExerciseResult


def ensure_parent(path: Path, *, mkdirs: bool) -> None:
    parent = path.parent
    if not parent.exists() and mkdirs:
        parent.mkdir(parents=True, exist_ok=True)


def _refuse_overwrite(path: Path, overwrite: bool) -> None:
    if path.exists() and not overwrite:
        raise FileExistsError(
            f"Refusing to overwrite existing file without --force: {path}"
        )


def write_json(path: Path, data: object, *, mkdirs: bool, overwrite: bool) -> None:
    _refuse_overwrite(path, overwrite)
    ensure_parent(path, mkdirs=mkdirs)
    text = json.dumps(data, ensure_ascii=True, sort_keys=True, indent=2)
    path.write_text(text + "\n", encoding="utf-8")


def build_run_meta(*, app_version: str, params_hash: str, input_dir: str) -> Dict[str, object]:
    return {
        "app_version": app_version,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "python_version": sys.version.split()[0],
        "platform": platform.system().lower(),
        "params_hash": params_hash,
        "input_dir": input_dir,
    }


def emit_results_json(
    path: Path,
    *,
    results: Sequence[ExerciseResult],
    run_meta: Dict[str, object],
    mkdirs: bool,
    overwrite: bool,
) -> None:
    entries = []
    for res in results:
        entry = asdict(res)
        entry["elapsed"] = round(res.elapsed, 6)
        entry["status"] = "ok" if res.ok else "failed"
        entries.append(entry)
    data = {
        "run_meta": run_meta,
        "results": entries,
        "failures": sum(1 for res in results if not res.ok),
    }
    write_json(path, data, mkdirs=mkdirs, overwrite=overwrite)


def emit_summary_csv(
    path: Path,
    *,
    results: Sequence[ExerciseResult],
    mkdirs: bool,
    overwrite: bool,
) -> None:
    _refuse_overwrite(path, overwrite)
    ensure_parent(path, mkdirs=mkdirs)
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["day", "part", "status", "result", "error"])
        for res in results:
            writer.writerow(
                [
                    res.day,
                    res.part,
                    "ok" if res.ok else "failed",
                    "" if res.result is None else res.result,
                    res.error or "",
                ]
            )
