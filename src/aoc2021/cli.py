from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List, Optional

import typer

from .config import resolve_parameters
from .exercises import EXERCISES, format_result, run_exercises, select_exercises
from .logging_setup import setup_logging
from .serialize import build_run_meta, emit_results_json, emit_summary_csv
from .version import __version__

app = typer.Typer(help="Advent of Code 2021 puzzle solvers (days 1-5)")

logger = logging.getLogger(__name__)


def _show_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(0)


@app.callback()
def common_options(
    version: bool = typer.Option(
        False,
        "--version",
        help="Show application version and exit",
        is_eager=True,
        callback=_show_version,
    ),
) -> None:
    pass


@app.command()
def run(
    config: str = typer.Option(None, "--config", help="Path to config file (YAML/JSON)"),
    input_dir: str = typer.Option(None, "--input-dir", help="Folder holding <day>.txt inputs"),
    day: Optional[List[int]] = typer.Option(None, "--day", help="Day to solve (repeatable)"),
    part: Optional[List[int]] = typer.Option(None, "--part", help="Part to solve (repeatable)"),
    out_report: str = typer.Option(None, "--out-report", help="results.json output path"),
    summary_csv: str = typer.Option(None, "--summary-csv", help="Path to summary.csv (optional)"),
    log_file: str = typer.Option(None, "--log-file", help="Log file path"),
    colors: str = typer.Option(None, "--colors", help="auto|always|never"),
    log_level: str = typer.Option(None, "--log-level", help="DEBUG|INFO|WARN|ERROR"),
    strict: bool = typer.Option(False, "--strict", help="Exit with 1 if any puzzle failed"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Resolve params and exit"),
    force: bool = typer.Option(False, "--force", help="Overwrite outputs if they exist"),
    no_mkdirs: bool = typer.Option(False, "--no-mkdirs", help="Do not create parent directories"),
) -> None:
    """Solve the selected puzzles, one line per (day, part)."""

    cli_overrides = {}
    if input_dir:
        cli_overrides["input_dir"] = input_dir
    if day:
        cli_overrides["days"] = list(day)
    if part:
        cli_overrides["parts"] = list(part)
    if out_report:
        cli_overrides["out_report"] = out_report
    if summary_csv:
        cli_overrides["summary_csv"] = summary_csv
    if log_file:
        cli_overrides["log_file"] = log_file
    if colors:
        cli_overrides["colors"] = colors
    if log_level:
        cli_overrides["log_level"] = log_level
    if strict:
        cli_overrides["strict"] = True

    resolved, params_hash, _cfg_path = resolve_parameters(
        config_path_str=config, cli_overrides=cli_overrides
    )

    setup_logging(
        level=str(resolved.get("log_level", "INFO")),
        log_file=resolved.get("log_file"),
        json_format=(str(resolved.get("log_format", "text")) == "json"),
        colors=str(resolved.get("colors", "auto")),
    )

    exercises = select_exercises(resolved.get("days"), resolved.get("parts"))
    input_folder = str(resolved["input_dir"])

    if dry_run:
        typer.echo(f"Input dir: {input_folder}")
        typer.echo(f"Params hash: {params_hash}")
        for ex in exercises:
            typer.echo(f"Day {ex.day}, part {ex.part}")
        raise typer.Exit(0)

    if not exercises:
        typer.echo("No puzzles match the selected days/parts.", err=True)
        raise typer.Exit(code=2)

    logger.debug("Running %d exercises from %s", len(exercises), input_folder)
    results = run_exercises(input_folder, exercises)
    for res in results:
        typer.echo(format_result(res))

    if resolved.get("out_report"):
        run_meta = build_run_meta(
            app_version=__version__, params_hash=params_hash, input_dir=input_folder
        )
        emit_results_json(
            Path(resolved["out_report"]),
            results=results,
            run_meta=run_meta,
            mkdirs=(not no_mkdirs),
            overwrite=force,
        )

    if resolved.get("summary_csv"):
        emit_summary_csv(
            Path(resolved["summary_csv"]),
            results=results,
            mkdirs=(not no_mkdirs),
            overwrite=force,
        )

    failures = sum(1 for res in results if not res.ok)
    if failures and resolved.get("strict"):
        raise typer.Exit(code=1)
    raise typer.Exit(code=0)


@app.command("list")
def list_exercises() -> None:
    """Show the (day, part) dispatch table."""
    for ex in EXERCISES:
        typer.echo(f"Day {ex.day}, part {ex.part}: {ex.solve.__module__}.{ex.solve.__name__}")


def main(_argv: list[str] | None = None) -> int:
    try:
        app(standalone_mode=True)
        return 0
    except SystemExit as e:
        return int(e.code) if e.code is not None else 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
