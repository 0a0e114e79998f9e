"""CLI entry point for auto-insert."""

from __future__ import annotations

from contextlib import ExitStack, closing

import typer
from rich.console import Console
from rich.markup import escape

from auto_insert import SHEETS_PER_FILE, __version__
from auto_insert.config import RunConfig
from auto_insert.inputs import UsageError, resolve_inputs, usage_notes
from auto_insert.io import check_inputs_exist, open_workbook, save_workbook, updated_copy_path
from auto_insert.models import RunSummary
from auto_insert.pipeline import append_sheet_pairs
from auto_insert.report import preview_lines, status_line, summary_lines
from auto_insert.sheets import bind_sheets

app = typer.Typer(
    name="autoinsert",
    help="auto-insert — Append the daily EDI summary rows into the master workbook.",
    add_completion=False,
)
err_console = Console(stderr=True, soft_wrap=True, highlight=False)


def _echo_lines(lines: list[str]) -> None:
    for line in lines:
        typer.echo(line)


def _err(msg: str) -> None:
    err_console.print(f"[red]x[/red] {escape(msg)}")


def _usage(config: RunConfig, error: str | None = None) -> None:
    if error:
        _err(error)
        err_console.print()
    _echo_lines(usage_notes(config))


def _failure(exc: BaseException) -> None:
    err_console.print("Failed to read Excel.")
    err_console.print(escape(str(exc)))


# ── Helpers ──────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"auto-insert v{__version__}")
        raise typer.Exit()


# ── Command ──────────────────────────────────────────────────────


@app.command()
def main(
    args: list[str] | None = typer.Argument(
        None,
        metavar="[PATH_A [SEL_A1..SEL_A5] PATH_B [SEL_B1..SEL_B5]]",
        help=(
            "Nothing (default paths), two workbook paths, or both paths each "
            "followed by five sheet selectors (name or 1-based index)."
        ),
        show_default=False,
    ),
    version: bool | None = typer.Option(
        None, "--version", "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Copy the summary row of five daily sheets into the master workbook."""
    try:
        config = RunConfig.from_env()
    except ValueError as exc:
        _err(str(exc))
        raise typer.Exit(code=2)

    # ── Resolve inputs ───────────────────────────────────────────
    try:
        inputs = resolve_inputs(args or [], config)
        check_inputs_exist(inputs.path_a, inputs.path_b)
    except (UsageError, FileNotFoundError) as exc:
        _usage(config, str(exc))
        raise typer.Exit(code=2)

    try:
        with ExitStack() as stack:
            # ── Load ─────────────────────────────────────────────
            try:
                wb_a = stack.enter_context(closing(open_workbook(inputs.path_a, data_only=True)))
                wb_b = stack.enter_context(closing(open_workbook(inputs.path_b)))
            except (ValueError, OSError) as exc:
                _failure(exc)
                raise typer.Exit(code=1)

            # ── Bind sheets ──────────────────────────────────────
            try:
                sheets_a = bind_sheets(wb_a, inputs.selectors_a, config.sheet_selectors)
                sheets_b = bind_sheets(wb_b, inputs.selectors_b, config.sheet_selectors)
            except ValueError as exc:
                _usage(config, str(exc))
                raise typer.Exit(code=2)

            # ── Preview ──────────────────────────────────────────
            for ws in sheets_a:
                _echo_lines(preview_lines(f"File A - {ws.title}", ws))
                typer.echo()
            for idx, ws in enumerate(sheets_b):
                _echo_lines(preview_lines(f"File B - {ws.title}", ws))
                if idx < len(sheets_b) - 1:
                    typer.echo()

            # ── Append ───────────────────────────────────────────
            typer.echo()
            typer.echo("Appending 1 new row into each connected sheet...")
            results = append_sheet_pairs(sheets_a, sheets_b)
            for result in results:
                typer.echo(status_line(result))

            # ── Save ─────────────────────────────────────────────
            output_path = save_workbook(wb_b, updated_copy_path(inputs.path_b))
            summary = RunSummary(
                results=results, output_path=output_path, sheet_count=SHEETS_PER_FILE
            )
            _echo_lines(summary_lines(summary))
    except typer.Exit:
        raise
    except Exception as exc:
        _failure(exc)
        raise typer.Exit(code=1)
