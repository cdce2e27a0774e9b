from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from iniscan.cli.commands.parse import resolve_config
from iniscan.cli.ui import get_ui, render_parse_error
from iniscan.core.engine import run_parse_file


def check_cmd(
    file: Path = typer.Argument(..., help="INI file to validate."),
    legacy_comments: Optional[bool] = typer.Option(
        None,
        "--legacy-comments/--no-legacy-comments",
        help="Skip the byte after each comment like the reference parser (overrides config if set).",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Verbose output."),
) -> None:
    """Validate FILE; exit non-zero with a line-numbered diagnostic if it is malformed."""
    ui = get_ui(verbose=verbose)

    loaded_cfg = resolve_config(ui, file, legacy_comments)
    outcome = run_parse_file(file, loaded_cfg.config)

    if not outcome.ok:
        render_parse_error(ui.err_console, outcome)
    else:
        typer.echo(f"OK ({len(outcome.records)} records)")

    raise typer.Exit(code=int(outcome.exit_code))
