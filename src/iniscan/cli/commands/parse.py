from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

import typer

from iniscan.cli.ui import (
    UI,
    RecordsRenderOptions,
    get_ui,
    render_parse_error,
    render_parse_summary,
    render_records_json,
    render_records_plain,
    render_records_table,
)
from iniscan.core.config import LoadedConfig, load_config
from iniscan.core.engine import run_parse_file
from iniscan.core.errors import ConfigError
from iniscan.core.models import ParseOutcome


def build_cli_overrides(legacy_comments: Optional[bool]) -> Dict[str, Any]:
    cli_overrides: Dict[str, Any] = {"parse": {}}
    if legacy_comments is not None:
        cli_overrides["parse"]["legacy_comment_skip"] = bool(legacy_comments)
    return cli_overrides


def resolve_config(ui: UI, file: Path, legacy_comments: Optional[bool]) -> LoadedConfig:
    """Load layered config for FILE, exiting with LOAD_ERROR if any layer is bad."""
    try:
        return load_config(
            start_dir=file.resolve().parent,
            cli_overrides=build_cli_overrides(legacy_comments),
        )
    except ConfigError as e:
        outcome = ParseOutcome(error=e, source=str(file))
        render_parse_error(ui.err_console, outcome)
        raise typer.Exit(code=int(outcome.exit_code))


def parse_cmd(
    file: Path = typer.Argument(..., help="INI file to parse."),
    plain: bool = typer.Option(
        False, "--plain", help="Print '[section] key = value' lines instead of a table."
    ),
    as_json: bool = typer.Option(False, "--json", help="Print one JSON object per record."),
    legacy_comments: Optional[bool] = typer.Option(
        None,
        "--legacy-comments/--no-legacy-comments",
        help="Skip the byte after each comment like the reference parser (overrides config if set).",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Verbose output."),
) -> None:
    """Parse FILE and print its (section, key, value) records."""
    ui = get_ui(verbose=verbose)
    console = ui.console

    loaded_cfg = resolve_config(ui, file, legacy_comments)
    cfg = loaded_cfg.config

    if ui.verbose:
        ui.err_console.print("[bold]Config sources:[/bold]")
        ui.err_console.print(f"  global: {loaded_cfg.global_path or '-'}")
        ui.err_console.print(f"  repo:   {loaded_cfg.repo_path or '-'}")

    outcome = run_parse_file(file, cfg)

    if not outcome.ok:
        render_parse_error(ui.err_console, outcome)
        raise typer.Exit(code=int(outcome.exit_code))

    opts = RecordsRenderOptions(
        encoding=cfg.encoding,
        show_line_numbers=loaded_cfg.ui_config.show_line_numbers,
        section_placeholder=loaded_cfg.ui_config.section_placeholder,
    )
    if as_json:
        render_records_json(console, outcome.records, encoding=cfg.encoding)
    elif plain:
        render_records_plain(console, outcome.records, opts=opts)
    else:
        render_records_table(console, outcome.records, opts=opts)

    if ui.verbose:
        render_parse_summary(ui.err_console, outcome)

    raise typer.Exit(code=int(outcome.exit_code))
