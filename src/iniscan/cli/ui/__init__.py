from __future__ import annotations

import logging
from dataclasses import dataclass

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

from iniscan.cli.ui.formatters import (
    RecordsRenderOptions,
    render_parse_error,
    render_parse_summary,
    render_records_json,
    render_records_plain,
    render_records_table,
)

THEME = Theme(
    {
        "ok": "green",
        "warn": "yellow",
        "error": "bold red",
        "muted": "dim",
        "path": "cyan",
        "section": "bold magenta",
        "key": "bold",
        "value": "",
    }
)


@dataclass(frozen=True)
class UI:
    console: Console
    err_console: Console
    verbose: bool = False


def _setup_logging(verbose: bool, console: Console) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    handler = RichHandler(console=console, show_path=False, rich_tracebacks=verbose)
    root = logging.getLogger("iniscan")
    root.handlers[:] = [handler]
    root.setLevel(level)


def get_ui(*, verbose: bool = False) -> UI:
    console = Console(theme=THEME)
    err_console = Console(theme=THEME, stderr=True)
    _setup_logging(verbose, err_console)
    return UI(console=console, err_console=err_console, verbose=verbose)


__all__ = [
    "UI",
    "RecordsRenderOptions",
    "get_ui",
    "render_parse_error",
    "render_parse_summary",
    "render_records_json",
    "render_records_plain",
    "render_records_table",
]
