from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as _dist_version

import typer
from rich.console import Console

from iniscan.cli.commands.check import check_cmd
from iniscan.cli.commands.init import app as init_app
from iniscan.cli.commands.parse import parse_cmd

app = typer.Typer(
    name="iniscan",
    help="Parse INI files into ordered (section, key, value) records.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()


def _version() -> str:
    try:
        return _dist_version("iniscan")
    except PackageNotFoundError:
        return "0.1.0"


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"iniscan {_version()}")
        raise typer.Exit(0)


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", help="Show version and exit.", callback=_version_callback, is_eager=True
    ),
) -> None:
    pass


app.command("parse")(parse_cmd)
app.command("check")(check_cmd)

# Register command groups
app.add_typer(init_app, name="init")
