from __future__ import annotations

from pathlib import Path

import typer

from iniscan.cli.utils.files import ensure_dir, write_file

app = typer.Typer(help="Initialize iniscan config in the current repo.")


DEFAULT_CONFIG_TOML = """\
[parse]
# skip the byte right after a comment, like the reference parser does
legacy_comment_skip = false
max_file_bytes = 2000000
encoding = "utf-8"

[ui]
show_line_numbers = true
# shown instead of an empty section for keys before the first [section]
section_placeholder = ""
"""


@app.command("repo")
def init_repo(
    path: Path = typer.Argument(Path("."), help="Repo path to initialize."),
    force: bool = typer.Option(False, "--force", help="Overwrite existing files."),
) -> None:
    cfg_dir = path.resolve() / ".iniscan"
    ensure_dir(cfg_dir)

    if write_file(cfg_dir / "config.toml", DEFAULT_CONFIG_TOML, force=force):
        typer.echo(f"Initialized {cfg_dir}")
    else:
        typer.echo(f"{cfg_dir / 'config.toml'} already exists (use --force to overwrite)")
