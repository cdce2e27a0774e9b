from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Optional, Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from iniscan.core.models import ParseOutcome, Record


# ----------------------------
# Records
# ----------------------------

@dataclass(frozen=True)
class RecordsRenderOptions:
    encoding: str = "utf-8"
    show_line_numbers: bool = True
    section_placeholder: str = ""


def format_record(record: Record, *, encoding: str = "utf-8", section_placeholder: str = "") -> str:
    """``[section] key = value``, the way the records read back as INI."""
    section, key, value = record.as_text(encoding)
    return f"[{section or section_placeholder}] {key} = {value}"


def render_records_plain(
    console: Console,
    records: Sequence[Record],
    *,
    opts: Optional[RecordsRenderOptions] = None,
) -> None:
    opts = opts or RecordsRenderOptions()
    for rec in records:
        # console.out: brackets must not be read as markup
        console.out(
            format_record(rec, encoding=opts.encoding, section_placeholder=opts.section_placeholder),
            highlight=False,
        )


def render_records_json(
    console: Console,
    records: Sequence[Record],
    *,
    encoding: str = "utf-8",
) -> None:
    """One JSON object per line."""
    for rec in records:
        section, key, value = rec.as_text(encoding)
        console.out(
            json.dumps(
                {"section": section, "key": key, "value": value, "line": rec.line},
                ensure_ascii=False,
            ),
            highlight=False,
        )


def render_records_table(
    console: Console,
    records: Sequence[Record],
    *,
    opts: Optional[RecordsRenderOptions] = None,
) -> None:
    opts = opts or RecordsRenderOptions()

    if not records:
        console.print("[muted]No records.[/muted]")
        return

    table = Table(title=f"Records ({len(records)})", show_lines=False)
    if opts.show_line_numbers:
        table.add_column("Line", justify="right", no_wrap=True)
    table.add_column("Section", style="section", no_wrap=True)
    table.add_column("Key", style="key")
    table.add_column("Value", style="value")

    for rec in records:
        section, key, value = rec.as_text(opts.encoding)
        row = []
        if opts.show_line_numbers:
            row.append(str(rec.line))
        row.extend(
            [
                Text(section or opts.section_placeholder),
                Text(key),
                Text(value),
            ]
        )
        table.add_row(*row)

    console.print(table)


# ----------------------------
# Errors / summary
# ----------------------------

def render_parse_error(console: Console, outcome: ParseOutcome) -> None:
    if outcome.error is None:
        return
    err = outcome.error
    msg = Text()
    if outcome.source:
        msg.append(outcome.source, style="path")
        msg.append(": ")
    msg.append(str(err), style="error")
    msg.append(f" ({err.kind.value})", style="muted")
    console.print(msg, soft_wrap=True)


def render_parse_summary(
    console: Console,
    outcome: ParseOutcome,
    *,
    header: str = "Summary",
) -> None:
    cols = ["source", "bytes", "records", "sections", "status", "duration_ms"]

    sections = {bytes(r.section) for r in outcome.records if r.has_section}
    status = "ok" if outcome.ok else outcome.error.kind.value  # type: ignore[union-attr]
    vals = [
        outcome.source or "-",
        str(len(outcome.buffer)) if outcome.buffer is not None else "-",
        str(len(outcome.records)),
        str(len(sections)),
        status,
        str(outcome.duration_ms),
    ]

    table = Table(title=header, show_header=True, show_lines=False)
    for c in cols:
        table.add_column(c, style="bold", no_wrap=True)
    table.add_row(*vals)

    console.print()
    console.print(table)
