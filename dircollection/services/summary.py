from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from dircollection.models.entry import EntryMetadata, ScanStats


def _entries_table(title: str, entries: list[EntryMetadata], *, show_paths: bool = False) -> Table:
    table = Table(title=title, header_style="bold yellow")
    table.add_column("Name")
    table.add_column("Type", justify="center")
    if show_paths:
        table.add_column("Path")
    for entry in entries:
        row: list[str] = [
            escape(entry.name or "."),
            "DIR" if entry.is_dir else "FILE",
        ]
        if show_paths:
            row.append(escape(entry.path))
        table.add_row(*row)
    return table


def render_entries(
    console: Console,
    title: str,
    entries: list[EntryMetadata],
    stats: ScanStats,
    *,
    show_paths: bool = False,
) -> None:
    console.print(_entries_table(title, entries, show_paths=show_paths))
    console.print(f"[#b5bd68]{stats.directories:,} dirs, {stats.files:,} files[/]")
    if stats.access_errors:
        console.print(f"[red]{stats.access_errors:,} access errors during scan[/red]")
