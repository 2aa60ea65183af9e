"""Rich-powered tables for logged chat rows."""
from __future__ import annotations

from collections import Counter

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..chat.identity import Identity
from ..output.csv_encoder import HEADER_FIELDS

_console = Console()


def print_rows_table(
    rows: list[dict[str, str]],
    title: str = "Logged chat",
    max_rows: int = 100,
    console: Console | None = None,
) -> None:
    """Render logged CSV rows as a Rich table.

    Args:
        rows:      Dicts keyed by the CSV header fields.
        title:     Table title shown in the header.
        max_rows:  Hard cap — the newest rows beyond it are summarised.
        console:   Console to print on (defaults to stdout).
    """
    out = console or _console
    if not rows:
        out.print("[yellow]No rows to display.[/yellow]")
        return

    table = Table(title=title, box=box.ROUNDED, show_lines=False)
    for col in HEADER_FIELDS:
        table.add_column(col, overflow="fold", max_width=70 if col == "message" else 24)

    for row in rows[:max_rows]:
        table.add_row(*[Text(row.get(c) or "") for c in HEADER_FIELDS])

    out.print(table)
    if len(rows) > max_rows:
        out.print(f"[dim]... and {len(rows) - max_rows} more rows (use --limit to adjust)[/dim]")


def count_rows(rows: list[dict[str, str]], by: str) -> list[tuple[str, int]]:
    """Count logged rows per channel or per speaker, most frequent first.

    ``by="sender"`` groups on the full ``Name@World`` identity, so the same
    name on two worlds counts separately.
    """
    if by == "channel":
        keys = (row.get("channel") or "" for row in rows)
    elif by == "sender":
        keys = (
            str(Identity((row.get("sender") or "").strip(), (row.get("world") or "").strip()))
            for row in rows
        )
    else:
        raise ValueError(f"Cannot group chat rows by {by!r}")
    return Counter(keys).most_common()


def print_counts_table(
    rows: list[dict[str, str]],
    by: str,
    title: str = "Logged lines",
    console: Console | None = None,
) -> None:
    """Render per-channel or per-speaker line counts as a Rich table."""
    table = Table(title=f"{title} by {by}", box=box.SIMPLE_HEAVY)
    table.add_column("#", style="dim", width=4)
    table.add_column(by.title())
    table.add_column("Lines", justify="right", style="cyan")

    for rank, (value, count) in enumerate(count_rows(rows, by), start=1):
        table.add_row(str(rank), Text(value), str(count))

    (console or _console).print(table)
