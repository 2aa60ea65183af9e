"""Speakerlog CLI — entry point.

Commands:
    speakerlog replay <transcript>   Log a recorded transcript's matching lines
    speakerlog tail   <transcript>   Follow a live transcript and log as it grows
    speakerlog check  <sender>       Does a sender match the target?
    speakerlog show   [csv]          Display logged rows or per-sender counts
"""
from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .chat.events import ChatEvent
from .chat.feed import ChatFeed
from .chat.identity import matches, parse_identity
from .chat.reader import TranscriptReader
from .config import Settings, load_settings
from .logger import SpeakerLogger, normalize_body
from .output.csv_log import CsvLog

console = Console()
err_console = Console(stderr=True)

_target_option = click.option(
    "--target", "-t", default=None,
    help="Speaker to log, 'Name' or 'Name@World' (default: $SPEAKERLOG_TARGET).",
)
_output_option = click.option(
    "--output", "-o", default=None, type=click.Path(dir_okay=False, path_type=Path),
    help="CSV file to append to (default: $SPEAKERLOG_OUTPUT_CSV_PATH).",
)

# ── Helpers ─────────────────────────────────────────────────────────────────


def _settings(**overrides: object) -> Settings:
    settings = load_settings(**overrides)
    if not settings.target:
        err_console.print("[yellow]No target configured — nothing will be logged.[/yellow]")
    return settings


# ── CLI root ─────────────────────────────────────────────────────────────────


@click.group()
@click.version_option(version="1.0.0", prog_name="speakerlog")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging on stderr.")
def main(verbose: bool) -> None:
    """speakerlog — log one speaker's chat lines to CSV."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


# ── replay ───────────────────────────────────────────────────────────────────


@main.command()
@click.argument("transcript", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@_target_option
@_output_option
def replay(transcript: Path, target: str | None, output: Path | None) -> None:
    """Feed a recorded NDJSON transcript through the speaker filter.

    \b
    Examples:
      speakerlog replay chat.ndjson --target "Alice@Leviathan"
      speakerlog replay chat.ndjson -t Alice -o alice.csv
    """
    settings = _settings(target=target, output_csv_path=output)
    speaker_log = SpeakerLogger.from_settings(settings)

    seen = 0
    logged = 0
    for event in TranscriptReader().parse_file(transcript):
        seen += 1
        if speaker_log(event):
            logged += 1

    console.print(
        f"[dim]Logged {logged} of {seen} event{'s' if seen != 1 else ''} "
        f"to {speaker_log.csv.path}[/dim]"
    )


# ── tail ─────────────────────────────────────────────────────────────────────


@main.command()
@click.argument("transcript", type=click.Path(dir_okay=False, path_type=Path))
@_target_option
@_output_option
@click.option("--interval", default=None, type=float, help="Poll interval in seconds.")
@click.option("--from-start", is_flag=True, help="Process lines already in the file first.")
def tail(
    transcript: Path,
    target: str | None,
    output: Path | None,
    interval: float | None,
    from_start: bool,
) -> None:
    """Follow a live transcript, logging the target's lines as they arrive.

    \b
    Examples:
      speakerlog tail live.ndjson --target "Alice@Leviathan"
    """
    settings = _settings(target=target, output_csv_path=output, poll_interval=interval)
    speaker_log = SpeakerLogger.from_settings(settings)

    def _log_and_echo(event: ChatEvent) -> None:
        if speaker_log(event):
            sender = parse_identity(event.sender)
            console.print(
                f"[cyan]{escape(event.channel)}[/cyan] [bold]{escape(str(sender))}[/bold]: "
                f"{escape(normalize_body(event.message))}"
            )

    feed = ChatFeed()
    feed.subscribe(_log_and_echo)

    if not transcript.exists():
        err_console.print(f"[yellow]Waiting for {transcript} to appear…[/yellow]")
    console.print(f"[dim]Tailing {transcript} → {speaker_log.csv.path} (Ctrl+C to stop)[/dim]")
    try:
        for event in TranscriptReader().follow(
            transcript, poll_interval=settings.poll_interval, from_start=from_start
        ):
            feed.publish(event)
    except KeyboardInterrupt:
        console.print("\n[dim]Stopped.[/dim]")


# ── check ────────────────────────────────────────────────────────────────────


@main.command()
@click.argument("sender")
@_target_option
@click.pass_context
def check(ctx: click.Context, sender: str, target: str | None) -> None:
    """Report whether SENDER would be logged for the target. Exits 1 if not.

    \b
    Examples:
      speakerlog check "alice@leviathan" --target "Alice@Leviathan"
    """
    settings = load_settings(target=target)
    target_id = parse_identity(settings.target)
    if not target_id.name:
        raise click.UsageError("No target configured; pass --target or set SPEAKERLOG_TARGET.")

    sender_id = parse_identity(sender)
    if matches(sender_id, target_id):
        console.print(f"[green]match[/green]  {sender_id} → {target_id}")
        return
    console.print(f"[red]no match[/red]  {sender_id} → {target_id}")
    ctx.exit(1)


# ── show ─────────────────────────────────────────────────────────────────────


@main.command()
@click.argument("csv_file", required=False, type=click.Path(dir_okay=False, path_type=Path))
@click.option("--limit", "-n", default=100, type=int, help="Max rows to display.", show_default=True)
@click.option(
    "--by", "-b", "group_by", default=None,
    type=click.Choice(["channel", "sender"], case_sensitive=False),
    help="Show counts per channel or sender instead of rows.",
)
def show(csv_file: Path | None, limit: int, group_by: str | None) -> None:
    """Display rows from the output CSV.

    \b
    Examples:
      speakerlog show
      speakerlog show alice.csv --limit 20
      speakerlog show alice.csv --by channel
    """
    from .visualization.tables import print_counts_table, print_rows_table

    path = csv_file or load_settings().output_csv_path
    log = CsvLog(path)
    if not log.path.exists():
        err_console.print(f"[yellow]{log.path} does not exist yet.[/yellow]")
        return

    rows = list(log.read_rows())
    if group_by:
        print_counts_table(rows, by=group_by.lower(), title=log.path.name, console=console)
    else:
        print_rows_table(rows, title=log.path.name, max_rows=limit, console=console)
    console.print(f"[dim]{len(rows)} rows in {log.path}[/dim]")


if __name__ == "__main__":
    main()
