"""Workout history commands."""

import json

import click

from ..models.session import HistoryEntry
from .base import (
    echo_info,
    echo_success,
    ensure_initialized,
    format_table,
    format_timestamp,
    format_weight,
    get_tracker,
    unwrap_or_exit,
)


@click.group()
@click.pass_context
def history(ctx):
    """Review finished workouts."""
    ensure_initialized(ctx)


@history.command(name="list")
@click.option("--limit", "-n", type=int, default=None, help="Show only the N newest")
@click.pass_context
def list_history(ctx, limit: int | None):
    """List finished workouts, newest first."""
    tracker = get_tracker(ctx)
    entries = tracker.history.list_entries()[:limit]

    if not entries:
        echo_info("No workouts finished yet. Start one with 'gymbuddy play <routine>'")
        return

    headers = ["ID", "Routine", "Finished", "Duration", "Sets"]
    rows = [
        [
            entry.id,
            entry.routine_name,
            format_timestamp(entry.finished_at),
            format_duration(entry.duration_seconds),
            f"{entry.completed_sets}/{entry.total_sets}",
        ]
        for entry in entries
    ]

    click.echo()
    click.echo(format_table(headers, rows))
    click.echo()
    click.echo(f"Total: {len(tracker.history)} workout(s)")


@history.command()
@click.argument("entry_id")
@click.pass_context
def show(ctx, entry_id: str):
    """Show one finished workout."""
    tracker = get_tracker(ctx)
    entry = unwrap_or_exit(ctx, tracker.history.get(entry_id))
    click.echo()
    click.echo(format_entry(entry))


@history.command()
@click.argument("entry_id")
@click.option(
    "--format",
    "-f",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.option(
    "--clipboard",
    "-c",
    is_flag=True,
    help="Copy to clipboard instead of printing",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(),
    help="Write to file instead of stdout",
)
@click.pass_context
def export(ctx, entry_id: str, format: str, clipboard: bool, output: str | None):
    """Export a finished workout as text or JSON.

    Examples:
        # Print a summary
        gymbuddy history export wk_abc12345

        # Copy to clipboard
        gymbuddy history export wk_abc12345 --clipboard

        # Save JSON to a file
        gymbuddy history export wk_abc12345 -f json -o workout.json
    """
    tracker = get_tracker(ctx)
    entry = unwrap_or_exit(ctx, tracker.history.get(entry_id))

    if format == "json":
        content = json.dumps(entry.to_dict(), indent=2, ensure_ascii=False)
    else:
        content = format_entry(entry)

    if clipboard:
        import pyperclip

        pyperclip.copy(content)
        echo_success("Copied to clipboard!")

    elif output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(content)
        echo_success(f"Exported to {output}")

    else:
        click.echo(content)


def format_duration(seconds: int) -> str:
    minutes, seconds = divmod(max(seconds, 0), 60)
    hours, minutes = divmod(minutes, 60)
    if hours:
        return f"{hours}h {minutes:02d}m"
    return f"{minutes}m {seconds:02d}s"


def format_entry(entry: HistoryEntry) -> str:
    """Render a finished workout as plain text."""
    lines = [
        f"Workout: {entry.routine_name} (ID: {entry.id})",
        f"Started: {format_timestamp(entry.started_at)}",
        f"Finished: {format_timestamp(entry.finished_at)}",
        f"Duration: {format_duration(entry.duration_seconds)}",
        f"Completed: {entry.completed_sets}/{entry.total_sets} sets, "
        f"volume {format_weight(entry.volume)} kg",
        "",
    ]
    for item in entry.items:
        lines.append(item.name + (f" [{item.body_part}]" if item.body_part else ""))
        for number, s in enumerate(item.sets, start=1):
            mark = "x" if s.done else " "
            lines.append(f"  [{mark}] {number}. {s.reps} reps x {format_weight(s.weight)} kg")
    return "\n".join(lines)
