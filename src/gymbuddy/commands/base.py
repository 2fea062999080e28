"""Shared CLI utilities."""

import logging
from datetime import datetime
from pathlib import Path

import click

from ..data.exercise_loader import load_seed_exercises
from ..db import get_db_path
from ..exceptions import PersistenceError
from ..models.results import Result
from ..services import Tracker, open_tracker


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr when running verbosely."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def resolve_db_path(ctx: click.Context) -> Path:
    """Database path from the ``--db`` option, or the default location."""
    obj = ctx.find_root().obj or {}
    return obj.get("db_path") or get_db_path()


def ensure_initialized(ctx: click.Context) -> None:
    """Ensure the database is initialized."""
    db_path = resolve_db_path(ctx)
    if not db_path.exists():
        click.echo(
            click.style("Error: ", fg="red")
            + "Project not initialized. Run 'gymbuddy init' first."
        )
        ctx.exit(1)


def get_tracker(ctx: click.Context) -> Tracker:
    """Load the tracker once per invocation and cache it on the root context."""
    root = ctx.find_root()
    root.ensure_object(dict)
    if "tracker" not in root.obj:
        seed_file = root.obj.get("seed_file")
        try:
            seed = load_seed_exercises(seed_file)
            root.obj["tracker"] = open_tracker(resolve_db_path(ctx), seed)
        except (PersistenceError, ValueError) as e:
            echo_error(str(e))
            ctx.exit(1)
    return root.obj["tracker"]


def unwrap_or_exit(ctx: click.Context, result: Result):
    """Return the result's value, or report the failure and exit."""
    if not result.ok:
        echo_error(result.detail)
        ctx.exit(1)
    return result.value


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.echo(click.style("[WARN] ", fg="yellow") + message)


def format_timestamp(ms: int | None) -> str:
    """Format epoch milliseconds for display."""
    if ms is None:
        return "N/A"
    return datetime.fromtimestamp(ms / 1000).strftime("%Y-%m-%d %H:%M")


def format_weight(weight: float) -> str:
    """Drop the decimal part of whole weights (60.0 -> 60)."""
    return f"{weight:g}"


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Format data as a simple table."""
    if not rows:
        return ""

    # Calculate column widths
    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    lines = ["".join(h.ljust(widths[i] + padding) for i, h in enumerate(headers))]
    lines.append("".join("-" * w + " " * padding for w in widths))
    for row in rows:
        lines.append("".join(str(cell).ljust(widths[i] + padding) for i, cell in enumerate(row)))

    return "\n".join(line.rstrip() for line in lines)
