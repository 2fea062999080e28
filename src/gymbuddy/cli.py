"""CLI entry point for gymbuddy."""

import sys
from pathlib import Path

import click

from . import __version__
from .commands import exercises, history, init, play, routines
from .commands.base import configure_logging, echo_error
from .exceptions import PersistenceError


@click.group()
@click.version_option(version=__version__, prog_name="gymbuddy")
@click.option(
    "--db",
    "db_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="SQLite database file (default: data/gymbuddy.db)",
)
@click.option(
    "--seed-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="JSON seed catalog to merge into the exercise library",
)
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr")
@click.pass_context
def main(ctx, db_path: Path | None, seed_file: Path | None, verbose: bool):
    """gymbuddy: track workout routines on your own device.

    Build routines from a catalog of exercises, play them as live workouts
    and keep the finished sessions as history. Everything is stored locally.

    Example usage:

        # Initialize the project
        gymbuddy init

        # Build a routine
        gymbuddy routines create "Full Body A"
        gymbuddy routines add-exercise <routine> squat
        gymbuddy routines add-set <routine> <exercise> --reps 10 --weight 60

        # Work out and review
        gymbuddy play <routine>
        gymbuddy history list
    """
    configure_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["db_path"] = db_path
    ctx.obj["seed_file"] = seed_file


# Register commands
main.add_command(init)
main.add_command(routines)
main.add_command(exercises)
main.add_command(play)
main.add_command(history)


def run():
    """Run the CLI, reporting storage failures instead of a traceback."""
    try:
        main()
    except PersistenceError as e:
        echo_error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    run()
