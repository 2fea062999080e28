"""Initialize project command."""

import click

from .base import echo_info, echo_success, get_tracker, resolve_db_path


@click.command()
@click.pass_context
def init(ctx):
    """Initialize the gymbuddy database and exercise library.

    Creates the SQLite database if needed and stores the default state with
    the seed exercise catalog. Existing routines and history are kept.
    """
    db_path = resolve_db_path(ctx)
    echo_info(f"Initializing gymbuddy in {db_path.parent}")

    tracker = get_tracker(ctx)
    echo_success(f"Exercise library ready ({len(tracker.state.library)} seed exercises)")

    click.echo()
    click.echo("gymbuddy is ready to use!")
    click.echo()
    click.echo("Next steps:")
    click.echo('  1. Create a routine:        gymbuddy routines create "Full Body A"')
    click.echo("  2. Browse exercises:        gymbuddy exercises list --body-part legs")
    click.echo("  3. Add exercises and sets:  gymbuddy routines add-exercise <routine> <exercise>")
    click.echo("  4. Start a workout:         gymbuddy play <routine>")
