"""Routine management commands."""

import click

from ..models.routine import ReplaceReps, ReplaceWeight, Routine
from ..services import Tracker
from .base import (
    echo_error,
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
def routines(ctx):
    """Manage workout routines.

    Commands for creating routines and editing their exercises and sets.
    """
    ensure_initialized(ctx)


@routines.command(name="list")
@click.pass_context
def list_routines(ctx):
    """List all routines."""
    tracker = get_tracker(ctx)
    all_routines = tracker.routines.list_routines()

    if not all_routines:
        echo_info("No routines yet. Create one with 'gymbuddy routines create <name>'")
        return

    last_opened = tracker.state.last_opened_routine_id
    headers = ["ID", "Name", "Exercises", "Sets", "Updated"]
    rows = []
    for routine in all_routines:
        name = routine.name[:30] + "..." if len(routine.name) > 30 else routine.name
        if routine.id == last_opened:
            name += " *"
        rows.append([
            routine.id,
            name,
            str(len(routine.exercises)),
            str(routine.total_sets),
            format_timestamp(routine.updated_at),
        ])

    click.echo()
    click.echo(format_table(headers, rows))
    click.echo()
    click.echo(f"Total: {len(all_routines)} routine(s)")


@routines.command()
@click.argument("name")
@click.pass_context
def create(ctx, name: str):
    """Create a new, empty routine."""
    tracker = get_tracker(ctx)
    routine = unwrap_or_exit(ctx, tracker.routines.create_routine(name))
    echo_success(f"Routine '{routine.name}' created (ID: {routine.id})")


@routines.command()
@click.argument("routine_id")
@click.pass_context
def show(ctx, routine_id: str):
    """Show a routine with its exercises and sets."""
    tracker = get_tracker(ctx)
    routine = unwrap_or_exit(ctx, tracker.routines.open_routine(routine_id))

    click.echo()
    click.echo("=" * 60)
    click.echo(f"Routine: {routine.name} (ID: {routine.id})")
    click.echo("=" * 60)
    click.echo(f"Updated: {format_timestamp(routine.updated_at)}")
    click.echo()
    click.echo(describe_routine(tracker, routine))


def describe_routine(tracker: Tracker, routine: Routine) -> str:
    """Render a routine's exercises and sets as text."""
    if not routine.exercises:
        return "No exercises yet. Add some with 'gymbuddy routines add-exercise'."

    lines = []
    for rex in routine.exercises:
        exercise = tracker.catalog.resolve(rex.exercise_ref)
        if exercise is None:
            lines.append(f"{rex.id}  Exercise (missing from catalog)")
        else:
            detail = " - ".join(p for p in (exercise.body_part, exercise.equipment) if p)
            lines.append(f"{rex.id}  {exercise.name}" + (f" [{detail}]" if detail else ""))

        if not rex.sets:
            lines.append("    (no sets)")
        for number, workout_set in enumerate(rex.sets, start=1):
            lines.append(
                f"    {number}. {workout_set.reps} reps x "
                f"{format_weight(workout_set.weight)} kg  ({workout_set.id})"
            )
    return "\n".join(lines)


@routines.command()
@click.argument("routine_id")
@click.option("--force", "-f", is_flag=True, help="Skip confirmation")
@click.pass_context
def delete(ctx, routine_id: str, force: bool):
    """Delete a routine. Workout history is kept."""
    tracker = get_tracker(ctx)
    routine = unwrap_or_exit(ctx, tracker.routines.get(routine_id))

    if not force:
        click.echo(f"Routine: {routine.name}")
        if not click.confirm("Are you sure you want to delete this routine?"):
            echo_info("Cancelled")
            return

    unwrap_or_exit(ctx, tracker.routines.delete_routine(routine_id))
    echo_success(f"Routine {routine_id} deleted")


@routines.command(name="add-exercise")
@click.argument("routine_id")
@click.argument("exercise_id")
@click.pass_context
def add_exercise(ctx, routine_id: str, exercise_id: str):
    """Add a catalog exercise to a routine."""
    tracker = get_tracker(ctx)
    ref = tracker.catalog.ref_for(exercise_id)
    if ref is None:
        echo_error(f"Exercise {exercise_id} not found. See 'gymbuddy exercises list'")
        ctx.exit(1)

    rex = unwrap_or_exit(ctx, tracker.routines.add_exercise(routine_id, ref))
    echo_success(f"Exercise added (ID: {rex.id})")


@routines.command(name="remove-exercise")
@click.argument("routine_id")
@click.argument("rex_id")
@click.pass_context
def remove_exercise(ctx, routine_id: str, rex_id: str):
    """Remove an exercise and its sets from a routine."""
    tracker = get_tracker(ctx)
    unwrap_or_exit(ctx, tracker.routines.remove_exercise(routine_id, rex_id))
    echo_success(f"Exercise {rex_id} removed")


@routines.command(name="add-set")
@click.argument("routine_id")
@click.argument("rex_id")
@click.option("--reps", "-r", type=click.IntRange(min=0), default=0, help="Repetitions")
@click.option("--weight", "-w", type=click.FloatRange(min=0), default=0.0, help="Weight (kg)")
@click.pass_context
def add_set(ctx, routine_id: str, rex_id: str, reps: int, weight: float):
    """Append a set to a routine exercise."""
    tracker = get_tracker(ctx)
    workout_set = unwrap_or_exit(
        ctx, tracker.routines.add_set(routine_id, rex_id, reps=reps, weight=weight)
    )
    echo_success(
        f"Set added: {workout_set.reps} reps x {format_weight(workout_set.weight)} kg "
        f"(ID: {workout_set.id})"
    )


@routines.command(name="update-set")
@click.argument("routine_id")
@click.argument("rex_id")
@click.argument("set_id")
@click.option("--reps", "-r", type=click.IntRange(min=0), help="New repetitions")
@click.option("--weight", "-w", type=click.FloatRange(min=0), help="New weight (kg)")
@click.pass_context
def update_set(
    ctx, routine_id: str, rex_id: str, set_id: str, reps: int | None, weight: float | None
):
    """Change the reps and/or weight of a set."""
    updates = []
    if reps is not None:
        updates.append(ReplaceReps(reps))
    if weight is not None:
        updates.append(ReplaceWeight(weight))
    if not updates:
        echo_error("Nothing to update: pass --reps and/or --weight")
        ctx.exit(1)

    tracker = get_tracker(ctx)
    for update in updates:
        workout_set = unwrap_or_exit(
            ctx, tracker.routines.update_set(routine_id, rex_id, set_id, update)
        )
    echo_success(
        f"Set {set_id}: {workout_set.reps} reps x {format_weight(workout_set.weight)} kg"
    )


@routines.command(name="remove-set")
@click.argument("routine_id")
@click.argument("rex_id")
@click.argument("set_id")
@click.pass_context
def remove_set(ctx, routine_id: str, rex_id: str, set_id: str):
    """Remove a set from a routine exercise."""
    tracker = get_tracker(ctx)
    unwrap_or_exit(ctx, tracker.routines.remove_set(routine_id, rex_id, set_id))
    echo_success(f"Set {set_id} removed")
