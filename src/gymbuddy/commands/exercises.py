"""Exercise catalog commands."""

import click

from .base import (
    echo_info,
    echo_success,
    ensure_initialized,
    format_table,
    get_tracker,
    unwrap_or_exit,
)


@click.group()
@click.pass_context
def exercises(ctx):
    """Browse the exercise catalog and create custom exercises."""
    ensure_initialized(ctx)


@exercises.command(name="list")
@click.option("--query", "-q", default="", help="Filter by name")
@click.option("--body-part", "-b", default=None, help="Filter by body part")
@click.pass_context
def list_exercises(ctx, query: str, body_part: str | None):
    """List catalog exercises, optionally filtered.

    Examples:

        gymbuddy exercises list --body-part legs

        gymbuddy exercises list -q press
    """
    tracker = get_tracker(ctx)
    found = tracker.catalog.search(query=query, body_part=body_part)

    if not found:
        echo_info("No exercises match those filters")
        return

    headers = ["ID", "Name", "Body Part", "Equipment", "Source"]
    rows = []
    for exercise in found:
        ref = tracker.catalog.ref_for(exercise.id)
        rows.append([
            exercise.id,
            exercise.name,
            exercise.body_part,
            exercise.equipment,
            ref.source.value if ref else "",
        ])

    click.echo()
    click.echo(format_table(headers, rows))
    click.echo()
    click.echo(f"Total: {len(found)} exercise(s)")


@exercises.command(name="body-parts")
@click.pass_context
def body_parts(ctx):
    """List the body parts used in the catalog."""
    tracker = get_tracker(ctx)
    for part in tracker.catalog.list_body_parts():
        click.echo(part)


@exercises.command()
@click.argument("name")
@click.option("--body-part", "-b", default="", help="Body part, e.g. Back")
@click.option("--primary", default="", help="Primary muscles")
@click.option("--secondary", default="", help="Secondary muscles")
@click.option("--equipment", "-e", default="", help="Equipment, e.g. Barbell")
@click.option("--image", default="", help="Image URL")
@click.pass_context
def add(
    ctx,
    name: str,
    body_part: str,
    primary: str,
    secondary: str,
    equipment: str,
    image: str,
):
    """Create a custom exercise."""
    tracker = get_tracker(ctx)
    exercise = unwrap_or_exit(
        ctx,
        tracker.catalog.add_custom(
            name,
            image=image,
            body_part=body_part,
            primary_muscles=primary,
            secondary_muscles=secondary,
            equipment=equipment,
        ),
    )
    echo_success(f"Custom exercise '{exercise.name}' created (ID: {exercise.id})")
