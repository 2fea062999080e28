"""Interactive workout player."""

import math

import click
import questionary
from questionary import Style

from ..models.results import Result
from ..models.routine import ReplaceReps, ReplaceWeight
from ..models.session import WorkoutSession
from ..services import WorkoutSessionEngine
from .base import (
    echo_error,
    echo_success,
    echo_warning,
    ensure_initialized,
    format_weight,
    get_tracker,
    unwrap_or_exit,
)

custom_style = Style(
    [
        ("qmark", "fg:#673ab7 bold"),
        ("question", "bold"),
        ("answer", "fg:#f44336 bold"),
        ("pointer", "fg:#673ab7 bold"),
        ("highlighted", "fg:#673ab7 bold"),
        ("selected", "fg:#cc5454"),
        ("instruction", ""),
        ("text", ""),
    ]
)


class WorkoutPlayer:
    """Maps menu actions onto session engine operations.

    Actions are tuples:
        ("toggle", set_id), ("reps", set_id, n), ("weight", set_id, w),
        ("move", delta), ("finish",), ("discard",)
    An ("edit", set_id) choice is expanded by the prompt loop into
    "reps"/"weight" actions.
    """

    def __init__(self, engine: WorkoutSessionEngine, session: WorkoutSession):
        self.engine = engine
        self.session = session
        self.entry = None

    @property
    def is_over(self) -> bool:
        return self.engine.active is not self.session

    def screen(self) -> str:
        """Text for the current exercise."""
        item = self.session.current_item
        position = f"{self.session.current_index + 1}/{len(self.session.items)}"
        lines = [
            f"{self.session.routine_name} - {self.engine.progress(self.session)}% done",
            f"Exercise {position}: {item.name}",
        ]
        if not item.sets:
            lines.append("  (no sets planned)")
        for number, s in enumerate(item.sets, start=1):
            mark = "x" if s.done else " "
            lines.append(f"  [{mark}] {number}. {s.reps} reps x {format_weight(s.weight)} kg")
        return "\n".join(lines)

    def choices(self) -> list[tuple[str, tuple]]:
        """Menu entries available on the current exercise."""
        item = self.session.current_item
        entries = []
        for number, s in enumerate(item.sets, start=1):
            verb = "Undo" if s.done else "Complete"
            entries.append((f"{verb} set {number}", ("toggle", s.id)))
            entries.append((f"Edit set {number}", ("edit", s.id)))
        if self.session.current_index < len(self.session.items) - 1:
            entries.append(("Next exercise", ("move", 1)))
        if self.session.current_index > 0:
            entries.append(("Previous exercise", ("move", -1)))
        entries.append(("Finish workout", ("finish",)))
        entries.append(("Discard workout", ("discard",)))
        return entries

    def handle(self, action: tuple) -> Result:
        """Apply one menu action to the session."""
        match action:
            case ("toggle", set_id):
                return self.engine.toggle_set_done(self.session, set_id)
            case ("reps", set_id, reps):
                return self.engine.edit_live_value(self.session, set_id, ReplaceReps(reps))
            case ("weight", set_id, weight):
                return self.engine.edit_live_value(self.session, set_id, ReplaceWeight(weight))
            case ("move", delta):
                return self.engine.navigate(self.session, delta)
            case ("finish",):
                result = self.engine.finish(self.session)
                if result.ok:
                    self.entry = result.value
                return result
            case ("discard",):
                return self.engine.discard(self.session)
            case _:
                raise ValueError(f"Unknown player action: {action!r}")


def _ask_number(message: str, default: str, cast):
    def valid(text: str) -> bool | str:
        try:
            value = cast(text)
            if not math.isfinite(value):
                return "Enter a finite number"
            return value >= 0 or "Must not be negative"
        except ValueError:
            return "Enter a number"

    answer = questionary.text(message, default=default, validate=valid, style=custom_style).ask()
    return None if answer is None else cast(answer)


def _prompt_edit(player: WorkoutPlayer, set_id: str) -> list[tuple]:
    session_set = player.session.find_set(set_id)
    reps = _ask_number("Reps:", str(session_set.reps), int)
    if reps is None:
        return []
    weight = _ask_number("Weight (kg):", format_weight(session_set.weight), float)
    if weight is None:
        return [("reps", set_id, reps)]
    return [("reps", set_id, reps), ("weight", set_id, weight)]


@click.command()
@click.argument("routine_id")
@click.pass_context
def play(ctx, routine_id: str):
    """Play a routine as a live workout.

    Sets are copied from the routine when the workout starts; changes made
    while playing only affect this workout. Finishing stores it in history.
    """
    ensure_initialized(ctx)
    tracker = get_tracker(ctx)
    routine = unwrap_or_exit(ctx, tracker.routines.open_routine(routine_id))

    started = tracker.sessions.start(routine)
    if not started.ok:
        echo_warning(started.detail)
        click.echo(f"Add exercises first: gymbuddy routines add-exercise {routine.id} <exercise>")
        ctx.exit(1)

    player = WorkoutPlayer(tracker.sessions, started.value)
    while not player.is_over:
        click.echo()
        click.echo(player.screen())
        choice = questionary.select(
            "What next?",
            choices=[questionary.Choice(title, value) for title, value in player.choices()],
            style=custom_style,
        ).ask()

        if choice is None:
            # Interrupted (Ctrl-C): nothing was saved
            player.handle(("discard",))
            echo_warning("Workout discarded")
            return

        actions = _prompt_edit(player, choice[1]) if choice[0] == "edit" else [choice]
        if choice == ("discard",) and not click.confirm("Discard this workout?"):
            continue

        for action in actions:
            result = player.handle(action)
            if not result.ok:
                echo_error(result.detail)

    if player.entry is not None:
        entry = player.entry
        echo_success(
            f"Workout saved (ID: {entry.id}): "
            f"{entry.completed_sets}/{entry.total_sets} sets completed"
        )
    else:
        echo_warning("Workout discarded")
