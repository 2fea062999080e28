"""Routine repository: every change to routine templates goes through here."""

import logging

from ..db.gateway import StateGateway
from ..models.exercises import ExerciseRef
from ..models.results import Result
from ..models.routine import (
    ReplaceReps,
    ReplaceWeight,
    Routine,
    RoutineExercise,
    SetUpdate,
    WorkoutSet,
    apply_set_update,
    now_ms,
)
from ..models.state import StateRoot
from ..utils.ids import new_id

logger = logging.getLogger(__name__)


class RoutineRepository:
    """Repository for routine templates.

    Successful mutations bump the routine's ``updated_at`` and then persist the
    whole state. Failed results leave both memory and storage untouched.
    """

    def __init__(self, state: StateRoot, gateway: StateGateway):
        self.state = state
        self.gateway = gateway

    def list_routines(self) -> list[Routine]:
        """All routines, most recently created first."""
        return list(self.state.routines)

    def get(self, routine_id: str) -> Result[Routine]:
        """Get a routine by ID."""
        routine = self.state.find_routine(routine_id)
        if routine is None:
            return Result.not_found(f"Routine {routine_id} not found")
        return Result.success(routine)

    def create_routine(self, name: str) -> Result[Routine]:
        """Create an empty routine and make it the last opened one."""
        name = (name or "").strip()
        if not name:
            return Result.invalid("Routine name must not be empty")

        created = now_ms()
        routine = Routine(id=new_id("rut"), name=name, created_at=created, updated_at=created)
        self.state.routines.insert(0, routine)
        self.state.last_opened_routine_id = routine.id
        self._commit(f"created routine {routine.id}")
        return Result.success(routine)

    def open_routine(self, routine_id: str) -> Result[Routine]:
        """Record a routine as the last opened one."""
        found = self.get(routine_id)
        if not found:
            return found
        self.state.last_opened_routine_id = routine_id
        self._commit(f"opened routine {routine_id}")
        return found

    def delete_routine(self, routine_id: str) -> Result[Routine]:
        """Delete a routine.

        History entries and an in-flight session keep their own snapshots, so
        they stay valid. The last-opened pointer is cleared if it matches.
        """
        found = self.get(routine_id)
        if not found:
            return found
        self.state.routines.remove(found.value)
        if self.state.last_opened_routine_id == routine_id:
            self.state.last_opened_routine_id = None
        self._commit(f"deleted routine {routine_id}")
        return found

    def add_exercise(self, routine_id: str, ref: ExerciseRef) -> Result[RoutineExercise]:
        """Append an exercise with no sets to a routine."""
        found = self.get(routine_id)
        if not found:
            return Result.not_found(found.detail)
        routine = found.value

        rex = RoutineExercise(id=new_id("rex"), exercise_ref=ref)
        routine.exercises.append(rex)
        routine.touch()
        self._commit(f"added exercise {rex.id} to routine {routine_id}")
        return Result.success(rex)

    def remove_exercise(self, routine_id: str, rex_id: str) -> Result[RoutineExercise]:
        """Remove an exercise (and its sets) from a routine."""
        found = self._find_exercise(routine_id, rex_id)
        if not found:
            return found
        routine, rex = found.value

        routine.exercises.remove(rex)
        routine.touch()
        self._commit(f"removed exercise {rex_id} from routine {routine_id}")
        return Result.success(rex)

    def add_set(
        self, routine_id: str, rex_id: str, reps: int = 0, weight: float = 0
    ) -> Result[WorkoutSet]:
        """Append a set to the end of a routine exercise."""
        found = self._find_exercise(routine_id, rex_id)
        if not found:
            return found
        routine, rex = found.value

        workout_set = WorkoutSet(id=new_id("set"))
        for update in (ReplaceReps(reps), ReplaceWeight(weight)):
            problem = update.validate()
            if problem:
                return Result.invalid(problem)
            apply_set_update(workout_set, update)

        rex.sets.append(workout_set)
        routine.touch()
        self._commit(f"added set {workout_set.id} to {rex_id}")
        return Result.success(workout_set)

    def update_set(
        self, routine_id: str, rex_id: str, set_id: str, update: SetUpdate
    ) -> Result[WorkoutSet]:
        """Replace the reps or the weight of one set."""
        found = self._find_set(routine_id, rex_id, set_id)
        if not found:
            return found
        routine, workout_set = found.value

        problem = update.validate()
        if problem:
            return Result.invalid(problem)

        apply_set_update(workout_set, update)
        routine.touch()
        self._commit(f"updated set {set_id}")
        return Result.success(workout_set)

    def remove_set(self, routine_id: str, rex_id: str, set_id: str) -> Result[WorkoutSet]:
        """Remove one set from a routine exercise."""
        found = self._find_exercise(routine_id, rex_id)
        if not found:
            return found
        routine, rex = found.value

        workout_set = rex.find_set(set_id)
        if workout_set is None:
            return Result.not_found(f"Set {set_id} not found in {rex_id}")

        rex.sets.remove(workout_set)
        routine.touch()
        self._commit(f"removed set {set_id} from {rex_id}")
        return Result.success(workout_set)

    def _find_exercise(
        self, routine_id: str, rex_id: str
    ) -> Result[tuple[Routine, RoutineExercise]]:
        routine = self.state.find_routine(routine_id)
        if routine is None:
            return Result.not_found(f"Routine {routine_id} not found")
        rex = routine.find_exercise(rex_id)
        if rex is None:
            return Result.not_found(f"Exercise {rex_id} not found in routine {routine_id}")
        return Result.success((routine, rex))

    def _find_set(
        self, routine_id: str, rex_id: str, set_id: str
    ) -> Result[tuple[Routine, WorkoutSet]]:
        found = self._find_exercise(routine_id, rex_id)
        if not found:
            return found
        routine, rex = found.value
        workout_set = rex.find_set(set_id)
        if workout_set is None:
            return Result.not_found(f"Set {set_id} not found in {rex_id}")
        return Result.success((routine, workout_set))

    def _commit(self, action: str) -> None:
        self.gateway.save(self.state)
        logger.debug("Routine repository: %s", action)
