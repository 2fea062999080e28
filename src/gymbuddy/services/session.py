"""Workout session engine.

A routine is turned into a session snapshot when the workout starts. While
active, the session lives only in memory: toggling sets and editing values is
never persisted and never touches the routine. Finishing freezes the session
into a HistoryEntry, which is the only write to storage.
"""

import logging

from ..models.results import Result
from ..models.routine import Routine, SetUpdate, apply_set_update, now_ms
from ..models.session import HistoryEntry, SessionItem, SessionSet, WorkoutSession
from ..utils.ids import new_id
from .catalog import ExerciseCatalog
from .history import HistoryStore

logger = logging.getLogger(__name__)

# Snapshot name for references the catalog cannot resolve
UNKNOWN_EXERCISE_NAME = "Unknown exercise"


class WorkoutSessionEngine:
    """Owns the single active session and its transitions.

    Operations only accept the engine's own active session. Once finished or
    discarded, a session is detached and emptied, so later calls are refused.
    """

    def __init__(self, catalog: ExerciseCatalog, history: HistoryStore):
        self.catalog = catalog
        self.history = history
        self._active: WorkoutSession | None = None

    @property
    def active(self) -> WorkoutSession | None:
        return self._active

    def start(self, routine: Routine) -> Result[WorkoutSession]:
        """Start a workout from a routine snapshot.

        Refused when the routine has no exercises (edit the routine first) or
        when another session is still active.
        """
        if not routine.exercises:
            return Result.refused(f"Routine {routine.id} has no exercises")
        if self._active is not None:
            return Result.refused(f"Session {self._active.id} is still active")

        items = []
        for rex in routine.exercises:
            exercise = self.catalog.resolve(rex.exercise_ref)
            items.append(
                SessionItem(
                    rex_id=rex.id,
                    exercise_ref=rex.exercise_ref,
                    name=exercise.name if exercise else UNKNOWN_EXERCISE_NAME,
                    image=exercise.image if exercise else "",
                    body_part=exercise.body_part if exercise else "",
                    sets=[
                        SessionSet(id=new_id("sset"), reps=s.reps, weight=s.weight)
                        for s in rex.sets
                    ],
                )
            )

        session = WorkoutSession(
            id=new_id("wk"),
            routine_id=routine.id,
            routine_name=routine.name,
            started_at=now_ms(),
            items=items,
        )
        self._active = session
        logger.debug("Started session %s from routine %s", session.id, routine.id)
        return Result.success(session)

    def current_item(self, session: WorkoutSession) -> Result[SessionItem]:
        owned = self._check_owned(session)
        if not owned:
            return owned
        return Result.success(session.current_item)

    def navigate(self, session: WorkoutSession, delta: int) -> Result[int]:
        """Move the current position, saturating at both ends."""
        owned = self._check_owned(session)
        if not owned:
            return owned
        last = len(session.items) - 1
        session.current_index = min(max(session.current_index + delta, 0), last)
        return Result.success(session.current_index)

    def toggle_set_done(self, session: WorkoutSession, set_id: str) -> Result[SessionSet]:
        """Flip the done flag of one set of the current exercise."""
        owned = self._check_owned(session)
        if not owned:
            return owned
        session_set = session.current_item.find_set(set_id)
        if session_set is None:
            return Result.not_found(f"Set {set_id} is not part of the current exercise")
        session_set.done = not session_set.done
        return Result.success(session_set)

    def edit_live_value(
        self, session: WorkoutSession, set_id: str, update: SetUpdate
    ) -> Result[SessionSet]:
        """Change reps or weight of a session set, in memory only."""
        owned = self._check_owned(session)
        if not owned:
            return owned
        session_set = session.find_set(set_id)
        if session_set is None:
            return Result.not_found(f"Set {set_id} not found in session {session.id}")
        problem = update.validate()
        if problem:
            return Result.invalid(problem)
        apply_set_update(session_set, update)
        return Result.success(session_set)

    @staticmethod
    def progress(session: WorkoutSession | HistoryEntry) -> int:
        """Percentage of sets marked done, rounded.

        A session without any sets reports 0.
        """
        total = sum(len(item.sets) for item in session.items)
        done = sum(1 for item in session.items for s in item.sets if s.done)
        return round(done * 100 / max(total, 1))

    def finish(self, session: WorkoutSession) -> Result[HistoryEntry]:
        """Close the active session and append it to history.

        The session's items move into the frozen entry; the session object is
        left empty and detached from the engine.
        """
        owned = self._check_owned(session)
        if not owned:
            return owned

        finished_at = max(now_ms(), session.started_at)
        entry = HistoryEntry.from_session(session, finished_at)
        self._release(session)
        session.finished_at = finished_at

        self.history.append(entry)
        logger.info(
            "Finished session %s: %d/%d sets done",
            entry.id,
            entry.completed_sets,
            entry.total_sets,
        )
        return Result.success(entry)

    def discard(self, session: WorkoutSession) -> Result[WorkoutSession]:
        """Abandon the active session without writing history."""
        owned = self._check_owned(session)
        if not owned:
            return owned
        self._release(session)
        logger.debug("Discarded session %s", session.id)
        return Result.success(session)

    def _release(self, session: WorkoutSession) -> None:
        session.items = []
        session.current_index = 0
        self._active = None

    def _check_owned(self, session: WorkoutSession) -> Result[WorkoutSession]:
        if self._active is None or session is not self._active:
            return Result.refused(f"Session {session.id} is not active")
        return Result.success(session)
