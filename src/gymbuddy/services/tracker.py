"""Wiring of the state, its gateway and the services built around it."""

from dataclasses import dataclass
from pathlib import Path

from ..db.gateway import StateGateway
from ..models.exercises import Exercise
from ..models.state import StateRoot
from .catalog import ExerciseCatalog
from .history import HistoryStore
from .routines import RoutineRepository
from .session import WorkoutSessionEngine


@dataclass
class Tracker:
    """Everything a front end needs, sharing one StateRoot instance."""

    state: StateRoot
    gateway: StateGateway
    catalog: ExerciseCatalog
    routines: RoutineRepository
    history: HistoryStore
    sessions: WorkoutSessionEngine


def open_tracker(db_path: Path | None = None, seed: list[Exercise] | None = None) -> Tracker:
    """Load persisted state and build the services around it.

    Loading always writes the (possibly merged or fresh) state back.
    """
    gateway = StateGateway(db_path)
    state = gateway.load(seed)

    catalog = ExerciseCatalog(state, gateway)
    history = HistoryStore(state, gateway)
    return Tracker(
        state=state,
        gateway=gateway,
        catalog=catalog,
        routines=RoutineRepository(state, gateway),
        history=history,
        sessions=WorkoutSessionEngine(catalog, history),
    )
