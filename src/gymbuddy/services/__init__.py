"""Domain services operating on the shared tracker state."""

from .catalog import ExerciseCatalog
from .history import HistoryStore
from .routines import RoutineRepository
from .session import WorkoutSessionEngine
from .tracker import Tracker, open_tracker

__all__ = [
    "ExerciseCatalog",
    "HistoryStore",
    "open_tracker",
    "RoutineRepository",
    "Tracker",
    "WorkoutSessionEngine",
]
