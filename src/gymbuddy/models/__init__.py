"""Data models for gymbuddy."""

from .exercises import SEED_EXERCISES, UNCATEGORIZED, Exercise, ExerciseRef, ExerciseSource
from .results import FailureReason, Result
from .routine import ReplaceReps, ReplaceWeight, Routine, RoutineExercise, SetUpdate, WorkoutSet
from .session import HistoryEntry, HistoryItem, HistorySet, SessionItem, SessionSet, WorkoutSession
from .state import StateRoot

__all__ = [
    "Exercise",
    "ExerciseRef",
    "ExerciseSource",
    "FailureReason",
    "HistoryEntry",
    "HistoryItem",
    "HistorySet",
    "ReplaceReps",
    "ReplaceWeight",
    "Result",
    "Routine",
    "RoutineExercise",
    "SEED_EXERCISES",
    "SessionItem",
    "SessionSet",
    "SetUpdate",
    "StateRoot",
    "UNCATEGORIZED",
    "WorkoutSession",
    "WorkoutSet",
]
