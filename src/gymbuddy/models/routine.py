"""Routine template data models."""

import math
import time
from dataclasses import dataclass, field

from .exercises import ExerciseRef


def now_ms() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return time.time_ns() // 1_000_000


@dataclass(frozen=True)
class ReplaceReps:
    """Set the repetition count of a set."""

    reps: int

    def validate(self) -> str | None:
        if isinstance(self.reps, bool) or not isinstance(self.reps, int):
            return "reps must be an integer"
        if self.reps < 0:
            return "reps must not be negative"
        return None


@dataclass(frozen=True)
class ReplaceWeight:
    """Set the weight of a set."""

    weight: float

    def validate(self) -> str | None:
        if isinstance(self.weight, bool) or not isinstance(self.weight, (int, float)):
            return "weight must be a number"
        if not math.isfinite(self.weight):
            return "weight must be a finite number"
        if self.weight < 0:
            return "weight must not be negative"
        return None


# Only reps and weight can be edited on a set
SetUpdate = ReplaceReps | ReplaceWeight


def apply_set_update(target, update: SetUpdate) -> None:
    """Write a validated update onto anything with ``reps``/``weight`` fields."""
    match update:
        case ReplaceReps(reps=reps):
            target.reps = reps
        case ReplaceWeight(weight=weight):
            target.weight = float(weight)
        case _:
            raise TypeError(f"Unsupported set update: {update!r}")


@dataclass
class WorkoutSet:
    """A planned set within a routine exercise."""

    id: str
    reps: int = 0
    weight: float = 0.0

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"id": self.id, "reps": self.reps, "weight": self.weight}

    @classmethod
    def from_dict(cls, data: dict) -> "WorkoutSet":
        """Create from dictionary."""
        return cls(
            id=data["id"],
            reps=int(data.get("reps", 0)),
            weight=float(data.get("weight", 0)),
        )


@dataclass
class RoutineExercise:
    """An exercise slot in a routine, holding its planned sets in order."""

    id: str
    exercise_ref: ExerciseRef
    sets: list[WorkoutSet] = field(default_factory=list)

    def find_set(self, set_id: str) -> WorkoutSet | None:
        return next((s for s in self.sets if s.id == set_id), None)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "exercise_ref": self.exercise_ref.to_dict(),
            "sets": [s.to_dict() for s in self.sets],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "RoutineExercise":
        """Create from dictionary."""
        return cls(
            id=data["id"],
            exercise_ref=ExerciseRef.from_dict(data["exercise_ref"]),
            sets=[WorkoutSet.from_dict(s) for s in data.get("sets", [])],
        )


@dataclass
class Routine:
    """A reusable workout template."""

    id: str
    name: str
    created_at: int
    updated_at: int
    exercises: list[RoutineExercise] = field(default_factory=list)

    def touch(self) -> None:
        """Mark the template as modified."""
        self.updated_at = max(now_ms(), self.updated_at)

    def find_exercise(self, rex_id: str) -> RoutineExercise | None:
        return next((x for x in self.exercises if x.id == rex_id), None)

    @property
    def total_sets(self) -> int:
        return sum(len(x.sets) for x in self.exercises)

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "id": self.id,
            "name": self.name,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
            "exercises": [x.to_dict() for x in self.exercises],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Routine":
        """Create from dictionary."""
        return cls(
            id=data["id"],
            name=data["name"],
            created_at=int(data["created_at"]),
            updated_at=int(data["updated_at"]),
            exercises=[RoutineExercise.from_dict(x) for x in data.get("exercises", [])],
        )
