"""Root aggregate holding everything that is persisted."""

from dataclasses import dataclass, field

from .exercises import Exercise
from .routine import Routine
from .session import HistoryEntry


@dataclass
class StateRoot:
    """All persisted tracker state.

    One instance exists per process. Services receive it in their constructors
    and mutate it in place; it is never reached through a module global.
    """

    routines: list[Routine] = field(default_factory=list)
    workouts: list[HistoryEntry] = field(default_factory=list)  # Newest first
    library: list[Exercise] = field(default_factory=list)  # Seed catalog copy
    custom_exercises: list[Exercise] = field(default_factory=list)
    last_opened_routine_id: str | None = None

    def find_routine(self, routine_id: str) -> Routine | None:
        return next((r for r in self.routines if r.id == routine_id), None)

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "routines": [r.to_dict() for r in self.routines],
            "workouts": [w.to_dict() for w in self.workouts],
            "library": [e.to_dict() for e in self.library],
            "custom_exercises": [e.to_dict() for e in self.custom_exercises],
            "last_opened_routine_id": self.last_opened_routine_id,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "StateRoot":
        """Create from dictionary.

        Raises KeyError, TypeError or ValueError when the payload does not
        have the expected shape.
        """
        if not isinstance(data, dict):
            raise TypeError(f"State payload must be an object, got {type(data).__name__}")
        return cls(
            routines=[Routine.from_dict(r) for r in data.get("routines", [])],
            workouts=[HistoryEntry.from_dict(w) for w in data.get("workouts", [])],
            library=[Exercise.from_dict(e) for e in data.get("library", [])],
            custom_exercises=[Exercise.from_dict(e) for e in data.get("custom_exercises", [])],
            last_opened_routine_id=data.get("last_opened_routine_id"),
        )
