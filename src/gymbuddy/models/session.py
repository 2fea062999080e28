"""Workout session and history data models.

A session is a snapshot of a routine taken when the workout starts. Later edits
to the routine never reach an active session or a stored history entry.
"""

from dataclasses import dataclass, field

from .exercises import ExerciseRef


@dataclass
class SessionSet:
    """A set being performed; starts as a copy of the planned set."""

    id: str
    reps: int
    weight: float
    done: bool = False


@dataclass
class SessionItem:
    """Snapshot of one routine exercise, with display fields denormalized."""

    rex_id: str
    exercise_ref: ExerciseRef
    name: str
    image: str = ""
    body_part: str = ""
    sets: list[SessionSet] = field(default_factory=list)

    def find_set(self, set_id: str) -> SessionSet | None:
        return next((s for s in self.sets if s.id == set_id), None)


@dataclass
class WorkoutSession:
    """A live workout. Only the session engine mutates it."""

    id: str
    routine_id: str
    routine_name: str
    started_at: int
    items: list[SessionItem] = field(default_factory=list)
    current_index: int = 0
    finished_at: int | None = None

    @property
    def current_item(self) -> SessionItem | None:
        if not self.items:
            return None
        return self.items[self.current_index]

    def find_set(self, set_id: str) -> SessionSet | None:
        for item in self.items:
            found = item.find_set(set_id)
            if found is not None:
                return found
        return None


@dataclass(frozen=True)
class HistorySet:
    """A performed set as stored in history."""

    id: str
    reps: int
    weight: float
    done: bool

    def to_dict(self) -> dict:
        return {"id": self.id, "reps": self.reps, "weight": self.weight, "done": self.done}

    @classmethod
    def from_dict(cls, data: dict) -> "HistorySet":
        return cls(
            id=data["id"],
            reps=int(data["reps"]),
            weight=float(data["weight"]),
            done=bool(data["done"]),
        )


@dataclass(frozen=True)
class HistoryItem:
    """One exercise of a finished workout."""

    rex_id: str
    exercise_ref: ExerciseRef
    name: str
    image: str
    body_part: str
    sets: tuple[HistorySet, ...]

    def to_dict(self) -> dict:
        return {
            "rex_id": self.rex_id,
            "exercise_ref": self.exercise_ref.to_dict(),
            "name": self.name,
            "image": self.image,
            "body_part": self.body_part,
            "sets": [s.to_dict() for s in self.sets],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "HistoryItem":
        return cls(
            rex_id=data["rex_id"],
            exercise_ref=ExerciseRef.from_dict(data["exercise_ref"]),
            name=data["name"],
            image=data.get("image", ""),
            body_part=data.get("body_part", ""),
            sets=tuple(HistorySet.from_dict(s) for s in data.get("sets", [])),
        )


@dataclass(frozen=True)
class HistoryEntry:
    """An immutable record of a finished workout session."""

    id: str
    routine_id: str
    routine_name: str
    started_at: int
    finished_at: int
    current_index: int
    items: tuple[HistoryItem, ...]

    @property
    def total_sets(self) -> int:
        return sum(len(item.sets) for item in self.items)

    @property
    def completed_sets(self) -> int:
        return sum(1 for item in self.items for s in item.sets if s.done)

    @property
    def duration_seconds(self) -> int:
        return (self.finished_at - self.started_at) // 1000

    @property
    def volume(self) -> float:
        """Total weight moved across completed sets."""
        return sum(s.reps * s.weight for item in self.items for s in item.sets if s.done)

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "id": self.id,
            "routine_id": self.routine_id,
            "routine_name": self.routine_name,
            "started_at": self.started_at,
            "finished_at": self.finished_at,
            "current_index": self.current_index,
            "items": [item.to_dict() for item in self.items],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "HistoryEntry":
        """Create from dictionary."""
        return cls(
            id=data["id"],
            routine_id=data["routine_id"],
            routine_name=data.get("routine_name", ""),
            started_at=int(data["started_at"]),
            finished_at=int(data["finished_at"]),
            current_index=int(data.get("current_index", 0)),
            items=tuple(HistoryItem.from_dict(i) for i in data.get("items", [])),
        )

    @classmethod
    def from_session(cls, session: WorkoutSession, finished_at: int) -> "HistoryEntry":
        """Freeze a session's current values into a history record."""
        return cls(
            id=session.id,
            routine_id=session.routine_id,
            routine_name=session.routine_name,
            started_at=session.started_at,
            finished_at=finished_at,
            current_index=session.current_index,
            items=tuple(
                HistoryItem(
                    rex_id=item.rex_id,
                    exercise_ref=item.exercise_ref,
                    name=item.name,
                    image=item.image,
                    body_part=item.body_part,
                    sets=tuple(
                        HistorySet(id=s.id, reps=s.reps, weight=s.weight, done=s.done)
                        for s in item.sets
                    ),
                )
                for item in session.items
            ),
        )
