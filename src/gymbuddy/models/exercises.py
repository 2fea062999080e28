"""Exercise definitions and catalog references."""

from dataclasses import dataclass
from enum import Enum

# Body part assigned to custom exercises created without one
UNCATEGORIZED = "Uncategorized"


class ExerciseSource(str, Enum):
    """Where an exercise definition lives."""

    SEED = "seed"  # Built-in catalog shipped with the app
    CUSTOM = "custom"  # Created by the user


@dataclass(frozen=True)
class ExerciseRef:
    """Reference to an exercise in the catalog.

    Holds no exercise data; the catalog resolves it to an Exercise.
    """

    source: ExerciseSource
    id: str

    @classmethod
    def seed(cls, exercise_id: str) -> "ExerciseRef":
        return cls(ExerciseSource.SEED, exercise_id)

    @classmethod
    def custom(cls, exercise_id: str) -> "ExerciseRef":
        return cls(ExerciseSource.CUSTOM, exercise_id)

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {"source": self.source.value, "id": self.id}

    @classmethod
    def from_dict(cls, data: dict) -> "ExerciseRef":
        """Create from dictionary.

        Older payloads used ``type`` instead of ``source``.
        """
        if not isinstance(data, dict):
            raise TypeError(f"Exercise reference must be an object, got {data!r}")
        source = data.get("source", data.get("type"))
        return cls(source=ExerciseSource(source), id=data["id"])


@dataclass
class Exercise:
    """An exercise with its display metadata."""

    id: str
    name: str
    body_part: str = ""
    primary_muscles: str = ""
    secondary_muscles: str = ""
    equipment: str = ""
    image: str = ""  # Optional URL, empty when absent

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "id": self.id,
            "name": self.name,
            "image": self.image,
            "body_part": self.body_part,
            "primary_muscles": self.primary_muscles,
            "secondary_muscles": self.secondary_muscles,
            "equipment": self.equipment,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Exercise":
        """Create from dictionary."""
        return cls(
            id=data["id"],
            name=data["name"],
            image=data.get("image") or "",
            body_part=data.get("body_part", ""),
            primary_muscles=data.get("primary_muscles", ""),
            secondary_muscles=data.get("secondary_muscles", ""),
            equipment=data.get("equipment", ""),
        )


# Built-in catalog. Ids are stable: stored routines reference them.
SEED_EXERCISES: list[Exercise] = [
    # Legs
    Exercise(
        id="squat",
        name="Barbell Back Squat",
        body_part="Legs",
        primary_muscles="Quadriceps",
        secondary_muscles="Gluteus Maximus, Adductors",
        equipment="Barbell",
    ),
    Exercise(
        id="front_squat",
        name="Barbell Front Squat",
        body_part="Legs",
        primary_muscles="Quadriceps",
        secondary_muscles="Gluteus Maximus, Core",
        equipment="Barbell",
    ),
    Exercise(
        id="leg_press",
        name="Leg Press",
        body_part="Legs",
        primary_muscles="Quadriceps",
        secondary_muscles="Gluteus Maximus",
        equipment="Machine",
    ),
    Exercise(
        id="romanian_deadlift",
        name="Romanian Deadlift",
        body_part="Legs",
        primary_muscles="Hamstrings",
        secondary_muscles="Gluteus Maximus, Erector Spinae",
        equipment="Barbell",
    ),
    Exercise(
        id="walking_lunge",
        name="Dumbbell Walking Lunge",
        body_part="Legs",
        primary_muscles="Quadriceps",
        secondary_muscles="Gluteus Maximus, Hamstrings",
        equipment="Dumbbells",
    ),
    Exercise(
        id="calf_raise",
        name="Standing Calf Raise",
        body_part="Calves",
        primary_muscles="Gastrocnemius",
        secondary_muscles="Soleus",
        equipment="Machine",
    ),
    # Chest
    Exercise(
        id="bench_press",
        name="Barbell Bench Press",
        body_part="Chest",
        primary_muscles="Pectoralis Major",
        secondary_muscles="Triceps Brachii, Anterior Deltoid",
        equipment="Barbell",
    ),
    Exercise(
        id="incline_db_press",
        name="Incline Dumbbell Press",
        body_part="Chest",
        primary_muscles="Pectoralis Major (Clavicular)",
        secondary_muscles="Anterior Deltoid, Triceps Brachii",
        equipment="Dumbbells",
    ),
    Exercise(
        id="push_up",
        name="Push-up",
        body_part="Chest",
        primary_muscles="Pectoralis Major",
        secondary_muscles="Triceps Brachii, Anterior Deltoid",
        equipment="Bodyweight",
    ),
    # Back
    Exercise(
        id="deadlift",
        name="Barbell Deadlift",
        body_part="Back",
        primary_muscles="Erector Spinae, Gluteus Maximus",
        secondary_muscles="Hamstrings, Trapezius",
        equipment="Barbell",
    ),
    Exercise(
        id="pull_up",
        name="Pull-up",
        body_part="Back",
        primary_muscles="Latissimus Dorsi",
        secondary_muscles="Biceps Brachii, Rhomboids",
        equipment="Pull-up Bar",
    ),
    Exercise(
        id="barbell_row",
        name="Bent-over Barbell Row",
        body_part="Back",
        primary_muscles="Latissimus Dorsi, Rhomboids",
        secondary_muscles="Biceps Brachii, Posterior Deltoid",
        equipment="Barbell",
    ),
    Exercise(
        id="lat_pulldown",
        name="Lat Pulldown",
        body_part="Back",
        primary_muscles="Latissimus Dorsi",
        secondary_muscles="Biceps Brachii",
        equipment="Cable",
    ),
    # Shoulders
    Exercise(
        id="overhead_press",
        name="Barbell Overhead Press",
        body_part="Shoulders",
        primary_muscles="Anterior Deltoid",
        secondary_muscles="Triceps Brachii, Lateral Deltoid",
        equipment="Barbell",
    ),
    Exercise(
        id="lateral_raise",
        name="Dumbbell Lateral Raise",
        body_part="Shoulders",
        primary_muscles="Lateral Deltoid",
        equipment="Dumbbells",
    ),
    # Arms
    Exercise(
        id="barbell_curl",
        name="Barbell Curl",
        body_part="Arms",
        primary_muscles="Biceps Brachii",
        secondary_muscles="Brachialis",
        equipment="Barbell",
    ),
    Exercise(
        id="triceps_pushdown",
        name="Cable Triceps Pushdown",
        body_part="Arms",
        primary_muscles="Triceps Brachii",
        equipment="Cable",
    ),
    # Core
    Exercise(
        id="plank",
        name="Plank",
        body_part="Core",
        primary_muscles="Rectus Abdominis",
        secondary_muscles="Obliques, Transverse Abdominis",
        equipment="Bodyweight",
    ),
    Exercise(
        id="hanging_leg_raise",
        name="Hanging Leg Raise",
        body_part="Core",
        primary_muscles="Rectus Abdominis",
        secondary_muscles="Hip Flexors",
        equipment="Pull-up Bar",
    ),
]
