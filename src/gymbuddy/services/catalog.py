"""Exercise catalog: seed library plus user-defined custom exercises."""

import locale
import logging

from ..data.exercise_loader import merge_seed_library
from ..db.gateway import StateGateway
from ..models.exercises import UNCATEGORIZED, Exercise, ExerciseRef, ExerciseSource
from ..models.results import Result
from ..models.state import StateRoot
from ..utils.ids import new_id

logger = logging.getLogger(__name__)


class ExerciseCatalog:
    """Resolves exercise references and manages custom exercises.

    Seed exercises are read-only. Custom exercises can only be appended.
    """

    def __init__(self, state: StateRoot, gateway: StateGateway):
        self.state = state
        self.gateway = gateway

    def merge_seed(self, seed: list[Exercise]) -> int:
        """Add seed exercises missing from the library, by id.

        Returns:
            Number of exercises appended (0 when already merged)
        """
        return merge_seed_library(self.state.library, seed)

    def resolve(self, ref: ExerciseRef) -> Exercise | None:
        """Look up the exercise a reference points to.

        Returns None for unknown ids; callers render a placeholder instead.
        """
        match ref.source:
            case ExerciseSource.SEED:
                pool = self.state.library
            case ExerciseSource.CUSTOM:
                pool = self.state.custom_exercises
            case _:
                raise ValueError(f"Unknown exercise source: {ref.source!r}")
        return next((e for e in pool if e.id == ref.id), None)

    def ref_for(self, exercise_id: str) -> ExerciseRef | None:
        """Build a reference for an exercise id found in the catalog."""
        if any(e.id == exercise_id for e in self.state.custom_exercises):
            return ExerciseRef.custom(exercise_id)
        if any(e.id == exercise_id for e in self.state.library):
            return ExerciseRef.seed(exercise_id)
        return None

    def add_custom(
        self,
        name: str,
        image: str = "",
        body_part: str = "",
        primary_muscles: str = "",
        secondary_muscles: str = "",
        equipment: str = "",
    ) -> Result[Exercise]:
        """Create a custom exercise and persist it."""
        name = (name or "").strip()
        if not name:
            return Result.invalid("Exercise name must not be empty")

        exercise = Exercise(
            id=new_id("cus"),
            name=name,
            image=(image or "").strip(),
            body_part=(body_part or "").strip() or UNCATEGORIZED,
            primary_muscles=(primary_muscles or "").strip(),
            secondary_muscles=(secondary_muscles or "").strip(),
            equipment=(equipment or "").strip(),
        )
        self.state.custom_exercises.append(exercise)
        self.gateway.save(self.state)
        logger.debug("Added custom exercise %s (%s)", exercise.id, exercise.name)
        return Result.success(exercise)

    def all_exercises(self) -> list[Exercise]:
        """Seed exercises followed by custom ones."""
        return [*self.state.library, *self.state.custom_exercises]

    def list_body_parts(self) -> list[str]:
        """Distinct body-part labels, sorted for display."""
        parts = {e.body_part for e in self.all_exercises() if e.body_part}
        return sorted(parts, key=lambda p: (locale.strxfrm(p.casefold()), p))

    def search(self, query: str = "", body_part: str | None = None) -> list[Exercise]:
        """Filter the catalog by name substring and body-part label.

        Both filters are case-insensitive; an empty query or no body part
        matches everything.
        """
        query = (query or "").strip().casefold()
        group = (body_part or "").strip().casefold()

        results = []
        for exercise in self.all_exercises():
            if group and group not in exercise.body_part.casefold():
                continue
            if query and query not in exercise.name.casefold():
                continue
            results.append(exercise)
        return results
