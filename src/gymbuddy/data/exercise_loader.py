"""Seed exercise catalog loader."""

import json
import logging
from dataclasses import replace
from pathlib import Path

from ..models.exercises import SEED_EXERCISES, Exercise

logger = logging.getLogger(__name__)


def load_seed_exercises(json_path: Path | None = None) -> list[Exercise]:
    """Load the seed catalog.

    Args:
        json_path: Optional JSON file shaped ``{"exercises": [...]}``. When not
            given, the built-in SEED_EXERCISES are used.

    Returns:
        List of seed exercises, in file order, without duplicate ids
    """
    if json_path is None:
        return list(SEED_EXERCISES)

    with open(json_path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Seed file {json_path} must contain a JSON object")

    exercises = []
    seen_ids = set()
    for ex_data in data.get("exercises", []):
        try:
            exercise = Exercise.from_dict(ex_data)
        except (KeyError, TypeError) as e:
            # Skip invalid exercises but log the error
            logger.warning("Skipping invalid seed exercise %s: %s", ex_data, e)
            continue

        if exercise.id in seen_ids:
            logger.warning("Skipping duplicate seed exercise id %s", exercise.id)
            continue
        seen_ids.add(exercise.id)
        exercises.append(exercise)

    return exercises


def merge_seed_library(library: list[Exercise], seed: list[Exercise]) -> int:
    """Append seed exercises whose id is not yet in the library.

    Existing entries are never overwritten, so a stored copy that diverged
    from the shipped catalog is kept as is.

    Returns:
        Number of exercises appended
    """
    known_ids = {e.id for e in library}
    added = 0
    for exercise in seed:
        if exercise.id in known_ids:
            continue
        library.append(replace(exercise))
        known_ids.add(exercise.id)
        added += 1
    return added
