"""Persistence gateway: the whole state tree in one durable slot."""

import json
import logging
from pathlib import Path

from ..data.exercise_loader import load_seed_exercises, merge_seed_library
from ..models.exercises import Exercise
from ..models.state import StateRoot
from .engine import STORAGE_KEY, get_db_path, read_slot, write_slot

logger = logging.getLogger(__name__)


class StateGateway:
    """Loads and saves the StateRoot as JSON in a SQLite key-value slot.

    Saving always writes the entire tree; there are no partial updates.
    """

    def __init__(self, db_path: Path | None = None, key: str = STORAGE_KEY):
        self.db_path = db_path or get_db_path()
        self.key = key

    def load(self, seed: list[Exercise] | None = None) -> StateRoot:
        """Load the persisted state, merging in any new seed exercises.

        Missing or corrupt data yields a fresh default state. In every case the
        resulting state is written back before returning, so loading is not
        free of side effects.
        """
        if seed is None:
            seed = load_seed_exercises()

        raw = read_slot(self.db_path, self.key)
        state = self._parse(raw)

        if state is None:
            state = StateRoot()
            merge_seed_library(state.library, seed)
            logger.info("Created fresh state with %d seed exercises", len(state.library))
        else:
            added = merge_seed_library(state.library, seed)
            if added:
                logger.info("Merged %d new seed exercises into library", added)

        self.save(state)
        return state

    def save(self, state: StateRoot) -> None:
        """Serialize the whole state and overwrite the slot."""
        payload = json.dumps(state.to_dict(), ensure_ascii=False)
        write_slot(self.db_path, self.key, payload)
        logger.debug("Saved state (%d bytes) to %s", len(payload), self.db_path)

    def _parse(self, raw: str | None) -> StateRoot | None:
        if raw is None:
            return None
        try:
            return StateRoot.from_dict(json.loads(raw))
        except (json.JSONDecodeError, AttributeError, KeyError, TypeError, ValueError) as e:
            logger.warning("Discarding corrupt state in slot %r: %s", self.key, e)
            return None
