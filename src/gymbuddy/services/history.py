"""Append-only store of finished workouts."""

import logging

from ..db.gateway import StateGateway
from ..models.results import Result
from ..models.session import HistoryEntry
from ..models.state import StateRoot

logger = logging.getLogger(__name__)


class HistoryStore:
    """Finished workouts, newest first. Entries are never edited or removed."""

    def __init__(self, state: StateRoot, gateway: StateGateway):
        self.state = state
        self.gateway = gateway

    def __len__(self) -> int:
        return len(self.state.workouts)

    def append(self, entry: HistoryEntry) -> None:
        """Store a finished workout and persist."""
        self.state.workouts.insert(0, entry)
        self.gateway.save(self.state)
        logger.debug("Stored workout %s in history", entry.id)

    def list_entries(self) -> list[HistoryEntry]:
        return list(self.state.workouts)

    def get(self, entry_id: str) -> Result[HistoryEntry]:
        entry = next((w for w in self.state.workouts if w.id == entry_id), None)
        if entry is None:
            return Result.not_found(f"Workout {entry_id} not found in history")
        return Result.success(entry)
