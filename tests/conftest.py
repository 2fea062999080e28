"""Pytest configuration and fixtures."""

import pytest
import tempfile
from pathlib import Path

from gymbuddy.models.exercises import ExerciseRef
from gymbuddy.services import open_tracker


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
def tracker(temp_db_path):
    """A tracker backed by a fresh temporary database."""
    return open_tracker(temp_db_path)


@pytest.fixture
def full_body_routine(tracker):
    """Routine with squat (2 sets) and bench press (2 sets)."""
    routine = tracker.routines.create_routine("Full Body A").unwrap()
    squat = tracker.routines.add_exercise(routine.id, ExerciseRef.seed("squat")).unwrap()
    bench = tracker.routines.add_exercise(routine.id, ExerciseRef.seed("bench_press")).unwrap()
    tracker.routines.add_set(routine.id, squat.id, reps=10, weight=60)
    tracker.routines.add_set(routine.id, squat.id, reps=8, weight=70)
    tracker.routines.add_set(routine.id, bench.id, reps=10, weight=40)
    tracker.routines.add_set(routine.id, bench.id, reps=8, weight=45)
    return routine
