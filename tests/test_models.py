"""Tests for data models."""

import dataclasses

import pytest

from gymbuddy.models.exercises import SEED_EXERCISES, Exercise, ExerciseRef, ExerciseSource
from gymbuddy.models.results import FailureReason, Result
from gymbuddy.models.routine import (
    ReplaceReps,
    ReplaceWeight,
    Routine,
    RoutineExercise,
    WorkoutSet,
    apply_set_update,
)
from gymbuddy.models.session import HistoryEntry, SessionItem, SessionSet, WorkoutSession
from gymbuddy.models.state import StateRoot
from gymbuddy.utils.ids import new_id


class TestIds:
    """Tests for identifier generation."""

    def test_prefix_and_suffix(self):
        """Test id format."""
        value = new_id("rut")
        prefix, suffix = value.split("_")
        assert prefix == "rut"
        assert len(suffix) == 8
        assert suffix.isalnum()

    def test_unique_within_process(self):
        """Test that many ids do not collide."""
        ids = {new_id("set") for _ in range(2000)}
        assert len(ids) == 2000


class TestExerciseRef:
    """Tests for ExerciseRef."""

    def test_to_dict(self):
        """Test reference serialization."""
        assert ExerciseRef.seed("squat").to_dict() == {"source": "seed", "id": "squat"}

    def test_from_dict_accepts_legacy_type_key(self):
        """Test that payloads using 'type' still load."""
        ref = ExerciseRef.from_dict({"type": "custom", "id": "cus_1"})
        assert ref == ExerciseRef(ExerciseSource.CUSTOM, "cus_1")

    @pytest.mark.parametrize("data", [None, ["seed", "squat"], "seed:squat"])
    def test_non_object_rejected(self, data):
        """Test that a reference stored as anything but an object is refused."""
        with pytest.raises(TypeError):
            ExerciseRef.from_dict(data)

    def test_unknown_source_rejected(self):
        """Test that an unknown source is not silently accepted."""
        with pytest.raises(ValueError):
            ExerciseRef.from_dict({"source": "remote", "id": "x"})


class TestExercise:
    """Tests for Exercise model."""

    def test_from_dict_defaults(self):
        """Test missing optional fields default to empty strings."""
        exercise = Exercise.from_dict({"id": "x", "name": "Row", "image": None})
        assert exercise.image == ""
        assert exercise.body_part == ""
        assert exercise.equipment == ""

    def test_seed_ids_unique(self):
        """Test that the built-in catalog has unique ids."""
        ids = [e.id for e in SEED_EXERCISES]
        assert len(ids) == len(set(ids))
        assert "squat" in ids


class TestSetUpdate:
    """Tests for the closed set update variants."""

    def test_negative_values_rejected(self):
        """Test validation of negative values."""
        assert ReplaceReps(-1).validate()
        assert ReplaceWeight(-0.5).validate()

    def test_non_numeric_rejected(self):
        """Test validation of wrong types."""
        assert ReplaceReps(2.5).validate()
        assert ReplaceReps(True).validate()
        assert ReplaceWeight("60").validate()

    @pytest.mark.parametrize("weight", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_weight_rejected(self, weight):
        """Test that NaN and infinity are not valid weights."""
        assert ReplaceWeight(weight).validate() == "weight must be a finite number"

    def test_valid_values(self):
        """Test that valid updates pass."""
        assert ReplaceReps(0).validate() is None
        assert ReplaceWeight(62.5).validate() is None

    def test_apply_only_touches_named_field(self):
        """Test that each update writes exactly one field."""
        workout_set = WorkoutSet(id="set_1", reps=5, weight=100)
        apply_set_update(workout_set, ReplaceWeight(110))
        assert workout_set.reps == 5
        assert workout_set.weight == 110.0

        apply_set_update(workout_set, ReplaceReps(3))
        assert workout_set.reps == 3
        assert workout_set.weight == 110.0

    def test_apply_rejects_other_objects(self):
        """Test that arbitrary updates cannot be applied."""
        with pytest.raises(TypeError):
            apply_set_update(WorkoutSet(id="set_1"), ("peso", 10))


class TestRoutine:
    """Tests for Routine model."""

    def test_from_dict_nested(self):
        """Test routine deserialization with nested exercises and sets."""
        data = {
            "id": "rut_1",
            "name": "Push",
            "created_at": 1000,
            "updated_at": 2000,
            "exercises": [
                {
                    "id": "rex_1",
                    "exercise_ref": {"source": "seed", "id": "bench_press"},
                    "sets": [{"id": "set_1", "reps": 5, "weight": 80}],
                }
            ],
        }
        routine = Routine.from_dict(data)

        assert routine.exercises[0].exercise_ref == ExerciseRef.seed("bench_press")
        assert routine.exercises[0].sets[0].weight == 80.0
        assert routine.total_sets == 1
        assert routine.to_dict() == {
            **data,
            "exercises": [
                {**data["exercises"][0], "sets": [{"id": "set_1", "reps": 5, "weight": 80.0}]}
            ],
        }

    def test_touch_never_goes_backwards(self):
        """Test updated_at is monotonic."""
        far_future = 10**15
        routine = Routine(id="rut_1", name="A", created_at=0, updated_at=far_future)
        routine.touch()
        assert routine.updated_at == far_future

    def test_find_helpers(self):
        """Test lookups by id."""
        rex = RoutineExercise(
            id="rex_1", exercise_ref=ExerciseRef.seed("squat"), sets=[WorkoutSet(id="set_1")]
        )
        routine = Routine(id="rut_1", name="A", created_at=0, updated_at=0, exercises=[rex])
        assert routine.find_exercise("rex_1") is rex
        assert routine.find_exercise("nope") is None
        assert rex.find_set("set_1") is rex.sets[0]


class TestHistoryEntry:
    """Tests for the frozen history record."""

    def _session(self):
        return WorkoutSession(
            id="wk_1",
            routine_id="rut_1",
            routine_name="Legs",
            started_at=1_000,
            items=[
                SessionItem(
                    rex_id="rex_1",
                    exercise_ref=ExerciseRef.seed("squat"),
                    name="Barbell Back Squat",
                    sets=[
                        SessionSet(id="s1", reps=5, weight=100, done=True),
                        SessionSet(id="s2", reps=5, weight=100),
                    ],
                )
            ],
        )

    def test_from_session_copies_values(self):
        """Test that the record is a copy of the session values."""
        session = self._session()
        entry = HistoryEntry.from_session(session, finished_at=61_000)
        session.items[0].sets[0].reps = 99

        assert entry.items[0].sets[0].reps == 5
        assert entry.completed_sets == 1
        assert entry.total_sets == 2
        assert entry.duration_seconds == 60
        assert entry.volume == 500

    def test_entry_is_immutable(self):
        """Test that history records cannot be edited."""
        entry = HistoryEntry.from_session(self._session(), finished_at=2_000)
        with pytest.raises(dataclasses.FrozenInstanceError):
            entry.items[0].sets[0].done = False
        assert isinstance(entry.items, tuple)

    def test_dict_round_trip(self):
        """Test serialization of a history entry."""
        entry = HistoryEntry.from_session(self._session(), finished_at=2_000)
        assert HistoryEntry.from_dict(entry.to_dict()) == entry


class TestStateRoot:
    """Tests for the root aggregate."""

    def test_empty_payload(self):
        """Test that an empty object yields an empty state."""
        state = StateRoot.from_dict({})
        assert state.routines == []
        assert state.last_opened_routine_id is None

    def test_rejects_non_object(self):
        """Test that a non-object payload is refused."""
        with pytest.raises(TypeError):
            StateRoot.from_dict(["routines"])


class TestResult:
    """Tests for Result."""

    def test_success(self):
        """Test successful result."""
        result = Result.success(5)
        assert result.ok
        assert bool(result)
        assert result.unwrap() == 5

    def test_failure(self):
        """Test failed result."""
        result = Result.not_found("Routine rut_x not found")
        assert not result
        assert result.reason == FailureReason.NOT_FOUND
        assert result.value is None
        with pytest.raises(ValueError, match="rut_x"):
            result.unwrap()
