"""Tests for the routine repository."""

import pytest

from gymbuddy.models.exercises import ExerciseRef
from gymbuddy.models.results import FailureReason
from gymbuddy.models.routine import ReplaceReps, ReplaceWeight
from gymbuddy.services import open_tracker


@pytest.fixture
def routine_with_squat(tracker):
    """Routine holding a single squat slot with no sets."""
    routine = tracker.routines.create_routine("Legs").unwrap()
    rex = tracker.routines.add_exercise(routine.id, ExerciseRef.seed("squat")).unwrap()
    return routine, rex


class TestCreateRoutine:
    """Tests for routine creation."""

    def test_create(self, tracker):
        """Test a new routine's fields."""
        routine = tracker.routines.create_routine("  Full Body A ").unwrap()

        assert routine.id.startswith("rut_")
        assert routine.name == "Full Body A"
        assert routine.exercises == []
        assert routine.created_at == routine.updated_at
        assert tracker.state.last_opened_routine_id == routine.id

    def test_newest_first(self, tracker):
        """Test that routines are inserted at the front."""
        first = tracker.routines.create_routine("A").unwrap()
        second = tracker.routines.create_routine("B").unwrap()
        assert [r.id for r in tracker.routines.list_routines()] == [second.id, first.id]

    def test_empty_name_rejected(self, tracker):
        """Test that blank names are a validation failure."""
        result = tracker.routines.create_routine("   ")
        assert result.reason == FailureReason.INVALID
        assert tracker.state.routines == []

    def test_persisted(self, tracker, temp_db_path):
        """Test that creation is written through to storage."""
        routine = tracker.routines.create_routine("A").unwrap()
        reloaded = open_tracker(temp_db_path)
        assert reloaded.routines.get(routine.id).unwrap().name == "A"
        assert reloaded.state.last_opened_routine_id == routine.id


class TestExercises:
    """Tests for adding and removing routine exercises."""

    def test_add_exercise(self, tracker, routine_with_squat):
        """Test appending an exercise slot."""
        routine, rex = routine_with_squat
        assert rex.id.startswith("rex_")
        assert rex.sets == []
        assert routine.exercises == [rex]

    def test_order_is_kept(self, tracker, routine_with_squat):
        """Test that exercises are appended in order."""
        routine, rex = routine_with_squat
        bench = tracker.routines.add_exercise(routine.id, ExerciseRef.seed("bench_press")).unwrap()
        assert [x.id for x in routine.exercises] == [rex.id, bench.id]

    def test_remove_exercise(self, tracker, routine_with_squat):
        """Test removing an exercise slot."""
        routine, rex = routine_with_squat
        routine.updated_at = 0

        assert tracker.routines.remove_exercise(routine.id, rex.id).ok
        assert routine.exercises == []
        assert routine.updated_at > 0

    def test_add_to_unknown_routine(self, tracker):
        """Test that an unknown routine id is reported."""
        result = tracker.routines.add_exercise("rut_missing", ExerciseRef.seed("squat"))
        assert result.reason == FailureReason.NOT_FOUND

    def test_unresolvable_reference_is_allowed(self, tracker, routine_with_squat):
        """Test that references are stored even when the catalog lacks them."""
        routine, _ = routine_with_squat
        assert tracker.routines.add_exercise(routine.id, ExerciseRef.custom("cus_gone")).ok


class TestSets:
    """Tests for set operations."""

    def test_add_set_appends(self, tracker, routine_with_squat):
        """Test that sets are appended with the given values."""
        routine, rex = routine_with_squat
        first = tracker.routines.add_set(routine.id, rex.id).unwrap()
        second = tracker.routines.add_set(routine.id, rex.id, reps=10, weight=60).unwrap()

        assert (first.reps, first.weight) == (0, 0.0)
        assert rex.sets == [first, second]
        assert second.weight == 60.0

    def test_add_then_remove_restores_length(self, tracker, full_body_routine):
        """Test that add_set followed by remove_set leaves the set count unchanged."""
        for rex in full_body_routine.exercises:
            before = len(rex.sets)
            added = tracker.routines.add_set(full_body_routine.id, rex.id, reps=5).unwrap()
            assert len(rex.sets) == before + 1
            tracker.routines.remove_set(full_body_routine.id, rex.id, added.id).unwrap()
            assert len(rex.sets) == before

    def test_update_set_is_idempotent(self, tracker, full_body_routine):
        """Test that applying the same update twice equals applying it once."""
        rex = full_body_routine.exercises[0]
        set_id = rex.sets[0].id

        tracker.routines.update_set(full_body_routine.id, rex.id, set_id, ReplaceWeight(65))
        once = [s.to_dict() for s in rex.sets]
        tracker.routines.update_set(full_body_routine.id, rex.id, set_id, ReplaceWeight(65))

        assert [s.to_dict() for s in rex.sets] == once
        assert rex.sets[0].weight == 65.0
        assert rex.sets[0].reps == 10

    def test_update_bumps_updated_at(self, tracker, full_body_routine):
        """Test dirty tracking on update."""
        full_body_routine.updated_at = 0
        rex = full_body_routine.exercises[0]
        tracker.routines.update_set(full_body_routine.id, rex.id, rex.sets[0].id, ReplaceReps(12))
        assert full_body_routine.updated_at > 0

    def test_invalid_update_changes_nothing(self, tracker, full_body_routine):
        """Test that a negative value is rejected before mutation."""
        full_body_routine.updated_at = 0
        rex = full_body_routine.exercises[0]
        result = tracker.routines.update_set(
            full_body_routine.id, rex.id, rex.sets[0].id, ReplaceReps(-3)
        )

        assert result.reason == FailureReason.INVALID
        assert rex.sets[0].reps == 10
        assert full_body_routine.updated_at == 0

    @pytest.mark.parametrize("weight", [float("nan"), float("inf")])
    def test_non_finite_weight_rejected(self, tracker, full_body_routine, temp_db_path, weight):
        """Test that NaN and infinity never reach a set or storage."""
        rex = full_body_routine.exercises[0]
        result = tracker.routines.update_set(
            full_body_routine.id, rex.id, rex.sets[0].id, ReplaceWeight(weight)
        )
        added = tracker.routines.add_set(full_body_routine.id, rex.id, reps=5, weight=weight)

        assert result.reason == FailureReason.INVALID
        assert added.reason == FailureReason.INVALID
        assert rex.sets[0].weight == 60.0
        assert len(rex.sets) == 2
        stored = open_tracker(temp_db_path).routines.get(full_body_routine.id).unwrap()
        assert [s.weight for s in stored.exercises[0].sets] == [60.0, 70.0]

    def test_negative_add_set_rejected(self, tracker, routine_with_squat):
        """Test validation on add_set."""
        routine, rex = routine_with_squat
        result = tracker.routines.add_set(routine.id, rex.id, reps=-1)
        assert result.reason == FailureReason.INVALID
        assert rex.sets == []

    def test_unknown_ids_are_not_found(self, tracker, full_body_routine):
        """Test that every level of lookup reports NOT_FOUND without mutating."""
        rex = full_body_routine.exercises[0]
        full_body_routine.updated_at = 0

        results = [
            tracker.routines.add_set("rut_missing", rex.id),
            tracker.routines.add_set(full_body_routine.id, "rex_missing"),
            tracker.routines.remove_set(full_body_routine.id, rex.id, "set_missing"),
            tracker.routines.update_set(
                full_body_routine.id, rex.id, "set_missing", ReplaceReps(1)
            ),
            tracker.routines.remove_exercise(full_body_routine.id, "rex_missing"),
        ]

        assert all(r.reason == FailureReason.NOT_FOUND for r in results)
        assert full_body_routine.updated_at == 0
        assert len(rex.sets) == 2

    def test_failed_operation_does_not_persist(self, tracker, monkeypatch):
        """Test that failures never reach the gateway."""
        calls = []
        monkeypatch.setattr(tracker.gateway, "save", lambda state: calls.append(state))

        tracker.routines.add_set("rut_missing", "rex_missing")
        tracker.routines.create_routine("")
        assert calls == []


class TestOpenAndDelete:
    """Tests for opening and deleting routines."""

    def test_open_records_last_opened(self, tracker):
        """Test that opening a routine remembers it."""
        first = tracker.routines.create_routine("A").unwrap()
        tracker.routines.create_routine("B")
        tracker.routines.open_routine(first.id)
        assert tracker.state.last_opened_routine_id == first.id

    def test_delete_clears_last_opened(self, tracker):
        """Test that deleting the last opened routine clears the pointer."""
        routine = tracker.routines.create_routine("A").unwrap()
        assert tracker.routines.delete_routine(routine.id).ok
        assert tracker.state.routines == []
        assert tracker.state.last_opened_routine_id is None

    def test_delete_keeps_other_pointer(self, tracker):
        """Test that deleting another routine leaves the pointer alone."""
        old = tracker.routines.create_routine("Old").unwrap()
        new = tracker.routines.create_routine("New").unwrap()
        tracker.routines.delete_routine(old.id)
        assert tracker.state.last_opened_routine_id == new.id

    def test_delete_unknown(self, tracker):
        """Test deleting an unknown routine."""
        assert tracker.routines.delete_routine("rut_missing").reason == FailureReason.NOT_FOUND
