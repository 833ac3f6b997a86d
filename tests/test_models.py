"""Tests for data models."""

from datetime import date

import pytest

from quest_lift.errors import ValidationError
from quest_lift.models import (
    CompletionEvent,
    EquipmentPackage,
    EquipmentType,
    ExerciseLog,
    MuscleGroup,
    Reward,
    RewardType,
    UserProfile,
    UserStats,
    WorkoutDay,
    WorkoutDayExercise,
    WorkoutPlan,
)
from quest_lift.models.exercises import COMMON_EXERCISES
from quest_lift.models.routines import ROUTINES, RoutineType, resolve_routine


class TestExerciseCatalog:
    """Tests for the seed exercise catalog."""

    def test_names_are_unique(self):
        """Seeding is keyed on the name."""
        names = [ex.name for ex in COMMON_EXERCISES]
        assert len(names) == len(set(names))

    def test_every_muscle_bucket_is_covered(self):
        """Each allocation bucket has at least one exercise."""
        groups = {ex.muscle_group for ex in COMMON_EXERCISES}
        for muscle in (MuscleGroup.CHEST, MuscleGroup.BACK, MuscleGroup.QUADRICEPS, MuscleGroup.CORE):
            assert muscle in groups

    def test_package_expansion(self):
        """Packages expand to concrete equipment only."""
        assert EquipmentType.BENCH in EquipmentPackage.HOME_GYM_LIMITED.equipment
        assert EquipmentType.BODYWEIGHT not in EquipmentPackage.PUBLIC_GYM.equipment


class TestUserProfile:
    """Tests for UserProfile."""

    def test_validate_accepts_complete_profile(self, profile_factory):
        profile_factory().validate()

    def test_validate_requires_equipment(self, profile_factory):
        """An empty equipment list is a missing field."""
        with pytest.raises(ValidationError, match="equipment"):
            profile_factory(equipment=[]).validate()

    @pytest.mark.parametrize("days", [0, 8])
    def test_validate_days_range(self, profile_factory, days):
        with pytest.raises(ValidationError):
            profile_factory(days_per_week=days).validate()

    def test_from_dict_rejects_unknown_goal(self, profile_factory):
        data = profile_factory().to_dict()
        data["goal"] = "get_huge"
        with pytest.raises(ValidationError):
            UserProfile.from_dict(data)

    def test_profile_summary(self, profile_factory):
        summary = profile_factory().get_summary()

        assert "build_muscle" in summary
        assert "3/week" in summary
        assert "barbell" in summary


class TestWorkoutPlan:
    """Tests for plan serialization."""

    def test_unsaved_plan_to_dict(self):
        """A generated plan carries no storage fields."""
        plan = WorkoutPlan(
            name="Full Body (3-Day)",
            goal="strength",
            days=[
                WorkoutDay(
                    day_index=0,
                    title="Full Body A",
                    exercises=[WorkoutDayExercise(exercise_id=55, order=1, sets=4, reps="4-6")],
                )
            ],
        )
        data = plan.to_dict()

        assert "id" not in data
        assert "active" not in data
        assert data["days"][0]["exercises"][0]["exercise_id"] == 55

    def test_plan_from_dict(self):
        data = {
            "name": "Test",
            "goal": "build_muscle",
            "days": [
                {
                    "day_index": 0,
                    "title": "Push",
                    "exercises": [{"exercise_id": 1, "order": 1, "sets": None, "reps": None}],
                }
            ],
        }
        plan = WorkoutPlan.from_dict(data, id=3, user_id=1)

        assert plan.id == 3
        assert plan.days[0].exercises[0].sets == 0
        assert plan.days[0].exercises[0].reps == ""

    def test_summary_marks_unset_prescription(self):
        plan = WorkoutPlan(
            name="Custom",
            goal="strength",
            days=[WorkoutDay(0, "Day 1", [WorkoutDayExercise(exercise_id=1, order=1)])],
        )
        assert "not set" in plan.get_summary()


class TestProgressModels:
    """Tests for progression state models."""

    def test_had_logged_sets(self):
        assert not CompletionEvent(workout_day_id=1).had_logged_sets
        event = CompletionEvent(
            workout_day_id=1,
            exercise_logs=[ExerciseLog(exercise_id=1, set_number=1, reps=8)],
        )
        assert event.had_logged_sets

    def test_completion_event_from_dict_keys_are_ints(self):
        event = CompletionEvent.from_dict(
            {
                "workout_day_id": 4,
                "plan_overrides": {"12": {"sets": 3, "reps": "8-10"}},
            }
        )
        assert event.plan_overrides[12].reps == "8-10"

    def test_stats_evolve_keeps_original(self):
        """Stats are immutable values."""
        stats = UserStats(user_id=1)
        evolved = stats.evolve(total_xp=70, last_workout_date=date(2024, 1, 1))

        assert stats.total_xp == 0
        assert evolved.total_xp == 70
        assert UserStats.from_dict(evolved.to_dict(), version=2).version == 2


class TestRewards:
    """Tests for reward models."""

    def test_requirements(self):
        assert Reward("Badge", RewardType.BADGE, required_level=2).has_requirements
        assert not Reward("Nothing", RewardType.BADGE).has_requirements

    def test_only_avatars_are_exclusive(self):
        assert RewardType.AVATAR.exclusive_equip
        assert not RewardType.BADGE.exclusive_equip
        assert not RewardType.MEDAL.exclusive_equip


class TestRoutines:
    """Tests for routine resolution."""

    @pytest.mark.parametrize(
        "days_per_week, routine_type, day_count",
        [
            (1, RoutineType.FULL_BODY, 1),
            (2, RoutineType.FULL_BODY, 2),
            (3, RoutineType.FULL_BODY, 3),
            (4, RoutineType.UPPER_LOWER, 4),
            (5, RoutineType.PPL, 5),
            (6, RoutineType.PPL, 6),
            (7, RoutineType.PPL, 6),
        ],
    )
    def test_auto_selection(self, days_per_week, routine_type, day_count):
        routine, count = resolve_routine(None, days_per_week)

        assert routine.routine_type is routine_type
        assert count == day_count

    def test_explicit_routine_uses_full_length(self):
        """An explicit choice ignores days per week."""
        routine, count = resolve_routine(RoutineType.ARNOLD, 2)

        assert routine is ROUTINES[RoutineType.ARNOLD]
        assert count == 6
