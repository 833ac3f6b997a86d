"""Tests for the rule-based plan generator."""

import pytest

from quest_lift.errors import NotFoundError, ValidationError
from quest_lift.generators.plan_generator import (
    GeneratorConfig,
    PlanGenerator,
    RoutineSelection,
    generate_plan,
    normalize_equipment,
    plan_fingerprint,
)
from quest_lift.models import EquipmentType, FitnessGoal, WorkoutDay, WorkoutDayExercise
from quest_lift.models.routines import RoutineType


def exercise_ids(day):
    return [ex.exercise_id for ex in day.exercises]


class TestNormalizeEquipment:
    """Tests for equipment normalization."""

    def test_package_tokens_are_dropped(self):
        assert normalize_equipment(["public_gym", "barbell"]) == {EquipmentType.BARBELL}

    def test_only_package_tokens_leaves_nothing(self):
        assert normalize_equipment(["home_gym_limited"]) == set()

    def test_empty_is_rejected(self):
        with pytest.raises(ValidationError):
            normalize_equipment([])

    def test_unknown_tag_is_rejected(self):
        with pytest.raises(ValidationError, match="spaceship"):
            normalize_equipment(["barbell", "spaceship"])


class TestFullBody:
    """Full body allocation against the small catalog."""

    def test_three_days(self, profile_factory, small_catalog):
        """Slots walk each bucket in catalog order."""
        plan = generate_plan(profile_factory(), small_catalog)

        assert plan.name == "Full Body (3-Day)"
        assert [day.title for day in plan.days] == ["Full Body A", "Full Body B", "Full Body C"]
        assert exercise_ids(plan.days[0]) == [7, 1, 4, 8, 9]
        assert exercise_ids(plan.days[1]) == [4, 2, 7, 5, 9]
        assert exercise_ids(plan.days[2]) == [1, 8, 5, 2, 9]

    def test_prescriptions(self, profile_factory, small_catalog):
        """Main, accessory and core slots get their own rest and reps."""
        plan = generate_plan(profile_factory(), small_catalog)
        main, _, _, accessory, core = plan.days[0].exercises

        assert (main.sets, main.reps, main.rest_seconds) == (3, "8-12", 90)
        assert (accessory.sets, accessory.reps, accessory.rest_seconds) == (3, "8-12", 60)
        assert (core.sets, core.reps, core.rest_seconds) == (3, "10-15", 45)

    def test_strength_prescription(self, profile_factory, small_catalog):
        plan = generate_plan(profile_factory(goal=FitnessGoal.STRENGTH), small_catalog)
        main = plan.days[0].exercises[0]
        core = plan.days[0].exercises[-1]

        assert (main.sets, main.reps) == (4, "4-6")
        assert (core.sets, core.reps) == (3, "10-15")

    @pytest.mark.parametrize("days", [1, 2])
    def test_short_weeks_truncate(self, profile_factory, small_catalog, days):
        """Fewer than three days cuts the full body cycle short."""
        plan = generate_plan(profile_factory(days_per_week=days), small_catalog)

        assert plan.name == "Full Body"
        assert plan.day_count == days
        assert plan.days[0].title == "Full Body A"

    def test_unavailable_equipment_is_excluded(self, profile_factory, small_catalog):
        plan = generate_plan(profile_factory(), small_catalog)
        assert 10 not in plan.exercise_ids


class TestSplits:
    """Tests for the multi-day splits."""

    def test_upper_lower(self, profile_factory, small_catalog):
        """Empty windows wrap to the front of the bucket."""
        plan = generate_plan(profile_factory(days_per_week=4), small_catalog)

        assert plan.name == "Upper/Lower Split (4-Day)"
        assert exercise_ids(plan.days[0]) == [1, 2, 3, 4, 9]
        assert exercise_ids(plan.days[1]) == [7, 8]
        assert exercise_ids(plan.days[2]) == [5, 6, 9]
        assert exercise_ids(plan.days[3]) == [7, 8]

    def test_ppl_six_days_repeats_cycle(self, profile_factory, small_catalog):
        plan = generate_plan(
            profile_factory(), small_catalog, RoutineSelection(routine=RoutineType.PPL)
        )

        assert plan.name == "Push/Pull/Legs (6-Day)"
        assert [day.title for day in plan.days] == ["Push", "Pull", "Legs"] * 2
        assert [day.day_index for day in plan.days] == list(range(6))
        assert exercise_ids(plan.days[0]) == [1, 2, 3] == exercise_ids(plan.days[3])
        assert exercise_ids(plan.days[1]) == [4, 5, 6]
        assert exercise_ids(plan.days[2]) == [7, 8]

    def test_repeated_days_are_independent(self, profile_factory, small_catalog):
        """Editing one copy of a repeated day leaves the other alone."""
        plan = generate_plan(
            profile_factory(), small_catalog, RoutineSelection(routine=RoutineType.PPL)
        )
        plan.days[3].exercises[0].sets = 10

        assert plan.days[0].exercises[0].sets == 3

    def test_ppl_five_days(self, profile_factory, small_catalog):
        plan = generate_plan(profile_factory(days_per_week=5), small_catalog)

        assert plan.name == "Push/Pull/Legs (5-Day)"
        assert [day.title for day in plan.days] == ["Push", "Pull", "Legs", "Push", "Pull"]

    def test_arnold(self, profile_factory, small_catalog):
        plan = generate_plan(
            profile_factory(), small_catalog, RoutineSelection(routine=RoutineType.ARNOLD)
        )

        assert plan.name == "Arnold Split (6-Day)"
        assert exercise_ids(plan.days[0]) == [1, 2, 4, 5]
        assert exercise_ids(plan.days[1]) == [3, 6]
        assert exercise_ids(plan.days[2]) == [7, 8]


class TestFallback:
    """Tests for sparse catalogs."""

    def test_empty_buckets_draw_from_catalog(self, profile_factory, small_catalog):
        """Required slots borrow unused exercises; nothing repeats in a day."""
        plan = generate_plan(profile_factory(equipment=["bodyweight"]), small_catalog)

        for day in plan.days:
            ids = exercise_ids(day)
            assert ids
            assert len(ids) == len(set(ids))
            assert set(ids) <= {2, 9}

    def test_no_usable_equipment(self, profile_factory, small_catalog):
        with pytest.raises(ValidationError, match="no exercises available"):
            generate_plan(profile_factory(equipment=["kettlebells"]), small_catalog)

    def test_package_only_profile(self, profile_factory, small_catalog):
        """A bare package token carries no equipment of its own."""
        with pytest.raises(ValidationError):
            generate_plan(profile_factory(equipment=["public_gym"]), small_catalog)

    def test_invalid_profile(self, profile_factory, small_catalog):
        with pytest.raises(ValidationError):
            generate_plan(profile_factory(days_per_week=9), small_catalog)


class TestFullCatalog:
    """Structural properties over the seed catalog."""

    @pytest.mark.parametrize("days", range(1, 8))
    @pytest.mark.parametrize("goal", list(FitnessGoal))
    def test_auto_plans(self, sample_profile, catalog, days, goal):
        sample_profile.days_per_week = days
        sample_profile.goal = goal
        plan = generate_plan(sample_profile, catalog)
        allowed = normalize_equipment(sample_profile.equipment)
        by_id = {ex.id: ex for ex in catalog}

        assert plan.day_count == min(days, 6)
        for day in plan.days:
            assert [ex.order for ex in day.exercises] == list(range(1, len(day.exercises) + 1))
            assert len(set(exercise_ids(day))) == len(day.exercises)
            for ex in day.exercises:
                assert by_id[ex.exercise_id].equipment in allowed

    @pytest.mark.parametrize("routine", list(RoutineType))
    def test_explicit_routines(self, sample_profile, catalog, routine):
        plan = generate_plan(sample_profile, catalog, RoutineSelection(routine=routine))
        expected = {RoutineType.FULL_BODY: 3, RoutineType.UPPER_LOWER: 4}

        assert plan.day_count == expected.get(routine, 6)
        assert all(day.exercises for day in plan.days)

    def test_gym_full_body_day(self, sample_profile, catalog):
        """Without bodyweight the core slot takes the cable crunch."""
        plan = generate_plan(sample_profile, catalog)
        assert exercise_ids(plan.days[0]) == [55, 1, 13, 56, 82]

    def test_deterministic(self, sample_profile, catalog):
        first = generate_plan(sample_profile, catalog)
        second = generate_plan(sample_profile, catalog)
        assert first.to_dict() == second.to_dict()


class TestCustomDays:
    """Tests for caller-supplied days."""

    def _days(self, *exercises):
        return [
            WorkoutDay(
                day_index=0,
                title="Day 1",
                exercises=[
                    WorkoutDayExercise(exercise_id=ex_id, order=order)
                    for order, ex_id in enumerate(exercises, start=1)
                ],
            )
        ]

    def test_custom_days_are_kept(self, profile_factory, small_catalog):
        """Custom days skip allocation, including the equipment filter."""
        selection = RoutineSelection(routine=RoutineType.PPL, custom_days=self._days(10, 1))
        plan = generate_plan(profile_factory(), small_catalog, selection)

        assert plan.name == "Push/Pull/Legs (Custom)"
        assert exercise_ids(plan.days[0]) == [10, 1]
        assert plan.days[0].exercises[0].sets == 0

    def test_default_label(self, profile_factory, small_catalog):
        plan = generate_plan(
            profile_factory(), small_catalog, RoutineSelection(custom_days=self._days(1))
        )
        assert plan.name == "Full Body (Custom)"

    def test_unknown_exercise(self, profile_factory, small_catalog):
        with pytest.raises(NotFoundError):
            generate_plan(
                profile_factory(), small_catalog, RoutineSelection(custom_days=self._days(99))
            )

    def test_empty_days(self, profile_factory, small_catalog):
        with pytest.raises(ValidationError):
            generate_plan(profile_factory(), small_catalog, RoutineSelection(custom_days=[]))

    def test_duplicate_order(self, profile_factory, small_catalog):
        days = self._days(1, 2)
        days[0].exercises[1].order = 1
        with pytest.raises(ValidationError):
            generate_plan(profile_factory(), small_catalog, RoutineSelection(custom_days=days))

    def test_duplicate_day_index(self, profile_factory, small_catalog):
        days = self._days(1) + self._days(2)
        with pytest.raises(ValidationError):
            generate_plan(profile_factory(), small_catalog, RoutineSelection(custom_days=days))

    def test_order_must_start_at_one(self, profile_factory, small_catalog):
        days = self._days(1)
        days[0].exercises[0].order = 7
        with pytest.raises(ValidationError, match="order"):
            generate_plan(profile_factory(), small_catalog, RoutineSelection(custom_days=days))

    def test_order_gap(self, profile_factory, small_catalog):
        days = self._days(1, 2)
        days[0].exercises[1].order = 3
        with pytest.raises(ValidationError):
            generate_plan(profile_factory(), small_catalog, RoutineSelection(custom_days=days))

    def test_descending_day_index(self, profile_factory, small_catalog):
        days = self._days(1) + self._days(2)
        days[0].day_index = 2
        days[1].day_index = 1
        with pytest.raises(ValidationError, match="ascending"):
            generate_plan(profile_factory(), small_catalog, RoutineSelection(custom_days=days))

    def test_day_index_gaps_are_allowed(self, profile_factory, small_catalog):
        days = self._days(1) + self._days(2)
        days[1].day_index = 3
        plan = generate_plan(profile_factory(), small_catalog, RoutineSelection(custom_days=days))
        assert [day.day_index for day in plan.days] == [0, 3]


class TestCache:
    """Tests for the plan cache."""

    def test_cached_plans_are_copies(self, profile_factory, small_catalog):
        generator = PlanGenerator()
        first = generator.generate(profile_factory(), small_catalog)
        first.days[0].exercises.clear()
        second = generator.generate(profile_factory(), small_catalog)

        assert second.days[0].exercises
        assert len(generator._cache) == 1

    def test_cache_is_bounded(self, profile_factory, small_catalog):
        generator = PlanGenerator(GeneratorConfig(cache_size=2))
        for days in (1, 2, 3):
            generator.generate(profile_factory(days_per_week=days), small_catalog)

        assert len(generator._cache) == 2
        generator.clear_cache()
        assert not generator._cache

    def test_fingerprint_covers_selection(self, profile_factory, small_catalog):
        profile = profile_factory()
        auto = plan_fingerprint(profile, small_catalog)

        assert auto == plan_fingerprint(profile, small_catalog, RoutineSelection())
        assert auto != plan_fingerprint(
            profile, small_catalog, RoutineSelection(routine=RoutineType.PPL)
        )
        assert auto != plan_fingerprint(profile, small_catalog[:-1])

    def test_cache_hit_still_validates_profile(self, profile_factory, small_catalog):
        """Body metrics are not part of the fingerprint but are still checked."""
        generator = PlanGenerator()
        generator.generate(profile_factory(), small_catalog)
        invalid = profile_factory()
        invalid.age = -5

        with pytest.raises(ValidationError):
            generator.generate(invalid, small_catalog)
