"""Tests for the SQLite repositories."""

from datetime import date, datetime

import pytest

from quest_lift.db import (
    ExerciseRepository,
    PlanRepository,
    RewardRepository,
    UserProfileRepository,
    UserStatsRepository,
    WorkoutLogRepository,
    init_db,
    seed_exercises,
    seed_rewards,
)
from quest_lift.errors import ConflictError, NotFoundError, StateError, ValidationError
from quest_lift.models import (
    EquipmentType,
    ExerciseLog,
    ExercisePlanOverride,
    MuscleGroup,
    UserReward,
    WorkoutDay,
    WorkoutDayExercise,
    WorkoutPlan,
)
from quest_lift.models.exercises import COMMON_EXERCISES
from quest_lift.models.rewards import DEFAULT_REWARDS


def make_plan(*exercise_ids):
    """A one-day plan over the given catalog ids."""
    return WorkoutPlan(
        name="Test Plan",
        goal="build_muscle",
        days=[
            WorkoutDay(
                day_index=0,
                title="Day 1",
                exercises=[
                    WorkoutDayExercise(exercise_id=ex_id, order=order, sets=3, reps="8-12")
                    for order, ex_id in enumerate(exercise_ids, start=1)
                ],
            )
        ],
    )


async def reward_id(db_path, name):
    rewards = await RewardRepository(db_path).list_rewards()
    return next(r.id for r in rewards if r.name == name)


async def grant(db_path, user_id, *reward_ids):
    """Give a user rewards through the progression write path."""
    stats_repo = UserStatsRepository(db_path)
    stats = await stats_repo.get_or_create(user_id)
    _, inserted = await stats_repo.commit_progression(
        stats,
        expected_version=stats.version,
        unlocked=[UserReward(user_id=user_id, reward_id=rid) for rid in reward_ids],
    )
    return inserted


class TestEngine:
    """Tests for schema setup and seeding."""

    async def test_seeding_is_idempotent(self, temp_db_path):
        await init_db(temp_db_path)
        assert await seed_exercises(temp_db_path) == len(COMMON_EXERCISES)
        assert await seed_rewards(temp_db_path) == len(DEFAULT_REWARDS)

        await init_db(temp_db_path)
        assert await seed_exercises(temp_db_path) == 0
        assert await seed_rewards(temp_db_path) == 0
        assert await ExerciseRepository(temp_db_path).count() == len(COMMON_EXERCISES)


class TestExerciseRepository:
    """Tests for catalog queries."""

    async def test_catalog_order(self, db_path):
        exercises = await ExerciseRepository(db_path).list_exercises()

        assert [ex.id for ex in exercises] == list(range(1, len(COMMON_EXERCISES) + 1))
        assert exercises[0].name == COMMON_EXERCISES[0].name

    async def test_filters(self, db_path):
        repo = ExerciseRepository(db_path)

        bodyweight = await repo.list_exercises(equipment_in=[EquipmentType.BODYWEIGHT])
        assert bodyweight
        assert all(ex.equipment is EquipmentType.BODYWEIGHT for ex in bodyweight)

        chest = await repo.list_exercises(muscle_group=MuscleGroup.CHEST)
        assert all(ex.muscle_group is MuscleGroup.CHEST for ex in chest)

        curls = await repo.list_exercises(search="CURL")
        assert curls
        assert all("curl" in ex.name.lower() for ex in curls)

        assert await repo.list_exercises(equipment_in=[]) == []

    async def test_get(self, db_path):
        repo = ExerciseRepository(db_path)

        assert (await repo.get(1)).name == "Bench Press"
        assert await repo.get(9999) is None


class TestUserProfileRepository:
    """Tests for profile storage."""

    async def test_upsert_replaces(self, db_path, profile_factory):
        repo = UserProfileRepository(db_path)
        await repo.upsert(profile_factory(days_per_week=3))
        await repo.upsert(profile_factory(days_per_week=5, equipment=["dumbbells"]))

        profile = await repo.get_by_user(1)
        assert profile.days_per_week == 5
        assert profile.equipment == ["dumbbells"]
        assert await repo.get_by_user(2) is None


class TestPlanRepository:
    """Tests for plan storage."""

    async def test_create_and_get(self, db_path):
        repo = PlanRepository(db_path)
        created_at = datetime(2024, 1, 1, 8, 0)
        plan = await repo.create(make_plan(55, 1, 13), user_id=1, created_at=created_at)

        assert plan.id is not None
        assert plan.user_id == 1
        assert not plan.active
        assert plan.created_at == created_at
        day = plan.days[0]
        assert day.id is not None
        assert [ex.exercise_id for ex in day.exercises] == [55, 1, 13]
        assert [ex.order for ex in day.exercises] == [1, 2, 3]
        assert day.exercises[0].exercise.name == "Squat"

    async def test_plan_limit(self, db_path):
        repo = PlanRepository(db_path)
        await repo.create(make_plan(1), user_id=1, max_plans=1)

        with pytest.raises(ConflictError):
            await repo.create(make_plan(1), user_id=1, max_plans=1)
        assert await repo.count_for_user(1) == 1

        await repo.create(make_plan(1), user_id=2, max_plans=1)
        assert await repo.count_for_user(2) == 1

    async def test_single_active_plan(self, db_path):
        repo = PlanRepository(db_path)
        first = await repo.create(make_plan(1), user_id=1)
        second = await repo.create(make_plan(13), user_id=1)

        await repo.activate(1, first.id)
        await repo.activate(1, second.id)

        plans = await repo.list_for_user(1)
        assert [p.id for p in plans if p.active] == [second.id]
        assert (await repo.get_active(1)).id == second.id

    async def test_activate_foreign_plan(self, db_path):
        repo = PlanRepository(db_path)
        plan = await repo.create(make_plan(1), user_id=1)

        with pytest.raises(NotFoundError):
            await repo.activate(2, plan.id)
        with pytest.raises(NotFoundError):
            await repo.activate(1, 9999)

    async def test_delete_cascades(self, db_path):
        repo = PlanRepository(db_path)
        plan = await repo.create(make_plan(1), user_id=1)
        day_id = plan.days[0].id

        with pytest.raises(NotFoundError):
            await repo.delete(2, plan.id)

        await repo.delete(1, plan.id)
        assert await repo.get(plan.id) is None
        assert await repo.get_day(day_id) is None

    async def test_get_day_reports_owner(self, db_path):
        repo = PlanRepository(db_path)
        plan = await repo.create(make_plan(1, 2), user_id=7)

        day, owner = await repo.get_day(plan.days[0].id)
        assert owner == 7
        assert len(day.exercises) == 2


class TestWorkoutLogRepository:
    """Tests for completion logging."""

    async def _day(self, db_path, *exercise_ids):
        plan = await PlanRepository(db_path).create(make_plan(*exercise_ids), user_id=1)
        return plan.days[0]

    async def test_record_completion(self, db_path):
        day = await self._day(db_path, 1, 13)
        repo = WorkoutLogRepository(db_path)
        logs = [ExerciseLog(exercise_id=1, set_number=1, reps=8, weight=60.0)]

        log = await repo.record_completion(1, day.id, date(2024, 1, 2), logs)

        assert log.id is not None
        assert log.completed
        assert log.exercise_logs[0].weight == 60.0
        assert await repo.is_completed(1, day.id, date(2024, 1, 2))
        assert not await repo.is_completed(1, day.id, date(2024, 1, 3))

    async def test_once_per_day(self, db_path):
        day = await self._day(db_path, 1)
        repo = WorkoutLogRepository(db_path)
        await repo.record_completion(1, day.id, date(2024, 1, 2), [])

        with pytest.raises(ConflictError):
            await repo.record_completion(1, day.id, date(2024, 1, 2), [])
        await repo.record_completion(1, day.id, date(2024, 1, 3), [])

    async def test_overrides_update_prescription(self, db_path):
        day = await self._day(db_path, 1, 13)
        repo = WorkoutLogRepository(db_path)

        await repo.record_completion(
            1, day.id, date(2024, 1, 2), [], {13: ExercisePlanOverride(5, "5", 180)}
        )

        updated, _ = await PlanRepository(db_path).get_day(day.id)
        by_id = {ex.exercise_id: ex for ex in updated.exercises}
        assert (by_id[13].sets, by_id[13].reps, by_id[13].rest_seconds) == (5, "5", 180)
        assert by_id[1].sets == 3

    async def test_override_outside_day_rolls_back(self, db_path):
        day = await self._day(db_path, 1)
        repo = WorkoutLogRepository(db_path)

        with pytest.raises(ValidationError):
            await repo.record_completion(
                1, day.id, date(2024, 1, 2), [], {13: ExercisePlanOverride(3, "10")}
            )
        assert not await repo.is_completed(1, day.id, date(2024, 1, 2))

    async def test_unknown_logged_exercise(self, db_path):
        day = await self._day(db_path, 1)
        repo = WorkoutLogRepository(db_path)

        with pytest.raises(ValidationError):
            await repo.record_completion(
                1, day.id, date(2024, 1, 2), [ExerciseLog(exercise_id=9999, set_number=1, reps=5)]
            )

    async def test_count_completed_since(self, db_path):
        day = await self._day(db_path, 1)
        repo = WorkoutLogRepository(db_path)
        for day_of_month in (6, 7, 8):
            await repo.record_completion(1, day.id, date(2024, 1, day_of_month), [])

        assert await repo.count_completed_since(1, date(2024, 1, 7)) == 2
        assert await repo.count_completed_since(2, date(2024, 1, 1)) == 0

    async def test_later_completion_overrides_again(self, db_path):
        """Every completion may adjust the prescription, not only the first."""
        day = await self._day(db_path, 1)
        repo = WorkoutLogRepository(db_path)

        await repo.record_completion(
            1, day.id, date(2024, 1, 2), [], {1: ExercisePlanOverride(5, "5", 180)}
        )
        await repo.record_completion(
            1, day.id, date(2024, 1, 4), [], {1: ExercisePlanOverride(4, "6-8", 120)}
        )

        updated, _ = await PlanRepository(db_path).get_day(day.id)
        first = updated.exercises[0]
        assert (first.sets, first.reps, first.rest_seconds) == (4, "6-8", 120)

    async def test_revert_completion(self, db_path):
        """Reverting removes the log and restores overwritten prescriptions."""
        day = await self._day(db_path, 1, 13)
        repo = WorkoutLogRepository(db_path)
        log = await repo.record_completion(
            1, day.id, date(2024, 1, 2), [], {13: ExercisePlanOverride(9, "1-2", 300)}
        )
        assert (log.previous_prescriptions[13].sets, log.previous_prescriptions[13].reps) == (
            3,
            "8-12",
        )

        await repo.revert_completion(log)

        assert not await repo.is_completed(1, day.id, date(2024, 1, 2))
        restored, _ = await PlanRepository(db_path).get_day(day.id)
        by_id = {ex.exercise_id: ex for ex in restored.exercises}
        assert (by_id[13].sets, by_id[13].reps) == (3, "8-12")


class TestUserStatsRepository:
    """Tests for versioned stats writes."""

    async def test_get_or_create(self, db_path):
        repo = UserStatsRepository(db_path)
        assert await repo.get(1) is None

        stats = await repo.get_or_create(1)
        assert (stats.total_xp, stats.level, stats.version) == (0, 1, 0)
        assert (await repo.get_or_create(1)).version == 0

    async def test_stale_version_conflicts(self, db_path):
        repo = UserStatsRepository(db_path)
        stats = await repo.get_or_create(1)

        saved, _ = await repo.commit_progression(
            stats.evolve(total_xp=50, last_workout_date=date(2024, 1, 2)), 0, []
        )
        assert saved.version == 1

        with pytest.raises(ConflictError):
            await repo.commit_progression(stats.evolve(total_xp=999), 0, [])

        stored = await repo.get(1)
        assert stored.total_xp == 50
        assert stored.last_workout_date == date(2024, 1, 2)
        assert stored.version == 1

    async def test_unlocks_are_idempotent(self, db_path):
        starter = await reward_id(db_path, "Starter Avatar")

        assert len(await grant(db_path, 1, starter)) == 1
        assert await grant(db_path, 1, starter) == []
        assert await RewardRepository(db_path).owned_reward_ids(1) == {starter}


class TestRewardRepository:
    """Tests for reward ownership and equipping."""

    async def test_catalog_order(self, db_path):
        rewards = await RewardRepository(db_path).list_rewards()
        names = [r.name for r in rewards]

        assert names[:3] == ["Starter Avatar", "Bronze Badge", "Silver Badge"]
        assert names[-1] == "7-Day Streak Medal"

    async def test_equip_unknown_reward(self, db_path):
        with pytest.raises(NotFoundError):
            await RewardRepository(db_path).equip(1, 9999)

    async def test_equip_requires_ownership(self, db_path):
        bronze = await reward_id(db_path, "Bronze Badge")
        with pytest.raises(StateError):
            await RewardRepository(db_path).equip(1, bronze)

    async def test_one_avatar_equipped(self, db_path):
        repo = RewardRepository(db_path)
        starter = await reward_id(db_path, "Starter Avatar")
        platinum = await reward_id(db_path, "Platinum Avatar")
        bronze = await reward_id(db_path, "Bronze Badge")
        await grant(db_path, 1, starter, platinum, bronze)

        await repo.equip(1, starter)
        await repo.equip(1, bronze)
        equipped = await repo.equip(1, platinum)

        assert equipped.equipped
        assert equipped.reward.name == "Platinum Avatar"
        owned = {ur.reward_id: ur.equipped for ur in await repo.list_user_rewards(1)}
        assert owned == {starter: False, platinum: True, bronze: True}
