"""Data access layer for quest-lift."""

import json
import logging
from datetime import date, datetime
from pathlib import Path

import aiosqlite

from ..errors import ConflictError, NotFoundError, StateError, ValidationError
from ..models.exercises import EquipmentType, Exercise, MuscleGroup
from ..models.plan import WorkoutDay, WorkoutDayExercise, WorkoutPlan
from ..models.progress import ExerciseLog, ExercisePlanOverride, UserStats, WorkoutLog
from ..models.rewards import Reward, RewardType, UserReward
from ..models.user_profile import UserProfile
from .engine import get_db_path, transaction

logger = logging.getLogger(__name__)


def _parse_datetime(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None


def _parse_date(value: str | None) -> date | None:
    return date.fromisoformat(value) if value else None


class UserProfileRepository:
    """Repository for onboarding profiles."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def upsert(self, profile: UserProfile) -> UserProfile:
        """Create or replace the profile of ``profile.user_id``."""
        data = profile.to_dict()
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            await db.execute(
                """
                INSERT INTO user_profiles
                (user_id, age, height_cm, weight_kg, sex, experience_level, goal,
                 days_per_week, equipment)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
                ON CONFLICT(user_id) DO UPDATE SET
                    age = excluded.age,
                    height_cm = excluded.height_cm,
                    weight_kg = excluded.weight_kg,
                    sex = excluded.sex,
                    experience_level = excluded.experience_level,
                    goal = excluded.goal,
                    days_per_week = excluded.days_per_week,
                    equipment = excluded.equipment,
                    updated_at = CURRENT_TIMESTAMP
                """,
                (
                    data["user_id"],
                    data["age"],
                    data["height_cm"],
                    data["weight_kg"],
                    data["sex"],
                    data["experience_level"],
                    data["goal"],
                    data["days_per_week"],
                    json.dumps(data["equipment"]),
                ),
            )
            await db.commit()
            cursor = await db.execute(
                "SELECT * FROM user_profiles WHERE user_id = ?", (profile.user_id,)
            )
            return self._row_to_profile(await cursor.fetchone())

    async def get_by_user(self, user_id: int) -> UserProfile | None:
        """Get a user's profile."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM user_profiles WHERE user_id = ?", (user_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_profile(row)

    def _row_to_profile(self, row: aiosqlite.Row) -> UserProfile:
        """Convert a database row to a UserProfile."""
        data = {
            "user_id": row["user_id"],
            "age": row["age"],
            "height_cm": row["height_cm"],
            "weight_kg": row["weight_kg"],
            "sex": row["sex"],
            "experience_level": row["experience_level"],
            "goal": row["goal"],
            "days_per_week": row["days_per_week"],
            "equipment": json.loads(row["equipment"]),
        }
        return UserProfile.from_dict(
            data,
            id=row["id"],
            created_at=_parse_datetime(row["created_at"]),
            updated_at=_parse_datetime(row["updated_at"]),
        )


class ExerciseRepository:
    """Repository for the exercise catalog.

    Listings are always ordered by id, which is the order exercises were
    seeded in. The plan generator depends on that order.
    """

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def get(self, exercise_id: int) -> Exercise | None:
        """Get an exercise by ID."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM exercises WHERE id = ?", (exercise_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_exercise(row)

    async def list_exercises(
        self,
        equipment_in: list[EquipmentType] | None = None,
        muscle_group: MuscleGroup | None = None,
        search: str | None = None,
    ) -> list[Exercise]:
        """List exercises, optionally filtered.

        Args:
            equipment_in: Keep exercises whose equipment is in this list
            muscle_group: Keep exercises of this muscle group
            search: Case-insensitive substring of the name
        """
        query = "SELECT * FROM exercises"
        clauses: list[str] = []
        params: list = []

        if equipment_in is not None:
            if not equipment_in:
                return []
            placeholders = ", ".join("?" for _ in equipment_in)
            clauses.append(f"equipment IN ({placeholders})")
            params.extend(EquipmentType(eq).value for eq in equipment_in)
        if muscle_group is not None:
            clauses.append("muscle_group = ?")
            params.append(MuscleGroup(muscle_group).value)
        if search:
            clauses.append("LOWER(name) LIKE ?")
            params.append(f"%{search.lower()}%")

        if clauses:
            query += " WHERE " + " AND ".join(clauses)
        query += " ORDER BY id"

        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(query, params)
            rows = await cursor.fetchall()
            return [self._row_to_exercise(row) for row in rows]

    async def count(self) -> int:
        """Number of exercises in the catalog."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute("SELECT COUNT(*) FROM exercises")
            row = await cursor.fetchone()
            return row[0]

    def _row_to_exercise(self, row: aiosqlite.Row) -> Exercise:
        """Convert a database row to an Exercise."""
        return Exercise.from_dict(
            {
                "name": row["name"],
                "muscle_group": row["muscle_group"],
                "equipment": row["equipment"],
            },
            id=row["id"],
        )


class PlanRepository:
    """Repository for workout plans, their days and day exercises."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def create(
        self,
        plan: WorkoutPlan,
        user_id: int,
        max_plans: int | None = None,
        created_at: datetime | None = None,
    ) -> WorkoutPlan:
        """Persist a generated plan as inactive.

        Args:
            plan: Unsaved plan
            user_id: Owner
            max_plans: Reject the insert when the user already has this many
            created_at: Creation time, defaults to now

        Raises:
            ConflictError: If the user is at the plan limit
        """
        created_at = created_at or datetime.now().replace(microsecond=0)

        async with transaction(self.db_path) as db:
            if max_plans is not None:
                cursor = await db.execute(
                    "SELECT COUNT(*) FROM workout_plans WHERE user_id = ?", (user_id,)
                )
                row = await cursor.fetchone()
                if row[0] >= max_plans:
                    raise ConflictError(
                        f"You can only have up to {max_plans} workout plans. "
                        "Please delete one to create a new one."
                    )

            cursor = await db.execute(
                """
                INSERT INTO workout_plans (user_id, name, goal, active, created_at)
                VALUES (?, ?, ?, 0, ?)
                """,
                (user_id, plan.name, plan.goal, created_at.isoformat()),
            )
            plan_id = cursor.lastrowid

            for day in plan.days:
                cursor = await db.execute(
                    "INSERT INTO workout_days (plan_id, day_index, title) VALUES (?, ?, ?)",
                    (plan_id, day.day_index, day.title),
                )
                day_id = cursor.lastrowid
                for ex in day.exercises:
                    await db.execute(
                        """
                        INSERT INTO workout_day_exercises
                        (workout_day_id, exercise_id, position, sets, reps, rest_seconds)
                        VALUES (?, ?, ?, ?, ?, ?)
                        """,
                        (day_id, ex.exercise_id, ex.order, ex.sets, ex.reps, ex.rest_seconds),
                    )

        saved = await self.get(plan_id)
        logger.info("Saved plan %d for user %d: %s", plan_id, user_id, plan.name)
        return saved

    async def get(self, plan_id: int) -> WorkoutPlan | None:
        """Get a plan with its days and exercises."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM workout_plans WHERE id = ?", (plan_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return await self._row_to_plan(db, row)

    async def list_for_user(self, user_id: int) -> list[WorkoutPlan]:
        """List a user's plans, newest first."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM workout_plans WHERE user_id = ? ORDER BY created_at DESC, id DESC",
                (user_id,),
            )
            rows = await cursor.fetchall()
            return [await self._row_to_plan(db, row) for row in rows]

    async def get_active(self, user_id: int) -> WorkoutPlan | None:
        """Get the user's active plan."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM workout_plans WHERE user_id = ? AND active = 1",
                (user_id,),
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return await self._row_to_plan(db, row)

    async def count_for_user(self, user_id: int) -> int:
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                "SELECT COUNT(*) FROM workout_plans WHERE user_id = ?", (user_id,)
            )
            row = await cursor.fetchone()
            return row[0]

    async def activate(self, user_id: int, plan_id: int) -> None:
        """Make ``plan_id`` the user's only active plan.

        Raises:
            NotFoundError: If the plan does not exist or belongs to someone else
            ConflictError: If a concurrent activation won
        """
        try:
            async with transaction(self.db_path) as db:
                await self._check_owner(db, user_id, plan_id)
                await db.execute(
                    "UPDATE workout_plans SET active = 0 WHERE user_id = ? AND active = 1",
                    (user_id,),
                )
                await db.execute(
                    "UPDATE workout_plans SET active = 1 WHERE id = ?", (plan_id,)
                )
        except aiosqlite.IntegrityError as e:
            raise ConflictError("Another plan is already active") from e

    async def delete(self, user_id: int, plan_id: int) -> None:
        """Delete a plan with its days, exercises and logs.

        Raises:
            NotFoundError: If the plan does not exist or belongs to someone else
        """
        async with transaction(self.db_path) as db:
            await self._check_owner(db, user_id, plan_id)
            await db.execute("DELETE FROM workout_plans WHERE id = ?", (plan_id,))

    async def get_day(self, day_id: int) -> tuple[WorkoutDay, int] | None:
        """Get a day with its exercises and the owning user id."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                """
                SELECT d.*, p.user_id FROM workout_days d
                JOIN workout_plans p ON p.id = d.plan_id
                WHERE d.id = ?
                """,
                (day_id,),
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            day = WorkoutDay(
                id=row["id"],
                plan_id=row["plan_id"],
                day_index=row["day_index"],
                title=row["title"],
                exercises=await self._load_day_exercises(db, row["id"]),
            )
            return day, row["user_id"]

    async def _check_owner(self, db: aiosqlite.Connection, user_id: int, plan_id: int) -> None:
        cursor = await db.execute(
            "SELECT user_id FROM workout_plans WHERE id = ?", (plan_id,)
        )
        row = await cursor.fetchone()
        if row is None or row["user_id"] != user_id:
            raise NotFoundError(f"Plan not found: {plan_id}")

    async def _row_to_plan(self, db: aiosqlite.Connection, row: aiosqlite.Row) -> WorkoutPlan:
        """Convert a plan row plus its child rows to a WorkoutPlan."""
        cursor = await db.execute(
            "SELECT * FROM workout_days WHERE plan_id = ? ORDER BY day_index",
            (row["id"],),
        )
        day_rows = await cursor.fetchall()
        days = [
            WorkoutDay(
                id=day_row["id"],
                plan_id=row["id"],
                day_index=day_row["day_index"],
                title=day_row["title"],
                exercises=await self._load_day_exercises(db, day_row["id"]),
            )
            for day_row in day_rows
        ]
        return WorkoutPlan(
            id=row["id"],
            user_id=row["user_id"],
            name=row["name"],
            goal=row["goal"],
            active=bool(row["active"]),
            days=days,
            created_at=_parse_datetime(row["created_at"]),
        )

    async def _load_day_exercises(
        self, db: aiosqlite.Connection, day_id: int
    ) -> list[WorkoutDayExercise]:
        cursor = await db.execute(
            """
            SELECT wde.*, e.name, e.muscle_group, e.equipment
            FROM workout_day_exercises wde
            JOIN exercises e ON e.id = wde.exercise_id
            WHERE wde.workout_day_id = ?
            ORDER BY wde.position
            """,
            (day_id,),
        )
        rows = await cursor.fetchall()
        return [
            WorkoutDayExercise(
                id=r["id"],
                exercise_id=r["exercise_id"],
                order=r["position"],
                sets=r["sets"],
                reps=r["reps"],
                rest_seconds=r["rest_seconds"],
                exercise=Exercise.from_dict(
                    {
                        "name": r["name"],
                        "muscle_group": r["muscle_group"],
                        "equipment": r["equipment"],
                    },
                    id=r["exercise_id"],
                ),
            )
            for r in rows
        ]


class WorkoutLogRepository:
    """Repository for workout and exercise logs."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def record_completion(
        self,
        user_id: int,
        day_id: int,
        log_date: date,
        exercise_logs: list[ExerciseLog],
        overrides: dict[int, ExercisePlanOverride] | None = None,
    ) -> WorkoutLog:
        """Store a completed workout with its set logs and prescription overrides.

        Raises:
            ConflictError: If the day was already completed on ``log_date``
            ValidationError: If an override or log names an exercise that is
                not in the day or the catalog
        """
        try:
            async with transaction(self.db_path) as db:
                cursor = await db.execute(
                    """
                    SELECT 1 FROM workout_logs
                    WHERE user_id = ? AND workout_day_id = ? AND log_date = ?
                    """,
                    (user_id, day_id, log_date.isoformat()),
                )
                if await cursor.fetchone() is not None:
                    raise ConflictError("Workout already completed today")

                cursor = await db.execute(
                    """
                    INSERT INTO workout_logs (user_id, workout_day_id, log_date, completed)
                    VALUES (?, ?, ?, 1)
                    """,
                    (user_id, day_id, log_date.isoformat()),
                )
                log_id = cursor.lastrowid

                previous = {}
                for exercise_id, override in (overrides or {}).items():
                    cursor = await db.execute(
                        """
                        SELECT sets, reps, rest_seconds FROM workout_day_exercises
                        WHERE workout_day_id = ? AND exercise_id = ?
                        """,
                        (day_id, exercise_id),
                    )
                    row = await cursor.fetchone()
                    if row is None:
                        raise ValidationError(f"Exercise {exercise_id} is not part of this day")
                    previous[exercise_id] = ExercisePlanOverride(
                        sets=row[0], reps=row[1], rest_seconds=row[2]
                    )

                    cursor = await db.execute(
                        """
                        UPDATE workout_day_exercises SET sets = ?, reps = ?, rest_seconds = ?
                        WHERE workout_day_id = ? AND exercise_id = ?
                        """,
                        (override.sets, override.reps, override.rest_seconds, day_id, exercise_id),
                    )
                    if cursor.rowcount == 0:
                        raise ValidationError(f"Exercise {exercise_id} is not part of this day")

                for log in exercise_logs:
                    cursor = await db.execute(
                        """
                        INSERT INTO exercise_logs
                        (workout_log_id, exercise_id, set_number, weight, reps)
                        VALUES (?, ?, ?, ?, ?)
                        """,
                        (log_id, log.exercise_id, log.set_number, log.weight, log.reps),
                    )
                    log.id = cursor.lastrowid
        except aiosqlite.IntegrityError as e:
            if "workout_logs" in str(e):
                raise ConflictError("Workout already completed today") from e
            raise ValidationError(f"Invalid exercise log: {e}") from e

        return WorkoutLog(
            id=log_id,
            user_id=user_id,
            workout_day_id=day_id,
            log_date=log_date,
            completed=True,
            exercise_logs=list(exercise_logs),
            previous_prescriptions=previous,
        )

    async def revert_completion(self, workout_log: WorkoutLog) -> None:
        """Delete a workout log with its set logs and restore the prescriptions it overwrote."""
        async with transaction(self.db_path) as db:
            for exercise_id, prescription in workout_log.previous_prescriptions.items():
                await db.execute(
                    """
                    UPDATE workout_day_exercises SET sets = ?, reps = ?, rest_seconds = ?
                    WHERE workout_day_id = ? AND exercise_id = ?
                    """,
                    (
                        prescription.sets,
                        prescription.reps,
                        prescription.rest_seconds,
                        workout_log.workout_day_id,
                        exercise_id,
                    ),
                )
            await db.execute("DELETE FROM workout_logs WHERE id = ?", (workout_log.id,))

    async def is_completed(self, user_id: int, day_id: int, log_date: date) -> bool:
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                """
                SELECT 1 FROM workout_logs
                WHERE user_id = ? AND workout_day_id = ? AND log_date = ? AND completed = 1
                """,
                (user_id, day_id, log_date.isoformat()),
            )
            return await cursor.fetchone() is not None

    async def count_completed_since(self, user_id: int, since: date) -> int:
        """Completed workouts on or after ``since``."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                """
                SELECT COUNT(*) FROM workout_logs
                WHERE user_id = ? AND completed = 1 AND log_date >= ?
                """,
                (user_id, since.isoformat()),
            )
            row = await cursor.fetchone()
            return row[0]


class UserStatsRepository:
    """Repository for per-user progression state."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def get(self, user_id: int) -> UserStats | None:
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM user_stats WHERE user_id = ?", (user_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_stats(row)

    async def get_or_create(self, user_id: int) -> UserStats:
        """Get the user's stats, creating the zero state on first use."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            await db.execute(
                "INSERT OR IGNORE INTO user_stats (user_id) VALUES (?)", (user_id,)
            )
            await db.commit()
            cursor = await db.execute(
                "SELECT * FROM user_stats WHERE user_id = ?", (user_id,)
            )
            return self._row_to_stats(await cursor.fetchone())

    async def commit_progression(
        self,
        stats: UserStats,
        expected_version: int,
        unlocked: list[UserReward],
    ) -> tuple[UserStats, list[UserReward]]:
        """Write new stats and reward ownership in one transaction.

        The stats row is only updated if its version is still
        ``expected_version``. Rewards the user already owns are skipped.

        Returns:
            The stored stats (with the bumped version) and the ownership
            records actually inserted

        Raises:
            ConflictError: If the stats were written by someone else first
        """
        inserted: list[UserReward] = []
        unlocked_at = datetime.now().replace(microsecond=0)

        async with transaction(self.db_path) as db:
            cursor = await db.execute(
                """
                UPDATE user_stats SET
                    total_xp = ?, level = ?, current_streak = ?, longest_streak = ?,
                    last_workout_date = ?, workouts_this_week = ?,
                    version = version + 1
                WHERE user_id = ? AND version = ?
                """,
                (
                    stats.total_xp,
                    stats.level,
                    stats.current_streak,
                    stats.longest_streak,
                    stats.last_workout_date.isoformat() if stats.last_workout_date else None,
                    stats.workouts_this_week,
                    stats.user_id,
                    expected_version,
                ),
            )
            if cursor.rowcount == 0:
                raise ConflictError(f"Stats for user {stats.user_id} changed concurrently")

            for user_reward in unlocked:
                cursor = await db.execute(
                    """
                    INSERT OR IGNORE INTO user_rewards (user_id, reward_id, equipped, unlocked_at)
                    VALUES (?, ?, 0, ?)
                    """,
                    (user_reward.user_id, user_reward.reward_id, unlocked_at.isoformat()),
                )
                if cursor.rowcount == 1:
                    user_reward.id = cursor.lastrowid
                    user_reward.unlocked_at = unlocked_at
                    inserted.append(user_reward)

        return stats.evolve(version=expected_version + 1), inserted

    def _row_to_stats(self, row: aiosqlite.Row) -> UserStats:
        return UserStats(
            user_id=row["user_id"],
            total_xp=row["total_xp"],
            level=row["level"],
            current_streak=row["current_streak"],
            longest_streak=row["longest_streak"],
            last_workout_date=_parse_date(row["last_workout_date"]),
            workouts_this_week=row["workouts_this_week"],
            version=row["version"],
        )


class RewardRepository:
    """Repository for the reward catalog and user ownership."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def list_rewards(self) -> list[Reward]:
        """Catalog ordered by required level then required streak."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                """
                SELECT * FROM rewards
                ORDER BY required_level IS NULL, required_level,
                         required_streak IS NULL, required_streak, id
                """
            )
            rows = await cursor.fetchall()
            return [self._row_to_reward(row) for row in rows]

    async def get(self, reward_id: int) -> Reward | None:
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute("SELECT * FROM rewards WHERE id = ?", (reward_id,))
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_reward(row)

    async def create(self, reward: Reward) -> int:
        """Add a reward to the catalog."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                """
                INSERT INTO rewards (name, type, required_level, required_streak)
                VALUES (?, ?, ?, ?)
                """,
                (reward.name, reward.type.value, reward.required_level, reward.required_streak),
            )
            await db.commit()
            return cursor.lastrowid

    async def owned_reward_ids(self, user_id: int) -> set[int]:
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                "SELECT reward_id FROM user_rewards WHERE user_id = ?", (user_id,)
            )
            rows = await cursor.fetchall()
            return {row[0] for row in rows}

    async def list_user_rewards(self, user_id: int) -> list[UserReward]:
        """Rewards owned by a user, with the catalog entry attached."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                """
                SELECT ur.id AS user_reward_id, ur.user_id, ur.equipped, ur.unlocked_at, r.*
                FROM user_rewards ur
                JOIN rewards r ON r.id = ur.reward_id
                WHERE ur.user_id = ?
                ORDER BY ur.id
                """,
                (user_id,),
            )
            rows = await cursor.fetchall()
            return [self._row_to_user_reward(row) for row in rows]

    async def equip(self, user_id: int, reward_id: int) -> UserReward:
        """Equip an owned reward, unequipping other avatars for avatar rewards.

        Raises:
            NotFoundError: If the reward does not exist
            StateError: If the user does not own the reward
        """
        async with transaction(self.db_path) as db:
            cursor = await db.execute("SELECT * FROM rewards WHERE id = ?", (reward_id,))
            reward_row = await cursor.fetchone()
            if reward_row is None:
                raise NotFoundError(f"Reward not found: {reward_id}")
            reward = self._row_to_reward(reward_row)

            cursor = await db.execute(
                "SELECT * FROM user_rewards WHERE user_id = ? AND reward_id = ?",
                (user_id, reward_id),
            )
            owned_row = await cursor.fetchone()
            if owned_row is None:
                raise StateError("Reward not unlocked")

            if reward.type.exclusive_equip:
                await db.execute(
                    """
                    UPDATE user_rewards SET equipped = 0
                    WHERE user_id = ? AND reward_id != ?
                      AND reward_id IN (SELECT id FROM rewards WHERE type = ?)
                    """,
                    (user_id, reward_id, reward.type.value),
                )
            await db.execute(
                "UPDATE user_rewards SET equipped = 1 WHERE id = ?", (owned_row["id"],)
            )

        return UserReward(
            id=owned_row["id"],
            user_id=user_id,
            reward_id=reward_id,
            equipped=True,
            unlocked_at=_parse_datetime(owned_row["unlocked_at"]),
            reward=reward,
        )

    def _row_to_reward(self, row: aiosqlite.Row) -> Reward:
        return Reward(
            id=row["id"],
            name=row["name"],
            type=RewardType(row["type"]),
            required_level=row["required_level"],
            required_streak=row["required_streak"],
        )

    def _row_to_user_reward(self, row: aiosqlite.Row) -> UserReward:
        return UserReward(
            id=row["user_reward_id"],
            user_id=row["user_id"],
            reward_id=row["id"],
            equipped=bool(row["equipped"]),
            unlocked_at=_parse_datetime(row["unlocked_at"]),
            reward=self._row_to_reward(row),
        )
