"""Database engine setup and initialization."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

import aiosqlite

from ..config import get_settings
from ..errors import PersistenceError

logger = logging.getLogger(__name__)


def get_db_path(data_dir: Path | None = None) -> Path:
    """Get the database file path."""
    settings = get_settings()
    if data_dir is None:
        data_dir = settings.data_dir
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir / settings.db_filename


@asynccontextmanager
async def transaction(db_path: Path) -> AsyncIterator[aiosqlite.Connection]:
    """Open a connection holding a write lock for the whole block.

    Commits when the block exits normally and rolls back otherwise. SQLite
    operational failures (locked database, disk errors) are re-raised as
    ``PersistenceError`` after the rollback.
    """
    async with aiosqlite.connect(db_path, isolation_level=None) as db:
        db.row_factory = aiosqlite.Row
        await db.execute("PRAGMA foreign_keys = ON")
        try:
            await db.execute("BEGIN IMMEDIATE")
        except aiosqlite.OperationalError as e:
            logger.error("Could not start transaction on %s: %s", db_path, e)
            raise PersistenceError(f"Database unavailable: {e}") from e

        try:
            yield db
            await db.execute("COMMIT")
        except aiosqlite.OperationalError as e:
            await _rollback(db)
            logger.error("Transaction rolled back: %s", e)
            raise PersistenceError(f"Database error: {e}") from e
        except BaseException:
            await _rollback(db)
            raise


async def _rollback(db: aiosqlite.Connection) -> None:
    if db.in_transaction:
        await db.execute("ROLLBACK")


async def init_db(db_path: Path | None = None) -> None:
    """Initialize the database schema."""
    if db_path is None:
        db_path = get_db_path()

    async with aiosqlite.connect(db_path) as db:
        # One onboarding profile per user
        await db.execute("""
            CREATE TABLE IF NOT EXISTS user_profiles (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                user_id INTEGER NOT NULL UNIQUE,
                age INTEGER NOT NULL,
                height_cm REAL NOT NULL,
                weight_kg REAL NOT NULL,
                sex TEXT NOT NULL,
                experience_level TEXT NOT NULL,
                goal TEXT NOT NULL,
                days_per_week INTEGER NOT NULL,
                equipment TEXT NOT NULL,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)

        # Exercise catalog; id order is the catalog order
        await db.execute("""
            CREATE TABLE IF NOT EXISTS exercises (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT UNIQUE NOT NULL,
                muscle_group TEXT NOT NULL,
                equipment TEXT NOT NULL
            )
        """)

        await db.execute("""
            CREATE TABLE IF NOT EXISTS workout_plans (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                user_id INTEGER NOT NULL,
                name TEXT NOT NULL,
                goal TEXT NOT NULL,
                active INTEGER NOT NULL DEFAULT 0,
                created_at TIMESTAMP NOT NULL
            )
        """)

        await db.execute("""
            CREATE TABLE IF NOT EXISTS workout_days (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                plan_id INTEGER NOT NULL,
                day_index INTEGER NOT NULL,
                title TEXT NOT NULL,
                UNIQUE (plan_id, day_index),
                FOREIGN KEY (plan_id) REFERENCES workout_plans(id) ON DELETE CASCADE
            )
        """)

        await db.execute("""
            CREATE TABLE IF NOT EXISTS workout_day_exercises (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                workout_day_id INTEGER NOT NULL,
                exercise_id INTEGER NOT NULL,
                position INTEGER NOT NULL,
                sets INTEGER NOT NULL DEFAULT 0,
                reps TEXT NOT NULL DEFAULT '',
                rest_seconds INTEGER,
                FOREIGN KEY (workout_day_id) REFERENCES workout_days(id) ON DELETE CASCADE,
                FOREIGN KEY (exercise_id) REFERENCES exercises(id)
            )
        """)

        await db.execute("""
            CREATE TABLE IF NOT EXISTS workout_logs (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                user_id INTEGER NOT NULL,
                workout_day_id INTEGER NOT NULL,
                log_date DATE NOT NULL,
                completed INTEGER NOT NULL DEFAULT 0,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                FOREIGN KEY (workout_day_id) REFERENCES workout_days(id) ON DELETE CASCADE
            )
        """)

        await db.execute("""
            CREATE TABLE IF NOT EXISTS exercise_logs (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                workout_log_id INTEGER NOT NULL,
                exercise_id INTEGER NOT NULL,
                set_number INTEGER NOT NULL,
                weight REAL,
                reps INTEGER NOT NULL,
                FOREIGN KEY (workout_log_id) REFERENCES workout_logs(id) ON DELETE CASCADE,
                FOREIGN KEY (exercise_id) REFERENCES exercises(id)
            )
        """)

        # Gamification state; version guards concurrent writes
        await db.execute("""
            CREATE TABLE IF NOT EXISTS user_stats (
                user_id INTEGER PRIMARY KEY,
                total_xp INTEGER NOT NULL DEFAULT 0,
                level INTEGER NOT NULL DEFAULT 1,
                current_streak INTEGER NOT NULL DEFAULT 0,
                longest_streak INTEGER NOT NULL DEFAULT 0,
                last_workout_date DATE,
                workouts_this_week INTEGER NOT NULL DEFAULT 0,
                version INTEGER NOT NULL DEFAULT 0
            )
        """)

        await db.execute("""
            CREATE TABLE IF NOT EXISTS rewards (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT UNIQUE NOT NULL,
                type TEXT NOT NULL,
                required_level INTEGER,
                required_streak INTEGER
            )
        """)

        await db.execute("""
            CREATE TABLE IF NOT EXISTS user_rewards (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                user_id INTEGER NOT NULL,
                reward_id INTEGER NOT NULL,
                equipped INTEGER NOT NULL DEFAULT 0,
                unlocked_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                UNIQUE (user_id, reward_id),
                FOREIGN KEY (reward_id) REFERENCES rewards(id)
            )
        """)

        # Create indexes for common queries
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_workout_plans_user
            ON workout_plans(user_id)
        """)
        await db.execute("""
            CREATE UNIQUE INDEX IF NOT EXISTS idx_workout_plans_one_active
            ON workout_plans(user_id) WHERE active = 1
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_workout_days_plan
            ON workout_days(plan_id)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_workout_day_exercises_day
            ON workout_day_exercises(workout_day_id)
        """)
        await db.execute("""
            CREATE UNIQUE INDEX IF NOT EXISTS idx_workout_logs_once_per_day
            ON workout_logs(user_id, workout_day_id, log_date)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_workout_logs_user_date
            ON workout_logs(user_id, log_date)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_exercises_name
            ON exercises(name)
        """)

        await db.commit()

    logger.info("Database initialized at %s", db_path)


async def seed_exercises(db_path: Path | None = None) -> int:
    """Seed the database with the common exercise catalog.

    Returns:
        Number of exercises inserted
    """
    from ..models.exercises import COMMON_EXERCISES

    if db_path is None:
        db_path = get_db_path()

    inserted = 0
    async with aiosqlite.connect(db_path) as db:
        for exercise in COMMON_EXERCISES:
            cursor = await db.execute(
                """
                INSERT OR IGNORE INTO exercises (name, muscle_group, equipment)
                VALUES (?, ?, ?)
                """,
                (exercise.name, exercise.muscle_group.value, exercise.equipment.value),
            )
            inserted += cursor.rowcount
        await db.commit()

    logger.info("Seeded %d exercises", inserted)
    return inserted


async def seed_rewards(db_path: Path | None = None) -> int:
    """Seed the reward catalog.

    Returns:
        Number of rewards inserted
    """
    from ..models.rewards import DEFAULT_REWARDS

    if db_path is None:
        db_path = get_db_path()

    inserted = 0
    async with aiosqlite.connect(db_path) as db:
        for reward in DEFAULT_REWARDS:
            cursor = await db.execute(
                """
                INSERT OR IGNORE INTO rewards (name, type, required_level, required_streak)
                VALUES (?, ?, ?, ?)
                """,
                (reward.name, reward.type.value, reward.required_level, reward.required_streak),
            )
            inserted += cursor.rowcount
        await db.commit()

    logger.info("Seeded %d rewards", inserted)
    return inserted
