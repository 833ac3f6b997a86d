"""Database layer for quest-lift."""

from .engine import get_db_path, init_db, seed_exercises, seed_rewards, transaction
from .repositories import (
    ExerciseRepository,
    PlanRepository,
    RewardRepository,
    UserProfileRepository,
    UserStatsRepository,
    WorkoutLogRepository,
)

__all__ = [
    "ExerciseRepository",
    "get_db_path",
    "init_db",
    "PlanRepository",
    "RewardRepository",
    "seed_exercises",
    "seed_rewards",
    "transaction",
    "UserProfileRepository",
    "UserStatsRepository",
    "WorkoutLogRepository",
]
