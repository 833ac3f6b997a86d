"""Application services for quest-lift."""

from .plans import PlanService, TodaysWorkout
from .profile import ProfileService
from .progression import (
    ProgressionEngine,
    ProgressionResult,
    RewardUnlockResolver,
    apply_completion,
    calculate_level,
    progress,
    update_streak,
    xp_for_next_level,
)
from .rewards import RewardService
from .workouts import CompletionResult, WorkoutService

__all__ = [
    "CompletionResult",
    "PlanService",
    "ProfileService",
    "ProgressionEngine",
    "ProgressionResult",
    "RewardService",
    "RewardUnlockResolver",
    "TodaysWorkout",
    "WorkoutService",
    "apply_completion",
    "calculate_level",
    "progress",
    "update_streak",
    "xp_for_next_level",
]
