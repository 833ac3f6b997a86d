"""Workout completion logging."""

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from pathlib import Path

from ..config import get_settings
from ..db.repositories import (
    PlanRepository,
    RewardRepository,
    UserStatsRepository,
    WorkoutLogRepository,
)
from ..errors import ConflictError, NotFoundError
from ..models.plan import WorkoutDay
from ..models.progress import CompletionEvent, WorkoutLog
from .progression import ProgressionEngine, ProgressionResult

logger = logging.getLogger(__name__)


def week_start(today: date) -> date:
    """The Sunday on or before ``today``."""
    return today - timedelta(days=(today.weekday() + 1) % 7)


@dataclass
class CompletionResult:
    """A stored workout log and the progression it produced."""

    workout_log: WorkoutLog
    progression: ProgressionResult

    def to_dict(self) -> dict:
        return {
            "workout_log": self.workout_log.to_dict(),
            "stats": self.progression.stats.to_dict(),
            "xp_awarded": self.progression.xp_awarded,
            "streak_bonus": self.progression.streak_bonus,
            "unlocked_rewards": [ur.to_dict() for ur in self.progression.unlocked],
        }


class WorkoutService:
    """Logs completed workouts and drives progression."""

    def __init__(
        self,
        db_path: Path | None = None,
        engine: ProgressionEngine | None = None,
        retries: int | None = None,
    ):
        self.plan_repo = PlanRepository(db_path)
        self.log_repo = WorkoutLogRepository(db_path)
        self.engine = engine or ProgressionEngine(
            UserStatsRepository(db_path), RewardRepository(db_path)
        )
        self.retries = retries if retries is not None else get_settings().progress_retries

    async def get_day(self, user_id: int, day_id: int) -> WorkoutDay:
        """Get one of the user's workout days.

        Raises:
            NotFoundError: Missing day or owned by another user
        """
        found = await self.plan_repo.get_day(day_id)
        if found is None or found[1] != user_id:
            raise NotFoundError(f"Workout day not found: {day_id}")
        return found[0]

    async def complete_workout(
        self, user_id: int, event: CompletionEvent, today: date
    ) -> CompletionResult:
        """Log a completed workout day and award progression.

        If progression cannot be recorded the log is removed and any
        overwritten prescriptions are restored, so the whole event can be
        retried.

        Raises:
            NotFoundError: Unknown day or another user's day
            ConflictError: Day already completed today, or stats writes kept
                colliding after all retries
            ValidationError: Overrides or logs name unknown exercises
        """
        await self.get_day(user_id, event.workout_day_id)

        workout_log = await self.log_repo.record_completion(
            user_id,
            event.workout_day_id,
            today,
            event.exercise_logs,
            event.plan_overrides,
        )

        try:
            workouts_this_week = await self.log_repo.count_completed_since(
                user_id, week_start(today)
            )
            progression = await self._record_with_retry(
                user_id, event.had_logged_sets, workouts_this_week, today
            )
        except Exception:
            await self.log_repo.revert_completion(workout_log)
            raise

        return CompletionResult(workout_log=workout_log, progression=progression)

    async def _record_with_retry(
        self,
        user_id: int,
        had_logged_sets: bool,
        workouts_this_week: int,
        today: date,
    ) -> ProgressionResult:
        attempts = max(1, self.retries)
        for attempt in range(1, attempts + 1):
            try:
                return await self.engine.record_completion(
                    user_id, had_logged_sets, workouts_this_week, today
                )
            except ConflictError:
                if attempt == attempts:
                    logger.error(
                        "Stats write for user %d still conflicting after %d attempts",
                        user_id,
                        attempts,
                    )
                    raise
                logger.warning(
                    "Stats write conflict for user %d, retrying (%d/%d)",
                    user_id,
                    attempt,
                    attempts,
                )
