"""XP, level, streak and reward-unlock progression.

The pure functions here compute one state transition per completion event.
``ProgressionEngine`` reads the current state, runs the transition and
persists it with a single conditional write.
"""

import logging
from dataclasses import dataclass, field
from datetime import date

from ..config import (
    LEVEL_THRESHOLDS,
    STREAK_BONUS_LENGTH,
    XP_STREAK_BONUS,
    XP_WORKOUT_COMPLETED,
    XP_WORKOUT_WITH_SETS,
)
from ..errors import ValidationError
from ..models.progress import UserStats
from ..models.rewards import Reward, UserReward

logger = logging.getLogger(__name__)


def calculate_level(total_xp: int) -> int:
    """Highest 1-based level whose threshold ``total_xp`` reaches."""
    for i in range(len(LEVEL_THRESHOLDS) - 1, -1, -1):
        if total_xp >= LEVEL_THRESHOLDS[i]:
            return i + 1
    return 1


def xp_for_next_level(total_xp: int) -> int:
    """XP still needed for the next level, 0 at the max level."""
    level = calculate_level(total_xp)
    if level >= len(LEVEL_THRESHOLDS):
        return 0
    return LEVEL_THRESHOLDS[level] - total_xp


def update_streak(stats: UserStats, today: date) -> tuple[int, int]:
    """Compute ``(current_streak, longest_streak)`` for a workout on ``today``.

    Raises:
        ValidationError: If ``today`` is before the last workout date
    """
    current = stats.current_streak

    if stats.last_workout_date is None:
        current = 1
    else:
        gap = (today - stats.last_workout_date).days
        if gap < 0:
            raise ValidationError(
                f"Workout date {today} is before last workout {stats.last_workout_date}"
            )
        if gap == 1:
            current += 1
        elif gap > 1:
            current = 1
        # gap == 0: another workout day on the same date keeps the streak

    return current, max(stats.longest_streak, current)


def apply_completion(
    stats: UserStats,
    had_logged_sets: bool,
    workouts_this_week: int,
    today: date,
) -> tuple[UserStats, int, bool]:
    """Apply one completion event.

    Returns:
        ``(new_stats, xp_awarded, streak_bonus_awarded)``. The streak bonus is
        part of the same transition; ``new_stats.version`` is unchanged.
    """
    current, longest = update_streak(stats, today)

    xp_awarded = XP_WORKOUT_COMPLETED
    if had_logged_sets:
        xp_awarded += XP_WORKOUT_WITH_SETS

    streak_bonus = current == STREAK_BONUS_LENGTH and stats.current_streak < STREAK_BONUS_LENGTH
    if streak_bonus:
        xp_awarded += XP_STREAK_BONUS

    total_xp = stats.total_xp + xp_awarded
    new_stats = stats.evolve(
        total_xp=total_xp,
        level=calculate_level(total_xp),
        current_streak=current,
        longest_streak=longest,
        last_workout_date=today,
        workouts_this_week=workouts_this_week,
    )
    return new_stats, xp_awarded, streak_bonus


class RewardUnlockResolver:
    """Decides which catalog rewards a user's state unlocks."""

    def is_unlocked(self, reward: Reward, level: int, streak: int) -> bool:
        """Every declared requirement must hold. No requirement, no unlock."""
        if not reward.has_requirements:
            return False
        if reward.required_level is not None and level < reward.required_level:
            return False
        if reward.required_streak is not None and streak < reward.required_streak:
            return False
        return True

    def resolve(
        self,
        catalog: list[Reward],
        owned_ids: set[int],
        level: int,
        streak: int,
        user_id: int,
    ) -> list[UserReward]:
        """New ownership records for rewards unlocked and not yet owned."""
        unlocked: list[UserReward] = []
        seen = set(owned_ids)
        for reward in catalog:
            if reward.id in seen or not self.is_unlocked(reward, level, streak):
                continue
            seen.add(reward.id)
            unlocked.append(
                UserReward(user_id=user_id, reward_id=reward.id, equipped=False, reward=reward)
            )
        return unlocked


@dataclass
class ProgressionResult:
    """Outcome of one completion event."""

    stats: UserStats
    xp_awarded: int
    streak_bonus: bool = False
    unlocked: list[UserReward] = field(default_factory=list)


def progress(
    stats: UserStats,
    had_logged_sets: bool,
    workouts_this_week: int,
    catalog: list[Reward],
    owned_ids: set[int],
    today: date,
    resolver: RewardUnlockResolver | None = None,
) -> ProgressionResult:
    """Stats transition followed by the unlock scan, as one result."""
    resolver = resolver or RewardUnlockResolver()
    new_stats, xp_awarded, streak_bonus = apply_completion(
        stats, had_logged_sets, workouts_this_week, today
    )
    unlocked = resolver.resolve(
        catalog, owned_ids, new_stats.level, new_stats.current_streak, stats.user_id
    )
    return ProgressionResult(
        stats=new_stats,
        xp_awarded=xp_awarded,
        streak_bonus=streak_bonus,
        unlocked=unlocked,
    )


class ProgressionEngine:
    """Records completions against persisted stats.

    A write that loses a race raises ``ConflictError``; callers re-fetch and
    retry.
    """

    def __init__(self, stats_repo, reward_repo, resolver: RewardUnlockResolver | None = None):
        self.stats_repo = stats_repo
        self.reward_repo = reward_repo
        self.resolver = resolver or RewardUnlockResolver()

    async def record_completion(
        self,
        user_id: int,
        had_logged_sets: bool,
        workouts_this_week: int,
        today: date,
    ) -> ProgressionResult:
        """Run one completion event and persist it atomically.

        Raises:
            ConflictError: If the stats changed since they were read
            ValidationError: If ``today`` precedes the last workout
        """
        stats = await self.stats_repo.get_or_create(user_id)
        catalog = await self.reward_repo.list_rewards()
        owned_ids = await self.reward_repo.owned_reward_ids(user_id)

        result = progress(
            stats,
            had_logged_sets,
            workouts_this_week,
            catalog,
            owned_ids,
            today,
            resolver=self.resolver,
        )

        saved, inserted = await self.stats_repo.commit_progression(
            result.stats, expected_version=stats.version, unlocked=result.unlocked
        )
        result.stats = saved
        result.unlocked = inserted

        logger.info(
            "Completion recorded for user %d: +%d xp, level %d, streak %d, unlocked %s",
            user_id,
            result.xp_awarded,
            saved.level,
            saved.current_streak,
            [r.reward_id for r in inserted],
        )
        return result
