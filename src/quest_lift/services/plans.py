"""Plan generation, storage and activation."""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path

from ..config import MAX_PLANS_PER_USER
from ..db.repositories import (
    ExerciseRepository,
    PlanRepository,
    UserProfileRepository,
    WorkoutLogRepository,
)
from ..errors import ConflictError, NotFoundError, ValidationError
from ..generators.plan_generator import PlanGenerator, RoutineSelection
from ..models.plan import WorkoutDay, WorkoutPlan

logger = logging.getLogger(__name__)


@dataclass
class TodaysWorkout:
    """The active plan's day for a date."""

    plan: WorkoutPlan
    day: WorkoutDay
    completed: bool

    def to_dict(self) -> dict:
        data = self.day.to_dict()
        data["plan_id"] = self.plan.id
        data["plan_name"] = self.plan.name
        data["completed"] = self.completed
        return data


class PlanService:
    """Orchestrates the generator and the plan repository for one user."""

    def __init__(
        self,
        db_path: Path | None = None,
        generator: PlanGenerator | None = None,
        max_plans: int = MAX_PLANS_PER_USER,
    ):
        self.generator = generator or PlanGenerator()
        self.max_plans = max_plans
        self.profile_repo = UserProfileRepository(db_path)
        self.exercise_repo = ExerciseRepository(db_path)
        self.plan_repo = PlanRepository(db_path)
        self.log_repo = WorkoutLogRepository(db_path)

    async def generate_and_save(
        self,
        user_id: int,
        selection: RoutineSelection | None = None,
        created_at: datetime | None = None,
    ) -> WorkoutPlan:
        """Generate a plan from the user's profile and store it inactive.

        Raises:
            ValidationError: No profile, or generation prerequisites unmet
            NotFoundError: Custom days reference unknown exercises
            ConflictError: The user already has the maximum number of plans
        """
        profile = await self.profile_repo.get_by_user(user_id)
        if profile is None:
            raise ValidationError("Please complete your profile first")

        # Fail fast; the insert re-checks inside its transaction.
        if await self.plan_repo.count_for_user(user_id) >= self.max_plans:
            raise ConflictError(
                f"You can only have up to {self.max_plans} workout plans. "
                "Please delete one to create a new one."
            )

        catalog = await self.exercise_repo.list_exercises()
        plan = self.generator.generate(profile, catalog, selection)
        return await self.plan_repo.create(
            plan, user_id, max_plans=self.max_plans, created_at=created_at
        )

    async def list_plans(self, user_id: int) -> list[WorkoutPlan]:
        return await self.plan_repo.list_for_user(user_id)

    async def get_plan(self, user_id: int, plan_id: int) -> WorkoutPlan:
        """Get one of the user's plans.

        Raises:
            NotFoundError: Missing plan or owned by another user
        """
        plan = await self.plan_repo.get(plan_id)
        if plan is None or plan.user_id != user_id:
            raise NotFoundError(f"Plan not found: {plan_id}")
        return plan

    async def get_active_plan(self, user_id: int) -> WorkoutPlan | None:
        return await self.plan_repo.get_active(user_id)

    async def activate_plan(self, user_id: int, plan_id: int) -> WorkoutPlan:
        """Make a plan the user's only active plan."""
        await self.plan_repo.activate(user_id, plan_id)
        logger.info("User %d activated plan %d", user_id, plan_id)
        return await self.get_plan(user_id, plan_id)

    async def delete_plan(self, user_id: int, plan_id: int) -> None:
        await self.plan_repo.delete(user_id, plan_id)
        logger.info("User %d deleted plan %d", user_id, plan_id)

    async def todays_workout(self, user_id: int, today: date) -> TodaysWorkout | None:
        """Pick the active plan's day for ``today``.

        Days rotate by the number of days since the plan was created.
        Returns None when there is no active plan.
        """
        plan = await self.plan_repo.get_active(user_id)
        if plan is None or not plan.days:
            return None

        start = plan.created_at.date() if plan.created_at else today
        day = plan.days[(today - start).days % len(plan.days)]
        completed = await self.log_repo.is_completed(user_id, day.id, today)
        return TodaysWorkout(plan=plan, day=day, completed=completed)
