"""Request dependencies for the API routers."""

from datetime import date
from pathlib import Path

from fastapi import Depends, Header, Request

from ..services import PlanService, ProfileService, RewardService, WorkoutService
from ..db.repositories import ExerciseRepository, UserStatsRepository


def get_user_id(x_user_id: int = Header(..., alias="X-User-Id")) -> int:
    """Caller's user id, set by the authenticating proxy."""
    return x_user_id


def get_today() -> date:
    return date.today()


def get_db_path(request: Request) -> Path:
    return request.app.state.db_path


def get_profile_service(db_path: Path = Depends(get_db_path)) -> ProfileService:
    return ProfileService(db_path)


def get_plan_service(request: Request, db_path: Path = Depends(get_db_path)) -> PlanService:
    return PlanService(db_path, generator=request.app.state.generator)


def get_workout_service(request: Request, db_path: Path = Depends(get_db_path)) -> WorkoutService:
    return WorkoutService(db_path, retries=request.app.state.settings.progress_retries)


def get_reward_service(db_path: Path = Depends(get_db_path)) -> RewardService:
    return RewardService(db_path)


def get_exercise_repo(db_path: Path = Depends(get_db_path)) -> ExerciseRepository:
    return ExerciseRepository(db_path)


def get_stats_repo(db_path: Path = Depends(get_db_path)) -> UserStatsRepository:
    return UserStatsRepository(db_path)
