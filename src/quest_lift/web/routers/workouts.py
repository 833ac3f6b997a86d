"""Workout day and completion routes."""

from datetime import date

from fastapi import APIRouter, Depends

from ...services import PlanService, WorkoutService
from ..deps import get_plan_service, get_today, get_user_id, get_workout_service
from ..schemas import CompleteWorkoutIn

router = APIRouter(prefix="/workouts", tags=["workouts"])


@router.get("/today")
async def todays_workout(
    user_id: int = Depends(get_user_id),
    today: date = Depends(get_today),
    service: PlanService = Depends(get_plan_service),
):
    """The active plan's day for today, or null without an active plan."""
    workout = await service.todays_workout(user_id, today)
    return {"workout_day": workout.to_dict() if workout else None}


@router.get("/day/{day_id}")
async def get_workout_day(
    day_id: int,
    user_id: int = Depends(get_user_id),
    service: WorkoutService = Depends(get_workout_service),
):
    day = await service.get_day(user_id, day_id)
    return {"workout_day": day.to_dict()}


@router.post("/{day_id}/log")
async def log_workout(
    day_id: int,
    body: CompleteWorkoutIn,
    user_id: int = Depends(get_user_id),
    today: date = Depends(get_today),
    service: WorkoutService = Depends(get_workout_service),
):
    """Complete a workout day and award XP."""
    result = await service.complete_workout(user_id, body.to_event(day_id), today)
    return result.to_dict()
