"""Exercise catalog routes."""

from fastapi import APIRouter, Depends, Query

from ...db.repositories import ExerciseRepository
from ...models.exercises import EquipmentType, MuscleGroup
from ..deps import get_exercise_repo

router = APIRouter(prefix="/exercises", tags=["exercises"])


@router.get("")
async def list_exercises(
    equipment: list[EquipmentType] | None = Query(None),
    muscle_group: MuscleGroup | None = None,
    search: str | None = None,
    repo: ExerciseRepository = Depends(get_exercise_repo),
):
    """List catalog exercises in catalog order."""
    exercises = await repo.list_exercises(
        equipment_in=equipment, muscle_group=muscle_group, search=search
    )
    return {"exercises": [ex.to_dict() for ex in exercises]}
