"""Workout plan routes."""

from fastapi import APIRouter, Depends

from ...services import PlanService
from ..deps import get_plan_service, get_user_id
from ..schemas import GeneratePlanIn

router = APIRouter(prefix="/plans", tags=["plans"])


@router.get("")
async def list_plans(
    user_id: int = Depends(get_user_id),
    service: PlanService = Depends(get_plan_service),
):
    """List the caller's plans."""
    plans = await service.list_plans(user_id)
    return {"plans": [plan.to_dict() for plan in plans]}


@router.post("/generate")
async def generate_plan(
    body: GeneratePlanIn | None = None,
    user_id: int = Depends(get_user_id),
    service: PlanService = Depends(get_plan_service),
):
    """Generate a plan from the caller's profile and store it inactive."""
    selection = body.to_selection() if body else None
    plan = await service.generate_and_save(user_id, selection)
    return {"plan": plan.to_dict()}


@router.get("/active")
async def get_active_plan(
    user_id: int = Depends(get_user_id),
    service: PlanService = Depends(get_plan_service),
):
    """The caller's active plan, or null."""
    plan = await service.get_active_plan(user_id)
    return {"plan": plan.to_dict() if plan else None}


@router.get("/{plan_id}")
async def get_plan(
    plan_id: int,
    user_id: int = Depends(get_user_id),
    service: PlanService = Depends(get_plan_service),
):
    plan = await service.get_plan(user_id, plan_id)
    return {"plan": plan.to_dict()}


@router.post("/{plan_id}/activate")
async def activate_plan(
    plan_id: int,
    user_id: int = Depends(get_user_id),
    service: PlanService = Depends(get_plan_service),
):
    """Make a plan the caller's only active plan."""
    plan = await service.activate_plan(user_id, plan_id)
    return {"plan": plan.to_dict()}


@router.delete("/{plan_id}")
async def delete_plan(
    plan_id: int,
    user_id: int = Depends(get_user_id),
    service: PlanService = Depends(get_plan_service),
):
    """Delete a plan."""
    await service.delete_plan(user_id, plan_id)
    return {"status": "deleted"}
