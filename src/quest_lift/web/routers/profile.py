"""User profile and stats routes."""

from fastapi import APIRouter, Depends

from ...db.repositories import UserStatsRepository
from ...services import ProfileService, xp_for_next_level
from ..deps import get_profile_service, get_stats_repo, get_user_id
from ..schemas import ProfileIn

router = APIRouter(prefix="/me", tags=["profile"])


@router.get("/profile")
async def get_profile(
    user_id: int = Depends(get_user_id),
    service: ProfileService = Depends(get_profile_service),
):
    """Get the caller's onboarding profile."""
    profile = await service.get(user_id)
    return {"profile": profile.to_dict() if profile else None}


@router.put("/profile")
async def save_profile(
    body: ProfileIn,
    user_id: int = Depends(get_user_id),
    service: ProfileService = Depends(get_profile_service),
):
    """Create or update the caller's profile."""
    profile = await service.save(body.to_profile(user_id))
    return {"profile": profile.to_dict()}


@router.get("/stats")
async def get_stats(
    user_id: int = Depends(get_user_id),
    stats_repo: UserStatsRepository = Depends(get_stats_repo),
):
    """XP, level and streak state."""
    stats = await stats_repo.get_or_create(user_id)
    data = stats.to_dict()
    data["xp_to_next_level"] = xp_for_next_level(stats.total_xp)
    return {"stats": data}
