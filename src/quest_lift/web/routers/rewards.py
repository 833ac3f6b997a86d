"""Reward routes."""

from fastapi import APIRouter, Depends

from ...services import RewardService
from ..deps import get_reward_service, get_user_id

router = APIRouter(prefix="/rewards", tags=["rewards"])


@router.get("")
async def list_rewards(
    user_id: int = Depends(get_user_id),
    service: RewardService = Depends(get_reward_service),
):
    """Reward catalog with the caller's unlock and equip state."""
    return {"rewards": await service.list_with_status(user_id)}


@router.post("/{reward_id}/equip")
async def equip_reward(
    reward_id: int,
    user_id: int = Depends(get_user_id),
    service: RewardService = Depends(get_reward_service),
):
    """Equip an owned reward."""
    user_reward = await service.equip(user_id, reward_id)
    return {"user_reward": user_reward.to_dict()}
