"""Reward listing and equipping."""

import logging
from pathlib import Path

from ..db.repositories import RewardRepository

logger = logging.getLogger(__name__)


class RewardService:
    """Reward catalog as seen by one user."""

    def __init__(self, db_path: Path | None = None):
        self.reward_repo = RewardRepository(db_path)

    async def list_with_status(self, user_id: int) -> list[dict]:
        """Catalog ordered by required level then streak, with ownership flags."""
        rewards = await self.reward_repo.list_rewards()
        owned = {ur.reward_id: ur for ur in await self.reward_repo.list_user_rewards(user_id)}

        listing = []
        for reward in rewards:
            user_reward = owned.get(reward.id)
            data = reward.to_dict()
            data["unlocked"] = user_reward is not None
            data["equipped"] = bool(user_reward and user_reward.equipped)
            data["unlocked_at"] = (
                user_reward.unlocked_at.isoformat()
                if user_reward and user_reward.unlocked_at
                else None
            )
            listing.append(data)
        return listing

    async def equip(self, user_id: int, reward_id: int):
        """Equip an owned reward.

        Equipping an avatar unequips the user's other avatars in the same
        transaction.

        Raises:
            NotFoundError: Unknown reward
            StateError: Reward not owned by the user
        """
        user_reward = await self.reward_repo.equip(user_id, reward_id)
        logger.info("User %d equipped reward %d", user_id, reward_id)
        return user_reward
