"""Reward catalog and ownership models."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class RewardType(str, Enum):
    """Closed set of reward kinds."""

    AVATAR = "avatar"
    BADGE = "badge"
    MEDAL = "medal"

    @property
    def exclusive_equip(self) -> bool:
        """Whether equipping one reward of this type unequips the others."""
        return self is RewardType.AVATAR


@dataclass(frozen=True)
class Reward:
    """Catalog entry. At least one requirement is needed to ever unlock it."""

    name: str
    type: RewardType
    required_level: int | None = None
    required_streak: int | None = None
    id: int | None = None

    @property
    def has_requirements(self) -> bool:
        return self.required_level is not None or self.required_streak is not None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type.value,
            "required_level": self.required_level,
            "required_streak": self.required_streak,
        }

    @classmethod
    def from_dict(cls, data: dict, id: int | None = None) -> "Reward":
        """Create from dictionary."""
        return cls(
            id=id if id is not None else data.get("id"),
            name=data["name"],
            type=RewardType(data["type"]),
            required_level=data.get("required_level"),
            required_streak=data.get("required_streak"),
        )


@dataclass
class UserReward:
    """Ownership of a reward by a user."""

    user_id: int
    reward_id: int
    equipped: bool = False
    unlocked_at: datetime | None = None
    reward: Reward | None = None
    id: int | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        data = {
            "user_id": self.user_id,
            "reward_id": self.reward_id,
            "equipped": self.equipped,
            "unlocked_at": self.unlocked_at.isoformat() if self.unlocked_at else None,
        }
        if self.reward is not None:
            data["reward"] = self.reward.to_dict()
        return data


# Seed reward catalog
DEFAULT_REWARDS: list[Reward] = [
    Reward(name="Starter Avatar", type=RewardType.AVATAR, required_level=1),
    Reward(name="Bronze Badge", type=RewardType.BADGE, required_level=2),
    Reward(name="Silver Badge", type=RewardType.BADGE, required_level=3),
    Reward(name="7-Day Streak Medal", type=RewardType.MEDAL, required_streak=7),
    Reward(name="Gold Badge", type=RewardType.BADGE, required_level=5),
    Reward(name="Platinum Avatar", type=RewardType.AVATAR, required_level=7),
]
