"""Onboarding profile management."""

import logging
from pathlib import Path

from ..db.repositories import UserProfileRepository, UserStatsRepository
from ..generators.plan_generator import normalize_equipment
from ..models.exercises import EquipmentPackage
from ..models.user_profile import UserProfile

logger = logging.getLogger(__name__)


def expand_packages(equipment: list[str]) -> list[str]:
    """Add the equipment each package token stands for, keeping the token."""
    expanded = list(equipment)
    for tag in equipment:
        try:
            package = EquipmentPackage(tag)
        except ValueError:
            continue
        for item in package.equipment:
            if item.value not in expanded:
                expanded.append(item.value)
    return expanded


class ProfileService:
    """Saves and loads onboarding profiles."""

    def __init__(self, db_path: Path | None = None):
        self.profile_repo = UserProfileRepository(db_path)
        self.stats_repo = UserStatsRepository(db_path)

    async def save(self, profile: UserProfile) -> UserProfile:
        """Validate and store a profile, creating the user's stats if needed.

        Raises:
            ValidationError: Missing or out-of-range fields, unknown equipment
        """
        profile.equipment = expand_packages(profile.equipment)
        profile.validate()
        normalize_equipment(profile.equipment)

        saved = await self.profile_repo.upsert(profile)
        await self.stats_repo.get_or_create(profile.user_id)
        logger.info("Saved profile for user %d", profile.user_id)
        return saved

    async def get(self, user_id: int) -> UserProfile | None:
        return await self.profile_repo.get_by_user(user_id)
