"""Static progression tables and runtime settings."""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models.user_profile import FitnessGoal

# XP awarded per completion event
XP_WORKOUT_COMPLETED = 50
XP_WORKOUT_WITH_SETS = 20
XP_STREAK_BONUS = 150

STREAK_BONUS_LENGTH = 7

# Minimum total XP for each level, level 1 first
LEVEL_THRESHOLDS: tuple[int, ...] = (
    0,
    500,
    1200,
    2400,
    4000,
    6000,
    8500,
    11500,
    15000,
    20000,
)

MAX_PLANS_PER_USER = 4


@dataclass(frozen=True)
class Prescription:
    """Sets and rep range assigned to a slot."""

    sets: int
    reps: str


GOAL_PRESCRIPTIONS = MappingProxyType(
    {
        FitnessGoal.STRENGTH: Prescription(sets=4, reps="4-6"),
        FitnessGoal.ENDURANCE: Prescription(sets=3, reps="15-20"),
        FitnessGoal.BUILD_MUSCLE: Prescription(sets=3, reps="8-12"),
        FitnessGoal.LOSE_WEIGHT: Prescription(sets=3, reps="10-15"),
        FitnessGoal.GENERAL_FITNESS: Prescription(sets=3, reps="10-15"),
    }
)
DEFAULT_PRESCRIPTION = Prescription(sets=3, reps="8-12")
CORE_PRESCRIPTION = Prescription(sets=3, reps="10-15")

MAIN_REST_SECONDS = 90
ACCESSORY_REST_SECONDS = 60
CORE_REST_SECONDS = 45


def prescription_for_goal(goal: FitnessGoal | None) -> Prescription:
    """Look up the working-set prescription for a goal."""
    if goal is None:
        return DEFAULT_PRESCRIPTION
    return GOAL_PRESCRIPTIONS.get(goal, DEFAULT_PRESCRIPTION)


# Default data directory
DATA_DIR = Path(__file__).parent.parent.parent / "data"


class Settings(BaseSettings):
    """Runtime settings read from ``QUEST_LIFT_*`` environment variables."""

    data_dir: Path = DATA_DIR
    db_filename: str = "quest_lift.db"
    log_level: str = "INFO"
    progress_retries: int = Field(default=3, ge=1)

    model_config = SettingsConfigDict(env_prefix="QUEST_LIFT_")

    @field_validator("log_level")
    @classmethod
    def upper_log_level(cls, value: str) -> str:
        return value.upper()

    @property
    def db_path(self) -> Path:
        return self.data_dir / self.db_filename


@lru_cache()
def get_settings() -> Settings:
    """Build settings once per process."""
    return Settings()
