"""Pytest configuration and fixtures."""

import tempfile
from dataclasses import replace
from pathlib import Path

import pytest
import pytest_asyncio

from quest_lift.db.engine import init_db, seed_exercises, seed_rewards
from quest_lift.models.exercises import (
    COMMON_EXERCISES,
    EquipmentType,
    Exercise,
    MuscleGroup,
)
from quest_lift.models.rewards import DEFAULT_REWARDS
from quest_lift.models.user_profile import (
    ExperienceLevel,
    FitnessGoal,
    Sex,
    UserProfile,
)
from quest_lift.services.profile import ProfileService


def make_profile(
    user_id: int = 1,
    equipment: list[str] | None = None,
    goal: FitnessGoal = FitnessGoal.BUILD_MUSCLE,
    days_per_week: int = 3,
) -> UserProfile:
    """Build a valid profile with overridable essentials."""
    return UserProfile(
        user_id=user_id,
        age=30,
        height_cm=180.0,
        weight_kg=80.0,
        sex=Sex.MALE,
        experience_level=ExperienceLevel.INTERMEDIATE,
        goal=goal,
        days_per_week=days_per_week,
        equipment=equipment if equipment is not None else ["barbell", "bodyweight", "pull_up_bar"],
    )


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
def profile_factory():
    return make_profile


@pytest.fixture
def catalog():
    """The seed catalog with the ids the database assigns."""
    return [replace(ex, id=i) for i, ex in enumerate(COMMON_EXERCISES, start=1)]


@pytest.fixture
def small_catalog():
    """A compact catalog whose allocation is easy to follow by hand."""
    return [
        Exercise("Bench Press", MuscleGroup.CHEST, EquipmentType.BARBELL, id=1),
        Exercise("Push-Ups", MuscleGroup.CHEST, EquipmentType.BODYWEIGHT, id=2),
        Exercise("Overhead Press", MuscleGroup.SHOULDERS, EquipmentType.BARBELL, id=3),
        Exercise("Pull-Up", MuscleGroup.BACK, EquipmentType.PULL_UP_BAR, id=4),
        Exercise("Bent-Over Row", MuscleGroup.BACK, EquipmentType.BARBELL, id=5),
        Exercise("Barbell Curls", MuscleGroup.BICEPS, EquipmentType.BARBELL, id=6),
        Exercise("Squat", MuscleGroup.QUADRICEPS, EquipmentType.BARBELL, id=7),
        Exercise("Romanian Deadlift", MuscleGroup.HAMSTRINGS, EquipmentType.BARBELL, id=8),
        Exercise("Plank", MuscleGroup.CORE, EquipmentType.BODYWEIGHT, id=9),
        Exercise("Leg Press", MuscleGroup.QUADRICEPS, EquipmentType.MACHINES, id=10),
    ]


@pytest.fixture
def reward_catalog():
    """The seed rewards with the ids the database assigns."""
    return [replace(reward, id=i) for i, reward in enumerate(DEFAULT_REWARDS, start=1)]


@pytest.fixture
def sample_profile():
    """A gym-goer training three days a week."""
    return make_profile(equipment=["public_gym"] + [
        eq.value for eq in (
            EquipmentType.DUMBBELLS,
            EquipmentType.BARBELL,
            EquipmentType.SQUAT_RACK,
            EquipmentType.BENCH,
            EquipmentType.CABLE_MACHINE,
            EquipmentType.PULL_UP_BAR,
            EquipmentType.MACHINES,
            EquipmentType.KETTLEBELLS,
        )
    ])


@pytest_asyncio.fixture
async def db_path(temp_db_path):
    """An initialized and seeded database."""
    await init_db(temp_db_path)
    await seed_exercises(temp_db_path)
    await seed_rewards(temp_db_path)
    return temp_db_path


@pytest_asyncio.fixture
async def profiled_db(db_path):
    """A seeded database where user 1 has a three-day gym profile."""
    await ProfileService(db_path).save(
        make_profile(equipment=["public_gym", "bodyweight"], days_per_week=3)
    )
    return db_path
