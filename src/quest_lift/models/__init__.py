"""Data models for quest-lift."""

from .exercises import EquipmentPackage, EquipmentType, Exercise, MuscleGroup
from .plan import WorkoutDay, WorkoutDayExercise, WorkoutPlan
from .progress import (
    CompletionEvent,
    ExerciseLog,
    ExercisePlanOverride,
    UserStats,
    WorkoutLog,
)
from .rewards import Reward, RewardType, UserReward
from .routines import RoutineDefinition, RoutineType
from .user_profile import ExperienceLevel, FitnessGoal, Sex, UserProfile

__all__ = [
    "CompletionEvent",
    "EquipmentPackage",
    "EquipmentType",
    "Exercise",
    "ExerciseLog",
    "ExercisePlanOverride",
    "ExperienceLevel",
    "FitnessGoal",
    "MuscleGroup",
    "Reward",
    "RewardType",
    "RoutineDefinition",
    "RoutineType",
    "Sex",
    "UserProfile",
    "UserReward",
    "UserStats",
    "WorkoutDay",
    "WorkoutDayExercise",
    "WorkoutLog",
    "WorkoutPlan",
]
