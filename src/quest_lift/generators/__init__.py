"""Workout plan generation."""

from .plan_generator import (
    GeneratorConfig,
    PlanGenerator,
    RoutineSelection,
    generate_plan,
    normalize_equipment,
    plan_fingerprint,
)

__all__ = [
    "GeneratorConfig",
    "PlanGenerator",
    "RoutineSelection",
    "generate_plan",
    "normalize_equipment",
    "plan_fingerprint",
]
