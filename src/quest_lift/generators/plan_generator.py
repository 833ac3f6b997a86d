"""Rule-based workout plan generator.

Plans are built from a user's profile and the exercise catalog without any
randomness: the same profile, catalog (in the same order) and routine
selection always produce the same plan.

Generation steps:
- Normalize the profile's equipment (package tokens are dropped)
- Filter the catalog to exercises the user can perform
- Resolve the routine (explicit choice or derived from days per week)
- Allocate exercises to each day's slot groups in catalog order
- Attach sets, reps and rest from the goal table
- Replicate the day cycle for 5 and 6 day routines
"""

import copy
import hashlib
import json
import logging
from collections import OrderedDict
from dataclasses import dataclass

from ..config import (
    ACCESSORY_REST_SECONDS,
    CORE_PRESCRIPTION,
    CORE_REST_SECONDS,
    MAIN_REST_SECONDS,
    prescription_for_goal,
)
from ..errors import NotFoundError, ValidationError
from ..models.exercises import EquipmentPackage, EquipmentType, Exercise
from ..models.plan import WorkoutDay, WorkoutDayExercise, WorkoutPlan
from ..models.routines import (
    BUCKET_MUSCLES,
    FULL_BODY,
    ROUTINES,
    Bucket,
    DayTemplate,
    RoutineType,
    SlotGroup,
    SlotRole,
    resolve_routine,
)
from ..models.user_profile import FitnessGoal, UserProfile

logger = logging.getLogger(__name__)

PACKAGE_TOKENS = frozenset(p.value for p in EquipmentPackage)


@dataclass
class RoutineSelection:
    """Caller's routine choice.

    ``routine=None`` lets the generator pick from days per week. When
    ``custom_days`` is given the days are used verbatim.
    """

    routine: RoutineType | None = None
    custom_days: list[WorkoutDay] | None = None


@dataclass
class GeneratorConfig:
    """Configuration for plan generation."""

    cache_size: int = 128  # 0 disables the plan cache


def normalize_equipment(tags: list[str]) -> set[EquipmentType]:
    """Strip package tokens and convert the remaining tags.

    Raises:
        ValidationError: If no equipment was given or a tag is unknown
    """
    if not tags:
        raise ValidationError("Profile has no equipment selected")

    normalized: set[EquipmentType] = set()
    for tag in tags:
        if tag in PACKAGE_TOKENS:
            continue
        try:
            normalized.add(EquipmentType(tag))
        except ValueError:
            raise ValidationError(f"Unknown equipment: {tag}") from None
    return normalized


def plan_fingerprint(
    profile: UserProfile,
    catalog: list[Exercise],
    selection: RoutineSelection | None = None,
) -> str:
    """Hash of every input that affects generation."""
    selection = selection or RoutineSelection()
    payload = {
        "goal": profile.goal.value if profile.goal else None,
        "days_per_week": profile.days_per_week,
        "equipment": sorted(profile.equipment),
        "catalog": [ex.to_dict() for ex in catalog],
        "routine": selection.routine.value if selection.routine else None,
        "custom_days": (
            [day.to_dict() for day in selection.custom_days]
            if selection.custom_days is not None
            else None
        ),
    }
    encoded = json.dumps(payload, sort_keys=True).encode()
    return hashlib.sha256(encoded).hexdigest()


class PlanGenerator:
    """Generates workout plans from a profile and an ordered catalog."""

    def __init__(self, config: GeneratorConfig | None = None):
        self.config = config or GeneratorConfig()
        self._cache: OrderedDict[str, WorkoutPlan] = OrderedDict()

    def generate(
        self,
        profile: UserProfile,
        catalog: list[Exercise],
        selection: RoutineSelection | None = None,
    ) -> WorkoutPlan:
        """Generate an unsaved plan.

        Args:
            profile: The user's onboarding profile
            catalog: Exercises in stable creation order
            selection: Optional routine choice or custom days

        Returns:
            A plan with ``id=None``

        Raises:
            ValidationError: Invalid profile, unusable equipment or malformed
                custom days
            NotFoundError: A custom day references an unknown exercise
        """
        selection = selection or RoutineSelection()
        # Validated on every call, cache hits included
        profile.validate()
        normalize_equipment(profile.equipment)

        if self.config.cache_size <= 0:
            return self._build(profile, catalog, selection)

        key = plan_fingerprint(profile, catalog, selection)
        cached = self._cache.get(key)
        if cached is not None:
            self._cache.move_to_end(key)
            return copy.deepcopy(cached)

        plan = self._build(profile, catalog, selection)
        self._cache[key] = plan
        while len(self._cache) > self.config.cache_size:
            self._cache.popitem(last=False)
        return copy.deepcopy(plan)

    def clear_cache(self) -> None:
        self._cache.clear()

    def _build(
        self,
        profile: UserProfile,
        catalog: list[Exercise],
        selection: RoutineSelection,
    ) -> WorkoutPlan:
        equipment = normalize_equipment(profile.equipment)

        if selection.custom_days is not None:
            return self._custom_plan(profile, catalog, selection)

        available = [ex for ex in catalog if ex.equipment in equipment]
        if not available:
            raise ValidationError("no exercises available")

        routine, day_count = resolve_routine(selection.routine, profile.days_per_week)
        name = routine.name if day_count == routine.day_count else routine.label

        # One allocation per cycle day; repeats are deep copies.
        cycle_days: dict[int, WorkoutDay] = {}
        days: list[WorkoutDay] = []
        for day_index in range(day_count):
            cycle_index = routine.day_sequence[day_index]
            if cycle_index not in cycle_days:
                cycle_days[cycle_index] = self._build_day(
                    routine.cycle[cycle_index], available, profile.goal
                )
            day = copy.deepcopy(cycle_days[cycle_index])
            day.day_index = day_index
            days.append(day)

        plan = WorkoutPlan(name=name, goal=profile.goal.value, days=days)
        logger.info(
            "Generated %s plan: %d days, %d exercises",
            routine.routine_type.value,
            plan.day_count,
            sum(len(day.exercises) for day in days),
        )
        return plan

    def _build_day(
        self, template: DayTemplate, available: list[Exercise], goal: FitnessGoal | None
    ) -> WorkoutDay:
        """Fill one day template from the filtered catalog."""
        buckets = _partition(available)
        used: set[int] = set()
        exercises: list[WorkoutDayExercise] = []

        for group in template.groups:
            for exercise in _allocate_group(group, buckets[group.bucket], available, used):
                used.add(exercise.id)
                sets, reps, rest = _prescribe(group.role, goal)
                exercises.append(
                    WorkoutDayExercise(
                        exercise_id=exercise.id,
                        order=len(exercises) + 1,
                        sets=sets,
                        reps=reps,
                        rest_seconds=rest,
                    )
                )

        return WorkoutDay(day_index=0, title=template.title, exercises=exercises)

    def _custom_plan(
        self,
        profile: UserProfile,
        catalog: list[Exercise],
        selection: RoutineSelection,
    ) -> WorkoutPlan:
        """Validate caller-supplied days and wrap them in a plan."""
        days = selection.custom_days
        _validate_custom_days(days, {ex.id for ex in catalog})

        routine = ROUTINES[selection.routine] if selection.routine else FULL_BODY
        plan = WorkoutPlan(
            name=f"{routine.label} (Custom)",
            goal=profile.goal.value,
            days=copy.deepcopy(days),
        )
        logger.info("Accepted custom plan: %d days", plan.day_count)
        return plan


def generate_plan(
    profile: UserProfile,
    catalog: list[Exercise],
    selection: RoutineSelection | None = None,
) -> WorkoutPlan:
    """Convenience function to generate a plan without caching."""
    generator = PlanGenerator(GeneratorConfig(cache_size=0))
    return generator.generate(profile, catalog, selection)


def _partition(available: list[Exercise]) -> dict[Bucket, list[Exercise]]:
    """Split the catalog into buckets, preserving catalog order."""
    return {
        bucket: [ex for ex in available if ex.muscle_group in muscles]
        for bucket, muscles in BUCKET_MUSCLES.items()
    }


def _allocate_group(
    group: SlotGroup,
    bucket: list[Exercise],
    available: list[Exercise],
    used: set[int],
) -> list[Exercise]:
    """Pick exercises for one slot group.

    Takes ``bucket[start:start + count]``, wrapping to the front of the
    bucket when the window is empty. A required group with an empty bucket
    takes the next unused exercise from the whole filtered catalog.
    """
    window = bucket[group.start : group.start + group.count]
    picked = [ex for ex in window if ex.id not in used]

    if not picked and group.start > 0:
        picked = [ex for ex in bucket[: group.count] if ex.id not in used]

    if not picked and not group.optional:
        fallback = next((ex for ex in available if ex.id not in used), None)
        if fallback is not None:
            picked = [fallback]

    return picked


def _prescribe(role: SlotRole, goal: FitnessGoal | None) -> tuple[int, str, int]:
    if role is SlotRole.CORE:
        return CORE_PRESCRIPTION.sets, CORE_PRESCRIPTION.reps, CORE_REST_SECONDS

    prescription = prescription_for_goal(goal)
    rest = ACCESSORY_REST_SECONDS if role is SlotRole.ACCESSORY else MAIN_REST_SECONDS
    return prescription.sets, prescription.reps, rest


def _validate_custom_days(days: list[WorkoutDay], catalog_ids: set[int]) -> None:
    """Structural checks for caller-supplied days.

    Raises:
        ValidationError: Malformed day list
        NotFoundError: Unknown exercise id
    """
    if not days:
        raise ValidationError("Custom plan must contain at least one day")

    previous_index = -1
    for day in days:
        if day.day_index <= previous_index:
            raise ValidationError(
                f"day_index must be non-negative and ascending: {day.day_index}"
            )
        previous_index = day.day_index

        if not day.exercises:
            raise ValidationError(f"Day {day.day_index} has no exercises")

        orders = [ex.order for ex in day.exercises]
        if orders != list(range(1, len(orders) + 1)):
            raise ValidationError(
                f"Day {day.day_index}: order must ascend from 1 without gaps, got {orders}"
            )

        for ex in day.exercises:
            if ex.sets < 0:
                raise ValidationError(f"Day {day.day_index}: sets must not be negative")
            if ex.exercise_id not in catalog_ids:
                raise NotFoundError(f"Exercise not found: {ex.exercise_id}")
