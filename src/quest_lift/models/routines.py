"""Fixed routine patterns used by the plan generator.

Each routine is a cycle of day templates. A day template lists slot groups,
and each slot group names a muscle-group bucket, a window into that bucket
and the prescription role of what it draws.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from .exercises import MuscleGroup


class RoutineType(str, Enum):
    """The four supported split patterns."""

    FULL_BODY = "fullbody"
    UPPER_LOWER = "upperlower"
    PPL = "ppl"
    ARNOLD = "arnold"


class SlotRole(str, Enum):
    """How a slot is prescribed."""

    MAIN = "main"
    ACCESSORY = "accessory"
    CORE = "core"


class Bucket(str, Enum):
    """Named groups of muscle groups."""

    PUSH = "push"
    PULL = "pull"
    LEGS = "legs"
    CORE = "core"
    UPPER = "upper"
    CHEST = "chest"
    BACK = "back"
    SHOULDERS = "shoulders"
    ARMS = "arms"


_PUSH = (MuscleGroup.CHEST, MuscleGroup.SHOULDERS, MuscleGroup.TRICEPS)
_PULL = (MuscleGroup.BACK, MuscleGroup.BICEPS)

BUCKET_MUSCLES = MappingProxyType(
    {
        Bucket.PUSH: frozenset(_PUSH),
        Bucket.PULL: frozenset(_PULL),
        Bucket.LEGS: frozenset(
            {
                MuscleGroup.LEGS,
                MuscleGroup.QUADRICEPS,
                MuscleGroup.HAMSTRINGS,
                MuscleGroup.GLUTES,
                MuscleGroup.CALVES,
            }
        ),
        Bucket.CORE: frozenset({MuscleGroup.CORE, MuscleGroup.ABS}),
        Bucket.UPPER: frozenset(_PUSH + _PULL),
        Bucket.CHEST: frozenset({MuscleGroup.CHEST}),
        Bucket.BACK: frozenset({MuscleGroup.BACK}),
        Bucket.SHOULDERS: frozenset({MuscleGroup.SHOULDERS}),
        Bucket.ARMS: frozenset({MuscleGroup.BICEPS, MuscleGroup.TRICEPS}),
    }
)


@dataclass(frozen=True)
class SlotGroup:
    """A window ``bucket[start:start + count]`` within one day."""

    bucket: Bucket
    start: int = 0
    count: int = 1
    role: SlotRole = SlotRole.MAIN
    optional: bool = False  # omit instead of falling back when the bucket is empty


@dataclass(frozen=True)
class DayTemplate:
    title: str
    groups: tuple[SlotGroup, ...]

    @property
    def muscle_groups(self) -> list[MuscleGroup]:
        """Muscle groups this day trains, in slot order."""
        seen: list[MuscleGroup] = []
        for group in self.groups:
            for muscle in sorted(BUCKET_MUSCLES[group.bucket], key=lambda m: m.value):
                if muscle not in seen:
                    seen.append(muscle)
        return seen


@dataclass(frozen=True)
class RoutineDefinition:
    """A routine: a day cycle and the day sequence built from it."""

    routine_type: RoutineType
    name: str
    label: str
    cycle: tuple[DayTemplate, ...]
    day_sequence: tuple[int, ...]  # indices into ``cycle``

    @property
    def day_count(self) -> int:
        return len(self.day_sequence)

    def day(self, day_index: int) -> DayTemplate:
        """Template for a day index of the full week."""
        return self.cycle[self.day_sequence[day_index]]


def _main(bucket: Bucket, start: int = 0, count: int = 1) -> SlotGroup:
    return SlotGroup(bucket=bucket, start=start, count=count)


def _accessory(bucket: Bucket, start: int) -> SlotGroup:
    return SlotGroup(bucket=bucket, start=start, role=SlotRole.ACCESSORY)


_CORE_SLOT = SlotGroup(bucket=Bucket.CORE, role=SlotRole.CORE)
_OPTIONAL_CORE = SlotGroup(bucket=Bucket.CORE, role=SlotRole.CORE, optional=True)

_FULL_BODY_CYCLE = (
    DayTemplate(
        "Full Body A",
        (
            _main(Bucket.LEGS, 0),
            _main(Bucket.PUSH, 0),
            _main(Bucket.PULL, 0),
            _accessory(Bucket.LEGS, 1),
            _CORE_SLOT,
        ),
    ),
    DayTemplate(
        "Full Body B",
        (
            _main(Bucket.PULL, 0),
            _main(Bucket.PUSH, 1),
            _main(Bucket.LEGS, 0),
            _accessory(Bucket.PULL, 1),
            _CORE_SLOT,
        ),
    ),
    DayTemplate(
        "Full Body C",
        (
            _main(Bucket.PUSH, 0),
            _main(Bucket.LEGS, 1),
            _main(Bucket.PULL, 1),
            _accessory(Bucket.PUSH, 1),
            _CORE_SLOT,
        ),
    ),
)

_UPPER_LOWER_CYCLE = (
    DayTemplate("Upper Body A", (_main(Bucket.UPPER, 0, 4), _OPTIONAL_CORE)),
    DayTemplate("Lower Body A", (_main(Bucket.LEGS, 0, 4),)),
    DayTemplate("Upper Body B", (_main(Bucket.UPPER, 4, 4), _OPTIONAL_CORE)),
    DayTemplate("Lower Body B", (_main(Bucket.LEGS, 4, 4),)),
)

_PPL_CYCLE = (
    DayTemplate("Push", (_main(Bucket.PUSH, 0, 5),)),
    DayTemplate("Pull", (_main(Bucket.PULL, 0, 5),)),
    DayTemplate("Legs", (_main(Bucket.LEGS, 0, 5),)),
)

_ARNOLD_CYCLE = (
    DayTemplate("Chest & Back", (_main(Bucket.CHEST, 0, 3), _main(Bucket.BACK, 0, 3))),
    DayTemplate(
        "Shoulders & Arms", (_main(Bucket.SHOULDERS, 0, 3), _main(Bucket.ARMS, 0, 3))
    ),
    DayTemplate("Legs", (_main(Bucket.LEGS, 0, 5),)),
)

FULL_BODY = RoutineDefinition(
    RoutineType.FULL_BODY, "Full Body (3-Day)", "Full Body", _FULL_BODY_CYCLE, (0, 1, 2)
)
UPPER_LOWER = RoutineDefinition(
    RoutineType.UPPER_LOWER,
    "Upper/Lower Split (4-Day)",
    "Upper/Lower Split",
    _UPPER_LOWER_CYCLE,
    (0, 1, 2, 3),
)
PPL_6 = RoutineDefinition(
    RoutineType.PPL, "Push/Pull/Legs (6-Day)", "Push/Pull/Legs", _PPL_CYCLE,
    (0, 1, 2, 0, 1, 2),
)
PPL_5 = RoutineDefinition(
    RoutineType.PPL, "Push/Pull/Legs (5-Day)", "Push/Pull/Legs", _PPL_CYCLE,
    (0, 1, 2, 0, 1),
)
ARNOLD = RoutineDefinition(
    RoutineType.ARNOLD, "Arnold Split (6-Day)", "Arnold Split", _ARNOLD_CYCLE,
    (0, 1, 2, 0, 1, 2),
)

ROUTINES = MappingProxyType(
    {
        RoutineType.FULL_BODY: FULL_BODY,
        RoutineType.UPPER_LOWER: UPPER_LOWER,
        RoutineType.PPL: PPL_6,
        RoutineType.ARNOLD: ARNOLD,
    }
)


def resolve_routine(
    routine_type: RoutineType | None, days_per_week: int
) -> tuple[RoutineDefinition, int]:
    """Pick the routine and the number of days to emit.

    An explicit routine always uses its full day count. Otherwise the routine
    follows from ``days_per_week``: 3 is full body, 4 is upper/lower, 5 or
    more is push/pull/legs and anything else is full body cut down to the
    requested days.
    """
    if routine_type is not None:
        routine = ROUTINES[routine_type]
        return routine, routine.day_count

    if days_per_week == 3:
        return FULL_BODY, FULL_BODY.day_count
    if days_per_week == 4:
        return UPPER_LOWER, UPPER_LOWER.day_count
    if days_per_week == 5:
        return PPL_5, PPL_5.day_count
    if days_per_week >= 6:
        return PPL_6, PPL_6.day_count
    return FULL_BODY, max(1, min(days_per_week, FULL_BODY.day_count))
