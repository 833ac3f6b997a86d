"""Exercise definitions and the seed catalog."""

from dataclasses import dataclass
from enum import Enum


class MuscleGroup(str, Enum):
    """Muscle-group tag carried by every catalog exercise."""

    CHEST = "chest"
    BACK = "back"
    SHOULDERS = "shoulders"
    BICEPS = "biceps"
    TRICEPS = "triceps"
    QUADRICEPS = "quadriceps"
    HAMSTRINGS = "hamstrings"
    GLUTES = "glutes"
    CALVES = "calves"
    LEGS = "legs"
    CORE = "core"
    ABS = "abs"


class EquipmentType(str, Enum):
    """Concrete equipment an exercise requires."""

    BARBELL = "barbell"
    DUMBBELLS = "dumbbells"
    BENCH = "bench"
    SQUAT_RACK = "squat_rack"
    CABLE_MACHINE = "cable_machine"
    PULL_UP_BAR = "pull_up_bar"
    MACHINES = "machines"
    KETTLEBELLS = "kettlebells"
    BODYWEIGHT = "bodyweight"


class EquipmentPackage(str, Enum):
    """Meta selections offered during onboarding.

    These are stored alongside the equipment they expand to and are stripped
    before the catalog is filtered.
    """

    PUBLIC_GYM = "public_gym"
    HOME_GYM_LIMITED = "home_gym_limited"

    @property
    def equipment(self) -> list[EquipmentType]:
        return list(PACKAGE_EQUIPMENT[self])


PACKAGE_EQUIPMENT: dict[EquipmentPackage, tuple[EquipmentType, ...]] = {
    EquipmentPackage.PUBLIC_GYM: (
        EquipmentType.DUMBBELLS,
        EquipmentType.BARBELL,
        EquipmentType.SQUAT_RACK,
        EquipmentType.BENCH,
        EquipmentType.CABLE_MACHINE,
        EquipmentType.PULL_UP_BAR,
        EquipmentType.MACHINES,
        EquipmentType.KETTLEBELLS,
    ),
    EquipmentPackage.HOME_GYM_LIMITED: (
        EquipmentType.DUMBBELLS,
        EquipmentType.BARBELL,
        EquipmentType.BENCH,
    ),
}


@dataclass
class Exercise:
    """A catalog exercise. Immutable reference data once stored."""

    name: str
    muscle_group: MuscleGroup
    equipment: EquipmentType
    id: int | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "id": self.id,
            "name": self.name,
            "muscle_group": self.muscle_group.value,
            "equipment": self.equipment.value,
        }

    @classmethod
    def from_dict(cls, data: dict, id: int | None = None) -> "Exercise":
        """Create from dictionary."""
        return cls(
            id=id if id is not None else data.get("id"),
            name=data["name"],
            muscle_group=MuscleGroup(data["muscle_group"]),
            equipment=EquipmentType(data["equipment"]),
        )


def _ex(name: str, muscle_group: MuscleGroup, equipment: EquipmentType) -> Exercise:
    return Exercise(name=name, muscle_group=muscle_group, equipment=equipment)


# Seed catalog. Insertion order becomes the catalog order the plan generator
# depends on, so new entries go at the end of their section only when a
# fresh database is seeded.
COMMON_EXERCISES: list[Exercise] = [
    # Chest
    _ex("Bench Press", MuscleGroup.CHEST, EquipmentType.BARBELL),
    _ex("Dumbbell Bench Press", MuscleGroup.CHEST, EquipmentType.DUMBBELLS),
    _ex("Dumbbell Flyes", MuscleGroup.CHEST, EquipmentType.DUMBBELLS),
    _ex("Cable Crossover", MuscleGroup.CHEST, EquipmentType.CABLE_MACHINE),
    _ex("Push-Ups", MuscleGroup.CHEST, EquipmentType.BODYWEIGHT),
    _ex("Chest Dips", MuscleGroup.CHEST, EquipmentType.BODYWEIGHT),
    _ex("Pec Deck", MuscleGroup.CHEST, EquipmentType.MACHINES),
    _ex("Incline Bench Press", MuscleGroup.CHEST, EquipmentType.BARBELL),
    _ex("Incline Dumbbell Press", MuscleGroup.CHEST, EquipmentType.DUMBBELLS),
    _ex("Incline Cable Flyes", MuscleGroup.CHEST, EquipmentType.CABLE_MACHINE),
    _ex("Decline Bench Press", MuscleGroup.CHEST, EquipmentType.BARBELL),
    _ex("Decline Push-Ups", MuscleGroup.CHEST, EquipmentType.BODYWEIGHT),
    # Back
    _ex("Pull-Up", MuscleGroup.BACK, EquipmentType.PULL_UP_BAR),
    _ex("Chin-Up", MuscleGroup.BACK, EquipmentType.PULL_UP_BAR),
    _ex("Bent-Over Row", MuscleGroup.BACK, EquipmentType.BARBELL),
    _ex("Dumbbell Row", MuscleGroup.BACK, EquipmentType.DUMBBELLS),
    _ex("T-Bar Row", MuscleGroup.BACK, EquipmentType.BARBELL),
    _ex("Seated Cable Row", MuscleGroup.BACK, EquipmentType.CABLE_MACHINE),
    _ex("Chest-Supported Row", MuscleGroup.BACK, EquipmentType.DUMBBELLS),
    _ex("Lat Pulldown", MuscleGroup.BACK, EquipmentType.CABLE_MACHINE),
    _ex("Close-Grip Lat Pulldown", MuscleGroup.BACK, EquipmentType.CABLE_MACHINE),
    _ex("Dumbbell Pullover", MuscleGroup.BACK, EquipmentType.DUMBBELLS),
    _ex("Deadlift", MuscleGroup.BACK, EquipmentType.BARBELL),
    _ex("Barbell Shrugs", MuscleGroup.BACK, EquipmentType.BARBELL),
    _ex("Dumbbell Shrugs", MuscleGroup.BACK, EquipmentType.DUMBBELLS),
    _ex("Kettlebell Swing", MuscleGroup.BACK, EquipmentType.KETTLEBELLS),
    # Shoulders
    _ex("Overhead Press", MuscleGroup.SHOULDERS, EquipmentType.BARBELL),
    _ex("Dumbbell Shoulder Press", MuscleGroup.SHOULDERS, EquipmentType.DUMBBELLS),
    _ex("Arnold Press", MuscleGroup.SHOULDERS, EquipmentType.DUMBBELLS),
    _ex("Cable Shoulder Press", MuscleGroup.SHOULDERS, EquipmentType.CABLE_MACHINE),
    _ex("Push Press", MuscleGroup.SHOULDERS, EquipmentType.BARBELL),
    _ex("Lateral Raises", MuscleGroup.SHOULDERS, EquipmentType.DUMBBELLS),
    _ex("Cable Lateral Raises", MuscleGroup.SHOULDERS, EquipmentType.CABLE_MACHINE),
    _ex("Front Raises", MuscleGroup.SHOULDERS, EquipmentType.DUMBBELLS),
    _ex("Rear Delt Flyes", MuscleGroup.SHOULDERS, EquipmentType.DUMBBELLS),
    _ex("Upright Row", MuscleGroup.SHOULDERS, EquipmentType.BARBELL),
    _ex("Face Pulls", MuscleGroup.SHOULDERS, EquipmentType.CABLE_MACHINE),
    _ex("Pike Push-Ups", MuscleGroup.SHOULDERS, EquipmentType.BODYWEIGHT),
    # Biceps
    _ex("Dumbbell Bicep Curls", MuscleGroup.BICEPS, EquipmentType.DUMBBELLS),
    _ex("Barbell Curls", MuscleGroup.BICEPS, EquipmentType.BARBELL),
    _ex("Hammer Curls", MuscleGroup.BICEPS, EquipmentType.DUMBBELLS),
    _ex("Cable Curls", MuscleGroup.BICEPS, EquipmentType.CABLE_MACHINE),
    _ex("Preacher Curls", MuscleGroup.BICEPS, EquipmentType.BARBELL),
    _ex("Concentration Curls", MuscleGroup.BICEPS, EquipmentType.DUMBBELLS),
    _ex("Incline Dumbbell Curls", MuscleGroup.BICEPS, EquipmentType.DUMBBELLS),
    # Triceps
    _ex("Tricep Dips", MuscleGroup.TRICEPS, EquipmentType.BODYWEIGHT),
    _ex("Bench Dips", MuscleGroup.TRICEPS, EquipmentType.BODYWEIGHT),
    _ex("Close-Grip Bench Press", MuscleGroup.TRICEPS, EquipmentType.BARBELL),
    _ex("Overhead Tricep Extension", MuscleGroup.TRICEPS, EquipmentType.DUMBBELLS),
    _ex("Tricep Pushdown", MuscleGroup.TRICEPS, EquipmentType.CABLE_MACHINE),
    _ex("Rope Pushdown", MuscleGroup.TRICEPS, EquipmentType.CABLE_MACHINE),
    _ex("Skull Crushers", MuscleGroup.TRICEPS, EquipmentType.BARBELL),
    _ex("Diamond Push-Ups", MuscleGroup.TRICEPS, EquipmentType.BODYWEIGHT),
    _ex("Tricep Kickbacks", MuscleGroup.TRICEPS, EquipmentType.DUMBBELLS),
    # Quadriceps
    _ex("Squat", MuscleGroup.QUADRICEPS, EquipmentType.BARBELL),
    _ex("Front Squat", MuscleGroup.QUADRICEPS, EquipmentType.BARBELL),
    _ex("Goblet Squat", MuscleGroup.QUADRICEPS, EquipmentType.DUMBBELLS),
    _ex("Leg Press", MuscleGroup.QUADRICEPS, EquipmentType.MACHINES),
    _ex("Leg Extension", MuscleGroup.QUADRICEPS, EquipmentType.MACHINES),
    _ex("Bulgarian Split Squat", MuscleGroup.QUADRICEPS, EquipmentType.DUMBBELLS),
    _ex("Walking Lunges", MuscleGroup.QUADRICEPS, EquipmentType.DUMBBELLS),
    _ex("Step-Ups", MuscleGroup.QUADRICEPS, EquipmentType.DUMBBELLS),
    _ex("Hack Squat", MuscleGroup.QUADRICEPS, EquipmentType.MACHINES),
    _ex("Sissy Squat", MuscleGroup.QUADRICEPS, EquipmentType.BODYWEIGHT),
    _ex("Bodyweight Squat", MuscleGroup.QUADRICEPS, EquipmentType.BODYWEIGHT),
    # Hamstrings
    _ex("Romanian Deadlift", MuscleGroup.HAMSTRINGS, EquipmentType.BARBELL),
    _ex("Leg Curl", MuscleGroup.HAMSTRINGS, EquipmentType.MACHINES),
    _ex("Stiff-Leg Deadlift", MuscleGroup.HAMSTRINGS, EquipmentType.BARBELL),
    _ex("Good Mornings", MuscleGroup.HAMSTRINGS, EquipmentType.BARBELL),
    _ex("Nordic Curls", MuscleGroup.HAMSTRINGS, EquipmentType.BODYWEIGHT),
    # Calves
    _ex("Calf Raises", MuscleGroup.CALVES, EquipmentType.DUMBBELLS),
    _ex("Standing Calf Raises", MuscleGroup.CALVES, EquipmentType.BARBELL),
    _ex("Seated Calf Raises", MuscleGroup.CALVES, EquipmentType.MACHINES),
    _ex("Donkey Calf Raises", MuscleGroup.CALVES, EquipmentType.BODYWEIGHT),
    # Glutes
    _ex("Hip Thrust", MuscleGroup.GLUTES, EquipmentType.BARBELL),
    _ex("Glute Bridge", MuscleGroup.GLUTES, EquipmentType.BODYWEIGHT),
    _ex("Reverse Lunges", MuscleGroup.GLUTES, EquipmentType.DUMBBELLS),
    # Core
    _ex("Plank", MuscleGroup.CORE, EquipmentType.BODYWEIGHT),
    _ex("Crunches", MuscleGroup.CORE, EquipmentType.BODYWEIGHT),
    _ex("Russian Twists", MuscleGroup.CORE, EquipmentType.BODYWEIGHT),
    _ex("Leg Raises", MuscleGroup.CORE, EquipmentType.BODYWEIGHT),
    _ex("Cable Crunch", MuscleGroup.ABS, EquipmentType.CABLE_MACHINE),
]
