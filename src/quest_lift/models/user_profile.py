"""User profile data models."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from ..errors import ValidationError


class ExperienceLevel(str, Enum):
    """Training experience level."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class FitnessGoal(str, Enum):
    """Primary fitness goal chosen during onboarding."""

    BUILD_MUSCLE = "build_muscle"
    LOSE_WEIGHT = "lose_weight"
    STRENGTH = "strength"
    ENDURANCE = "endurance"
    GENERAL_FITNESS = "general_fitness"


class Sex(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


@dataclass
class UserProfile:
    """Onboarding profile. One per user, updated in place."""

    user_id: int
    age: int
    height_cm: float
    weight_kg: float
    sex: Sex
    experience_level: ExperienceLevel
    goal: FitnessGoal
    days_per_week: int
    equipment: list[str] = field(default_factory=list)  # tags and package tokens
    id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def validate(self) -> None:
        """Check required fields and ranges.

        Raises:
            ValidationError: If a field is missing or out of range
        """
        missing = [
            name
            for name in ("age", "height_cm", "weight_kg", "sex",
                         "experience_level", "goal", "days_per_week")
            if not getattr(self, name)
        ]
        if not self.equipment:
            missing.append("equipment")
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")

        if not 1 <= self.days_per_week <= 7:
            raise ValidationError("days_per_week must be between 1 and 7")
        if self.age <= 0 or self.height_cm <= 0 or self.weight_kg <= 0:
            raise ValidationError("age, height_cm and weight_kg must be positive")

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "user_id": self.user_id,
            "age": self.age,
            "height_cm": self.height_cm,
            "weight_kg": self.weight_kg,
            "sex": self.sex.value,
            "experience_level": self.experience_level.value,
            "goal": self.goal.value,
            "days_per_week": self.days_per_week,
            "equipment": list(self.equipment),
        }

    @classmethod
    def from_dict(
        cls,
        data: dict,
        id: int | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ) -> "UserProfile":
        """Create from dictionary.

        Raises:
            ValidationError: If an enum field carries an unknown value
        """
        try:
            return cls(
                id=id,
                user_id=data["user_id"],
                age=data["age"],
                height_cm=data["height_cm"],
                weight_kg=data["weight_kg"],
                sex=Sex(data["sex"]),
                experience_level=ExperienceLevel(data["experience_level"]),
                goal=FitnessGoal(data["goal"]),
                days_per_week=data["days_per_week"],
                equipment=list(data.get("equipment", [])),
                created_at=created_at,
                updated_at=updated_at,
            )
        except KeyError as e:
            raise ValidationError(f"Missing required field: {e.args[0]}") from e
        except ValueError as e:
            raise ValidationError(str(e)) from e

    def get_summary(self) -> str:
        """Generate a one-screen summary for display."""
        summary = f"User: {self.user_id}\n"
        summary += f"Experience: {self.experience_level.value}\n"
        summary += f"Goal: {self.goal.value}\n"
        summary += f"Training days: {self.days_per_week}/week\n"
        summary += f"Equipment: {', '.join(self.equipment)}\n"
        summary += f"Body: {self.age}y, {self.height_cm}cm, {self.weight_kg}kg ({self.sex.value})\n"
        return summary
