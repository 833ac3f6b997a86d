"""Workout plan data models."""

from dataclasses import dataclass, field
from datetime import datetime

from .exercises import Exercise


@dataclass
class WorkoutDayExercise:
    """An exercise slot within a workout day.

    ``sets == 0`` and ``reps == ""`` mean "not set yet"; the user fills them
    in the first time they perform the day.
    """

    exercise_id: int
    order: int
    sets: int = 0
    reps: str = ""
    rest_seconds: int | None = None
    exercise: Exercise | None = None  # populated on reads for display
    id: int | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        data = {
            "exercise_id": self.exercise_id,
            "order": self.order,
            "sets": self.sets,
            "reps": self.reps,
            "rest_seconds": self.rest_seconds,
        }
        if self.id is not None:
            data["id"] = self.id
        if self.exercise is not None:
            data["exercise"] = self.exercise.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "WorkoutDayExercise":
        """Create from dictionary."""
        return cls(
            id=data.get("id"),
            exercise_id=data["exercise_id"],
            order=data["order"],
            sets=data.get("sets") or 0,
            reps=data.get("reps") or "",
            rest_seconds=data.get("rest_seconds"),
        )


@dataclass
class WorkoutDay:
    """A single training day of a plan."""

    day_index: int
    title: str
    exercises: list[WorkoutDayExercise] = field(default_factory=list)
    id: int | None = None
    plan_id: int | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        data = {
            "day_index": self.day_index,
            "title": self.title,
            "exercises": [ex.to_dict() for ex in self.exercises],
        }
        if self.id is not None:
            data["id"] = self.id
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "WorkoutDay":
        """Create from dictionary."""
        return cls(
            id=data.get("id"),
            day_index=data["day_index"],
            title=data.get("title", ""),
            exercises=[WorkoutDayExercise.from_dict(ex) for ex in data.get("exercises", [])],
        )


@dataclass
class WorkoutPlan:
    """A multi-day workout plan.

    A freshly generated plan has no ``id`` or ``user_id``; ``to_dict`` then
    carries only the name, goal and days.
    """

    name: str
    goal: str
    days: list[WorkoutDay]
    active: bool = False
    id: int | None = None
    user_id: int | None = None
    created_at: datetime | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        data = {
            "name": self.name,
            "goal": self.goal,
            "days": [day.to_dict() for day in self.days],
        }
        if self.id is not None:
            data["id"] = self.id
            data["user_id"] = self.user_id
            data["active"] = self.active
            data["created_at"] = self.created_at.isoformat() if self.created_at else None
        return data

    @classmethod
    def from_dict(
        cls,
        data: dict,
        id: int | None = None,
        user_id: int | None = None,
        created_at: datetime | None = None,
    ) -> "WorkoutPlan":
        """Create from dictionary."""
        return cls(
            id=id,
            user_id=user_id,
            name=data["name"],
            goal=data["goal"],
            days=[WorkoutDay.from_dict(day) for day in data["days"]],
            active=data.get("active", False),
            created_at=created_at,
        )

    @property
    def day_count(self) -> int:
        return len(self.days)

    @property
    def exercise_ids(self) -> set[int]:
        return {ex.exercise_id for day in self.days for ex in day.exercises}

    def get_day(self, day_id: int) -> WorkoutDay | None:
        for day in self.days:
            if day.id == day_id:
                return day
        return None

    def get_summary(self) -> str:
        """Generate a summary of the plan."""
        summary = f"Plan: {self.name}\n"
        summary += f"Goal: {self.goal}\n"
        summary += f"Days: {self.day_count}"
        if self.id is not None:
            summary += " (active)" if self.active else " (inactive)"
        summary += "\n\n"

        for day in self.days:
            label = f"Day {day.day_index + 1}: {day.title}"
            if day.id is not None:
                label += f" [id {day.id}]"
            summary += f"{label}\n"
            for ex in day.exercises:
                name = ex.exercise.name if ex.exercise else f"Exercise #{ex.exercise_id}"
                summary += f"  {ex.order}. {name}: {self._format_prescription(ex)}\n"
            summary += "\n"

        return summary

    def _format_prescription(self, ex: WorkoutDayExercise) -> str:
        """Format sets/reps/rest for display."""
        if not ex.sets and not ex.reps:
            return "not set"
        text = f"{ex.sets or '?'}x{ex.reps or '?'}"
        if ex.rest_seconds:
            text += f", rest {ex.rest_seconds}s"
        return text
