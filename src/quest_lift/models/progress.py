"""Workout logging and progression state models."""

from dataclasses import dataclass, field, replace
from datetime import date, datetime


@dataclass
class ExerciseLog:
    """One logged set."""

    exercise_id: int
    set_number: int
    reps: int
    weight: float | None = None
    id: int | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "exercise_id": self.exercise_id,
            "set_number": self.set_number,
            "weight": self.weight,
            "reps": self.reps,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ExerciseLog":
        """Create from dictionary."""
        return cls(
            id=data.get("id"),
            exercise_id=data["exercise_id"],
            set_number=data["set_number"],
            reps=data["reps"],
            weight=data.get("weight") or None,
        )


@dataclass
class WorkoutLog:
    """A user's log of one workout day on one calendar date."""

    user_id: int
    workout_day_id: int
    log_date: date
    completed: bool = False
    exercise_logs: list[ExerciseLog] = field(default_factory=list)
    id: int | None = None
    created_at: datetime | None = None
    # Prescriptions the completion overwrote, keyed by exercise id
    previous_prescriptions: dict[int, "ExercisePlanOverride"] = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "user_id": self.user_id,
            "workout_day_id": self.workout_day_id,
            "log_date": self.log_date.isoformat(),
            "completed": self.completed,
            "exercise_logs": [log.to_dict() for log in self.exercise_logs],
        }


@dataclass
class ExercisePlanOverride:
    """Sets/reps/rest chosen by the user when first performing a day."""

    sets: int
    reps: str
    rest_seconds: int | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "ExercisePlanOverride":
        return cls(
            sets=data["sets"],
            reps=data["reps"],
            rest_seconds=data.get("rest_seconds"),
        )


@dataclass
class CompletionEvent:
    """Input for completing a workout day."""

    workout_day_id: int
    exercise_logs: list[ExerciseLog] = field(default_factory=list)
    plan_overrides: dict[int, ExercisePlanOverride] = field(default_factory=dict)

    @property
    def had_logged_sets(self) -> bool:
        return len(self.exercise_logs) > 0

    @classmethod
    def from_dict(cls, data: dict) -> "CompletionEvent":
        """Create from dictionary."""
        return cls(
            workout_day_id=data["workout_day_id"],
            exercise_logs=[ExerciseLog.from_dict(log) for log in data.get("exercise_logs", [])],
            plan_overrides={
                int(exercise_id): ExercisePlanOverride.from_dict(override)
                for exercise_id, override in (data.get("plan_overrides") or {}).items()
            },
        )


@dataclass(frozen=True)
class UserStats:
    """Per-user gamification state.

    Frozen: transitions produce a new value via ``evolve``. ``version`` is
    bumped by the repository on every successful write.
    """

    user_id: int
    total_xp: int = 0
    level: int = 1
    current_streak: int = 0
    longest_streak: int = 0
    last_workout_date: date | None = None
    workouts_this_week: int = 0
    version: int = 0

    def evolve(self, **changes) -> "UserStats":
        return replace(self, **changes)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "user_id": self.user_id,
            "total_xp": self.total_xp,
            "level": self.level,
            "current_streak": self.current_streak,
            "longest_streak": self.longest_streak,
            "last_workout_date": (
                self.last_workout_date.isoformat() if self.last_workout_date else None
            ),
            "workouts_this_week": self.workouts_this_week,
        }

    @classmethod
    def from_dict(cls, data: dict, version: int = 0) -> "UserStats":
        """Create from dictionary."""
        last_workout_date = None
        if data.get("last_workout_date"):
            last_workout_date = date.fromisoformat(data["last_workout_date"])

        return cls(
            user_id=data["user_id"],
            total_xp=data.get("total_xp", 0),
            level=data.get("level", 1),
            current_streak=data.get("current_streak", 0),
            longest_streak=data.get("longest_streak", 0),
            last_workout_date=last_workout_date,
            workouts_this_week=data.get("workouts_this_week", 0),
            version=version,
        )
