"""Request bodies for the JSON API."""

from pydantic import BaseModel, Field

from ..generators.plan_generator import RoutineSelection
from ..models.plan import WorkoutDay, WorkoutDayExercise
from ..models.progress import CompletionEvent, ExerciseLog, ExercisePlanOverride
from ..models.routines import RoutineType
from ..models.user_profile import ExperienceLevel, FitnessGoal, Sex, UserProfile


class ProfileIn(BaseModel):
    age: int = Field(..., gt=0)
    height_cm: float = Field(..., gt=0)
    weight_kg: float = Field(..., gt=0)
    sex: Sex
    experience_level: ExperienceLevel
    goal: FitnessGoal
    days_per_week: int = Field(..., ge=1, le=7)
    equipment: list[str] = Field(..., min_length=1)

    def to_profile(self, user_id: int) -> UserProfile:
        return UserProfile(
            user_id=user_id,
            age=self.age,
            height_cm=self.height_cm,
            weight_kg=self.weight_kg,
            sex=self.sex,
            experience_level=self.experience_level,
            goal=self.goal,
            days_per_week=self.days_per_week,
            equipment=list(self.equipment),
        )


class CustomExerciseIn(BaseModel):
    exercise_id: int
    order: int
    sets: int = 0
    reps: str = ""
    rest_seconds: int | None = None


class CustomDayIn(BaseModel):
    day_index: int
    title: str = ""
    exercises: list[CustomExerciseIn] = Field(default_factory=list)


class GeneratePlanIn(BaseModel):
    """Routine choice; ``days`` switches to a custom plan."""

    routine_type: RoutineType | None = None
    days: list[CustomDayIn] | None = None

    def to_selection(self) -> RoutineSelection:
        custom_days = None
        if self.days is not None:
            custom_days = [
                WorkoutDay(
                    day_index=day.day_index,
                    title=day.title or f"Day {day.day_index + 1}",
                    exercises=[WorkoutDayExercise(**ex.model_dump()) for ex in day.exercises],
                )
                for day in self.days
            ]
        return RoutineSelection(routine=self.routine_type, custom_days=custom_days)


class ExerciseLogIn(BaseModel):
    exercise_id: int
    set_number: int = Field(..., ge=1)
    weight: float | None = None
    reps: int = Field(..., ge=0)


class PlanOverrideIn(BaseModel):
    sets: int = Field(..., ge=0)
    reps: str
    rest_seconds: int | None = None


class CompleteWorkoutIn(BaseModel):
    exercise_logs: list[ExerciseLogIn] = Field(default_factory=list)
    exercise_plans: dict[int, PlanOverrideIn] = Field(default_factory=dict)

    def to_event(self, day_id: int) -> CompletionEvent:
        return CompletionEvent(
            workout_day_id=day_id,
            exercise_logs=[ExerciseLog(**log.model_dump()) for log in self.exercise_logs],
            plan_overrides={
                exercise_id: ExercisePlanOverride(**override.model_dump())
                for exercise_id, override in self.exercise_plans.items()
            },
        )
