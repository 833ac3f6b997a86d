"""Workout commands: today's session and completion logging."""

from datetime import date, datetime

import click

from ..errors import ValidationError
from ..models.progress import CompletionEvent, ExerciseLog
from ..services import PlanService, WorkoutService
from .base import async_command, echo_info, echo_success, ensure_initialized, user_option


def parse_set(value: str) -> tuple[int, int, float | None]:
    """Parse ``EXERCISE_ID:REPS[:WEIGHT]``."""
    parts = value.split(":")
    if len(parts) not in (2, 3):
        raise ValidationError(f"Invalid set '{value}', expected EXERCISE_ID:REPS[:WEIGHT]")
    try:
        exercise_id = int(parts[0])
        reps = int(parts[1])
        weight = float(parts[2]) if len(parts) == 3 and parts[2] else None
    except ValueError:
        raise ValidationError(f"Invalid set '{value}', expected numbers") from None
    return exercise_id, reps, weight


def build_exercise_logs(sets: tuple[str, ...]) -> list[ExerciseLog]:
    """Turn ``--set`` values into logs, numbering sets per exercise."""
    logs: list[ExerciseLog] = []
    counts: dict[int, int] = {}
    for value in sets:
        exercise_id, reps, weight = parse_set(value)
        counts[exercise_id] = counts.get(exercise_id, 0) + 1
        logs.append(
            ExerciseLog(
                exercise_id=exercise_id,
                set_number=counts[exercise_id],
                reps=reps,
                weight=weight,
            )
        )
    return logs


@click.group()
@click.pass_context
def workout(ctx):
    """See today's workout and log completed sessions."""
    ensure_initialized(ctx)


@workout.command()
@user_option
@async_command
async def today(user_id: int):
    """Show today's workout from your active plan."""
    todays = await PlanService().todays_workout(user_id, date.today())
    if todays is None:
        echo_info("No active plan. Activate one with 'quest-lift plans activate <id>'")
        return

    day = todays.day
    status = click.style(" (done)", fg="green") if todays.completed else ""
    click.echo()
    click.echo(f"{todays.plan.name} - {day.title} [day id {day.id}]{status}")
    click.echo("-" * 40)
    for ex in day.exercises:
        name = ex.exercise.name if ex.exercise else f"Exercise #{ex.exercise_id}"
        click.echo(f"  {ex.order}. {name} (id {ex.exercise_id}): {ex.sets}x{ex.reps or '?'}")
    click.echo()
    if not todays.completed:
        echo_info(f"Log it with 'quest-lift workout log {day.id} --set <exercise_id>:<reps>'")


@workout.command()
@click.argument("day_id", type=int)
@user_option
@click.option(
    "--set", "-s", "sets", multiple=True,
    help="Logged set as EXERCISE_ID:REPS[:WEIGHT]; repeatable",
)
@click.option(
    "--date", "log_date", type=click.DateTime(formats=["%Y-%m-%d"]),
    help="Workout date (default: today)",
)
@async_command
async def log(day_id: int, user_id: int, sets: tuple[str, ...], log_date: datetime | None):
    """Complete a workout day and earn XP."""
    event = CompletionEvent(workout_day_id=day_id, exercise_logs=build_exercise_logs(sets))
    day = log_date.date() if log_date else date.today()

    result = await WorkoutService().complete_workout(user_id, event, day)
    progression = result.progression

    echo_success(f"Workout logged: +{progression.xp_awarded} XP")
    if progression.streak_bonus:
        echo_success("7-day streak bonus!")
    stats = progression.stats
    click.echo(
        f"Level {stats.level} | {stats.total_xp} XP | "
        f"streak {stats.current_streak} (best {stats.longest_streak}) | "
        f"{stats.workouts_this_week} this week"
    )
    for user_reward in progression.unlocked:
        name = user_reward.reward.name if user_reward.reward else f"#{user_reward.reward_id}"
        echo_success(f"Unlocked reward: {name}")
