"""Onboarding profile commands."""

import click

from ..clients.manual import ManualInputClient
from ..models.user_profile import ExperienceLevel, FitnessGoal, Sex, UserProfile
from ..services import ProfileService
from .base import async_command, echo_info, echo_success, ensure_initialized, user_option


@click.group()
@click.pass_context
def profile(ctx):
    """Set up or view your onboarding profile."""
    ensure_initialized(ctx)


@profile.command()
@user_option
@click.option("--age", type=int, help="Age in years")
@click.option("--height", "height_cm", type=float, help="Height in cm")
@click.option("--weight", "weight_kg", type=float, help="Body weight in kg")
@click.option("--sex", type=click.Choice([s.value for s in Sex]))
@click.option("--experience", type=click.Choice([e.value for e in ExperienceLevel]))
@click.option("--goal", type=click.Choice([g.value for g in FitnessGoal]))
@click.option("--days", "days_per_week", type=click.IntRange(1, 7), help="Training days per week")
@click.option(
    "--equipment", "-e", multiple=True,
    help="Equipment tag or package (public_gym, home_gym_limited); repeatable",
)
@async_command
async def setup(
    user_id: int,
    age: int | None,
    height_cm: float | None,
    weight_kg: float | None,
    sex: str | None,
    experience: str | None,
    goal: str | None,
    days_per_week: int | None,
    equipment: tuple[str, ...],
):
    """Create or update your profile.

    Without options an interactive questionnaire is run. With all options
    the profile is saved directly.

    Example:

        quest-lift profile setup --age 30 --height 180 --weight 80 --sex male \\
            --experience beginner --goal build_muscle --days 3 -e public_gym
    """
    flags = (age, height_cm, weight_kg, sex, experience, goal, days_per_week)
    if all(v is not None for v in flags) and equipment:
        user_profile = UserProfile(
            user_id=user_id,
            age=age,
            height_cm=height_cm,
            weight_kg=weight_kg,
            sex=Sex(sex),
            experience_level=ExperienceLevel(experience),
            goal=FitnessGoal(goal),
            days_per_week=days_per_week,
            equipment=list(equipment),
        )
    else:
        if any(v is not None for v in flags) or equipment:
            echo_info("Not all options given, starting the questionnaire")
        user_profile = await ManualInputClient().collect_profile(user_id)

    saved = await ProfileService().save(user_profile)
    echo_success("Profile saved")
    click.echo()
    click.echo(saved.get_summary())


@profile.command()
@user_option
@async_command
async def show(user_id: int):
    """Show your profile."""
    user_profile = await ProfileService().get(user_id)
    if user_profile is None:
        echo_info("No profile yet. Create one with 'quest-lift profile setup'")
        return

    click.echo()
    click.echo(user_profile.get_summary())
