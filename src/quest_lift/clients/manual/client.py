"""Onboarding profile input via interactive questionnaire."""

import click
import questionary
from questionary import Style

from ...models.exercises import EquipmentPackage, EquipmentType
from ...models.user_profile import ExperienceLevel, FitnessGoal, Sex, UserProfile

# Custom style for questionnaire
custom_style = Style(
    [
        ("qmark", "fg:#673ab7 bold"),
        ("question", "bold"),
        ("answer", "fg:#f44336 bold"),
        ("pointer", "fg:#673ab7 bold"),
        ("highlighted", "fg:#673ab7 bold"),
        ("selected", "fg:#cc5454"),
        ("separator", "fg:#cc5454"),
        ("instruction", ""),
        ("text", ""),
    ]
)


def _positive_number(text: str) -> bool | str:
    try:
        return float(text) > 0 or "Enter a positive number"
    except ValueError:
        return "Enter a number"


class ManualInputClient:
    """Interactive questionnaire for collecting an onboarding profile."""

    async def collect_profile(self, user_id: int) -> UserProfile:
        """Run interactive questionnaire to collect a user profile."""
        click.echo("\n=== Onboarding Questionnaire ===\n")

        age = await questionary.text(
            "Your age:", validate=_positive_number, style=custom_style
        ).ask_async()

        sex = await questionary.select(
            "Sex:",
            choices=[
                questionary.Choice("Male", Sex.MALE),
                questionary.Choice("Female", Sex.FEMALE),
                questionary.Choice("Other / prefer not to say", Sex.OTHER),
            ],
            style=custom_style,
        ).ask_async()

        height_cm = await questionary.text(
            "Your height (in cm):", validate=_positive_number, style=custom_style
        ).ask_async()

        weight_kg = await questionary.text(
            "Your body weight (in kg):", validate=_positive_number, style=custom_style
        ).ask_async()

        # Experience level
        experience = await questionary.select(
            "What's your training experience level?",
            choices=[
                questionary.Choice("Beginner (less than 1 year)", ExperienceLevel.BEGINNER),
                questionary.Choice("Intermediate (1-3 years)", ExperienceLevel.INTERMEDIATE),
                questionary.Choice("Advanced (3+ years)", ExperienceLevel.ADVANCED),
            ],
            style=custom_style,
        ).ask_async()

        goal = await questionary.select(
            "What's your primary fitness goal?",
            choices=[
                questionary.Choice("Build muscle", FitnessGoal.BUILD_MUSCLE),
                questionary.Choice("Lose weight", FitnessGoal.LOSE_WEIGHT),
                questionary.Choice("Build strength", FitnessGoal.STRENGTH),
                questionary.Choice("Muscular endurance", FitnessGoal.ENDURANCE),
                questionary.Choice("General fitness", FitnessGoal.GENERAL_FITNESS),
            ],
            style=custom_style,
        ).ask_async()

        # Schedule
        days_per_week = await questionary.select(
            "How many days per week can you train?",
            choices=["1", "2", "3", "4", "5", "6", "7"],
            default="3",
            style=custom_style,
        ).ask_async()

        equipment = await self._collect_equipment()

        return UserProfile(
            user_id=user_id,
            age=int(float(age)),
            height_cm=float(height_cm),
            weight_kg=float(weight_kg),
            sex=sex,
            experience_level=experience,
            goal=goal,
            days_per_week=int(days_per_week),
            equipment=equipment,
        )

    async def _collect_equipment(self) -> list[str]:
        """Pick a package or individual equipment."""
        package = await questionary.select(
            "Where do you train?",
            choices=[
                questionary.Choice("Public gym (full equipment)", EquipmentPackage.PUBLIC_GYM),
                questionary.Choice(
                    "Home gym (dumbbells, barbell, bench)", EquipmentPackage.HOME_GYM_LIMITED
                ),
                questionary.Choice("Let me pick my equipment", "custom"),
            ],
            style=custom_style,
        ).ask_async()

        if isinstance(package, EquipmentPackage):
            return [package.value] + [eq.value for eq in package.equipment]

        equipment = await questionary.checkbox(
            "What equipment do you have access to?",
            choices=[
                questionary.Choice("Barbell", EquipmentType.BARBELL),
                questionary.Choice("Dumbbells", EquipmentType.DUMBBELLS),
                questionary.Choice("Bench", EquipmentType.BENCH),
                questionary.Choice("Squat rack", EquipmentType.SQUAT_RACK),
                questionary.Choice("Cable machines", EquipmentType.CABLE_MACHINE),
                questionary.Choice("Pull-up bar", EquipmentType.PULL_UP_BAR),
                questionary.Choice("Weight machines", EquipmentType.MACHINES),
                questionary.Choice("Kettlebells", EquipmentType.KETTLEBELLS),
                questionary.Choice("Bodyweight only", EquipmentType.BODYWEIGHT),
            ],
            style=custom_style,
        ).ask_async()

        if not equipment:
            equipment = [EquipmentType.BODYWEIGHT]
        return [eq.value for eq in equipment]
