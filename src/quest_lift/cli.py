"""CLI entry point for quest-lift."""

import click
from pydantic import ValidationError

from .commands import init, plans, profile, rewards, serve, stats, workout
from .config import get_settings
from .logging_setup import configure_logging


@click.group()
@click.version_option(version="0.1.0", prog_name="quest-lift")
def main():
    """quest-lift: Gamified workout plans.

    Generate a workout plan from your profile, log your sessions and earn
    XP, levels, streaks and rewards.

    Example usage:

        # Initialize the project
        quest-lift init

        # Answer the onboarding questionnaire
        quest-lift profile setup

        # Generate and activate a plan
        quest-lift plans generate
        quest-lift plans activate 1

        # Train, then log it
        quest-lift workout today
        quest-lift workout log 3 --set 12:8:60 --set 12:8:60
    """
    try:
        settings = get_settings()
    except ValidationError as e:
        raise click.ClickException(f"Invalid QUEST_LIFT_* setting: {e}") from e
    configure_logging(settings.log_level)


# Register commands
main.add_command(init)
main.add_command(profile)
main.add_command(plans)
main.add_command(workout)
main.add_command(rewards)
main.add_command(stats)
main.add_command(serve)


def run():
    """Run the CLI (handles async event loop)."""
    main()


if __name__ == "__main__":
    run()
