"""Reward and stats commands."""

import click

from ..db import UserStatsRepository
from ..services import RewardService, xp_for_next_level
from .base import (
    async_command,
    echo_success,
    ensure_initialized,
    format_table,
    user_option,
)


@click.group()
@click.pass_context
def rewards(ctx):
    """List and equip your rewards."""
    ensure_initialized(ctx)


@rewards.command(name="list")
@user_option
@async_command
async def list_rewards(user_id: int):
    """List all rewards and which ones you have unlocked."""
    listing = await RewardService().list_with_status(user_id)

    headers = ["ID", "Name", "Type", "Requires", "Status"]
    rows = []
    for reward in listing:
        requires = []
        if reward["required_level"] is not None:
            requires.append(f"level {reward['required_level']}")
        if reward["required_streak"] is not None:
            requires.append(f"{reward['required_streak']}-day streak")
        status = "equipped" if reward["equipped"] else "unlocked" if reward["unlocked"] else "locked"
        rows.append([str(reward["id"]), reward["name"], reward["type"], ", ".join(requires), status])

    click.echo()
    click.echo(format_table(headers, rows))


@rewards.command()
@click.argument("reward_id", type=int)
@user_option
@async_command
async def equip(reward_id: int, user_id: int):
    """Equip an unlocked reward."""
    user_reward = await RewardService().equip(user_id, reward_id)
    echo_success(f"Equipped {user_reward.reward.name}")


@click.command()
@user_option
@click.pass_context
@async_command
async def stats(ctx, user_id: int):
    """Show your level, XP and streaks."""
    ensure_initialized(ctx)
    user_stats = await UserStatsRepository().get_or_create(user_id)

    click.echo()
    click.echo(f"Level:          {user_stats.level}")
    click.echo(f"Total XP:       {user_stats.total_xp}")
    remaining = xp_for_next_level(user_stats.total_xp)
    click.echo(f"Next level in:  {remaining} XP" if remaining else "Next level in:  max level")
    click.echo(f"Current streak: {user_stats.current_streak} day(s)")
    click.echo(f"Longest streak: {user_stats.longest_streak} day(s)")
    click.echo(f"This week:      {user_stats.workouts_this_week} workout(s)")
