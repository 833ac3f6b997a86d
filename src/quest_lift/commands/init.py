"""Initialize project command."""

import click

from ..config import get_settings
from ..db import get_db_path, init_db, seed_exercises, seed_rewards
from .base import async_command, echo_info, echo_success


@click.command()
@async_command
async def init():
    """Initialize the quest-lift database.

    This creates the data directory and initializes the SQLite database
    with the schema, the exercise catalog and the reward catalog. Running
    it again leaves existing data untouched.
    """
    data_dir = get_settings().data_dir
    db_path = get_db_path(data_dir)

    echo_info(f"Initializing quest-lift in {data_dir}")

    await init_db(db_path)
    echo_success("Database initialized")

    count = await seed_exercises(db_path)
    echo_success(f"Exercise library populated ({count} new exercises)")

    count = await seed_rewards(db_path)
    echo_success(f"Reward catalog populated ({count} new rewards)")

    click.echo()
    click.echo("quest-lift is ready to use!")
    click.echo()
    click.echo("Next steps:")
    click.echo("  1. Tell us about yourself:")
    click.echo("     quest-lift profile setup")
    click.echo()
    click.echo("  2. Generate and activate a plan:")
    click.echo("     quest-lift plans generate")
    click.echo("     quest-lift plans activate <plan_id>")
    click.echo()
    click.echo("  3. Train and log it:")
    click.echo("     quest-lift workout today")
