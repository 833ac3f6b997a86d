"""Workout plan management commands."""

import click

from ..generators.plan_generator import RoutineSelection
from ..models.routines import RoutineType
from ..services import PlanService
from .base import (
    async_command,
    echo_info,
    echo_success,
    ensure_initialized,
    format_table,
    user_option,
)


@click.group()
@click.pass_context
def plans(ctx):
    """Generate and manage workout plans.

    Commands for generating, listing, viewing, activating and deleting plans.
    """
    ensure_initialized(ctx)


@plans.command()
@user_option
@click.option(
    "--routine", "-r",
    type=click.Choice([r.value for r in RoutineType]),
    help="Routine to use (default: chosen from your training days)",
)
@async_command
async def generate(user_id: int, routine: str | None):
    """Generate a new plan from your profile.

    New plans are inactive until activated.
    """
    selection = RoutineSelection(routine=RoutineType(routine) if routine else None)
    plan = await PlanService().generate_and_save(user_id, selection)

    echo_success(f"Plan {plan.id} created: {plan.name}")
    click.echo()
    click.echo(plan.get_summary())
    echo_info(f"Activate it with 'quest-lift plans activate {plan.id}'")


@plans.command(name="list")
@user_option
@async_command
async def list_plans(user_id: int):
    """List your plans."""
    all_plans = await PlanService().list_plans(user_id)

    if not all_plans:
        echo_info("No plans found. Generate one with 'quest-lift plans generate'")
        return

    headers = ["ID", "Name", "Days", "Active", "Created"]
    rows = []

    for plan in all_plans:
        created = plan.created_at.strftime("%Y-%m-%d") if plan.created_at else "N/A"
        rows.append([
            str(plan.id),
            plan.name,
            str(plan.day_count),
            "yes" if plan.active else "",
            created,
        ])

    click.echo()
    click.echo(format_table(headers, rows))
    click.echo()
    click.echo(f"Total: {len(all_plans)} plan(s)")


@plans.command()
@click.argument("plan_id", type=int)
@user_option
@async_command
async def show(plan_id: int, user_id: int):
    """Show details of a plan."""
    plan = await PlanService().get_plan(user_id, plan_id)

    click.echo()
    click.echo("=" * 60)
    click.echo(f"{plan.name} (ID: {plan.id})")
    click.echo("=" * 60)
    click.echo()
    click.echo(plan.get_summary())


@plans.command()
@click.argument("plan_id", type=int)
@user_option
@async_command
async def activate(plan_id: int, user_id: int):
    """Make a plan your active plan."""
    plan = await PlanService().activate_plan(user_id, plan_id)
    echo_success(f"Plan {plan.id} is now active: {plan.name}")


@plans.command()
@click.argument("plan_id", type=int)
@user_option
@click.option("--force", "-f", is_flag=True, help="Skip confirmation")
@async_command
async def delete(plan_id: int, user_id: int, force: bool):
    """Delete a plan."""
    service = PlanService()
    plan = await service.get_plan(user_id, plan_id)

    if not force:
        click.echo(f"Plan: {plan.name}")
        if not click.confirm("Are you sure you want to delete this plan?"):
            echo_info("Cancelled")
            return

    await service.delete_plan(user_id, plan_id)
    echo_success(f"Plan {plan_id} deleted")
