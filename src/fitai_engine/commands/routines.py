"""Routine management commands."""

import json

import click

from ..db import RoutineRepository, get_db_path
from .base import async_command, echo_error, echo_info, echo_success, ensure_initialized, format_table


@click.group()
@click.pass_context
def routines(ctx):
    """Manage generated routines.

    Commands for listing, viewing, and deleting routines.
    """
    ensure_initialized(ctx)


@routines.command(name="list")
@click.argument("user_id")
@click.pass_context
@async_command
async def list_routines(ctx, user_id: str):
    """List the routines generated for USER_ID."""
    repo = RoutineRepository(get_db_path())
    user_routines = await repo.list_for_user(user_id)

    if not user_routines:
        echo_info(f"No routines found. Generate one with 'fitai generate {user_id}'")
        return

    headers = ["ID", "Title", "Days", "Goal", "Created"]
    rows = []

    for routine in user_routines:
        created = routine.generated_at.strftime("%Y-%m-%d") if routine.generated_at else "N/A"
        title = routine.title[:40] + "..." if len(routine.title) > 40 else routine.title
        rows.append([
            str(routine.id),
            title,
            str(routine.days_per_week),
            routine.goal.value,
            created,
        ])

    click.echo()
    click.echo(format_table(headers, rows))
    click.echo()
    click.echo(f"Total: {len(user_routines)} routine(s)")


@routines.command()
@click.argument("routine_id", type=int)
@click.option("--json", "as_json", is_flag=True, help="Print the stored document as JSON")
@click.pass_context
@async_command
async def show(ctx, routine_id: int, as_json: bool):
    """Show details of a specific routine."""
    repo = RoutineRepository(get_db_path())

    if as_json:
        document = await repo.get_document(routine_id)
        if document is None:
            echo_error(f"Routine ID {routine_id} not found")
            ctx.exit(1)
        click.echo(json.dumps(document, indent=2, ensure_ascii=False))
        return

    routine = await repo.get(routine_id)
    if not routine:
        echo_error(f"Routine ID {routine_id} not found")
        ctx.exit(1)

    click.echo()
    click.echo("=" * 60)
    click.echo(f"{routine.title} (ID: {routine.id})")
    click.echo("=" * 60)
    click.echo()
    click.echo(routine.get_summary())


@routines.command()
@click.argument("routine_id", type=int)
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
@click.pass_context
@async_command
async def delete(ctx, routine_id: int, yes: bool):
    """Delete a routine."""
    repo = RoutineRepository(get_db_path())

    routine = await repo.get(routine_id)
    if not routine:
        echo_error(f"Routine ID {routine_id} not found")
        ctx.exit(1)

    if not yes:
        click.confirm(f"Delete routine '{routine.title}'?", abort=True)

    await repo.delete(routine_id)
    echo_success(f"Routine {routine_id} deleted")
