"""Routine generation command."""

import json

import click

from ..db import ProfileRepository, RoutineRepository, get_db_path
from ..services.routine_generator import RoutineGenerator
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    echo_warning,
    ensure_initialized,
    make_rng,
)


@click.command()
@click.argument("user_id")
@click.option("--seed", type=int, help="Random seed for a reproducible routine")
@click.option("--json", "as_json", is_flag=True, help="Print the routine document as JSON")
@click.option("--no-save", is_flag=True, help="Don't store the generated routine")
@click.pass_context
@async_command
async def generate(ctx, user_id: str, seed: int | None, as_json: bool, no_save: bool):
    """Generate a training routine for USER_ID from their stored profile.

    Examples:

        fitai generate ana

        fitai generate ana --seed 42 --json --no-save
    """
    ensure_initialized(ctx)
    db_path = get_db_path()

    raw = await ProfileRepository(db_path).get(user_id)
    if raw is None:
        echo_error(f"No profile for {user_id}. Create one with 'fitai profile set {user_id}'")
        ctx.exit(1)

    generator = RoutineGenerator(rng=make_rng(seed))
    routine = generator.generate(raw)

    if not routine.exercise_ids():
        echo_warning("The routine has no exercises; check the profile's injuries and location")

    if not no_save:
        routine_id = await RoutineRepository(db_path).create(user_id, routine)
        if not as_json:
            echo_success(f"Routine saved with ID: {routine_id}")

    if as_json:
        click.echo(json.dumps(routine.to_document(), indent=2, ensure_ascii=False))
        return

    click.echo()
    click.echo(routine.get_summary())
    if routine.id:
        echo_info(f"View it again with 'fitai routines show {routine.id}'")
