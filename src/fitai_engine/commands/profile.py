"""User profile commands."""

import json

import click

from ..clients import ProfileQuestionnaire
from ..db import ProfileRepository, get_db_path
from ..services.profile_normalizer import normalize_profile
from .base import async_command, echo_error, echo_info, echo_success, ensure_initialized


@click.group()
@click.pass_context
def profile(ctx):
    """Manage user profiles."""
    ensure_initialized(ctx)


@profile.command(name="set")
@click.argument("user_id")
@click.option(
    "--file",
    "-f",
    "path",
    type=click.Path(exists=True, dir_okay=False),
    help="JSON file with the raw profile (skips the questionnaire)",
)
@click.pass_context
@async_command
async def set_profile(ctx, user_id: str, path: str | None):
    """Create or replace the profile of USER_ID.

    Without --file an interactive questionnaire collects the profile.

    Example profile file:

        {"trainingFrequency": "4 días", "primaryGoal": "Fuerza",
         "trainingLocation": "Casa", "benchmarkBenchPress": 80}
    """
    if path:
        try:
            with open(path, encoding="utf-8") as f:
                raw = json.load(f)
        except json.JSONDecodeError as e:
            echo_error(f"Invalid JSON in {path}: {e}")
            ctx.exit(1)

        if not isinstance(raw, dict):
            echo_error("The profile file must contain a JSON object")
            ctx.exit(1)
    else:
        raw = await ProfileQuestionnaire().collect_profile()

    repo = ProfileRepository(get_db_path())
    await repo.upsert(user_id, raw)

    echo_success(f"Profile saved for {user_id}")
    click.echo()
    click.echo(normalize_profile(raw).get_summary())


@profile.command()
@click.argument("user_id")
@click.option("--raw", is_flag=True, help="Show the stored raw profile")
@click.pass_context
@async_command
async def show(ctx, user_id: str, raw: bool):
    """Show the profile of USER_ID as the generator reads it."""
    repo = ProfileRepository(get_db_path())
    data = await repo.get(user_id)

    if data is None:
        echo_error(f"No profile for {user_id}")
        ctx.exit(1)

    if raw:
        click.echo(json.dumps(data, indent=2, ensure_ascii=False))
        return

    click.echo()
    click.echo(normalize_profile(data).get_summary())


@profile.command(name="list")
@click.pass_context
@async_command
async def list_profiles(ctx):
    """List users with a stored profile."""
    repo = ProfileRepository(get_db_path())
    user_ids = await repo.list_user_ids()

    if not user_ids:
        echo_info("No profiles found. Create one with 'fitai profile set'")
        return

    for user_id in user_ids:
        click.echo(user_id)
