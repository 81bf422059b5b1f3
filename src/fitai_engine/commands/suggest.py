"""Next-session load suggestion command."""

import click

from ..db import ProfileRepository, WorkoutRepository, get_db_path
from ..models.progress import Stalled
from ..models.user_profile import FitnessGoal
from ..services.overload import OverloadService
from ..services.profile_normalizer import normalize_profile
from .base import async_command, echo_warning, ensure_initialized, format_table


@click.command()
@click.argument("user_id")
@click.argument("exercises", nargs=-1, required=True)
@click.option(
    "--goal",
    type=click.Choice([g.value for g in FitnessGoal]),
    help="Training goal (default: read from the user's profile)",
)
@click.option("--timeout", type=float, help="Give up on lookups after this many seconds")
@click.pass_context
@async_command
async def suggest(ctx, user_id: str, exercises: tuple[str, ...], goal: str | None, timeout: float | None):
    """Suggest next-session loads for EXERCISES from USER_ID's history.

    Example:

        fitai suggest ana "Sentadilla con barra" "Press banca con barra"
    """
    ensure_initialized(ctx)
    db_path = get_db_path()

    if goal is None:
        raw = await ProfileRepository(db_path).get(user_id)
        fitness_goal = normalize_profile(raw).goal
    else:
        fitness_goal = FitnessGoal(goal)

    service = OverloadService(WorkoutRepository(db_path))
    results = await service.suggest_for_workout(user_id, exercises, fitness_goal, timeout=timeout)

    headers = ["Exercise", "Suggestion", "Trend", "Confidence", "Reason"]
    rows = []
    for name, result in results.items():
        suggestion = f"{result.suggestion:g}kg" if result.suggestion is not None else "-"
        rows.append([
            name,
            suggestion,
            result.trend.value,
            f"{result.confidence:.0%}",
            result.reason,
        ])

    click.echo()
    click.echo(format_table(headers, rows))

    for name, result in results.items():
        if isinstance(result, Stalled):
            echo_warning(f"{name}: {result.advice}")
