"""Workout logging commands."""

import re
from datetime import datetime

import click

from ..data import get_default_catalog
from ..db import WorkoutRepository, get_db_path
from ..models.progress import LoggedExercise, LoggedSet, WorkoutSession
from .base import async_command, echo_error, echo_info, echo_success, ensure_initialized, format_table

_SET_RE = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*[xX×]\s*(\d+)\s*$")


def parse_exercise_entry(entry: str) -> LoggedExercise:
    """Parse "NAME=WEIGHTxREPS,WEIGHTxREPS" into a logged exercise.

    Raises:
        click.BadParameter: If the entry is malformed
    """
    name, sep, sets_text = entry.partition("=")
    if not sep or not name.strip() or not sets_text.strip():
        raise click.BadParameter(f"expected NAME=WEIGHTxREPS[,...], got {entry!r}")

    sets = []
    for chunk in sets_text.split(","):
        match = _SET_RE.match(chunk)
        if match is None:
            raise click.BadParameter(f"invalid set {chunk!r} in {entry!r}")
        weight, reps = match.groups()
        sets.append(LoggedSet(weight=float(weight), reps=int(reps)))

    name = name.strip()
    # Store the catalog spelling when the name is close to a known exercise
    match = get_default_catalog().find_by_name(name)
    return LoggedExercise(name=match.name if match else name, sets=sets)


@click.group()
@click.pass_context
def workouts(ctx):
    """Log workouts and review exercise history."""
    ensure_initialized(ctx)


@workouts.command()
@click.argument("user_id")
@click.option(
    "--exercise",
    "-e",
    "entries",
    multiple=True,
    required=True,
    help='Exercise and sets, e.g. -e "Sentadilla con barra=60x10,60x8"',
)
@click.option(
    "--date",
    "started_at",
    type=click.DateTime(formats=["%Y-%m-%d", "%Y-%m-%dT%H:%M", "%Y-%m-%d %H:%M"]),
    help="Session date (default: now)",
)
@click.pass_context
@async_command
async def log(ctx, user_id: str, entries: tuple[str, ...], started_at: datetime | None):
    """Log a workout session for USER_ID."""
    try:
        exercises = [parse_exercise_entry(entry) for entry in entries]
    except click.BadParameter as e:
        echo_error(str(e.message))
        ctx.exit(1)

    session = WorkoutSession(
        user_id=user_id,
        started_at=started_at or datetime.now(),
        exercises=exercises,
    )
    session_id = await WorkoutRepository(get_db_path()).create(session)

    echo_success(f"Workout logged with ID: {session_id}")
    for exercise in exercises:
        sets = ", ".join(f"{s.weight:g}x{s.reps}" for s in exercise.sets)
        click.echo(f"  - {exercise.name}: {sets}")


@workouts.command()
@click.argument("user_id")
@click.argument("exercise")
@click.pass_context
@async_command
async def history(ctx, user_id: str, exercise: str):
    """Show the logged history of EXERCISE for USER_ID."""
    repo = WorkoutRepository(get_db_path())
    points = await repo.get_exercise_history(user_id, exercise)

    if not points:
        echo_info(f"No sessions found for '{exercise}'")
        return

    headers = ["Date", "Max weight", "Volume", "Sets"]
    rows = [
        [
            point.date.strftime("%Y-%m-%d"),
            f"{point.max_weight:g}kg",
            f"{point.total_volume:g}",
            str(point.set_count),
        ]
        for point in points
    ]

    click.echo()
    click.echo(format_table(headers, rows))
