"""Initialize project command."""

import click

from ..data import get_default_catalog
from ..db import get_data_dir, get_db_path, init_db
from .base import async_command, echo_info, echo_success


@click.command()
@async_command
async def init():
    """Initialize the fitai data directory and database.

    Creates the SQLite database with the profile, routine and workout
    tables. Set FITAI_DATA_DIR to keep the data somewhere else.
    """
    data_dir = get_data_dir()
    db_path = get_db_path(data_dir)

    echo_info(f"Initializing fitai in {data_dir}")

    await init_db(db_path)
    echo_success("Database initialized")

    catalog = get_default_catalog()
    echo_success(f"Exercise catalog loaded ({len(catalog)} exercises)")

    click.echo()
    click.echo("fitai is ready to use!")
    click.echo()
    click.echo("Next steps:")
    click.echo("  1. Create a profile:")
    click.echo("     fitai profile set <user>                 # Interactive questionnaire")
    click.echo("     fitai profile set <user> --file me.json")
    click.echo()
    click.echo("  2. Generate a routine:")
    click.echo("     fitai generate <user>")
