"""CLI entry point for fitai."""

import logging

import click

from . import __version__
from .commands import catalog, generate, init, profile, routines, serve, suggest, workouts


@click.group()
@click.version_option(version=__version__, prog_name="fitai")
@click.option("--verbose", "-v", count=True, help="Log engine activity (-vv for debug)")
def main(verbose: int):
    """fitai: training routine generator and progressive overload coach.

    Builds multi-day routines from a user profile and suggests the next
    session's loads from logged workouts.

    Example usage:

        # Initialize the project
        fitai init

        # Store a profile and generate a routine
        fitai profile set ana --file ana.json
        fitai generate ana

        # Log a workout and ask for the next loads
        fitai workouts log ana -e "Sentadilla con barra=60x10,60x8"
        fitai suggest ana "Sentadilla con barra"
    """
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


# Register commands
main.add_command(init)
main.add_command(profile)
main.add_command(generate)
main.add_command(routines)
main.add_command(workouts)
main.add_command(suggest)
main.add_command(catalog)
main.add_command(serve)


if __name__ == "__main__":
    main()
