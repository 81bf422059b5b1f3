"""CLI commands for fitai."""

from .catalog import catalog
from .generate import generate
from .init import init
from .profile import profile
from .routines import routines
from .serve import serve
from .suggest import suggest
from .workouts import workouts

__all__ = [
    "catalog",
    "generate",
    "init",
    "profile",
    "routines",
    "serve",
    "suggest",
    "workouts",
]
