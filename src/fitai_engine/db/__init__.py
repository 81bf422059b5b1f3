"""Database layer for fitai-engine."""

from .engine import get_data_dir, get_db_path, init_db
from .repositories import ProfileRepository, RoutineRepository, WorkoutRepository

__all__ = [
    "get_data_dir",
    "get_db_path",
    "init_db",
    "ProfileRepository",
    "RoutineRepository",
    "WorkoutRepository",
]
