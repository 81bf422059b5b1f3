"""Exercise catalog and its loaders."""

from .catalog import ExerciseCatalog
from .exercise_loader import get_default_catalog, load_exercise_records

__all__ = ["ExerciseCatalog", "get_default_catalog", "load_exercise_records"]
