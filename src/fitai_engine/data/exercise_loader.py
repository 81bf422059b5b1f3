"""Exercise catalog loader from JSON."""

import json
import logging
from functools import lru_cache
from pathlib import Path

from ..models.exercises import ExerciseRecord
from .catalog import ExerciseCatalog

logger = logging.getLogger(__name__)


def get_exercises_json_path() -> Path:
    """Get the path to the catalog JSON shipped with the package."""
    return Path(__file__).parent / "exercises.json"


def load_exercise_records(path: Path | None = None) -> list[ExerciseRecord]:
    """Load exercise records from a catalog JSON file.

    Args:
        path: Optional catalog file. Uses the packaged catalog if not provided.

    Returns:
        List of ExerciseRecord objects; invalid entries are skipped
    """
    json_path = path or get_exercises_json_path()
    if not json_path.exists():
        logger.warning("Exercise catalog not found at %s", json_path)
        return []

    with open(json_path, encoding="utf-8") as f:
        data = json.load(f)

    records = []
    for ex_data in data.get("exercises", []):
        try:
            records.append(ExerciseRecord.from_dict(ex_data))
        except (ValueError, KeyError, TypeError) as e:
            logger.warning("Skipping invalid exercise %s: %s", ex_data.get("id", "unknown"), e)
            continue

    logger.debug("Loaded %d exercises from %s", len(records), json_path)
    return records


@lru_cache(maxsize=1)
def get_default_catalog() -> ExerciseCatalog:
    """The packaged catalog, loaded once per process."""
    return ExerciseCatalog(load_exercise_records())
