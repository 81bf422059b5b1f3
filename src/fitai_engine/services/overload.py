"""Progressive overload suggestions from logged workout history."""

import asyncio
import logging
from collections.abc import Iterable
from typing import Protocol

from ..models.progress import (
    ExerciseHistoryPoint,
    NoHistory,
    OverloadSuggestion,
    Progressing,
    Stalled,
    WorkoutSession,
)
from ..models.user_profile import FitnessGoal
from ..utils.exercise_utils import is_lower_body_exercise, normalize_exercise_name

logger = logging.getLogger(__name__)

LOWER_BODY_INCREMENT = 5.0
UPPER_BODY_INCREMENT = 2.5
STALL_WINDOW = 3


class ExerciseHistoryReader(Protocol):
    """Anything that can read one user's history for one exercise."""

    async def get_exercise_history(
        self, user_id: str, exercise_name: str
    ) -> list[ExerciseHistoryPoint]: ...


def summarize_exercise_history(
    sessions: Iterable[WorkoutSession],
    exercise_name: str,
) -> list[ExerciseHistoryPoint]:
    """Per-session summary of one exercise, oldest first.

    Names are compared case and accent insensitively. Sessions where the
    exercise has no logged sets are skipped.
    """
    target = normalize_exercise_name(exercise_name)
    points = []

    for session in sessions:
        logged = next(
            (ex for ex in session.exercises if normalize_exercise_name(ex.name) == target),
            None,
        )
        if logged is None or not logged.sets:
            continue

        points.append(
            ExerciseHistoryPoint(
                date=session.started_at,
                max_weight=logged.max_weight,
                total_volume=logged.total_volume,
                set_count=len(logged.sets),
            )
        )

    points.sort(key=lambda point: point.date)
    return points


class ProgressiveOverloadAnalyzer:
    """Turns an exercise history into a next-session load suggestion."""

    def analyze(
        self,
        history: list[ExerciseHistoryPoint],
        exercise_name: str,
        goal: FitnessGoal = FitnessGoal.HYPERTROPHY,
    ) -> OverloadSuggestion:
        """Suggest the next load.

        Args:
            history: Sessions for this exercise, most recent last
            exercise_name: Used to pick the increment (lower body moves faster)
            goal: The user's goal; the current rules do not vary by goal

        Returns:
            NoHistory, Stalled or Progressing
        """
        if not history:
            return NoHistory()

        last = history[-1]
        if not last.max_weight or last.max_weight <= 0:
            return NoHistory("incomplete session data")

        recent = [point.max_weight for point in history[-STALL_WINDOW:]]
        if len(recent) == STALL_WINDOW and all(w == recent[0] for w in recent):
            return Stalled(weight=last.max_weight)

        if len(history) >= 2 and last.max_weight < history[-2].max_weight:
            logger.info(
                "%s dropped from %g to %g, still suggesting an increase",
                exercise_name,
                history[-2].max_weight,
                last.max_weight,
            )

        increment = (
            LOWER_BODY_INCREMENT if is_lower_body_exercise(exercise_name) else UPPER_BODY_INCREMENT
        )
        return Progressing(last_weight=last.max_weight, increment=increment)


class OverloadService:
    """Load suggestions for a user, backed by a history reader."""

    def __init__(
        self,
        history_reader: ExerciseHistoryReader,
        analyzer: ProgressiveOverloadAnalyzer | None = None,
    ):
        self.history_reader = history_reader
        self.analyzer = analyzer or ProgressiveOverloadAnalyzer()

    async def suggest_next_weight(
        self,
        user_id: str,
        exercise_name: str,
        goal: FitnessGoal = FitnessGoal.HYPERTROPHY,
    ) -> OverloadSuggestion:
        """Suggestion for one exercise; read failures degrade to NoHistory."""
        try:
            history = await self.history_reader.get_exercise_history(user_id, exercise_name)
        except Exception:
            logger.warning(
                "Could not read history for user %s, exercise %s",
                user_id,
                exercise_name,
                exc_info=True,
            )
            return NoHistory("history unavailable")

        history = sorted(history, key=lambda point: point.date)
        return self.analyzer.analyze(history, exercise_name, goal)

    async def suggest_for_workout(
        self,
        user_id: str,
        exercise_names: Iterable[str],
        goal: FitnessGoal = FitnessGoal.HYPERTROPHY,
        timeout: float | None = None,
    ) -> dict[str, OverloadSuggestion]:
        """Suggestions for several exercises, looked up concurrently.

        Each exercise degrades on its own. Lookups still running after
        ``timeout`` seconds are cancelled and reported as timed out.
        """
        names = list(dict.fromkeys(exercise_names))
        if not names:
            return {}

        tasks = {
            name: asyncio.create_task(self.suggest_next_weight(user_id, name, goal))
            for name in names
        }
        _, pending = await asyncio.wait(tasks.values(), timeout=timeout)

        if pending:
            logger.warning(
                "%d of %d history lookups timed out for user %s",
                len(pending),
                len(tasks),
                user_id,
            )
            for task in pending:
                task.cancel()
            await asyncio.gather(*pending, return_exceptions=True)

        results: dict[str, OverloadSuggestion] = {}
        for name, task in tasks.items():
            if task in pending:
                results[name] = NoHistory("history lookup timed out")
            else:
                results[name] = task.result()
        return results
