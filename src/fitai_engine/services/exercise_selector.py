"""Exercise selection for generated training days."""

import logging
import random
from dataclasses import dataclass

from ..data.catalog import ExerciseCatalog
from ..models.exercises import ExerciseRecord, MuscleGroup
from ..models.program import LEVEL_CONFIG
from ..models.user_profile import CanonicalProfile, ExperienceLevel
from .splits import DayTemplate

logger = logging.getLogger(__name__)

WARMUP_PREFIX = "2x15 calentamiento previo. "
CORE_CIRCUIT_SIZE = 3
CURATED_WEIGHT = 2


def _draw_weight(record: ExerciseRecord) -> int:
    return CURATED_WEIGHT if record.curated else 1


@dataclass(frozen=True)
class SelectedExercise:
    """A catalog record picked for a day, with its day-specific notes."""

    record: ExerciseRecord
    notes: str
    relaxed: bool = False  # Picked after dropping the equipment filter

    @property
    def id(self) -> str:
        return self.record.id


class ExerciseSelector:
    """Draws exercises per muscle group from a catalog.

    All randomness goes through the injected ``rng`` so a seeded
    ``random.Random`` reproduces the same routine.
    """

    def __init__(self, catalog: ExerciseCatalog, rng: random.Random | None = None):
        self.catalog = catalog
        self.rng = rng or random.Random()

    @staticmethod
    def exercises_per_muscle(level: ExperienceLevel, muscle_count: int) -> int:
        """Exercises per muscle group for a day training ``muscle_count`` groups."""
        base = LEVEL_CONFIG[level].exercises_per_muscle
        if muscle_count == 1:
            return base + 2
        if muscle_count == 2:
            return base
        return max(2, base - 1)

    def select_for_muscle(
        self,
        muscle_group: MuscleGroup,
        count: int,
        used_ids: set[str],
        profile: CanonicalProfile,
    ) -> list[SelectedExercise]:
        """Pick up to ``count`` unused exercises for one muscle group.

        Selected ids are added to ``used_ids``. When no exercise fits the
        allowed equipment the equipment filter is dropped; exercises already
        used and injured muscle groups stay excluded regardless.
        """
        if muscle_group in profile.excluded_muscle_groups or count <= 0:
            return []

        pool = self.catalog.filter(
            muscle_group=muscle_group,
            equipment=profile.allowed_equipment,
            exclude_ids=used_ids,
        )
        relaxed = False
        if not pool:
            pool = self.catalog.filter(muscle_group=muscle_group, exclude_ids=used_ids)
            if not pool:
                logger.info("No unused exercises left for %s", muscle_group.value)
                return []
            relaxed = True
            logger.info(
                "No %s exercise for equipment %s, ignoring equipment",
                muscle_group.value,
                sorted(eq.value for eq in profile.allowed_equipment),
            )

        level = LEVEL_CONFIG[profile.level]
        selected: list[SelectedExercise] = []

        if level.prefer_compound:
            compounds = [r for r in pool if r.is_compound]
            if compounds:
                weights = [_draw_weight(r) for r in compounds]
                lead = self.rng.choices(compounds, weights=weights, k=1)[0]
                selected.append(SelectedExercise(lead, WARMUP_PREFIX + lead.notes, relaxed))

        chosen_ids = {s.id for s in selected}
        remaining = self._weighted_order([r for r in pool if r.id not in chosen_ids])
        if level.avoid_techniques:
            remaining.sort(key=lambda r: bool(r.techniques & level.avoid_techniques))

        needed = max(0, count - len(selected))
        selected.extend(SelectedExercise(r, r.notes, relaxed) for r in remaining[:needed])

        used_ids.update(s.id for s in selected)
        return selected

    def _weighted_order(self, records: list[ExerciseRecord]) -> list[ExerciseRecord]:
        """Random order where curated records count double.

        Taking the first n is a weighted draw of n without replacement.
        """
        keyed = [(self.rng.random() ** (1 / _draw_weight(r)), r) for r in records]
        keyed.sort(key=lambda pair: pair[0], reverse=True)
        return [r for _, r in keyed]

    def select_for_day(
        self,
        day: DayTemplate,
        used_ids: set[str],
        profile: CanonicalProfile,
    ) -> list[SelectedExercise]:
        """Exercises for every muscle group of a day, in template order."""
        per_muscle = self.exercises_per_muscle(profile.level, len(day.muscle_groups))
        exercises: list[SelectedExercise] = []
        for muscle_group in day.muscle_groups:
            exercises.extend(self.select_for_muscle(muscle_group, per_muscle, used_ids, profile))
        return exercises

    def select_core_circuit(
        self,
        profile: CanonicalProfile,
        size: int = CORE_CIRCUIT_SIZE,
    ) -> list[ExerciseRecord]:
        """Random core circuit for a day.

        Drawn independently of the main exercises, so circuits may repeat
        across days.
        """
        core = self.catalog.core_exercises()
        preferred = [r for r in core if r.equipment in profile.allowed_equipment]
        pool = preferred if len(preferred) >= size else core
        return self.rng.sample(pool, min(size, len(pool)))
