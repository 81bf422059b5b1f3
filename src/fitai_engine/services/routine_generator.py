"""Routine generation from a raw user profile."""

import logging
import random
from collections.abc import Callable
from datetime import datetime

from ..data.catalog import ExerciseCatalog
from ..data.exercise_loader import get_default_catalog
from ..models.exercises import ExerciseRecord
from ..models.program import (
    GOAL_CONFIG,
    LEVEL_CONFIG,
    GeneratedDay,
    GeneratedRoutine,
    GoalSettings,
    PrescribedExercise,
)
from ..models.user_profile import CanonicalProfile
from .exercise_selector import ExerciseSelector, SelectedExercise
from .profile_normalizer import normalize_profile
from .splits import DayTemplate, select_split
from .weight_recommender import format_weight, suggest_starting_weight

logger = logging.getLogger(__name__)

CORE_CIRCUIT_SETS = 3
CORE_CIRCUIT_REST = "0s"
CORE_CIRCUIT_NOTE = "Circuito sin descanso"
DEFAULT_DISPLAY_NAME = "Usuario"


class RoutineGenerator:
    """Assembles a multi-day routine for a profile.

    Args:
        catalog: Exercise catalog (the packaged one if not provided)
        rng: Source of randomness; pass a seeded ``random.Random`` to get
            reproducible routines
        clock: Returns the generation timestamp
    """

    def __init__(
        self,
        catalog: ExerciseCatalog | None = None,
        rng: random.Random | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        self.catalog = catalog if catalog is not None else get_default_catalog()
        self.rng = rng or random.Random()
        self.clock = clock or datetime.now
        self.selector = ExerciseSelector(self.catalog, self.rng)

    def generate(self, raw_profile) -> GeneratedRoutine:
        """Generate a routine. Never raises for malformed profiles."""
        profile = normalize_profile(raw_profile)
        split = select_split(profile.days_per_week)
        goal = GOAL_CONFIG[profile.goal]
        level = LEVEL_CONFIG[profile.level]

        used_ids: set[str] = set()
        days = [self._build_day(template, used_ids, profile, goal) for template in split.days]

        n_days = split.days_per_week
        name = profile.display_name or DEFAULT_DISPLAY_NAME
        routine = GeneratedRoutine(
            title=f"Protocolo {goal.name} {n_days} Días - {name}",
            description=(
                f"Plan de {n_days} días para {goal.description}. "
                f"Nivel: {level.name}. {level.notes}"
            ),
            days_per_week=n_days,
            split_name=split.name,
            goal=profile.goal,
            level=profile.level,
            days=days,
            progression_tips=goal.progression_tips,
            generated_at=self.clock(),
        )

        logger.info(
            "Generated %s routine: %d days, %d exercises",
            profile.goal.value,
            n_days,
            len(routine.exercise_ids()),
        )
        return routine

    def _build_day(
        self,
        template: DayTemplate,
        used_ids: set[str],
        profile: CanonicalProfile,
        goal: GoalSettings,
    ) -> GeneratedDay:
        selected = self.selector.select_for_day(template, used_ids, profile)
        core = self.selector.select_core_circuit(profile)

        return GeneratedDay(
            day=template.label,
            focus=template.focus,
            exercises=[self._prescribe(item, profile, goal) for item in selected],
            core_circuit=[self._prescribe_core(record) for record in core],
        )

    def _prescribe(
        self,
        item: SelectedExercise,
        profile: CanonicalProfile,
        goal: GoalSettings,
    ) -> PrescribedExercise:
        record = item.record
        weight = suggest_starting_weight(record, profile.benchmarks, profile.goal)

        return PrescribedExercise(
            exercise_id=record.id,
            name=record.name,
            sets=max(1, record.default_sets + goal.sets_modifier),
            reps_scheme=record.default_reps,
            rest_duration=goal.rest,
            muscle_group=record.muscle_group,
            equipment=record.equipment,
            suggested_weight=format_weight(weight) if weight is not None else None,
            notes=item.notes,
            equipment_relaxed=item.relaxed,
        )

    @staticmethod
    def _prescribe_core(record: ExerciseRecord) -> PrescribedExercise:
        return PrescribedExercise(
            exercise_id=record.id,
            name=record.name,
            sets=CORE_CIRCUIT_SETS,
            reps_scheme=record.default_reps,
            rest_duration=CORE_CIRCUIT_REST,
            muscle_group=record.muscle_group,
            equipment=record.equipment,
            notes=CORE_CIRCUIT_NOTE,
        )


def generate_routine(
    raw_profile,
    catalog: ExerciseCatalog | None = None,
    rng: random.Random | None = None,
) -> GeneratedRoutine:
    """Generate a routine with a one-off generator."""
    return RoutineGenerator(catalog=catalog, rng=rng).generate(raw_profile)
