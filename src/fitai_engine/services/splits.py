"""Weekly split templates."""

import logging
from dataclasses import dataclass

from ..models.exercises import MuscleGroup
from .profile_normalizer import DEFAULT_DAYS_PER_WEEK, MAX_DAYS_PER_WEEK, MIN_DAYS_PER_WEEK

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DayTemplate:
    """One training day of a split."""

    label: str
    focus: str
    muscle_groups: tuple[MuscleGroup, ...]

    def __post_init__(self):
        if not self.muscle_groups:
            raise ValueError(f"{self.label}: a day needs at least one muscle group")


@dataclass(frozen=True)
class SplitTemplate:
    """A named weekly split, one template per training day."""

    name: str
    days: tuple[DayTemplate, ...]

    @property
    def days_per_week(self) -> int:
        return len(self.days)


_CHEST = MuscleGroup.CHEST
_BACK = MuscleGroup.BACK
_SHOULDERS = MuscleGroup.SHOULDERS
_QUAD = MuscleGroup.LEGS_QUAD
_HAM = MuscleGroup.LEGS_HAM
_BICEPS = MuscleGroup.BICEPS
_TRICEPS = MuscleGroup.TRICEPS


SPLIT_TEMPLATES: dict[int, SplitTemplate] = {
    3: SplitTemplate(
        name="PPL (Push/Pull/Legs)",
        days=(
            DayTemplate(
                "Día 1: Empuje (Pecho, Hombros, Tríceps)",
                "Pectoral y deltoides anterior",
                (_CHEST, _SHOULDERS, _TRICEPS),
            ),
            DayTemplate(
                "Día 2: Tracción (Espalda, Bíceps)",
                "Dorsales y espalda alta",
                (_BACK, _BICEPS),
            ),
            DayTemplate(
                "Día 3: Piernas Completo",
                "Cuádriceps, isquiotibiales y glúteos",
                (_QUAD, _HAM),
            ),
        ),
    ),
    4: SplitTemplate(
        name="Torso/Pierna x2",
        days=(
            DayTemplate(
                "Día 1: Torso (Empuje)",
                "Pecho, hombros y tríceps",
                (_CHEST, _SHOULDERS, _TRICEPS),
            ),
            DayTemplate("Día 2: Piernas (Cuádriceps)", "Dominante de rodilla", (_QUAD,)),
            DayTemplate("Día 3: Torso (Tracción)", "Espalda y bíceps", (_BACK, _BICEPS)),
            DayTemplate("Día 4: Piernas (Isquios/Glúteo)", "Dominante de cadera", (_HAM,)),
        ),
    ),
    5: SplitTemplate(
        name="Split de Especialización",
        days=(
            DayTemplate(
                "Día 1: Pecho y Tríceps",
                "Pectoral mayor y cabeza larga del tríceps",
                (_CHEST, _TRICEPS),
            ),
            DayTemplate(
                "Día 2: Espalda y Bíceps",
                "Dorsales, romboides y bíceps braquial",
                (_BACK, _BICEPS),
            ),
            DayTemplate(
                "Día 3: Hombros",
                "Deltoides anterior, lateral y posterior",
                (_SHOULDERS,),
            ),
            DayTemplate(
                "Día 4: Piernas",
                "Cuádriceps, isquiotibiales, glúteos y gemelos",
                (_QUAD, _HAM),
            ),
            DayTemplate(
                "Día 5: Pecho, Hombros y Brazos",
                "Retoque estético y superseries",
                (_CHEST, _SHOULDERS, _BICEPS, _TRICEPS),
            ),
        ),
    ),
    6: SplitTemplate(
        name="PPL x2",
        days=(
            DayTemplate("Día 1: Empuje", "Pecho, hombros, tríceps", (_CHEST, _SHOULDERS, _TRICEPS)),
            DayTemplate("Día 2: Tracción", "Espalda y bíceps", (_BACK, _BICEPS)),
            DayTemplate("Día 3: Piernas", "Cuádriceps y isquios", (_QUAD, _HAM)),
            DayTemplate(
                "Día 4: Empuje (Volumen)",
                "Pecho y deltoides",
                (_CHEST, _SHOULDERS, _TRICEPS),
            ),
            DayTemplate("Día 5: Tracción (Volumen)", "Espalda ancha", (_BACK, _BICEPS)),
            DayTemplate("Día 6: Piernas (Intensidad)", "Fuerza y detalle", (_QUAD, _HAM)),
        ),
    ),
}


def select_split(days_per_week: int) -> SplitTemplate:
    """Split template for a weekly frequency.

    Out-of-range values are clamped to [3, 6]; anything that is not an
    integer falls back to the default five-day split.
    """
    if isinstance(days_per_week, bool) or not isinstance(days_per_week, int):
        logger.warning("Invalid days_per_week %r, using %d", days_per_week, DEFAULT_DAYS_PER_WEEK)
        days_per_week = DEFAULT_DAYS_PER_WEEK

    clamped = min(MAX_DAYS_PER_WEEK, max(MIN_DAYS_PER_WEEK, days_per_week))
    return SPLIT_TEMPLATES[clamped]
