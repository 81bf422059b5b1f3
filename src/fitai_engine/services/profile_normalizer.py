"""Normalization of raw, loosely typed user profiles.

Profiles arrive from questionnaires and older app versions with free-text
values in Spanish or English ("2-3 días", "Menos de 1 año", "Casa con
mancuernas"). ``normalize_profile`` maps them onto a ``CanonicalProfile``
and never raises: anything it cannot read falls back to a default.
"""

import logging
import math
import re
from collections.abc import Mapping

from ..models.exercises import EquipmentType, MuscleGroup
from ..models.user_profile import (
    Benchmarks,
    CanonicalProfile,
    ExperienceLevel,
    FitnessGoal,
    TrainingLocation,
)
from ..utils.exercise_utils import strip_accents

logger = logging.getLogger(__name__)

DEFAULT_DAYS_PER_WEEK = 5
MIN_DAYS_PER_WEEK = 3
MAX_DAYS_PER_WEEK = 6

# Raw field name -> accepted aliases, first match wins
FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "frequency": ("trainingFrequency", "frequency", "training_frequency"),
    "primary_goal": ("primaryGoal", "primary_goal", "goal"),
    "secondary_goals": ("secondaryGoals", "secondary_goals"),
    "experience": ("experienceYears", "experience_years", "experience"),
    "location": ("trainingLocation", "training_location", "location"),
    "injuries": ("injuries",),
    "bench_press": ("benchmarkBenchPress", "benchmark_bench_press"),
    "shoulder_press": ("benchmarkShoulderPress", "benchmark_shoulder_press"),
    "deadlift": ("benchmarkDeadlift", "benchmark_deadlift"),
    "squat": ("benchmarkSquat", "benchmark_squat"),
    "pull_ups": ("benchmarkPullups", "benchmark_pullups", "benchmark_pull_ups"),
    "display_name": ("displayName", "display_name", "name"),
}

# Checked in order; the first goal with a matching keyword wins
GOAL_KEYWORDS: tuple[tuple[FitnessGoal, tuple[str, ...]], ...] = (
    (FitnessGoal.STRENGTH, ("fuerza", "strength")),
    (FitnessGoal.DEFINITION, ("defin", "grasa", "fat", "cut", "lean")),
    (FitnessGoal.ENDURANCE, ("resist", "endurance")),
)

LEVEL_KEYWORDS: tuple[tuple[ExperienceLevel, tuple[str, ...]], ...] = (
    (ExperienceLevel.BEGINNER, ("beginner", "principiante", "less than", "menos", "0", "1")),
    (ExperienceLevel.INTERMEDIATE, ("3-5", "intermedi")),
    (ExperienceLevel.ADVANCED, ("5+", "+5", "advanced", "avanzado", "expert", "experto")),
)

# Most restrictive location first
LOCATION_KEYWORDS: tuple[tuple[TrainingLocation, tuple[str, ...]], ...] = (
    (TrainingLocation.BODYWEIGHT, ("bodyweight", "peso corporal", "sin equipo", "calistenia")),
    (TrainingLocation.MINIMAL, ("minimal", "minimo")),
    (TrainingLocation.HOME, ("casa", "home")),
)

# Nested sets: gym ⊇ home ⊇ minimal ⊇ bodyweight
EQUIPMENT_BY_LOCATION: dict[TrainingLocation, frozenset[EquipmentType]] = {
    TrainingLocation.GYM: frozenset(EquipmentType),
    TrainingLocation.HOME: frozenset(
        {EquipmentType.DUMBBELL, EquipmentType.BODYWEIGHT, EquipmentType.BARBELL}
    ),
    TrainingLocation.MINIMAL: frozenset({EquipmentType.DUMBBELL, EquipmentType.BODYWEIGHT}),
    TrainingLocation.BODYWEIGHT: frozenset({EquipmentType.BODYWEIGHT}),
}

_ARMS = (MuscleGroup.BICEPS, MuscleGroup.TRICEPS)
_LEGS = (MuscleGroup.LEGS_QUAD, MuscleGroup.LEGS_HAM)

INJURY_KEYWORDS: dict[str, tuple[MuscleGroup, ...]] = {
    "shoulder": (MuscleGroup.SHOULDERS,),
    "hombro": (MuscleGroup.SHOULDERS,),
    "back": (MuscleGroup.BACK,),
    "espalda": (MuscleGroup.BACK,),
    "knee": _LEGS,
    "rodilla": _LEGS,
    "elbow": _ARMS,
    "codo": _ARMS,
    "wrist": _ARMS,
    "muñeca": _ARMS,
}

NO_INJURY_ANSWERS = frozenset({"none", "ninguna", "ninguno", "no", "n/a"})

_NUMBER_RE = re.compile(r"-?\d+(?:[.,]\d+)?")


def _lookup(raw: Mapping, key: str):
    for alias in FIELD_ALIASES[key]:
        value = raw.get(alias)
        if value is not None:
            return value
    return None


def _to_str(value) -> str:
    # str() refuses ints past the interpreter's digit limit
    try:
        return str(value)
    except ValueError:
        return ""


def _as_text(value) -> str:
    """Join list values and lower-case, so keyword matching sees one string."""
    if value is None:
        return ""
    if isinstance(value, (list, tuple, set, frozenset)):
        return " ".join(_to_str(item) for item in value if item is not None).lower()
    return _to_str(value).lower()


def parse_days_per_week(value) -> int:
    """Largest integer found in the frequency text, clamped to [3, 6]."""
    # Runs longer than three digits cannot be a day count
    numbers = [int(n) for n in re.findall(r"\d+", _as_text(value)) if len(n) <= 3]
    days = max(numbers) if numbers else DEFAULT_DAYS_PER_WEEK
    return min(MAX_DAYS_PER_WEEK, max(MIN_DAYS_PER_WEEK, days))


def detect_goal(primary, secondary=None) -> FitnessGoal:
    text = f"{_as_text(primary)} {_as_text(secondary)}"
    for goal, keywords in GOAL_KEYWORDS:
        if any(keyword in text for keyword in keywords):
            return goal
    return FitnessGoal.HYPERTROPHY


def detect_level(experience) -> ExperienceLevel:
    """Experience level from free text such as "Menos de 1 año" or "5+ years"."""
    text = _as_text(experience)
    if not text:
        return ExperienceLevel.INTERMEDIATE
    for level, keywords in LEVEL_KEYWORDS:
        if any(keyword in text for keyword in keywords):
            return level
    return ExperienceLevel.INTERMEDIATE


def detect_location(location) -> TrainingLocation:
    text = strip_accents(_as_text(location))
    for candidate, keywords in LOCATION_KEYWORDS:
        if any(keyword in text for keyword in keywords):
            return candidate
    return TrainingLocation.GYM


def detect_injured_muscles(injuries) -> frozenset[MuscleGroup]:
    """Muscle groups to leave out, from free-text injury notes."""
    text = strip_accents(_as_text(injuries)).strip()
    if not text or text in NO_INJURY_ANSWERS:
        return frozenset()

    injured: set[MuscleGroup] = set()
    for keyword, muscles in INJURY_KEYWORDS.items():
        if strip_accents(keyword) in text:
            injured.update(muscles)
    return frozenset(injured)


def parse_benchmark(value) -> float | None:
    """Parse a lift benchmark such as 80, "80 kg" or "80,5".

    Returns None for missing, unparsable or non-positive values.
    """
    if value is None or isinstance(value, bool):
        return None

    try:
        if isinstance(value, (int, float)):
            number = float(value)
        else:
            match = _NUMBER_RE.search(_to_str(value))
            if match is None:
                return None
            number = float(match.group().replace(",", "."))
    except (OverflowError, ValueError):
        logger.debug("Unreadable benchmark value of type %s", type(value).__name__)
        return None

    if not math.isfinite(number) or number <= 0:
        return None
    return number


def normalize_profile(raw) -> CanonicalProfile:
    """Build the canonical profile for a raw profile mapping.

    ``None`` or a non-mapping input is treated as an empty profile.
    """
    if not isinstance(raw, Mapping):
        if raw is not None:
            logger.warning("Ignoring profile of type %s", type(raw).__name__)
        raw = {}

    location = detect_location(_lookup(raw, "location"))
    display_name = _lookup(raw, "display_name")

    profile = CanonicalProfile(
        level=detect_level(_lookup(raw, "experience")),
        goal=detect_goal(_lookup(raw, "primary_goal"), _lookup(raw, "secondary_goals")),
        days_per_week=parse_days_per_week(_lookup(raw, "frequency")),
        location=location,
        allowed_equipment=EQUIPMENT_BY_LOCATION[location],
        excluded_muscle_groups=detect_injured_muscles(_lookup(raw, "injuries")),
        benchmarks=Benchmarks(
            bench_press=parse_benchmark(_lookup(raw, "bench_press")),
            shoulder_press=parse_benchmark(_lookup(raw, "shoulder_press")),
            deadlift=parse_benchmark(_lookup(raw, "deadlift")),
            squat=parse_benchmark(_lookup(raw, "squat")),
            pull_ups=parse_benchmark(_lookup(raw, "pull_ups")),
        ),
        display_name=_to_str(display_name).strip() if display_name is not None else "",
    )
    logger.debug(
        "Normalized profile: level=%s goal=%s days=%d location=%s",
        profile.level.value,
        profile.goal.value,
        profile.days_per_week,
        profile.location.value,
    )
    return profile
