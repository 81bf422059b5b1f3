"""Cold-start load suggestions from self-reported benchmarks."""

import math

from ..models.exercises import EquipmentType, ExerciseKind, ExerciseRecord, MuscleGroup
from ..models.user_profile import Benchmarks, FitnessGoal

LOAD_STEP = 2.5
MIN_SUGGESTED_LOAD = 5.0

# Fractions of the bench press used for arm work
BICEPS_BENCH_RATIO = 0.25
TRICEPS_BENCH_RATIO = 0.35

# (strength, other goals)
BASE_PERCENTAGES: dict[ExerciseKind, tuple[float, float]] = {
    ExerciseKind.COMPOUND: (0.8, 0.7),
    ExerciseKind.ISOLATION: (0.5, 0.4),
}

# Relative to a barbell; dumbbell loads are per hand
EQUIPMENT_FACTORS: dict[EquipmentType, float] = {
    EquipmentType.BARBELL: 1.0,
    EquipmentType.SMITH_MACHINE: 1.0,
    EquipmentType.DUMBBELL: 0.6,
    EquipmentType.CABLE: 0.5,
    EquipmentType.MACHINE: 0.7,
    EquipmentType.BODYWEIGHT: 0.0,
}


def _round_half_up(value: float) -> float:
    return float(math.floor(value + 0.5))


def benchmark_for_muscle(muscle_group: MuscleGroup, benchmarks: Benchmarks) -> float | None:
    """Reference lift for a muscle group, or None if the user gave none."""
    if muscle_group == MuscleGroup.CHEST:
        return benchmarks.bench_press
    if muscle_group == MuscleGroup.SHOULDERS:
        return benchmarks.shoulder_press
    if muscle_group in (MuscleGroup.BACK, MuscleGroup.LEGS_HAM):
        return benchmarks.deadlift
    if muscle_group == MuscleGroup.LEGS_QUAD:
        return benchmarks.squat
    if muscle_group == MuscleGroup.BICEPS and benchmarks.bench_press:
        return _round_half_up(benchmarks.bench_press * BICEPS_BENCH_RATIO)
    if muscle_group == MuscleGroup.TRICEPS and benchmarks.bench_press:
        return _round_half_up(benchmarks.bench_press * TRICEPS_BENCH_RATIO)
    return None


def suggest_starting_weight(
    record: ExerciseRecord,
    benchmarks: Benchmarks,
    goal: FitnessGoal,
) -> float | None:
    """Starting load for an exercise the user has never logged.

    Returns None when there is no benchmark for the muscle group or the
    result is too light to be worth prescribing.
    """
    benchmark = benchmark_for_muscle(record.muscle_group, benchmarks)
    if not benchmark or benchmark <= 0:
        return None

    strength, other = BASE_PERCENTAGES[record.kind]
    percentage = strength if goal == FitnessGoal.STRENGTH else other
    raw = benchmark * percentage * EQUIPMENT_FACTORS[record.equipment]

    # Floor to the load step; rounding to 6 places absorbs float noise like 54.99999
    suggested = math.floor(round(raw / LOAD_STEP, 6)) * LOAD_STEP
    if suggested < MIN_SUGGESTED_LOAD:
        return None
    return suggested


def format_weight(value: float) -> str:
    """Display form of a load, e.g. 52.5 -> "52.5kg", 60.0 -> "60kg"."""
    return f"{value:g}kg"
