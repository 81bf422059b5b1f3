"""Data models for fitai-engine."""

from .exercises import EquipmentType, ExerciseKind, ExerciseRecord, IntensityTechnique, MuscleGroup
from .program import GeneratedDay, GeneratedRoutine, PrescribedExercise
from .progress import (
    ExerciseHistoryPoint,
    NoHistory,
    OverloadState,
    OverloadSuggestion,
    Progressing,
    Stalled,
    Trend,
    WorkoutSession,
)
from .user_profile import Benchmarks, CanonicalProfile, ExperienceLevel, FitnessGoal, TrainingLocation

__all__ = [
    "Benchmarks",
    "CanonicalProfile",
    "EquipmentType",
    "ExerciseHistoryPoint",
    "ExerciseKind",
    "ExerciseRecord",
    "ExperienceLevel",
    "FitnessGoal",
    "GeneratedDay",
    "GeneratedRoutine",
    "IntensityTechnique",
    "MuscleGroup",
    "NoHistory",
    "OverloadState",
    "OverloadSuggestion",
    "PrescribedExercise",
    "Progressing",
    "Stalled",
    "TrainingLocation",
    "Trend",
    "WorkoutSession",
]
