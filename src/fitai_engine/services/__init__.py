"""Routine generation and progressive overload services."""

from .exercise_selector import ExerciseSelector, SelectedExercise
from .overload import (
    ExerciseHistoryReader,
    OverloadService,
    ProgressiveOverloadAnalyzer,
    summarize_exercise_history,
)
from .profile_normalizer import normalize_profile
from .routine_generator import RoutineGenerator, generate_routine
from .splits import SPLIT_TEMPLATES, DayTemplate, SplitTemplate, select_split
from .weight_recommender import format_weight, suggest_starting_weight

__all__ = [
    "DayTemplate",
    "ExerciseHistoryReader",
    "ExerciseSelector",
    "OverloadService",
    "ProgressiveOverloadAnalyzer",
    "RoutineGenerator",
    "SPLIT_TEMPLATES",
    "SelectedExercise",
    "SplitTemplate",
    "format_weight",
    "generate_routine",
    "normalize_profile",
    "select_split",
    "suggest_starting_weight",
    "summarize_exercise_history",
]
