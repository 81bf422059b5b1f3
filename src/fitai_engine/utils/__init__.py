"""Utility functions for fitai-engine."""

from .documents import sanitize_document
from .exercise_utils import find_matching_exercise, is_lower_body_exercise, normalize_exercise_name

__all__ = [
    "find_matching_exercise",
    "is_lower_body_exercise",
    "normalize_exercise_name",
    "sanitize_document",
]
