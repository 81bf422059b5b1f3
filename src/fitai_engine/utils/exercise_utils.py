"""Utilities for exercise name normalization and matching."""

import re
import unicodedata
from collections.abc import Iterable
from difflib import SequenceMatcher

from ..models.exercises import ExerciseRecord

# Keywords that mark a lower-body lift (English and Spanish)
LOWER_BODY_KEYWORDS = (
    "squat",
    "leg",
    "deadlift",
    "lunge",
    "sentadilla",
    "pierna",
    "peso muerto",
    "zancada",
    "estocada",
    "prensa",
)

# Substrings that rule out a lower-body match, e.g. "press de hombro"
UPPER_BODY_KEYWORDS = (
    "hombro",
    "banca",
    "militar",
    "shoulder",
    "bench",
)


def strip_accents(text: str) -> str:
    """Remove combining accents, keeping the base letters."""
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def normalize_exercise_name(name: str) -> str:
    """Normalize an exercise name for comparison.

    Lowercases, strips accents and punctuation, and collapses whitespace so
    that "Press Inclinado 35°" and "press inclinado 35" compare equal.
    """
    normalized = strip_accents(name).lower().strip()
    normalized = re.sub(r"[^\w\s]", " ", normalized)
    normalized = re.sub(r"\s+", " ", normalized)
    return normalized.strip()


def find_matching_exercise(
    name: str,
    exercises: Iterable[ExerciseRecord],
    threshold: float = 0.8,
) -> ExerciseRecord | None:
    """Find the best matching exercise for a free-text name.

    Args:
        name: The exercise name to match
        exercises: Records to search
        threshold: Minimum similarity ratio (0-1) to consider a match

    Returns:
        The best matching record or None if no match above threshold
    """
    normalized_name = normalize_exercise_name(name)
    if not normalized_name:
        return None

    best_match: ExerciseRecord | None = None
    best_score = 0.0

    for exercise in exercises:
        candidate = normalize_exercise_name(exercise.name)
        if candidate == normalized_name or exercise.id == normalized_name.replace(" ", "_"):
            return exercise

        score = SequenceMatcher(None, normalized_name, candidate).ratio()
        if score > best_score:
            best_score = score
            best_match = exercise

    if best_score >= threshold:
        return best_match

    return None


def is_lower_body_exercise(name: str) -> bool:
    """Whether a lift name refers to a lower-body movement.

    Lower-body lifts progress in larger steps. Names mentioning a shoulder or
    bench movement never count, even if they contain "leg" or "prensa".
    """
    normalized = normalize_exercise_name(name or "")
    if any(keyword in normalized for keyword in UPPER_BODY_KEYWORDS):
        return False
    return any(keyword in normalized for keyword in LOWER_BODY_KEYWORDS)
