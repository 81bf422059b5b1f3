"""User profile data models."""

from dataclasses import dataclass, field
from enum import Enum

from .exercises import EquipmentType, MuscleGroup


class ExperienceLevel(str, Enum):
    """Training experience level."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class FitnessGoal(str, Enum):
    """Primary training goal."""

    HYPERTROPHY = "hypertrophy"  # Muscle size
    STRENGTH = "strength"  # Heavy loads, long rests
    DEFINITION = "definition"  # Fat loss while keeping muscle
    ENDURANCE = "endurance"  # Muscular endurance


class TrainingLocation(str, Enum):
    """Where the user trains, which decides the equipment on hand."""

    GYM = "gym"
    HOME = "home"
    MINIMAL = "minimal"
    BODYWEIGHT = "bodyweight"


@dataclass(frozen=True)
class Benchmarks:
    """Self-reported best lifts, in kg (pull-ups in reps)."""

    bench_press: float | None = None
    shoulder_press: float | None = None
    deadlift: float | None = None
    squat: float | None = None
    pull_ups: float | None = None

    def is_empty(self) -> bool:
        return all(value is None for value in self.to_dict().values())

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "bench_press": self.bench_press,
            "shoulder_press": self.shoulder_press,
            "deadlift": self.deadlift,
            "squat": self.squat,
            "pull_ups": self.pull_ups,
        }


@dataclass(frozen=True)
class CanonicalProfile:
    """Normalized view of a raw user profile.

    Built per request by the profile normalizer and never persisted.
    """

    level: ExperienceLevel = ExperienceLevel.INTERMEDIATE
    goal: FitnessGoal = FitnessGoal.HYPERTROPHY
    days_per_week: int = 5
    location: TrainingLocation = TrainingLocation.GYM
    allowed_equipment: frozenset[EquipmentType] = field(
        default_factory=lambda: frozenset(EquipmentType)
    )
    excluded_muscle_groups: frozenset[MuscleGroup] = field(default_factory=frozenset)
    benchmarks: Benchmarks = field(default_factory=Benchmarks)
    display_name: str = ""

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "level": self.level.value,
            "goal": self.goal.value,
            "days_per_week": self.days_per_week,
            "location": self.location.value,
            "allowed_equipment": sorted(eq.value for eq in self.allowed_equipment),
            "excluded_muscle_groups": sorted(mg.value for mg in self.excluded_muscle_groups),
            "benchmarks": self.benchmarks.to_dict(),
            "display_name": self.display_name,
        }

    def get_summary(self) -> str:
        """Generate a one-screen summary."""
        summary = f"Level: {self.level.value}\n"
        summary += f"Goal: {self.goal.value}\n"
        summary += f"Training days: {self.days_per_week}/week\n"
        summary += f"Location: {self.location.value}\n"
        summary += f"Equipment: {', '.join(sorted(eq.value for eq in self.allowed_equipment))}\n"

        if self.excluded_muscle_groups:
            excluded = ", ".join(sorted(mg.value for mg in self.excluded_muscle_groups))
            summary += f"Avoiding (injuries): {excluded}\n"

        lifts = {k: v for k, v in self.benchmarks.to_dict().items() if v is not None}
        if lifts:
            summary += "Benchmarks:\n"
            for lift, value in lifts.items():
                summary += f"  - {lift}: {value:g}\n"

        return summary
