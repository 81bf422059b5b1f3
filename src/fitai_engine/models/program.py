"""Generated routine data models."""

from dataclasses import dataclass, field
from datetime import datetime

from ..utils.documents import sanitize_document
from .exercises import EQUIPMENT_LABELS, EquipmentType, IntensityTechnique, MuscleGroup
from .user_profile import ExperienceLevel, FitnessGoal


@dataclass(frozen=True)
class GoalSettings:
    """Prescription adjustments for a training goal."""

    name: str
    sets_modifier: int
    rest: str
    intensity_focus: IntensityTechnique
    description: str
    progression_tips: str


@dataclass(frozen=True)
class LevelSettings:
    """Selection preferences for an experience level."""

    name: str
    exercises_per_muscle: int
    prefer_compound: bool
    avoid_techniques: frozenset[IntensityTechnique]
    notes: str


GOAL_CONFIG: dict[FitnessGoal, GoalSettings] = {
    FitnessGoal.HYPERTROPHY: GoalSettings(
        name="Hipertrofia",
        sets_modifier=0,
        rest="90s",
        intensity_focus=IntensityTechnique.DROPSET,
        description="Máximo desarrollo muscular con alto volumen",
        progression_tips=(
            "Sobrecarga progresiva: aumenta peso cuando completes todas las reps "
            "con buena técnica."
        ),
    ),
    FitnessGoal.STRENGTH: GoalSettings(
        name="Fuerza",
        sets_modifier=1,
        rest="2-3 min",
        intensity_focus=IntensityTechnique.PYRAMID,
        description="Desarrollo de fuerza con cargas pesadas",
        progression_tips=(
            "Aumenta peso 2.5-5kg cuando completes todas las reps. "
            "Descansos largos entre series pesadas."
        ),
    ),
    FitnessGoal.DEFINITION: GoalSettings(
        name="Definición",
        sets_modifier=0,
        rest="45-60s",
        intensity_focus=IntensityTechnique.SUPERSET,
        description="Alto gasto calórico manteniendo músculo",
        progression_tips=(
            "Mantén el ritmo alto y descansos cortos. "
            "Prioriza la conexión mente-músculo."
        ),
    ),
    FitnessGoal.ENDURANCE: GoalSettings(
        name="Resistencia",
        sets_modifier=-1,
        rest="30-45s",
        intensity_focus=IntensityTechnique.SUPERSET,
        description="Resistencia muscular y cardiovascular",
        progression_tips=(
            "Aumenta repeticiones o reduce descansos antes de subir el peso."
        ),
    ),
}

LEVEL_CONFIG: dict[ExperienceLevel, LevelSettings] = {
    ExperienceLevel.BEGINNER: LevelSettings(
        name="Principiante",
        exercises_per_muscle=2,
        prefer_compound=True,
        avoid_techniques=frozenset({IntensityTechnique.DROPSET, IntensityTechnique.SUPERSET}),
        notes="Enfócate en la técnica antes de aumentar peso.",
    ),
    ExperienceLevel.INTERMEDIATE: LevelSettings(
        name="Intermedio",
        exercises_per_muscle=3,
        prefer_compound=True,
        avoid_techniques=frozenset(),
        notes="Aplica sobrecarga progresiva cada semana.",
    ),
    ExperienceLevel.ADVANCED: LevelSettings(
        name="Avanzado",
        exercises_per_muscle=4,
        prefer_compound=False,
        avoid_techniques=frozenset(),
        notes="Varía las técnicas de intensidad según sensaciones.",
    ),
}


@dataclass
class PrescribedExercise:
    """An exercise prescription within a generated day."""

    exercise_id: str
    name: str
    sets: int
    reps_scheme: str
    rest_duration: str
    muscle_group: MuscleGroup
    equipment: EquipmentType
    suggested_weight: str | None = None  # e.g. "52.5kg"
    notes: str = ""
    equipment_relaxed: bool = False  # Equipment outside the profile's set

    @property
    def equipment_label(self) -> str:
        return EQUIPMENT_LABELS[self.equipment]

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "exercise_id": self.exercise_id,
            "name": self.name,
            "sets": self.sets,
            "reps_scheme": self.reps_scheme,
            "rest_duration": self.rest_duration,
            "suggested_weight": self.suggested_weight,
            "muscle_group": self.muscle_group.value,
            "equipment": self.equipment.value,
            "equipment_label": self.equipment_label,
            "notes": self.notes,
            "equipment_relaxed": self.equipment_relaxed,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "PrescribedExercise":
        """Create from dictionary."""
        return cls(
            exercise_id=data["exercise_id"],
            name=data["name"],
            sets=data["sets"],
            reps_scheme=data["reps_scheme"],
            rest_duration=data["rest_duration"],
            muscle_group=MuscleGroup(data["muscle_group"]),
            equipment=EquipmentType(data["equipment"]),
            suggested_weight=data.get("suggested_weight"),
            notes=data.get("notes") or "",
            equipment_relaxed=bool(data.get("equipment_relaxed", False)),
        )


@dataclass
class GeneratedDay:
    """A single training day of a generated routine."""

    day: str
    focus: str
    exercises: list[PrescribedExercise]
    core_circuit: list[PrescribedExercise] = field(default_factory=list)
    warmup: str = "5 min cardio ligero + movilidad articular"
    stretching: str = "Estiramiento profundo 30s por grupo."

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "day": self.day,
            "focus": self.focus,
            "warmup": self.warmup,
            "exercises": [ex.to_dict() for ex in self.exercises],
            "core_circuit": [ex.to_dict() for ex in self.core_circuit],
            "stretching": self.stretching,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "GeneratedDay":
        """Create from dictionary."""
        return cls(
            day=data["day"],
            focus=data.get("focus", ""),
            warmup=data.get("warmup", ""),
            exercises=[PrescribedExercise.from_dict(ex) for ex in data["exercises"]],
            core_circuit=[PrescribedExercise.from_dict(ex) for ex in data.get("core_circuit", [])],
            stretching=data.get("stretching", ""),
        )


@dataclass
class GeneratedRoutine:
    """A complete generated training routine."""

    title: str
    description: str
    days_per_week: int
    split_name: str
    goal: FitnessGoal
    level: ExperienceLevel
    days: list[GeneratedDay]
    progression_tips: str = ""
    generated_at: datetime | None = None
    id: int | None = None

    def exercise_ids(self) -> list[str]:
        """Ids of the main exercises, in day order (core circuits excluded)."""
        return [ex.exercise_id for day in self.days for ex in day.exercises]

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "title": self.title,
            "description": self.description,
            "days_per_week": self.days_per_week,
            "split_name": self.split_name,
            "goal": self.goal.value,
            "level": self.level.value,
            "days": [day.to_dict() for day in self.days],
            "progression_tips": self.progression_tips,
            "generated_at": self.generated_at.isoformat() if self.generated_at else None,
        }

    def to_document(self) -> dict:
        """Persistence-safe document (no unsupported or undefined values)."""
        return sanitize_document(self.to_dict())

    @classmethod
    def from_dict(cls, data: dict, id: int | None = None) -> "GeneratedRoutine":
        """Create from dictionary."""
        generated_at = None
        if data.get("generated_at"):
            generated_at = datetime.fromisoformat(data["generated_at"])

        return cls(
            id=id,
            title=data["title"],
            description=data.get("description", ""),
            days_per_week=data["days_per_week"],
            split_name=data.get("split_name", ""),
            goal=FitnessGoal(data["goal"]),
            level=ExperienceLevel(data["level"]),
            days=[GeneratedDay.from_dict(day) for day in data["days"]],
            progression_tips=data.get("progression_tips") or "",
            generated_at=generated_at,
        )

    def get_summary(self) -> str:
        """Generate a summary of the routine."""
        summary = f"Routine: {self.title}\n"
        summary += f"Description: {self.description}\n"
        summary += f"Split: {self.split_name} ({self.days_per_week} days/week)\n\n"

        for day in self.days:
            summary += f"{day.day}"
            if day.focus:
                summary += f" - {day.focus}"
            summary += ":\n"

            for ex in day.exercises:
                line = f"  - {ex.name}: {ex.sets} x {ex.reps_scheme} (rest {ex.rest_duration})"
                if ex.suggested_weight:
                    line += f" @ {ex.suggested_weight}"
                summary += line + "\n"

            if day.core_circuit:
                names = ", ".join(ex.name for ex in day.core_circuit)
                summary += f"  Core: {names}\n"

            summary += "\n"

        if self.progression_tips:
            summary += f"Progression: {self.progression_tips}\n"

        return summary
