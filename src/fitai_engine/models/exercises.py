"""Exercise definitions and metadata."""

from dataclasses import dataclass, field
from enum import Enum


class MuscleGroup(str, Enum):
    """Muscle groups a catalog exercise can target."""

    CHEST = "chest"
    BACK = "back"
    SHOULDERS = "shoulders"
    LEGS_QUAD = "legs_quad"  # Knee-dominant leg work
    LEGS_HAM = "legs_ham"  # Hip-dominant leg work (hamstrings, glutes)
    BICEPS = "biceps"
    TRICEPS = "triceps"
    CORE = "core"


class EquipmentType(str, Enum):
    """Equipment classes for exercises."""

    BARBELL = "barbell"
    DUMBBELL = "dumbbell"
    CABLE = "cable"
    MACHINE = "machine"
    SMITH_MACHINE = "smith_machine"  # Guided-bar machine
    BODYWEIGHT = "bodyweight"


class ExerciseKind(str, Enum):
    """Joint involvement of an exercise."""

    COMPOUND = "compound"  # Multi-joint
    ISOLATION = "isolation"  # Single-joint


class IntensityTechnique(str, Enum):
    """Intensity techniques an exercise supports."""

    DROPSET = "dropset"
    PYRAMID = "pyramid"
    SUPERSET = "superset"
    ISOMETRIC = "isometric"


# Display labels used in generated routines
MUSCLE_GROUP_LABELS: dict[MuscleGroup, str] = {
    MuscleGroup.CHEST: "Pectoral",
    MuscleGroup.BACK: "Dorsal",
    MuscleGroup.SHOULDERS: "Hombros",
    MuscleGroup.LEGS_QUAD: "Cuádriceps",
    MuscleGroup.LEGS_HAM: "Isquiotibiales",
    MuscleGroup.BICEPS: "Bíceps",
    MuscleGroup.TRICEPS: "Tríceps",
    MuscleGroup.CORE: "Core",
}

EQUIPMENT_LABELS: dict[EquipmentType, str] = {
    EquipmentType.BARBELL: "Barra",
    EquipmentType.DUMBBELL: "Mancuernas",
    EquipmentType.CABLE: "Polea",
    EquipmentType.MACHINE: "Máquina",
    EquipmentType.SMITH_MACHINE: "Smith Machine",
    EquipmentType.BODYWEIGHT: "Peso corporal",
}


@dataclass(frozen=True)
class ExerciseRecord:
    """A curated catalog exercise.

    Records are immutable; the catalog is read-only while routines are
    generated.
    """

    id: str
    name: str
    muscle_group: MuscleGroup
    equipment: EquipmentType
    kind: ExerciseKind
    default_sets: int
    default_reps: str  # Scheme text, e.g. "12-10-8", shown verbatim
    techniques: frozenset[IntensityTechnique] = field(default_factory=frozenset)
    curated: bool = False  # Hand-picked by an elite coach
    notes: str = ""
    secondary_muscle_group: MuscleGroup | None = None

    def __post_init__(self):
        if self.default_sets < 1:
            raise ValueError(f"{self.id}: default_sets must be >= 1")

    @property
    def is_compound(self) -> bool:
        return self.kind == ExerciseKind.COMPOUND

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "id": self.id,
            "name": self.name,
            "muscle_group": self.muscle_group.value,
            "secondary_muscle_group": (
                self.secondary_muscle_group.value if self.secondary_muscle_group else None
            ),
            "equipment": self.equipment.value,
            "kind": self.kind.value,
            "default_sets": self.default_sets,
            "default_reps": self.default_reps,
            "techniques": sorted(t.value for t in self.techniques),
            "curated": self.curated,
            "notes": self.notes,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ExerciseRecord":
        """Create from dictionary."""
        secondary = data.get("secondary_muscle_group")
        return cls(
            id=data["id"],
            name=data["name"],
            muscle_group=MuscleGroup(data["muscle_group"]),
            secondary_muscle_group=MuscleGroup(secondary) if secondary else None,
            equipment=EquipmentType(data["equipment"]),
            kind=ExerciseKind(data["kind"]),
            default_sets=int(data["default_sets"]),
            default_reps=str(data["default_reps"]),
            techniques=frozenset(IntensityTechnique(t) for t in data.get("techniques", [])),
            curated=data.get("curated", False),
            notes=data.get("notes", ""),
        )
