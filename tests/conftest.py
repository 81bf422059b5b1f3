"""Pytest configuration and fixtures."""

import random
import tempfile
from datetime import datetime, timedelta
from pathlib import Path

import pytest

from fitai_engine.data.catalog import ExerciseCatalog
from fitai_engine.models.exercises import (
    EquipmentType,
    ExerciseKind,
    ExerciseRecord,
    IntensityTechnique,
    MuscleGroup,
)
from fitai_engine.models.progress import ExerciseHistoryPoint


def make_record(
    id: str,
    muscle_group: MuscleGroup = MuscleGroup.CHEST,
    equipment: EquipmentType = EquipmentType.BARBELL,
    kind: ExerciseKind = ExerciseKind.COMPOUND,
    default_sets: int = 4,
    default_reps: str = "12-10-8",
    techniques=(),
    curated: bool = False,
    notes: str = "Nota.",
) -> ExerciseRecord:
    """Build a catalog record with test defaults."""
    return ExerciseRecord(
        id=id,
        name=id.replace("_", " ").title(),
        muscle_group=muscle_group,
        equipment=equipment,
        kind=kind,
        default_sets=default_sets,
        default_reps=default_reps,
        techniques=frozenset(techniques),
        curated=curated,
        notes=notes,
    )


def make_history(*weights: float, start: datetime | None = None) -> list[ExerciseHistoryPoint]:
    """One history point per weight, a day apart, oldest first."""
    start = start or datetime(2026, 1, 1, 18, 0)
    return [
        ExerciseHistoryPoint(date=start + timedelta(days=i), max_weight=w, total_volume=w * 10, set_count=3)
        for i, w in enumerate(weights)
    ]


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
def data_dir(monkeypatch):
    """Point FITAI_DATA_DIR at a temporary directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        monkeypatch.setenv("FITAI_DATA_DIR", tmpdir)
        yield Path(tmpdir)


@pytest.fixture
def rng():
    """Seeded random source."""
    return random.Random(1234)


@pytest.fixture
def small_catalog():
    """A synthetic catalog covering every muscle group.

    Chest has barbell, dumbbell and machine options; back has only cable and
    machine work so home profiles must relax the equipment filter.
    """
    records = [
        make_record("chest_bb_press"),
        make_record("chest_db_press", equipment=EquipmentType.DUMBBELL),
        make_record(
            "chest_machine_fly",
            equipment=EquipmentType.MACHINE,
            kind=ExerciseKind.ISOLATION,
            techniques=[IntensityTechnique.DROPSET],
        ),
        make_record("chest_pushup", equipment=EquipmentType.BODYWEIGHT),
        make_record("back_cable_row", MuscleGroup.BACK, EquipmentType.CABLE),
        make_record("back_machine_row", MuscleGroup.BACK, EquipmentType.MACHINE),
        make_record(
            "back_pulldown",
            MuscleGroup.BACK,
            EquipmentType.CABLE,
            ExerciseKind.ISOLATION,
        ),
        make_record("shoulders_db_press", MuscleGroup.SHOULDERS, EquipmentType.DUMBBELL),
        make_record(
            "shoulders_lateral",
            MuscleGroup.SHOULDERS,
            EquipmentType.DUMBBELL,
            ExerciseKind.ISOLATION,
        ),
        make_record("quad_squat", MuscleGroup.LEGS_QUAD, EquipmentType.BARBELL),
        make_record("quad_goblet", MuscleGroup.LEGS_QUAD, EquipmentType.DUMBBELL),
        make_record(
            "quad_extension",
            MuscleGroup.LEGS_QUAD,
            EquipmentType.MACHINE,
            ExerciseKind.ISOLATION,
        ),
        make_record("ham_rdl", MuscleGroup.LEGS_HAM, EquipmentType.BARBELL),
        make_record(
            "ham_curl",
            MuscleGroup.LEGS_HAM,
            EquipmentType.MACHINE,
            ExerciseKind.ISOLATION,
        ),
        make_record(
            "biceps_curl",
            MuscleGroup.BICEPS,
            EquipmentType.BARBELL,
            ExerciseKind.ISOLATION,
        ),
        make_record(
            "biceps_hammer",
            MuscleGroup.BICEPS,
            EquipmentType.DUMBBELL,
            ExerciseKind.ISOLATION,
        ),
        make_record(
            "triceps_pushdown",
            MuscleGroup.TRICEPS,
            EquipmentType.CABLE,
            ExerciseKind.ISOLATION,
        ),
        make_record(
            "triceps_overhead",
            MuscleGroup.TRICEPS,
            EquipmentType.DUMBBELL,
            ExerciseKind.ISOLATION,
        ),
        make_record("core_plank", MuscleGroup.CORE, EquipmentType.BODYWEIGHT, ExerciseKind.ISOLATION),
        make_record("core_leg_raise", MuscleGroup.CORE, EquipmentType.BODYWEIGHT, ExerciseKind.ISOLATION),
        make_record("core_crunch_cable", MuscleGroup.CORE, EquipmentType.CABLE, ExerciseKind.ISOLATION),
        make_record("core_twist", MuscleGroup.CORE, EquipmentType.DUMBBELL, ExerciseKind.ISOLATION),
    ]
    return ExerciseCatalog(records)
