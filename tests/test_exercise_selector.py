"""Tests for exercise selection."""

import random

from conftest import make_record

from fitai_engine.data.catalog import ExerciseCatalog
from fitai_engine.models.exercises import (
    EquipmentType,
    ExerciseKind,
    IntensityTechnique,
    MuscleGroup,
)
from fitai_engine.models.user_profile import CanonicalProfile, ExperienceLevel, TrainingLocation
from fitai_engine.services.exercise_selector import WARMUP_PREFIX, ExerciseSelector
from fitai_engine.services.profile_normalizer import EQUIPMENT_BY_LOCATION
from fitai_engine.services.splits import DayTemplate


def home_profile(**kwargs) -> CanonicalProfile:
    return CanonicalProfile(
        location=TrainingLocation.HOME,
        allowed_equipment=EQUIPMENT_BY_LOCATION[TrainingLocation.HOME],
        **kwargs,
    )


class TestExercisesPerMuscle:
    """Tests for the per-muscle count."""

    def test_counts(self):
        """Test single-muscle days get two extra, crowded days one fewer."""
        per_muscle = ExerciseSelector.exercises_per_muscle

        assert per_muscle(ExperienceLevel.INTERMEDIATE, 1) == 5
        assert per_muscle(ExperienceLevel.INTERMEDIATE, 2) == 3
        assert per_muscle(ExperienceLevel.INTERMEDIATE, 3) == 2
        assert per_muscle(ExperienceLevel.ADVANCED, 4) == 3
        assert per_muscle(ExperienceLevel.BEGINNER, 3) == 2


class TestSelectForMuscle:
    """Tests for select_for_muscle."""

    def test_injured_muscle_skipped(self, small_catalog, rng):
        """Test excluded muscle groups yield nothing."""
        selector = ExerciseSelector(small_catalog, rng)
        profile = CanonicalProfile(excluded_muscle_groups=frozenset({MuscleGroup.CHEST}))

        assert selector.select_for_muscle(MuscleGroup.CHEST, 3, set(), profile) == []

    def test_respects_equipment(self, small_catalog):
        """Test only allowed equipment is used when the pool is big enough."""
        profile = home_profile()
        for seed in range(20):
            selector = ExerciseSelector(small_catalog, random.Random(seed))
            picked = selector.select_for_muscle(MuscleGroup.CHEST, 3, set(), profile)

            assert picked
            assert all(s.record.equipment in profile.allowed_equipment for s in picked)
            assert not any(s.relaxed for s in picked)

    def test_used_ids_updated_and_never_repeated(self, small_catalog, rng):
        """Test selections are added to used_ids and not picked again."""
        selector = ExerciseSelector(small_catalog, rng)
        used: set[str] = set()
        profile = CanonicalProfile()

        first = selector.select_for_muscle(MuscleGroup.CHEST, 2, used, profile)
        second = selector.select_for_muscle(MuscleGroup.CHEST, 5, used, profile)

        first_ids = {s.id for s in first}
        second_ids = {s.id for s in second}
        assert first_ids <= used
        assert not first_ids & second_ids
        assert len(first) + len(second) == 4

    def test_equipment_relaxed_when_pool_empty(self, small_catalog, rng):
        """Test back work is still prescribed at home, flagged as relaxed."""
        selector = ExerciseSelector(small_catalog, rng)

        picked = selector.select_for_muscle(MuscleGroup.BACK, 2, set(), home_profile())

        assert len(picked) == 2
        assert all(s.relaxed for s in picked)

    def test_relaxation_keeps_dedup(self, small_catalog, rng):
        """Test relaxing equipment never reuses an exercise."""
        selector = ExerciseSelector(small_catalog, rng)
        used = {"back_cable_row", "back_machine_row", "back_pulldown"}

        assert selector.select_for_muscle(MuscleGroup.BACK, 2, used, home_profile()) == []

    def test_lead_compound_gets_warmup_note(self, small_catalog, rng):
        """Test intermediate selections start with a compound and warm-up note."""
        selector = ExerciseSelector(small_catalog, rng)

        picked = selector.select_for_muscle(MuscleGroup.CHEST, 3, set(), CanonicalProfile())

        assert picked[0].record.kind == ExerciseKind.COMPOUND
        assert picked[0].notes.startswith(WARMUP_PREFIX)
        assert all(not s.notes.startswith(WARMUP_PREFIX) for s in picked[1:])

    def test_advanced_has_no_warmup_lead(self, small_catalog):
        """Test advanced users skip the lead compound draw."""
        profile = CanonicalProfile(level=ExperienceLevel.ADVANCED)
        for seed in range(10):
            selector = ExerciseSelector(small_catalog, random.Random(seed))
            picked = selector.select_for_muscle(MuscleGroup.CHEST, 4, set(), profile)

            assert not any(s.notes.startswith(WARMUP_PREFIX) for s in picked)

    def test_curated_compound_drawn_more_often(self):
        """Test curated compounds win the lead draw about twice as often."""
        catalog = ExerciseCatalog(
            [
                make_record("plain_press"),
                make_record("coach_press", curated=True),
            ]
        )
        selector = ExerciseSelector(catalog, random.Random(7))
        leads = [
            selector.select_for_muscle(MuscleGroup.CHEST, 1, set(), CanonicalProfile())[0].id
            for _ in range(600)
        ]

        assert 330 < leads.count("coach_press") < 470

    def test_curated_fill_drawn_more_often(self):
        """Test curated records are favoured in fill slots too, at advanced level."""
        catalog = ExerciseCatalog(
            [make_record("coach_fly", kind=ExerciseKind.ISOLATION, curated=True)]
            + [make_record(f"fly_{i}", kind=ExerciseKind.ISOLATION) for i in range(9)]
        )
        selector = ExerciseSelector(catalog, random.Random(11))
        profile = CanonicalProfile(level=ExperienceLevel.ADVANCED)

        hits = sum(
            "coach_fly" in {s.id for s in selector.select_for_muscle(MuscleGroup.CHEST, 2, set(), profile)}
            for _ in range(2000)
        )

        # Weight 2 of 11 without replacement gives about 0.345; uniform is 0.2
        assert 600 < hits < 780

    def test_beginner_avoids_dropsets_when_possible(self):
        """Test beginners get technique-free records first."""
        catalog = ExerciseCatalog(
            [
                make_record("press"),
                make_record("fly_plain", kind=ExerciseKind.ISOLATION),
                make_record(
                    "fly_dropset",
                    kind=ExerciseKind.ISOLATION,
                    techniques=[IntensityTechnique.DROPSET],
                ),
                make_record(
                    "fly_superset",
                    kind=ExerciseKind.ISOLATION,
                    techniques=[IntensityTechnique.SUPERSET],
                ),
            ]
        )
        profile = CanonicalProfile(level=ExperienceLevel.BEGINNER)
        for seed in range(20):
            selector = ExerciseSelector(catalog, random.Random(seed))
            picked = selector.select_for_muscle(MuscleGroup.CHEST, 2, set(), profile)

            assert [s.id for s in picked] == ["press", "fly_plain"]

    def test_deterministic_with_seed(self, small_catalog):
        """Test the same seed gives the same picks."""
        first = ExerciseSelector(small_catalog, random.Random(5)).select_for_muscle(
            MuscleGroup.CHEST, 3, set(), CanonicalProfile()
        )
        second = ExerciseSelector(small_catalog, random.Random(5)).select_for_muscle(
            MuscleGroup.CHEST, 3, set(), CanonicalProfile()
        )

        assert [s.id for s in first] == [s.id for s in second]


class TestSelectForDay:
    """Tests for day selection."""

    def test_day_in_template_order(self, small_catalog, rng):
        """Test muscle groups appear in template order."""
        selector = ExerciseSelector(small_catalog, rng)
        day = DayTemplate("Día 1", "Tracción", (MuscleGroup.BACK, MuscleGroup.BICEPS))

        picked = selector.select_for_day(day, set(), CanonicalProfile())
        groups = [s.record.muscle_group for s in picked]

        assert groups == sorted(groups, key=[MuscleGroup.BACK, MuscleGroup.BICEPS].index)
        assert groups.count(MuscleGroup.BICEPS) == 2


class TestCoreCircuit:
    """Tests for the core circuit."""

    def test_prefers_allowed_equipment(self, small_catalog, rng):
        """Test a bodyweight profile gets bodyweight core work when possible."""
        selector = ExerciseSelector(small_catalog, rng)
        profile = CanonicalProfile(allowed_equipment=frozenset({EquipmentType.BODYWEIGHT, EquipmentType.DUMBBELL}))

        circuit = selector.select_core_circuit(profile)

        assert len(circuit) == 3
        assert all(r.equipment in profile.allowed_equipment for r in circuit)

    def test_falls_back_to_whole_pool(self, small_catalog, rng):
        """Test the circuit still has three exercises if few match."""
        selector = ExerciseSelector(small_catalog, rng)
        profile = CanonicalProfile(allowed_equipment=frozenset({EquipmentType.BODYWEIGHT}))

        circuit = selector.select_core_circuit(profile)

        assert len(circuit) == 3
        assert len({r.id for r in circuit}) == 3
