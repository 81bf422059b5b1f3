"""Tests for profile normalization."""

import pytest

from fitai_engine.models.exercises import EquipmentType, MuscleGroup
from fitai_engine.models.user_profile import ExperienceLevel, FitnessGoal, TrainingLocation
from fitai_engine.services.profile_normalizer import (
    detect_goal,
    detect_injured_muscles,
    detect_level,
    detect_location,
    normalize_profile,
    parse_benchmark,
    parse_days_per_week,
)


class TestDaysPerWeek:
    """Tests for frequency parsing."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("4 días", 4),
            ("2-3 días", 3),
            ("1", 3),
            ("10 days", 6),
            (6, 6),
            ("todos los días", 5),
            (None, 5),
        ],
    )
    def test_parse(self, value, expected):
        """Test max integer is taken and clamped to [3, 6]."""
        assert parse_days_per_week(value) == expected

    def test_long_digit_runs_ignored(self):
        """Test digit runs too long to be a day count fall back to the default."""
        assert parse_days_per_week("9" * 5000) == 5
        assert parse_days_per_week("4 días " + "7" * 5000) == 4
        assert parse_days_per_week(10**5000) == 5


class TestGoal:
    """Tests for goal detection."""

    def test_strength_has_priority(self):
        """Test strength wins over every other keyword."""
        assert detect_goal(["Definición", "Fuerza"]) == FitnessGoal.STRENGTH

    def test_secondary_goals_considered(self):
        """Test secondary goals join the primary text."""
        assert detect_goal("Hipertrofia", ["Perder grasa"]) == FitnessGoal.DEFINITION

    def test_english_keywords(self):
        """Test English goal text."""
        assert detect_goal("Build strength") == FitnessGoal.STRENGTH
        assert detect_goal("fat loss") == FitnessGoal.DEFINITION
        assert detect_goal("endurance") == FitnessGoal.ENDURANCE

    def test_default_hypertrophy(self):
        """Test unknown or missing goals fall back to hypertrophy."""
        assert detect_goal("Verme bien") == FitnessGoal.HYPERTROPHY
        assert detect_goal(None) == FitnessGoal.HYPERTROPHY


class TestLevel:
    """Tests for level detection."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Principiante (menos de 1 año)", ExperienceLevel.BEGINNER),
            ("less than a year", ExperienceLevel.BEGINNER),
            ("3-5 años", ExperienceLevel.INTERMEDIATE),
            ("Intermedio", ExperienceLevel.INTERMEDIATE),
            ("5+ años", ExperienceLevel.ADVANCED),
            ("Experto", ExperienceLevel.ADVANCED),
            ("unos cuantos", ExperienceLevel.INTERMEDIATE),
            (None, ExperienceLevel.INTERMEDIATE),
        ],
    )
    def test_detect(self, text, expected):
        """Test level keywords."""
        assert detect_level(text) == expected


class TestLocation:
    """Tests for location detection."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Casa", TrainingLocation.HOME),
            ("Equipo mínimo", TrainingLocation.MINIMAL),
            ("Peso corporal", TrainingLocation.BODYWEIGHT),
            ("Gimnasio", TrainingLocation.GYM),
            (None, TrainingLocation.GYM),
        ],
    )
    def test_detect(self, text, expected):
        """Test location keywords, accent-insensitive."""
        assert detect_location(text) == expected

    def test_equipment_sets_are_nested(self):
        """Test gym ⊇ home ⊇ minimal ⊇ bodyweight."""
        gym = normalize_profile({"trainingLocation": "Gimnasio"}).allowed_equipment
        home = normalize_profile({"trainingLocation": "Casa"}).allowed_equipment
        minimal = normalize_profile({"trainingLocation": "minimal"}).allowed_equipment
        bodyweight = normalize_profile({"trainingLocation": "calistenia"}).allowed_equipment

        assert gym >= home >= minimal >= bodyweight
        assert home == {EquipmentType.DUMBBELL, EquipmentType.BODYWEIGHT, EquipmentType.BARBELL}
        assert bodyweight == {EquipmentType.BODYWEIGHT}


class TestInjuries:
    """Tests for injury keyword matching."""

    def test_union_of_matches(self):
        """Test several injuries combine."""
        injured = detect_injured_muscles("Dolor de hombro y rodilla")

        assert injured == {MuscleGroup.SHOULDERS, MuscleGroup.LEGS_QUAD, MuscleGroup.LEGS_HAM}

    def test_wrist_with_and_without_accent(self):
        """Test muñeca matches with or without the tilde."""
        assert detect_injured_muscles("muñeca") == {MuscleGroup.BICEPS, MuscleGroup.TRICEPS}
        assert detect_injured_muscles("muneca") == {MuscleGroup.BICEPS, MuscleGroup.TRICEPS}

    def test_list_value(self):
        """Test list values are joined."""
        assert detect_injured_muscles(["back pain", "elbow"]) == {
            MuscleGroup.BACK,
            MuscleGroup.BICEPS,
            MuscleGroup.TRICEPS,
        }

    @pytest.mark.parametrize("value", [None, "", "Ninguna", "none", "N/A", "No"])
    def test_none_answers(self, value):
        """Test explicit none answers exclude nothing."""
        assert detect_injured_muscles(value) == frozenset()


class TestBenchmarks:
    """Tests for benchmark parsing."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (80, 80.0),
            ("80", 80.0),
            ("80 kg", 80.0),
            ("80,5", 80.5),
            (0, None),
            ("-10", None),
            ("mucho", None),
            (True, None),
            (None, None),
        ],
    )
    def test_parse(self, value, expected):
        """Test numeric parsing; non-positive values are omitted."""
        assert parse_benchmark(value) == expected

    def test_out_of_range_numbers(self):
        """Test values too large for a float are omitted."""
        assert parse_benchmark(10**400) is None
        assert parse_benchmark("9" * 5000) is None
        assert parse_benchmark(float("inf")) is None


class TestNormalizeProfile:
    """Tests for normalize_profile."""

    def test_scenario_home_strength(self):
        """Test a four-day home strength profile."""
        profile = normalize_profile({"frequency": "4 días", "goal": "fuerza", "location": "casa"})

        assert profile.days_per_week == 4
        assert profile.goal == FitnessGoal.STRENGTH
        assert profile.level == ExperienceLevel.INTERMEDIATE
        assert profile.location == TrainingLocation.HOME
        assert profile.allowed_equipment == {
            EquipmentType.DUMBBELL,
            EquipmentType.BODYWEIGHT,
            EquipmentType.BARBELL,
        }

    def test_camel_case_fields(self):
        """Test the app's camelCase field names."""
        profile = normalize_profile(
            {
                "trainingFrequency": "6",
                "primaryGoal": ["Resistencia"],
                "experienceYears": "Avanzado",
                "injuries": "espalda",
                "benchmarkBenchPress": "100",
                "benchmarkSquat": 140,
                "displayName": " Ana ",
            }
        )

        assert profile.days_per_week == 6
        assert profile.goal == FitnessGoal.ENDURANCE
        assert profile.level == ExperienceLevel.ADVANCED
        assert profile.excluded_muscle_groups == {MuscleGroup.BACK}
        assert profile.benchmarks.bench_press == 100.0
        assert profile.benchmarks.squat == 140.0
        assert profile.benchmarks.deadlift is None
        assert profile.display_name == "Ana"

    @pytest.mark.parametrize(
        "raw",
        [
            None,
            {},
            "not a profile",
            42,
            {"frequency": {"x": 1}},
            {"trainingFrequency": "9" * 5000},
            {"trainingFrequency": 10**5000, "displayName": 10**5000},
            {"benchmarkSquat": 10**400, "benchmarkBenchPress": "9" * 5000},
        ],
    )
    def test_never_raises(self, raw):
        """Test malformed input yields a usable profile."""
        profile = normalize_profile(raw)

        assert 3 <= profile.days_per_week <= 6
        assert profile.allowed_equipment
