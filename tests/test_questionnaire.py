"""Tests for the interactive profile questionnaire."""

import asyncio

import questionary

from fitai_engine.clients.questionnaire import ProfileQuestionnaire
from fitai_engine.models.user_profile import ExperienceLevel, FitnessGoal, TrainingLocation
from fitai_engine.services.profile_normalizer import normalize_profile


class FakeQuestion:
    def __init__(self, answer):
        self.answer = answer

    async def ask_async(self):
        return self.answer


def patch_answers(monkeypatch, *, text, select, checkbox, confirm):
    text_answers = iter(text)
    select_answers = iter(select)
    monkeypatch.setattr(questionary, "text", lambda *a, **kw: FakeQuestion(next(text_answers)))
    monkeypatch.setattr(questionary, "select", lambda *a, **kw: FakeQuestion(next(select_answers)))
    monkeypatch.setattr(questionary, "checkbox", lambda *a, **kw: FakeQuestion(checkbox))
    monkeypatch.setattr(questionary, "confirm", lambda *a, **kw: FakeQuestion(confirm))


class TestProfileQuestionnaire:
    """Tests for ProfileQuestionnaire."""

    def test_answers_normalize(self, monkeypatch):
        """Test questionnaire answers are understood by the normalizer."""
        patch_answers(
            monkeypatch,
            text=["Ana", "", "80", " ", "", "100", ""],
            select=["Avanzado (5+ años)", "4 días", "Mínimo"],
            checkbox=["Fuerza", "Definición"],
            confirm=True,
        )

        raw = asyncio.run(ProfileQuestionnaire().collect_profile())
        profile = normalize_profile(raw)

        assert raw["injuries"] == "Ninguna"
        assert raw["benchmarkBenchPress"] == "80"
        assert "benchmarkShoulderPress" not in raw
        assert profile.level == ExperienceLevel.ADVANCED
        assert profile.goal == FitnessGoal.STRENGTH
        assert profile.days_per_week == 4
        assert profile.location == TrainingLocation.MINIMAL
        assert profile.excluded_muscle_groups == frozenset()
        assert profile.benchmarks.squat == 100.0
        assert profile.display_name == "Ana"

    def test_skip_benchmarks(self, monkeypatch):
        """Test declining benchmarks leaves them out."""
        patch_answers(
            monkeypatch,
            text=["", "rodilla"],
            select=["Principiante (menos de 1 año)", "2-3 días", "Peso corporal"],
            checkbox=[],
            confirm=False,
        )

        raw = asyncio.run(ProfileQuestionnaire().collect_profile())
        profile = normalize_profile(raw)

        assert not any(key.startswith("benchmark") for key in raw)
        assert profile.level == ExperienceLevel.BEGINNER
        assert profile.goal == FitnessGoal.HYPERTROPHY
        assert profile.days_per_week == 3
        assert profile.location == TrainingLocation.BODYWEIGHT
        assert profile.benchmarks.is_empty()
