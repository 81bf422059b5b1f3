"""Request bodies for the HTTP API."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from ..models.progress import LoggedExercise, LoggedSet, WorkoutSession


class GenerateRequest(BaseModel):
    """A raw profile to generate a routine from, without storing anything."""

    profile: dict[str, Any] = Field(default_factory=dict)
    seed: int | None = None


class SeedRequest(BaseModel):
    seed: int | None = None


class LoggedSetIn(BaseModel):
    weight: float = Field(ge=0)
    reps: int = Field(ge=0)


class LoggedExerciseIn(BaseModel):
    name: str = Field(min_length=1)
    sets: list[LoggedSetIn] = Field(min_length=1)


class WorkoutIn(BaseModel):
    """A completed session; ``started_at`` defaults to now."""

    started_at: datetime | None = None
    exercises: list[LoggedExerciseIn] = Field(min_length=1)

    def to_session(self, user_id: str) -> WorkoutSession:
        return WorkoutSession(
            user_id=user_id,
            started_at=self.started_at or datetime.now(),
            exercises=[
                LoggedExercise(
                    name=ex.name,
                    sets=[LoggedSet(weight=s.weight, reps=s.reps) for s in ex.sets],
                )
                for ex in self.exercises
            ],
        )
