"""Workout history and load recommendation models."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import ClassVar


@dataclass
class LoggedSet:
    """One performed set."""

    weight: float
    reps: int

    def to_dict(self) -> dict:
        return {"weight": self.weight, "reps": self.reps}


@dataclass
class LoggedExercise:
    """All sets performed for one exercise in a session."""

    name: str
    sets: list[LoggedSet] = field(default_factory=list)

    @property
    def max_weight(self) -> float:
        return max((s.weight for s in self.sets), default=0.0)

    @property
    def total_volume(self) -> float:
        return sum(s.weight * s.reps for s in self.sets)

    def to_dict(self) -> dict:
        return {"name": self.name, "sets": [s.to_dict() for s in self.sets]}


@dataclass
class WorkoutSession:
    """A completed workout session as logged by the user."""

    user_id: str
    started_at: datetime
    exercises: list[LoggedExercise]
    id: int | None = None

    def __post_init__(self):
        # Sessions compare by start time, so keep every timestamp naive local time
        if self.started_at.tzinfo is not None:
            self.started_at = self.started_at.astimezone().replace(tzinfo=None)

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "user_id": self.user_id,
            "started_at": self.started_at.isoformat(),
            "exercises": [ex.to_dict() for ex in self.exercises],
        }

    @classmethod
    def from_dict(cls, data: dict, id: int | None = None) -> "WorkoutSession":
        """Create from dictionary."""
        return cls(
            id=id,
            user_id=data["user_id"],
            started_at=datetime.fromisoformat(data["started_at"]),
            exercises=[
                LoggedExercise(
                    name=ex["name"],
                    sets=[
                        LoggedSet(weight=float(s.get("weight") or 0), reps=int(s.get("reps") or 0))
                        for s in ex.get("sets", [])
                    ],
                )
                for ex in data.get("exercises", [])
            ],
        )


@dataclass(frozen=True)
class ExerciseHistoryPoint:
    """Per-session summary of one exercise."""

    date: datetime
    max_weight: float
    total_volume: float = 0.0
    set_count: int = 0

    def to_dict(self) -> dict:
        return {
            "date": self.date.isoformat(),
            "max_weight": self.max_weight,
            "total_volume": self.total_volume,
            "set_count": self.set_count,
        }


class Trend(str, Enum):
    """Direction reported alongside a load suggestion."""

    UP = "up"
    STALLED = "stalled"
    STABLE = "stable"


class OverloadState(str, Enum):
    """States of the per-exercise overload machine."""

    NO_DATA = "no_data"
    STALLED = "stalled"
    PROGRESSING = "progressing"


@dataclass(frozen=True)
class NoHistory:
    """Nothing usable to base a suggestion on."""

    state: ClassVar[OverloadState] = OverloadState.NO_DATA
    trend: ClassVar[Trend] = Trend.STABLE
    confidence: ClassVar[float] = 0.0

    reason: str = "no prior history"

    @property
    def suggestion(self) -> float | None:
        return None

    def to_dict(self) -> dict:
        return _suggestion_dict(self, action=None)


@dataclass(frozen=True)
class Stalled:
    """The same top weight three sessions running."""

    state: ClassVar[OverloadState] = OverloadState.STALLED
    trend: ClassVar[Trend] = Trend.STALLED
    confidence: ClassVar[float] = 0.9
    action: ClassVar[str] = "change_technique"

    weight: float
    reason: str = "plateau detected"
    advice: str = "Vary the intensity technique or the exercise order."

    @property
    def suggestion(self) -> float:
        return self.weight

    def to_dict(self) -> dict:
        data = _suggestion_dict(self, action=self.action)
        data["advice"] = self.advice
        return data


@dataclass(frozen=True)
class Progressing:
    """Add load on top of the last session."""

    state: ClassVar[OverloadState] = OverloadState.PROGRESSING
    trend: ClassVar[Trend] = Trend.UP
    confidence: ClassVar[float] = 0.85

    last_weight: float
    increment: float

    @property
    def suggestion(self) -> float:
        return self.last_weight + self.increment

    @property
    def reason(self) -> str:
        return f"progressive overload: +{self.increment:g}kg over the last session"

    def to_dict(self) -> dict:
        return _suggestion_dict(self, action=None)


OverloadSuggestion = NoHistory | Stalled | Progressing


def _suggestion_dict(result: OverloadSuggestion, action: str | None) -> dict:
    return {
        "state": result.state.value,
        "suggestion": result.suggestion,
        "reason": result.reason,
        "confidence": result.confidence,
        "trend": result.trend.value,
        "action": action,
    }
