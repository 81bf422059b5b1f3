"""Workout logging and load suggestion routes."""

from fastapi import APIRouter, Query

from ...db.repositories import ProfileRepository, WorkoutRepository
from ...models.user_profile import FitnessGoal
from ...services.overload import OverloadService
from ...services.profile_normalizer import normalize_profile
from ..schemas import WorkoutIn

router = APIRouter(prefix="/users/{user_id}", tags=["progress"])


@router.post("/workouts", status_code=201)
async def log_workout(user_id: str, workout: WorkoutIn):
    """Store a completed workout session."""
    session = workout.to_session(user_id)
    session_id = await WorkoutRepository().create(session)
    return {"id": session_id, "session": session.to_dict()}


@router.get("/workouts")
async def list_workouts(user_id: str, limit: int = Query(20, ge=1, le=200)):
    """Most recent sessions, newest first."""
    sessions = await WorkoutRepository().list_for_user(user_id, limit=limit)
    return [{"id": s.id, **s.to_dict()} for s in sessions]


@router.get("/suggestions")
async def get_suggestions(
    user_id: str,
    exercise: list[str] = Query(...),
    goal: FitnessGoal | None = None,
    timeout: float | None = Query(None, gt=0),
):
    """Next-session load for each requested exercise.

    The goal defaults to the one in the user's stored profile. Lookups run
    concurrently; a failed or timed-out lookup only affects its exercise.
    """
    if goal is None:
        raw = await ProfileRepository().get(user_id)
        goal = normalize_profile(raw).goal

    service = OverloadService(WorkoutRepository())
    results = await service.suggest_for_workout(user_id, exercise, goal, timeout=timeout)

    return {
        "user_id": user_id,
        "goal": goal.value,
        "suggestions": {name: result.to_dict() for name, result in results.items()},
    }
