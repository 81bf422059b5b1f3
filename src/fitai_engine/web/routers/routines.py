"""Routine generation routes."""

import random
from typing import Any

from fastapi import APIRouter, Body, HTTPException

from ...db.repositories import ProfileRepository, RoutineRepository
from ...services.profile_normalizer import normalize_profile
from ...services.routine_generator import RoutineGenerator
from ..schemas import GenerateRequest, SeedRequest

router = APIRouter(tags=["routines"])


@router.post("/routines/generate")
async def generate_routine(request: GenerateRequest):
    """Generate a routine from a raw profile. Nothing is stored."""
    generator = RoutineGenerator(rng=random.Random(request.seed))
    routine = generator.generate(request.profile)
    return routine.to_document()


@router.put("/users/{user_id}/profile")
async def save_profile(user_id: str, raw: dict[str, Any] = Body(...)):
    """Create or replace a user's raw profile."""
    repo = ProfileRepository()
    await repo.upsert(user_id, raw)
    return {
        "user_id": user_id,
        "profile": raw,
        "normalized": normalize_profile(raw).to_dict(),
    }


@router.get("/users/{user_id}/profile")
async def get_profile(user_id: str):
    """A user's stored profile and how the generator reads it."""
    raw = await ProfileRepository().get(user_id)
    if raw is None:
        raise HTTPException(status_code=404, detail="Profile not found")

    return {
        "user_id": user_id,
        "profile": raw,
        "normalized": normalize_profile(raw).to_dict(),
    }


@router.post("/users/{user_id}/routines", status_code=201)
async def create_routine(user_id: str, request: SeedRequest | None = None):
    """Generate a routine from the stored profile and save it."""
    raw = await ProfileRepository().get(user_id)
    if raw is None:
        raise HTTPException(status_code=404, detail="Profile not found")

    seed = request.seed if request else None
    routine = RoutineGenerator(rng=random.Random(seed)).generate(raw)
    routine_id = await RoutineRepository().create(user_id, routine)

    return {"id": routine_id, "routine": routine.to_document()}


@router.get("/users/{user_id}/routines")
async def list_routines(user_id: str):
    """A user's routines, newest first."""
    routines = await RoutineRepository().list_for_user(user_id)
    return [
        {
            "id": routine.id,
            "title": routine.title,
            "days_per_week": routine.days_per_week,
            "goal": routine.goal.value,
            "generated_at": routine.generated_at.isoformat() if routine.generated_at else None,
        }
        for routine in routines
    ]


@router.get("/routines/{routine_id}")
async def get_routine(routine_id: int):
    """A stored routine document."""
    document = await RoutineRepository().get_document(routine_id)
    if document is None:
        raise HTTPException(status_code=404, detail="Routine not found")
    return {"id": routine_id, "routine": document}
