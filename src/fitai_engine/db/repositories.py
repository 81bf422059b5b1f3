"""Data access layer for fitai-engine."""

import json
from pathlib import Path

import aiosqlite

from ..models.program import GeneratedRoutine
from ..models.progress import ExerciseHistoryPoint, WorkoutSession
from ..models.user_profile import Benchmarks
from ..services.overload import summarize_exercise_history
from ..services.profile_normalizer import normalize_profile
from .engine import get_db_path

# Sessions scanned when building an exercise history
HISTORY_SESSION_LIMIT = 50


class ProfileRepository:
    """Repository for raw user profiles."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def upsert(self, user_id: str, raw: dict) -> None:
        """Create or replace a user's raw profile."""
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                INSERT INTO profiles (user_id, data) VALUES (?, ?)
                ON CONFLICT(user_id) DO UPDATE SET
                    data = excluded.data,
                    updated_at = CURRENT_TIMESTAMP
                """,
                (user_id, json.dumps(raw, ensure_ascii=False)),
            )
            await db.commit()

    async def get(self, user_id: str) -> dict | None:
        """Get a user's raw profile."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT data FROM profiles WHERE user_id = ?", (user_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return json.loads(row["data"])

    async def get_benchmarks(self, user_id: str) -> Benchmarks:
        """Parsed benchmarks for a user (empty if there is no profile)."""
        raw = await self.get(user_id)
        return normalize_profile(raw).benchmarks

    async def list_user_ids(self) -> list[str]:
        """All user ids with a stored profile."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute("SELECT user_id FROM profiles ORDER BY user_id")
            rows = await cursor.fetchall()
            return [row[0] for row in rows]

    async def delete(self, user_id: str) -> None:
        """Delete a user's profile."""
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute("DELETE FROM profiles WHERE user_id = ?", (user_id,))
            await db.commit()


class RoutineRepository:
    """Repository for generated routines."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def create(self, user_id: str, routine: GeneratedRoutine) -> int:
        """Store a routine and return its id."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                "INSERT INTO routines (user_id, title, document) VALUES (?, ?, ?)",
                (
                    user_id,
                    routine.title,
                    json.dumps(routine.to_document(), ensure_ascii=False),
                ),
            )
            await db.commit()
            routine.id = cursor.lastrowid
            return cursor.lastrowid

    async def get(self, routine_id: int) -> GeneratedRoutine | None:
        """Get a routine by ID."""
        document = await self.get_document(routine_id)
        if document is None:
            return None
        return GeneratedRoutine.from_dict(document, id=routine_id)

    async def get_document(self, routine_id: int) -> dict | None:
        """Get the stored document of a routine, as saved."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT document FROM routines WHERE id = ?", (routine_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return json.loads(row["document"])

    async def get_owner(self, routine_id: int) -> str | None:
        """User id a routine belongs to."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                "SELECT user_id FROM routines WHERE id = ?", (routine_id,)
            )
            row = await cursor.fetchone()
            return row[0] if row else None

    async def list_for_user(self, user_id: str) -> list[GeneratedRoutine]:
        """List a user's routines, newest first."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT id, document FROM routines WHERE user_id = ? ORDER BY id DESC",
                (user_id,),
            )
            rows = await cursor.fetchall()
            return [
                GeneratedRoutine.from_dict(json.loads(row["document"]), id=row["id"])
                for row in rows
            ]

    async def delete(self, routine_id: int) -> None:
        """Delete a routine."""
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute("DELETE FROM routines WHERE id = ?", (routine_id,))
            await db.commit()


class WorkoutRepository:
    """Repository for logged workout sessions.

    Also serves as the exercise history reader for the overload service.
    """

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def create(self, session: WorkoutSession) -> int:
        """Store a logged session."""
        if not session.user_id:
            raise ValueError("Workout session must have a user ID")

        data = session.to_dict()
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                "INSERT INTO workouts (user_id, started_at, exercises) VALUES (?, ?, ?)",
                (
                    data["user_id"],
                    data["started_at"],
                    json.dumps(data["exercises"], ensure_ascii=False),
                ),
            )
            await db.commit()
            session.id = cursor.lastrowid
            return cursor.lastrowid

    async def list_for_user(
        self, user_id: str, limit: int = HISTORY_SESSION_LIMIT
    ) -> list[WorkoutSession]:
        """Most recent sessions for a user, newest first."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                """
                SELECT * FROM workouts
                WHERE user_id = ?
                ORDER BY started_at DESC
                LIMIT ?
                """,
                (user_id, limit),
            )
            rows = await cursor.fetchall()
            return [self._row_to_session(row) for row in rows]

    async def get_exercise_history(
        self, user_id: str, exercise_name: str
    ) -> list[ExerciseHistoryPoint]:
        """Per-session history of one exercise, oldest first."""
        sessions = await self.list_for_user(user_id)
        return summarize_exercise_history(sessions, exercise_name)

    def _row_to_session(self, row: aiosqlite.Row) -> WorkoutSession:
        """Convert a database row to a WorkoutSession."""
        data = {
            "user_id": row["user_id"],
            "started_at": row["started_at"],
            "exercises": json.loads(row["exercises"]),
        }
        return WorkoutSession.from_dict(data, id=row["id"])
