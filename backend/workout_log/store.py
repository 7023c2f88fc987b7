# workout_log/store.py
from __future__ import annotations
import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from workout_log.db import create_schema, make_engine, make_sessionmaker
from workout_log.errors import StorageError
from workout_log.repositories import SetRepository, WorkoutRepository, WriteResult
from workout_log.schemas import SetRead, WorkoutDraft, WorkoutRead

log = logging.getLogger(__name__)

class RecordStore:
    """Durable storage for workouts and their sets.

    Built explicitly and handed to whoever needs it. The engine is created on
    first use and reused until ``close()``; every operation runs in its own
    short transaction. Driver failures surface as ``StorageError``.
    """

    def __init__(self, url: str, *, echo: bool = False):
        self.url = url
        self.echo = echo
        self._engine: Optional[AsyncEngine] = None
        self._sessions: Optional[async_sessionmaker[AsyncSession]] = None
        self._open_lock = asyncio.Lock()

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise RuntimeError("record store is not open")
        return self._engine

    async def open(self) -> None:
        async with self._open_lock:
            if self._engine is not None:
                return
            engine = make_engine(self.url, echo=self.echo)
            try:
                await create_schema(engine)
            except SQLAlchemyError as exc:
                await engine.dispose()
                log.error("could not open record store at %s: %s", self.url, exc)
                raise StorageError(f"could not open record store: {exc}") from exc
            self._engine = engine
            self._sessions = make_sessionmaker(engine)
            log.info("record store opened at %s", self.url)

    async def close(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            self._sessions = None

    @asynccontextmanager
    async def _transaction(self) -> AsyncIterator[AsyncSession]:
        await self.open()
        try:
            async with self._sessions() as db, db.begin():
                yield db
        except SQLAlchemyError as exc:
            log.error("storage failure: %s", exc)
            raise StorageError(str(exc)) from exc

    async def ping(self) -> None:
        async with self._transaction() as db:
            await db.execute(select(1))

    # WORKOUTS
    async def create_workout(self, draft: WorkoutDraft) -> int:
        """Insert a workout and all of its sets as one unit; return its id."""
        async with self._transaction() as db:
            workout = await WorkoutRepository(db).create_with_sets(**draft.model_dump())
            workout_id = workout.id
        log.debug("created workout %s with %s sets on %s", workout_id, draft.sets, draft.date)
        return workout_id

    async def get_workout(self, workout_id: int) -> Optional[WorkoutRead]:
        async with self._transaction() as db:
            workout = await WorkoutRepository(db).get(workout_id)
            return WorkoutRead.model_validate(workout) if workout else None

    async def list_workouts_by_date(self, day: str) -> list[WorkoutRead]:
        async with self._transaction() as db:
            rows = await WorkoutRepository(db).list_by_date(day)
            return [WorkoutRead.model_validate(w) for w in rows]

    async def delete_workout(self, workout_id: int) -> WriteResult:
        async with self._transaction() as db:
            return await WorkoutRepository(db).delete_cascade(workout_id)

    # SETS
    async def list_sets_by_workout(self, workout_id: int) -> list[SetRead]:
        async with self._transaction() as db:
            rows = await SetRepository(db).list_by_workout(workout_id)
            return [SetRead.model_validate(s) for s in rows]

    async def update_set(self, workout_set: SetRead) -> WriteResult:
        """Persist every column of one set, keyed by its id."""
        async with self._transaction() as db:
            return await SetRepository(db).update(
                workout_set.id,
                workout_id=workout_set.workout_id,
                set_index=workout_set.set_index,
                reps=workout_set.reps,
                done=workout_set.done,
            )
