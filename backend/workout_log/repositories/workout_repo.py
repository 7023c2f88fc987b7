# workout_log/repositories/workout_repo.py
from __future__ import annotations

from sqlalchemy import delete, select

from workout_log.models import Workout
from workout_log.repositories.base import BaseRepository, WriteResult
from workout_log.repositories.set_repo import SetRepository

class WorkoutRepository(BaseRepository[Workout]):
    model = Workout

    # READS
    async def list_by_date(self, day: str) -> list[Workout]:
        # Newest first so fresh entries surface at the top of the day
        stmt = select(Workout).where(Workout.date == day).order_by(Workout.id.desc())
        return list((await self.db.execute(stmt)).scalars().all())

    # WRITES
    async def create_with_sets(self, *, date: str, name: str, sets: int, reps: int, comment: str) -> Workout:
        """Insert the workout row and one set row per target set.

        Must run inside a single transaction; the caller rolls back on failure.
        """
        workout = await self.add_and_flush(
            Workout(date=date, name=name, sets=sets, reps=reps, comment=comment)
        )
        await SetRepository(self.db).create_for_workout(workout.id, count=sets, reps=reps)
        return workout

    async def delete_cascade(self, workout_id: int) -> WriteResult:
        # Children first: nothing in the schema would clean up orphans
        await SetRepository(self.db).delete_by_workout(workout_id)
        stmt = delete(Workout).where(Workout.id == workout_id)\
                              .execution_options(synchronize_session=False)
        result = await self.db.execute(stmt)
        return WriteResult.from_rowcount(result.rowcount)
