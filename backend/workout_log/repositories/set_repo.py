from __future__ import annotations
from sqlalchemy import delete, select, update
from workout_log.models import WorkoutSet
from workout_log.repositories.base import BaseRepository, WriteResult

class SetRepository(BaseRepository[WorkoutSet]):
    model = WorkoutSet

    # READS
    async def list_by_workout(self, workout_id: int) -> list[WorkoutSet]:
        stmt = select(WorkoutSet).where(WorkoutSet.workout_id == workout_id)\
                                 .order_by(WorkoutSet.set_index.asc())
        return list((await self.db.execute(stmt)).scalars().all())

    # WRITES
    async def create_for_workout(self, workout_id: int, *, count: int, reps: int) -> list[WorkoutSet]:
        rows = [
            WorkoutSet(workout_id=workout_id, set_index=i, reps=reps, done=0)
            for i in range(count)
        ]
        self.db.add_all(rows)
        await self.db.flush()
        return rows

    async def update(self, set_id: int, *, workout_id: int, set_index: int, reps: int, done: bool) -> WriteResult:
        stmt = (
            update(WorkoutSet)
            .where(WorkoutSet.id == set_id)
            .values(workout_id=workout_id, set_index=set_index, reps=reps, done=int(done))
            .execution_options(synchronize_session=False)
        )
        result = await self.db.execute(stmt)
        return WriteResult.from_rowcount(result.rowcount)

    async def delete_by_workout(self, workout_id: int) -> int:
        stmt = delete(WorkoutSet).where(WorkoutSet.workout_id == workout_id)\
                                 .execution_options(synchronize_session=False)
        result = await self.db.execute(stmt)
        return result.rowcount
