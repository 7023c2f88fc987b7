import re

import pytest
from sqlalchemy import event, text
from sqlalchemy.exc import OperationalError

from workout_log.errors import StorageError
from workout_log.repositories import WriteResult
from workout_log.schemas import SetRead
from workout_log.store import RecordStore

DAY = "2026-03-02"
OTHER_DAY = "2026-03-03"


async def count_rows(store, table, where=""):
    async with store.engine.connect() as conn:
        return (await conn.execute(text(f"SELECT COUNT(*) FROM {table} {where}"))).scalar_one()


@pytest.mark.asyncio
@pytest.mark.parametrize("n", [0, 1, 5])
async def test_create_workout_creates_indexed_sets(store, make_draft, n):
    wid = await store.create_workout(make_draft(sets=n, reps=8))
    sets = await store.list_sets_by_workout(wid)
    assert [s.set_index for s in sets] == list(range(n))
    assert all(s.workout_id == wid and s.reps == 8 and s.done is False for s in sets)


@pytest.mark.asyncio
async def test_create_workout_is_all_or_nothing(store, make_draft):
    def fail_on_set_insert(conn, cursor, statement, parameters, context, executemany):
        if re.match(r'\s*INSERT INTO "?sets"?[\s(]', statement, re.IGNORECASE):
            raise OperationalError(statement, parameters, Exception("disk I/O error"))

    event.listen(store.engine.sync_engine, "before_cursor_execute", fail_on_set_insert)
    try:
        with pytest.raises(StorageError):
            await store.create_workout(make_draft(sets=3))
    finally:
        event.remove(store.engine.sync_engine, "before_cursor_execute", fail_on_set_insert)

    assert await store.list_workouts_by_date(DAY) == []
    assert await count_rows(store, "workouts") == 0
    assert await count_rows(store, "sets") == 0

    # Store still usable afterwards
    wid = await store.create_workout(make_draft(sets=2))
    assert len(await store.list_sets_by_workout(wid)) == 2


@pytest.mark.asyncio
async def test_list_workouts_by_date_newest_first_and_scoped(store, make_draft):
    first = await store.create_workout(make_draft("Squat"))
    second = await store.create_workout(make_draft("Bench"))
    other = await store.create_workout(make_draft("Run", day=OTHER_DAY))

    assert [w.id for w in await store.list_workouts_by_date(DAY)] == [second, first]
    assert [w.id for w in await store.list_workouts_by_date(OTHER_DAY)] == [other]
    assert await store.list_workouts_by_date("2026-03-04") == []


@pytest.mark.asyncio
async def test_create_workout_trims_text(store, make_draft):
    wid = await store.create_workout(make_draft("  Deadlift  ", comment="  heavy day "))
    w = await store.get_workout(wid)
    assert (w.name, w.comment, w.date) == ("Deadlift", "heavy day", DAY)


@pytest.mark.asyncio
async def test_list_sets_for_unknown_workout_is_empty(store):
    assert await store.list_sets_by_workout(424242) == []


@pytest.mark.asyncio
async def test_update_set_persists_and_reports_missing(store, make_draft):
    wid = await store.create_workout(make_draft(sets=2))
    s = (await store.list_sets_by_workout(wid))[1]
    s.done = True
    assert await store.update_set(s) is WriteResult.applied
    assert [x.done for x in await store.list_sets_by_workout(wid)] == [False, True]

    ghost = SetRead(id=999999, workout_id=wid, set_index=0, reps=1, done=True)
    assert await store.update_set(ghost) is WriteResult.not_found


@pytest.mark.asyncio
async def test_delete_workout_cascades_to_sets(store, make_draft):
    wid = await store.create_workout(make_draft(sets=3))
    keep = await store.create_workout(make_draft("Bench", sets=2))

    assert await store.delete_workout(wid) is WriteResult.applied
    assert await store.get_workout(wid) is None
    assert await store.list_sets_by_workout(wid) == []
    assert await count_rows(store, "sets", f'WHERE "workoutId" = {wid}') == 0
    assert len(await store.list_sets_by_workout(keep)) == 2

    assert await store.delete_workout(wid) is WriteResult.not_found


@pytest.mark.asyncio
async def test_unreachable_database_raises_storage_error(tmp_path):
    broken = RecordStore(f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'x.db'}")
    with pytest.raises(StorageError):
        await broken.list_workouts_by_date(DAY)
