"""Workout service: the one writer of the session cache.

Every mutation goes to the record store first and is then mirrored into the
in-memory cache of ``workout id -> ordered sets``. Toggling a set is applied
locally and persisted without re-reading; anything unexpected (a set missing
from the cache, an update that hits no row) falls back to a full reload so the
cache always converges on what the store holds.
"""
from __future__ import annotations
import datetime
import logging
from typing import Callable, Optional

from workout_log.errors import CacheDivergence, StorageError
from workout_log.repositories import WriteResult
from workout_log.schemas import SetRead, WorkoutDraft, WorkoutRead, day_key
from workout_log.services.progress import completion_percent, completion_ratio
from workout_log.store import RecordStore

log = logging.getLogger(__name__)

Listener = Callable[[], None]


class WorkoutService:
    def __init__(self, store: RecordStore, *, selected_date: Optional[str] = None) -> None:
        self._store = store
        self._selected_date = selected_date or day_key(datetime.date.today())
        self._workouts: list[WorkoutRead] = []
        self._cache: dict[int, list[SetRead]] = {}
        self._reload_seq = 0
        # Bumped whenever a cache entry changes outside reload()
        self._mutation_seq = 0
        self._revision = 0
        self._listeners: list[Listener] = []

    # READS
    @property
    def selected_date(self) -> str:
        return self._selected_date

    @property
    def workouts(self) -> list[WorkoutRead]:
        return list(self._workouts)

    @property
    def revision(self) -> int:
        return self._revision

    def has_cached(self, workout_id: int) -> bool:
        return workout_id in self._cache

    def sets_for(self, workout_id: int) -> list[SetRead]:
        return list(self._cache.get(workout_id, []))

    async def load_sets(self, workout_id: int) -> list[SetRead]:
        """Cached set list for a workout, fetching it first if the cache lacks it."""
        return list(await self._ensure_cached(workout_id))

    async def get_workout(self, workout_id: int) -> Optional[WorkoutRead]:
        for workout in self._workouts:
            if workout.id == workout_id:
                return workout
        return await self._store.get_workout(workout_id)

    def progress_for_workout(self, workout_id: int) -> float:
        return completion_ratio(self._cache.get(workout_id))

    def total_completion_for_selected_date(self) -> int:
        # Only the day's workouts count, not entries lazily cached for other days
        return completion_percent(self._cache.get(w.id, []) for w in self._workouts)

    # CHANGE NOTIFICATION
    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        self._revision += 1
        for listener in list(self._listeners):
            try:
                listener()
            except Exception:
                log.exception("change listener %r failed", listener)

    # MUTATIONS
    async def select_date(self, day: datetime.date | str) -> None:
        self._selected_date = day if isinstance(day, str) else day_key(day)
        await self.reload()

    async def reload(self) -> None:
        """Rebuild the workout list and the whole cache for the selected date.

        Results are applied only if no newer reload started meanwhile and the
        selected date is still the one that was loaded. If a set was toggled
        or an entry installed while fetching, the fetch is repeated so nothing
        read before that write ends up in the cache.
        """
        self._reload_seq += 1
        token = self._reload_seq
        day = self._selected_date

        while True:
            mark = self._mutation_seq
            workouts = await self._store.list_workouts_by_date(day)
            cache: dict[int, list[SetRead]] = {}
            for workout in workouts:
                cache[workout.id] = await self._store.list_sets_by_workout(workout.id)

            if token != self._reload_seq or day != self._selected_date:
                log.debug("discarding stale reload for %s", day)
                return
            if mark == self._mutation_seq:
                break
            log.debug("cache changed during reload for %s; fetching again", day)
        self._workouts = workouts
        self._cache = cache
        self._notify()

    async def add_workout(self, draft: WorkoutDraft) -> WorkoutRead:
        if draft.sets <= 0:
            # Accepted as-is: the workout gets no sets and stays at 0% forever
            log.warning("creating workout %r on %s with no sets (sets=%s)", draft.name, draft.date, draft.sets)
        workout_id = await self._store.create_workout(draft)
        await self.reload()
        return WorkoutRead(id=workout_id, **draft.model_dump())

    async def delete_workout(self, workout_id: int) -> WriteResult:
        result = await self._store.delete_workout(workout_id)
        await self.reload()
        return result

    async def toggle_set_done(self, workout_id: int, set_id: int, done: bool) -> None:
        sets = await self._ensure_cached(workout_id)
        try:
            target = self._locate(sets, workout_id, set_id)
        except CacheDivergence as exc:
            log.warning("%s; reloading", exc)
            await self.reload()
            return

        previous = target.done
        target.done = done
        try:
            result = await self._store.update_set(target)
        except StorageError:
            target.done = previous
            raise
        finally:
            self._mutation_seq += 1

        if result is WriteResult.not_found:
            log.warning("set %s of workout %s no longer stored; reloading", set_id, workout_id)
            await self.reload()
            return
        self._notify()

    async def _ensure_cached(self, workout_id: int) -> list[SetRead]:
        sets = self._cache.get(workout_id)
        if sets is None:
            sets = await self._store.list_sets_by_workout(workout_id)
            # An empty list is indistinguishable from an unknown workout; keep it out
            if sets:
                self._cache[workout_id] = sets
                self._mutation_seq += 1
        return sets

    @staticmethod
    def _locate(sets: list[SetRead], workout_id: int, set_id: int) -> SetRead:
        for workout_set in sets:
            if workout_set.id == set_id:
                return workout_set
        raise CacheDivergence(workout_id, set_id)
