# workout_log/deps/service.py
from fastapi import Request

from workout_log.services import WorkoutService
from workout_log.store import RecordStore

# Both are built once in the app lifespan and kept on app.state
def get_service(request: Request) -> WorkoutService:
    return request.app.state.workout_service

def get_store(request: Request) -> RecordStore:
    return request.app.state.record_store
