from workout_log.repositories.base import BaseRepository, WriteResult
from workout_log.repositories.set_repo import SetRepository
from workout_log.repositories.workout_repo import WorkoutRepository

__all__ = ["BaseRepository", "SetRepository", "WorkoutRepository", "WriteResult"]
