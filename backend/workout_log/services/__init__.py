from workout_log.services.progress import completion_percent, completion_ratio
from workout_log.services.workout_service import WorkoutService

__all__ = ["WorkoutService", "completion_percent", "completion_ratio"]
