from workout_log.models.workout import Workout
from workout_log.models.workout_set import WorkoutSet

__all__ = ["Workout", "WorkoutSet"]
