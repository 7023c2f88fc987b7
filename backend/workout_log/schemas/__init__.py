from workout_log.schemas.day import DayOverview, DaySelect
from workout_log.schemas.workout import (
    WorkoutCreate,
    WorkoutDraft,
    WorkoutProgress,
    WorkoutRead,
    day_key,
)
from workout_log.schemas.workout_set import SetRead, SetUpdate

__all__ = [
    "DayOverview",
    "DaySelect",
    "SetRead",
    "SetUpdate",
    "WorkoutCreate",
    "WorkoutDraft",
    "WorkoutProgress",
    "WorkoutRead",
    "day_key",
]
