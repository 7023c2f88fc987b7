import datetime
from pydantic import BaseModel
from workout_log.schemas.workout import WorkoutRead

class DaySelect(BaseModel):
    date: datetime.date

class DayOverview(BaseModel):
    date: str
    workouts: list[WorkoutRead]
    completion_percent: int
    # Bumped on every change notification; clients re-render when it moves
    revision: int
