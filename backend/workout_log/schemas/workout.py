import datetime
from typing import Annotated
from pydantic import BaseModel, Field, StringConstraints

# Calendar days are opaque yyyy-mm-dd keys compared by string equality
DayKey = Annotated[str, StringConstraints(pattern=r"^\d{4}-\d{2}-\d{2}$")]
NameStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
CommentStr = Annotated[str, StringConstraints(strip_whitespace=True)]
Count = Annotated[int, Field(ge=0)]

def day_key(day: datetime.date) -> str:
    return f"{day.year:04d}-{day.month:02d}-{day.day:02d}"

class WorkoutDraft(BaseModel):
    """A workout ready to be persisted; the day is already resolved to a key."""
    date: DayKey
    name: NameStr
    sets: int
    reps: int
    comment: CommentStr = ""

class WorkoutCreate(BaseModel):
    # Omitted date means "the currently selected day"
    date: datetime.date | None = None
    name: NameStr
    sets: Count
    reps: Count
    comment: CommentStr = ""

    def to_draft(self, default_day: str) -> WorkoutDraft:
        day = day_key(self.date) if self.date else default_day
        return WorkoutDraft(date=day, name=self.name, sets=self.sets, reps=self.reps, comment=self.comment)

class WorkoutRead(BaseModel):
    id: int
    date: str
    name: str
    sets: int
    reps: int
    comment: str = ""

    model_config = {"from_attributes": True}

class WorkoutProgress(BaseModel):
    workout_id: int
    progress: float
