from pydantic import BaseModel

class SetRead(BaseModel):
    id: int
    workout_id: int
    set_index: int
    reps: int
    done: bool = False

    model_config = {"from_attributes": True}

class SetUpdate(BaseModel):
    done: bool
