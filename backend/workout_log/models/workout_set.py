from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import Integer
from workout_log.db import Base

class WorkoutSet(Base):
    __tablename__ = "sets"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    # No FOREIGN KEY: the store deletes sets before their workout
    workout_id: Mapped[int] = mapped_column("workoutId", Integer)
    set_index: Mapped[int] = mapped_column("setIndex", Integer)
    reps: Mapped[int] = mapped_column(Integer)
    done: Mapped[int] = mapped_column(Integer, default=0)  # 0 / 1
