"""Error types shared by the record store and the workout service."""


class StorageError(Exception):
    """Raised when the durable store fails (I/O, constraint, driver errors).

    The enclosing transaction has already been rolled back when this is raised.
    """

    pass


class CacheDivergence(Exception):
    """Raised when a cached set list lacks a set id the caller expects.

    Never leaves the workout service: it is healed by a full reload.

    Attributes:
        workout_id: Workout whose cached list was searched
        set_id: Set id that was not found
    """

    def __init__(self, workout_id: int, set_id: int) -> None:
        self.workout_id = workout_id
        self.set_id = set_id
        super().__init__(f"set {set_id} missing from cached sets of workout {workout_id}")
