"""
Application-layer exceptions.

These exceptions are used across application, infrastructure and API layers.
Each carries a stable ``code`` and the HTTP status the API maps it to.
"""


class WorkoutStoreError(Exception):
    """Unexpected failure while talking to the workout store.

    Base class for every workout error. Raised directly for store
    failures that are neither connectivity problems nor lookups
    (write errors, constraint violations, a document vanishing
    between insert and re-fetch).
    """

    code = "internal"
    status_code = 500

    def __init__(self, message: str = "Workout store operation failed"):
        super().__init__(message)
        self.message = message


class WorkoutNotFoundError(WorkoutStoreError):
    """No workout exists with the requested id."""

    code = "not_found"
    status_code = 404

    def __init__(self, workout_id: str):
        super().__init__(f"Workout {workout_id} not found")
        self.workout_id = workout_id


class InvalidWorkoutIdError(WorkoutStoreError):
    """The supplied id is not a valid ObjectId."""

    code = "invalid"
    status_code = 400

    def __init__(self, workout_id: str):
        super().__init__(f"Invalid workout id '{workout_id}'")
        self.workout_id = workout_id


class StoreUnavailableError(WorkoutStoreError):
    """The store could not be reached or timed out."""

    code = "store_unavailable"
    status_code = 503

    def __init__(self, message: str = "Workout store unavailable"):
        super().__init__(message)


class StoreConnectionError(WorkoutStoreError):
    """Connecting to the store at startup failed.

    Fatal: the application lifespan re-raises it so the server exits.
    """

    code = "store_unavailable"
    status_code = 503
