"""
Application-layer exceptions.

Plan generation never raises for data-shape reasons; these exceptions
cover catalog construction and the plan editing path.
"""


class CatalogIntegrityError(Exception):
    """The exercise catalog data is inconsistent (e.g. duplicate ids)."""

    pass


class PlanEditError(Exception):
    """Base class for errors while editing an existing plan."""

    pass


class SessionNotFoundError(PlanEditError):
    """No session with the requested id exists in the plan."""

    def __init__(self, session_id: str):
        self.session_id = session_id
        super().__init__(f"Session '{session_id}' not found in plan")


class PrescriptionNotFoundError(PlanEditError):
    """The session does not prescribe the requested exercise."""

    def __init__(self, session_id: str, exercise_id: str):
        self.session_id = session_id
        self.exercise_id = exercise_id
        super().__init__(
            f"Exercise '{exercise_id}' is not prescribed in session '{session_id}'"
        )
