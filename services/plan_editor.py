"""
Edits applied to an already generated plan.

Substitution swaps the exercise of one prescription and keeps the
sets/reps/rest fixed at generation time for that slot. The replacement
comes from an external recommender and is trusted as given.
"""

import logging

from application.exceptions import PrescriptionNotFoundError, SessionNotFoundError
from models.exercise import Exercise
from models.plan import Session, WeeklyPlan

logger = logging.getLogger(__name__)


def find_session(plan: WeeklyPlan, session_id: str) -> Session:
    """
    Get a session from the plan by id.

    Raises:
        SessionNotFoundError: If the plan has no such session
    """
    for session in plan.sessions:
        if session.id == session_id:
            return session
    raise SessionNotFoundError(session_id)


def substitute_exercise(
    plan: WeeklyPlan,
    session_id: str,
    original_exercise_id: str,
    replacement: Exercise,
) -> Session:
    """
    Replace one prescribed exercise in place.

    Args:
        plan: Plan to edit (mutated)
        session_id: Session holding the prescription
        original_exercise_id: Exercise currently prescribed
        replacement: Exercise to prescribe instead

    Returns:
        The updated Session

    Raises:
        SessionNotFoundError: If the plan has no such session
        PrescriptionNotFoundError: If the session does not prescribe the exercise
    """
    session = find_session(plan, session_id)

    for index, prescription in enumerate(session.prescriptions):
        if prescription.exercise.id == original_exercise_id:
            session.prescriptions[index] = prescription.model_copy(
                update={"exercise": replacement}
            )
            break
    else:
        raise PrescriptionNotFoundError(session_id, original_exercise_id)

    session.refresh_muscle_groups()
    logger.info(
        f"Substituted {original_exercise_id} with {replacement.id} in session {session_id}"
    )
    return session
