"""
Session assembler.

Turns one session template into a Session by running each request through
the CandidateSelector and binding the chosen exercises to prescriptions.
"""

import logging
from dataclasses import dataclass
from typing import Collection, List, MutableSet, Optional

from core.constants import PRIORITY_LIFT_IDS
from models.exercise import Equipment, ExperienceLevel
from models.plan import Prescription, Session, SplitRole, muscle_groups_of
from services.candidate_selector import CandidateSelector
from services.session_templates import SessionTemplate, templated_slot_count
from services.style_config import StyleConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionSlot:
    """A session's position in a weekly split."""

    id: str
    name: str
    role: SplitRole


class SessionAssembler:
    """Assembles one session from a template."""

    def __init__(self, selector: CandidateSelector):
        self._selector = selector

    def assemble(
        self,
        slot: SessionSlot,
        template: SessionTemplate,
        config: StyleConfig,
        exclude_ids: MutableSet[str],
        experience_level: ExperienceLevel,
        allowed_equipment: Optional[Collection[Equipment]] = None,
    ) -> Session:
        """
        Build a session, consuming exercise ids from the shared exclusion set.

        Requests are processed in template order. Every chosen exercise id
        is added to `exclude_ids` immediately, so later requests in this
        session and every later session in the week skip it.

        The priority scheme applies only to canonical lifts picked for a
        priority request; a priority request that falls back to an ordinary
        exercise prescribes it by movement type.

        Args:
            slot: Session id, display name and split role
            template: Ordered selection requests
            config: Style prescription schemes
            exclude_ids: Week-wide exclusion set (mutated)
            experience_level: Athlete experience level
            allowed_equipment: Equipment restriction, or None for any

        Returns:
            The assembled Session
        """
        prescriptions: List[Prescription] = []

        for request in template:
            chosen = self._selector.select(
                request,
                experience_level=experience_level,
                exclude_ids=exclude_ids,
                allowed_equipment=allowed_equipment,
            )
            for exercise in chosen:
                priority = request.priority_lift and exercise.id in PRIORITY_LIFT_IDS
                scheme = config.scheme_for(exercise.movement_type, priority)
                prescriptions.append(
                    Prescription(
                        exercise=exercise,
                        sets=scheme.sets,
                        reps=scheme.reps,
                        rest_seconds=scheme.rest_seconds,
                    )
                )
                exclude_ids.add(exercise.id)

        expected = templated_slot_count(template)
        if len(prescriptions) < expected:
            logger.debug(
                f"Session {slot.id} filled {len(prescriptions)} of {expected} slots"
            )

        return Session(
            id=slot.id,
            name=slot.name,
            role=slot.role,
            muscle_groups=muscle_groups_of(prescriptions),
            prescriptions=prescriptions,
        )
