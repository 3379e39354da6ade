"""
Candidate selector for filling template slots.

Given one SelectionRequest plus the athlete's context, returns up to
`count` catalog exercises that satisfy every constraint. Short results
are a valid outcome: when equipment or exclusions over-restrict the
catalog the caller simply gets fewer exercises.
"""

import logging
import random
from typing import Collection, List, Optional

from application.ports import ExerciseCatalog
from core.constants import PRIORITY_LIFT_IDS
from models.exercise import Equipment, Exercise, ExperienceLevel
from services.session_templates import SelectionRequest

logger = logging.getLogger(__name__)


class CandidateSelector:
    """
    Selects exercises for one template slot.

    Selection steps:
    1. Filter by muscle group, movement type, exclusions and equipment
    2. Priority slots return the canonical barbell lifts when any survive
    3. Partition by level match (matching level first)
    4. Shuffle within each partition
    5. Take the first `count`
    """

    def __init__(self, catalog: ExerciseCatalog, rng: Optional[random.Random] = None):
        """
        Initialize the selector.

        Args:
            catalog: Exercise catalog to draw candidates from
            rng: Randomness source; a fresh one is created when omitted
        """
        self._catalog = catalog
        self._rng = rng or random.Random()

    def select(
        self,
        request: SelectionRequest,
        experience_level: ExperienceLevel,
        exclude_ids: Collection[str] = (),
        allowed_equipment: Optional[Collection[Equipment]] = None,
    ) -> List[Exercise]:
        """
        Select exercises for a slot request.

        Args:
            request: Muscle groups, movement type, count and priority flag
            experience_level: Athlete level; matching exercises rank first
            exclude_ids: Exercise ids that must not be returned
            allowed_equipment: Allowed equipment, or None for any

        Returns:
            Up to request.count exercises (possibly empty)
        """
        if request.count == 0:
            return []

        candidates = self._filter_candidates(request, exclude_ids, allowed_equipment)

        if request.priority_lift:
            priority = [ex for ex in candidates if ex.id in PRIORITY_LIFT_IDS]
            if priority:
                return priority[: request.count]

        matched = [ex for ex in candidates if ex.level == experience_level]
        others = [ex for ex in candidates if ex.level != experience_level]
        self._rng.shuffle(matched)
        self._rng.shuffle(others)

        selected = (matched + others)[: request.count]
        if len(selected) < request.count:
            logger.debug(
                f"Short selection for {[g.value for g in request.muscle_groups]} "
                f"{request.movement_type.value}: wanted {request.count}, got {len(selected)}"
            )
        return selected

    def _filter_candidates(
        self,
        request: SelectionRequest,
        exclude_ids: Collection[str],
        allowed_equipment: Optional[Collection[Equipment]],
    ) -> List[Exercise]:
        """Apply the hard constraints, keeping catalog order."""
        groups = set(request.muscle_groups)
        return [
            ex
            for ex in self._catalog.get_all()
            if ex.muscle_group in groups
            and ex.movement_type == request.movement_type
            and ex.id not in exclude_ids
            and (allowed_equipment is None or ex.equipment in allowed_equipment)
        ]
