"""
Weekly plan composer.

Orchestrates plan generation for one athlete:
1. Style resolution - Pick the StyleProgram (hypertrophy if unknown)
2. Split selection - Map the weekly session count to a split structure
3. Session assembly - Fill each session, threading one exclusion set
   through the whole week so no exercise repeats

The composer holds no per-athlete state: the exclusion set and the
randomness source are created per generate() call.
"""

import logging
import random
from typing import Dict, Optional, Set, Tuple

from application.ports import ExerciseCatalog
from models.plan import SplitRole, WeeklyPlan
from models.profile import AthleteProfile
from services.candidate_selector import CandidateSelector
from services.session_assembler import SessionAssembler, SessionSlot
from services.session_templates import templated_slot_count
from services.style_config import resolve_style_program

logger = logging.getLogger(__name__)

SplitStructure = Tuple[SessionSlot, ...]

FULL_BODY_SPLIT: SplitStructure = (
    SessionSlot("full_body_a", "Full Body A", SplitRole.FULL_BODY),
    SessionSlot("full_body_b", "Full Body B", SplitRole.FULL_BODY),
)

PUSH_PULL_LEGS_SPLIT: SplitStructure = (
    SessionSlot("push", "Push", SplitRole.PUSH),
    SessionSlot("pull", "Pull", SplitRole.PULL),
    SessionSlot("legs", "Legs", SplitRole.LEGS),
)

UPPER_LOWER_SPLIT: SplitStructure = (
    SessionSlot("upper_a", "Upper A", SplitRole.UPPER),
    SessionSlot("lower_a", "Lower A", SplitRole.LOWER),
    SessionSlot("upper_b", "Upper B", SplitRole.UPPER),
    SessionSlot("lower_b", "Lower B", SplitRole.LOWER),
)

PPL_UPPER_LOWER_SPLIT: SplitStructure = (
    SessionSlot("push_a", "Push A", SplitRole.PUSH),
    SessionSlot("pull_a", "Pull A", SplitRole.PULL),
    SessionSlot("legs_a", "Legs A", SplitRole.LEGS),
    SessionSlot("upper_b", "Upper B", SplitRole.UPPER),
    SessionSlot("lower_b", "Lower B", SplitRole.LOWER),
)

PPL_TWICE_SPLIT: SplitStructure = (
    SessionSlot("push_a", "Push A", SplitRole.PUSH),
    SessionSlot("pull_a", "Pull A", SplitRole.PULL),
    SessionSlot("legs_a", "Legs A", SplitRole.LEGS),
    SessionSlot("push_b", "Push B", SplitRole.PUSH),
    SessionSlot("pull_b", "Pull B", SplitRole.PULL),
    SessionSlot("legs_b", "Legs B", SplitRole.LEGS),
)

SPLIT_STRUCTURES: Dict[int, SplitStructure] = {
    2: FULL_BODY_SPLIT,
    3: PUSH_PULL_LEGS_SPLIT,
    4: UPPER_LOWER_SPLIT,
    5: PPL_UPPER_LOWER_SPLIT,
    6: PPL_TWICE_SPLIT,
}


def split_structure_for(training_days: int) -> SplitStructure:
    """
    Select the split structure for a weekly session count.

    Six or more sessions use PPL twice. Counts below two are outside the
    supported range; they also get PPL twice.

    Args:
        training_days: Sessions per week

    Returns:
        Ordered session slots
    """
    structure = SPLIT_STRUCTURES.get(training_days)
    if structure is not None:
        return structure

    if training_days < min(SPLIT_STRUCTURES):
        logger.warning(
            f"Unsupported training_days={training_days}, using 6-session split"
        )
    return PPL_TWICE_SPLIT


class WeeklyPlanComposer:
    """
    Generates weekly plans from athlete profiles.

    The composer is a pure function of (profile, catalog, randomness
    source); it can be shared between concurrent requests.
    """

    def __init__(self, catalog: ExerciseCatalog):
        """
        Initialize the composer.

        Args:
            catalog: Exercise catalog used for every generation
        """
        self._catalog = catalog

    def generate(
        self,
        profile: AthleteProfile,
        rng: Optional[random.Random] = None,
    ) -> WeeklyPlan:
        """
        Generate a complete weekly plan.

        Args:
            profile: Athlete experience, training style and session count
            rng: Randomness source; a fresh one is created when omitted

        Returns:
            The generated WeeklyPlan
        """
        program = resolve_style_program(profile.training_style)
        structure = split_structure_for(profile.training_days)

        selector = CandidateSelector(self._catalog, rng or random.Random())
        assembler = SessionAssembler(selector)
        used_ids: Set[str] = set()

        sessions = []
        shortfall = 0
        for slot in structure:
            template = program.template_for(slot.role)
            session = assembler.assemble(
                slot=slot,
                template=template,
                config=program.config,
                exclude_ids=used_ids,
                experience_level=profile.experience,
                allowed_equipment=program.allowed_equipment,
            )
            shortfall += templated_slot_count(template) - len(session.prescriptions)
            sessions.append(session)

        logger.info(
            f"Generated {program.style.value} plan: {len(sessions)} sessions, "
            f"{len(used_ids)} exercises, shortfall={shortfall}"
        )

        return WeeklyPlan(
            training_style=program.style,
            experience_level=profile.experience,
            sessions=sessions,
            shortfall=shortfall,
        )
