"""
Session templates per training style and split role.

A template is an ordered tuple of SelectionRequests. Priority and compound
requests come before isolation requests so primary lifts are picked
before accessories compete for the same pool.
"""

from dataclasses import dataclass
from typing import Dict, Tuple, Union

from models.exercise import MovementType, MuscleGroup
from models.plan import SplitRole

COMP = MovementType.COMPOUND
ISO = MovementType.ISOLATION

CHEST = MuscleGroup.CHEST
LEGS = MuscleGroup.LEGS
HAMSTRINGS = MuscleGroup.HAMSTRINGS
BACK = MuscleGroup.BACK
SHOULDERS = MuscleGroup.SHOULDERS
BICEPS = MuscleGroup.BICEPS
TRICEPS = MuscleGroup.TRICEPS
ABS = MuscleGroup.ABDOMINALS


@dataclass(frozen=True)
class SelectionRequest:
    """One slot request within a session template."""

    muscle_groups: Tuple[MuscleGroup, ...]
    movement_type: MovementType
    count: int
    priority_lift: bool = False

    def __post_init__(self):
        if not self.muscle_groups:
            raise ValueError("SelectionRequest needs at least one muscle group")
        if self.count < 0:
            raise ValueError(f"SelectionRequest count must be >= 0, got {self.count}")


SessionTemplate = Tuple[SelectionRequest, ...]
TemplateTable = Dict[SplitRole, SessionTemplate]


def req(
    groups: Union[MuscleGroup, Tuple[MuscleGroup, ...]],
    movement_type: MovementType,
    count: int,
    priority: bool = False,
) -> SelectionRequest:
    """Shorthand for building a SelectionRequest from one group or a tuple of groups."""
    if isinstance(groups, MuscleGroup):
        groups = (groups,)
    return SelectionRequest(tuple(groups), movement_type, count, priority)


_HYPERTROPHY_LEGS: SessionTemplate = (
    req(LEGS, COMP, 2),
    req(HAMSTRINGS, COMP, 1),
    req(LEGS, ISO, 1),
    req(ABS, ISO, 1),
)

# Shared by hypertrophy and bodybuilding
HYPERTROPHY_TEMPLATES: TemplateTable = {
    SplitRole.PUSH: (req(CHEST, COMP, 2), req(SHOULDERS, COMP, 1), req(TRICEPS, ISO, 2)),
    SplitRole.PULL: (req(BACK, COMP, 2), req(SHOULDERS, ISO, 1), req(BICEPS, ISO, 2)),
    SplitRole.LEGS: _HYPERTROPHY_LEGS,
    SplitRole.UPPER: (
        req(CHEST, COMP, 1),
        req(BACK, COMP, 1),
        req(SHOULDERS, COMP, 1),
        req(BICEPS, ISO, 1),
        req(TRICEPS, ISO, 1),
    ),
    SplitRole.LOWER: _HYPERTROPHY_LEGS,
    SplitRole.FULL_BODY: (
        req(LEGS, COMP, 1),
        req(CHEST, COMP, 1),
        req(BACK, COMP, 1),
        req(SHOULDERS, ISO, 1),
        req((BICEPS, TRICEPS), ISO, 1),
    ),
}

_STRENGTH_LEGS: SessionTemplate = (
    req(LEGS, COMP, 1, priority=True),
    req(HAMSTRINGS, COMP, 1),
    req(ABS, ISO, 1),
)

STRENGTH_TEMPLATES: TemplateTable = {
    SplitRole.PUSH: (
        req(CHEST, COMP, 1, priority=True),
        req(SHOULDERS, COMP, 1, priority=True),
        req(TRICEPS, COMP, 1),
    ),
    SplitRole.PULL: (
        req(BACK, COMP, 1, priority=True),
        req(BACK, COMP, 1),
        req(BICEPS, ISO, 1),
    ),
    SplitRole.LEGS: _STRENGTH_LEGS,
    SplitRole.UPPER: (
        req(CHEST, COMP, 1, priority=True),
        req(BACK, COMP, 1, priority=True),
        req(SHOULDERS, COMP, 1),
    ),
    SplitRole.LOWER: _STRENGTH_LEGS,
    SplitRole.FULL_BODY: (
        req(LEGS, COMP, 1, priority=True),
        req(CHEST, COMP, 1, priority=True),
        req(BACK, COMP, 1, priority=True),
    ),
}

POWERBUILDING_TEMPLATES: TemplateTable = {
    SplitRole.PUSH: (
        req(CHEST, COMP, 1, priority=True),
        req(SHOULDERS, COMP, 1),
        req(CHEST, ISO, 1),
        req(TRICEPS, ISO, 2),
    ),
    SplitRole.PULL: (
        req(BACK, COMP, 1, priority=True),
        req(BACK, COMP, 1),
        req(BICEPS, ISO, 2),
    ),
    SplitRole.LEGS: (
        req(LEGS, COMP, 1, priority=True),
        req(HAMSTRINGS, COMP, 1),
        req(LEGS, ISO, 2),
        req(ABS, ISO, 1),
    ),
    SplitRole.UPPER: (
        req(CHEST, COMP, 1, priority=True),
        req(BACK, COMP, 1),
        req((SHOULDERS, TRICEPS), ISO, 1),
        req(BICEPS, ISO, 1),
    ),
    SplitRole.LOWER: (
        req(LEGS, COMP, 1, priority=True),
        req(HAMSTRINGS, COMP, 1),
        req(LEGS, ISO, 1),
        req(ABS, ISO, 1),
    ),
    SplitRole.FULL_BODY: (
        req(LEGS, COMP, 1, priority=True),
        req(CHEST, COMP, 1),
        req(BACK, COMP, 1),
        req(ABS, ISO, 1),
    ),
}

CALISTHENICS_TEMPLATES: TemplateTable = {
    SplitRole.PUSH: (req((CHEST, SHOULDERS), COMP, 2), req(TRICEPS, COMP, 2)),
    SplitRole.PULL: (req(BACK, COMP, 3), req(ABS, ISO, 1)),
    SplitRole.LEGS: (req(LEGS, COMP, 3), req(HAMSTRINGS, ISO, 1)),
    SplitRole.UPPER: (
        req(CHEST, COMP, 1),
        req(BACK, COMP, 1),
        req(SHOULDERS, COMP, 1),
        req(TRICEPS, COMP, 1),
    ),
    SplitRole.LOWER: (req(LEGS, COMP, 2), req(HAMSTRINGS, ISO, 1), req(ABS, ISO, 2)),
    SplitRole.FULL_BODY: (
        req(LEGS, COMP, 1),
        req(CHEST, COMP, 1),
        req(BACK, COMP, 1),
        req(ABS, ISO, 1),
    ),
}


def templated_slot_count(template: SessionTemplate) -> int:
    """Total number of exercises a template asks for."""
    return sum(request.count for request in template)
