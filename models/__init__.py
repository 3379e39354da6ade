"""Models package for the plan API."""

from models.exercise import (
    Equipment,
    Exercise,
    ExperienceLevel,
    MovementType,
    MuscleGroup,
)
from models.generation import GeneratePlanRequest, SubstitutionRequest
from models.plan import (
    Prescription,
    Session,
    SplitRole,
    TrainingStyle,
    WeeklyPlan,
    muscle_groups_of,
)
from models.profile import AthleteProfile

__all__ = [
    "Equipment",
    "Exercise",
    "ExperienceLevel",
    "MovementType",
    "MuscleGroup",
    "GeneratePlanRequest",
    "SubstitutionRequest",
    "Prescription",
    "Session",
    "SplitRole",
    "TrainingStyle",
    "WeeklyPlan",
    "muscle_groups_of",
    "AthleteProfile",
]
