"""
Domain models for the exercise catalog.

Exercises are read-only reference data. Every consumer shares the same
instances, so the model is frozen once built.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ExperienceLevel(str, Enum):
    """Athlete (and minimum recommended exercise) experience levels."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class Equipment(str, Enum):
    """Equipment an exercise requires."""

    BARBELL = "barbell"
    DUMBBELL = "dumbbell"
    MACHINE = "machine"
    BODYWEIGHT = "bodyweight"
    KETTLEBELL = "kettlebell"
    CABLE = "cable"


class MovementType(str, Enum):
    """Compound (multi-joint) or isolation movement."""

    COMPOUND = "compound"
    ISOLATION = "isolation"


class MuscleGroup(str, Enum):
    """
    Primary muscle group taxonomy.

    Session templates may only reference members of this enum, which keeps
    the catalog and the template vocabulary consistent.
    """

    CHEST = "chest"
    LEGS = "legs"
    HAMSTRINGS = "hamstrings"
    BACK = "back"
    SHOULDERS = "shoulders"
    BICEPS = "biceps"
    TRICEPS = "triceps"
    ABDOMINALS = "abdominals"


class Exercise(BaseModel):
    """A single catalog entry."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1, description="Stable identifier (slug)")
    name: str = Field(min_length=1)
    muscle_group: MuscleGroup
    movement_type: MovementType
    level: ExperienceLevel = Field(
        description="Minimum recommended experience level"
    )
    equipment: Equipment
    description: str = ""
    media_url: Optional[str] = None
