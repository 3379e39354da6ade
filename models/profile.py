"""
Athlete profile consumed by plan generation.

Only the fields that drive the synthesizer live here; the rest of the
athlete record belongs to the collaborator that owns athlete state.
"""

from pydantic import BaseModel, Field

from models.exercise import ExperienceLevel
from models.plan import TrainingStyle


class AthleteProfile(BaseModel):
    """Inputs to weekly plan generation."""

    experience: ExperienceLevel = Field(description="Athlete experience level")
    training_style: TrainingStyle = Field(description="Chosen training style")
    training_days: int = Field(description="Sessions per week")
