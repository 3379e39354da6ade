"""
Request models for the plan HTTP API.

These models define the API contract; the services work on the domain
models in models.profile and models.plan.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from core.constants import MAX_TRAINING_DAYS, MIN_TRAINING_DAYS
from models.profile import AthleteProfile


class GeneratePlanRequest(AthleteProfile):
    """Request model for generating a weekly plan."""

    training_days: int = Field(
        ge=MIN_TRAINING_DAYS,
        le=MAX_TRAINING_DAYS,
        description="Number of training sessions per week",
    )

    def to_profile(self) -> AthleteProfile:
        """Strip API-only validation and return the domain profile."""
        return AthleteProfile(
            experience=self.experience,
            training_style=self.training_style,
            training_days=self.training_days,
        )


class SubstitutionRequest(BaseModel):
    """Request model for swapping one exercise in a session."""

    original_exercise_id: str = Field(min_length=1)
    replacement_exercise_id: Optional[str] = Field(
        None, description="Catalog id of the replacement exercise"
    )
    replacement_name: Optional[str] = Field(
        None,
        description="Catalog name of the replacement (case-insensitive)",
    )

    @field_validator("replacement_exercise_id", "replacement_name", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        """Treat empty strings as missing."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @model_validator(mode="after")
    def require_replacement(self) -> "SubstitutionRequest":
        """Exactly one way of naming the replacement must be given."""
        if self.replacement_exercise_id is None and self.replacement_name is None:
            raise ValueError(
                "Either replacement_exercise_id or replacement_name is required"
            )
        return self
