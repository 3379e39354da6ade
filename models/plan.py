"""
Domain models for generated weekly plans.

A WeeklyPlan is owned by exactly one athlete and is replaced wholesale on
every generation. Prescriptions are frozen; the only sanctioned change
after generation is an exercise substitution, which swaps the whole
Prescription for a copy carrying the new exercise.
"""

from enum import Enum
from typing import Iterable, List

from pydantic import BaseModel, ConfigDict, Field

from models.exercise import Exercise, ExperienceLevel, MuscleGroup


class TrainingStyle(str, Enum):
    """Training methodologies supported by the synthesizer."""

    HYPERTROPHY = "hypertrophy"
    STRENGTH = "strength"
    POWERBUILDING = "powerbuilding"
    BODYBUILDING = "bodybuilding"
    CALISTHENICS = "calisthenics"


class SplitRole(str, Enum):
    """Muscle-group focus of one session within a weekly structure."""

    PUSH = "push"
    PULL = "pull"
    LEGS = "legs"
    UPPER = "upper"
    LOWER = "lower"
    FULL_BODY = "full_body"


class Prescription(BaseModel):
    """One exercise bound into one session with its sets/reps/rest."""

    model_config = ConfigDict(frozen=True)

    exercise: Exercise
    sets: int = Field(ge=1)
    reps: str = Field(min_length=1, description="Rep range, e.g. '8-12'")
    rest_seconds: int = Field(ge=0)


def muscle_groups_of(prescriptions: Iterable[Prescription]) -> List[MuscleGroup]:
    """Deduplicated muscle groups of the given prescriptions, first-seen order."""
    groups: List[MuscleGroup] = []
    for prescription in prescriptions:
        group = prescription.exercise.muscle_group
        if group not in groups:
            groups.append(group)
    return groups


class Session(BaseModel):
    """A single workout within the weekly plan."""

    id: str = Field(description="Session identifier, e.g. 'push_a'")
    name: str
    role: SplitRole
    muscle_groups: List[MuscleGroup] = []
    prescriptions: List[Prescription] = []

    def refresh_muscle_groups(self) -> None:
        """Recompute muscle_groups from the current prescriptions."""
        self.muscle_groups = muscle_groups_of(self.prescriptions)


class WeeklyPlan(BaseModel):
    """An athlete's current week of sessions."""

    training_style: TrainingStyle
    experience_level: ExperienceLevel
    sessions: List[Session] = []
    shortfall: int = Field(
        0,
        ge=0,
        description="Templated exercise slots the catalog could not fill",
    )

    def exercise_ids(self) -> List[str]:
        """All prescribed exercise ids across the week, in session order."""
        return [
            p.exercise.id
            for session in self.sessions
            for p in session.prescriptions
        ]
