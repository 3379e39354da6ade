"""
Exercises router for catalog lookup.

This router provides endpoints for:
- Listing catalog exercises filtered by muscle group, level, or equipment
- Looking up a single exercise by ID
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query
from pydantic import BaseModel, Field

from api.deps import get_exercise_catalog
from application.ports import ExerciseCatalog
from models.exercise import Equipment, Exercise, ExperienceLevel, MuscleGroup

router = APIRouter(
    prefix="/exercises",
    tags=["Exercises"],
)


class ExerciseListResponse(BaseModel):
    """Response model for list of exercises."""

    exercises: List[Exercise]
    count: int = Field(..., description="Number of exercises returned")


@router.get("", response_model=ExerciseListResponse)
def list_exercises(
    muscle_group: Optional[MuscleGroup] = Query(None, description="Primary muscle group"),
    level: Optional[ExperienceLevel] = Query(None, description="Experience level"),
    equipment: Optional[Equipment] = Query(None, description="Required equipment"),
    catalog: ExerciseCatalog = Depends(get_exercise_catalog),
) -> ExerciseListResponse:
    """
    List catalog exercises.

    Each filter is optional; an omitted filter matches every exercise.
    """
    exercises = catalog.filter(
        muscle_group=muscle_group,
        level=level,
        equipment=equipment,
    )
    return ExerciseListResponse(exercises=exercises, count=len(exercises))


@router.get("/{exercise_id}", response_model=Exercise)
def get_exercise(
    exercise_id: str = Path(..., description="Exercise identifier"),
    catalog: ExerciseCatalog = Depends(get_exercise_catalog),
) -> Exercise:
    """Get a single exercise by ID."""
    exercise = catalog.get_by_id(exercise_id)
    if exercise is None:
        raise HTTPException(
            status_code=404,
            detail=f"Exercise not found: {exercise_id}",
        )
    return exercise
