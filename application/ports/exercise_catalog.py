"""
Exercise catalog port (interface).

This Protocol defines the contract for exercise lookups. The shipped
implementation is a static in-process table; tests inject catalogs of
controlled size.
"""

from typing import List, Optional, Protocol

from models.exercise import Equipment, Exercise, ExperienceLevel, MuscleGroup


class ExerciseCatalog(Protocol):
    """
    Read-only interface over the exercise catalog.

    Exercises are immutable reference data; no method has side effects.
    Sequences are returned in catalog definition order.
    """

    def get_by_id(self, exercise_id: str) -> Optional[Exercise]:
        """
        Get an exercise by its identifier.

        Args:
            exercise_id: The exercise slug identifier

        Returns:
            Exercise if found, None otherwise
        """
        ...

    def get_by_name(self, name: str) -> Optional[Exercise]:
        """
        Get an exercise by display name (case-insensitive exact match).

        Args:
            name: The exercise name

        Returns:
            Exercise if found, None otherwise
        """
        ...

    def filter(
        self,
        muscle_group: Optional[MuscleGroup] = None,
        level: Optional[ExperienceLevel] = None,
        equipment: Optional[Equipment] = None,
    ) -> List[Exercise]:
        """
        Filter exercises; an omitted criterion matches everything.

        Args:
            muscle_group: Primary muscle group to match
            level: Experience level to match
            equipment: Required equipment to match

        Returns:
            List of matching exercises
        """
        ...

    def get_all(self) -> List[Exercise]:
        """
        Get every exercise in the catalog.

        Returns:
            List of all exercises
        """
        ...
