"""
Static in-process implementation of ExerciseCatalog.

The shipped catalog is read from exercise_library.yaml once per process.
It never changes at runtime, so a single instance is shared by every
request.
"""

import logging
import pathlib
from functools import lru_cache
from typing import Dict, Iterable, List, Optional

import yaml

from application.exceptions import CatalogIntegrityError
from models.exercise import Equipment, Exercise, ExperienceLevel, MuscleGroup

logger = logging.getLogger(__name__)

LIBRARY_PATH = pathlib.Path(__file__).resolve().parent / "exercise_library.yaml"


class StaticExerciseCatalog:
    """
    Immutable exercise catalog backed by an in-memory tuple.

    Lookups preserve definition order, which keeps priority-lift
    selection stable.
    """

    def __init__(self, exercises: Iterable[Exercise]):
        """
        Build the catalog.

        Args:
            exercises: Exercise definitions in catalog order

        Raises:
            CatalogIntegrityError: If two exercises share an id
        """
        self._exercises = tuple(exercises)
        self._by_id: Dict[str, Exercise] = {}
        for exercise in self._exercises:
            if exercise.id in self._by_id:
                raise CatalogIntegrityError(
                    f"Duplicate exercise id in catalog: {exercise.id}"
                )
            self._by_id[exercise.id] = exercise

    def __len__(self) -> int:
        return len(self._exercises)

    def get_by_id(self, exercise_id: str) -> Optional[Exercise]:
        return self._by_id.get(exercise_id)

    def get_by_name(self, name: str) -> Optional[Exercise]:
        wanted = name.lower()
        for exercise in self._exercises:
            if exercise.name.lower() == wanted:
                return exercise
        return None

    def filter(
        self,
        muscle_group: Optional[MuscleGroup] = None,
        level: Optional[ExperienceLevel] = None,
        equipment: Optional[Equipment] = None,
    ) -> List[Exercise]:
        return [
            ex
            for ex in self._exercises
            if (muscle_group is None or ex.muscle_group == muscle_group)
            and (level is None or ex.level == level)
            and (equipment is None or ex.equipment == equipment)
        ]

    def get_all(self) -> List[Exercise]:
        return list(self._exercises)


def load_catalog(path: pathlib.Path) -> StaticExerciseCatalog:
    """
    Load and validate a catalog from a YAML list of exercise mappings.

    Args:
        path: YAML file to read

    Returns:
        StaticExerciseCatalog with the file's exercises in file order
    """
    raw = yaml.safe_load(path.read_text(encoding="utf-8")) or []
    catalog = StaticExerciseCatalog(Exercise.model_validate(item) for item in raw)
    logger.info(f"Loaded {len(catalog)} exercises from {path.name}")
    return catalog


@lru_cache
def load_default_catalog() -> StaticExerciseCatalog:
    """
    Get the shipped exercise catalog (cached per process).

    Returns:
        StaticExerciseCatalog: The default catalog
    """
    return load_catalog(LIBRARY_PATH)
