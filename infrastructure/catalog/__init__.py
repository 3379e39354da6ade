"""
Exercise catalog infrastructure.

The catalog is static data shipped with the service (exercise_library.yaml).
"""

from infrastructure.catalog.static_catalog import (
    StaticExerciseCatalog,
    load_catalog,
    load_default_catalog,
)

__all__ = [
    "StaticExerciseCatalog",
    "load_catalog",
    "load_default_catalog",
]
