"""
Infrastructure layer package for the plan API.

This package contains concrete implementations of the port interfaces:
- catalog/: Static exercise catalog loaded from bundled YAML
- memory/: Process-local plan storage
"""

from infrastructure.catalog import StaticExerciseCatalog, load_default_catalog
from infrastructure.memory import InMemoryPlanRepository

__all__ = [
    "StaticExerciseCatalog",
    "load_default_catalog",
    "InMemoryPlanRepository",
]
