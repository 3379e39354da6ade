"""
Port interfaces (Protocols) for the plan API.

This package defines the interface contracts that the infrastructure
layer must implement. Using Protocols enables:
- Swapping the shipped catalog for test catalogs of controlled size
- Easy testing with in-memory fakes
- Dependency inversion (depend on abstractions, not concretions)
"""

from application.ports.exercise_catalog import ExerciseCatalog
from application.ports.plan_repository import PlanRepository

__all__ = [
    "ExerciseCatalog",
    "PlanRepository",
]
