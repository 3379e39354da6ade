"""
Fake implementations for testing.

This package provides in-memory fake implementations of the catalog and
plan store interfaces for fast, isolated testing.
"""

from tests.fakes.exercise_catalog import FakeExerciseCatalog
from tests.fakes.plan_repository import FakePlanRepository

__all__ = [
    "FakeExerciseCatalog",
    "FakePlanRepository",
]
