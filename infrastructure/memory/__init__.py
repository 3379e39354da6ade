"""In-memory storage implementations."""

from infrastructure.memory.plan_repository import InMemoryPlanRepository

__all__ = ["InMemoryPlanRepository"]
