"""
FastAPI Dependency Providers for the Weekly Plan API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations.

Architecture:
- Settings, the exercise catalog and the plan store are cached per-process
- The composer and the randomness source are created per-request
- Auth providers extract the athlete from headers

Usage in routers:
    from api.deps import get_plan_repo, get_current_user
    from application.ports import PlanRepository

    @router.get("/plans/current")
    def current_plan(
        user_id: str = Depends(get_current_user),
        plan_repo: PlanRepository = Depends(get_plan_repo),
    ):
        return plan_repo.get_current(user_id)

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_plan_repo] = lambda: FakePlanRepository()
"""

import os
import random
from functools import lru_cache
from typing import Optional

from fastapi import Depends, Header, HTTPException

from application.ports import ExerciseCatalog, PlanRepository
from backend.settings import Settings, get_settings as _get_settings
from infrastructure.catalog import load_default_catalog
from infrastructure.memory import InMemoryPlanRepository
from services.plan_composer import WeeklyPlanComposer


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


# =============================================================================
# Catalog and Repository Providers
# =============================================================================


def get_exercise_catalog() -> ExerciseCatalog:
    """
    Get the ExerciseCatalog implementation.

    The shipped catalog is static data, loaded once per process.
    The return type is the Protocol to enable easy test catalogs.

    Returns:
        ExerciseCatalog: Read-only exercise catalog
    """
    return load_default_catalog()


@lru_cache
def _plan_store() -> InMemoryPlanRepository:
    return InMemoryPlanRepository()


def get_plan_repo() -> PlanRepository:
    """
    Get the PlanRepository implementation.

    Returns the process-wide in-memory plan store.

    Returns:
        PlanRepository: Store of athletes' current plans
    """
    return _plan_store()


# =============================================================================
# Generation Providers
# =============================================================================


def get_plan_composer(
    catalog: ExerciseCatalog = Depends(get_exercise_catalog),
) -> WeeklyPlanComposer:
    """
    Create a WeeklyPlanComposer over the injected catalog.

    Args:
        catalog: Exercise catalog (injected)

    Returns:
        WeeklyPlanComposer instance
    """
    return WeeklyPlanComposer(catalog)


def get_rng(settings: Settings = Depends(get_settings)) -> random.Random:
    """
    Create the randomness source for one request.

    A configured plan_random_seed makes selection reproducible; otherwise
    every request gets an independently seeded source.

    Args:
        settings: Application settings (injected)

    Returns:
        random.Random instance owned by this request
    """
    if settings.plan_random_seed is not None:
        return random.Random(settings.plan_random_seed)
    return random.Random()


# =============================================================================
# Authentication Providers
# =============================================================================


async def get_current_user(
    authorization: Optional[str] = Header(None),
) -> str:
    """
    Get the current athlete ID.

    Extracts the athlete ID from the Authorization header.

    Args:
        authorization: Bearer token header

    Returns:
        str: Athlete ID from authentication

    Raises:
        HTTPException: 401 if authentication fails
        RuntimeError: If auth stub is used in production
    """
    # Block production deployment with the auth stub
    environment = os.environ.get("ENVIRONMENT", "development").lower()
    if environment == "production":
        raise RuntimeError(
            "Authentication stub cannot be used in production. "
            "Implement token validation before deploying."
        )

    if not authorization:
        raise HTTPException(
            status_code=401,
            detail="Missing authorization header",
        )

    if not authorization.startswith("Bearer "):
        raise HTTPException(
            status_code=401,
            detail="Invalid authorization header format",
        )

    token = authorization[7:]  # Remove "Bearer " prefix
    if not token:
        raise HTTPException(
            status_code=401,
            detail="Invalid token",
        )

    # Stub: the token is the athlete id
    return token


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Settings
    "get_settings",
    # Catalog and storage
    "get_exercise_catalog",
    "get_plan_repo",
    # Generation
    "get_plan_composer",
    "get_rng",
    # Authentication
    "get_current_user",
]
