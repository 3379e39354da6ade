"""
Router package for the Weekly Plan API.

This package contains all API routers organized by domain:
- health: Health check endpoints
- exercises: Exercise catalog lookup
- plans: Weekly plan generation and substitution
"""

from api.routers.exercises import router as exercises_router
from api.routers.health import router as health_router
from api.routers.plans import router as plans_router

__all__ = [
    "exercises_router",
    "health_router",
    "plans_router",
]
