"""
In-memory implementation of PlanRepository.

Holds each athlete's current plan in a process-local dictionary. Durable
storage of plans belongs to the collaborator that owns athlete state.
"""

import logging
from threading import Lock
from typing import Dict, Optional

from models.plan import WeeklyPlan

logger = logging.getLogger(__name__)


class InMemoryPlanRepository:
    """Process-local plan store keyed by athlete id."""

    def __init__(self):
        self._plans: Dict[str, WeeklyPlan] = {}
        self._lock = Lock()

    def get_current(self, athlete_id: str) -> Optional[WeeklyPlan]:
        with self._lock:
            return self._plans.get(athlete_id)

    def save(self, athlete_id: str, plan: WeeklyPlan) -> WeeklyPlan:
        with self._lock:
            replaced = athlete_id in self._plans
            self._plans[athlete_id] = plan
        if replaced:
            logger.info(f"Replaced current plan for athlete {athlete_id}")
        return plan

    def delete(self, athlete_id: str) -> bool:
        with self._lock:
            return self._plans.pop(athlete_id, None) is not None
