"""
Plan repository port (interface).

Each athlete owns at most one current plan. Saving always replaces the
previous plan; there is no merge.
"""

from typing import Optional, Protocol

from models.plan import WeeklyPlan


class PlanRepository(Protocol):
    """Repository interface for athletes' current weekly plans."""

    def get_current(self, athlete_id: str) -> Optional[WeeklyPlan]:
        """
        Get the athlete's current plan.

        Args:
            athlete_id: The athlete's ID

        Returns:
            WeeklyPlan if one was generated, None otherwise
        """
        ...

    def save(self, athlete_id: str, plan: WeeklyPlan) -> WeeklyPlan:
        """
        Store a plan as the athlete's current plan, replacing any previous one.

        Args:
            athlete_id: The athlete's ID
            plan: The plan to store

        Returns:
            The stored plan
        """
        ...

    def delete(self, athlete_id: str) -> bool:
        """
        Drop the athlete's current plan.

        Args:
            athlete_id: The athlete's ID

        Returns:
            True if a plan was removed, False if there was none
        """
        ...
