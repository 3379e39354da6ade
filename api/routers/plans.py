"""
Weekly plan router.

This router provides endpoints for:
- Generating a new weekly plan (replaces the athlete's current plan)
- Reading the current plan
- Substituting one exercise in a session of the current plan
"""

import logging
import random

from fastapi import APIRouter, Depends, HTTPException

from api.deps import (
    get_current_user,
    get_exercise_catalog,
    get_plan_composer,
    get_plan_repo,
    get_rng,
)
from application.exceptions import PlanEditError
from application.ports import ExerciseCatalog, PlanRepository
from models.generation import GeneratePlanRequest, SubstitutionRequest
from models.plan import Session, WeeklyPlan
from services.plan_composer import WeeklyPlanComposer
from services.plan_editor import substitute_exercise

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/plans",
    tags=["Plans"],
)


def _require_current_plan(plan_repo: PlanRepository, user_id: str) -> WeeklyPlan:
    plan = plan_repo.get_current(user_id)
    if plan is None:
        raise HTTPException(
            status_code=404,
            detail="No weekly plan generated yet",
        )
    return plan


@router.post("/generate", response_model=WeeklyPlan)
def generate_plan(
    request: GeneratePlanRequest,
    user_id: str = Depends(get_current_user),
    composer: WeeklyPlanComposer = Depends(get_plan_composer),
    plan_repo: PlanRepository = Depends(get_plan_repo),
    rng: random.Random = Depends(get_rng),
) -> WeeklyPlan:
    """
    Generate a weekly plan and make it the athlete's current plan.

    The split follows the weekly session count (2 full body, 3 push/pull/legs,
    4 upper/lower, 5 PPL + upper/lower, 6+ PPL twice). No exercise repeats
    within the week unless the catalog runs out of candidates, in which case
    sessions come back shorter and `shortfall` counts the missing slots.
    """
    logger.info(
        f"Generate plan request: style={request.training_style.value}, "
        f"experience={request.experience.value}, days={request.training_days}"
    )

    plan = composer.generate(request.to_profile(), rng=rng)
    return plan_repo.save(user_id, plan)


@router.get("/current", response_model=WeeklyPlan)
def get_current_plan(
    user_id: str = Depends(get_current_user),
    plan_repo: PlanRepository = Depends(get_plan_repo),
) -> WeeklyPlan:
    """Get the athlete's current weekly plan."""
    return _require_current_plan(plan_repo, user_id)


@router.post(
    "/current/sessions/{session_id}/substitutions",
    response_model=Session,
)
def substitute_session_exercise(
    session_id: str,
    request: SubstitutionRequest,
    user_id: str = Depends(get_current_user),
    plan_repo: PlanRepository = Depends(get_plan_repo),
    catalog: ExerciseCatalog = Depends(get_exercise_catalog),
) -> Session:
    """
    Swap one exercise in a session of the current plan.

    Sets, reps and rest stay as generated for the slot. The replacement is
    looked up in the catalog by id, or by name when no id is given.
    """
    plan = _require_current_plan(plan_repo, user_id)

    if request.replacement_exercise_id is not None:
        replacement = catalog.get_by_id(request.replacement_exercise_id)
        wanted = request.replacement_exercise_id
    else:
        replacement = catalog.get_by_name(request.replacement_name)
        wanted = request.replacement_name
    if replacement is None:
        raise HTTPException(
            status_code=404,
            detail=f"Replacement exercise not found: {wanted}",
        )

    try:
        session = substitute_exercise(
            plan,
            session_id=session_id,
            original_exercise_id=request.original_exercise_id,
            replacement=replacement,
        )
    except PlanEditError as e:
        raise HTTPException(status_code=404, detail=str(e))

    plan_repo.save(user_id, plan)
    return session
