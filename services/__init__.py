"""
Services package for the plan API.

Contains the plan synthesis logic:
- Style configuration and session templates
- Candidate selection from the exercise catalog
- Session assembly and weekly plan composition
- Plan editing (exercise substitution)
"""

from services.candidate_selector import CandidateSelector
from services.plan_composer import (
    SPLIT_STRUCTURES,
    WeeklyPlanComposer,
    split_structure_for,
)
from services.plan_editor import find_session, substitute_exercise
from services.session_assembler import SessionAssembler, SessionSlot
from services.session_templates import SelectionRequest, SessionTemplate
from services.style_config import (
    DEFAULT_STYLE,
    STYLE_PROGRAMS,
    PrescriptionScheme,
    StyleConfig,
    StyleProgram,
    resolve_style_program,
)

__all__ = [
    # Selection
    "CandidateSelector",
    "SelectionRequest",
    "SessionTemplate",
    # Composition
    "SPLIT_STRUCTURES",
    "SessionAssembler",
    "SessionSlot",
    "WeeklyPlanComposer",
    "split_structure_for",
    # Style configuration
    "DEFAULT_STYLE",
    "STYLE_PROGRAMS",
    "PrescriptionScheme",
    "StyleConfig",
    "StyleProgram",
    "resolve_style_program",
    # Editing
    "find_session",
    "substitute_exercise",
]
