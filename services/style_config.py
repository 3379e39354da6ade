"""
Style configuration table.

Each training style is one StyleProgram variant carrying its set/rep/rest
schemes, its split-role template table and its equipment restriction.
Unknown styles resolve to the hypertrophy variant, the documented default.
"""

import logging
from dataclasses import dataclass
from typing import Dict, FrozenSet, Optional

from models.exercise import Equipment, MovementType
from models.plan import SplitRole, TrainingStyle
from services.session_templates import (
    CALISTHENICS_TEMPLATES,
    HYPERTROPHY_TEMPLATES,
    POWERBUILDING_TEMPLATES,
    STRENGTH_TEMPLATES,
    SessionTemplate,
    TemplateTable,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PrescriptionScheme:
    """Sets, rep range and rest interval applied to one exercise."""

    sets: int
    reps: str
    rest_seconds: int

    def __post_init__(self):
        if self.sets < 1:
            raise ValueError(f"sets must be >= 1, got {self.sets}")
        if self.rest_seconds < 0:
            raise ValueError(f"rest_seconds must be >= 0, got {self.rest_seconds}")


@dataclass(frozen=True)
class StyleConfig:
    """Prescription schemes for one training style."""

    compound: PrescriptionScheme
    isolation: PrescriptionScheme
    priority: Optional[PrescriptionScheme] = None

    def scheme_for(self, movement_type: MovementType, priority_lift: bool = False) -> PrescriptionScheme:
        """
        Pick the scheme for a selected exercise.

        Priority slots use the dedicated priority scheme when the style has
        one; everything else is keyed by the exercise's own movement type.
        """
        if priority_lift and self.priority is not None:
            return self.priority
        if movement_type == MovementType.COMPOUND:
            return self.compound
        return self.isolation


@dataclass(frozen=True)
class StyleProgram:
    """Everything the composer needs to know about one training style."""

    style: TrainingStyle
    config: StyleConfig
    templates: TemplateTable
    allowed_equipment: Optional[FrozenSet[Equipment]] = None  # None = any

    def template_for(self, role: SplitRole) -> SessionTemplate:
        return self.templates[role]


HYPERTROPHY_CONFIG = StyleConfig(
    compound=PrescriptionScheme(3, "8-12", 120),
    isolation=PrescriptionScheme(3, "10-15", 90),
)

# Strength isolation work is short accessory volume
STRENGTH_CONFIG = StyleConfig(
    compound=PrescriptionScheme(3, "6-8", 180),
    isolation=PrescriptionScheme(2, "8-12", 90),
    priority=PrescriptionScheme(5, "3-5", 240),
)

POWERBUILDING_CONFIG = StyleConfig(
    compound=PrescriptionScheme(3, "8-12", 120),
    isolation=PrescriptionScheme(3, "10-15", 90),
    priority=PrescriptionScheme(4, "4-6", 180),
)

BODYBUILDING_CONFIG = StyleConfig(
    compound=PrescriptionScheme(4, "8-15", 90),
    isolation=PrescriptionScheme(4, "12-20", 60),
)

CALISTHENICS_CONFIG = StyleConfig(
    compound=PrescriptionScheme(4, "5-20", 120),
    isolation=PrescriptionScheme(3, "10-25", 75),
)

STYLE_PROGRAMS: Dict[TrainingStyle, StyleProgram] = {
    TrainingStyle.HYPERTROPHY: StyleProgram(
        style=TrainingStyle.HYPERTROPHY,
        config=HYPERTROPHY_CONFIG,
        templates=HYPERTROPHY_TEMPLATES,
    ),
    TrainingStyle.STRENGTH: StyleProgram(
        style=TrainingStyle.STRENGTH,
        config=STRENGTH_CONFIG,
        templates=STRENGTH_TEMPLATES,
    ),
    TrainingStyle.POWERBUILDING: StyleProgram(
        style=TrainingStyle.POWERBUILDING,
        config=POWERBUILDING_CONFIG,
        templates=POWERBUILDING_TEMPLATES,
    ),
    TrainingStyle.BODYBUILDING: StyleProgram(
        style=TrainingStyle.BODYBUILDING,
        config=BODYBUILDING_CONFIG,
        templates=HYPERTROPHY_TEMPLATES,
    ),
    TrainingStyle.CALISTHENICS: StyleProgram(
        style=TrainingStyle.CALISTHENICS,
        config=CALISTHENICS_CONFIG,
        templates=CALISTHENICS_TEMPLATES,
        allowed_equipment=frozenset({Equipment.BODYWEIGHT}),
    ),
}

DEFAULT_STYLE = TrainingStyle.HYPERTROPHY


def resolve_style_program(style: TrainingStyle | str) -> StyleProgram:
    """
    Look up the StyleProgram for a training style.

    Args:
        style: TrainingStyle member or its string value

    Returns:
        The matching StyleProgram, or the hypertrophy program when the
        style is not recognized
    """
    try:
        key = TrainingStyle(style)
    except ValueError:
        logger.warning(
            f"Unknown training style {style!r}, using {DEFAULT_STYLE.value} configuration"
        )
        return STYLE_PROGRAMS[DEFAULT_STYLE]

    program = STYLE_PROGRAMS.get(key)
    if program is None:
        logger.warning(
            f"No configuration for training style {key.value}, "
            f"using {DEFAULT_STYLE.value} configuration"
        )
        return STYLE_PROGRAMS[DEFAULT_STYLE]
    return program
