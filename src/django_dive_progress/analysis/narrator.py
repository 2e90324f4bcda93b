"""Progress Narrator: strengths and improvement areas.

Messages are appended in a fixed order and never de-duplicated. Each Skill
yields at most one message, so the skill checks cannot repeat while the
skill set stays fixed; revisit this if skills ever become configurable.
"""

from typing import Sequence

from .constants import (
    CONSISTENT_PRACTICE_DIVES,
    IMPROVEMENT_THRESHOLD,
    SHALLOW_AVERAGE_RATIO,
    STRENGTH_THRESHOLD,
    Skill,
)
from .records import CourseContext, DiveRecord

CONSISTENT_PRACTICE = "Consistencia en la práctica de buceo"
GRADUAL_DEPTH_PROGRESSION = "Progresión gradual en profundidad"
GAIN_DEPTH_CONFIDENCE = "Ganar confianza para inmersiones más profundas"
EQUIPMENT_CHECK_CONSISTENCY = "Ser más consistente con las verificaciones de equipo"


def strength_message(skill: Skill) -> str:
    return f"Excelente dominio en {skill.label}"


def improvement_message(skill: Skill) -> str:
    return f"Mejorar habilidades en {skill.label}"


def has_depth_progression(dives: Sequence[DiveRecord]) -> bool:
    """True if any dive went strictly deeper than the dive before it."""
    return any(
        current.depth_achieved_m > previous.depth_achieved_m
        for previous, current in zip(dives, dives[1:])
    )


def describe_progress(
    dives: Sequence[DiveRecord],
    skills_mastery: dict,
    course: CourseContext,
) -> tuple[list[str], list[str]]:
    """Derive strengths and improvement areas.

    Args:
        dives: Non-empty dive log, ascending by dive date
        skills_mastery: Skill -> mastery, as returned by estimate_skills_mastery
        course: Course requirements (max depth limit drives the depth check)

    Returns:
        (strengths, improvements) as ordered lists
    """
    strengths: list[str] = []
    improvements: list[str] = []

    for skill in Skill:
        level = skills_mastery.get(skill, 0)
        if level >= STRENGTH_THRESHOLD:
            strengths.append(strength_message(skill))
        elif level < IMPROVEMENT_THRESHOLD:
            improvements.append(improvement_message(skill))

    if len(dives) >= CONSISTENT_PRACTICE_DIVES:
        strengths.append(CONSISTENT_PRACTICE)

    if has_depth_progression(dives):
        strengths.append(GRADUAL_DEPTH_PROGRESSION)

    average_depth = sum(d.depth_achieved_m for d in dives) / len(dives)
    if average_depth < course.max_depth_limit_m * SHALLOW_AVERAGE_RATIO:
        improvements.append(GAIN_DEPTH_CONFIDENCE)

    if any(not d.equipment_check_passed for d in dives):
        improvements.append(EQUIPMENT_CHECK_CONSISTENCY)

    return strengths, improvements
