"""Recommendation Generator.

A flat rule list: every rule is evaluated independently and matching rules
append their message in rule order. Order is not a severity ranking.
"""

from typing import Optional, Sequence

from .constants import (
    DEEP_DIVE_THRESHOLD_M,
    LOW_FITNESS_RECOMMENDATION,
    MIN_DISTINCT_SITES,
    PROFICIENT_THRESHOLD,
    SAFETY_REVIEW_THRESHOLD,
    SITE_VARIETY_MIN_DIVES,
    Skill,
)
from .records import CourseContext, DiveRecord, MedicalSnapshot

PRACTICE_BUOYANCY = "Practicar ejercicios de flotabilidad neutra en aguas protegidas"
PRACTICE_NAVIGATION = "Realizar inmersiones con brújula y práctica de navegación natural"
IMPROVE_FITNESS = "Considerar mejorar la condición física para buceo más cómodo"
EXPLORE_SITES = "Explorar diferentes sitios de buceo para mayor experiencia"
REVIEW_DEEP_SAFETY = "Revisar procedimientos de seguridad para inmersiones profundas"
READY_FOR_SPECIALTY = "¡Excelente progreso! Considera cursos de especialidad avanzada"


def remaining_dives_message(remaining: int) -> str:
    return f"Completar {remaining} inmersiones adicionales para certificación"


def count_distinct_sites(dives: Sequence[DiveRecord]) -> int:
    return len({dive.dive_site_id for dive in dives})


def generate_recommendations(
    dives: Sequence[DiveRecord],
    skills_mastery: dict,
    course: CourseContext,
    medical: Optional[MedicalSnapshot],
) -> list[str]:
    """Produce ordered free-text recommendations.

    Args:
        dives: Non-empty dive log, ascending by dive date
        skills_mastery: Skill -> mastery, as returned by estimate_skills_mastery
        course: Course requirements
        medical: Latest medical snapshot, or None

    Returns:
        Recommendation messages in rule order
    """
    recommendations: list[str] = []
    total_dives = len(dives)

    if skills_mastery.get(Skill.BUOYANCY, 0) < PROFICIENT_THRESHOLD:
        recommendations.append(PRACTICE_BUOYANCY)

    if skills_mastery.get(Skill.NAVIGATION, 0) < PROFICIENT_THRESHOLD:
        recommendations.append(PRACTICE_NAVIGATION)

    if total_dives < course.min_dives_required:
        recommendations.append(
            remaining_dives_message(course.min_dives_required - total_dives)
        )

    if (
        medical is not None
        and medical.fitness_level is not None
        and medical.fitness_level < LOW_FITNESS_RECOMMENDATION
    ):
        recommendations.append(IMPROVE_FITNESS)

    if (
        count_distinct_sites(dives) < MIN_DISTINCT_SITES
        and total_dives >= SITE_VARIETY_MIN_DIVES
    ):
        recommendations.append(EXPLORE_SITES)

    has_deep_dives = any(d.depth_achieved_m > DEEP_DIVE_THRESHOLD_M for d in dives)
    if (
        has_deep_dives
        and skills_mastery.get(Skill.SAFETY_PROCEDURES, 0) < SAFETY_REVIEW_THRESHOLD
    ):
        recommendations.append(REVIEW_DEEP_SAFETY)

    if total_dives >= course.min_dives_required and all(
        level >= PROFICIENT_THRESHOLD for level in skills_mastery.values()
    ):
        recommendations.append(READY_FOR_SPECIALTY)

    return recommendations
