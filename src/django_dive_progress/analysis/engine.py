"""Analysis Orchestrator.

analyze() is a pure function of its inputs: no I/O, no shared state, and
identical inputs always give an identical AnalysisResult.
"""

from typing import Optional, Sequence

from .constants import (
    COLD_START_IMPROVEMENTS,
    COLD_START_RECOMMENDATIONS,
    COLD_START_SAFETY_SCORE,
    COLD_START_STRENGTHS,
    PROGRESSION_MAX,
    PROGRESSION_MIN,
    PROGRESSION_SCALE,
)
from .mastery import estimate_skills_mastery
from .narrator import describe_progress
from .numbers import clamp, round_half_up
from .recommendations import generate_recommendations
from .records import AnalysisResult, CourseContext, DiveRecord, MedicalSnapshot
from .safety import calculate_safety_score


def cold_start_result() -> AnalysisResult:
    """Fixed result for a student with no logged dives."""
    return AnalysisResult(
        total_dives=0,
        average_depth_m=0,
        average_bottom_time_min=0,
        progression_rate=0,
        skills_mastery={},
        strengths=COLD_START_STRENGTHS,
        improvements=COLD_START_IMPROVEMENTS,
        recommendations=COLD_START_RECOMMENDATIONS,
        safety_score=COLD_START_SAFETY_SCORE,
    )


def calculate_progression_rate(dives: Sequence[DiveRecord]) -> float:
    """Compare the first and last dive by depth and bottom time.

    Only the two endpoints are compared, so a single outlier at either end
    moves the rate. Intermediate dives are ignored.

    Returns:
        Unrounded rate clamped to [0, 100]
    """
    first, last = dives[0], dives[-1]
    depth_progression = last.depth_achieved_m - first.depth_achieved_m
    time_progression = last.bottom_time_min - first.bottom_time_min
    rate = (depth_progression + time_progression) / len(dives) * PROGRESSION_SCALE
    return clamp(rate, PROGRESSION_MIN, PROGRESSION_MAX)


def analyze(
    dives: Sequence[DiveRecord],
    medical: Optional[MedicalSnapshot] = None,
    course: Optional[CourseContext] = None,
) -> AnalysisResult:
    """Assess a student's progress in a course.

    Args:
        dives: Normalized dives, ascending by dive date. The order is used
            as given and never re-sorted.
        medical: Latest medical snapshot, or None
        course: Course requirements (defaults apply when None)

    Returns:
        AnalysisResult; the cold start result when there are no dives
    """
    if not dives:
        return cold_start_result()

    course = course or CourseContext()
    total_dives = len(dives)
    average_depth = sum(d.depth_achieved_m for d in dives) / total_dives
    average_bottom_time = sum(d.bottom_time_min for d in dives) / total_dives

    skills_mastery = estimate_skills_mastery(dives)
    strengths, improvements = describe_progress(dives, skills_mastery, course)
    recommendations = generate_recommendations(dives, skills_mastery, course, medical)

    return AnalysisResult(
        total_dives=total_dives,
        average_depth_m=round_half_up(average_depth, 2),
        average_bottom_time_min=int(round_half_up(average_bottom_time)),
        progression_rate=int(round_half_up(calculate_progression_rate(dives))),
        skills_mastery=skills_mastery,
        strengths=tuple(strengths),
        improvements=tuple(improvements),
        recommendations=tuple(recommendations),
        safety_score=calculate_safety_score(dives, medical),
    )
