"""Diving progress analysis engine.

Pure computation over an in-memory, date-ordered dive log. Nothing in this
package touches Django, the database or the network.

Usage:
    from django_dive_progress.analysis import CourseContext, analyze, normalize_dive

    dives = [normalize_dive(row) for row in rows]
    result = analyze(dives, medical=None, course=CourseContext())
"""

from .constants import Skill
from .engine import analyze, calculate_progression_rate, cold_start_result
from .mastery import estimate_skills_mastery
from .narrator import describe_progress
from .recommendations import generate_recommendations
from .records import (
    AnalysisResult,
    CourseContext,
    DiveRecord,
    DiveSiteInfo,
    MedicalSnapshot,
    normalize_course,
    normalize_dive,
    normalize_medical,
)
from .safety import calculate_safety_score
from .summary import DiveStatistics, score_band, summarize_dives

__all__ = [
    "AnalysisResult",
    "CourseContext",
    "DiveRecord",
    "DiveSiteInfo",
    "DiveStatistics",
    "MedicalSnapshot",
    "Skill",
    "analyze",
    "calculate_progression_rate",
    "calculate_safety_score",
    "cold_start_result",
    "describe_progress",
    "estimate_skills_mastery",
    "generate_recommendations",
    "normalize_course",
    "normalize_dive",
    "normalize_medical",
    "score_band",
    "summarize_dives",
]
