"""Skill Mastery Estimator.

Turns an ordered dive log into a 0-100 mastery score for each Skill.

Contributions are recency weighted: the dive at index i of n counts with
weight (i + 1) / n, so the latest dive always counts in full. Points are
summed across all dives and only clamped once at the end; clamping per dive
would change the result.
"""

from typing import Sequence

from .constants import (
    BOTTOM_TIME_NORMALIZATION_MIN,
    BUOYANCY_POINTS,
    COMMUNICATION_POINTS,
    CONSERVATIVE_DEPTH_RATIO,
    DEPTH_NORMALIZATION_M,
    ENVIRONMENT_ADAPTATION_POINTS,
    EQUIPMENT_HANDLING_POINTS,
    MASTERY_MAX,
    MASTERY_MIN,
    NAVIGATION_POINTS_PER_DIFFICULTY,
    SAFETY_PROCEDURES_POINTS,
    Skill,
)
from .numbers import clamp, round_half_up
from .records import DiveRecord


def dive_weight(index: int, total: int) -> float:
    """Recency weight of the dive at zero-based index in a log of total dives."""
    return (index + 1) / total


def is_conservative_dive(dive: DiveRecord) -> bool:
    """True when the dive stayed within the conservative share of site max depth.

    Dives without site max depth are never conservative.
    """
    max_depth = dive.site_max_depth_m
    if max_depth is None:
        return False
    return dive.depth_achieved_m <= max_depth * CONSERVATIVE_DEPTH_RATIO


def score_dive(dive: DiveRecord, weight: float) -> dict:
    """Points one dive contributes to each skill at the given weight."""
    depth_factor = min(dive.depth_achieved_m / DEPTH_NORMALIZATION_M, 1)
    time_factor = min(dive.bottom_time_min / BOTTOM_TIME_NORMALIZATION_MIN, 1)
    both_checks = dive.equipment_check_passed and dive.medical_check_passed

    points = dict.fromkeys(Skill, 0.0)
    points[Skill.BUOYANCY] = depth_factor * time_factor * weight * BUOYANCY_POINTS

    if dive.site_difficulty:
        points[Skill.NAVIGATION] = (
            dive.site_difficulty * weight * NAVIGATION_POINTS_PER_DIFFICULTY
        )
    if both_checks:
        points[Skill.COMMUNICATION] = weight * COMMUNICATION_POINTS
    if dive.equipment_check_passed:
        points[Skill.EQUIPMENT_HANDLING] = weight * EQUIPMENT_HANDLING_POINTS
    if both_checks and is_conservative_dive(dive):
        points[Skill.SAFETY_PROCEDURES] = weight * SAFETY_PROCEDURES_POINTS
    if dive.has_conditions:
        points[Skill.ENVIRONMENT_ADAPTATION] = weight * ENVIRONMENT_ADAPTATION_POINTS

    return points


def estimate_skills_mastery(dives: Sequence[DiveRecord]) -> dict:
    """Estimate mastery for every Skill from an ordered dive log.

    Args:
        dives: Dives ascending by dive date

    Returns:
        Dict of Skill -> integer mastery in [0, 100], in Skill order.
        All skills are 0 for an empty log.
    """
    totals = dict.fromkeys(Skill, 0.0)
    total_dives = len(dives)

    for index, dive in enumerate(dives):
        weight = dive_weight(index, total_dives)
        for skill, points in score_dive(dive, weight).items():
            totals[skill] += points

    return {
        skill: int(clamp(round_half_up(total), MASTERY_MIN, MASTERY_MAX))
        for skill, total in totals.items()
    }
