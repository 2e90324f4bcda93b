"""Safety Scorer.

Starts from 100 and deducts for missed checks, dives past the safety depth
margin of their site, and low medical fitness. Deductions are applied
without flooring; the score is clamped to [0, 100] once at the end.
"""

from typing import Optional, Sequence

from .constants import (
    DEPTH_MARGIN_PENALTY,
    LOW_FITNESS_PENALTY,
    LOW_FITNESS_SAFETY,
    MISSED_EQUIPMENT_CHECK_PENALTY,
    MISSED_MEDICAL_CHECK_PENALTY,
    SAFETY_BASE_SCORE,
    SAFETY_DEPTH_MARGIN_RATIO,
    SAFETY_MAX,
    SAFETY_MIN,
)
from .numbers import clamp
from .records import DiveRecord, MedicalSnapshot


def exceeds_depth_margin(dive: DiveRecord) -> bool:
    """True when the dive went past the safety margin of its site.

    Dives without site max depth are not counted.
    """
    max_depth = dive.site_max_depth_m
    if max_depth is None:
        return False
    return dive.depth_achieved_m > max_depth * SAFETY_DEPTH_MARGIN_RATIO


def calculate_safety_score(
    dives: Sequence[DiveRecord],
    medical: Optional[MedicalSnapshot],
) -> int:
    """Compute the 0-100 safety score for a dive log."""
    score = SAFETY_BASE_SCORE

    missed_equipment = sum(1 for d in dives if not d.equipment_check_passed)
    missed_medical = sum(1 for d in dives if not d.medical_check_passed)
    margin_violations = sum(1 for d in dives if exceeds_depth_margin(d))

    score -= missed_equipment * MISSED_EQUIPMENT_CHECK_PENALTY
    score -= missed_medical * MISSED_MEDICAL_CHECK_PENALTY
    score -= margin_violations * DEPTH_MARGIN_PENALTY

    if (
        medical is not None
        and medical.fitness_level is not None
        and medical.fitness_level < LOW_FITNESS_SAFETY
    ):
        score -= LOW_FITNESS_PENALTY

    return int(clamp(score, SAFETY_MIN, SAFETY_MAX))
