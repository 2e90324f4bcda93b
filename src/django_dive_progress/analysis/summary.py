"""Dive log statistics and score bands for reports and dashboards."""

from dataclasses import dataclass
from typing import Sequence

from .constants import HIGH_SCORE_BAND, MEDIUM_SCORE_BAND
from .numbers import round_half_up
from .records import DiveRecord


@dataclass(frozen=True)
class DiveStatistics:
    """Aggregate figures for a student's dive log in one course."""

    total_dives: int
    total_bottom_time_min: float
    max_depth_achieved_m: float
    average_depth_m: float
    dive_sites_visited: int

    def to_dict(self) -> dict:
        return {
            "totalDives": self.total_dives,
            "totalBottomTimeMinutes": self.total_bottom_time_min,
            "maxDepthAchievedMeters": self.max_depth_achieved_m,
            "averageDepthMeters": self.average_depth_m,
            "diveSitesVisited": self.dive_sites_visited,
        }


def summarize_dives(dives: Sequence[DiveRecord]) -> DiveStatistics:
    """Summarize a dive log; an empty log yields all zeros."""
    total = len(dives)
    if not total:
        return DiveStatistics(0, 0, 0, 0, 0)

    average_depth = sum(d.depth_achieved_m for d in dives) / total
    return DiveStatistics(
        total_dives=total,
        total_bottom_time_min=sum(d.bottom_time_min for d in dives),
        max_depth_achieved_m=max(d.depth_achieved_m for d in dives),
        average_depth_m=round_half_up(average_depth, 1),
        dive_sites_visited=len({d.dive_site_id for d in dives}),
    )


def score_band(score: float) -> str:
    """Band a 0-100 score as 'high', 'medium' or 'low'."""
    if score >= HIGH_SCORE_BAND:
        return "high"
    if score >= MEDIUM_SCORE_BAND:
        return "medium"
    return "low"
