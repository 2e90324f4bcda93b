"""Value types consumed and produced by the analysis engine.

Raw dive entries arrive either as storage rows (snake_case, as read by the
selectors) or as API payloads (camelCase). The normalize_* helpers accept
both and return immutable records with absent optional fields left as None
and missing safety checks treated as not passed.

Dive lists are ordered sequences: the engine weights dives by position and
compares the first and last entries, so callers must pass them ascending by
dive date and must not reorder them when filtering.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from ..exceptions import InvalidDiveRecord
from .constants import DEFAULT_MAX_DEPTH_LIMIT_M, DEFAULT_MIN_DIVES_REQUIRED


@dataclass(frozen=True)
class DiveSiteInfo:
    """Site metadata joined onto a dive."""

    max_depth_m: Optional[float] = None
    difficulty_level: Optional[float] = None


@dataclass(frozen=True)
class DiveRecord:
    """One completed dive attributed to a student within a course."""

    depth_achieved_m: float = 0.0
    bottom_time_min: float = 0.0
    dive_date: Any = None
    equipment_check_passed: bool = False
    medical_check_passed: bool = False
    visibility_m: Optional[float] = None
    water_temperature_c: Optional[float] = None
    dive_site_id: Any = None
    dive_site: Optional[DiveSiteInfo] = None

    @property
    def site_max_depth_m(self) -> Optional[float]:
        if self.dive_site is None:
            return None
        return self.dive_site.max_depth_m

    @property
    def site_difficulty(self) -> Optional[float]:
        if self.dive_site is None:
            return None
        return self.dive_site.difficulty_level

    @property
    def has_conditions(self) -> bool:
        """True when both visibility and water temperature were logged."""
        return self.visibility_m is not None and self.water_temperature_c is not None


@dataclass(frozen=True)
class MedicalSnapshot:
    """Most recent medical record for a student."""

    fitness_level: Optional[int] = None


@dataclass(frozen=True)
class CourseContext:
    """Static requirements of the course the student is enrolled in."""

    min_dives_required: int = DEFAULT_MIN_DIVES_REQUIRED
    max_depth_limit_m: float = DEFAULT_MAX_DEPTH_LIMIT_M


@dataclass(frozen=True)
class AnalysisResult:
    """Structured performance assessment for one student and course.

    Attributes:
        total_dives: Number of dives analyzed
        average_depth_m: Mean depth, rounded to 2 decimals
        average_bottom_time_min: Mean bottom time, rounded to an integer
        progression_rate: 0-100 first-versus-last dive comparison
        skills_mastery: Skill -> 0-100 mastery (empty on cold start)
        strengths: Ordered strength messages
        improvements: Ordered improvement messages
        recommendations: Ordered recommendation messages
        safety_score: 0-100 safety score
    """

    total_dives: int
    average_depth_m: float
    average_bottom_time_min: int
    progression_rate: int
    skills_mastery: dict = field(default_factory=dict)
    strengths: tuple = ()
    improvements: tuple = ()
    recommendations: tuple = ()
    safety_score: int = 0

    def to_dict(self) -> dict:
        """Serialize to the JSON shape returned by the analysis endpoint."""
        return {
            "totalDives": self.total_dives,
            "averageDepthMeters": self.average_depth_m,
            "averageBottomTimeMinutes": self.average_bottom_time_min,
            "progressionRate": self.progression_rate,
            "skillsMastery": {
                getattr(skill, "value", skill): level
                for skill, level in self.skills_mastery.items()
            },
            "strengths": list(self.strengths),
            "improvements": list(self.improvements),
            "recommendations": list(self.recommendations),
            "safetyScore": self.safety_score,
        }


# =============================================================================
# Normalizer
# =============================================================================


def _pick(raw: Mapping, *keys: str) -> Any:
    """Return the first non-None value among keys."""
    for key in keys:
        value = raw.get(key)
        if value is not None:
            return value
    return None


def _to_float(value: Any, name: str) -> Optional[float]:
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise InvalidDiveRecord(f"{name} must be a number, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError):
        raise InvalidDiveRecord(f"{name} must be a number, got {value!r}")


def _to_int(value: Any, name: str) -> Optional[int]:
    number = _to_float(value, name)
    if number is None:
        return None
    return int(number)


def _non_negative(value: Optional[float], name: str) -> float:
    if value is None:
        return 0.0
    if value < 0:
        raise InvalidDiveRecord(f"{name} cannot be negative, got {value}")
    return value


def normalize_site(raw: Any) -> Optional[DiveSiteInfo]:
    """Normalize joined dive site metadata, or None when absent."""
    if raw is None:
        return None
    if isinstance(raw, DiveSiteInfo):
        return raw
    return DiveSiteInfo(
        max_depth_m=_to_float(
            _pick(raw, "max_depth_m", "max_depth_meters", "max_depth", "maxDepthMeters"),
            "max_depth",
        ),
        difficulty_level=_to_float(
            _pick(raw, "difficulty_level", "difficultyLevel"),
            "difficulty_level",
        ),
    )


def normalize_dive(raw: Any) -> DiveRecord:
    """Validate and default one raw dive entry.

    Args:
        raw: Mapping with storage (snake_case) or wire (camelCase) keys,
            or an existing DiveRecord

    Returns:
        DiveRecord with depth/time defaulted to 0 and checks to False

    Raises:
        InvalidDiveRecord: If a numeric field is malformed or depth/time
            is negative
    """
    if isinstance(raw, DiveRecord):
        return raw

    depth = _to_float(
        _pick(raw, "depth_achieved_m", "depth_achieved_meters", "depth_achieved", "depthAchievedMeters"),
        "depth_achieved",
    )
    bottom_time = _to_float(
        _pick(raw, "bottom_time_min", "bottom_time_minutes", "bottom_time", "bottomTimeMinutes"),
        "bottom_time",
    )

    return DiveRecord(
        depth_achieved_m=_non_negative(depth, "depth_achieved"),
        bottom_time_min=_non_negative(bottom_time, "bottom_time"),
        dive_date=_pick(raw, "dive_date", "diveDate"),
        equipment_check_passed=bool(
            _pick(raw, "equipment_check_passed", "equipment_check", "equipmentCheckPassed")
        ),
        medical_check_passed=bool(
            _pick(raw, "medical_check_passed", "medical_check", "medicalCheckPassed")
        ),
        visibility_m=_to_float(
            _pick(raw, "visibility_m", "visibility_meters", "visibility", "visibilityMeters"),
            "visibility",
        ),
        water_temperature_c=_to_float(
            _pick(
                raw,
                "water_temperature_c",
                "water_temperature_celsius",
                "water_temperature",
                "waterTemperatureCelsius",
            ),
            "water_temperature",
        ),
        dive_site_id=_pick(raw, "dive_site_id", "diveSiteId"),
        dive_site=normalize_site(_pick(raw, "dive_site", "dive_sites", "diveSite")),
    )


def normalize_medical(raw: Any) -> Optional[MedicalSnapshot]:
    """Normalize a medical record; None stays None."""
    if raw is None or isinstance(raw, MedicalSnapshot):
        return raw
    return MedicalSnapshot(
        fitness_level=_to_int(_pick(raw, "fitness_level", "fitnessLevel"), "fitness_level"),
    )


def normalize_course(raw: Any) -> CourseContext:
    """Normalize course requirements, applying defaults for unset values."""
    if raw is None:
        return CourseContext()
    if isinstance(raw, CourseContext):
        return raw

    min_dives = _to_int(
        _pick(raw, "min_dives_required", "minDivesRequired"), "min_dives_required"
    )
    max_depth = _to_float(
        _pick(raw, "max_depth_limit_m", "max_depth_limit_meters", "max_depth_limit", "maxDepthLimitMeters"),
        "max_depth_limit",
    )
    return CourseContext(
        min_dives_required=DEFAULT_MIN_DIVES_REQUIRED if min_dives is None else min_dives,
        max_depth_limit_m=DEFAULT_MAX_DEPTH_LIMIT_M if max_depth is None else max_depth,
    )

