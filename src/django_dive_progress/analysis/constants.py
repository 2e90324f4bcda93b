"""Scoring constants for the progress analysis engine.

Every number the engine uses lives here. The skill check and the safety
deduction each have their own depth-margin ratio.
"""

from enum import Enum


class Skill(str, Enum):
    """The six assessed diving skills, in reporting order."""

    BUOYANCY = "Flotabilidad"
    NAVIGATION = "Navegación"
    COMMUNICATION = "Comunicación"
    EQUIPMENT_HANDLING = "Manejo de Equipo"
    SAFETY_PROCEDURES = "Procedimientos de Seguridad"
    ENVIRONMENT_ADAPTATION = "Adaptación al Entorno"

    @property
    def label(self) -> str:
        """Lowercase name used inside narrative messages."""
        return self.value.lower()


# =============================================================================
# Course defaults (applied when the course leaves a requirement unset)
# =============================================================================

DEFAULT_MIN_DIVES_REQUIRED = 4
DEFAULT_MAX_DEPTH_LIMIT_M = 18.0


# =============================================================================
# Skill mastery
# =============================================================================

# Normalization ceilings for the buoyancy factor
DEPTH_NORMALIZATION_M = 18.0
BOTTOM_TIME_NORMALIZATION_MIN = 45.0

BUOYANCY_POINTS = 20
NAVIGATION_POINTS_PER_DIFFICULTY = 15
COMMUNICATION_POINTS = 25
EQUIPMENT_HANDLING_POINTS = 20
SAFETY_PROCEDURES_POINTS = 20
ENVIRONMENT_ADAPTATION_POINTS = 15

# A dive counts as conservative when it stays within this share of site max depth
CONSERVATIVE_DEPTH_RATIO = 0.8

MASTERY_MIN = 0
MASTERY_MAX = 100


# =============================================================================
# Narrative and recommendation thresholds
# =============================================================================

STRENGTH_THRESHOLD = 80
IMPROVEMENT_THRESHOLD = 50
PROFICIENT_THRESHOLD = 70
SAFETY_REVIEW_THRESHOLD = 80

CONSISTENT_PRACTICE_DIVES = 3
SHALLOW_AVERAGE_RATIO = 0.6
LOW_FITNESS_RECOMMENDATION = 7
DEEP_DIVE_THRESHOLD_M = 15.0
MIN_DISTINCT_SITES = 2
SITE_VARIETY_MIN_DIVES = 3


# =============================================================================
# Progression rate
# =============================================================================

PROGRESSION_SCALE = 10
PROGRESSION_MIN = 0
PROGRESSION_MAX = 100


# =============================================================================
# Safety score
# =============================================================================

SAFETY_BASE_SCORE = 100
MISSED_EQUIPMENT_CHECK_PENALTY = 5
MISSED_MEDICAL_CHECK_PENALTY = 5
DEPTH_MARGIN_PENALTY = 10
LOW_FITNESS_PENALTY = 10
LOW_FITNESS_SAFETY = 5

# A dive violates the safety margin past this share of site max depth
SAFETY_DEPTH_MARGIN_RATIO = 0.9

SAFETY_MIN = 0
SAFETY_MAX = 100


# =============================================================================
# Score bands (display colouring)
# =============================================================================

HIGH_SCORE_BAND = 80
MEDIUM_SCORE_BAND = 60


# =============================================================================
# Cold start (student with no logged dives)
# =============================================================================

COLD_START_STRENGTHS = ("Estudiante motivado para comenzar",)
COLD_START_IMPROVEMENTS = ("Completar las primeras inmersiones",)
COLD_START_RECOMMENDATIONS = (
    "Comenzar con inmersiones en aguas protegidas",
    "Enfocarse en habilidades básicas",
)
COLD_START_SAFETY_SCORE = 8
