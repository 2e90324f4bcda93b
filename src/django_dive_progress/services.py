"""Dive progress business logic.

Reads a student's course data through the selectors, in sequence, and feeds
it to the analysis engine. All reads complete before the engine runs, so a
failed read never yields a partial analysis.
"""

import logging
import uuid

from django.core.exceptions import ValidationError
from django.db import DatabaseError

from .analysis import AnalysisResult, DiveStatistics, analyze, summarize_dives
from .exceptions import (
    EnrollmentNotFound,
    MissingParameter,
    ProgressDataError,
)
from .selectors import get_course_context, get_dive_records, get_latest_medical_snapshot

logger = logging.getLogger(__name__)


def _is_usable_id(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, (str, int, uuid.UUID)):
        return False
    return str(value).strip() != ""


def require_ids(student_id, course_id) -> None:
    """Reject absent, blank or non-scalar ids before any read.

    Ids must be strings, integers or UUIDs. Booleans, lists and objects from
    a JSON body count as missing.

    Raises:
        MissingParameter: Naming every unusable id
    """
    missing = [
        name
        for name, value in (("studentId", student_id), ("courseId", course_id))
        if not _is_usable_id(value)
    ]
    if missing:
        raise MissingParameter(missing)


def _read(selector, *args):
    """Run a selector, re-raising lookup and database failures as ProgressDataError."""
    try:
        return selector(*args)
    except ProgressDataError:
        raise
    except (TypeError, ValueError, ValidationError, DatabaseError) as e:
        raise ProgressDataError(f"Error reading progress data: {e}") from e


def analyze_student_progress(student_id, course_id) -> tuple[AnalysisResult, int]:
    """Analyze a student's progress in a course.

    Args:
        student_id: Student (user) primary key
        course_id: Course primary key

    Returns:
        (AnalysisResult, number of dives analyzed)

    Raises:
        MissingParameter: If either id is absent
        EnrollmentNotFound: If the student is not enrolled in the course
        ProgressDataError: If any read fails
    """
    require_ids(student_id, course_id)

    dives = _read(get_dive_records, student_id, course_id)
    medical = _read(get_latest_medical_snapshot, student_id)
    try:
        course = _read(get_course_context, student_id, course_id)
    except EnrollmentNotFound:
        logger.warning(
            "Progress analysis aborted: student %s is not enrolled in course %s",
            student_id,
            course_id,
        )
        raise

    result = analyze(dives, medical, course)
    logger.info(
        "Analyzed %d dives for student %s in course %s (safety score %d)",
        len(dives),
        student_id,
        course_id,
        result.safety_score,
    )
    return result, len(dives)


def get_dive_statistics(student_id, course_id) -> DiveStatistics:
    """Summarize a student's dive log in a course."""
    require_ids(student_id, course_id)
    dives = _read(get_dive_records, student_id, course_id)
    return summarize_dives(dives)


def analysis_payload(result: AnalysisResult, dives_analyzed: int) -> dict:
    """Success envelope returned by the API and the management command."""
    return {
        "success": True,
        "analysis": result.to_dict(),
        "divesAnalyzed": dives_analyzed,
    }


def error_payload(error: Exception) -> dict:
    """Failure envelope; carries a single message and no partial analysis."""
    return {"success": False, "error": str(error)}
