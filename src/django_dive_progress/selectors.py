"""Selectors for student progress data.

Each selector implements one read of the analysis contract and returns
engine value types, never model instances:
- get_dive_records: dives for (student, course) joined with site metadata,
  ascending by dive date
- get_latest_medical_snapshot: the most recent medical record, or None
- get_course_context: course requirements from the student's enrollment
"""

from typing import Optional

from .analysis import (
    CourseContext,
    DiveRecord,
    DiveSiteInfo,
    MedicalSnapshot,
    normalize_course,
    normalize_dive,
    normalize_medical,
)
from .exceptions import EnrollmentNotFound
from .models import CourseEnrollment, Dive, MedicalRecord


def dive_to_record(dive: Dive) -> DiveRecord:
    """Convert a Dive row (with its site loaded) to a normalized DiveRecord."""
    site = dive.dive_site
    return normalize_dive({
        "depth_achieved_meters": dive.depth_achieved_meters,
        "bottom_time_minutes": dive.bottom_time_minutes,
        "dive_date": dive.dive_date,
        "equipment_check": dive.equipment_check,
        "medical_check": dive.medical_check,
        "visibility_meters": dive.visibility_meters,
        "water_temperature_celsius": dive.water_temperature_celsius,
        "dive_site_id": dive.dive_site_id,
        "dive_site": DiveSiteInfo(
            max_depth_m=float(site.max_depth_meters),
            difficulty_level=site.difficulty_level,
        ),
    })


def get_dive_records(student_id, course_id) -> list[DiveRecord]:
    """Get a student's dives in a course, ascending by dive date.

    Dives on the same date keep dive time order, then creation order.
    """
    dives = (
        Dive.objects.filter(student_id=student_id, course_id=course_id)
        .select_related("dive_site")
        .order_by("dive_date", "dive_time", "created_at")
    )
    return [dive_to_record(dive) for dive in dives]


def get_latest_medical_snapshot(student_id) -> Optional[MedicalSnapshot]:
    """Get the student's most recent medical record, or None."""
    record = (
        MedicalRecord.objects.filter(student_id=student_id)
        .order_by("-recorded_at", "-created_at")
        .only("fitness_level")
        .first()
    )
    if record is None:
        return None
    return normalize_medical({"fitness_level": record.fitness_level})


def get_course_context(student_id, course_id) -> CourseContext:
    """Get course requirements for the student's enrollment.

    Raises:
        EnrollmentNotFound: If the student is not enrolled in the course
    """
    enrollment = (
        CourseEnrollment.objects.filter(student_id=student_id, course_id=course_id)
        .select_related("course")
        .first()
    )
    if enrollment is None:
        raise EnrollmentNotFound(student_id, course_id)

    course = enrollment.course
    return normalize_course({
        "min_dives_required": course.min_dives_required,
        "max_depth_limit_meters": course.max_depth_limit_meters,
    })
