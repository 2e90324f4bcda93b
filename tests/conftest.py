"""Shared fixtures for django-dive-progress tests."""

from datetime import date, timedelta
from decimal import Decimal

import pytest


@pytest.fixture
def student(django_user_model):
    return django_user_model.objects.create_user(
        username="student", email="student@example.com", password="testpass123"
    )


@pytest.fixture
def instructor(django_user_model):
    return django_user_model.objects.create_user(
        username="instructor", email="instructor@example.com", password="testpass123"
    )


@pytest.fixture
def open_water_course(db):
    from django_dive_progress.models import Course

    return Course.objects.create(
        code="OWD",
        name="Open Water Diver",
        certification_agency="PADI",
        min_dives_required=4,
        max_depth_limit_meters=Decimal("18.0"),
    )


@pytest.fixture
def reef_site(db):
    from django_dive_progress.models import DiveSite

    return DiveSite.objects.create(
        name="Coral Garden",
        location="Bahía",
        max_depth_meters=Decimal("30.0"),
        difficulty_level=2,
    )


@pytest.fixture
def wall_site(db):
    from django_dive_progress.models import DiveSite

    return DiveSite.objects.create(
        name="The Wall",
        location="Punta",
        max_depth_meters=Decimal("20.0"),
        difficulty_level=4,
    )


@pytest.fixture
def enrollment(student, instructor, open_water_course):
    from django_dive_progress.models import CourseEnrollment

    return CourseEnrollment.objects.create(
        student=student,
        course=open_water_course,
        instructor=instructor,
    )


@pytest.fixture
def log_dive(student, open_water_course, reef_site):
    """Create Dive rows for the enrolled student, one day apart by default."""
    from django_dive_progress.models import Dive

    start = date(2026, 3, 1)
    counter = {"n": 0}

    def _log_dive(depth, bottom_time, *, site=None, dive_date=None, **fields):
        if dive_date is None:
            dive_date = start + timedelta(days=counter["n"])
        counter["n"] += 1
        fields.setdefault("equipment_check", True)
        fields.setdefault("medical_check", True)
        return Dive.objects.create(
            student=student,
            course=open_water_course,
            dive_site=site or reef_site,
            dive_date=dive_date,
            depth_achieved_meters=Decimal(str(depth)),
            bottom_time_minutes=bottom_time,
            **fields,
        )

    return _log_dive
