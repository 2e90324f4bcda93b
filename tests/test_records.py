"""Tests for normalizing raw dive, medical and course entries."""

from datetime import date
from decimal import Decimal

import pytest

from django_dive_progress.analysis import (
    CourseContext,
    DiveRecord,
    DiveSiteInfo,
    MedicalSnapshot,
    Skill,
    analyze,
    normalize_course,
    normalize_dive,
    normalize_medical,
)
from django_dive_progress.exceptions import DiveProgressError, InvalidDiveRecord


class TestNormalizeDive:
    """Tests for normalize_dive()."""

    def test_storage_row(self):
        """Snake_case row with Decimal columns and a joined site."""
        record = normalize_dive({
            "depth_achieved": Decimal("12.5"),
            "bottom_time": 40,
            "dive_date": date(2026, 3, 1),
            "equipment_check": True,
            "medical_check": True,
            "visibility": Decimal("15.0"),
            "water_temperature": Decimal("26.5"),
            "dive_site_id": "site-1",
            "dive_sites": {"max_depth": 30, "difficulty_level": 3},
        })

        assert record == DiveRecord(
            depth_achieved_m=12.5,
            bottom_time_min=40.0,
            dive_date=date(2026, 3, 1),
            equipment_check_passed=True,
            medical_check_passed=True,
            visibility_m=15.0,
            water_temperature_c=26.5,
            dive_site_id="site-1",
            dive_site=DiveSiteInfo(max_depth_m=30.0, difficulty_level=3),
        )
        assert isinstance(record.depth_achieved_m, float)

    def test_wire_payload(self):
        record = normalize_dive({
            "depthAchievedMeters": 9,
            "bottomTimeMinutes": "35",
            "diveDate": "2026-03-02",
            "equipmentCheckPassed": True,
            "medicalCheckPassed": False,
            "diveSiteId": 7,
            "diveSite": {"maxDepthMeters": 18, "difficultyLevel": 1},
        })

        assert record.depth_achieved_m == 9.0
        assert record.bottom_time_min == 35.0
        assert record.dive_date == "2026-03-02"
        assert record.medical_check_passed is False
        assert record.dive_site == DiveSiteInfo(max_depth_m=18.0, difficulty_level=1)

    def test_defaults(self):
        """Missing depth/time become 0, missing checks are not passed."""
        record = normalize_dive({"equipment_check": None})

        assert record.depth_achieved_m == 0.0
        assert record.bottom_time_min == 0.0
        assert record.equipment_check_passed is False
        assert record.medical_check_passed is False
        assert record.visibility_m is None
        assert record.water_temperature_c is None
        assert record.dive_site is None
        assert not record.has_conditions

    def test_zero_visibility_is_present(self):
        record = normalize_dive({"visibility": 0, "water_temperature": 20})
        assert record.visibility_m == 0.0
        assert record.has_conditions

    def test_fractional_difficulty_kept(self):
        """Difficulty is a number; 2.5 is not truncated to 2."""
        record = normalize_dive({
            "depthAchievedMeters": 10,
            "bottomTimeMinutes": 30,
            "equipmentCheckPassed": True,
            "medicalCheckPassed": True,
            "diveSite": {"maxDepthMeters": 30, "difficultyLevel": 2.5},
        })

        assert record.site_difficulty == 2.5
        assert analyze([record]).skills_mastery[Skill.NAVIGATION] == 38

    def test_site_without_difficulty(self):
        record = normalize_dive({"dive_site": {"max_depth_meters": Decimal("22.0")}})
        assert record.site_max_depth_m == 22.0
        assert record.site_difficulty is None

    def test_existing_record_passes_through(self):
        record = DiveRecord(depth_achieved_m=5)
        assert normalize_dive(record) is record

    def test_negative_depth_rejected(self):
        with pytest.raises(InvalidDiveRecord, match="depth_achieved cannot be negative"):
            normalize_dive({"depth_achieved": -1})

    def test_negative_bottom_time_rejected(self):
        with pytest.raises(InvalidDiveRecord):
            normalize_dive({"bottom_time": -5})

    def test_non_numeric_depth_rejected(self):
        with pytest.raises(InvalidDiveRecord, match="must be a number"):
            normalize_dive({"depth_achieved": "deep"})

    def test_invalid_record_is_value_error(self):
        with pytest.raises(ValueError):
            normalize_dive({"depth_achieved": "deep"})
        assert issubclass(InvalidDiveRecord, DiveProgressError)


class TestNormalizeMedical:
    """Tests for normalize_medical()."""

    def test_none_stays_none(self):
        assert normalize_medical(None) is None

    def test_fitness_level(self):
        assert normalize_medical({"fitness_level": 6}) == MedicalSnapshot(fitness_level=6)

    def test_record_without_fitness(self):
        assert normalize_medical({"notes": "ok"}) == MedicalSnapshot(fitness_level=None)


class TestNormalizeCourse:
    """Tests for normalize_course()."""

    def test_none_uses_defaults(self):
        assert normalize_course(None) == CourseContext(min_dives_required=4, max_depth_limit_m=18.0)

    def test_unset_fields_use_defaults(self):
        course = normalize_course({"min_dives_required": None, "max_depth_limit": None})
        assert course == CourseContext()

    def test_explicit_values(self):
        course = normalize_course({"minDivesRequired": 6, "maxDepthLimitMeters": Decimal("30.0")})
        assert course == CourseContext(min_dives_required=6, max_depth_limit_m=30.0)

    def test_zero_dives_required_is_kept(self):
        assert normalize_course({"min_dives_required": 0}).min_dives_required == 0
