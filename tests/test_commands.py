"""Tests for the analyze_progress management command."""

import json
from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError


def run_command(*args, **options):
    stdout = StringIO()
    stderr = StringIO()
    call_command("analyze_progress", *args, stdout=stdout, stderr=stderr, **options)
    return stdout.getvalue(), stderr.getvalue()


@pytest.mark.django_db
class TestAnalyzeProgressCommand:
    """Tests for manage.py analyze_progress."""

    def test_prints_analysis(self, student, open_water_course, enrollment, log_dive):
        log_dive(10, 30)

        stdout, _ = run_command(str(student.pk), str(open_water_course.pk))

        payload = json.loads(stdout)
        assert payload["success"] is True
        assert payload["divesAnalyzed"] == 1
        assert payload["analysis"]["safetyScore"] == 100
        assert "Flotabilidad" in stdout

    def test_indent(self, student, open_water_course, enrollment):
        stdout, _ = run_command(str(student.pk), str(open_water_course.pk), indent=2)

        assert stdout.startswith("{\n  ")

    def test_indent_setting(self, settings, student, open_water_course, enrollment):
        settings.DIVE_PROGRESS_JSON_INDENT = 4

        stdout, _ = run_command(str(student.pk), str(open_water_course.pk))

        assert stdout.startswith("{\n    ")

    def test_summary(self, student, open_water_course, enrollment, log_dive):
        log_dive(10, 30, equipment_check=False)

        _, stderr = run_command(str(student.pk), str(open_water_course.pk), summary=True)

        assert "1 dives analyzed, safety score 95 (high)" in stderr

    def test_not_enrolled(self, student, open_water_course):
        with pytest.raises(CommandError, match="No enrollment found"):
            run_command(str(student.pk), str(open_water_course.pk))

    def test_malformed_course_id(self, student):
        with pytest.raises(CommandError):
            run_command(str(student.pk), "not-a-uuid")
