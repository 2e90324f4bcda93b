"""Run a progress analysis for one student and course.

Prints the same JSON envelope the analyze API returns.

Usage:
    python manage.py analyze_progress <student_id> <course_id>
    python manage.py analyze_progress <student_id> <course_id> --indent 2
"""

import json

from django.core.management.base import BaseCommand, CommandError

from django_dive_progress import services
from django_dive_progress.analysis import score_band
from django_dive_progress.conf import get_setting
from django_dive_progress.exceptions import DiveProgressError


class Command(BaseCommand):
    help = "Analyze a student's diving progress in a course and print it as JSON"

    def add_arguments(self, parser):
        parser.add_argument("student_id", help="Student (user) primary key")
        parser.add_argument("course_id", help="Course UUID")
        parser.add_argument(
            "--indent",
            type=int,
            default=None,
            help="Indent the JSON output (default: DIVE_PROGRESS_JSON_INDENT)",
        )
        parser.add_argument(
            "--summary",
            action="store_true",
            help="Print a one-line summary to stderr after the JSON",
        )

    def handle(self, *args, **options):
        indent = options["indent"]
        if indent is None:
            indent = get_setting("JSON_INDENT")

        try:
            result, dives_analyzed = services.analyze_student_progress(
                options["student_id"], options["course_id"]
            )
        except DiveProgressError as e:
            raise CommandError(str(e)) from e

        payload = services.analysis_payload(result, dives_analyzed)
        self.stdout.write(json.dumps(payload, indent=indent, ensure_ascii=False))

        if options["summary"]:
            self.stderr.write(
                f"{dives_analyzed} dives analyzed, safety score "
                f"{result.safety_score} ({score_band(result.safety_score)})"
            )
