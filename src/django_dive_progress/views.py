"""JSON API views for dive progress analysis."""

import json
import logging

from django.http import HttpResponse, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET

from . import services
from .conf import cors_headers
from .exceptions import EnrollmentNotFound, MissingParameter, ProgressDataError

logger = logging.getLogger(__name__)


def _json(data: dict, status: int = 200) -> JsonResponse:
    response = JsonResponse(data, status=status, json_dumps_params={"ensure_ascii": False})
    for header, value in cors_headers().items():
        response[header] = value
    return response


def _error(error: Exception, status: int) -> JsonResponse:
    return _json(services.error_payload(error), status=status)


def _parse_ids(request) -> tuple:
    """Read (student_id, course_id) from a JSON body.

    Accepts camelCase keys as sent by the web client and snake_case keys.
    """
    try:
        body = json.loads(request.body or b"{}")
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise MissingParameter(["studentId", "courseId"])
    if not isinstance(body, dict):
        raise MissingParameter(["studentId", "courseId"])

    student_id = body.get("studentId", body.get("student_id"))
    course_id = body.get("courseId", body.get("course_id"))
    return student_id, course_id


@csrf_exempt
def api_analyze(request):
    """API: Analyze a student's progress in a course.

    POST {"studentId": ..., "courseId": ...}
    -> {"success": true, "analysis": {...}, "divesAnalyzed": n}
    """
    if request.method == "OPTIONS":
        response = HttpResponse()
        for header, value in cors_headers().items():
            response[header] = value
        return response

    if request.method != "POST":
        return _json({"success": False, "error": "Method not allowed"}, status=405)

    try:
        student_id, course_id = _parse_ids(request)
        result, dives_analyzed = services.analyze_student_progress(student_id, course_id)
    except MissingParameter as e:
        return _error(e, status=400)
    except EnrollmentNotFound as e:
        return _error(e, status=404)
    except ProgressDataError as e:
        logger.exception("Error in progress analysis")
        return _error(e, status=500)

    return _json(services.analysis_payload(result, dives_analyzed))


@require_GET
def api_statistics(request, student_id, course_id):
    """API: Dive log statistics for a student in a course."""
    try:
        statistics = services.get_dive_statistics(student_id, course_id)
    except ProgressDataError as e:
        logger.exception("Error reading dive statistics")
        return _error(e, status=500)

    return _json({"success": True, "statistics": statistics.to_dict()})
