"""Exceptions for django-dive-progress."""


class DiveProgressError(Exception):
    """Base exception for dive progress errors."""


class InvalidDiveRecord(DiveProgressError, ValueError):
    """Raised when a raw dive entry cannot be normalized."""


class MissingParameter(DiveProgressError):
    """Raised when a required request parameter is absent."""

    def __init__(self, missing: list[str]):
        self.missing = missing
        names = ", ".join(missing)
        super().__init__(f"Missing required parameters: {names}")


class ProgressDataError(DiveProgressError):
    """Raised when student progress data cannot be read."""


class EnrollmentNotFound(ProgressDataError):
    """Raised when the student is not enrolled in the course."""

    def __init__(self, student_id, course_id):
        self.student_id = student_id
        self.course_id = course_id
        super().__init__(
            f"No enrollment found for student {student_id} in course {course_id}"
        )
