"""Django Dive Progress - Student progress analysis for dive schools.

Provides:
- analysis: Pure scoring engine (skill mastery, safety score, strengths,
  improvements and recommendations) over an ordered dive log
- DiveSite, Course, CourseEnrollment, Dive, MedicalRecord: storage models
  backing the read contract the engine is fed from
- analyze_student_progress: service that reads a student's course data and
  runs the engine
- POST analyze/ JSON endpoint and the analyze_progress management command

Usage:
    INSTALLED_APPS = [
        ...
        'django_dive_progress',
    ]

See conf.py for configuration options.
"""

__version__ = "0.1.0"
