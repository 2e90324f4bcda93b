"""Storage models for dive school progress data.

These tables back the read contract the analysis engine is fed from:
- Dive: one logged dive by a student, joined with its DiveSite
- MedicalRecord: dated medical snapshots (only the latest is analyzed)
- CourseEnrollment + Course: course requirements for a student

Students and instructors are AUTH_USER_MODEL users.
"""

import uuid

from django.conf import settings
from django.db import models
from django.db.models import F, Q
from django.utils import timezone


class BaseModel(models.Model):
    """Abstract base with UUID primary key and created/updated timestamps."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class DiveSite(BaseModel):
    """A dive site with the depth and difficulty used for scoring."""

    name = models.CharField(max_length=200)
    location = models.CharField(max_length=200, blank=True, default="")
    description = models.TextField(blank=True)

    max_depth_meters = models.DecimalField(max_digits=5, decimal_places=1)
    difficulty_level = models.PositiveSmallIntegerField(
        null=True,
        blank=True,
        help_text="Difficulty 1-5 (null = unrated)",
    )

    class Meta:
        ordering = ["name"]
        constraints = [
            models.CheckConstraint(
                condition=(
                    Q(difficulty_level__isnull=True)
                    | (Q(difficulty_level__gte=1) & Q(difficulty_level__lte=5))
                ),
                name="dive_progress_site_difficulty_1_5",
            ),
        ]

    def __str__(self):
        return self.name


class Course(BaseModel):
    """A certification course with its practical requirements."""

    code = models.CharField(max_length=50, unique=True)
    name = models.CharField(max_length=200)
    certification_agency = models.CharField(max_length=50)
    description = models.TextField(blank=True)

    min_dives_required = models.PositiveSmallIntegerField(
        null=True,
        blank=True,
        help_text="Dives required for certification (null = default 4)",
    )
    max_depth_limit_meters = models.DecimalField(
        max_digits=5,
        decimal_places=1,
        null=True,
        blank=True,
        help_text="Course depth limit (null = default 18m)",
    )
    active = models.BooleanField(default=True)

    class Meta:
        ordering = ["code"]

    def __str__(self):
        return f"{self.code} - {self.name}"


class CourseEnrollment(BaseModel):
    """A student's enrollment in a course."""

    class Status(models.TextChoices):
        ENROLLED = "enrolled", "Enrolled"
        IN_PROGRESS = "in_progress", "In Progress"
        COMPLETED = "completed", "Completed"
        CANCELLED = "cancelled", "Cancelled"

    student = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="course_enrollments",
    )
    course = models.ForeignKey(
        Course,
        on_delete=models.PROTECT,
        related_name="enrollments",
    )
    instructor = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="instructed_enrollments",
    )
    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.ENROLLED,
    )
    start_date = models.DateField(default=timezone.localdate)
    completion_date = models.DateField(null=True, blank=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(
                fields=["student", "course"],
                name="dive_progress_enrollment_unique_student_course",
            ),
        ]

    def __str__(self):
        return f"{self.student} in {self.course}"


class Dive(BaseModel):
    """One logged dive by a student, optionally within a course."""

    student = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="dives",
    )
    course = models.ForeignKey(
        Course,
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name="dives",
    )
    instructor = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="instructed_dives",
    )
    dive_site = models.ForeignKey(
        DiveSite,
        on_delete=models.PROTECT,
        related_name="dives",
    )

    dive_date = models.DateField()
    dive_time = models.TimeField(null=True, blank=True)

    depth_achieved_meters = models.DecimalField(max_digits=5, decimal_places=1)
    bottom_time_minutes = models.PositiveSmallIntegerField()

    equipment_check = models.BooleanField(
        null=True,
        blank=True,
        help_text="Pre-dive equipment check passed (null = not recorded)",
    )
    medical_check = models.BooleanField(
        null=True,
        blank=True,
        help_text="Pre-dive medical check passed (null = not recorded)",
    )

    # Conditions observed on the dive
    visibility_meters = models.DecimalField(
        max_digits=5, decimal_places=1, null=True, blank=True
    )
    water_temperature_celsius = models.DecimalField(
        max_digits=4, decimal_places=1, null=True, blank=True
    )

    notes = models.TextField(blank=True)

    class Meta:
        ordering = ["dive_date", "dive_time", "created_at"]
        constraints = [
            models.CheckConstraint(
                condition=Q(depth_achieved_meters__gte=0),
                name="dive_progress_dive_depth_non_negative",
            ),
        ]
        indexes = [
            models.Index(
                fields=["student", "course", "dive_date"],
                name="dive_prog_student_course_idx",
            ),
        ]

    def __str__(self):
        return f"Dive: {self.student} at {self.dive_site} on {self.dive_date}"


class MedicalRecord(BaseModel):
    """A dated medical snapshot for a student."""

    student = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="medical_records",
    )
    recorded_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="medical_records_taken",
    )
    recorded_at = models.DateTimeField(default=timezone.now)

    fitness_level = models.PositiveSmallIntegerField(
        null=True,
        blank=True,
        help_text="Fitness 1-10 (null = not assessed)",
    )
    cleared_to_dive = models.BooleanField(null=True, blank=True)
    heart_rate = models.PositiveSmallIntegerField(null=True, blank=True)
    blood_pressure_systolic = models.PositiveSmallIntegerField(null=True, blank=True)
    blood_pressure_diastolic = models.PositiveSmallIntegerField(null=True, blank=True)
    medical_conditions = models.TextField(blank=True)
    medications = models.TextField(blank=True)
    notes = models.TextField(blank=True)

    class Meta:
        ordering = ["-recorded_at"]
        constraints = [
            models.CheckConstraint(
                condition=(
                    Q(fitness_level__isnull=True)
                    | (Q(fitness_level__gte=1) & Q(fitness_level__lte=10))
                ),
                name="dive_progress_medical_fitness_1_10",
            ),
            models.CheckConstraint(
                condition=(
                    Q(blood_pressure_systolic__isnull=True)
                    | Q(blood_pressure_diastolic__isnull=True)
                    | Q(blood_pressure_diastolic__lt=F("blood_pressure_systolic"))
                ),
                name="dive_progress_medical_bp_diastolic_lt_systolic",
            ),
        ]

    def __str__(self):
        return f"MedicalRecord: {self.student} at {self.recorded_at:%Y-%m-%d}"
