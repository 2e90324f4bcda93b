# Generated manually for standalone django-dive-progress package

import uuid

import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Course",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("code", models.CharField(max_length=50, unique=True)),
                ("name", models.CharField(max_length=200)),
                ("certification_agency", models.CharField(max_length=50)),
                ("description", models.TextField(blank=True)),
                (
                    "min_dives_required",
                    models.PositiveSmallIntegerField(
                        blank=True,
                        help_text="Dives required for certification (null = default 4)",
                        null=True,
                    ),
                ),
                (
                    "max_depth_limit_meters",
                    models.DecimalField(
                        blank=True,
                        decimal_places=1,
                        help_text="Course depth limit (null = default 18m)",
                        max_digits=5,
                        null=True,
                    ),
                ),
                ("active", models.BooleanField(default=True)),
            ],
            options={
                "ordering": ["code"],
            },
        ),
        migrations.CreateModel(
            name="DiveSite",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("name", models.CharField(max_length=200)),
                ("location", models.CharField(blank=True, default="", max_length=200)),
                ("description", models.TextField(blank=True)),
                ("max_depth_meters", models.DecimalField(decimal_places=1, max_digits=5)),
                (
                    "difficulty_level",
                    models.PositiveSmallIntegerField(
                        blank=True, help_text="Difficulty 1-5 (null = unrated)", null=True
                    ),
                ),
            ],
            options={
                "ordering": ["name"],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(
                            ("difficulty_level__isnull", True),
                            models.Q(("difficulty_level__gte", 1), ("difficulty_level__lte", 5)),
                            _connector="OR",
                        ),
                        name="dive_progress_site_difficulty_1_5",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="CourseEnrollment",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("enrolled", "Enrolled"),
                            ("in_progress", "In Progress"),
                            ("completed", "Completed"),
                            ("cancelled", "Cancelled"),
                        ],
                        default="enrolled",
                        max_length=20,
                    ),
                ),
                ("start_date", models.DateField(default=django.utils.timezone.localdate)),
                ("completion_date", models.DateField(blank=True, null=True)),
                (
                    "course",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="enrollments",
                        to="django_dive_progress.course",
                    ),
                ),
                (
                    "instructor",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="instructed_enrollments",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "student",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="course_enrollments",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "constraints": [
                    models.UniqueConstraint(
                        fields=("student", "course"),
                        name="dive_progress_enrollment_unique_student_course",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="Dive",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("dive_date", models.DateField()),
                ("dive_time", models.TimeField(blank=True, null=True)),
                ("depth_achieved_meters", models.DecimalField(decimal_places=1, max_digits=5)),
                ("bottom_time_minutes", models.PositiveSmallIntegerField()),
                (
                    "equipment_check",
                    models.BooleanField(
                        blank=True,
                        help_text="Pre-dive equipment check passed (null = not recorded)",
                        null=True,
                    ),
                ),
                (
                    "medical_check",
                    models.BooleanField(
                        blank=True,
                        help_text="Pre-dive medical check passed (null = not recorded)",
                        null=True,
                    ),
                ),
                ("visibility_meters", models.DecimalField(blank=True, decimal_places=1, max_digits=5, null=True)),
                (
                    "water_temperature_celsius",
                    models.DecimalField(blank=True, decimal_places=1, max_digits=4, null=True),
                ),
                ("notes", models.TextField(blank=True)),
                (
                    "course",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="dives",
                        to="django_dive_progress.course",
                    ),
                ),
                (
                    "dive_site",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="dives",
                        to="django_dive_progress.divesite",
                    ),
                ),
                (
                    "instructor",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="instructed_dives",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "student",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="dives",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "ordering": ["dive_date", "dive_time", "created_at"],
                "indexes": [
                    models.Index(
                        fields=["student", "course", "dive_date"],
                        name="dive_prog_student_course_idx",
                    ),
                ],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("depth_achieved_meters__gte", 0)),
                        name="dive_progress_dive_depth_non_negative",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="MedicalRecord",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("recorded_at", models.DateTimeField(default=django.utils.timezone.now)),
                (
                    "fitness_level",
                    models.PositiveSmallIntegerField(
                        blank=True, help_text="Fitness 1-10 (null = not assessed)", null=True
                    ),
                ),
                ("cleared_to_dive", models.BooleanField(blank=True, null=True)),
                ("heart_rate", models.PositiveSmallIntegerField(blank=True, null=True)),
                ("blood_pressure_systolic", models.PositiveSmallIntegerField(blank=True, null=True)),
                ("blood_pressure_diastolic", models.PositiveSmallIntegerField(blank=True, null=True)),
                ("medical_conditions", models.TextField(blank=True)),
                ("medications", models.TextField(blank=True)),
                ("notes", models.TextField(blank=True)),
                (
                    "recorded_by",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="medical_records_taken",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "student",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="medical_records",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "ordering": ["-recorded_at"],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(
                            ("fitness_level__isnull", True),
                            models.Q(("fitness_level__gte", 1), ("fitness_level__lte", 10)),
                            _connector="OR",
                        ),
                        name="dive_progress_medical_fitness_1_10",
                    ),
                    models.CheckConstraint(
                        condition=models.Q(
                            ("blood_pressure_systolic__isnull", True),
                            ("blood_pressure_diastolic__isnull", True),
                            ("blood_pressure_diastolic__lt", models.F("blood_pressure_systolic")),
                            _connector="OR",
                        ),
                        name="dive_progress_medical_bp_diastolic_lt_systolic",
                    ),
                ],
            },
        ),
    ]
