"""Admin configuration for django-dive-progress."""

from django.contrib import admin

from .models import Course, CourseEnrollment, Dive, DiveSite, MedicalRecord


@admin.register(DiveSite)
class DiveSiteAdmin(admin.ModelAdmin):
    list_display = ["name", "location", "max_depth_meters", "difficulty_level"]
    search_fields = ["name", "location"]
    list_filter = ["difficulty_level"]


@admin.register(Course)
class CourseAdmin(admin.ModelAdmin):
    list_display = [
        "code",
        "name",
        "certification_agency",
        "min_dives_required",
        "max_depth_limit_meters",
        "active",
    ]
    list_filter = ["certification_agency", "active"]
    search_fields = ["code", "name"]


@admin.register(CourseEnrollment)
class CourseEnrollmentAdmin(admin.ModelAdmin):
    list_display = ["student", "course", "instructor", "status", "start_date"]
    list_filter = ["status", "course"]
    raw_id_fields = ["student", "instructor"]


@admin.register(Dive)
class DiveAdmin(admin.ModelAdmin):
    list_display = [
        "dive_date",
        "student",
        "dive_site",
        "depth_achieved_meters",
        "bottom_time_minutes",
        "equipment_check",
        "medical_check",
    ]
    list_filter = ["equipment_check", "medical_check", "course"]
    date_hierarchy = "dive_date"
    raw_id_fields = ["student", "instructor"]
    list_select_related = ["student", "dive_site"]


@admin.register(MedicalRecord)
class MedicalRecordAdmin(admin.ModelAdmin):
    list_display = ["student", "recorded_at", "fitness_level", "cleared_to_dive"]
    list_filter = ["cleared_to_dive"]
    raw_id_fields = ["student", "recorded_by"]
