"""URL patterns for django-dive-progress."""

from django.urls import path

from . import views

app_name = "django_dive_progress"

urlpatterns = [
    path("analyze/", views.api_analyze, name="api_analyze"),
    path(
        "statistics/<str:student_id>/<uuid:course_id>/",
        views.api_statistics,
        name="api_statistics",
    ),
]
