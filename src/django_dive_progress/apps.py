"""Django app configuration for django-dive-progress."""

from django.apps import AppConfig


class DjangoDiveProgressConfig(AppConfig):
    """App configuration for django-dive-progress."""

    name = "django_dive_progress"
    verbose_name = "Dive Progress"
    default_auto_field = "django.db.models.BigAutoField"
