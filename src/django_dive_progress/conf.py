"""Django Dive Progress configuration.

All settings can be overridden in your Django settings.py.

Example:
    # settings.py
    DIVE_PROGRESS_CORS_ALLOW_ORIGIN = 'https://app.example.com'
    DIVE_PROGRESS_JSON_INDENT = 2

Scoring constants are not settings; they live in analysis/constants.py so
the engine stays independent of Django.
"""

from django.conf import settings


_UNSET = object()

DEFAULTS = {
    "CORS_ALLOW_ORIGIN": "*",
    "CORS_ALLOW_HEADERS": "authorization, x-client-info, apikey, content-type",
    "JSON_INDENT": None,
}


def get_setting(name: str, default=_UNSET):
    """Get a setting with DIVE_PROGRESS_ prefix.

    Falls back to the given default, or to DEFAULTS when none is passed.
    An explicit default of None is returned as None.
    """
    if default is _UNSET:
        default = DEFAULTS.get(name)
    return getattr(settings, f"DIVE_PROGRESS_{name}", default)


def cors_headers() -> dict:
    """Headers sent with every analysis API response."""
    return {
        "Access-Control-Allow-Origin": get_setting("CORS_ALLOW_ORIGIN"),
        "Access-Control-Allow-Headers": get_setting("CORS_ALLOW_HEADERS"),
    }
