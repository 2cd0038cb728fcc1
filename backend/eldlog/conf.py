"""
Renderer tunables, read from the ``ELDLOG`` settings dict.

Values are looked up on every call so settings overrides apply at once.
"""
from django.conf import settings

DEFAULTS = {
    "MAX_DENSITY": 3.0,
    "THUMBNAIL_DEFAULT_SIZE": (960, 180),
    "THUMBNAIL_MIN_WIDTH": 480,
    "THUMBNAIL_MIN_HEIGHT": 140,
    "THUMBNAIL_MAX_HEIGHT": 240,
    "THUMBNAIL_ASPECT": 0.1875,  # 180 / 960
    "MODAL_SIZE": (1440, 320),
    "RESIZE_DEBOUNCE": 0.15,  # seconds
}


def eldlog_setting(name: str):
    if name not in DEFAULTS:
        raise KeyError(f"Unknown ELDLOG setting: {name}")
    return getattr(settings, "ELDLOG", {}).get(name, DEFAULTS[name])
