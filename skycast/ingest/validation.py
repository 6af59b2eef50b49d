"""Input validation and text sanitizing for user and API supplied strings."""

import math
import re
from typing import Any

MAX_CITY_NAME_LENGTH = 100

_SCRIPT_BLOCK = re.compile(r"<script\b[^<]*(?:(?!</script>)<[^<]*)*</script>", re.IGNORECASE)
_TAG = re.compile(r"<[^>]*>")
_JS_SCHEME = re.compile(r"javascript:", re.IGNORECASE)
_EVENT_HANDLER = re.compile(r"on\w+\s*=", re.IGNORECASE)
_CITY_NAME = re.compile(r"^[a-zA-Z\s\-',.()]+$")


def sanitize_text(value: Any) -> str:
    """Strip script blocks, markup tags, javascript: prefixes and inline handlers."""
    if not isinstance(value, str):
        return ""
    text = _SCRIPT_BLOCK.sub("", value)
    text = _TAG.sub("", text)
    text = _JS_SCHEME.sub("", text)
    text = _EVENT_HANDLER.sub("", text)
    return text.strip()


def validate_city_name(value: Any) -> bool:
    if not value or not isinstance(value, str):
        return False
    if len(value) > MAX_CITY_NAME_LENGTH:
        return False
    # Markup is refused outright rather than admitted in its stripped form.
    if "<" in value or ">" in value or "javascript:" in value.lower():
        return False

    sanitized = sanitize_text(value)
    if not 1 <= len(sanitized) <= MAX_CITY_NAME_LENGTH:
        return False
    return _CITY_NAME.match(sanitized) is not None


def validate_coordinates(lat: Any, lon: Any) -> bool:
    lat_num = _parse_float(lat)
    lon_num = _parse_float(lon)
    if lat_num is None or lon_num is None:
        return False
    return -90.0 <= lat_num <= 90.0 and -180.0 <= lon_num <= 180.0


def _parse_float(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    try:
        num = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(num):
        return None
    return num
