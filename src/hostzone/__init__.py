"""
hostzone

Find the host machine's local IANA time zone name.
"""

from hostzone.core import collect_report, get_localzone, get_name
from hostzone.errors import (
    ConflictingTimezonesError,
    TimezoneError,
    TimezoneLookupError,
    UnsupportedPlatformError,
)
from hostzone.resolver import resolve_timezones

__version__ = "0.1.0"
__all__ = [
    "get_name",
    "get_localzone",
    "collect_report",
    "resolve_timezones",
    "TimezoneError",
    "ConflictingTimezonesError",
    "TimezoneLookupError",
    "UnsupportedPlatformError",
]
