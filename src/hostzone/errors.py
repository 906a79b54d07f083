"""Errors surfaced to callers of the timezone lookup."""

from __future__ import annotations

CONFLICT_HEADER = "multiple conflicting time zone configurations found:\n"
CONFLICT_REMEDY = "Fix the configuration, or set the time zone in a TZ environment variable"


class TimezoneError(Exception):
    """Base class for every hostzone failure."""


class ConflictingTimezonesError(TimezoneError):
    """Two or more sources name zones that are not the same file on disk."""

    def __init__(self, zones: list[str]) -> None:
        self.zones = list(zones)
        message = CONFLICT_HEADER
        for zone in self.zones:
            message += f"{zone}\n"
        message += CONFLICT_REMEDY
        super().__init__(message)


class UnsupportedPlatformError(TimezoneError):
    """No probing strategy exists for the running platform."""


class TimezoneLookupError(TimezoneError):
    """The platform store was unreachable or held an unknown zone name."""
