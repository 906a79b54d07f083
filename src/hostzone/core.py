"""Entry points: get_name(), get_localzone() and collect_report()."""

from __future__ import annotations

import logging
import sys
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from hostzone import unix, windows
from hostzone.config import get_settings
from hostzone.errors import TimezoneError, TimezoneLookupError, UnsupportedPlatformError
from hostzone.probes import parse_env, parse_from_clock, parse_from_config_files, parse_symlink
from hostzone.resolver import assess_timezones
from hostzone.schemas import ProbeReport

logger = logging.getLogger(__name__)

UNIX_PLATFORMS = ("linux", "darwin")
WINDOWS_PLATFORM = "win32"
FALLBACK_ZONE = "UTC"


def _platform() -> str:
    return sys.platform


def get_name() -> str:
    """Return the host's IANA zone name, or ``""`` if it cannot be determined.

    Raises:
        ConflictingTimezonesError: Distribution files disagree (Linux/macOS).
        TimezoneLookupError: The registry is unreadable or unknown (Windows).
        UnsupportedPlatformError: No lookup exists for this platform.
    """
    platform = _platform()
    if platform in UNIX_PLATFORMS:
        return unix.get_name()
    if platform == WINDOWS_PLATFORM:
        return windows.get_name()
    raise UnsupportedPlatformError(f"name not implemented for '{platform}'")


def get_localzone() -> ZoneInfo:
    """Return the host zone as a ZoneInfo, falling back to UTC when unknown."""
    name = get_name()
    if not name:
        logger.warning("Could not determine the local time zone, assuming %s", FALLBACK_ZONE)
        name = FALLBACK_ZONE

    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise TimezoneLookupError(f"time zone '{name}' is not in the zone database") from exc


def collect_report() -> ProbeReport:
    """Run every probe separately and record what each one found.

    Unlike get_name(), this never raises for lookup failures: they are
    recorded in the report's ``error`` field.
    """
    platform = _platform()
    report = ProbeReport(platform=platform)

    if platform not in UNIX_PLATFORMS and platform != WINDOWS_PLATFORM:
        report.error = f"name not implemented for '{platform}'"
        return report

    report.env = parse_env()

    if platform == WINDOWS_PLATFORM:
        if not report.env:
            try:
                report.registry = windows.get_name()
            except TimezoneError as exc:
                report.error = str(exc)
        return report

    settings = get_settings()
    report.config_files = parse_from_config_files(settings.config_files)
    report.clock_files = parse_from_clock(settings.clock_files)
    report.symlink = parse_symlink(settings.localtime_path)

    candidates = report.config_files + report.clock_files
    if report.symlink:
        candidates.append(report.symlink)
    report.resolution = assess_timezones(candidates, settings.zoneinfo_root)
    return report
