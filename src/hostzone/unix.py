"""Linux and macOS lookup: environment first, then distribution files."""

from __future__ import annotations

import logging

from hostzone.config import Settings, get_settings
from hostzone.probes import (
    parse_env,
    parse_from_clock,
    parse_from_config_files,
    parse_symlink,
)
from hostzone.resolver import resolve_timezones

logger = logging.getLogger(__name__)


def collect_candidates(settings: Settings) -> list[str]:
    """Gather raw zone names from every file-based source, in priority order."""
    timezones: list[str] = []
    timezones.extend(parse_from_config_files(settings.config_files))
    timezones.extend(parse_from_clock(settings.clock_files))

    parsed = parse_symlink(settings.localtime_path)
    if parsed:
        timezones.append(parsed)

    return timezones


def get_name(settings: Settings | None = None) -> str:
    """Find the local zone name.

    Returns ``""`` when no source names a zone.

    Raises:
        ConflictingTimezonesError: If the sources name different zones.
    """
    tzenv = parse_env()
    if tzenv:
        return tzenv

    if settings is None:
        settings = get_settings()

    timezones = collect_candidates(settings)
    logger.debug("File candidates: %s", timezones)
    return resolve_timezones(timezones, settings.zoneinfo_root)
