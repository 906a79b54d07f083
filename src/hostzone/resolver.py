"""Reconcile candidate zone names against the on-disk zone database."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from hostzone.errors import ConflictingTimezonesError
from hostzone.schemas import Resolution, Verdict

logger = logging.getLogger(__name__)


def _canonical_name(tzname: str, zoneinfo_root: str, depth: int) -> str | None:
    """Follow *tzname* under the root to its real file and rebuild its key.

    Returns None when the path does not resolve.
    """
    candidate = os.path.join(zoneinfo_root, tzname.lstrip("/"))
    try:
        real = Path(candidate).resolve(strict=True)
    except (OSError, RuntimeError, ValueError) as exc:
        # ValueError: embedded NUL from a corrupted source file
        logger.debug("Cannot resolve %r: %s", candidate, exc)
        return None

    name = "/".join(real.parts[depth:])
    return name or None


def assess_timezones(timezones: list[str], zoneinfo_root: str) -> Resolution:
    """Decide whether the candidates agree.

    A single candidate is trusted as-is. With several, each one is looked up
    under *zoneinfo_root* and canonicalized through symlinks, so aliases such
    as ``Brazil/East`` and ``America/Sao_Paulo`` count as the same zone.
    """
    if not timezones:
        return Resolution(verdict=Verdict.EMPTY)

    if len(timezones) == 1:
        return Resolution(verdict=Verdict.UNIQUE, zones=[timezones[0]])

    root = os.path.realpath(zoneinfo_root)
    depth = len(Path(root).parts)

    filtered: list[str] = []
    for tzname in timezones:
        name = _canonical_name(tzname, root, depth)
        if name is not None and name not in filtered:
            filtered.append(name)

    logger.debug("Candidates %s canonicalized to %s", timezones, filtered)

    if len(filtered) == 1:
        return Resolution(verdict=Verdict.UNIQUE, zones=filtered)
    if len(filtered) > 1:
        return Resolution(verdict=Verdict.CONFLICTING, zones=filtered)
    return Resolution(verdict=Verdict.EMPTY)


def resolve_timezones(timezones: list[str], zoneinfo_root: str) -> str:
    """Return the single zone the candidates agree on, or ``""`` if there is none.

    Raises:
        ConflictingTimezonesError: If two or more distinct zones remain.
    """
    resolution = assess_timezones(timezones, zoneinfo_root)
    if resolution.verdict == Verdict.CONFLICTING:
        raise ConflictingTimezonesError(resolution.zones)
    return resolution.name
