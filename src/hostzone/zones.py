"""Canonical IANA zone keys known to this interpreter."""

from __future__ import annotations

from functools import lru_cache
from zoneinfo import available_timezones


@lru_cache(maxsize=1)
def canonical_zones() -> frozenset[str]:
    """Return every zone key from the system database and the tzdata package."""
    return frozenset(available_timezones())


def is_canonical(name: str) -> bool:
    """Check whether *name* is a known zone key."""
    return name in canonical_zones()
