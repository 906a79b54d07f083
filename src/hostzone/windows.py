"""Windows lookup: the registry names one zone, translated through CLDR data.

Windows stores a key name such as ``E. South America Standard Time`` rather
than an IANA key, so there is nothing to reconcile. The name either maps to a
zone or the lookup fails.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from hostzone.errors import TimezoneLookupError
from hostzone.probes import parse_env
from hostzone.windows_tz import WINDOWS_ZONES

logger = logging.getLogger(__name__)

TZ_REGISTRY_KEY = r"SYSTEM\CurrentControlSet\Control\TimeZoneInformation"
TZ_REGISTRY_VALUE = "TimeZoneKeyName"
STANDARD_TIME_SUFFIX = " Standard Time"

RegistryLookup = Callable[[str, str], str]


def read_local_machine_value(key_path: str, value_name: str) -> str:
    """Read a string value under HKEY_LOCAL_MACHINE."""
    import winreg

    try:
        key = winreg.OpenKey(winreg.HKEY_LOCAL_MACHINE, key_path, 0, winreg.KEY_QUERY_VALUE)
    except OSError as exc:
        raise TimezoneLookupError("failed to open registry key") from exc

    with key:
        try:
            value, _ = winreg.QueryValueEx(key, value_name)
        except OSError as exc:
            raise TimezoneLookupError("can not find windows timezone configuration") from exc

    return str(value)


def zone_from_key_name(tzwin: str) -> str:
    """Translate a Windows time zone key name to an IANA key."""
    # Some systems pad the value with NUL characters
    tzwin = tzwin.replace("\x00", "")

    tz = WINDOWS_ZONES.get(tzwin)
    if tz is None:
        # the registry often omits the suffix the table is keyed on
        tzwin += STANDARD_TIME_SUFFIX
        tz = WINDOWS_ZONES.get(tzwin)

    if tz is None:
        raise TimezoneLookupError(f"windows timezone '{tzwin}' not found")

    return tz


def get_name(lookup: RegistryLookup | None = None) -> str:
    """Return the local zone from ``TZ`` or, failing that, the registry."""
    tzenv = parse_env()
    if tzenv:
        return tzenv

    if lookup is None:
        lookup = read_local_machine_value

    tzwin = lookup(TZ_REGISTRY_KEY, TZ_REGISTRY_VALUE)
    logger.debug("Registry %s=%r", TZ_REGISTRY_VALUE, tzwin)
    return zone_from_key_name(tzwin)
