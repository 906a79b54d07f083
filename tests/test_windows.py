"""Tests for the Windows registry lookup, driven through a fake registry."""

from unittest.mock import Mock
from zoneinfo import ZoneInfo

import pytest
from hostzone.errors import TimezoneLookupError
from hostzone.windows import TZ_REGISTRY_KEY, TZ_REGISTRY_VALUE, get_name, zone_from_key_name
from hostzone.windows_tz import WINDOWS_ZONES


def _registry(value):
    return Mock(return_value=value)


def test_reads_the_time_zone_key_name():
    lookup = _registry("E. South America Standard Time")

    assert get_name(lookup) == "America/Sao_Paulo"
    lookup.assert_called_once_with(TZ_REGISTRY_KEY, TZ_REGISTRY_VALUE)


def test_retries_with_standard_time_suffix():
    assert get_name(_registry("E. South America")) == "America/Sao_Paulo"


def test_strips_nul_padding():
    assert get_name(_registry("Pacific Standard Time\x00\x00\x00")) == "America/Los_Angeles"


def test_unknown_key_name():
    with pytest.raises(TimezoneLookupError) as exc:
        get_name(_registry("Atlantis"))
    assert str(exc.value) == "windows timezone 'Atlantis Standard Time' not found"


def test_registry_failure_propagates():
    lookup = Mock(side_effect=TimezoneLookupError("failed to open registry key"))

    with pytest.raises(TimezoneLookupError, match="failed to open registry key"):
        get_name(lookup)


def test_tz_env_short_circuits_the_registry(monkeypatch):
    monkeypatch.setenv("TZ", "Africa/Harare")
    lookup = _registry("Pacific Standard Time")

    assert get_name(lookup) == "Africa/Harare"
    lookup.assert_not_called()


def test_zone_from_key_name_exact_match_wins():
    assert zone_from_key_name("UTC") == "Etc/UTC"
    assert zone_from_key_name("Russia Time Zone 3") == "Europe/Samara"


def test_table_values_are_loadable_zones():
    for windows_name, zone in WINDOWS_ZONES.items():
        assert ZoneInfo(zone).key == zone, windows_name
