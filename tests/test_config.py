"""Tests for Settings defaults and environment overrides."""

from hostzone.config import Settings, get_settings, reset_settings_cache


class TestSettingsDefaults:
    def test_defaults(self):
        s = Settings()
        assert s.zoneinfo_root == "/usr/share/zoneinfo"
        assert s.config_files == ["/etc/timezone", "/var/db/zoneinfo"]
        assert s.clock_files == ["/etc/sysconfig/clock", "/etc/conf.d/clock"]
        assert s.localtime_path == "/etc/localtime"
        assert s.log_level == "WARNING"

    def test_override_by_field_name(self):
        s = Settings(zoneinfo_root="/opt/zoneinfo", config_files=[])
        assert s.zoneinfo_root == "/opt/zoneinfo"
        assert s.config_files == []
        assert s.localtime_path == "/etc/localtime"  # unchanged default


class TestSettingsFromEnvironment:
    def test_env_aliases(self, monkeypatch):
        monkeypatch.setenv("HOSTZONE_ZONEINFO_ROOT", "/srv/tz")
        monkeypatch.setenv("HOSTZONE_CLOCK_FILES", '["/etc/clock"]')
        monkeypatch.setenv("HOSTZONE_LOCALTIME", "/run/localtime")

        s = Settings()
        assert s.zoneinfo_root == "/srv/tz"
        assert s.clock_files == ["/etc/clock"]
        assert s.localtime_path == "/run/localtime"

    def test_cached_until_reset(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("HOSTZONE_ZONEINFO_ROOT", "/srv/tz")
        assert get_settings() is first

        reset_settings_cache()
        assert get_settings().zoneinfo_root == "/srv/tz"
