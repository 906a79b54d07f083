"""Probe configuration from environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Probe locations loaded from environment variables."""

    # Zone database
    zoneinfo_root: str = Field(default="/usr/share/zoneinfo", alias="HOSTZONE_ZONEINFO_ROOT")

    # Distribution files holding a bare zone name (Debian, FreeBSD)
    config_files: list[str] = Field(
        default=["/etc/timezone", "/var/db/zoneinfo"],
        alias="HOSTZONE_CONFIG_FILES",
    )

    # Shell-style clock files (CentOS, openSUSE, Gentoo)
    clock_files: list[str] = Field(
        default=["/etc/sysconfig/clock", "/etc/conf.d/clock"],
        alias="HOSTZONE_CLOCK_FILES",
    )

    # systemd symlink
    localtime_path: str = Field(default="/etc/localtime", alias="HOSTZONE_LOCALTIME")

    # CLI only; the library never configures handlers
    log_level: str = Field(default="WARNING", alias="HOSTZONE_LOG_LEVEL")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
        "populate_by_name": True,
    }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def reset_settings_cache() -> None:
    """Clear cached settings (useful in tests)."""
    get_settings.cache_clear()
