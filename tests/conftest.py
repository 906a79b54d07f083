"""Shared fixtures: a clean environment and a fake zone database."""

import os
from pathlib import Path

import pytest
from hostzone.config import reset_settings_cache

HOSTZONE_ENV_KEYS = [
    "TZ",
    "HOSTZONE_ZONEINFO_ROOT",
    "HOSTZONE_CONFIG_FILES",
    "HOSTZONE_CLOCK_FILES",
    "HOSTZONE_LOCALTIME",
    "HOSTZONE_LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Drop TZ and hostzone overrides so the host machine never leaks in."""
    for key in HOSTZONE_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    reset_settings_cache()
    yield
    reset_settings_cache()


@pytest.fixture
def write_file(tmp_path):
    """Write text to a file under tmp_path, creating parent directories."""

    def _write(relative: str, content: str) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content.encode("utf-8"))
        return path

    return _write


@pytest.fixture
def zoneinfo_root(tmp_path) -> Path:
    """A miniature zone database: three real zones, UTC, and two aliases."""
    root = tmp_path / "zoneinfo"
    for name in ("America/Sao_Paulo", "America/Los_Angeles", "Africa/Harare", "UTC"):
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"TZif2 " + name.encode("ascii"))

    (root / "Brazil").mkdir()
    os.symlink(os.path.join("..", "America", "Sao_Paulo"), root / "Brazil" / "East")
    os.symlink("UTC", root / "Zulu")
    return root
