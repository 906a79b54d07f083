"""Pydantic schemas for resolution verdicts and probe reports."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class Verdict(str, Enum):
    """Outcome of reconciling candidate zone names."""

    EMPTY = "empty"
    UNIQUE = "unique"
    CONFLICTING = "conflicting"


class Resolution(BaseModel):
    """Verdict plus the distinct zone names behind it."""

    verdict: Verdict
    zones: list[str] = Field(default_factory=list)

    @property
    def name(self) -> str:
        if self.verdict == Verdict.UNIQUE:
            return self.zones[0]
        return ""


class ProbeReport(BaseModel):
    """What each source contributed during one lookup."""

    platform: str
    env: str = ""
    config_files: list[str] = Field(default_factory=list)
    clock_files: list[str] = Field(default_factory=list)
    symlink: str = ""
    registry: str = ""
    resolution: Resolution | None = None
    error: str | None = None
