"""Source probes that pull raw zone names out of the environment and filesystem.

Every probe treats an unreadable source as absent: it logs at DEBUG and
contributes nothing. Only the resolver decides whether the collected names
amount to an error.
"""

from __future__ import annotations

import logging
import os
import re
import stat
from collections.abc import Iterable, Mapping

from hostzone.zones import is_canonical

logger = logging.getLogger(__name__)

TZ_ENV_VAR = "TZ"

# CentOS has ZONE= in /etc/sysconfig/clock, openSUSE has TIMEZONE= there,
# Gentoo has TIMEZONE= in /etc/conf.d/clock.
CLOCK_LINE_RE = re.compile(r'^\s*(TIMEZONE|ZONE)\s*=\s*"(?P<tz>.*)"$')

ZONEINFO_MARKER = "zoneinfo/"


def _underscore(name: str) -> str:
    return name.replace(" ", "_")


def parse_env(environ: Mapping[str, str] | None = None) -> str:
    """Return the zone named by ``TZ`` if it is canonical, else ``""``.

    Accepts either a zone key (``America/Sao_Paulo``) or an absolute path to
    an existing zone file whose tail is a key (``.../zoneinfo/America/Sao_Paulo``
    or ``.../UTC``). A single leading ``:`` is ignored, as POSIX allows it.
    """
    if environ is None:
        environ = os.environ
    tzenv = environ.get(TZ_ENV_VAR, "")
    if tzenv.startswith(":"):
        tzenv = tzenv[1:]
    if not tzenv:
        return ""

    if is_canonical(tzenv):
        return tzenv

    if os.path.isabs(tzenv) and os.path.exists(tzenv):
        parts = tzenv.split(os.sep)

        joined = "/".join(parts[-2:])
        if is_canonical(joined):
            return joined

        # Short keys such as UTC
        if is_canonical(parts[-1]):
            return parts[-1]

    logger.debug("Ignoring TZ=%r: not a known zone or zone file", tzenv)
    return ""


def parse_from_config_files(paths: Iterable[str]) -> list[str]:
    """Read zone names from files that hold nothing but the name.

    Each line may carry a trailing hostname or ``#`` comment, both dropped.
    """
    timezones: list[str] = []

    for config_file in paths:
        try:
            with open(config_file, encoding="utf-8", errors="replace", newline="") as fh:
                data = fh.read()
        except OSError as exc:
            logger.debug("Skipping %s: %s", config_file, exc)
            continue

        etctz = data.strip("/ \t\r\n")
        if not etctz:
            continue

        for line in etctz.replace("\r\n", "\n").split("\n"):
            # get rid of host definitions and comments
            line = line.split(" ", 1)[0]
            line = line.split("#", 1)[0]
            line = line.strip()

            if line:
                timezones.append(_underscore(line))

    return timezones


def parse_from_clock(paths: Iterable[str]) -> list[str]:
    """Read quoted ``ZONE=``/``TIMEZONE=`` settings from shell-style clock files."""
    timezones: list[str] = []

    for filename in paths:
        try:
            with open(filename, encoding="utf-8", errors="replace", newline="") as fh:
                data = fh.read()
        except OSError as exc:
            logger.debug("Skipping %s: %s", filename, exc)
            continue

        # Lines end at \n only; a lone \r stays inside the line
        for line in data.split("\n"):
            if line.endswith("\r"):
                line = line[:-1]
            match = CLOCK_LINE_RE.match(line)
            if match is None or not match.group("tz"):
                continue
            timezones.append(_underscore(match.group("tz")))

    return timezones


def parse_symlink(path: str) -> str:
    """Return the zone key embedded in a symlink target such as ``/etc/localtime``."""
    try:
        st = os.lstat(path)
    except OSError as exc:
        logger.debug("Cannot stat %s: %s", path, exc)
        return ""

    if not stat.S_ISLNK(st.st_mode):
        return ""

    try:
        target = os.readlink(path)
    except OSError as exc:
        logger.debug("Cannot read link %s: %s", path, exc)
        return ""

    idx = target.find(ZONEINFO_MARKER)
    if idx == -1:
        return ""

    return _underscore(target[idx + len(ZONEINFO_MARKER):])
