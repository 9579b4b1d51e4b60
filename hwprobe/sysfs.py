"""Helpers for reading values from sysfs and procfs style files."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from itertools import islice

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_JIFFY_FIELDS = 10
_WORKING_FIELDS = 3


@dataclass(frozen=True)
class Jiffies:
    """CPU time counters from one line of /proc/stat."""

    total: int = -1
    working: int = -1


def exists(path: str | os.PathLike[str]) -> bool:
    """Return True if ``path`` names an existing file or directory."""
    return os.path.exists(path)


def directory_entries(path: str | os.PathLike[str]) -> list[str]:
    """Return the names in directory ``path``, or an empty list if unreadable."""
    try:
        return os.listdir(path)
    except OSError:
        return []


def read_first_line(path: str | os.PathLike[str]) -> str | None:
    """Return the first line of ``path`` without its newline, or None if unreadable."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            return handle.readline().rstrip("\n")
    except OSError:
        return None


def read_int(path: str | os.PathLike[str]) -> int:
    """Read a leading integer from the first line of ``path``; -1 if missing or not a number."""
    line = read_first_line(path)
    if line is None:
        return -1
    match = _LEADING_INT.match(line)
    if match is None:
        return -1
    return int(match.group(1))


def read_jiffies(index: int, stat_path: str | os.PathLike[str] = "/proc/stat") -> Jiffies:
    """Return the counters from line ``index`` of the stat file.

    Line 0 is the aggregate ``cpu`` line, line ``n + 1`` belongs to thread ``n``.
    An unreadable file gives the default Jiffies; a malformed line raises ValueError.
    """
    try:
        with open(stat_path, encoding="utf-8", errors="replace") as handle:
            line = next(islice(handle, index, None), "") if index >= 0 else ""
    except OSError:
        return Jiffies()

    fields = line.split()
    if len(fields) < _JIFFY_FIELDS + 1:
        raise ValueError(f"malformed stat line {index}: {line!r}")
    values = [int(field) for field in fields[1 : _JIFFY_FIELDS + 1]]
    return Jiffies(total=sum(values), working=sum(values[:_WORKING_FIELDS]))