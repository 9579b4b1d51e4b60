"""System memory sizes read from /proc/meminfo."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass, replace

from hwprobe.textutils import split, strip

DEFAULT_MEMINFO = "/proc/meminfo"
_UNKNOWN = "<unknown>"
_KIB = 1024


@dataclass(frozen=True)
class MemInfo:
    """Total, free and available memory in bytes; -1 where unknown."""

    total: int = -1
    free: int = -1
    available: int = -1


def _kib_value(line: str) -> int | None:
    parts = split(line, ":")
    if len(parts) != 2:
        return None
    value = strip(parts[1])
    number, space, _ = value.partition(" ")
    if not space:
        return None
    return int(number) * _KIB


_FIELDS = (("MemTotal", "total"), ("MemFree", "free"), ("MemAvailable", "available"))


def parse_meminfo_lines(lines: Iterable[str]) -> MemInfo:
    """Parse meminfo lines; reading stops once all three values are known.

    A value that is not a number raises ValueError.
    """
    found: dict[str, int] = {}
    for raw in lines:
        if len(found) == len(_FIELDS):
            break
        line = raw.rstrip("\n")
        for prefix, attr in _FIELDS:
            if line.startswith(prefix):
                value = _kib_value(line)
                if value is not None:
                    found[attr] = value
                break
    return MemInfo(**found)


def _sysconf(name: str) -> int:
    try:
        return os.sysconf(name)
    except (ValueError, OSError, AttributeError):
        return -1


def _with_sysconf(info: MemInfo) -> MemInfo:
    pages = _sysconf("SC_PHYS_PAGES")
    available_pages = _sysconf("SC_AVPHYS_PAGES")
    page_size = _sysconf("SC_PAGE_SIZE")
    if pages > 0 and page_size > 0:
        info = replace(info, total=pages * page_size)
    if available_pages > 0 and page_size > 0:
        info = replace(info, available=available_pages * page_size)
    return info


def read_meminfo(path: str | os.PathLike[str] = DEFAULT_MEMINFO) -> MemInfo:
    """Read memory sizes from ``path``, falling back to sysconf when values are missing."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            info = parse_meminfo_lines(handle)
    except OSError:
        return _with_sysconf(MemInfo())
    if info.total == -1 or info.available == -1:
        info = _with_sysconf(info)
    return info


@dataclass(frozen=True)
class RAM:
    """Main memory description; text fields are unknown on this platform."""

    vendor: str = _UNKNOWN
    name: str = _UNKNOWN
    model: str = _UNKNOWN
    serial_number: str = _UNKNOWN
    total_bytes: int = -1
    free_bytes: int = -1
    available_bytes: int = -1

    @classmethod
    def from_system(cls, meminfo_path: str | os.PathLike[str] = DEFAULT_MEMINFO) -> RAM:
        """Describe the memory of the running system."""
        info = read_meminfo(meminfo_path)
        return cls(
            total_bytes=info.total,
            free_bytes=info.free,
            available_bytes=info.available,
        )