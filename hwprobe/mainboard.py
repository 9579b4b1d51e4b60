"""Main board identity read from the DMI tables in sysfs."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass

from hwprobe.sysfs import read_first_line

DMI_ROOTS = ("/sys/devices/virtual/dmi/", "/sys/class/dmi/")
_UNKNOWN = "<unknown>"


def get_dmi_by_name(
    name: str, roots: Iterable[str | os.PathLike[str]] = DMI_ROOTS
) -> str:
    """Return the first non-empty ``id/<name>`` value under ``roots``, else "<unknown>"."""
    for root in roots:
        value = read_first_line(os.path.join(root, "id", name))
        if value:
            return value
    return _UNKNOWN


@dataclass(frozen=True)
class MainBoard:
    """Vendor, product name, version and serial number of the main board."""

    vendor: str = _UNKNOWN
    name: str = _UNKNOWN
    version: str = _UNKNOWN
    serial_number: str = _UNKNOWN

    @classmethod
    def from_system(
        cls, roots: Iterable[str | os.PathLike[str]] = DMI_ROOTS
    ) -> MainBoard:
        """Describe the main board of the running system."""
        roots = tuple(roots)
        return cls(
            vendor=get_dmi_by_name("board_vendor", roots),
            name=get_dmi_by_name("board_name", roots),
            version=get_dmi_by_name("board_version", roots),
            serial_number=get_dmi_by_name("board_serial", roots),
        )