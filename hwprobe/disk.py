"""Block devices listed from sysfs."""

from __future__ import annotations

import os
from dataclasses import dataclass

from hwprobe.sysfs import directory_entries, exists, read_first_line
from hwprobe.textutils import strip

BLOCK_ROOT = "/sys/class/block/"
_UNKNOWN = "<unknown>"


@dataclass(frozen=True)
class Disk:
    """Vendor, model, serial number and size of one disk; -1 where unknown."""

    vendor: str = ""
    model: str = ""
    serial_number: str = ""
    size_bytes: int = -1
    id: int = -1


def _device_text(device_path: str, name: str) -> str:
    value = read_first_line(os.path.join(device_path, name))
    return strip(_UNKNOWN if value is None else value)


def get_all_disks(base_path: str | os.PathLike[str] = BLOCK_ROOT) -> list[Disk]:
    """Return every block device under ``base_path`` that has a ``device`` entry."""
    disks: list[Disk] = []
    for entry in directory_entries(base_path):
        device_path = os.path.join(base_path, entry, "device")
        if not exists(device_path):
            continue
        disks.append(
            Disk(
                vendor=_device_text(device_path, "vendor"),
                model=_device_text(device_path, "model"),
                serial_number=_device_text(device_path, "serial"),
            )
        )
    return disks