"""Battery state read from the power-supply class in sysfs."""

from __future__ import annotations

import math
import os
import re
from dataclasses import dataclass, field

from hwprobe.sysfs import exists, read_first_line

POWER_SUPPLY_ROOT = "/sys/class/power_supply/"
_UNKNOWN = "<unknown>"
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass
class Battery:
    """One battery, ``BAT<id>`` under ``base_path``; values are read on demand."""

    id: int = 0
    base_path: str = POWER_SUPPLY_ROOT
    _cache: dict[str, object] = field(default_factory=dict, repr=False, compare=False)

    def _read(self, attribute: str) -> str | None:
        if self.id < 0:
            return None
        return read_first_line(os.path.join(self.base_path, f"BAT{self.id}", attribute))

    def _read_text(self, attribute: str) -> str:
        value = self._read(attribute)
        return _UNKNOWN if value is None else value

    def _read_number(self, attribute: str) -> int:
        value = self._read(attribute)
        if value is None:
            return 0
        match = _LEADING_INT.match(value)
        return int(match.group(1)) if match else 0

    def _cached_text(self, attribute: str) -> str:
        value = self._cache.get(attribute)
        if not value:
            value = self._read_text(attribute)
            self._cache[attribute] = value
        return value

    def vendor(self) -> str:
        return self._cached_text("manufacturer")

    def model(self) -> str:
        return self._cached_text("model_name")

    def serial_number(self) -> str:
        return self._cached_text("serial_number")

    def technology(self) -> str:
        return self._cached_text("technology")

    def energy_full(self) -> int:
        """Return the energy when fully charged; 0 if unknown."""
        value = self._cache.get("energy_full")
        if not value:
            value = self._read_number("energy_full")
            self._cache["energy_full"] = value
        return value

    def energy_now(self) -> int:
        """Return the energy currently stored; 0 if unknown."""
        return self._read_number("energy_now")

    def charging(self) -> bool:
        return self._read("status") == "Charging"

    def discharging(self) -> bool:
        return not self.charging()

    def capacity(self) -> float:
        """Return the charge level as a fraction of full energy.

        With an unknown full energy this is nan (or inf if energy is present).
        """
        now = self.energy_now()
        full = self.energy_full()
        if full == 0:
            return math.nan if now == 0 else math.copysign(math.inf, now)
        return now / full


def get_all_batteries(base_path: str = POWER_SUPPLY_ROOT) -> list[Battery]:
    """Return the batteries ``BAT0``, ``BAT1``, ... present under ``base_path``."""
    batteries: list[Battery] = []
    while exists(os.path.join(base_path, f"BAT{len(batteries)}")):
        batteries.append(Battery(len(batteries), base_path))
    return batteries