"""CPU sockets described from /proc/cpuinfo, cpufreq and /proc/stat."""

from __future__ import annotations

import itertools
import os
import re
import time
from dataclasses import dataclass, field

from hwprobe.sysfs import Jiffies, read_int, read_jiffies
from hwprobe.textutils import split, split_terminated, strip

CPU_ROOT = "/sys/devices/system/cpu"
CPUINFO_PATH = "/proc/cpuinfo"
STAT_PATH = "/proc/stat"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _stoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    return int(match.group(1))


def _to_mhz(khz: int) -> int:
    # Truncate toward zero, as integer division of the raw reading does.
    return khz // 1000 if khz >= 0 else -((-khz) // 1000)


def _cpufreq_mhz(core_id: int, cpu_root: str | os.PathLike[str], name: str) -> int:
    khz = read_int(os.path.join(cpu_root, f"cpu{core_id}", "cpufreq", name))
    if khz > -1:
        return _to_mhz(khz)
    return -1


def max_clock_speed_mhz(core_id: int, cpu_root: str | os.PathLike[str] = CPU_ROOT) -> int:
    """Return the maximum scaling frequency of ``core_id`` in MHz, or -1."""
    return _cpufreq_mhz(core_id, cpu_root, "scaling_max_freq")


def regular_clock_speed_mhz(core_id: int, cpu_root: str | os.PathLike[str] = CPU_ROOT) -> int:
    """Return the base frequency of ``core_id`` in MHz, or -1."""
    return _cpufreq_mhz(core_id, cpu_root, "base_frequency")


def min_clock_speed_mhz(core_id: int, cpu_root: str | os.PathLike[str] = CPU_ROOT) -> int:
    """Return the minimum scaling frequency of ``core_id`` in MHz, or -1."""
    return _cpufreq_mhz(core_id, cpu_root, "scaling_min_freq")


def _ratio_or_invalid(work: int, total: int, upper: float) -> float:
    if total == 0:
        return -1.0
    value = work / total
    if value < 0 or value > upper:
        return -1.0
    return value


@dataclass
class CPU:
    """One CPU socket; utilisation figures are deltas between successive calls."""

    id: int = -1
    model_name: str = ""
    vendor: str = ""
    num_physical_cores: int = -1
    num_logical_cores: int = -1
    max_clock_speed_mhz: int = -1
    regular_clock_speed_mhz: int = -1
    l1_cache_size_bytes: int = -1
    l2_cache_size_bytes: int = -1
    l3_cache_size_bytes: int = -1
    flags: list[str] = field(default_factory=list)
    cpu_root: str = field(default=CPU_ROOT, repr=False, compare=False)
    stat_path: str = field(default=STAT_PATH, repr=False, compare=False)
    warmup_seconds: float = field(default=1.0, repr=False, compare=False)
    _jiffies_initialized: bool = field(default=False, init=False, repr=False, compare=False)
    _last_total: Jiffies = field(default_factory=Jiffies, init=False, repr=False, compare=False)
    _last_threads: list[Jiffies] | None = field(
        default=None, init=False, repr=False, compare=False
    )

    def current_clock_speeds_mhz(self) -> list[int]:
        """Return the current frequency of every thread in MHz, in thread order."""
        speeds: list[int] = []
        for core_id in itertools.count():
            khz = read_int(
                os.path.join(self.cpu_root, f"cpu{core_id}", "cpufreq", "scaling_cur_freq")
            )
            if khz == -1:
                break
            speeds.append(_to_mhz(khz))
        return speeds

    def init_jiffies(self) -> None:
        """Wait once so that the first utilisation reading has a time span to measure."""
        if not self._jiffies_initialized:
            time.sleep(self.warmup_seconds)
            self._jiffies_initialized = True

    def current_utilisation(self) -> float:
        """Return the fraction of busy time since the last call, or -1.0 if undefined."""
        self.init_jiffies()
        current = read_jiffies(0, self.stat_path)
        last = self._last_total
        self._last_total = current
        return _ratio_or_invalid(
            current.working - last.working, current.total - last.total, 1.0
        )

    def thread_utilisation(self, thread_index: int) -> float:
        """Return the busy fraction of one thread since its last reading, or -1.0."""
        self.init_jiffies()
        if self._last_threads is None:
            self._last_threads = [Jiffies()] * max(self.num_logical_cores, 0)
        if not 0 <= thread_index < len(self._last_threads):
            raise IndexError(f"thread index {thread_index} out of range")
        current = read_jiffies(thread_index + 1, self.stat_path)
        last = self._last_threads[thread_index]
        self._last_threads[thread_index] = current
        return _ratio_or_invalid(
            current.working - last.working, current.total - last.total, 100.0
        )

    def threads_utilisation(self) -> list[float]:
        """Return the utilisation of every logical core."""
        return [self.thread_utilisation(index) for index in range(self.num_logical_cores)]


def parse_cpuinfo(text: str, cpu_root: str | os.PathLike[str] = CPU_ROOT) -> list[CPU]:
    """Build one CPU per physical socket from the text of /proc/cpuinfo.

    Within each block the final line without a newline is ignored. A numeric
    field that is not a number raises ValueError.
    """
    cpus: list[CPU] = []
    physical_id = -1
    for block in split(text, "\n\n"):
        cpu = CPU(cpu_root=os.fspath(cpu_root))
        add = False
        for line in split_terminated(block, "\n"):
            pair = split(line, ":")
            if len(pair) < 2:
                continue
            name, value = strip(pair[0]), strip(pair[1])
            if name == "vendor_id":
                cpu.vendor = value
            elif name == "model name":
                cpu.model_name = value
            elif name == "cache size":
                cpu.l3_cache_size_bytes = _stoi(split(value, " ")[0]) * 1024
            elif name == "siblings":
                cpu.num_logical_cores = _stoi(value)
            elif name == "cpu cores":
                cpu.num_physical_cores = _stoi(value)
            elif name == "flags":
                cpu.flags = split(value, " ")
            elif name == "physical id":
                socket = _stoi(value)
                if socket == physical_id:
                    continue
                cpu.id = socket
                add = True
        if add:
            cpu.max_clock_speed_mhz = max_clock_speed_mhz(cpu.id, cpu_root)
            cpu.regular_clock_speed_mhz = regular_clock_speed_mhz(cpu.id, cpu_root)
            physical_id += 1
            cpus.append(cpu)
    return cpus


def get_all_cpus(
    cpuinfo_path: str | os.PathLike[str] = CPUINFO_PATH,
    cpu_root: str | os.PathLike[str] = CPU_ROOT,
) -> list[CPU]:
    """Return the CPU sockets of the running system; empty if cpuinfo is unreadable."""
    try:
        with open(cpuinfo_path, encoding="utf-8", errors="replace") as handle:
            text = handle.read()
    except OSError:
        return []
    return parse_cpuinfo(text, cpu_root)