# hwprobe

Hardware and system information for Linux, read straight from `/proc`,
`/sys` and `/etc/os-release`. It covers CPU sockets, memory, disks,
batteries, the mainboard and the operating system. It has no
dependencies beyond the standard library.

## Installation

```
pip install hwprobe
```

## Library use

```python
from hwprobe.cpu import get_all_cpus
from hwprobe.os_info import OS
from hwprobe.ram import RAM
from hwprobe.mainboard import MainBoard
from hwprobe.battery import get_all_batteries
from hwprobe.disk import get_all_disks

for cpu in get_all_cpus():
    print(cpu.id, cpu.vendor, cpu.model_name, cpu.num_logical_cores)
    print(cpu.current_clock_speeds_mhz())
    print(cpu.threads_utilisation())

os_info = OS()
print(os_info.full_name(), os_info.kernel(), os_info.is_64bit())

ram = RAM.from_system()
print(ram.total_bytes, ram.free_bytes, ram.available_bytes)

board = MainBoard.from_system()
print(board.vendor, board.name, board.version, board.serial_number)

for battery in get_all_batteries():
    print(battery.model(), battery.capacity(), battery.charging())

for disk in get_all_disks():
    print(disk.vendor, disk.model, disk.serial_number)
```

### What each module reads

- `hwprobe.cpu` — `get_all_cpus()` parses `/proc/cpuinfo` into one `CPU`
  per physical socket; clock speeds come from
  `/sys/devices/system/cpu/cpu<N>/cpufreq`. Utilisation is measured from
  `/proc/stat` as the change since the previous call; the first call on a
  `CPU` waits `warmup_seconds` (one second by default) before sampling.
  A reading that cannot be computed is `-1.0`.
- `hwprobe.os_info` — `OS` reads `PRETTY_NAME`, `NAME` and `VERSION_ID`
  from `/etc/os-release`, the kernel release from `uname`, and reports
  64-bit when the x86-64 dynamic loader is present.
- `hwprobe.ram` — `RAM.from_system()` reads `/proc/meminfo`, falling back
  to `sysconf` for missing totals. Vendor, name, model and serial number
  are always `<unknown>`.
- `hwprobe.mainboard` — `MainBoard.from_system()` reads the `board_*`
  entries of the DMI tables in sysfs.
- `hwprobe.battery` — `get_all_batteries()` finds `BAT0`, `BAT1`, ...
  under `/sys/class/power_supply/`; each `Battery` reads its values on
  demand.
- `hwprobe.disk` — `get_all_disks()` lists block devices under
  `/sys/class/block/` that have a `device` entry, with vendor, model and
  serial number. Disk size is not read and is always `-1`.
- `hwprobe.sysfs` and `hwprobe.textutils` — the small file and string
  helpers the modules above are built on.

Values that cannot be found are given as `<unknown>` or `-1`.

Most readers take the root directory or file path they read from as an
argument, for example `get_all_disks(base_path)`,
`get_all_cpus(cpuinfo_path, cpu_root)`, `read_meminfo(path)`,
`get_all_batteries(base_path)` or `MainBoard.from_system(roots)`. This
lets you point them at a copy of a system tree when testing.

## What it does not do

- There is no command-line program; the package is used as a library.
- Graphics cards are not detected, and there is no PCI vendor/device
  name lookup.
- Only Linux is supported; on other systems most values come back as
  unknown.