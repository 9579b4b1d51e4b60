"""Hardware and system information (CPU, memory, disks, batteries, mainboard, OS) from Linux procfs and sysfs."""

__version__ = "0.1.0"