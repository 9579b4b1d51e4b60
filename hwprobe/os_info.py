"""Operating system name, version, kernel, word size and byte order."""

from __future__ import annotations

import os
import sys

DEFAULT_OS_RELEASE = "/etc/os-release"
DEFAULT_LOADER = "/lib64/ld-linux-x86-64.so.2"


def read_os_release_field(
    key: str,
    path: str | os.PathLike[str] = DEFAULT_OS_RELEASE,
    default: str = "",
) -> str:
    """Return the value of the first line of ``path`` starting with ``key``.

    The text after the first "=" is taken and its first and last characters
    (the surrounding quotes) are dropped. A missing file or key gives ``default``.
    """
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            for raw in handle:
                line = raw.rstrip("\n")
                if line.startswith(key):
                    _, _, value = line.partition("=")
                    if "=" not in line:
                        value = line
                    return value[1:-1]
    except OSError:
        return default
    return default


def detect_is_64bit(loader_path: str | os.PathLike[str] = DEFAULT_LOADER) -> bool:
    """Return True if the 64-bit dynamic loader exists at ``loader_path``."""
    return os.path.exists(loader_path)


def detect_is_big_endian() -> bool:
    """Return True if this machine stores the most significant byte first."""
    return sys.byteorder == "big"


def _kernel_release() -> str:
    try:
        return os.uname().release
    except (AttributeError, OSError):
        return "<unknown kernel>"


class OS:
    """Facts about the running operating system; names are read lazily."""

    def __init__(
        self,
        os_release_path: str | os.PathLike[str] = DEFAULT_OS_RELEASE,
        loader_path: str | os.PathLike[str] = DEFAULT_LOADER,
    ) -> None:
        self._os_release_path = os_release_path
        self._cache: dict[str, str] = {}
        self._64bit = detect_is_64bit(loader_path)
        self._big_endian = detect_is_big_endian()

    def _cached(self, slot: str, compute) -> str:
        value = self._cache.get(slot, "")
        if not value:
            value = compute()
            self._cache[slot] = value
        return value

    def full_name(self) -> str:
        """Return the pretty name, e.g. the distribution with its version."""
        return self._cached(
            "full_name",
            lambda: read_os_release_field(
                "PRETTY_NAME", self._os_release_path, "Linux <unknown version>"
            ),
        )

    def name(self) -> str:
        """Return the short operating system name."""
        return self._cached(
            "name",
            lambda: read_os_release_field("NAME", self._os_release_path, "Linux"),
        )

    def version(self) -> str:
        """Return the operating system version id."""
        return self._cached(
            "version",
            lambda: read_os_release_field(
                "VERSION_ID", self._os_release_path, "<unknown version>"
            ),
        )

    def kernel(self) -> str:
        """Return the kernel release string."""
        return self._cached("kernel", _kernel_release)

    def is_32bit(self) -> bool:
        return not self._64bit

    def is_64bit(self) -> bool:
        return self._64bit

    def is_big_endian(self) -> bool:
        return self._big_endian

    def is_little_endian(self) -> bool:
        return not self._big_endian