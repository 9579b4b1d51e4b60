"""Small string helpers shared by the hardware probes."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")

_WHITESPACE = " \t\n"


def strip(text: str) -> str:
    """Remove spaces, tabs and newlines from both ends of ``text``."""
    return text.strip(_WHITESPACE)


def _require_delimiter(delimiter: str) -> None:
    if not delimiter:
        raise ValueError("delimiter must not be empty")


def count_substring(text: str, substring: str) -> int:
    """Count non-overlapping occurrences of ``substring`` in ``text``."""
    _require_delimiter(substring)
    return text.count(substring)


def split(text: str, delimiter: str) -> list[str]:
    """Split ``text`` at every ``delimiter``, keeping the trailing piece."""
    _require_delimiter(delimiter)
    return text.split(delimiter)


def split_terminated(text: str, delimiter: str) -> list[str]:
    """Split ``text`` into the pieces that are each followed by ``delimiter``.

    Text after the last delimiter is dropped.
    """
    return split(text, delimiter)[:-1]


def split_get_index(text: str, delimiter: str, index: int) -> str:
    """Return piece ``index`` of ``text`` split at ``delimiter``.

    Negative indices count from the end; an index out of range gives "".
    """
    parts = split(text, delimiter)
    if index < 0:
        index += len(parts)
    if not 0 <= index < len(parts):
        return ""
    return parts[index]


def get_value(data: Sequence[T], index: int, default: T) -> T:
    """Return ``data[index]``, or ``default`` when the index is out of range."""
    if 0 <= index < len(data):
        return data[index]
    return default