"""Filesystem scanning and elapsed-time helpers for directory listings."""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Iterator
from pathlib import Path

from .types import DirectoryEntry

logger = logging.getLogger(__name__)

NANOSECONDS_PER_SECOND = 1_000_000_000


def elapsed_seconds(mtime_ns: int | None, now_ns: int) -> int:
    """Return whole seconds between ``mtime_ns`` and ``now_ns``, floored at zero.

    Future-dated files (clock skew) and pre-epoch or unreadable timestamps
    report ``0`` rather than an error.
    """
    if mtime_ns is None or mtime_ns < 0:
        return 0
    delta_ns = now_ns - mtime_ns
    if delta_ns <= 0:
        return 0
    return delta_ns // NANOSECONDS_PER_SECOND


def entry_from_stat(name: str, st: os.stat_result) -> DirectoryEntry:
    """Build a ``DirectoryEntry`` from an already-read stat result."""
    is_file = stat.S_ISREG(st.st_mode)
    return DirectoryEntry(
        name=name,
        is_file=is_file,
        size=int(st.st_size) if is_file else None,
        mtime_ns=int(st.st_mtime_ns),
    )


def iter_directory_entries(directory: Path) -> Iterator[DirectoryEntry]:
    """Yield immediate children of ``directory`` in filesystem order.

    Symlinks are followed. ``OSError`` propagates when the directory cannot be
    opened or when any child's metadata cannot be read; entries already
    yielded stay yielded and the scan stops there.
    """
    logger.debug("scanning %s", directory)
    with os.scandir(directory) as entries:
        for child in entries:
            st = child.stat(follow_symlinks=True)
            yield entry_from_stat(child.name, st)


__all__ = [
    "NANOSECONDS_PER_SECOND",
    "elapsed_seconds",
    "entry_from_stat",
    "iter_directory_entries",
]
