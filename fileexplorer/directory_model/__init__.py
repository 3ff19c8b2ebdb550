"""Domain model for one-level directory listings.

This package contains non-UI listing primitives:
- the per-child entry datatype with size/mtime metadata
- filesystem scanning in filesystem order
- elapsed-time arithmetic clamped at zero
"""

from __future__ import annotations

from .types import DIRECTORY_MARKER, DirectoryEntry
from .fs import (
    NANOSECONDS_PER_SECOND,
    elapsed_seconds,
    entry_from_stat,
    iter_directory_entries,
)

__all__ = [
    "DIRECTORY_MARKER",
    "DirectoryEntry",
    "NANOSECONDS_PER_SECOND",
    "elapsed_seconds",
    "entry_from_stat",
    "iter_directory_entries",
]
