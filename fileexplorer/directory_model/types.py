"""Domain datatypes for one directory listing."""

from __future__ import annotations

from dataclasses import dataclass

DIRECTORY_MARKER = "<DIR>"


@dataclass(frozen=True)
class DirectoryEntry:
    """One immediate child of a listed directory plus its stat metadata."""

    name: str
    is_file: bool
    size: int | None = None
    mtime_ns: int | None = None

    @property
    def size_label(self) -> str:
        """Byte count for regular files, ``<DIR>`` for every other kind."""
        if not self.is_file or self.size is None:
            return DIRECTORY_MARKER
        return str(self.size)


__all__ = [
    "DIRECTORY_MARKER",
    "DirectoryEntry",
]
