"""Text rendering for listings, menus, and status lines.

Layout is fixed-width plain text; color is an optional layer applied after
padding so styled and plain output line up column for column. Styles are
``pygments.console.ansiformat`` attribute strings.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from pygments.console import ansiformat

from .directory_model import DirectoryEntry

NAME_WIDTH = 25
SIZE_WIDTH = 15
SECTION_DIVIDER = "-" * 29
LISTING_DIVIDER = "-" * 60

_NAME_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f-\x9f]")


@dataclass(frozen=True)
class ListingTheme:
    """Semantic style attributes used by the renderers.

    Empty strings mean "no styling" for that role.
    """

    name: str
    heading: str
    divider: str
    directory: str
    size: str
    status: str
    menu_key: str

    def style(self, attr: str, text: str) -> str:
        if not attr:
            return text
        return ansiformat(attr, text)


PLAIN_THEME = ListingTheme(
    name="plain",
    heading="",
    divider="",
    directory="",
    size="",
    status="",
    menu_key="",
)

DEFAULT_THEME = ListingTheme(
    name="default",
    heading="bold",
    divider="faint",
    directory="*blue*",
    size="cyan",
    status="green",
    menu_key="yellow",
)


def resolve_theme(no_color: bool) -> ListingTheme:
    """Return the plain theme when color is disabled, else the default palette."""
    return PLAIN_THEME if no_color else DEFAULT_THEME


def printable_name(name: str) -> str:
    """Make a filesystem name safe to print on one terminal row.

    Undecodable bytes (surrogate escapes) become U+FFFD and control
    characters, newlines included, are shown as ``\\xNN``.
    """
    text = name.encode("utf-8", "surrogateescape").decode("utf-8", "replace")
    return _NAME_CONTROL_RE.sub(lambda match: f"\\x{ord(match.group(0)):02x}", text)


def quote_path(path: Path) -> str:
    """Return ``path`` in double quotes with ``\\`` and ``"`` backslash-escaped."""
    text = str(path).replace("\\", "\\\\").replace('"', '\\"')
    return f'"{printable_name(text)}"'


def current_directory_line(path: Path, theme: ListingTheme = PLAIN_THEME) -> str:
    return theme.style(theme.heading, "Current Directory:") + " " + quote_path(path)


def divider_line(divider: str, theme: ListingTheme = PLAIN_THEME) -> str:
    return theme.style(theme.divider, divider)


def listing_header_lines(theme: ListingTheme = PLAIN_THEME) -> list[str]:
    """Return the column header row and the divider under it."""
    header = f"{'File/Directory':<{NAME_WIDTH}} {'Size (bytes)':<{SIZE_WIDTH}} Last Modified"
    return [theme.style(theme.heading, header), divider_line(LISTING_DIVIDER, theme)]


def format_entry_row(entry: DirectoryEntry, elapsed: int, theme: ListingTheme = PLAIN_THEME) -> str:
    """Format one listing row: padded name, padded size-or-marker, elapsed seconds."""
    name_cell = f"{printable_name(entry.name):<{NAME_WIDTH}}"
    size_cell = f"{entry.size_label:<{SIZE_WIDTH}}"
    if not entry.is_file:
        name_cell = theme.style(theme.directory, name_cell)
    else:
        size_cell = theme.style(theme.size, size_cell)
    return f"{name_cell} {size_cell} {max(0, elapsed)} seconds ago"


def menu_lines(items: Iterable[tuple[int, str]], theme: ListingTheme = PLAIN_THEME) -> list[str]:
    """Render the numbered options block."""
    lines = [theme.style(theme.heading, "Options:")]
    for number, label in items:
        lines.append(f"  {theme.style(theme.menu_key, f'{number}.')} {label}")
    return lines


def status_line(message: str, theme: ListingTheme = PLAIN_THEME) -> str:
    return theme.style(theme.status, message)


__all__ = [
    "NAME_WIDTH",
    "SIZE_WIDTH",
    "SECTION_DIVIDER",
    "LISTING_DIVIDER",
    "ListingTheme",
    "PLAIN_THEME",
    "DEFAULT_THEME",
    "resolve_theme",
    "printable_name",
    "quote_path",
    "current_directory_line",
    "divider_line",
    "listing_header_lines",
    "format_entry_row",
    "menu_lines",
    "status_line",
]
