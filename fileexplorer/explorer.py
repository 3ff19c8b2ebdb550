"""Stateful file explorer: current path, file operations, and the menu loop.

Every operation is a thin pass-through to the host filesystem. Any ``OSError``
raised by an operation propagates out of ``Explorer.run`` and ends the
session; only unparsable menu answers are recovered locally.
"""

from __future__ import annotations

import logging
import shutil
import time
from collections.abc import Callable
from pathlib import Path

from .console import Console
from .directory_model import elapsed_seconds, iter_directory_entries
from .menu import (
    CHANGE_DIRECTORY,
    CHOICE_PROMPT,
    COPY_DESTINATION_PROMPT,
    COPY_FILE,
    COPY_SOURCE_PROMPT,
    CREATE_FILE,
    CREATE_PROMPT,
    DELETE_FILE,
    DELETE_PROMPT,
    DIRECTORY_PROMPT,
    EXIT,
    INVALID_CHOICE_MESSAGE,
    LIST_DIRECTORY,
    MENU_ITEMS,
    NAVIGATE_UP,
    MenuBinding,
    MenuRegistry,
    parse_choice,
)
from .render import (
    PLAIN_THEME,
    SECTION_DIVIDER,
    ListingTheme,
    current_directory_line,
    divider_line,
    format_entry_row,
    listing_header_lines,
    menu_lines,
    quote_path,
    status_line,
)

logger = logging.getLogger(__name__)

COPY_CHUNK_BYTES = 1024 * 1024


class Explorer:
    """Interactive explorer positioned at ``current_path``."""

    def __init__(
        self,
        current_path: Path | None = None,
        console: Console | None = None,
        theme: ListingTheme = PLAIN_THEME,
        clock_ns: Callable[[], int] = time.time_ns,
    ) -> None:
        self.current_path = Path(current_path) if current_path is not None else Path.cwd()
        self.console = console if console is not None else Console()
        self.theme = theme
        self._clock_ns = clock_ns
        self._menu = MenuRegistry().register_bindings(
            MenuBinding(CHANGE_DIRECTORY, self._handle_change_directory),
            MenuBinding(COPY_FILE, self._handle_copy_file),
            MenuBinding(DELETE_FILE, self._handle_delete_file),
            MenuBinding(CREATE_FILE, self._handle_create_file),
            MenuBinding(NAVIGATE_UP, self._handle_navigate_up),
            MenuBinding(LIST_DIRECTORY, self._handle_list_directory),
            MenuBinding(EXIT, self._handle_exit),
        )

    def current_directory(self) -> Path:
        return self.current_path

    def list_directory_with_properties(self) -> None:
        """Write one listing of the current path.

        ``now`` is sampled once before the scan. Rows are written as entries
        are read, so a metadata failure part-way leaves earlier rows written
        and raises.
        """
        logger.debug("listing %s", self.current_path)
        self.console.write_lines(listing_header_lines(self.theme))
        now_ns = self._clock_ns()
        for entry in iter_directory_entries(self.current_path):
            elapsed = elapsed_seconds(entry.mtime_ns, now_ns)
            self.console.write_line(format_entry_row(entry, elapsed, self.theme))

    def copy_file(self, source: Path, destination: Path) -> None:
        """Stream ``source`` into ``destination``, creating or truncating it.

        The source is opened first so a missing source never truncates the
        destination. Permissions and timestamps are not copied.
        """
        logger.debug("copy %s -> %s", source, destination)
        with open(source, "rb") as src:
            with open(destination, "wb") as dst:
                shutil.copyfileobj(src, dst, COPY_CHUNK_BYTES)
        self.console.write_line(status_line("File copied successfully.", self.theme))

    def delete_file(self, path: Path) -> None:
        logger.debug("delete %s", path)
        Path(path).unlink()
        self.console.write_line(status_line("File deleted successfully.", self.theme))

    def create_file(self, path: Path) -> None:
        logger.debug("create %s", path)
        with open(path, "wb"):
            pass
        self.console.write_line(status_line("File created successfully.", self.theme))

    def change_directory(self, segment: str) -> None:
        """Join ``segment`` onto the current path without checking it exists."""
        self.current_path = self.current_path / segment.strip()
        logger.info("changed directory to %s", self.current_path)

    def navigate_up(self) -> None:
        parent = self.current_path.parent
        if parent == self.current_path:
            self.console.write_line("Already at the root directory.")
            return
        self.current_path = parent
        logger.info("navigated up to %s", self.current_path)
        self.console.write_line(f"Navigated up to: {quote_path(self.current_path)}")

    def resolve_user_path(self, answer: str) -> Path:
        return self.current_path / answer.strip()

    def _ask(self, label: str) -> str:
        answer = self.console.prompt(label)
        return "" if answer is None else answer.strip()

    def _handle_change_directory(self) -> bool:
        self.change_directory(self._ask(DIRECTORY_PROMPT))
        return False

    def _handle_copy_file(self) -> bool:
        source = self._ask(COPY_SOURCE_PROMPT)
        destination = self._ask(COPY_DESTINATION_PROMPT)
        self.copy_file(self.resolve_user_path(source), self.resolve_user_path(destination))
        return False

    def _handle_delete_file(self) -> bool:
        self.delete_file(self.resolve_user_path(self._ask(DELETE_PROMPT)))
        return False

    def _handle_create_file(self) -> bool:
        self.create_file(self.resolve_user_path(self._ask(CREATE_PROMPT)))
        return False

    def _handle_navigate_up(self) -> bool:
        self.navigate_up()
        return False

    def _handle_list_directory(self) -> bool:
        self.console.write_line("Listing Directory with Properties:")
        self.list_directory_with_properties()
        return False

    def _handle_exit(self) -> bool:
        self.console.write_line("Exiting...")
        return True

    def _write_screen(self) -> None:
        self.console.write_line(current_directory_line(self.current_path, self.theme))
        self.console.write_line(divider_line(SECTION_DIVIDER, self.theme))
        self.list_directory_with_properties()
        self.console.write_line(divider_line(SECTION_DIVIDER, self.theme))
        self.console.write_lines(menu_lines(MENU_ITEMS, self.theme))

    def run(self) -> None:
        """Run the menu loop until Exit or end of input.

        Unparsable or unknown choices are reported and the loop continues.
        Listing and operation failures propagate.
        """
        logger.info("session started at %s", self.current_path)
        while True:
            self._write_screen()
            answer = self.console.prompt(CHOICE_PROMPT)
            if answer is None:
                logger.info("end of input; leaving session")
                return

            choice = parse_choice(answer)
            if choice is None:
                self.console.write_line(INVALID_CHOICE_MESSAGE)
                continue

            outcome = self._menu.dispatch(choice)
            if outcome is None:
                self.console.write_line(INVALID_CHOICE_MESSAGE)
                continue
            if outcome:
                logger.info("session ended at %s", self.current_path)
                return
