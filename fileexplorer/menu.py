"""Menu items, choice parsing, and the choice-to-handler dispatch table."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

CHANGE_DIRECTORY = 1
COPY_FILE = 2
DELETE_FILE = 3
CREATE_FILE = 4
NAVIGATE_UP = 5
LIST_DIRECTORY = 6
EXIT = 7

MENU_ITEMS: tuple[tuple[int, str], ...] = (
    (CHANGE_DIRECTORY, "Change Directory"),
    (COPY_FILE, "Copy File"),
    (DELETE_FILE, "Delete File"),
    (CREATE_FILE, "Create New File"),
    (NAVIGATE_UP, "Navigate Up"),
    (LIST_DIRECTORY, "List Directory with Properties"),
    (EXIT, "Exit"),
)

CHOICE_PROMPT = "Enter choice:"
DIRECTORY_PROMPT = "Enter directory name:"
COPY_SOURCE_PROMPT = "Enter source file:"
COPY_DESTINATION_PROMPT = "Enter destination file:"
DELETE_PROMPT = "Enter file to delete:"
CREATE_PROMPT = "Enter new file name:"

INVALID_CHOICE_MESSAGE = "Invalid choice. Try again."

_CHOICE_RE = re.compile(r"\+?[0-9]+")


def parse_choice(text: str) -> int | None:
    """Parse a menu answer as an unsigned integer.

    Surrounding whitespace is ignored. Signs other than a leading ``+``,
    underscores, and non-ASCII digits are rejected.
    """
    candidate = text.strip()
    if _CHOICE_RE.fullmatch(candidate) is None:
        return None
    return int(candidate)


@dataclass(frozen=True)
class MenuBinding:
    """Mapping from one menu number to the action it runs.

    Handlers return ``True`` to end the session.
    """

    choice: int
    handler: Callable[[], bool]


class MenuRegistry:
    """Small choice-dispatch table."""

    def __init__(self) -> None:
        self._handlers: dict[int, Callable[[], bool]] = {}

    def register_binding(self, binding: MenuBinding) -> MenuRegistry:
        self._handlers[binding.choice] = binding.handler
        return self

    def register_bindings(self, *bindings: MenuBinding) -> MenuRegistry:
        for binding in bindings:
            self.register_binding(binding)
        return self

    def dispatch(self, choice: int) -> bool | None:
        """Run the handler bound to ``choice``; ``None`` when nothing is bound."""
        handler = self._handlers.get(choice)
        if handler is None:
            return None
        return bool(handler())


__all__ = [
    "CHANGE_DIRECTORY",
    "COPY_FILE",
    "DELETE_FILE",
    "CREATE_FILE",
    "NAVIGATE_UP",
    "LIST_DIRECTORY",
    "EXIT",
    "MENU_ITEMS",
    "CHOICE_PROMPT",
    "DIRECTORY_PROMPT",
    "COPY_SOURCE_PROMPT",
    "COPY_DESTINATION_PROMPT",
    "DELETE_PROMPT",
    "CREATE_PROMPT",
    "INVALID_CHOICE_MESSAGE",
    "parse_choice",
    "MenuBinding",
    "MenuRegistry",
]
