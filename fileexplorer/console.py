"""Line-oriented console I/O for the interactive session.

Wraps an input and an output text stream so the menu loop can be driven by
scripted input in tests and by the real terminal in the CLI.
"""

from __future__ import annotations

import errno
import sys
from typing import TextIO


class Console:
    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def write_line(self, text: str = "") -> None:
        self.stdout.write(text + "\n")

    def write_lines(self, lines: list[str]) -> None:
        for line in lines:
            self.write_line(line)

    def read_line(self) -> str | None:
        """Read one line without its line terminator; ``None`` at end of input.

        Input that cannot be decoded raises ``OSError`` (``EILSEQ``) like any
        other console read failure.
        """
        try:
            line = self.stdin.readline()
        except UnicodeDecodeError as exc:
            raise OSError(errno.EILSEQ, f"invalid input encoding: {exc}") from exc
        if line == "":
            return None
        return line.rstrip("\r\n")

    def prompt(self, label: str) -> str | None:
        """Write ``"<label> "`` without a newline, flush, and read the answer."""
        self.stdout.write(f"{label} ")
        self.stdout.flush()
        return self.read_line()

    def is_interactive(self) -> bool:
        isatty = getattr(self.stdout, "isatty", None)
        if isatty is None:
            return False
        try:
            return bool(isatty())
        except ValueError:
            return False
