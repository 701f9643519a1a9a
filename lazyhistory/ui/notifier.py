"""User-facing notifications written to the terminal.

Notifications are single lines on stderr so they never mix with rendered
history on stdout. Warnings and errors are also recorded in the log file.
"""

from __future__ import annotations

import sys
from typing import Protocol, TextIO

from ..highlight import sanitize_terminal_text
from ..logging_config import log_info, log_warning
from ..ui_theme import DEFAULT_THEME, UITheme, paint


class UserNotifier(Protocol):
    def info(self, message: str) -> None: ...

    def warn(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def status(self, message: str) -> None: ...


class TerminalNotifier:
    """``UserNotifier`` printing themed lines to a text stream."""

    def __init__(self, stream: TextIO | None = None, theme: UITheme = DEFAULT_THEME) -> None:
        self.stream = stream if stream is not None else sys.stderr
        self.theme = theme

    def _write(self, color: str, prefix: str, message: str) -> None:
        text = sanitize_terminal_text(message)
        try:
            self.stream.write(paint(color, f"{prefix}{text}", self.theme) + "\n")
            self.stream.flush()
        except (OSError, ValueError):
            # Closed or broken stderr; the log file still has the message.
            pass

    def info(self, message: str) -> None:
        log_info(message)
        self._write(self.theme.notify_info, "", message)

    def warn(self, message: str) -> None:
        log_warning(message)
        self._write(self.theme.notify_warning, "warning: ", message)

    def error(self, message: str) -> None:
        self._write(self.theme.notify_error, "error: ", message)

    def status(self, message: str) -> None:
        self._write(self.theme.dim, "", message)


__all__ = ["UserNotifier", "TerminalNotifier"]
