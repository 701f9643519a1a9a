"""Shared command plumbing: dependencies, document resolution, error boundary.

``ActiveEditorCommand.run`` is the terminal error boundary of every command:
any exception raised while executing is logged with the command's name,
reported as a generic notification, and turned into a failed outcome.
"""

from __future__ import annotations

import sys
import webbrowser
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from ..config import HistorySettings
from ..git.resolver import RepositoryResolver
from ..git.service import GitService
from ..logging_config import log_error, log_file_path
from ..ui.notifier import UserNotifier
from ..ui.picker import Picker
from ..ui_theme import DEFAULT_THEME, UITheme
from .outcome import CommandOutcome

if TYPE_CHECKING:
    from .dispatcher import CommandDispatcher


def _write_stdout(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


@dataclass(frozen=True)
class CommandDeps:
    """Collaborators injected into every command.

    ``active_document`` is the path the user is looking at; commands given
    no explicit path act on it.
    """

    git: GitService
    resolver: RepositoryResolver
    picker: Picker
    notifier: UserNotifier
    dispatcher: CommandDispatcher
    settings: HistorySettings = field(default_factory=HistorySettings)
    active_document: Path | None = None
    theme: UITheme = DEFAULT_THEME
    style: str = "monokai"
    no_color: bool = False
    interruptible: bool = False
    open_url: Callable[[str], object] = webbrowser.open
    write_output: Callable[[str], None] = _write_stdout


def get_command_uri(uri: Path | None, active_document: Path | None) -> Path | None:
    return uri if uri is not None else active_document


def show_no_repository_warning(notifier: UserNotifier, message: str) -> None:
    notifier.warn(f"{message}. No repository could be found")


class ActiveEditorCommand:
    """Command acting on an explicit path or the active document."""

    command_id: ClassVar[str] = ""
    error_message: ClassVar[str] = "Unable to run command"

    def __init__(self, deps: CommandDeps) -> None:
        self.deps = deps

    def command_uri(self, uri: Path | None) -> Path | None:
        return get_command_uri(uri, self.deps.active_document)

    async def run(self, request) -> CommandOutcome:
        try:
            return await self.execute(request)
        except Exception as exc:
            log_error(exc, type(self).__name__)
            self.deps.notifier.error(f"{self.error_message}. See {log_file_path()} for more details")
            return CommandOutcome.failed(exc)

    async def execute(self, request) -> CommandOutcome:
        raise NotImplementedError


__all__ = [
    "CommandDeps",
    "ActiveEditorCommand",
    "get_command_uri",
    "show_no_repository_warning",
]
