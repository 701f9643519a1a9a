"""Application wiring for one CLI invocation.

Builds the git service, resolver, picker, notifier, and dispatcher from
settings, registers every command, and runs one request on an event loop.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from .commands import CommandDeps, CommandDispatcher, CommandOutcome, CommandRequest, register_commands
from .config import HistorySettings, load_settings
from .git import GitService, RepositoryResolver
from .logging_config import flush_logs
from .ui import TerminalNotifier, TerminalPicker
from .ui_theme import resolve_theme


def _split_document(path: Path | None) -> tuple[Path, Path | None]:
    """Return ``(workspace_root, active_document)`` for a CLI path argument."""
    if path is None:
        return Path.cwd(), None
    resolved = path.expanduser().resolve()
    workspace = resolved if resolved.is_dir() else resolved.parent
    return workspace, resolved


def build_deps(
    path: Path | None = None,
    *,
    settings: HistorySettings | None = None,
    theme_name: str | None = None,
    no_color: bool = False,
    style: str = "monokai",
    interruptible: bool = True,
) -> CommandDeps:
    """Compose collaborators and register commands on a fresh dispatcher."""
    if settings is None:
        settings = load_settings()
    theme = resolve_theme(theme_name or settings.theme, no_color=no_color)
    workspace_root, active_document = _split_document(path)
    deps = CommandDeps(
        git=GitService(settings),
        resolver=RepositoryResolver(workspace_root),
        picker=TerminalPicker(theme=theme),
        notifier=TerminalNotifier(theme=theme),
        dispatcher=CommandDispatcher(),
        settings=settings,
        active_document=active_document,
        theme=theme,
        style=style,
        no_color=no_color,
        interruptible=interruptible,
    )
    register_commands(deps)
    return deps


def run_request(deps: CommandDeps, request: CommandRequest) -> CommandOutcome:
    """Dispatch ``request`` on a new event loop and flush logs afterwards."""
    try:
        return asyncio.run(deps.dispatcher.invoke(request))
    finally:
        flush_logs()


__all__ = ["build_deps", "run_request"]
