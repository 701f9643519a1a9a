"""History commands, their typed requests, and the dispatcher that links them."""

from __future__ import annotations

from .base import ActiveEditorCommand, CommandDeps
from .dispatcher import CommandDispatcher
from .open_branches_in_remote import OpenBranchesInRemoteCommand
from .open_in_remote import OpenInRemoteCommand
from .outcome import CommandOutcome, OutcomeKind
from .requests import (
    COMMAND_IDS,
    CommandRequest,
    OpenBranchesInRemoteRequest,
    OpenInRemoteRequest,
    ShowCommitsExplorerRequest,
    ShowQuickBranchHistoryRequest,
    ShowQuickCommitDetailsRequest,
)
from .show_commits_explorer import ShowCommitsExplorerCommand
from .show_quick_branch_history import ShowQuickBranchHistoryCommand
from .show_quick_commit_details import ShowQuickCommitDetailsCommand

COMMANDS: tuple[tuple[type, type[ActiveEditorCommand]], ...] = (
    (OpenBranchesInRemoteRequest, OpenBranchesInRemoteCommand),
    (OpenInRemoteRequest, OpenInRemoteCommand),
    (ShowQuickBranchHistoryRequest, ShowQuickBranchHistoryCommand),
    (ShowQuickCommitDetailsRequest, ShowQuickCommitDetailsCommand),
    (ShowCommitsExplorerRequest, ShowCommitsExplorerCommand),
)


def register_commands(deps: CommandDeps) -> CommandDispatcher:
    """Instantiate every command with ``deps`` and register it on ``deps.dispatcher``."""
    for request_type, command_cls in COMMANDS:
        deps.dispatcher.register(request_type, command_cls(deps))
    return deps.dispatcher


__all__ = [
    "ActiveEditorCommand",
    "COMMANDS",
    "COMMAND_IDS",
    "CommandDeps",
    "CommandDispatcher",
    "CommandOutcome",
    "CommandRequest",
    "OutcomeKind",
    "OpenBranchesInRemoteCommand",
    "OpenBranchesInRemoteRequest",
    "OpenInRemoteCommand",
    "OpenInRemoteRequest",
    "ShowCommitsExplorerCommand",
    "ShowCommitsExplorerRequest",
    "ShowQuickBranchHistoryCommand",
    "ShowQuickBranchHistoryRequest",
    "ShowQuickCommitDetailsCommand",
    "ShowQuickCommitDetailsRequest",
    "register_commands",
]
