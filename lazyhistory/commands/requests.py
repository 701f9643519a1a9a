"""Typed command requests.

Each command accepts exactly one request type; delegation between commands
builds the target's request and hands it to the dispatcher.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union

from ..git.models import GitCommit, GitLog, GitRemote
from ..remotes import RemoteResource
from ..ui.picker import CommandQuickPickItem


@dataclass(frozen=True)
class OpenBranchesInRemoteRequest:
    uri: Path | None = None
    remote: str | None = None


@dataclass(frozen=True)
class OpenInRemoteRequest:
    """Open ``resource`` on one of ``remotes`` (all with a known provider)."""

    resource: RemoteResource
    remotes: tuple[GitRemote, ...] = ()
    uri: Path | None = None
    remote: str | None = None
    go_back: CommandQuickPickItem | None = None


@dataclass(frozen=True)
class ShowQuickBranchHistoryRequest:
    """Branch history picker arguments.

    ``rev`` is the revision the active document is viewed at and takes
    precedence over ``branch`` as the log start. ``max_count`` of ``None``
    uses the configured quick-history size; ``0`` is unbounded.
    """

    uri: Path | None = None
    branch: str | None = None
    rev: str | None = None
    log: GitLog | None = None
    max_count: int | None = None
    go_back: CommandQuickPickItem | None = None
    next_page: CommandQuickPickItem | None = None


@dataclass(frozen=True)
class ShowQuickCommitDetailsRequest:
    sha: str
    uri: Path | None = None
    commit: GitCommit | None = None
    repo_log: GitLog | None = None
    go_back: CommandQuickPickItem | None = None


@dataclass(frozen=True)
class ShowCommitsExplorerRequest:
    uri: Path | None = None
    branch: str | None = None
    max_count: int | None = None
    show_all: bool = False


CommandRequest = Union[
    OpenBranchesInRemoteRequest,
    OpenInRemoteRequest,
    ShowQuickBranchHistoryRequest,
    ShowQuickCommitDetailsRequest,
    ShowCommitsExplorerRequest,
]

COMMAND_IDS: dict[type, str] = {
    OpenBranchesInRemoteRequest: "open_branches_in_remote",
    OpenInRemoteRequest: "open_in_remote",
    ShowQuickBranchHistoryRequest: "show_quick_branch_history",
    ShowQuickCommitDetailsRequest: "show_quick_commit_details",
    ShowCommitsExplorerRequest: "show_commits_explorer",
}


__all__ = [
    "OpenBranchesInRemoteRequest",
    "OpenInRemoteRequest",
    "ShowQuickBranchHistoryRequest",
    "ShowQuickCommitDetailsRequest",
    "ShowCommitsExplorerRequest",
    "CommandRequest",
    "COMMAND_IDS",
]
