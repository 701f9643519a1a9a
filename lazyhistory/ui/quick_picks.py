"""Item builders for the branch, history, remote, and commit-details pickers."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace
from typing import TYPE_CHECKING

from ..git.models import GitBranch, GitCommit, GitLog, GitRemote
from ..remotes import RemoteResource
from .notifier import UserNotifier
from .picker import (
    ActionQuickPickItem,
    BranchQuickPickItem,
    CommandQuickPickItem,
    CommitQuickPickItem,
    Picker,
    QuickPickItem,
    RemoteQuickPickItem,
)
from .progress import CancellationTokenSource, show_progress

if TYPE_CHECKING:
    from ..commands.requests import ShowQuickBranchHistoryRequest

ELLIPSIS = "…"
ARROW_BACK = "↩"

SHOW_CHANGES_ACTION = "show-changes"


def commit_item(commit: GitCommit) -> CommitQuickPickItem:
    return CommitQuickPickItem(
        label=f"{commit.short_sha}  {commit.subject}",
        description=f"{commit.author}, {commit.date:%Y-%m-%d %H:%M}",
        commit=commit,
    )


def branch_item(branch: GitBranch) -> BranchQuickPickItem:
    label = f"* {branch.name}" if branch.current else branch.name
    description = ""
    if branch.upstream:
        description = f"⇄ {branch.upstream}"
    elif branch.is_remote:
        description = "remote"
    return BranchQuickPickItem(label=label, description=description, branch=branch)


def go_back_item(description: str, request) -> CommandQuickPickItem:
    return CommandQuickPickItem(label=f"go back {ARROW_BACK}", description=f"to {description}", request=request)


class BranchesQuickPick:
    @staticmethod
    async def show(
        picker: Picker,
        branches: Sequence[GitBranch],
        placeholder: str,
        go_back: CommandQuickPickItem | None = None,
    ) -> QuickPickItem | None:
        items: list[QuickPickItem] = []
        if go_back is not None:
            items.append(go_back)
        items.extend(branch_item(branch) for branch in branches)
        return await picker.choose(items, placeholder)


class BranchHistoryQuickPick:
    @staticmethod
    def show_progress(branch: str, notifier: UserNotifier, *, bind_interrupt: bool = False) -> CancellationTokenSource:
        return show_progress(f"Loading history for {branch}{ELLIPSIS}", notifier, bind_interrupt=bind_interrupt)

    @staticmethod
    def build_items(
        log: GitLog,
        current: ShowQuickBranchHistoryRequest,
        page_size: int,
        go_back: CommandQuickPickItem | None = None,
        next_page: CommandQuickPickItem | None = None,
    ) -> list[QuickPickItem]:
        """Go-back, show-all, and paging escapes first, then one item per commit.

        Paging items re-run the branch history with ``log`` cleared so the
        command fetches again at the new ``max_count``.
        """
        items: list[QuickPickItem] = []
        if go_back is not None:
            items.append(go_back)

        if log.truncated:
            items.append(
                CommandQuickPickItem(
                    label="Show All Commits",
                    description="this may take a while",
                    request=replace(current, log=None, max_count=0, next_page=None),
                )
            )
            if next_page is None and page_size > 0 and log.max_count:
                next_page = CommandQuickPickItem(
                    label="Show More Commits",
                    description=f"{log.max_count + page_size} most recent",
                    request=replace(current, log=None, max_count=log.max_count + page_size, next_page=None),
                )
        if next_page is not None:
            items.append(next_page)

        items.extend(commit_item(commit) for commit in log.commits)
        return items

    @staticmethod
    async def show(
        picker: Picker,
        log: GitLog,
        branch: str,
        progress: CancellationTokenSource | None,
        current: ShowQuickBranchHistoryRequest,
        page_size: int,
        go_back: CommandQuickPickItem | None = None,
        next_page: CommandQuickPickItem | None = None,
    ) -> QuickPickItem | None:
        items = BranchHistoryQuickPick.build_items(log, current, page_size, go_back=go_back, next_page=next_page)
        if progress is not None:
            if progress.token.is_cancellation_requested:
                return None
            progress.dispose()
        count = f"{log.count}+" if log.truncated else f"{log.count}"
        return await picker.choose(items, f"{branch} history {ELLIPSIS} {count} commits")


class RemotesQuickPick:
    @staticmethod
    async def show(
        picker: Picker,
        remotes: Sequence[GitRemote],
        resource: RemoteResource,
        placeholder: str,
        go_back: CommandQuickPickItem | None = None,
    ) -> QuickPickItem | None:
        items: list[QuickPickItem] = []
        if go_back is not None:
            items.append(go_back)
        for remote in remotes:
            provider = remote.provider
            if provider is None:
                continue
            items.append(
                RemoteQuickPickItem(
                    label=f"Open in {provider.name}",
                    description=f"{remote.name}  {provider.url_for(resource)}",
                    remote=remote,
                )
            )
        return await picker.choose(items, placeholder)


class CommitDetailsQuickPick:
    @staticmethod
    async def show(
        picker: Picker,
        commit: GitCommit,
        open_in_remote: CommandQuickPickItem | None = None,
        go_back: CommandQuickPickItem | None = None,
    ) -> QuickPickItem | None:
        items: list[QuickPickItem] = []
        if go_back is not None:
            items.append(go_back)
        items.append(
            ActionQuickPickItem(
                label="Show Changes",
                description=f"patch of {commit.short_sha}",
                action=SHOW_CHANGES_ACTION,
            )
        )
        if open_in_remote is not None:
            items.append(open_in_remote)
        placeholder = f"{commit.short_sha} {ELLIPSIS} {commit.subject} ({commit.author})"
        return await picker.choose(items, placeholder)


__all__ = [
    "BranchesQuickPick",
    "BranchHistoryQuickPick",
    "RemotesQuickPick",
    "CommitDetailsQuickPick",
    "SHOW_CHANGES_ACTION",
    "commit_item",
    "branch_item",
    "go_back_item",
]
