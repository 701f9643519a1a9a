"""Pick a branch, browse its history, and drill into a commit."""

from __future__ import annotations

from dataclasses import replace

from ..ui.picker import BranchQuickPickItem, CommandQuickPickItem, CommitQuickPickItem
from ..ui.quick_picks import ELLIPSIS, BranchesQuickPick, BranchHistoryQuickPick, go_back_item
from .base import ActiveEditorCommand, show_no_repository_warning
from .outcome import NO_REPOSITORY, NO_RESULTS, CommandOutcome
from .requests import ShowQuickBranchHistoryRequest, ShowQuickCommitDetailsRequest


class ShowQuickBranchHistoryCommand(ActiveEditorCommand):
    command_id = "show_quick_branch_history"
    error_message = "Unable to show branch history"

    async def execute(self, request: ShowQuickBranchHistoryRequest) -> CommandOutcome:
        deps = self.deps
        uri = self.command_uri(request.uri)
        max_count = request.max_count if request.max_count is not None else deps.settings.max_quick_history
        branch = request.branch
        log = request.log

        progress = None
        if branch is not None:
            progress = BranchHistoryQuickPick.show_progress(branch, deps.notifier, bind_interrupt=deps.interruptible)
        try:
            repo_path = await deps.resolver.resolve(uri)
            if repo_path is None:
                show_no_repository_warning(deps.notifier, "Unable to show branch history")
                return CommandOutcome.cancelled(NO_REPOSITORY)

            if branch is None:
                branches = await deps.git.get_branches(repo_path)
                pick = await BranchesQuickPick.show(deps.picker, branches, f"Show history for branch{ELLIPSIS}")
                if pick is None:
                    return CommandOutcome.cancelled()
                if isinstance(pick, CommandQuickPickItem):
                    return await pick.execute(deps.dispatcher)
                if not isinstance(pick, BranchQuickPickItem) or pick.branch is None:
                    return CommandOutcome.cancelled()

                branch = pick.branch.name
                progress = BranchHistoryQuickPick.show_progress(
                    branch, deps.notifier, bind_interrupt=deps.interruptible
                )

            if log is None:
                log = await deps.git.get_log_for_repo(repo_path, request.rev or branch, max_count)
                if log is None:
                    deps.notifier.warn("Unable to show branch history")
                    return CommandOutcome.cancelled(NO_RESULTS)

            if progress is not None and progress.token.is_cancellation_requested:
                return CommandOutcome.cancelled()

            current = replace(request, uri=uri, branch=branch, log=log, max_count=max_count)
            pick = await BranchHistoryQuickPick.show(
                deps.picker,
                log,
                branch,
                progress,
                current,
                deps.settings.max_quick_history,
                go_back=request.go_back,
                next_page=request.next_page,
            )
            if pick is None:
                return CommandOutcome.cancelled()
            if isinstance(pick, CommandQuickPickItem):
                return await pick.execute(deps.dispatcher)
            if not isinstance(pick, CommitQuickPickItem) or pick.commit is None:
                return CommandOutcome.cancelled()

            # Lets the details view return to this exact history listing.
            back_here = go_back_item(f"{branch} history", current)
            return await deps.dispatcher.invoke(
                ShowQuickCommitDetailsRequest(
                    sha=pick.commit.sha,
                    uri=uri,
                    commit=pick.commit,
                    repo_log=log,
                    go_back=back_here,
                )
            )
        finally:
            if progress is not None:
                progress.dispose()


__all__ = ["ShowQuickBranchHistoryCommand"]
