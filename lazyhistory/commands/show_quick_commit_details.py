"""Commit details picker: show the patch, open the commit remotely, or go back."""

from __future__ import annotations

from ..highlight import colorize_patch
from ..remotes import CommitResource
from ..ui.picker import ActionQuickPickItem, CommandQuickPickItem
from ..ui.quick_picks import SHOW_CHANGES_ACTION, CommitDetailsQuickPick, go_back_item
from .base import ActiveEditorCommand, show_no_repository_warning
from .outcome import NO_REPOSITORY, NO_RESULTS, CommandOutcome
from .requests import OpenInRemoteRequest, ShowQuickCommitDetailsRequest


class ShowQuickCommitDetailsCommand(ActiveEditorCommand):
    command_id = "show_quick_commit_details"
    error_message = "Unable to show commit details"

    async def execute(self, request: ShowQuickCommitDetailsRequest) -> CommandOutcome:
        deps = self.deps
        commit = request.commit
        if commit is not None:
            repo_path = commit.repo_path
        else:
            repo_path = await deps.resolver.resolve(self.command_uri(request.uri))
            if repo_path is None:
                show_no_repository_warning(deps.notifier, "Unable to show commit details")
                return CommandOutcome.cancelled(NO_REPOSITORY)
            commit = await deps.git.get_commit(repo_path, request.sha)
            if commit is None:
                deps.notifier.warn(f"Unable to show commit details. Commit {request.sha} was not found")
                return CommandOutcome.cancelled(NO_RESULTS)

        remotes = tuple(remote for remote in await deps.git.get_remotes(repo_path) if remote.has_provider)
        open_in_remote = None
        if remotes:
            open_in_remote = CommandQuickPickItem(
                label="Open Commit in Remote",
                description=", ".join(remote.name for remote in remotes),
                request=OpenInRemoteRequest(
                    resource=CommitResource(commit.sha),
                    remotes=remotes,
                    uri=request.uri,
                    go_back=go_back_item(f"commit {commit.short_sha}", request),
                ),
            )

        pick = await CommitDetailsQuickPick.show(
            deps.picker,
            commit,
            open_in_remote=open_in_remote,
            go_back=request.go_back,
        )
        if pick is None:
            return CommandOutcome.cancelled()
        if isinstance(pick, CommandQuickPickItem):
            return await pick.execute(deps.dispatcher)
        if isinstance(pick, ActionQuickPickItem) and pick.action == SHOW_CHANGES_ACTION:
            patch = await deps.git.get_commit_patch(repo_path, commit.sha)
            deps.write_output(colorize_patch(patch, deps.style, deps.no_color))
            return CommandOutcome.completed(commit)
        return CommandOutcome.cancelled()


__all__ = ["ShowQuickCommitDetailsCommand"]
